"""Derive validation models and agent-facing JSON schemas from a field table."""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from typing import Annotated, Any, Optional
from urllib.parse import urlparse

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    TypeAdapter,
    ValidationError,
    create_model,
)

from tavily_tools.core.types.tool_config import Tool

from .errors import ConfigurationError, InputValidationError
from .fields import FieldSpec, ToolSpec


def _check_http_url(value: str) -> str:
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"{value!r} is not a valid http(s) URL")
    return value


HttpUrlStr = Annotated[str, AfterValidator(_check_http_url)]
NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def _constrained(field: FieldSpec) -> Any:
    constraints: dict[str, Any] = {}
    if field.ge is not None:
        constraints["ge"] = field.ge
    if field.le is not None:
        constraints["le"] = field.le
    if field.min_length is not None:
        constraints["min_length"] = field.min_length
    if not constraints:
        return field.annotation
    return Annotated[field.annotation, Field(**constraints)]


def _model_name(spec: ToolSpec, suffix: str) -> str:
    return f"Tavily{spec.kind.capitalize()}{suffix}"


@lru_cache(maxsize=None)
def build_input_model(spec: ToolSpec) -> type[BaseModel]:
    """Pydantic model for agent input: primary fields plus agent-overridable ones only."""
    definitions: dict[str, Any] = {}
    for field in spec.primary_fields:
        definitions[field.name] = (_constrained(field), Field(..., description=field.description))
    for field in spec.overridable_fields:
        definitions[field.name] = (
            Optional[_constrained(field)],
            Field(default=None, description=field.description),
        )
    return create_model(_model_name(spec, "Input"), __config__=ConfigDict(extra="forbid"), **definitions)


@lru_cache(maxsize=None)
def build_options_model(spec: ToolSpec) -> type[BaseModel]:
    """Pydantic model for construction-time developer options."""
    definitions: dict[str, Any] = {
        field.name: (Optional[_constrained(field)], Field(default=None, description=field.description))
        for field in spec.option_fields
    }
    return create_model(_model_name(spec, "Options"), __config__=ConfigDict(extra="forbid"), **definitions)


def build_parameters_schema(spec: ToolSpec) -> dict[str, Any]:
    properties: dict[str, Any] = {}
    for field in (*spec.primary_fields, *spec.overridable_fields):
        schema = TypeAdapter(_constrained(field)).json_schema()
        schema["description"] = field.description
        properties[field.name] = schema
    return {
        "type": "object",
        "properties": properties,
        "required": [field.name for field in spec.primary_fields],
        "additionalProperties": False,
    }


def build_tool_definition(spec: ToolSpec) -> Tool:
    return {
        "type": "function",
        "function": {
            "name": spec.name,
            "description": spec.description,
            "parameters": build_parameters_schema(spec),
        },
    }


def validate_call_input(spec: ToolSpec, arguments: Mapping[str, Any]) -> dict[str, Any]:
    """Validate agent arguments, returning only the values the agent actually supplied."""
    if not isinstance(arguments, Mapping):
        raise InputValidationError(
            f"Invalid input for {spec.name}: arguments must be an object, got {type(arguments).__name__}",
            tool_kind=spec.kind,
        )
    model = build_input_model(spec)
    try:
        validated = model.model_validate(dict(arguments))
    except ValidationError as exc:
        raise InputValidationError.from_validation_error(spec, exc) from exc
    return validated.model_dump(exclude_none=True)


def validate_options(spec: ToolSpec, options: Mapping[str, Any]) -> dict[str, Any]:
    """
    Normalize and validate developer options.

    Keys may use either the internal or the wire name. Unknown keys, keys for
    the primary argument and out-of-range values raise ConfigurationError.
    """
    normalized: dict[str, Any] = {}
    for key, value in options.items():
        name = spec.option_name(key)
        if name is None:
            raise ConfigurationError(f"Unknown option {key!r} for Tavily {spec.kind} tool", tool_kind=spec.kind)
        if name in normalized:
            raise ConfigurationError(f"Option {name!r} given twice for Tavily {spec.kind} tool", tool_kind=spec.kind)
        normalized[name] = value

    model = build_options_model(spec)
    try:
        validated = model.model_validate(normalized)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors(include_url=False)
        )
        raise ConfigurationError(
            f"Invalid Tavily {spec.kind} configuration: {problems}", tool_kind=spec.kind
        ) from exc
    return validated.model_dump(exclude_none=True)
