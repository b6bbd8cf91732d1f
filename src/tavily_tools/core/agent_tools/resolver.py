"""Precedence resolution between agent input, developer options and tool defaults."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .fields import UNSET, FieldSpec, ToolSpec


def is_set(value: Any) -> bool:
    """
    Return True when a layer definitively provides a value.

    ``None``, ``UNSET``, empty collections and blank strings count as absent.
    ``False`` and ``0`` are real values.
    """
    if value is None or value is UNSET:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return len(value) > 0
    return True


def resolve_field(field: FieldSpec, call_input: Mapping[str, Any], config: Mapping[str, Any]) -> Any:
    """
    Compute the effective value of one field.

    Args:
        field: The field being resolved.
        call_input: Validated per-call agent arguments.
        config: Validated construction-time developer options.

    Returns:
        The winning value, or ``UNSET`` when no layer provides one.
    """
    if field.required:
        value = call_input.get(field.name, UNSET)
        return UNSET if value is None else value

    if field.overridable:
        value = call_input.get(field.name, UNSET)
        if is_set(value):
            return value

    value = config.get(field.name, UNSET)
    if is_set(value):
        return value

    if field.has_default and is_set(field.default):
        return field.default
    return UNSET


def resolve_parameters(spec: ToolSpec, call_input: Mapping[str, Any], config: Mapping[str, Any]) -> dict[str, Any]:
    """Resolve every field of a tool kind; absent fields are left out of the result."""
    effective: dict[str, Any] = {}
    for field in spec.fields:
        value = resolve_field(field, call_input, config)
        if value is not UNSET:
            effective[field.name] = value
    return effective
