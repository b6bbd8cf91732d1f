"""Per-tool construction-time default helpers."""

from __future__ import annotations

from typing import Any

from tavily_tools.core.agent_tools.registry import get_tool_spec
from tavily_tools.core.agent_tools.schema import validate_options

from ..models import ToolsConfig
from ..utils import normalize_tool_kind


def get_tool_defaults(config: ToolsConfig, kind: str) -> dict[str, Any]:
    return config.tool_options(normalize_tool_kind(kind))


def set_tool_default(config: ToolsConfig, kind: str, option: str, value: Any) -> str:
    """
    Store a developer default for one tool kind.

    The option is validated against the tool's field table together with the
    existing defaults and stored under its wire name. Returns that name.
    """
    kind = normalize_tool_kind(kind)
    spec = get_tool_spec(kind)
    name = spec.option_name(option)
    if name is None:
        raise ValueError(f"unknown option {option!r} for the {kind} tool")
    wire = spec.field(name).wire

    options = {key: val for key, val in config.tool_options(kind).items() if spec.option_name(key) != name}
    options[wire] = value
    validate_options(spec, options)

    config.tools[kind] = options
    return wire


def unset_tool_default(config: ToolsConfig, kind: str, option: str) -> bool:
    kind = normalize_tool_kind(kind)
    spec = get_tool_spec(kind)
    name = spec.option_name(option)
    options = config.tool_options(kind)
    remaining = {key: val for key, val in options.items() if name is None or spec.option_name(key) != name}
    if name is None:
        remaining.pop(option, None)
    removed = len(remaining) != len(options)
    if remaining:
        config.tools[kind] = remaining
    else:
        config.tools.pop(kind, None)
    return removed


def reset_tool_defaults(config: ToolsConfig, kind: str) -> bool:
    return config.tools.pop(normalize_tool_kind(kind), None) is not None
