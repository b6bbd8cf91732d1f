"""Helpers for constructing Tavily API request payloads."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .fields import ToolSpec


@dataclass(frozen=True)
class PreparedRequest:
    """Container for a ready-to-dispatch Tavily request."""

    path: str
    payload: dict[str, Any]


def prepare_request(spec: ToolSpec, params: dict[str, Any]) -> PreparedRequest:
    wire_names = spec.wire_names
    payload: dict[str, Any] = {}
    for name, value in params.items():
        try:
            wire = wire_names[name]
        except KeyError:
            raise ValueError(f"No wire name for field {name!r} of the {spec.kind} tool") from None
        payload[wire] = _to_wire_value(value)

    return PreparedRequest(path=spec.path, payload=payload)


def _to_wire_value(value: Any) -> Any:
    if isinstance(value, (tuple, set, frozenset)):
        return list(value)
    return value
