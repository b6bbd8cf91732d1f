"""Declarative field tables shared by validation, resolution and request building.

Each tool kind is described once as a :class:`ToolSpec`. The same table drives
the agent-facing input model, the developer option model, the precedence
resolver and the wire renaming, so the four stages cannot drift apart.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

UNSET: Any = object()
"""Marker for "no value at this layer"; distinct from ``None`` and ``False``."""


@dataclass(frozen=True)
class FieldSpec:
    """One named parameter of a tool kind."""

    name: str
    wire: str
    annotation: Any
    description: str
    default: Any = UNSET
    overridable: bool = False
    required: bool = False
    ge: float | None = None
    le: float | None = None
    min_length: int | None = None

    @property
    def has_default(self) -> bool:
        return self.default is not UNSET


@dataclass(frozen=True)
class ToolSpec:
    """A tool kind: its endpoint, agent-facing identity and field table."""

    kind: str
    name: str
    verb: str
    path: str
    description: str
    fields: tuple[FieldSpec, ...]

    def __post_init__(self) -> None:
        names = [field.name for field in self.fields]
        wires = [field.wire for field in self.fields]
        if len(set(names)) != len(names):
            raise ValueError(f"duplicate field names in {self.kind} tool table")
        if len(set(wires)) != len(wires):
            raise ValueError(f"duplicate wire names in {self.kind} tool table")

    @property
    def primary_fields(self) -> tuple[FieldSpec, ...]:
        return tuple(field for field in self.fields if field.required)

    @property
    def overridable_fields(self) -> tuple[FieldSpec, ...]:
        return tuple(field for field in self.fields if field.overridable and not field.required)

    @property
    def option_fields(self) -> tuple[FieldSpec, ...]:
        """Fields a developer may configure at construction time."""
        return tuple(field for field in self.fields if not field.required)

    @property
    def wire_names(self) -> dict[str, str]:
        return {field.name: field.wire for field in self.fields}

    def field(self, name: str) -> FieldSpec:
        for field in self.fields:
            if field.name == name:
                return field
        raise KeyError(name)

    def option_name(self, key: str) -> str | None:
        """Map a developer option key, given by internal or wire name, to the internal name."""
        for field in self.option_fields:
            if key in (field.name, field.wire):
                return field.name
        return None
