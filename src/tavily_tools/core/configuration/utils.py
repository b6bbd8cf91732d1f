"""Normalization helpers shared by configuration services."""

from __future__ import annotations

from .constants import TOOL_KINDS, VERBOSITY_PRESETS

_VERBOSITY_ALIASES = {
    "warning": "quiet",
    "warn": "quiet",
    "info": "standard",
    "debug": "verbose",
}


def normalize_verbosity_label(value: str | None) -> str | None:
    if value is None:
        return None
    label = value.strip().lower()
    if not label:
        return None
    label = _VERBOSITY_ALIASES.get(label, label)
    return label if label in VERBOSITY_PRESETS else None


def normalize_tool_kind(value: str) -> str:
    kind = value.strip().lower()
    if kind not in TOOL_KINDS:
        raise ValueError(f"unknown tool kind {value!r}; expected one of {', '.join(TOOL_KINDS)}")
    return kind


def mask_secret(value: str | None) -> str:
    if not value:
        return "not set"
    if len(value) <= 8:
        return "*" * len(value)
    return f"{value[:4]}…{value[-4:]}"
