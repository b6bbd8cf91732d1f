"""Logging preference helpers."""

from __future__ import annotations

from ..models import ToolsConfig
from ..utils import normalize_verbosity_label


def set_logging_verbosity(config: ToolsConfig, verbosity: str | None) -> None:
    if verbosity is not None and verbosity.strip() and normalize_verbosity_label(verbosity) is None:
        raise ValueError(f"unknown verbosity {verbosity!r}; expected quiet, standard or verbose")
    config.verbosity = normalize_verbosity_label(verbosity)


def get_logging_verbosity(config: ToolsConfig) -> str | None:
    return config.verbosity
