"""Domain-specific helpers for configuration management."""

from . import logging, providers, tool_defaults

__all__ = [
    "logging",
    "providers",
    "tool_defaults",
]
