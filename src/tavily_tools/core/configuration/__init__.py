"""Configuration loading, persistence and environment access."""

from .constants import API_KEY_ENV_VAR, DEFAULT_BASE_URL, TOOL_KINDS
from .environment import EnvironmentManager
from .models import ToolsConfig
from .repository import ConfigRepository, TomlConfigRepository

__all__ = [
    "API_KEY_ENV_VAR",
    "DEFAULT_BASE_URL",
    "TOOL_KINDS",
    "ConfigRepository",
    "EnvironmentManager",
    "TomlConfigRepository",
    "ToolsConfig",
]
