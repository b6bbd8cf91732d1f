"""Environment adapters for applying configuration at runtime."""

from __future__ import annotations

import os
from collections.abc import Mapping

from .constants import (
    API_KEY_ENV_VAR,
    BASE_URL_ENV_VAR,
    DEFAULT_BASE_URL,
    DEFAULT_VERBOSITY,
    VERBOSITY_ENV_VAR,
    VERBOSITY_PRESETS,
)
from .models import ToolsConfig
from .utils import normalize_verbosity_label


class EnvironmentManager:
    """Thin wrapper around environment access to aid testing and reuse."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ if environ is not None else os.environ

    def getenv(self, key: str) -> str | None:
        return self._environ.get(key)

    def resolve_api_key(self, explicit: str | None = None) -> str | None:
        """Explicit credential first, then the TAVILY_API_KEY variable."""
        if explicit:
            return explicit
        return self.getenv(API_KEY_ENV_VAR) or None

    def resolve_base_url(self, explicit: str | None = None) -> str:
        if explicit:
            return explicit
        return self.getenv(BASE_URL_ENV_VAR) or DEFAULT_BASE_URL

    def resolve_log_level(self, config: ToolsConfig, default: int | None = None) -> int:
        env_value = self.getenv(VERBOSITY_ENV_VAR)
        label = normalize_verbosity_label(env_value)
        if label is None:
            label = normalize_verbosity_label(config.verbosity)

        if label is None:
            fallback = VERBOSITY_PRESETS[DEFAULT_VERBOSITY]
            return fallback if default is None else default

        return VERBOSITY_PRESETS[label]
