"""Credential and endpoint helpers."""

from __future__ import annotations

from collections.abc import Callable

from ..constants import API_KEY_ENV_VAR
from ..models import ToolsConfig


def set_api_key(config: ToolsConfig, api_key: str | None) -> None:
    config.api_key = api_key.strip() if api_key and api_key.strip() else None


def set_base_url(config: ToolsConfig, base_url: str | None) -> None:
    config.base_url = base_url.strip().rstrip("/") if base_url and base_url.strip() else None


def has_tavily_credentials(config: ToolsConfig, getenv: Callable[[str], str | None]) -> bool:
    if config.api_key:
        return True
    return bool(getenv(API_KEY_ENV_VAR))
