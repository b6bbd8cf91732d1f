"""Persistence adapters for tool configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from .constants import config_file
from .models import ToolsConfig
from .serde import config_from_dict, config_to_dict

try:  # Python 3.11+
    import tomllib as tomli  # type: ignore[import-not-found]
except ModuleNotFoundError:  # pragma: no cover - fallback for older interpreters
    import tomli  # type: ignore[no-redef]
import tomli_w


class ConfigRepository(Protocol):
    """Abstraction for loading and persisting tool configuration."""

    def load(self) -> ToolsConfig:
        ...

    def save(self, config: ToolsConfig) -> None:
        ...


class TomlConfigRepository(ConfigRepository):
    """Stores configuration in a TOML file."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path if path is not None else config_file()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> ToolsConfig:
        if not self._path.exists():
            return ToolsConfig()
        with self._path.open("rb") as fh:
            payload = tomli.load(fh)
        return config_from_dict(payload)

    def save(self, config: ToolsConfig) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("wb") as fh:
            tomli_w.dump(config_to_dict(config), fh)
