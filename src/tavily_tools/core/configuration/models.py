"""Dataclasses describing the persisted configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ToolsConfig:
    """User configuration loaded from ``config.toml``."""

    api_key: str | None = None
    base_url: str | None = None
    proxies: dict[str, str] = field(default_factory=dict)
    verbosity: str | None = None
    tools: dict[str, dict[str, Any]] = field(default_factory=dict)

    def tool_options(self, kind: str) -> dict[str, Any]:
        return dict(self.tools.get(kind, {}))
