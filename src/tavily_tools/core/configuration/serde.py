"""Conversion between ToolsConfig and its TOML document form."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .constants import TOOL_KINDS
from .models import ToolsConfig


def config_from_dict(payload: Mapping[str, Any]) -> ToolsConfig:
    credentials = payload.get("credentials", {}) or {}
    network = payload.get("network", {}) or {}
    logging_section = payload.get("logging", {}) or {}
    tools_section = payload.get("tools", {}) or {}

    proxies = {
        scheme: str(url)
        for scheme, url in (network.get("proxies", {}) or {}).items()
        if scheme in ("http", "https") and url
    }
    tools = {
        kind: dict(options)
        for kind, options in tools_section.items()
        if kind in TOOL_KINDS and isinstance(options, Mapping)
    }

    return ToolsConfig(
        api_key=credentials.get("api_key") or None,
        base_url=network.get("base_url") or None,
        proxies=proxies,
        verbosity=logging_section.get("verbosity") or None,
        tools=tools,
    )


def config_to_dict(config: ToolsConfig) -> dict[str, Any]:
    payload: dict[str, Any] = {}
    if config.api_key:
        payload["credentials"] = {"api_key": config.api_key}

    network: dict[str, Any] = {}
    if config.base_url:
        network["base_url"] = config.base_url
    if config.proxies:
        network["proxies"] = dict(config.proxies)
    if network:
        payload["network"] = network

    if config.verbosity:
        payload["logging"] = {"verbosity": config.verbosity}

    tools = {kind: dict(options) for kind, options in config.tools.items() if options}
    if tools:
        payload["tools"] = tools
    return payload
