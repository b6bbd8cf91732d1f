"""Lookup of tool kinds by kind or agent-facing name."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .fields import ToolSpec
from .tavily import (
    CRAWL_TOOL,
    EXTRACT_TOOL,
    MAP_TOOL,
    SEARCH_TOOL,
    tavily_crawl,
    tavily_extract,
    tavily_map,
    tavily_search,
)
from .tool import TavilyTool

TOOL_SPECS: dict[str, ToolSpec] = {
    spec.kind: spec for spec in (SEARCH_TOOL, EXTRACT_TOOL, CRAWL_TOOL, MAP_TOOL)
}

TOOL_FACTORIES: dict[str, Callable[..., TavilyTool]] = {
    "search": tavily_search,
    "extract": tavily_extract,
    "crawl": tavily_crawl,
    "map": tavily_map,
}


def get_tool_spec(kind_or_name: str) -> ToolSpec:
    key = kind_or_name.strip().lower()
    spec = TOOL_SPECS.get(key)
    if spec is not None:
        return spec
    for candidate in TOOL_SPECS.values():
        if candidate.name == key:
            return candidate
    raise KeyError(f"unknown Tavily tool {kind_or_name!r}")


def create_tool(kind: str, **kwargs: Any) -> TavilyTool:
    return TOOL_FACTORIES[get_tool_spec(kind).kind](**kwargs)


def create_all_tools(
    defaults: dict[str, dict[str, Any]] | None = None,
    **shared: Any,
) -> list[TavilyTool]:
    """
    Build all four tools.

    Args:
        defaults: Per-kind developer options, keyed by tool kind.
        **shared: Keywords passed to every factory (api_key, base_url, proxies, client, environ).
    """
    defaults = defaults or {}
    return [TOOL_FACTORIES[kind](**shared, **defaults.get(kind, {})) for kind in TOOL_SPECS]
