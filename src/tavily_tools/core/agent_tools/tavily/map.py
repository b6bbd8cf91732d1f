"""
core/agent_tools/tavily/map.py

Tavily Map tool: discover a site's pages and hierarchy without extracting content.
"""

from __future__ import annotations

from typing import Any

from ..factory import build_tool
from ..fields import FieldSpec, ToolSpec
from ..schema import NonBlankStr
from ..tool import TavilyTool
from .common import guidance_fields, include_usage_field, timeout_field, traversal_fields

MAP_TOOL = ToolSpec(
    kind="map",
    name="tavily_map",
    verb="map",
    path="/map",
    description=(
        "Map the structure of a website starting from a base URL. Discovers pages, links, and site "
        "hierarchy without extracting full content. Ideal for understanding site architecture."
    ),
    fields=(
        FieldSpec("url", "url", NonBlankStr, "The base URL to start mapping from", required=True),
        *traversal_fields("map"),
        *guidance_fields(activity="mapping", example="'focus on documentation pages', 'skip API references'"),
        timeout_field(ge=10, le=150, default=150),
        include_usage_field(),
    ),
)


def tavily_map(**kwargs: Any) -> TavilyTool:
    """Build a Tavily Map tool; see :func:`tavily_search` for the accepted keywords."""
    return build_tool(MAP_TOOL, **kwargs)
