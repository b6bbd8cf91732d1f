"""
core/agent_tools/tavily/extract.py

Tavily Extract tool: clean, structured content from one or more URLs.
"""

from __future__ import annotations

from typing import Any

from ..factory import build_tool
from ..fields import FieldSpec, ToolSpec
from ..schema import HttpUrlStr
from ..tool import TavilyTool
from .common import (
    extract_depth_field,
    format_field,
    include_favicon_field,
    include_images_field,
    include_usage_field,
    timeout_field,
)

EXTRACT_TOOL = ToolSpec(
    kind="extract",
    name="tavily_extract",
    verb="extract",
    path="/extract",
    description=(
        "Extract clean, structured content from one or more URLs. Returns parsed content "
        "in markdown or text format, optimized for AI consumption."
    ),
    fields=(
        FieldSpec("urls", "urls", list[HttpUrlStr], "Array of URLs to extract content from", required=True, min_length=1),
        include_images_field(
            "Whether to include images from the extracted content (default: false)",
            default=False,
            overridable=True,
        ),
        extract_depth_field(
            "Extraction depth - 'basic' for main content, 'advanced' for comprehensive extraction (default: 'basic')",
            default="basic",
            overridable=True,
        ),
        format_field(
            "Output format - 'markdown' or 'text' (default: 'markdown')",
            default="markdown",
            overridable=True,
        ),
        FieldSpec("query", "query", str, "Rerank extracted content chunks by relevance to this query"),
        FieldSpec("chunksPerSource", "chunks_per_source", int, "Number of content chunks per source when a query is set", ge=1, le=5),
        include_favicon_field(),
        timeout_field(ge=1, le=60),
        include_usage_field(),
    ),
)


def tavily_extract(**kwargs: Any) -> TavilyTool:
    """Build a Tavily Extract tool; see :func:`tavily_search` for the accepted keywords."""
    return build_tool(EXTRACT_TOOL, **kwargs)
