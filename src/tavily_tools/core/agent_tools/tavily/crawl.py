"""
core/agent_tools/tavily/crawl.py

Tavily Crawl tool: traverse a site from a base URL and extract page content.
"""

from __future__ import annotations

from typing import Any

from ..factory import build_tool
from ..fields import FieldSpec, ToolSpec
from ..schema import NonBlankStr
from ..tool import TavilyTool
from .common import (
    extract_depth_field,
    format_field,
    guidance_fields,
    include_favicon_field,
    include_images_field,
    include_usage_field,
    timeout_field,
    traversal_fields,
)

CRAWL_TOOL = ToolSpec(
    kind="crawl",
    name="tavily_crawl",
    verb="crawl",
    path="/crawl",
    description=(
        "Crawl a website starting from a base URL to discover and extract content from multiple pages. "
        "Intelligently traverses links and extracts structured data at scale."
    ),
    fields=(
        FieldSpec("url", "url", NonBlankStr, "The base URL to start crawling from", required=True),
        *traversal_fields("crawl"),
        extract_depth_field("Extraction depth for page content (default: 'basic')", overridable=True),
        *guidance_fields(activity="crawling", example="'only crawl blog posts', 'focus on product pages'"),
        FieldSpec(
            "query",
            "query",
            str,
            "Query for intent-based extraction - when provided, returns content most relevant to the query",
            overridable=True,
        ),
        FieldSpec(
            "chunksPerSource",
            "chunks_per_source",
            int,
            "Number of top chunks to return per source when using query-based extraction (default: 3)",
            overridable=True,
            ge=1,
        ),
        include_images_field("Whether to include images found on crawled pages"),
        format_field("Output format of the extracted content"),
        include_favicon_field(),
        timeout_field(ge=10, le=150, default=150),
        include_usage_field(),
    ),
)


def tavily_crawl(**kwargs: Any) -> TavilyTool:
    """Build a Tavily Crawl tool; see :func:`tavily_search` for the accepted keywords."""
    return build_tool(CRAWL_TOOL, **kwargs)
