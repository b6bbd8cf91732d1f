"""
core/agent_tools/tavily/search.py

Tavily Search tool: web searches optimized for AI applications, returning
real-time sources, snippets and optional AI-generated answers.
"""

from __future__ import annotations

from typing import Any, Literal

from ..factory import build_tool
from ..fields import FieldSpec, ToolSpec
from ..schema import NonBlankStr
from ..tool import TavilyTool
from .common import include_favicon_field, include_images_field, include_usage_field, timeout_field

SEARCH_TOOL = ToolSpec(
    kind="search",
    name="tavily_search",
    verb="search",
    path="/search",
    description=(
        "Search the web for real-time information using Tavily's AI-optimized search engine. "
        "Returns relevant sources, snippets, and optional AI-generated answers."
    ),
    fields=(
        FieldSpec("query", "query", NonBlankStr, "The search query to look up on the web", required=True),
        FieldSpec(
            "searchDepth",
            "search_depth",
            Literal["basic", "advanced"],
            "The depth of the search - 'basic' for quick results, 'advanced' for comprehensive search",
            overridable=True,
        ),
        FieldSpec(
            "timeRange",
            "time_range",
            Literal["year", "month", "week", "day", "y", "m", "w", "d"],
            "Time range for search results",
            overridable=True,
        ),
        FieldSpec("topic", "topic", Literal["general", "news", "finance"], "Category of the search"),
        FieldSpec("days", "days", int, "Number of days back to include when the topic is 'news'", ge=1),
        FieldSpec("maxResults", "max_results", int, "Maximum number of search results to return", ge=0, le=20),
        FieldSpec("chunksPerSource", "chunks_per_source", int, "Number of content chunks per source (advanced depth)", ge=1, le=3),
        FieldSpec(
            "includeAnswer",
            "include_answer",
            Literal["basic", "advanced"] | bool,
            "Include an LLM-generated answer; 'basic' or true for a quick one, 'advanced' for a detailed one",
        ),
        FieldSpec(
            "includeRawContent",
            "include_raw_content",
            Literal["markdown", "text"] | bool,
            "Include the cleaned page content of each result, as markdown or text",
        ),
        include_images_field("Whether to run an image search and include the results"),
        FieldSpec(
            "includeImageDescriptions",
            "include_image_descriptions",
            bool,
            "Whether to add a descriptive text for each image",
        ),
        include_favicon_field(),
        FieldSpec("includeDomains", "include_domains", list[str], "Domains to restrict the search to"),
        FieldSpec("excludeDomains", "exclude_domains", list[str], "Domains to exclude from the search"),
        FieldSpec("country", "country", str, "Boost results from a specific country (general topic only)"),
        FieldSpec("startDate", "start_date", str, "Only return results published after this date (YYYY-MM-DD)"),
        FieldSpec("endDate", "end_date", str, "Only return results published before this date (YYYY-MM-DD)"),
        FieldSpec("autoParameters", "auto_parameters", bool, "Let Tavily tune search parameters from the query"),
        timeout_field(ge=1, le=120),
        include_usage_field(),
    ),
)


def tavily_search(**kwargs: Any) -> TavilyTool:
    """
    Build a Tavily Search tool.

    Accepts ``api_key``, ``base_url``, ``proxies``, ``client`` and ``environ``
    plus any search option by internal or wire name, e.g.
    ``tavily_search(searchDepth="advanced", max_results=5)``.
    """
    return build_tool(SEARCH_TOOL, **kwargs)
