"""Field definitions shared by several Tavily tool kinds."""

from __future__ import annotations

from typing import Literal

from ..fields import FieldSpec

ExtractDepth = Literal["basic", "advanced"]
ContentFormat = Literal["markdown", "text"]


def extract_depth_field(description: str, **kwargs) -> FieldSpec:
    return FieldSpec("extractDepth", "extract_depth", ExtractDepth, description, **kwargs)


def format_field(description: str, **kwargs) -> FieldSpec:
    return FieldSpec("format", "format", ContentFormat, description, **kwargs)


def include_images_field(description: str, **kwargs) -> FieldSpec:
    return FieldSpec("includeImages", "include_images", bool, description, **kwargs)


def include_favicon_field() -> FieldSpec:
    return FieldSpec("includeFavicon", "include_favicon", bool, "Whether to include the favicon URL for each result")


def include_usage_field() -> FieldSpec:
    return FieldSpec("includeUsage", "include_usage", bool, "Whether to include credit usage information in the response")


def timeout_field(*, ge: float, le: float, default=None) -> FieldSpec:
    extra = {} if default is None else {"default": default}
    return FieldSpec(
        "timeout",
        "timeout",
        float,
        f"Request timeout in seconds enforced by the Tavily API ({ge:g}-{le:g})",
        ge=ge,
        le=le,
        **extra,
    )


def traversal_fields(verb: str) -> tuple[FieldSpec, ...]:
    """Depth, breadth, limit and path/domain filters common to crawl and map."""
    return (
        FieldSpec(
            "maxDepth",
            "max_depth",
            int,
            f"Maximum depth to {verb} (number of link hops from the base URL, default: 1)",
            default=1,
            overridable=True,
            ge=1,
            le=5,
        ),
        FieldSpec(
            "maxBreadth",
            "max_breadth",
            int,
            "Maximum number of links to follow per page (default: 20)",
            default=20,
            ge=1,
            le=500,
        ),
        FieldSpec("limit", "limit", int, "Total number of links to process before stopping (default: 50)", default=50, ge=1),
        FieldSpec("selectPaths", "select_paths", list[str], "Regex patterns restricting traversal to matching URL paths"),
        FieldSpec("selectDomains", "select_domains", list[str], "Regex patterns restricting traversal to matching domains"),
        FieldSpec("excludePaths", "exclude_paths", list[str], "Regex patterns for URL paths to skip"),
        FieldSpec("excludeDomains", "exclude_domains", list[str], "Regex patterns for domains to skip"),
    )


def guidance_fields(*, activity: str, example: str) -> tuple[FieldSpec, ...]:
    """Agent-controllable instructions and external-domain switch for crawl and map."""
    return (
        FieldSpec(
            "instructions",
            "instructions",
            str,
            f"Optional instructions to guide the {activity} (e.g., {example})",
            overridable=True,
        ),
        FieldSpec(
            "allowExternal",
            "allow_external",
            bool,
            f"Whether to allow {activity} external domains (default: false)",
            overridable=True,
        ),
    )
