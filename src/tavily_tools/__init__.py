"""Tavily search, extract, crawl and map tools for AI agent frameworks."""

from tavily_tools.core.agent_tools import (
    ApiError,
    ConfigurationError,
    InputValidationError,
    TavilyTool,
    TavilyToolError,
    ToolConfiguration,
    ToolDispatcher,
    TransportError,
    create_all_tools,
    tavily_crawl,
    tavily_extract,
    tavily_map,
    tavily_search,
)

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "ConfigurationError",
    "InputValidationError",
    "TavilyTool",
    "TavilyToolError",
    "ToolConfiguration",
    "ToolDispatcher",
    "TransportError",
    "create_all_tools",
    "tavily_crawl",
    "tavily_extract",
    "tavily_map",
    "tavily_search",
]
