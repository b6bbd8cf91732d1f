"""
core/agent_tools/tavily/__init__.py
"""

from .crawl import CRAWL_TOOL as CRAWL_TOOL
from .crawl import tavily_crawl as tavily_crawl
from .extract import EXTRACT_TOOL as EXTRACT_TOOL
from .extract import tavily_extract as tavily_extract
from .map import MAP_TOOL as MAP_TOOL
from .map import tavily_map as tavily_map
from .search import SEARCH_TOOL as SEARCH_TOOL
from .search import tavily_search as tavily_search

__all__ = [
    "CRAWL_TOOL",
    "EXTRACT_TOOL",
    "MAP_TOOL",
    "SEARCH_TOOL",
    "tavily_crawl",
    "tavily_extract",
    "tavily_map",
    "tavily_search",
]
