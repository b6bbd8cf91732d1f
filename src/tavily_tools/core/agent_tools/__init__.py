"""
core/agent_tools/__init__.py
"""

from .dispatch import ToolDispatcher as ToolDispatcher
from .errors import (  # noqa: F401
    ApiError as ApiError,
)
from .errors import (
    ConfigurationError as ConfigurationError,
)
from .errors import (
    InputValidationError as InputValidationError,
)
from .errors import (
    TavilyToolError as TavilyToolError,
)
from .errors import (
    TransportError as TransportError,
)
from .registry import (
    TOOL_SPECS as TOOL_SPECS,
)
from .registry import (
    create_all_tools as create_all_tools,
)
from .registry import (
    create_tool as create_tool,
)
from .registry import (
    get_tool_spec as get_tool_spec,
)
from .tavily import (
    tavily_crawl as tavily_crawl,
)
from .tavily import (
    tavily_extract as tavily_extract,
)
from .tavily import (
    tavily_map as tavily_map,
)
from .tavily import (
    tavily_search as tavily_search,
)
from .tool import TavilyTool as TavilyTool
from .tool import ToolConfiguration as ToolConfiguration

__all__ = [
    "TOOL_SPECS",
    "ApiError",
    "ConfigurationError",
    "InputValidationError",
    "TavilyTool",
    "TavilyToolError",
    "ToolConfiguration",
    "ToolDispatcher",
    "TransportError",
    "create_all_tools",
    "create_tool",
    "get_tool_spec",
    "tavily_crawl",
    "tavily_extract",
    "tavily_map",
    "tavily_search",
]
