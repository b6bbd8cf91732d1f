"""Application-boundary construction of Tavily tools."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from tavily_tools.core.configuration.environment import EnvironmentManager

from .fields import ToolSpec
from .tool import TavilyTool, ToolConfiguration


def build_tool(
    spec: ToolSpec,
    *,
    api_key: str | None = None,
    base_url: str | None = None,
    proxies: Mapping[str, str] | None = None,
    client: httpx.AsyncClient | None = None,
    environ: Mapping[str, str] | None = None,
    **options: Any,
) -> TavilyTool:
    """
    Construct a tool instance with its configuration frozen.

    The environment is consulted here, once: the tool core only ever sees an
    explicit credential (or None, which fails at call time before any request).

    Raises:
        ConfigurationError: If an option is unknown or out of range.
    """
    environment = EnvironmentManager(environ)
    configuration = ToolConfiguration.from_options(
        spec,
        options,
        api_key=environment.resolve_api_key(api_key),
        base_url=environment.resolve_base_url(base_url),
        proxies=proxies,
    )
    return TavilyTool(spec, configuration, client=client)
