"""
core/agent_tools/tool.py

This module provides the runtime object behind every Tavily tool kind.
A TavilyTool pairs a field table with an immutable ToolConfiguration and runs
one invocation through validation, credential check, resolution, request
building, transport and response classification.
"""

# ====================================================
# Importing Required Libraries
# ====================================================

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

import httpx
from pydantic import BaseModel

from tavily_tools.core.configuration.constants import DEFAULT_BASE_URL
from tavily_tools.core.types.tool_config import Tool

from .errors import TavilyToolError, missing_api_key, parse_response, transport_failure
from .fields import ToolSpec
from .request_builder import PreparedRequest, prepare_request
from .resolver import resolve_parameters
from .schema import build_input_model, build_tool_definition, validate_call_input, validate_options
from .transport import build_client, endpoint_url, post_json

logger = logging.getLogger("tavily_tools")

# ====================================================
# Construction-time Configuration
# ====================================================


@dataclass(frozen=True)
class ToolConfiguration:
    """Developer-supplied settings for one tool instance."""

    api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    proxies: Mapping[str, str] | None = None
    values: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_options(
        cls,
        spec: ToolSpec,
        options: Mapping[str, Any],
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        proxies: Mapping[str, str] | None = None,
    ) -> ToolConfiguration:
        return cls(
            api_key=api_key or None,
            base_url=base_url or DEFAULT_BASE_URL,
            proxies=MappingProxyType(dict(proxies)) if proxies else None,
            values=MappingProxyType(validate_options(spec, options)),
        )


# ====================================================
# Tool Implementation
# ====================================================


class TavilyTool:
    """An agent-callable Tavily tool bound to one configuration."""

    def __init__(
        self,
        spec: ToolSpec,
        configuration: ToolConfiguration,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.spec = spec
        self.configuration = configuration
        self._client = client

    def __repr__(self) -> str:
        return f"TavilyTool(name={self.spec.name!r})"

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def description(self) -> str:
        return self.spec.description

    @property
    def input_model(self) -> type[BaseModel]:
        return build_input_model(self.spec)

    @property
    def definition(self) -> Tool:
        return build_tool_definition(self.spec)

    def validate(self, arguments: Mapping[str, Any]) -> dict[str, Any]:
        return validate_call_input(self.spec, arguments)

    def prepare(self, call_input: Mapping[str, Any]) -> PreparedRequest:
        """Resolve validated input against the configuration and build the payload."""
        params = resolve_parameters(self.spec, call_input, self.configuration.values)
        return prepare_request(self.spec, params)

    async def execute(self, arguments: Mapping[str, Any]) -> Any:
        """
        Run one invocation.

        Args:
            arguments: Raw agent-supplied arguments.

        Returns:
            The parsed JSON body returned by the Tavily API.

        Raises:
            TavilyToolError: On any configuration, validation, transport or API failure.
        """
        call_input = self.validate(arguments)

        api_key = self.configuration.api_key
        if not api_key:
            raise missing_api_key(self.spec)
        logger.debug("Tavily %s: credential resolved", self.spec.kind)

        prepared = self.prepare(call_input)
        logger.debug("Tavily %s: payload built with keys %s", self.spec.kind, ", ".join(sorted(prepared.payload)))

        url = endpoint_url(self.configuration.base_url, prepared.path)
        try:
            response = await self._send(url, api_key, prepared.payload)
        except asyncio.CancelledError:
            logger.warning("Tavily %s request was cancelled", self.spec.kind)
            raise
        except httpx.RequestError as exc:
            logger.warning("Tavily %s request failed: %s", self.spec.kind, type(exc).__name__)
            raise transport_failure(self.spec, exc) from exc
        logger.debug("Tavily %s: response received with HTTP %s", self.spec.kind, response.status_code)

        result = parse_response(self.spec, response)
        logger.info("Tavily %s completed", self.spec.kind)
        return result

    async def __call__(self, **arguments: Any) -> Any:
        return await self.execute(arguments)

    async def run_json(self, arguments: Mapping[str, Any]) -> str:
        """Run the tool and return a JSON string suitable for an agent transcript."""
        try:
            result = await self.execute(arguments)
        except TavilyToolError as exc:
            return json.dumps({"error": exc.message})
        return json.dumps(result, indent=2)

    async def _send(self, url: str, api_key: str, payload: dict[str, Any]) -> httpx.Response:
        if self._client is not None:
            return await post_json(self._client, url, api_key=api_key, payload=payload)
        async with build_client(self.configuration.proxies) as client:
            return await post_json(client, url, api_key=api_key, payload=payload)
