"""
core/agent_tools/dispatch.py

This module routes tool calls emitted by a model agent to Tavily tools.
It accepts OpenAI/Anthropic style tool calls and Gemini style function calls
and returns one execution record per call for the agent's next turn.
"""

# ====================================================
# Importing Required Libraries
# ====================================================

import json
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from tavily_tools.core.types.tool_config import (
    AnthropicTool,
    FunctionDeclaration,
    Tool,
    to_anthropic_tool,
    to_function_declaration,
)

from .errors import TavilyToolError
from .tool import TavilyTool

logger = logging.getLogger("tavily_tools")

# ====================================================
# Dispatcher
# ====================================================


class ToolDispatcher:
    """Executes agent tool calls against a fixed set of Tavily tools."""

    def __init__(self, tools: Iterable[TavilyTool]):
        self._tools: dict[str, TavilyTool] = {}
        for tool in tools:
            if tool.name in self._tools:
                raise ValueError(f"duplicate tool name '{tool.name}'")
            self._tools[tool.name] = tool

    @property
    def tool_names(self) -> list[str]:
        return list(self._tools)

    @property
    def definitions(self) -> list[Tool]:
        return [tool.definition for tool in self._tools.values()]

    @property
    def anthropic_definitions(self) -> list[AnthropicTool]:
        return [to_anthropic_tool(tool.definition) for tool in self._tools.values()]

    @property
    def gemini_declarations(self) -> list[FunctionDeclaration]:
        return [to_function_declaration(tool.definition) for tool in self._tools.values()]

    # ----------------------------------------------------
    # Call Handling
    # ----------------------------------------------------
    async def handle_tool_calls(self, tool_calls: Any) -> list[dict[str, Any]]:
        """Execute OpenAI or Anthropic style tool calls and return structured results."""
        results: list[dict[str, Any]] = []
        if not tool_calls:
            return results

        for call in tool_calls:
            function = call.get("function", {}) or {}
            fn_name = function.get("name") or call.get("name")
            raw_args = function.get("arguments")
            args: Any = {}
            problem: str | None = None
            if isinstance(raw_args, str):
                try:
                    args = json.loads(raw_args)
                except json.JSONDecodeError:
                    problem = "invalid JSON in tool call arguments"
            elif isinstance(raw_args, Mapping):
                args = dict(raw_args)
            elif isinstance(call.get("input"), Mapping):
                args = dict(call["input"])

            if problem is None and not isinstance(args, dict):
                problem = "tool call arguments must be a JSON object"

            if problem is not None:
                record = self._failure_record(fn_name, {}, problem)
            else:
                record = await self.execute(fn_name, args)
            if call.get("id") is not None:
                record["id"] = call["id"]
            results.append(record)

        return results

    async def handle_function_calls(self, function_calls: Any) -> list[dict[str, Any]]:
        """Execute Gemini style function calls and return structured results."""
        results: list[dict[str, Any]] = []
        if not function_calls:
            return results

        for fc in function_calls:
            fn_name = fc.get("name")
            raw_args = fc.get("args") or {}
            if not isinstance(raw_args, Mapping):
                results.append(self._failure_record(fn_name, {}, "function call args must be an object"))
                continue
            args = dict(raw_args)
            results.append(await self.execute(fn_name, args))

        return results

    async def execute(self, fn_name: Any, args: dict[str, Any]) -> dict[str, Any]:
        """Run a supported tool and return a normalized execution record."""
        tool = self._tools.get(fn_name) if isinstance(fn_name, str) else None
        if tool is None:
            logger.warning("Agent requested unsupported tool '%s'", fn_name)
            return self._failure_record(fn_name, args, f"unsupported tool '{fn_name}'")

        try:
            result = await tool.execute(args)
        except TavilyToolError as exc:
            logger.warning("Tool %s failed (%s)", fn_name, exc.category)
            return self._failure_record(fn_name, args, exc.message)

        return {
            "name": fn_name,
            "args": args,
            "result": json.dumps(result, indent=2),
            "success": True,
        }

    @staticmethod
    def _failure_record(fn_name: Any, args: dict[str, Any], message: str) -> dict[str, Any]:
        return {
            "name": fn_name,
            "args": args,
            "result": json.dumps({"error": message}),
            "error": message,
        }
