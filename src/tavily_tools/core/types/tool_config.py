"""
core/types/tool_config.py

This module defines the tool declaration types handed to model agents.
It provides one standard shape plus converters to provider-specific formats.
"""

from typing import Any, TypedDict


class ToolFunction(TypedDict):
    """Definition of a function tool."""
    name: str
    description: str
    parameters: dict[str, Any]

class Tool(TypedDict):
    """Standard tool definition that can be converted to provider-specific formats."""
    type: str  # Usually "function"
    function: ToolFunction

class AnthropicTool(TypedDict):
    """Tool definition in the Anthropic Messages API format."""
    name: str
    description: str
    input_schema: dict[str, Any]

class FunctionDeclaration(TypedDict):
    """Function declaration in the Gemini format."""
    name: str
    description: str
    parameters: dict[str, Any]


def to_anthropic_tool(tool: Tool) -> AnthropicTool:
    function = tool["function"]
    return {
        "name": function["name"],
        "description": function["description"],
        "input_schema": function["parameters"],
    }


def to_function_declaration(tool: Tool) -> FunctionDeclaration:
    function = tool["function"]
    # Gemini rejects JSON-schema keywords it does not know about
    parameters = {k: v for k, v in function["parameters"].items() if k != "additionalProperties"}
    return {
        "name": function["name"],
        "description": function["description"],
        "parameters": parameters,
    }
