"""Implementation of the `schema` subcommand."""

from __future__ import annotations

import json
from typing import Any

import typer

from tavily_tools.core.agent_tools import TOOL_SPECS, get_tool_spec
from tavily_tools.core.agent_tools.schema import build_tool_definition
from tavily_tools.core.types.tool_config import to_anthropic_tool, to_function_declaration

FORMATS = ("openai", "anthropic", "gemini")


def render_definitions(kinds: list[str], provider: str) -> list[Any]:
    definitions = [build_tool_definition(get_tool_spec(kind)) for kind in kinds]
    if provider == "anthropic":
        return [to_anthropic_tool(tool) for tool in definitions]
    if provider == "gemini":
        return [to_function_declaration(tool) for tool in definitions]
    return list(definitions)


def register(app: typer.Typer) -> None:
    """Register the `schema` subcommand with the provided Typer app."""

    @app.command()
    def schema(
        kinds: list[str] | None = typer.Argument(None, help="Tool kinds to show (default: all)."),
        provider: str = typer.Option("openai", "--provider", help="Output format: openai, anthropic or gemini."),
    ) -> None:
        """Print the agent-facing tool declarations as JSON."""
        provider = provider.strip().lower()
        if provider not in FORMATS:
            raise typer.BadParameter(f"provider must be one of {', '.join(FORMATS)}", param_hint="--provider")
        selected = kinds or list(TOOL_SPECS)
        try:
            definitions = render_definitions(selected, provider)
        except KeyError as exc:
            raise typer.BadParameter(str(exc.args[0]), param_hint="KINDS") from exc
        typer.echo(json.dumps(definitions, indent=2))
