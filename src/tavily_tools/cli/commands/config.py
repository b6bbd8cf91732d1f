"""Implementation of the `config` subcommand group."""

from __future__ import annotations

import json
from typing import Any

import questionary
import typer

from tavily_tools.core.agent_tools import TavilyToolError
from tavily_tools.core.configuration import API_KEY_ENV_VAR, DEFAULT_BASE_URL, TOOL_KINDS
from tavily_tools.core.configuration.services import logging as logging_service
from tavily_tools.core.configuration.services import providers, tool_defaults
from tavily_tools.core.configuration.utils import mask_secret

from ..bootstrap import RuntimeContext, bootstrap_runtime
from ..ui.styles import CLI_STYLE, settings_table

config_app = typer.Typer(help="View and edit the tool configuration file.", no_args_is_help=True)


def _parse_value(raw: str) -> Any:
    """Interpret VALUE as JSON when possible (numbers, booleans, lists), else as a plain string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _save(context: RuntimeContext, message: str) -> None:
    context.repository.save(context.config)
    context.console.print(f"[green]{message}[/green]")


@config_app.command("show")
def show() -> None:
    """Show the effective settings and per-tool defaults."""
    context = bootstrap_runtime()
    config = context.config

    getenv = context.environment.getenv
    if not providers.has_tavily_credentials(config, getenv):
        credential = "[yellow]not set[/yellow]"
    elif config.api_key:
        credential = f"{mask_secret(config.api_key)} (config file)"
    else:
        credential = f"{mask_secret(getenv(API_KEY_ENV_VAR))} ({API_KEY_ENV_VAR})"

    table = settings_table("Tavily tools")
    table.add_row("Config file", str(context.repository.path))
    table.add_row("API key", credential)
    table.add_row("Base URL", context.environment.resolve_base_url(config.base_url))
    table.add_row("Proxies", ", ".join(f"{k}={v}" for k, v in config.proxies.items()) or "none")
    table.add_row("Verbosity", logging_service.get_logging_verbosity(config) or "default")
    context.console.print(table)

    for kind in TOOL_KINDS:
        defaults = tool_defaults.get_tool_defaults(config, kind)
        if not defaults:
            continue
        tool_table = settings_table(f"{kind} defaults")
        for option, value in defaults.items():
            tool_table.add_row(option, json.dumps(value))
        context.console.print(tool_table)


@config_app.command("set-key")
def set_key(
    api_key: str | None = typer.Argument(None, help="Tavily API key; prompted for when omitted. Empty clears it."),
) -> None:
    """Store the Tavily API key in the config file."""
    context = bootstrap_runtime()
    if api_key is None:
        api_key = questionary.password("Tavily API key (leave empty to clear):", style=CLI_STYLE).ask()
        if api_key is None:
            raise typer.Exit(code=1)
    providers.set_api_key(context.config, api_key)
    _save(context, "API key saved." if context.config.api_key else "API key cleared.")


@config_app.command("set-base-url")
def set_base_url(
    base_url: str = typer.Argument(..., help=f"API origin, e.g. {DEFAULT_BASE_URL}. Empty resets it."),
) -> None:
    """Point the tools at an alternate API origin."""
    context = bootstrap_runtime()
    providers.set_base_url(context.config, base_url)
    _save(context, f"Base URL set to {context.config.base_url or DEFAULT_BASE_URL}.")


@config_app.command("set-default")
def set_default(
    kind: str = typer.Argument(..., help="Tool kind: search, extract, crawl or map."),
    option: str = typer.Argument(..., help="Option name, e.g. max_results or maxResults."),
    value: str = typer.Argument(..., help="Value; parsed as JSON when possible."),
) -> None:
    """Set a construction-time default for one tool kind."""
    context = bootstrap_runtime()
    try:
        stored_as = tool_defaults.set_tool_default(context.config, kind, option, _parse_value(value))
    except (ValueError, TavilyToolError) as exc:
        raise typer.BadParameter(str(exc)) from exc
    _save(context, f"{kind}.{stored_as} saved.")


@config_app.command("unset-default")
def unset_default(
    kind: str = typer.Argument(..., help="Tool kind: search, extract, crawl or map."),
    option: str = typer.Argument(..., help="Option name to remove."),
) -> None:
    """Remove a construction-time default."""
    context = bootstrap_runtime()
    try:
        removed = tool_defaults.unset_tool_default(context.config, kind, option)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if not removed:
        context.console.print(f"No default named {option} for {kind}.")
        return
    _save(context, f"{kind}.{option} removed.")


@config_app.command("reset-defaults")
def reset_defaults(
    kind: str = typer.Argument(..., help="Tool kind: search, extract, crawl or map."),
) -> None:
    """Remove every construction-time default for one tool kind."""
    context = bootstrap_runtime()
    try:
        removed = tool_defaults.reset_tool_defaults(context.config, kind)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if not removed:
        context.console.print(f"No defaults stored for {kind}.")
        return
    _save(context, f"{kind} defaults cleared.")


@config_app.command("set-verbosity")
def set_verbosity(
    level: str = typer.Argument(..., help="quiet, standard or verbose. Empty resets it."),
) -> None:
    """Set the default log verbosity."""
    context = bootstrap_runtime()
    try:
        logging_service.set_logging_verbosity(context.config, level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    _save(context, f"Verbosity set to {context.config.verbosity or 'default'}.")


def register(app: typer.Typer) -> None:
    """Register the `config` group with the provided Typer app."""
    app.add_typer(config_app, name="config")
