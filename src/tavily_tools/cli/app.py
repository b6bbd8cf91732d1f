"""
Typer application wiring for the Tavily tools CLI.
"""

from __future__ import annotations

import typer

from .commands import config, schema, tools

app = typer.Typer(
    name="tavily-tools",
    help="Run Tavily search, extract, crawl and map tools from the command line.",
    no_args_is_help=True,
    add_completion=False,
)

tools.register(app)
schema.register(app)
config.register(app)
