"""Implementation of the `search`, `extract`, `crawl` and `map` subcommands."""

from __future__ import annotations

import asyncio
from typing import Any

import typer

from tavily_tools.core.agent_tools import TavilyTool, TavilyToolError, create_tool

from ..bootstrap import RuntimeContext, bootstrap_runtime

URL_ARGUMENT = typer.Argument(..., help="The base URL to start from.")
MAX_DEPTH_OPTION = typer.Option(None, "--max-depth", help="Link hops from the base URL (1-5).")
INSTRUCTIONS_OPTION = typer.Option(None, "--instructions", help="Natural-language guidance for the traversal.")
ALLOW_EXTERNAL_OPTION = typer.Option(
    None,
    "--allow-external/--no-allow-external",
    help="Follow links to external domains.",
)
EXTRACT_DEPTH_OPTION = typer.Option(None, "--extract-depth", help="'basic' or 'advanced'.")


def build_cli_tool(context: RuntimeContext, kind: str) -> TavilyTool:
    """Build a tool whose developer options come from the config file."""
    config = context.config
    return create_tool(
        kind,
        api_key=config.api_key,
        base_url=config.base_url,
        proxies=config.proxies or None,
        **config.tool_options(kind),
    )


def run_tool(kind: str, arguments: dict[str, Any]) -> None:
    context = bootstrap_runtime()
    call_input = {key: value for key, value in arguments.items() if value is not None}
    try:
        tool = build_cli_tool(context, kind)
        result = asyncio.run(tool.execute(call_input))
    except TavilyToolError as exc:
        context.console.print(exc.message, style="bold red", markup=False, soft_wrap=True)
        raise typer.Exit(code=1) from exc
    context.console.print_json(data=result)


def register(app: typer.Typer) -> None:
    """Register the tool subcommands with the provided Typer app."""

    @app.command()
    def search(
        query: str = typer.Argument(..., help="The search query to look up on the web."),
        search_depth: str | None = typer.Option(None, "--search-depth", help="'basic' or 'advanced'."),
        time_range: str | None = typer.Option(None, "--time-range", help="year, month, week, day (or y, m, w, d)."),
    ) -> None:
        """Search the web with Tavily."""
        run_tool("search", {"query": query, "searchDepth": search_depth, "timeRange": time_range})

    @app.command()
    def extract(
        urls: list[str] = typer.Argument(..., help="One or more URLs to extract content from."),
        include_images: bool | None = typer.Option(
            None,
            "--include-images/--no-include-images",
            help="Include images from the extracted content.",
        ),
        extract_depth: str | None = EXTRACT_DEPTH_OPTION,
        output_format: str | None = typer.Option(None, "--format", help="'markdown' or 'text'."),
    ) -> None:
        """Extract clean content from URLs."""
        run_tool(
            "extract",
            {
                "urls": urls,
                "includeImages": include_images,
                "extractDepth": extract_depth,
                "format": output_format,
            },
        )

    @app.command()
    def crawl(
        url: str = URL_ARGUMENT,
        max_depth: int | None = MAX_DEPTH_OPTION,
        extract_depth: str | None = EXTRACT_DEPTH_OPTION,
        instructions: str | None = INSTRUCTIONS_OPTION,
        allow_external: bool | None = ALLOW_EXTERNAL_OPTION,
        query: str | None = typer.Option(None, "--query", help="Return the content most relevant to this query."),
        chunks_per_source: int | None = typer.Option(None, "--chunks-per-source", help="Top chunks per source."),
    ) -> None:
        """Crawl a site and extract page content."""
        run_tool(
            "crawl",
            {
                "url": url,
                "maxDepth": max_depth,
                "extractDepth": extract_depth,
                "instructions": instructions,
                "allowExternal": allow_external,
                "query": query,
                "chunksPerSource": chunks_per_source,
            },
        )

    @app.command("map")
    def map_site(
        url: str = URL_ARGUMENT,
        max_depth: int | None = MAX_DEPTH_OPTION,
        instructions: str | None = INSTRUCTIONS_OPTION,
        allow_external: bool | None = ALLOW_EXTERNAL_OPTION,
    ) -> None:
        """Map the structure of a site."""
        run_tool(
            "map",
            {
                "url": url,
                "maxDepth": max_depth,
                "instructions": instructions,
                "allowExternal": allow_external,
            },
        )
