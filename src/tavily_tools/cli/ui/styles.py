"""Shared styling helpers for CLI prompts and output."""

from __future__ import annotations

from questionary import Style
from rich.table import Table

# Central style for all CLI Questionary prompts.
CLI_STYLE = Style(
    [
        ("qmark", "fg:#00d1b2 bold"),
        ("question", "bold"),
        ("answer", "fg:#00d1b2 bold"),
        ("pointer", "fg:#00d1b2 bold"),
        ("highlighted", "fg:#00d1b2 bold"),
        ("instruction", ""),
        ("text", ""),
    ]
)


def settings_table(title: str) -> Table:
    """Return a two-column table for showing settings."""

    table = Table(title=title, show_header=True, header_style="bold #00d1b2")
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    return table
