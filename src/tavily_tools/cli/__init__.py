"""Typer-based command-line interface for the Tavily agent tools."""

from .app import app

__all__ = ["app"]
