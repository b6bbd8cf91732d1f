"""Presentation helpers for the CLI."""
