"""Shared type definitions."""
