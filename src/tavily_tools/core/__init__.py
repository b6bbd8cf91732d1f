"""Core tool, configuration and type modules."""
