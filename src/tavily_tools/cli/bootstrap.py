"""Runtime setup shared by CLI commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console

from tavily_tools.core.configuration import EnvironmentManager, TomlConfigRepository, ToolsConfig
from tavily_tools.logging_setup import configure_logging


@dataclass
class RuntimeContext:
    """Loaded configuration plus the helpers commands need to act on it."""

    config: ToolsConfig
    repository: TomlConfigRepository
    environment: EnvironmentManager
    console: Console


def _load_env_files() -> None:
    env_path = Path(".env")
    if env_path.exists():
        load_dotenv(env_path)


def bootstrap_runtime(console: Console | None = None) -> RuntimeContext:
    _load_env_files()
    repository = TomlConfigRepository()
    config = repository.load()
    environment = EnvironmentManager()
    configure_logging(environment.resolve_log_level(config))
    return RuntimeContext(
        config=config,
        repository=repository,
        environment=environment,
        console=console or Console(),
    )
