"""Constants used throughout the configuration subsystem."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from platformdirs import user_config_dir

CONFIG_DIR_ENV_VAR = "TAVILY_TOOLS_CONFIG_DIR"
CONFIG_FILENAME = "config.toml"

API_KEY_ENV_VAR = "TAVILY_API_KEY"
BASE_URL_ENV_VAR = "TAVILY_API_BASE_URL"
DEFAULT_BASE_URL = "https://api.tavily.com"

DEFAULT_VERBOSITY = "quiet"
VERBOSITY_ENV_VAR = "TAVILY_TOOLS_LOG_LEVEL"
VERBOSITY_PRESETS = {
    "quiet": logging.WARNING,
    "standard": logging.INFO,
    "verbose": logging.DEBUG,
}

TOOL_KINDS = ("search", "extract", "crawl", "map")


def config_dir() -> Path:
    return Path(os.getenv(CONFIG_DIR_ENV_VAR, user_config_dir("tavily-tools", "tavily")))


def config_file() -> Path:
    return config_dir() / CONFIG_FILENAME
