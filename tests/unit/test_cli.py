import json
import os
import tempfile
import unittest
from pathlib import Path
from typing import Any
from unittest.mock import patch

import httpx
from typer.testing import CliRunner

from tavily_tools.cli import app
from tavily_tools.core.agent_tools import create_tool
from tavily_tools.core.configuration import TomlConfigRepository, ToolsConfig


class CLITestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.temp_dir = tempfile.TemporaryDirectory()
        self.env = {
            "TAVILY_TOOLS_CONFIG_DIR": self.temp_dir.name,
            "TAVILY_API_KEY": "",
            "TAVILY_API_BASE_URL": "",
        }
        self.repository = TomlConfigRepository(Path(self.temp_dir.name) / "config.toml")
        self.requests: list[httpx.Request] = []
        self.runner = CliRunner()

    def tearDown(self) -> None:
        self.temp_dir.cleanup()
        os.environ.pop("TAVILY_TOOLS_CONFIG_DIR", None)

    def _handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(200, json={"results": [{"url": "https://example.com"}]})

    def _invoke(self, args: list[str]):
        client = httpx.AsyncClient(transport=httpx.MockTransport(self._handler))

        def create_with_mock(kind: str, **kwargs: Any):
            return create_tool(kind, client=client, **kwargs)

        with patch("tavily_tools.cli.commands.tools.create_tool", side_effect=create_with_mock):
            return self.runner.invoke(app, args, env=self.env)

    def test_search_merges_config_defaults_with_flags(self) -> None:
        self.repository.save(ToolsConfig(api_key="tvly-config", tools={"search": {"max_results": 5}}))

        result = self._invoke(["search", "quantum computing", "--search-depth", "advanced"])

        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertEqual(len(self.requests), 1)
        request = self.requests[0]
        self.assertEqual(request.headers["Authorization"], "Bearer tvly-config")
        self.assertEqual(
            json.loads(request.content),
            {"query": "quantum computing", "search_depth": "advanced", "max_results": 5},
        )
        self.assertIn("https://example.com", result.output)

    def test_map_passes_boolean_flags(self) -> None:
        self.env["TAVILY_API_KEY"] = "tvly-env"

        result = self._invoke(["map", "https://docs.tavily.com", "--max-depth", "2", "--no-allow-external"])

        self.assertEqual(result.exit_code, 0, msg=result.output)
        payload = json.loads(self.requests[0].content)
        self.assertEqual(payload["max_depth"], 2)
        self.assertIs(payload["allow_external"], False)
        self.assertEqual(self.requests[0].headers["Authorization"], "Bearer tvly-env")

    def test_missing_key_exits_with_error(self) -> None:
        result = self._invoke(["extract", "https://tavily.com"])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("TAVILY_API_KEY", result.output)
        self.assertEqual(self.requests, [])

    def test_invalid_flag_value_exits_with_error(self) -> None:
        self.env["TAVILY_API_KEY"] = "tvly-env"

        result = self._invoke(["crawl", "https://tavily.com", "--max-depth", "6"])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("maxDepth", result.output)
        self.assertEqual(self.requests, [])

    def test_schema_command_prints_declarations(self) -> None:
        result = self.runner.invoke(app, ["schema", "map", "--provider", "anthropic"], env=self.env)

        self.assertEqual(result.exit_code, 0, msg=result.output)
        declarations = json.loads(result.output)
        self.assertEqual(declarations[0]["name"], "tavily_map")
        self.assertIn("maxDepth", declarations[0]["input_schema"]["properties"])

    def test_schema_command_rejects_unknown_provider(self) -> None:
        result = self.runner.invoke(app, ["schema", "--provider", "cohere"], env=self.env)
        self.assertEqual(result.exit_code, 2)

    def test_config_set_default_and_key(self) -> None:
        result = self.runner.invoke(app, ["config", "set-default", "crawl", "maxDepth", "3"], env=self.env)
        self.assertEqual(result.exit_code, 0, msg=result.output)

        result = self.runner.invoke(app, ["config", "set-key", "tvly-saved"], env=self.env)
        self.assertEqual(result.exit_code, 0, msg=result.output)

        config = self.repository.load()
        self.assertEqual(config.tools, {"crawl": {"max_depth": 3}})
        self.assertEqual(config.api_key, "tvly-saved")

    def test_config_set_default_rejects_out_of_range_value(self) -> None:
        result = self.runner.invoke(app, ["config", "set-default", "map", "max_depth", "9"], env=self.env)

        self.assertEqual(result.exit_code, 2)
        self.assertEqual(self.repository.load().tools, {})

    def test_config_show_masks_key(self) -> None:
        self.repository.save(ToolsConfig(api_key="tvly-1234567890", tools={"search": {"topic": "news"}}))

        result = self.runner.invoke(app, ["config", "show"], env=self.env)

        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertNotIn("tvly-1234567890", result.output)
        self.assertIn("search defaults", result.output)

    def test_config_show_reports_environment_and_missing_key(self) -> None:
        result = self.runner.invoke(app, ["config", "show"], env=self.env)
        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertIn("not set", result.output)

        self.env["TAVILY_API_KEY"] = "tvly-from-environment"
        result = self.runner.invoke(app, ["config", "show"], env=self.env)
        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertNotIn("tvly-from-environment", result.output)
        self.assertIn("TAVILY_API_KEY", result.output)
        self.assertNotIn("not set", result.output)

    def test_config_reset_defaults_clears_one_kind(self) -> None:
        self.repository.save(
            ToolsConfig(tools={"crawl": {"max_depth": 3, "limit": 10}, "search": {"topic": "news"}})
        )

        result = self.runner.invoke(app, ["config", "reset-defaults", "crawl"], env=self.env)
        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertEqual(self.repository.load().tools, {"search": {"topic": "news"}})

        result = self.runner.invoke(app, ["config", "reset-defaults", "crawl"], env=self.env)
        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertIn("No defaults stored for crawl", result.output)

    def test_config_reset_defaults_rejects_unknown_kind(self) -> None:
        result = self.runner.invoke(app, ["config", "reset-defaults", "browse"], env=self.env)
        self.assertEqual(result.exit_code, 2)
