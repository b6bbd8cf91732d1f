import asyncio
import json

import httpx
import pytest

from tavily_tools.core.agent_tools import ToolDispatcher, create_all_tools, tavily_map, tavily_search


def _dispatcher(handler) -> ToolDispatcher:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ToolDispatcher(create_all_tools(api_key="tvly-test", client=client))


def _ok(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={"path": request.url.path, "payload": json.loads(request.content)})


def test_openai_style_tool_call_is_executed() -> None:
    dispatcher = _dispatcher(_ok)
    calls = [
        {
            "id": "call_1",
            "type": "function",
            "function": {"name": "tavily_search", "arguments": json.dumps({"query": "tavily"})},
        }
    ]

    records = asyncio.run(dispatcher.handle_tool_calls(calls))

    assert len(records) == 1
    record = records[0]
    assert record["success"] is True
    assert record["id"] == "call_1"
    assert json.loads(record["result"]) == {"path": "/search", "payload": {"query": "tavily"}}


def test_anthropic_style_tool_call_uses_input_block() -> None:
    dispatcher = _dispatcher(_ok)
    calls = [{"type": "tool_use", "id": "toolu_1", "name": "tavily_map", "input": {"url": "https://tavily.com"}}]

    records = asyncio.run(dispatcher.handle_tool_calls(calls))

    assert records[0]["success"] is True
    assert json.loads(records[0]["result"])["path"] == "/map"


def test_gemini_function_calls_are_executed() -> None:
    dispatcher = _dispatcher(_ok)
    calls = [{"name": "tavily_extract", "args": {"urls": ["https://tavily.com"]}}]

    records = asyncio.run(dispatcher.handle_function_calls(calls))

    payload = json.loads(records[0]["result"])["payload"]
    assert payload["urls"] == ["https://tavily.com"]
    assert payload["extract_depth"] == "basic"


def test_failures_become_error_records() -> None:
    dispatcher = _dispatcher(lambda request: httpx.Response(429, json={"error": "rate limited"}))

    records = asyncio.run(
        dispatcher.handle_function_calls(
            [
                {"name": "tavily_search", "args": {"query": "tavily"}},
                {"name": "tavily_crawl", "args": {"url": "https://tavily.com", "maxDepth": 9}},
                {"name": "web_browse", "args": {}},
            ]
        )
    )

    assert ["error" in record for record in records] == [True, True, True]
    assert "rate limited" in records[0]["error"]
    assert "maxDepth" in records[1]["error"]
    assert records[2]["error"] == "unsupported tool 'web_browse'"
    assert json.loads(records[0]["result"]) == {"error": records[0]["error"]}


def test_invalid_json_arguments_are_reported() -> None:
    dispatcher = _dispatcher(_ok)
    calls = [{"function": {"name": "tavily_search", "arguments": "{not json"}}]

    records = asyncio.run(dispatcher.handle_tool_calls(calls))

    assert records[0]["error"] == "invalid JSON in tool call arguments"


@pytest.mark.parametrize("raw_args", ["null", "[1]", '"quantum"', "42"])
def test_non_object_json_arguments_do_not_abort_the_batch(raw_args: str) -> None:
    dispatcher = _dispatcher(_ok)
    calls = [
        {"id": "call_bad", "function": {"name": "tavily_search", "arguments": raw_args}},
        {"id": "call_ok", "function": {"name": "tavily_search", "arguments": json.dumps({"query": "tavily"})}},
    ]

    records = asyncio.run(dispatcher.handle_tool_calls(calls))

    assert len(records) == 2
    assert records[0]["id"] == "call_bad"
    assert records[0]["error"] == "tool call arguments must be a JSON object"
    assert records[1]["id"] == "call_ok"
    assert records[1]["success"] is True


def test_non_object_function_call_args_are_reported() -> None:
    dispatcher = _dispatcher(_ok)
    calls = [
        {"name": "tavily_search", "args": ["tavily"]},
        {"name": "tavily_search", "args": {"query": "tavily"}},
    ]

    records = asyncio.run(dispatcher.handle_function_calls(calls))

    assert records[0]["error"] == "function call args must be an object"
    assert records[1]["success"] is True


def test_empty_calls_return_no_records() -> None:
    dispatcher = _dispatcher(_ok)
    assert asyncio.run(dispatcher.handle_tool_calls(None)) == []
    assert asyncio.run(dispatcher.handle_function_calls([])) == []


def test_provider_formats_share_the_parameter_schema() -> None:
    dispatcher = ToolDispatcher([tavily_search(api_key="k"), tavily_map(api_key="k")])

    openai_tools = dispatcher.definitions
    anthropic_tools = dispatcher.anthropic_definitions
    gemini_tools = dispatcher.gemini_declarations

    assert dispatcher.tool_names == ["tavily_search", "tavily_map"]
    assert anthropic_tools[0]["input_schema"] == openai_tools[0]["function"]["parameters"]
    assert anthropic_tools[1]["name"] == "tavily_map"
    assert "additionalProperties" not in gemini_tools[0]["parameters"]
    assert gemini_tools[0]["parameters"]["properties"] == openai_tools[0]["function"]["parameters"]["properties"]


def test_duplicate_tool_names_are_rejected() -> None:
    with pytest.raises(ValueError, match="duplicate"):
        ToolDispatcher([tavily_search(api_key="k"), tavily_search(api_key="k")])
