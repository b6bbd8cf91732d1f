import pytest

from tavily_tools.core.agent_tools import ConfigurationError, InputValidationError, tavily_crawl, tavily_search
from tavily_tools.core.agent_tools.schema import build_tool_definition, validate_call_input
from tavily_tools.core.agent_tools.tavily import CRAWL_TOOL, EXTRACT_TOOL, MAP_TOOL, SEARCH_TOOL


@pytest.mark.parametrize("spec", [CRAWL_TOOL, MAP_TOOL], ids=["crawl", "map"])
@pytest.mark.parametrize("depth", [0, 6])
def test_max_depth_out_of_range_is_rejected(spec, depth) -> None:
    with pytest.raises(InputValidationError) as exc_info:
        validate_call_input(spec, {"url": "https://tavily.com", "maxDepth": depth})

    assert "maxDepth" in exc_info.value.message
    assert exc_info.value.category == "validation"


@pytest.mark.parametrize("spec", [CRAWL_TOOL, MAP_TOOL], ids=["crawl", "map"])
def test_max_depth_bounds_are_inclusive(spec) -> None:
    for depth in (1, 5):
        assert validate_call_input(spec, {"url": "https://tavily.com", "maxDepth": depth})["maxDepth"] == depth


@pytest.mark.parametrize("arguments", [None, ["tavily"], "tavily"])
def test_non_mapping_arguments_are_rejected(arguments) -> None:
    with pytest.raises(InputValidationError, match="must be an object"):
        validate_call_input(SEARCH_TOOL, arguments)


def test_blank_query_is_rejected() -> None:
    with pytest.raises(InputValidationError, match="query"):
        validate_call_input(SEARCH_TOOL, {"query": "   "})


def test_missing_primary_argument_is_rejected() -> None:
    with pytest.raises(InputValidationError, match="query"):
        validate_call_input(SEARCH_TOOL, {"searchDepth": "basic"})


def test_developer_only_fields_are_not_accepted_from_agent() -> None:
    with pytest.raises(InputValidationError, match="includeDomains"):
        validate_call_input(SEARCH_TOOL, {"query": "tavily", "includeDomains": ["example.com"]})


def test_enum_values_are_enforced() -> None:
    with pytest.raises(InputValidationError):
        validate_call_input(SEARCH_TOOL, {"query": "tavily", "searchDepth": "deep"})


def test_extract_requires_http_urls() -> None:
    with pytest.raises(InputValidationError):
        validate_call_input(EXTRACT_TOOL, {"urls": ["not a url"]})
    with pytest.raises(InputValidationError):
        validate_call_input(EXTRACT_TOOL, {"urls": []})

    assert validate_call_input(EXTRACT_TOOL, {"urls": ["https://tavily.com"]}) == {"urls": ["https://tavily.com"]}


def test_validated_input_only_contains_supplied_values() -> None:
    call_input = validate_call_input(MAP_TOOL, {"url": "https://tavily.com", "allowExternal": False})
    assert call_input == {"url": "https://tavily.com", "allowExternal": False}


def test_definition_exposes_only_agent_fields() -> None:
    definition = build_tool_definition(MAP_TOOL)

    assert definition["type"] == "function"
    assert definition["function"]["name"] == "tavily_map"
    parameters = definition["function"]["parameters"]
    assert set(parameters["properties"]) == {"url", "maxDepth", "instructions", "allowExternal"}
    assert parameters["required"] == ["url"]
    assert parameters["additionalProperties"] is False
    assert parameters["properties"]["maxDepth"]["minimum"] == 1
    assert parameters["properties"]["maxDepth"]["maximum"] == 5


def test_search_definition_enumerates_depths() -> None:
    properties = build_tool_definition(SEARCH_TOOL)["function"]["parameters"]["properties"]

    assert properties["searchDepth"]["enum"] == ["basic", "advanced"]
    assert properties["query"]["type"] == "string"
    assert "searchDepth" in properties and "timeRange" in properties
    assert "maxResults" not in properties


def test_options_accept_internal_and_wire_names() -> None:
    tool = tavily_search(api_key="tvly-test", searchDepth="advanced", max_results=5)
    assert dict(tool.configuration.values) == {"searchDepth": "advanced", "maxResults": 5}


def test_options_out_of_range_raise_configuration_error() -> None:
    with pytest.raises(ConfigurationError, match="maxDepth"):
        tavily_crawl(api_key="tvly-test", max_depth=6)


def test_unknown_option_raises_configuration_error() -> None:
    with pytest.raises(ConfigurationError, match="colour"):
        tavily_search(api_key="tvly-test", colour="blue")


def test_primary_argument_cannot_be_configured() -> None:
    with pytest.raises(ConfigurationError):
        tavily_search(api_key="tvly-test", query="fixed")


def test_configuration_is_read_only() -> None:
    tool = tavily_search(api_key="tvly-test", maxResults=5)
    with pytest.raises(TypeError):
        tool.configuration.values["maxResults"] = 10  # type: ignore[index]
