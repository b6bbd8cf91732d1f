"""Failure taxonomy and response normalization for Tavily tool calls."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import httpx

if TYPE_CHECKING:
    from pydantic import ValidationError

    from .fields import ToolSpec

logger = logging.getLogger("tavily_tools")

MISSING_API_KEY_MESSAGE = (
    "Tavily API key is required. Set it via options or TAVILY_API_KEY environment variable."
)


class TavilyToolError(Exception):
    """Single failure signal surfaced to the invoking agent framework."""

    category = "tool"

    def __init__(self, message: str, *, tool_kind: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.tool_kind = tool_kind


class ConfigurationError(TavilyToolError):
    """Missing credential or invalid construction-time options."""

    category = "configuration"


class InputValidationError(TavilyToolError):
    """Agent-supplied arguments do not match the declared input shape."""

    category = "validation"

    def __init__(self, message: str, *, tool_kind: str | None = None, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message, tool_kind=tool_kind)
        self.errors = errors or []

    @classmethod
    def from_validation_error(cls, spec: ToolSpec, exc: ValidationError) -> InputValidationError:
        errors = exc.errors(include_url=False)
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'input'}: {error['msg']}" for error in errors
        )
        return cls(
            f"Invalid input for {spec.name}: {problems}",
            tool_kind=spec.kind,
            errors=[{"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]} for error in errors],
        )


class TransportError(TavilyToolError):
    """The HTTP round-trip could not complete."""

    category = "transport"


class ApiError(TavilyToolError):
    """The remote service answered with a failure."""

    category = "api"

    def __init__(
        self,
        message: str,
        *,
        tool_kind: str | None = None,
        status_code: int,
        reason: str = "",
        detail: Any = None,
    ) -> None:
        super().__init__(message, tool_kind=tool_kind)
        self.status_code = status_code
        self.reason = reason
        self.detail = {} if detail is None else detail


def missing_api_key(spec: ToolSpec) -> ConfigurationError:
    return ConfigurationError(MISSING_API_KEY_MESSAGE, tool_kind=spec.kind)


def transport_failure(spec: ToolSpec, exc: httpx.RequestError) -> TransportError:
    return TransportError(
        f"Failed to {spec.verb} with Tavily: transport error ({type(exc).__name__}): {exc}",
        tool_kind=spec.kind,
    )


def _error_detail(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return {}


def parse_response(spec: ToolSpec, response: httpx.Response) -> Any:
    """
    Classify an HTTP response as success or failure.

    Args:
        spec: The tool kind that issued the request.
        response: The raw HTTP response.

    Returns:
        The parsed JSON body, unmodified.

    Raises:
        ApiError: For any non-2xx status, or a 2xx body that is not JSON.
    """
    if not response.is_success:
        detail = _error_detail(response)
        logger.debug("Tavily %s failed with HTTP %s", spec.kind, response.status_code)
        raise ApiError(
            f"Failed to {spec.verb} with Tavily: API error {response.status_code} "
            f"{response.reason_phrase}. {json.dumps(detail)}",
            tool_kind=spec.kind,
            status_code=response.status_code,
            reason=response.reason_phrase,
            detail=detail,
        )

    try:
        return response.json()
    except ValueError as exc:
        raise ApiError(
            f"Failed to {spec.verb} with Tavily: API error {response.status_code}. Response body is not valid JSON.",
            tool_kind=spec.kind,
            status_code=response.status_code,
            reason=response.reason_phrase,
        ) from exc
