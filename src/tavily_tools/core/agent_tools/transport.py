"""HTTP transport for the Tavily REST API."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

DEFAULT_HEADERS = {"Content-Type": "application/json"}


def build_client(proxies: Mapping[str, str] | None = None) -> httpx.AsyncClient:
    """
    Create an HTTP client for a single tool invocation.

    No client-side deadline is set; the request-level ``timeout`` field is
    forwarded to the API, which enforces its own limit.
    """
    mounts = {
        f"{scheme}://": httpx.AsyncHTTPTransport(proxy=url)
        for scheme, url in (proxies or {}).items()
        if url
    }
    return httpx.AsyncClient(timeout=None, mounts=mounts or None)


def endpoint_url(base_url: str, path: str) -> str:
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


async def post_json(
    client: httpx.AsyncClient,
    url: str,
    *,
    api_key: str,
    payload: dict[str, Any],
) -> httpx.Response:
    """Issue exactly one POST; retries are left to the caller."""
    headers = dict(DEFAULT_HEADERS)
    headers["Authorization"] = f"Bearer {api_key}"
    return await client.post(url, json=payload, headers=headers)
