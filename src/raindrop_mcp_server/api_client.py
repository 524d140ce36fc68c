"""HTTP client helpers for forwarding requests to the Raindrop API."""

from typing import Any

import httpx

from . import __version__

# Returned in place of a body for 204 No Content responses
NO_CONTENT_RESULT: dict[str, Any] = {"success": True}


def create_http_client(base_url: str, timeout: float) -> httpx.AsyncClient:
    """Create the AsyncClient used for all API requests."""
    return httpx.AsyncClient(base_url=base_url, timeout=timeout)


def _get_headers(token: str) -> dict[str, str]:
    """Get common headers for API requests."""
    return {
        "Authorization": f"Bearer {token}",
        "User-Agent": f"raindrop-mcp-server/{__version__}",
    }


async def api_request(
    client: httpx.AsyncClient,
    method: str,
    path: str,
    token: str,
    params: dict[str, Any] | None = None,
    json: dict[str, Any] | None = None,
) -> Any:
    """
    Make an authenticated request to the API.

    Raises:
        httpx.HTTPStatusError: On any non-2xx response.
        httpx.RequestError: On network failures.
    """
    response = await client.request(
        method,
        path,
        params=params,
        json=json,
        headers=_get_headers(token),
    )
    response.raise_for_status()
    if response.status_code == 204:
        return dict(NO_CONTENT_RESULT)
    return response.json()
