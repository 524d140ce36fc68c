"""Test fixtures for Raindrop MCP server tests."""

from collections.abc import AsyncGenerator, Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

import pytest
import respx
from mcp.client.session import ClientSession
from mcp.shared.memory import create_connected_server_and_client_session

from raindrop_mcp_server.config import DEFAULT_API_URL
from raindrop_mcp_server.dispatcher import Dispatcher
from raindrop_mcp_server.server import create_server

TEST_TOKEN = "rd_test_token"


@pytest.fixture
def mock_api(request: pytest.FixtureRequest) -> respx.MockRouter:
    """Context manager for mocking API responses.

    Indirect parametrization with False disables respx's teardown check
    that every registered route was called.
    """
    assert_all_called = getattr(request, "param", True)
    with respx.mock(base_url=DEFAULT_API_URL, assert_all_called=assert_all_called) as respx_mock:
        yield respx_mock


@pytest.fixture
async def dispatcher(mock_api: respx.MockRouter) -> AsyncGenerator[Dispatcher]:  # noqa: ARG001
    """Dispatcher whose HTTP client is created inside the respx context."""
    async with Dispatcher(TEST_TOKEN, base_url=DEFAULT_API_URL) as d:
        yield d


@pytest.fixture
def connect_mcp(
    dispatcher: Dispatcher,
) -> Callable[[], AbstractAsyncContextManager[ClientSession]]:
    """
    Return a connector for an in-memory MCP client session.

    Calls go through the real MCP protocol (initialize, list_tools,
    call_tool) with API responses mocked by respx. The session holds an
    anyio task group, so tests enter it with `async with connect_mcp() as
    session:` and it is torn down in the same task that opened it.
    """

    def connect() -> AbstractAsyncContextManager[ClientSession]:
        return create_connected_server_and_client_session(create_server(dispatcher))

    return connect


@pytest.fixture
def sample_raindrop() -> dict[str, Any]:
    """Sample single-raindrop response data."""
    return {
        "result": True,
        "item": {
            "_id": 123,
            "link": "https://example.com",
            "title": "Example Site",
            "excerpt": "An example website",
            "tags": ["example", "test"],
            "important": False,
            "collection": {"$id": 42},
            "created": "2024-01-01T00:00:00.000Z",
            "lastUpdate": "2024-01-01T00:00:00.000Z",
        },
    }


@pytest.fixture
def sample_raindrops(sample_raindrop: dict[str, Any]) -> dict[str, Any]:
    """Sample paginated raindrops list response."""
    return {
        "result": True,
        "items": [sample_raindrop["item"]],
        "count": 1,
        "collectionId": 0,
    }


@pytest.fixture
def sample_collection() -> dict[str, Any]:
    """Sample single-collection response data."""
    return {
        "result": True,
        "item": {
            "_id": 42,
            "title": "Reading",
            "view": "list",
            "public": False,
            "count": 10,
        },
    }


@pytest.fixture
def sample_tags() -> dict[str, Any]:
    """Sample tags response data."""
    return {
        "result": True,
        "items": [
            {"_id": "python", "count": 10},
            {"_id": "javascript", "count": 5},
            {"_id": "web-dev", "count": 3},
        ],
    }
