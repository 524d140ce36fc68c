"""Tests for the Raindrop API client helper functions."""

import json

import httpx
import pytest
import respx
from httpx import Response

from raindrop_mcp_server import __version__
from raindrop_mcp_server.api_client import api_request, create_http_client

BASE_URL = "https://api.raindrop.io/rest/v1"


@pytest.fixture
def mock_api() -> respx.MockRouter:
    """Context manager for mocking API responses."""
    with respx.mock(base_url=BASE_URL) as respx_mock:
        yield respx_mock


@pytest.mark.asyncio
async def test__api_request__authorization_header_set(mock_api: respx.MockRouter) -> None:
    """Test that Authorization header carries the bearer token."""
    mock_api.get("/user").mock(return_value=Response(200, json={}))

    async with create_http_client(BASE_URL, 30.0) as client:
        await api_request(client, "GET", "/user", "rd_test_token_12345")

    assert mock_api.calls[0].request.headers["authorization"] == "Bearer rd_test_token_12345"


@pytest.mark.asyncio
async def test__api_request__user_agent_header_set(mock_api: respx.MockRouter) -> None:
    """Test that User-Agent identifies the server and version."""
    mock_api.get("/user").mock(return_value=Response(200, json={}))

    async with create_http_client(BASE_URL, 30.0) as client:
        await api_request(client, "GET", "/user", "rd_test_token")

    assert mock_api.calls[0].request.headers["user-agent"] == f"raindrop-mcp-server/{__version__}"


@pytest.mark.asyncio
async def test__api_request__path_joined_to_base_url(mock_api: respx.MockRouter) -> None:
    """Test that paths are appended to the /rest/v1 base path."""
    mock_api.get("/raindrop/5").mock(return_value=Response(200, json={}))

    async with create_http_client(BASE_URL, 30.0) as client:
        await api_request(client, "GET", "/raindrop/5", "rd_test_token")

    assert str(mock_api.calls[0].request.url) == f"{BASE_URL}/raindrop/5"


@pytest.mark.asyncio
async def test__api_request__json_body_sets_content_type(mock_api: respx.MockRouter) -> None:
    """Test that a JSON body is sent with a JSON content type."""
    mock_api.post("/raindrop").mock(return_value=Response(200, json={"result": True}))

    async with create_http_client(BASE_URL, 30.0) as client:
        await api_request(client, "POST", "/raindrop", "rd_test_token", json={"link": "x"})

    request = mock_api.calls[0].request
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content) == {"link": "x"}


@pytest.mark.asyncio
async def test__api_request__delete_with_body(mock_api: respx.MockRouter) -> None:
    """Test that DELETE requests can carry a JSON body."""
    mock_api.delete("/tags/0").mock(return_value=Response(200, json={"result": True}))

    async with create_http_client(BASE_URL, 30.0) as client:
        await api_request(client, "DELETE", "/tags/0", "rd_test_token", json={"tags": ["a"]})

    assert json.loads(mock_api.calls[0].request.content) == {"tags": ["a"]}


@pytest.mark.asyncio
async def test__api_request__no_body_without_json(mock_api: respx.MockRouter) -> None:
    """Test that requests without a body send no content."""
    mock_api.delete("/raindrop/5").mock(return_value=Response(200, json={"result": True}))

    async with create_http_client(BASE_URL, 30.0) as client:
        await api_request(client, "DELETE", "/raindrop/5", "rd_test_token")

    assert mock_api.calls[0].request.content == b""


@pytest.mark.asyncio
async def test__api_request__returns_parsed_json(mock_api: respx.MockRouter) -> None:
    """Test that the parsed JSON body is returned."""
    mock_api.get("/user").mock(
        return_value=Response(200, json={"result": True, "user": {"_id": 1}}),
    )

    async with create_http_client(BASE_URL, 30.0) as client:
        result = await api_request(client, "GET", "/user", "rd_test_token")

    assert result == {"result": True, "user": {"_id": 1}}


@pytest.mark.asyncio
async def test__api_request__204_returns_success(mock_api: respx.MockRouter) -> None:
    """Test that 204 No Content yields a synthetic success result."""
    mock_api.delete("/collection/9").mock(return_value=Response(204))

    async with create_http_client(BASE_URL, 30.0) as client:
        result = await api_request(client, "DELETE", "/collection/9", "rd_test_token")

    assert result == {"success": True}


@pytest.mark.asyncio
async def test__api_request__non_2xx_raises_status_error(mock_api: respx.MockRouter) -> None:
    """Test that error statuses raise HTTPStatusError with the raw body available."""
    mock_api.get("/raindrop/404").mock(return_value=Response(404, text="Not Found"))

    async with create_http_client(BASE_URL, 30.0) as client:
        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            await api_request(client, "GET", "/raindrop/404", "rd_test_token")

    assert exc_info.value.response.status_code == 404
    assert exc_info.value.response.text == "Not Found"


@pytest.mark.asyncio
async def test__api_request__network_error_propagates(mock_api: respx.MockRouter) -> None:
    """Test that connection failures surface as httpx.RequestError."""
    mock_api.get("/user").mock(side_effect=httpx.ConnectError("Connection refused"))

    async with create_http_client(BASE_URL, 30.0) as client:
        with pytest.raises(httpx.RequestError):
            await api_request(client, "GET", "/user", "rd_test_token")
