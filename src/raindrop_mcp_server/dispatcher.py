"""
Dispatcher mapping tool calls to Raindrop API requests.

Each tool name maps to an Operation: a request builder that turns the
argument bag into exactly one ApiRequest, plus an optional confirmation
line for mutating operations. The dispatcher issues the request and wraps
the result (or any failure) in a CallToolResult; it never raises.
"""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Self

import httpx
from mcp import types

from shared.api_errors import parse_http_error
from shared.mcp_format import error_result, format_confirmation, format_json, text_result

from .api_client import api_request, create_http_client
from .config import DEFAULT_API_URL, Settings

logger = logging.getLogger(__name__)


class MissingParameterError(ValueError):
    """Raised when a required tool argument is absent."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Missing required parameter: {name}")
        self.name = name


@dataclass(frozen=True)
class ApiRequest:
    """A single outbound API call."""

    method: str
    path: str
    params: dict[str, Any] | None = None
    json: dict[str, Any] | None = None


@dataclass(frozen=True)
class Operation:
    """Request builder plus optional confirmation line for one tool."""

    build_request: Callable[[dict[str, Any]], ApiRequest]
    confirmation: Callable[[dict[str, Any]], str] | None = None

    def confirm(self, arguments: dict[str, Any]) -> str | None:
        """Confirmation line for a mutating call, or None for reads."""
        if self.confirmation is None:
            return None
        return self.confirmation(arguments)

    @staticmethod
    def render(confirmation: str | None, data: Any) -> str:
        """Render a successful API response as tool output text."""
        if confirmation is None:
            return format_json(data)
        return format_confirmation(confirmation, data)


# --- Argument helpers ---


def _normalize(value: Any) -> Any:
    """Collapse integral floats (123.0) to int so they render as 123 in paths and queries."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _require(arguments: dict[str, Any], name: str) -> Any:
    value = arguments.get(name)
    if value is None:
        raise MissingParameterError(name)
    return value


def _copy_present(
    arguments: dict[str, Any],
    target: dict[str, Any],
    fields: tuple[str, ...],
) -> dict[str, Any]:
    """Copy fields that were provided with non-None values (False/0/"" are kept)."""
    for field in fields:
        if arguments.get(field) is not None:
            target[field] = arguments[field]
    return target


def _ref(arguments: dict[str, Any], source: str, target: str, body: dict[str, Any]) -> None:
    """Add a {"$id": ...} reference (collection/parent) when the source field is present."""
    if arguments.get(source) is not None:
        body[target] = {"$id": arguments[source]}


# --- Request builders ---


def _get_user(arguments: dict[str, Any]) -> ApiRequest:  # noqa: ARG001
    return ApiRequest("GET", "/user")


def _get_raindrop(arguments: dict[str, Any]) -> ApiRequest:
    return ApiRequest("GET", f"/raindrop/{_require(arguments, 'id')}")


def _create_raindrop(arguments: dict[str, Any]) -> ApiRequest:
    body: dict[str, Any] = {"link": _require(arguments, "link")}
    _copy_present(arguments, body, ("title", "excerpt", "tags"))
    _ref(arguments, "collectionId", "collection", body)
    if arguments.get("pleaseParse"):
        # The API triggers background metadata parsing on an empty-object marker
        body["pleaseParse"] = {}
    return ApiRequest("POST", "/raindrop", json=body)


def _update_raindrop(arguments: dict[str, Any]) -> ApiRequest:
    raindrop_id = _require(arguments, "id")
    body = _copy_present(arguments, {}, ("link", "title", "excerpt", "tags", "important"))
    _ref(arguments, "collectionId", "collection", body)
    return ApiRequest("PUT", f"/raindrop/{raindrop_id}", json=body)


def _delete_raindrop(arguments: dict[str, Any]) -> ApiRequest:
    return ApiRequest("DELETE", f"/raindrop/{_require(arguments, 'id')}")


def _get_raindrops(arguments: dict[str, Any]) -> ApiRequest:
    collection_id = _require(arguments, "collectionId")
    params = _copy_present(arguments, {}, ("page", "perpage", "search"))
    return ApiRequest("GET", f"/raindrops/{collection_id}", params=params or None)


def _search_raindrops(arguments: dict[str, Any]) -> ApiRequest:
    params: dict[str, Any] = {"search": _require(arguments, "search")}
    _copy_present(arguments, params, ("page", "perpage"))
    return ApiRequest("GET", "/raindrops/0", params=params)


def _get_collections(arguments: dict[str, Any]) -> ApiRequest:  # noqa: ARG001
    return ApiRequest("GET", "/collections")


def _get_collections_nested(arguments: dict[str, Any]) -> ApiRequest:  # noqa: ARG001
    return ApiRequest("GET", "/collections/childrens")


def _get_collection(arguments: dict[str, Any]) -> ApiRequest:
    return ApiRequest("GET", f"/collection/{_require(arguments, 'id')}")


def _create_collection(arguments: dict[str, Any]) -> ApiRequest:
    body: dict[str, Any] = {"title": _require(arguments, "title")}
    _copy_present(arguments, body, ("view", "public"))
    _ref(arguments, "parentId", "parent", body)
    return ApiRequest("POST", "/collection", json=body)


def _update_collection(arguments: dict[str, Any]) -> ApiRequest:
    collection_id = _require(arguments, "id")
    body = _copy_present(arguments, {}, ("title", "view", "public"))
    _ref(arguments, "parentId", "parent", body)
    return ApiRequest("PUT", f"/collection/{collection_id}", json=body)


def _delete_collection(arguments: dict[str, Any]) -> ApiRequest:
    return ApiRequest("DELETE", f"/collection/{_require(arguments, 'id')}")


def _get_tags(arguments: dict[str, Any]) -> ApiRequest:
    collection_id = arguments.get("collectionId")
    if collection_id is None:
        return ApiRequest("GET", "/tags")
    return ApiRequest("GET", f"/tags/{collection_id}")


def _rename_tag(arguments: dict[str, Any]) -> ApiRequest:
    collection_id = _require(arguments, "collectionId")
    body = {"tags": _require(arguments, "tags"), "new": _require(arguments, "newTag")}
    return ApiRequest("PUT", f"/tags/{collection_id}", json=body)


def _delete_tag(arguments: dict[str, Any]) -> ApiRequest:
    collection_id = _require(arguments, "collectionId")
    body = {"tags": _require(arguments, "tags")}
    return ApiRequest("DELETE", f"/tags/{collection_id}", json=body)


OPERATIONS: dict[str, Operation] = {
    "get_user": Operation(_get_user),
    "get_raindrop": Operation(_get_raindrop),
    "create_raindrop": Operation(
        _create_raindrop,
        lambda _: "✓ Bookmark created successfully!",
    ),
    "update_raindrop": Operation(
        _update_raindrop,
        lambda _: "✓ Bookmark updated successfully!",
    ),
    "delete_raindrop": Operation(
        _delete_raindrop,
        lambda args: f"✓ Bookmark {args['id']} deleted successfully (moved to Trash)",
    ),
    "get_raindrops": Operation(_get_raindrops),
    "get_collections": Operation(_get_collections),
    "get_collections_nested": Operation(_get_collections_nested),
    "get_collection": Operation(_get_collection),
    "create_collection": Operation(
        _create_collection,
        lambda _: "✓ Collection created successfully!",
    ),
    "update_collection": Operation(
        _update_collection,
        lambda _: "✓ Collection updated successfully!",
    ),
    "delete_collection": Operation(
        _delete_collection,
        lambda args: f"✓ Collection {args['id']} deleted successfully",
    ),
    "get_tags": Operation(_get_tags),
    "rename_tag": Operation(
        _rename_tag,
        lambda args: f'✓ Tags renamed to "{args["newTag"]}" successfully!',
    ),
    "delete_tag": Operation(
        _delete_tag,
        lambda args: f"✓ Tags {', '.join(map(str, args['tags']))} deleted successfully",
    ),
    "search_raindrops": Operation(_search_raindrops),
}


class Dispatcher:
    """
    Executes tool calls against the Raindrop API.

    The bearer token is fixed at construction. The HTTP client is created
    here unless one is injected; only a client created here is closed by
    aclose().
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._token = token
        self._owns_client = client is None
        self._client = client if client is not None else create_http_client(base_url, timeout)

    @classmethod
    def from_settings(cls, settings: Settings) -> Self:
        """Build a dispatcher from loaded settings."""
        return cls(
            settings.raindrop_api_token,
            base_url=settings.api_url,
            timeout=settings.api_timeout,
        )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this dispatcher created it."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()

    async def call(
        self,
        name: str,
        arguments: dict[str, Any] | None,
    ) -> types.CallToolResult:
        """Run one tool call and return its result envelope."""
        operation = OPERATIONS.get(name)
        if operation is None:
            logger.warning("Unknown tool requested: %s", name)
            return error_result(f"Unknown tool: {name}")

        arguments = {key: _normalize(value) for key, value in (arguments or {}).items()}
        try:
            request = operation.build_request(arguments)
            # Confirmation text must not fail once the mutation is applied
            confirmation = operation.confirm(arguments)
            logger.debug("Tool %s -> %s %s", name, request.method, request.path)
            data = await api_request(
                self._client,
                request.method,
                request.path,
                self._token,
                params=request.params,
                json=request.json,
            )
            return text_result(operation.render(confirmation, data))
        except MissingParameterError as e:
            return error_result(str(e))
        except httpx.HTTPStatusError as e:
            info = parse_http_error(e)
            logger.warning("Tool %s failed (%s): %s", name, info.category, info.message)
            return error_result(info.message)
        except httpx.RequestError as e:
            logger.warning("Tool %s failed: API unavailable: %s", name, e)
            return error_result(f"Raindrop API unavailable: {e}")
        except json.JSONDecodeError:
            logger.warning("Tool %s failed: invalid JSON in API response", name)
            return error_result("Invalid JSON in Raindrop API response")
        except Exception as e:
            logger.exception("Unexpected error in tool %s", name)
            return error_result(str(e))
