"""Tool catalog: the fixed, ordered list of tool descriptors exposed over MCP."""

from pathlib import Path
from typing import Any

from mcp import types

from shared.mcp_utils import load_tool_descriptions

_DIR = Path(__file__).parent
_TOOLS = load_tool_descriptions(_DIR)

COLLECTION_VIEWS = ["list", "simple", "grid", "masonry"]

_READ_ONLY = types.ToolAnnotations(readOnlyHint=True)
_WRITE = types.ToolAnnotations(readOnlyHint=False, destructiveHint=False)
_DESTRUCTIVE = types.ToolAnnotations(readOnlyHint=False, destructiveHint=True)


def _param(tool: str, name: str) -> str:
    return _TOOLS[tool]["parameters"][name]


def _integer(tool: str, name: str) -> dict[str, Any]:
    return {"type": "integer", "description": _param(tool, name)}


def _string(tool: str, name: str) -> dict[str, Any]:
    return {"type": "string", "description": _param(tool, name)}


def _boolean(tool: str, name: str) -> dict[str, Any]:
    return {"type": "boolean", "description": _param(tool, name)}


def _string_array(tool: str, name: str) -> dict[str, Any]:
    return {"type": "array", "items": {"type": "string"}, "description": _param(tool, name)}


def _view(tool: str) -> dict[str, Any]:
    return {"type": "string", "enum": COLLECTION_VIEWS, "description": _param(tool, "view")}


def _page(tool: str) -> dict[str, Any]:
    return {"type": "integer", "description": _param(tool, "page")}


def _perpage(tool: str) -> dict[str, Any]:
    return {"type": "integer", "description": _param(tool, "perpage")}


def _tool(
    name: str,
    properties: dict[str, Any],
    required: list[str],
    annotations: types.ToolAnnotations,
) -> types.Tool:
    return types.Tool(
        name=name,
        description=_TOOLS[name]["description"],
        inputSchema={
            "type": "object",
            "properties": properties,
            "required": required,
        },
        annotations=annotations,
    )


def list_tools() -> list[types.Tool]:
    """Return the tool descriptors in catalog order."""
    return [
        _tool("get_user", {}, [], _READ_ONLY),
        _tool(
            "get_raindrop",
            {"id": _integer("get_raindrop", "id")},
            ["id"],
            _READ_ONLY,
        ),
        _tool(
            "create_raindrop",
            {
                "link": _string("create_raindrop", "link"),
                "title": _string("create_raindrop", "title"),
                "excerpt": _string("create_raindrop", "excerpt"),
                "tags": _string_array("create_raindrop", "tags"),
                "collectionId": _integer("create_raindrop", "collectionId"),
                "pleaseParse": _boolean("create_raindrop", "pleaseParse"),
            },
            ["link"],
            _WRITE,
        ),
        _tool(
            "update_raindrop",
            {
                "id": _integer("update_raindrop", "id"),
                "link": _string("update_raindrop", "link"),
                "title": _string("update_raindrop", "title"),
                "excerpt": _string("update_raindrop", "excerpt"),
                "tags": _string_array("update_raindrop", "tags"),
                "important": _boolean("update_raindrop", "important"),
                "collectionId": _integer("update_raindrop", "collectionId"),
            },
            ["id"],
            _WRITE,
        ),
        _tool(
            "delete_raindrop",
            {"id": _integer("delete_raindrop", "id")},
            ["id"],
            _DESTRUCTIVE,
        ),
        _tool(
            "get_raindrops",
            {
                "collectionId": _integer("get_raindrops", "collectionId"),
                "page": _page("get_raindrops"),
                "perpage": _perpage("get_raindrops"),
                "search": _string("get_raindrops", "search"),
            },
            ["collectionId"],
            _READ_ONLY,
        ),
        _tool("get_collections", {}, [], _READ_ONLY),
        _tool("get_collections_nested", {}, [], _READ_ONLY),
        _tool(
            "get_collection",
            {"id": _integer("get_collection", "id")},
            ["id"],
            _READ_ONLY,
        ),
        _tool(
            "create_collection",
            {
                "title": _string("create_collection", "title"),
                "parentId": _integer("create_collection", "parentId"),
                "view": _view("create_collection"),
                "public": _boolean("create_collection", "public"),
            },
            ["title"],
            _WRITE,
        ),
        _tool(
            "update_collection",
            {
                "id": _integer("update_collection", "id"),
                "title": _string("update_collection", "title"),
                "view": _view("update_collection"),
                "public": _boolean("update_collection", "public"),
                "parentId": _integer("update_collection", "parentId"),
            },
            ["id"],
            _WRITE,
        ),
        _tool(
            "delete_collection",
            {"id": _integer("delete_collection", "id")},
            ["id"],
            _DESTRUCTIVE,
        ),
        _tool(
            "get_tags",
            {"collectionId": _integer("get_tags", "collectionId")},
            [],
            _READ_ONLY,
        ),
        _tool(
            "rename_tag",
            {
                "collectionId": _integer("rename_tag", "collectionId"),
                "tags": _string_array("rename_tag", "tags"),
                "newTag": _string("rename_tag", "newTag"),
            },
            ["collectionId", "tags", "newTag"],
            _WRITE,
        ),
        _tool(
            "delete_tag",
            {
                "collectionId": _integer("delete_tag", "collectionId"),
                "tags": _string_array("delete_tag", "tags"),
            },
            ["collectionId", "tags"],
            _DESTRUCTIVE,
        ),
        _tool(
            "search_raindrops",
            {
                "search": _string("search_raindrops", "search"),
                "page": _page("search_raindrops"),
                "perpage": _perpage("search_raindrops"),
            },
            ["search"],
            _READ_ONLY,
        ),
    ]


def tool_names() -> list[str]:
    """Return the tool names in catalog order."""
    return [tool.name for tool in list_tools()]
