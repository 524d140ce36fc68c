"""
MCP Server for Raindrop.io bookmarks.

Exposes the Raindrop REST API (bookmarks, collections, tags, user) as MCP
tools over stdio. Tool calls are delegated to a Dispatcher that owns the
bearer token and HTTP client.
"""

import logging
from pathlib import Path
from typing import Any

from mcp import types
from mcp.server.lowlevel import NotificationOptions, Server
from mcp.server.stdio import stdio_server

from shared.mcp_utils import load_instructions

from . import __version__
from .catalog import list_tools
from .config import Settings
from .dispatcher import Dispatcher

logger = logging.getLogger(__name__)

_DIR = Path(__file__).parent

SERVER_NAME = "raindrop-mcp-server"


def create_server(dispatcher: Dispatcher) -> Server:
    """Create the MCP server with tool handlers bound to the given dispatcher."""
    server = Server(
        SERVER_NAME,
        version=__version__,
        instructions=load_instructions(_DIR),
    )

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        """List available tools."""
        return list_tools()

    @server.call_tool()
    async def handle_call_tool(
        name: str,
        arguments: dict[str, Any] | None,
    ) -> types.CallToolResult:
        """Handle tool calls."""
        return await dispatcher.call(name, arguments)

    return server


async def run_stdio(settings: Settings) -> None:
    """Serve MCP over stdin/stdout until the client disconnects."""
    async with Dispatcher.from_settings(settings) as dispatcher:
        server = create_server(dispatcher)
        async with stdio_server() as (read_stream, write_stream):
            logger.info("Raindrop MCP Server running on stdio")
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(
                    notification_options=NotificationOptions(),
                ),
            )
