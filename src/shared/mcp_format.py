"""Shared formatting utilities for MCP tool results."""

import json
from typing import Any

from mcp import types


def format_json(data: Any) -> str:
    """Render an API payload as pretty-printed JSON text."""
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)


def format_confirmation(confirmation: str, data: Any) -> str:
    """
    Prefix a rendered payload with a short confirmation line.

    Example: format_confirmation("✓ Done", {"result": True})
    Returns: '✓ Done\\n\\n{\\n  "result": true\\n}'
    """
    return f"{confirmation}\n\n{format_json(data)}"


def text_result(text: str, *, is_error: bool = False) -> types.CallToolResult:
    """Wrap text in a single-item CallToolResult."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)],
        isError=is_error,
    )


def error_result(message: str) -> types.CallToolResult:
    """Build the error envelope returned for any failed call."""
    return text_result(f"Error: {message}", is_error=True)
