"""
Shared API error parsing for the Raindrop MCP server.

The parsing extracts a semantic category from HTTP errors (used for logging)
and builds the caller-facing message, which always carries the HTTP status
and the raw response body so remote failures are surfaced verbatim.
"""

from dataclasses import dataclass
from typing import Literal

import httpx

ErrorCategory = Literal[
    "auth",          # 401 - Invalid or expired token
    "forbidden",     # 403 - Access denied
    "not_found",     # 404 - Resource not found
    "validation",    # 400/422 - Rejected arguments
    "rate_limited",  # 429 - Too many requests
    "internal",      # 5xx or unexpected errors
]


@dataclass
class ParsedApiError:
    """Parsed API error with semantic category and message."""

    category: ErrorCategory
    message: str
    status_code: int


def parse_http_error(e: httpx.HTTPStatusError) -> ParsedApiError:
    """
    Parse HTTP error into a category and a caller-facing message.

    Args:
        e: The HTTP status error from httpx

    Returns:
        ParsedApiError whose message has the form
        ``Raindrop API error (<status>): <body>``
    """
    status = e.response.status_code
    message = f"Raindrop API error ({status}): {_safe_get_text(e)}"
    return ParsedApiError(_categorize(status), message, status)


def _categorize(status: int) -> ErrorCategory:  # noqa: PLR0911
    if status == 401:
        return "auth"
    if status == 403:
        return "forbidden"
    if status == 404:
        return "not_found"
    if status in (400, 422):
        return "validation"
    if status == 429:
        return "rate_limited"
    return "internal"


def _safe_get_text(e: httpx.HTTPStatusError) -> str:
    """Safely extract the raw body text from an error response."""
    try:
        return e.response.text
    except (httpx.ResponseNotRead, UnicodeDecodeError):
        return ""
