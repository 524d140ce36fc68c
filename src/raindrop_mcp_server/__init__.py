"""MCP server for the Raindrop.io bookmarks API."""

__version__ = "1.0.0"

from .config import Settings, get_settings  # noqa: E402
from .dispatcher import Dispatcher  # noqa: E402
from .server import create_server  # noqa: E402

__all__ = ["Dispatcher", "Settings", "__version__", "create_server", "get_settings"]
