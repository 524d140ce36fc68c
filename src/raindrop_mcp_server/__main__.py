"""Entry point for running the Raindrop MCP server."""

import asyncio
import logging
import sys

from pydantic import ValidationError

from .config import get_settings
from .server import run_stdio

logger = logging.getLogger("raindrop_mcp_server")


def main() -> None:
    """Load settings, configure logging on stderr, and serve over stdio."""
    try:
        settings = get_settings()
    except ValidationError as e:
        if any(err["loc"] == ("RAINDROP_API_TOKEN",) for err in e.errors()):
            message = "RAINDROP_API_TOKEN environment variable is required"
        else:
            message = f"Invalid configuration: {e}"
        print(f"ERROR: {message}", file=sys.stderr)
        sys.exit(1)

    # stdout carries the MCP protocol, so logs go to stderr only
    logging.basicConfig(
        level=settings.log_level.upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        asyncio.run(run_stdio(settings))
    except KeyboardInterrupt:
        pass
    except Exception:
        logger.exception("Fatal error")
        sys.exit(1)


if __name__ == "__main__":
    main()
