"""Main entry point for the Friday Data MCP server."""

from __future__ import annotations

import json
import logging
import sys

from friday_mcp.config import Settings
from friday_mcp.errors import ConfigurationError
from friday_mcp.server import run_server


def configure_logging(level: str) -> None:
    """Send log records to stderr, stdout carries the MCP protocol."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def main() -> int:
    """Main entry point.

    Returns:
        Process exit code
    """
    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        print(json.dumps({"error": e.message}), file=sys.stderr)
        return 1

    configure_logging(settings.log_level)

    try:
        run_server(settings)
    except KeyboardInterrupt:
        pass
    except Exception as e:
        print(
            json.dumps({"error": "Failed to start server", "details": str(e) or type(e).__name__}),
            file=sys.stderr,
        )
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
