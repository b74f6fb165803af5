"""MCP server exposing the Friday Data tools over stdio."""

from __future__ import annotations

import asyncio
import json
import logging
import sys

from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from friday_mcp import __version__
from friday_mcp.config import Settings
from friday_mcp.providers import ApiProvider, HttpxProvider
from friday_mcp.tools import register_tools

logger = logging.getLogger(__name__)

SERVER_NAME = "Friday Data MCP"
SERVER_INSTRUCTIONS = "Easiest way to integrate unblocked webscraping with your LLM"


def create_server(provider: ApiProvider) -> Server:
    """Create the MCP server with every catalog tool registered.

    Args:
        provider: API provider used by all tool calls

    Returns:
        Configured low-level MCP server
    """
    server = Server(SERVER_NAME, version=__version__, instructions=SERVER_INSTRUCTIONS)
    register_tools(server, provider)
    return server


async def serve(settings: Settings) -> None:
    """Serve MCP requests on stdin/stdout until the transport closes.

    Args:
        settings: Process-wide settings
    """
    provider = HttpxProvider(settings)
    server = create_server(provider)

    try:
        async with stdio_server() as (read_stream, write_stream):
            print(json.dumps({"status": "Server started successfully"}), file=sys.stderr)
            logger.info(f"Serving {SERVER_NAME} {__version__} against {settings.base_url}")
            await server.run(read_stream, write_stream, server.create_initialization_options())
    finally:
        await provider.aclose()


def run_server(settings: Settings) -> None:
    """Run the MCP server over stdio.

    Args:
        settings: Process-wide settings
    """
    asyncio.run(serve(settings))
