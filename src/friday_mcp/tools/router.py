"""MCP handler registration for the Friday Data tools."""

from __future__ import annotations

from typing import Any

from mcp import types
from mcp.server.lowlevel import Server

from friday_mcp.providers import ApiProvider
from friday_mcp.tools.catalog import TOOL_SPECS
from friday_mcp.tools.service import call_tool


def list_tool_definitions() -> list[types.Tool]:
    """Build the MCP tool definitions for every catalog entry.

    Returns:
        List of tools with name, description and JSON input schema
    """
    return [
        types.Tool(
            name=spec.name,
            description=spec.description,
            inputSchema=spec.input_schema(),
        )
        for spec in TOOL_SPECS
    ]


def register_tools(server: Server, provider: ApiProvider) -> None:
    """Register the list and call handlers on the MCP server.

    Args:
        server: Low-level MCP server instance to register handlers on
        provider: API provider shared by all tool calls
    """

    async def handle_list_tools() -> list[types.Tool]:
        return list_tool_definitions()

    async def handle_call_tool(name: str, arguments: dict[str, Any] | None) -> types.CallToolResult:
        return await call_tool(name, arguments, provider)

    server.list_tools()(handle_list_tools)
    # Arguments are validated by the dispatcher so failures use the tool error envelope
    server.call_tool(validate_input=False)(handle_call_tool)
