"""Friday Data tools and dispatch logic.

The tools module follows a catalog -> service -> router pattern:
- catalog.py: one ToolSpec per tool (endpoint, method, input model, timeout)
- service.py: the single dispatch routine shared by every tool
- router.py: MCP handler registration

All tools share the same behavior:
- Argument validation before any network activity
- Exactly one request to the Friday Data API, bounded by a per-tool timeout
- Uniform {"error": ...} envelope with the error flag set on failure
"""

from friday_mcp.tools.catalog import (
    CRAWL_TIMEOUT,
    DEFAULT_TIMEOUT,
    TOOL_SPECS,
    TOOLS_BY_NAME,
    ToolSpec,
    get_tool_spec,
)
from friday_mcp.tools.router import list_tool_definitions, register_tools
from friday_mcp.tools.service import (
    build_request,
    call_tool,
    error_result,
    invoke_tool,
    parse_payload,
    success_result,
    validate_arguments,
)

__all__ = [
    # Catalog
    "CRAWL_TIMEOUT",
    "DEFAULT_TIMEOUT",
    "TOOL_SPECS",
    "TOOLS_BY_NAME",
    "ToolSpec",
    "get_tool_spec",
    # Registration functions
    "list_tool_definitions",
    "register_tools",
    # Service functions
    "build_request",
    "call_tool",
    "error_result",
    "invoke_tool",
    "parse_payload",
    "success_result",
    "validate_arguments",
]
