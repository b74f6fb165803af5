"""API providers for the Friday Data backend."""

from friday_mcp.providers.base import ApiProvider, ApiResponse
from friday_mcp.providers.httpx_provider import HttpxProvider

__all__ = ["ApiProvider", "ApiResponse", "HttpxProvider"]
