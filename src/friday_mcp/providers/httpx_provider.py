"""API provider using an httpx async client."""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from friday_mcp.config import Settings
from friday_mcp.errors import ToolTimeoutError
from friday_mcp.providers.base import ApiProvider, ApiResponse

# Configure logging
logger = logging.getLogger(__name__)


class HttpxProvider(ApiProvider):
    """Friday Data API client backed by an httpx AsyncClient.

    Requests are not retried. Each call is a coroutine on the event loop, so
    cancelling it (for example when the tool timeout fires) aborts the
    in-flight request and frees its connection.
    """

    def __init__(self, settings: Settings, client: httpx.AsyncClient | None = None) -> None:
        """Initialize the provider.

        Args:
            settings: Process-wide settings holding the API key and base URL
            client: Optional client to reuse (a new one is created by default)
        """
        self.settings = settings
        self.client = client or httpx.AsyncClient()

    def build_url(self, path: str) -> str:
        """Join an endpoint path onto the configured base URL."""
        return f"{self.settings.base_url}/{path.lstrip('/')}"

    def build_headers(self, has_body: bool, bearer_token: str | None = None) -> dict[str, str]:
        """Build request headers.

        Args:
            has_body: Whether a JSON body is attached
            bearer_token: Elevated credential replacing the API key header

        Returns:
            Header dictionary
        """
        headers = {"Accept": "application/json"}
        if has_body:
            headers["Content-Type"] = "application/json"

        if bearer_token is not None:
            headers["Authorization"] = f"Bearer {bearer_token}"
        else:
            headers["X-API-KEY"] = self.settings.api_key

        return headers

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
        bearer_token: str | None = None,
        timeout: float = 60,
    ) -> ApiResponse:
        """Issue one request against the Friday Data API.

        Args:
            method: HTTP method ("GET" or "POST")
            path: Endpoint path relative to the API base URL
            params: Query string parameters
            json_body: JSON request body, or None to send no body
            bearer_token: Send this token as Authorization instead of the API key
            timeout: Request timeout in seconds

        Returns:
            ApiResponse with the status code and raw body text

        Raises:
            ToolTimeoutError: If the HTTP client gives up waiting for the server
            httpx.HTTPError: On connection and other transport failures
        """
        url = self.build_url(path)
        headers = self.build_headers(json_body is not None, bearer_token)

        logger.debug(f"{method} {url} (timeout: {timeout}s)")

        started = time.monotonic()
        try:
            response = await self.client.request(
                method,
                url,
                params=params or None,
                json=json_body,
                headers=headers,
                timeout=timeout,
            )
        except httpx.TimeoutException as e:
            raise ToolTimeoutError(timeout) from e

        return ApiResponse(
            status_code=response.status_code,
            text=response.text,
            metadata={"elapsed_ms": (time.monotonic() - started) * 1000},
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.aclose()
