"""Base provider interface for calls to the Friday Data API."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class ApiResponse:
    """Raw response from a single API call."""

    status_code: int
    text: str
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """True for 2xx status codes."""
        return 200 <= self.status_code < 300


class ApiProvider(ABC):
    """Abstract base class for API providers."""

    @abstractmethod
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
        """Issue one request against the API.

        Args:
            method: HTTP method ("GET" or "POST")
            path: Endpoint path relative to the API base URL
            params: Query string parameters
            json_body: JSON request body, or None to send no body
            bearer_token: Send this token as Authorization instead of the API key
            timeout: Request timeout in seconds

        Returns:
            ApiResponse with the status code and raw body text
        """
        pass

    async def aclose(self) -> None:
        """Release network resources held by the provider."""
        pass
