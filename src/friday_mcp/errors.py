"""Exception types raised while dispatching tool calls."""

from __future__ import annotations


class FridayError(Exception):
    """Base class for errors that carry a user-facing message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(FridayError):
    """Required configuration is missing or invalid."""


class ValidationError(FridayError):
    """Tool arguments do not match the tool's input model."""


class ToolTimeoutError(FridayError):
    """The remote call did not complete within the tool's timeout."""

    def __init__(self, timeout: float) -> None:
        super().__init__(f"Request timed out after {timeout} seconds")
        self.timeout = timeout


class UpstreamError(FridayError):
    """The remote API answered with a non-success status code."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"API Error ({status_code}): {body}")
        self.status_code = status_code
        self.body = body


class MalformedResponseError(FridayError):
    """The remote API answered successfully but the body has the wrong shape."""

    def __init__(self, message: str = "Invalid response format from API") -> None:
        super().__init__(message)
