"""Process-wide configuration loaded once at startup."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from friday_mcp.errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.fridaydata.tech"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    """Read-only settings shared by every tool invocation."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, load_dotenv_file: bool = True) -> Settings:
        """Build settings from environment variables.

        Args:
            load_dotenv_file: Load a .env file from the working directory first

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If FRIDAY_API_KEY is missing or blank
        """
        if load_dotenv_file:
            load_dotenv(find_dotenv(usecwd=True))

        api_key = os.getenv("FRIDAY_API_KEY", "").strip()
        if not api_key:
            raise ConfigurationError("Missing FRIDAY_API_KEY environment variable")

        base_url = os.getenv("FRIDAY_API_BASE_URL", DEFAULT_BASE_URL).strip() or DEFAULT_BASE_URL
        log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL

        return cls(api_key=api_key, base_url=base_url.rstrip("/"), log_level=log_level)
