"""Tests for startup configuration."""

from __future__ import annotations

import pytest

from friday_mcp.config import DEFAULT_BASE_URL, Settings
from friday_mcp.errors import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without Friday variables set, restoring them afterwards."""
    for name in ("FRIDAY_API_KEY", "FRIDAY_API_BASE_URL", "LOG_LEVEL"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


class TestSettings:
    """Tests for Settings.from_env."""

    def test_reads_api_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The API key is read and defaults fill the rest."""
        monkeypatch.setenv("FRIDAY_API_KEY", "fd_live_abc")

        settings = Settings.from_env(load_dotenv_file=False)

        assert settings.api_key == "fd_live_abc"
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.log_level == "INFO"

    def test_missing_api_key(self) -> None:
        """A missing key is a configuration error."""
        with pytest.raises(ConfigurationError) as exc_info:
            Settings.from_env(load_dotenv_file=False)

        assert exc_info.value.message == "Missing FRIDAY_API_KEY environment variable"

    def test_blank_api_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A whitespace-only key counts as missing."""
        monkeypatch.setenv("FRIDAY_API_KEY", "   ")

        with pytest.raises(ConfigurationError):
            Settings.from_env(load_dotenv_file=False)

    def test_base_url_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The base URL can be overridden and loses its trailing slash."""
        monkeypatch.setenv("FRIDAY_API_KEY", "k")
        monkeypatch.setenv("FRIDAY_API_BASE_URL", "http://localhost:9000/")

        settings = Settings.from_env(load_dotenv_file=False)

        assert settings.base_url == "http://localhost:9000"

    def test_log_level_normalized(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Log level names are upper-cased."""
        monkeypatch.setenv("FRIDAY_API_KEY", "k")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert Settings.from_env(load_dotenv_file=False).log_level == "DEBUG"

    def test_loads_dotenv_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        """A .env file in the working directory supplies the key."""
        (tmp_path / ".env").write_text("FRIDAY_API_KEY=from-dotenv\n")
        monkeypatch.chdir(tmp_path)

        settings = Settings.from_env()

        assert settings.api_key == "from-dotenv"

    def test_settings_are_immutable(self) -> None:
        """Settings cannot be changed after startup."""
        settings = Settings(api_key="k")

        with pytest.raises(AttributeError):
            settings.api_key = "other"  # type: ignore[misc]
