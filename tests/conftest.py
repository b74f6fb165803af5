"""Pytest configuration and fixtures for friday-mcp tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, Mock

import pytest

from friday_mcp.config import Settings
from friday_mcp.providers import ApiResponse

# Minimal valid arguments for every tool in the catalog
VALID_ARGUMENTS: dict[str, dict[str, Any]] = {
    "scrape_linkedin_profile": {"profile_url": "https://www.linkedin.com/in/jane-doe"},
    "analyze_linkedin_company": {"linkedin_url": "https://www.linkedin.com/company/acme"},
    "scrape_website": {"url": "https://example.com"},
    "crawl_website": {"url": "https://example.com"},
    "extract_structured_data": {"url": "https://example.com/pricing", "query": "plan names and prices"},
    "search_web": {"query": "friday data api"},
    "initialize_linkedin_connector": {},
    "initialize_google_connector": {},
    "create_api_key": {"admin_token": "admin-secret", "user_email": "jane@example.com"},
    "revoke_api_key": {"admin_token": "admin-secret", "api_key": "fd_live_123"},
    "get_server_status": {},
    "reset_rate_limit": {},
    "list_subscription_plans": {},
    "list_user_api_keys": {},
}


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at the production host with a test key."""
    return Settings(api_key="test-api-key")


@pytest.fixture
def sample_profile() -> dict[str, Any]:
    """Profile payload as returned under the "profile" field."""
    return {
        "full_name": "Jane Doe",
        "headline": "Head of Data at Acme",
        "location": "Berlin, Germany",
        "experience": [
            {"company": "Acme", "title": "Head of Data", "start": "2021-03"},
            {"company": "Globex", "title": "Data Engineer", "start": "2017-09"},
        ],
    }


def make_response(status_code: int = 200, text: str = "{}") -> ApiResponse:
    """Build an ApiResponse as the provider would return it."""
    return ApiResponse(status_code=status_code, text=text)


@pytest.fixture
def mock_provider() -> Mock:
    """Provider test double whose request coroutine returns an empty JSON object."""
    provider = Mock()
    provider.request = AsyncMock(return_value=make_response())
    return provider
