"""Pydantic input models for the Friday Data tools."""

from __future__ import annotations

from typing import Annotated, Any, Literal
from urllib.parse import urlparse

from pydantic import AfterValidator, BaseModel, Field

ContentFormat = Literal["html", "markdown", "text", "links", "screenshot"]


def check_http_url(value: str) -> str:
    """Reject anything that is not an absolute http(s) URL."""
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("must be a valid http:// or https:// URL")
    return value


HttpUrlStr = Annotated[str, AfterValidator(check_http_url)]


class NoArguments(BaseModel):
    """Input model for tools that take no arguments."""


class ProfileScrapeInput(BaseModel):
    """Arguments for scraping a LinkedIn profile."""

    profile_url: HttpUrlStr = Field(description="Public LinkedIn profile URL")


class CompanyAnalysisInput(BaseModel):
    """Arguments for analyzing a LinkedIn company page."""

    linkedin_url: HttpUrlStr = Field(description="LinkedIn company page URL")
    count: int = Field(default=15, ge=1, le=100, description="Number of results to include (1-100)")


class ScrapeInput(BaseModel):
    """Arguments for scraping a single web page."""

    url: HttpUrlStr = Field(description="URL of the page to scrape")
    formats: list[ContentFormat] = Field(
        default=["html"],
        min_length=1,
        description="Content formats to return",
    )


class CrawlInput(BaseModel):
    """Arguments for crawling a website."""

    url: HttpUrlStr = Field(description="Start URL of the crawl")
    formats: list[ContentFormat] = Field(
        default=["html", "markdown", "links"],
        min_length=1,
        description="Content formats to return for each page",
    )
    max_pages: int = Field(default=10, ge=1, description="Maximum number of pages to crawl")


class ExtractInput(BaseModel):
    """Arguments for structured data extraction."""

    url: HttpUrlStr = Field(description="URL of the page to extract data from")
    query: str = Field(min_length=1, description="What to extract, in plain language")
    custom_schema: dict[str, Any] | None = Field(
        default=None,
        description="Optional JSON schema describing the expected output",
    )


class SearchInput(BaseModel):
    """Arguments for a web (SERP) search."""

    query: str = Field(min_length=1, description="Search query")
    location: str = Field(default="US", min_length=1, description="Country or region for results")
    num_results: int = Field(default=15, ge=1, le=100, description="Number of results (1-100)")


class CreateApiKeyInput(BaseModel):
    """Arguments for creating a user API key."""

    admin_token: str = Field(min_length=1, description="Admin credential sent as a bearer token")
    user_email: str = Field(
        pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$",
        description="Email address of the key owner",
    )
    plan: str = Field(default="free", min_length=1, description="Subscription plan for the key")


class RevokeApiKeyInput(BaseModel):
    """Arguments for revoking a user API key."""

    admin_token: str = Field(min_length=1, description="Admin credential sent as a bearer token")
    api_key: str = Field(min_length=1, description="The API key to revoke")
