"""Pydantic input models for tool arguments.

Each tool in the catalog declares one of these models. The dispatcher
validates raw arguments with it before any network activity, and the
server publishes its JSON schema when listing tools.
"""

from friday_mcp.models.inputs import (
    CompanyAnalysisInput,
    ContentFormat,
    CrawlInput,
    CreateApiKeyInput,
    ExtractInput,
    NoArguments,
    ProfileScrapeInput,
    RevokeApiKeyInput,
    ScrapeInput,
    SearchInput,
    check_http_url,
)

__all__ = [
    "CompanyAnalysisInput",
    "ContentFormat",
    "CrawlInput",
    "CreateApiKeyInput",
    "ExtractInput",
    "NoArguments",
    "ProfileScrapeInput",
    "RevokeApiKeyInput",
    "ScrapeInput",
    "SearchInput",
    "check_http_url",
]
