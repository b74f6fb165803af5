"""Static catalog of the tools exposed by the server.

Every tool shares one dispatch routine (see ``tools.service``); the entries
below only differ in endpoint, method, input model, timeout and response
shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from friday_mcp.models import (
    CompanyAnalysisInput,
    CrawlInput,
    CreateApiKeyInput,
    ExtractInput,
    NoArguments,
    ProfileScrapeInput,
    RevokeApiKeyInput,
    ScrapeInput,
    SearchInput,
)

DEFAULT_TIMEOUT = 60
CRAWL_TIMEOUT = 120


@dataclass(frozen=True)
class ToolSpec:
    """Static description of one tool."""

    name: str
    description: str
    input_model: type[BaseModel]
    method: str
    path: str
    timeout: float = DEFAULT_TIMEOUT
    # Fields sent in the query string of a POST (GET sends every field there)
    query_params: tuple[str, ...] = ()
    # Field that must exist in the response body and becomes the payload
    response_field: str | None = None
    # Field holding an elevated credential, sent as a bearer token instead of X-API-KEY
    bearer_field: str | None = None

    @property
    def required_fields(self) -> tuple[str, ...]:
        """Names of the arguments that have no default."""
        return tuple(
            name for name, info in self.input_model.model_fields.items() if info.is_required()
        )

    def input_schema(self) -> dict[str, Any]:
        """JSON schema of the tool's arguments."""
        return self.input_model.model_json_schema()


TOOL_SPECS: tuple[ToolSpec, ...] = (
    ToolSpec(
        name="scrape_linkedin_profile",
        description="Scrapes a LinkedIn profile and returns structured data about the person",
        input_model=ProfileScrapeInput,
        method="GET",
        path="/profile",
        response_field="profile",
    ),
    ToolSpec(
        name="analyze_linkedin_company",
        description="Analyzes a LinkedIn company page and returns insights",
        input_model=CompanyAnalysisInput,
        method="POST",
        path="/analyze-company",
    ),
    ToolSpec(
        name="scrape_website",
        description="Scrapes a single web page and returns its content in the requested formats",
        input_model=ScrapeInput,
        method="POST",
        path="/scrape",
    ),
    ToolSpec(
        name="crawl_website",
        description="Crawls a website starting from a URL and returns the content of each page visited",
        input_model=CrawlInput,
        method="POST",
        path="/crawl",
        timeout=CRAWL_TIMEOUT,
    ),
    ToolSpec(
        name="extract_structured_data",
        description="Extracts structured data from a web page according to a query and optional schema",
        input_model=ExtractInput,
        method="POST",
        path="/extract",
    ),
    ToolSpec(
        name="search_web",
        description="Runs a web search and returns the search engine results",
        input_model=SearchInput,
        method="POST",
        path="/search",
    ),
    ToolSpec(
        name="initialize_linkedin_connector",
        description="Initializes the LinkedIn connector for the current API key",
        input_model=NoArguments,
        method="POST",
        path="/connectors/linkedin/init",
    ),
    ToolSpec(
        name="initialize_google_connector",
        description="Initializes the Google search connector for the current API key",
        input_model=NoArguments,
        method="POST",
        path="/connectors/google/init",
    ),
    ToolSpec(
        name="create_api_key",
        description="Creates a new user API key (requires an admin token)",
        input_model=CreateApiKeyInput,
        method="POST",
        path="/admin/api-keys",
        bearer_field="admin_token",
    ),
    ToolSpec(
        name="revoke_api_key",
        description="Revokes an existing user API key (requires an admin token)",
        input_model=RevokeApiKeyInput,
        method="POST",
        path="/admin/api-keys/revoke",
        bearer_field="admin_token",
    ),
    ToolSpec(
        name="get_server_status",
        description="Returns the status of the Friday Data API",
        input_model=NoArguments,
        method="GET",
        path="/status",
    ),
    ToolSpec(
        name="reset_rate_limit",
        description="Resets the rate limit counters for the current API key",
        input_model=NoArguments,
        method="POST",
        path="/rate-limit/reset",
    ),
    ToolSpec(
        name="list_subscription_plans",
        description="Lists the available subscription plans",
        input_model=NoArguments,
        method="GET",
        path="/plans",
    ),
    ToolSpec(
        name="list_user_api_keys",
        description="Lists the API keys belonging to the current user",
        input_model=NoArguments,
        method="GET",
        path="/keys",
    ),
)

TOOLS_BY_NAME: dict[str, ToolSpec] = {spec.name: spec for spec in TOOL_SPECS}


def get_tool_spec(name: str) -> ToolSpec | None:
    """Look up a tool by name."""
    return TOOLS_BY_NAME.get(name)
