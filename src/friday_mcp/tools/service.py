"""Dispatch logic shared by every Friday Data tool."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import pydantic
from mcp.types import CallToolResult, TextContent

from friday_mcp.errors import (
    FridayError,
    MalformedResponseError,
    ToolTimeoutError,
    UpstreamError,
    ValidationError,
)
from friday_mcp.providers import ApiProvider, ApiResponse
from friday_mcp.tools.catalog import ToolSpec, get_tool_spec

logger = logging.getLogger(__name__)


def format_validation_error(error: pydantic.ValidationError) -> str:
    """Turn a pydantic error into a single readable line.

    Args:
        error: Error raised while validating tool arguments

    Returns:
        Message naming each offending field and the violated constraint
    """
    problems = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail.get("loc", ())) or "arguments"
        problems.append(f"{location}: {detail.get('msg', 'invalid value')}")
    return "Invalid arguments: " + "; ".join(problems)


def validate_arguments(spec: ToolSpec, arguments: dict[str, Any] | None) -> pydantic.BaseModel:
    """Validate raw arguments against the tool's input model.

    Raises:
        ValidationError: If a required field is missing or a value is invalid
    """
    try:
        return spec.input_model.model_validate(arguments or {})
    except pydantic.ValidationError as e:
        raise ValidationError(format_validation_error(e)) from e


def build_request(spec: ToolSpec, validated: pydantic.BaseModel) -> dict[str, Any]:
    """Split validated arguments into query params, JSON body and credentials.

    Args:
        spec: Tool being invoked
        validated: Validated input model instance

    Returns:
        Keyword arguments for ApiProvider.request
    """
    fields = validated.model_dump(exclude_none=True)

    bearer_token = None
    if spec.bearer_field is not None:
        bearer_token = fields.pop(spec.bearer_field, None)

    if spec.method == "GET":
        return {"params": fields, "json_body": None, "bearer_token": bearer_token}

    params = {name: fields.pop(name) for name in spec.query_params if name in fields}
    return {"params": params, "json_body": fields, "bearer_token": bearer_token}


def is_missing(value: Any) -> bool:
    """True for null, empty string, zero and false values."""
    if value is None or value is False or value == "":
        return True
    return isinstance(value, (int, float)) and value == 0


def parse_payload(spec: ToolSpec, response: ApiResponse) -> Any:
    """Check the response status and shape, and select the payload.

    Raises:
        UpstreamError: For non-2xx responses, carrying the raw body text
        MalformedResponseError: If the body is not JSON or lacks a required field
    """
    if not response.ok:
        raise UpstreamError(response.status_code, response.text)

    try:
        data = json.loads(response.text)
    except ValueError as e:
        raise MalformedResponseError() from e

    if spec.response_field is None:
        return data

    if not isinstance(data, dict) or is_missing(data.get(spec.response_field)):
        raise MalformedResponseError()
    return data[spec.response_field]


def success_result(payload: Any) -> CallToolResult:
    """Wrap a JSON payload as a pretty-printed text result."""
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=False)


def error_result(message: str) -> CallToolResult:
    """Wrap an error message in the uniform error envelope."""
    text = json.dumps({"error": message}, ensure_ascii=False)
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=True)


async def invoke_tool(
    spec: ToolSpec,
    arguments: dict[str, Any] | None,
    provider: ApiProvider,
) -> CallToolResult:
    """Run one tool call end to end.

    Validates the arguments, issues a single request bounded by the tool's
    timeout and converts every failure into the error envelope. Nothing is
    retried and no exception escapes.

    Args:
        spec: Tool to invoke
        arguments: Raw arguments supplied by the caller
        provider: API provider used for the outbound request

    Returns:
        CallToolResult with one text item; isError is set on failure
    """
    try:
        validated = validate_arguments(spec, arguments)
        request_kwargs = build_request(spec, validated)

        try:
            response = await asyncio.wait_for(
                provider.request(spec.method, spec.path, timeout=spec.timeout, **request_kwargs),
                timeout=spec.timeout,
            )
        except asyncio.TimeoutError as e:
            raise ToolTimeoutError(spec.timeout) from e

        elapsed_ms = response.metadata.get("elapsed_ms")
        logger.debug(f"{spec.name}: HTTP {response.status_code} (elapsed_ms={elapsed_ms})")
        payload = parse_payload(spec, response)
        return success_result(payload)

    except ValidationError as e:
        logger.warning(f"{spec.name}: {e.message}")
        return error_result(e.message)
    except FridayError as e:
        logger.error(f"{spec.name} failed: {e.message}")
        return error_result(e.message)
    except Exception as e:
        logger.exception(f"{spec.name} failed with unexpected error")
        return error_result(str(e) or type(e).__name__)


async def call_tool(
    name: str,
    arguments: dict[str, Any] | None,
    provider: ApiProvider,
) -> CallToolResult:
    """Look up a tool by name and invoke it."""
    spec = get_tool_spec(name)
    if spec is None:
        logger.warning(f"Unknown tool requested: {name}")
        return error_result(f"Unknown tool: {name}")
    return await invoke_tool(spec, arguments, provider)
