"""
Services - Request Builder

Maps a validated SearchRequest and the xAI settings onto a
Responses API call. Pure: no I/O, no global state.
"""

from typing import Any, Dict

from x_search_mcp.config import XAISettings
from x_search_mcp.schemas.search import SearchRequest
from x_search_mcp.schemas.upstream import (
    RESPONSE_SCHEMA,
    SYSTEM_PROMPT,
    UpstreamHttpRequest,
    UpstreamMessage,
    UpstreamRequest,
    XSearchToolConfig,
)

RESPONSES_PATH = "/responses"


def _tool_config(request: SearchRequest) -> XSearchToolConfig:
    return XSearchToolConfig(
        allowed_x_handles=request.allowed_x_handles,
        excluded_x_handles=request.excluded_x_handles,
        from_date=request.from_date,
        to_date=request.to_date,
        enable_image_understanding=request.enable_image_understanding,
        enable_video_understanding=request.enable_video_understanding,
    )


def build_tool_config(request: SearchRequest) -> Dict[str, Any]:
    """
    Build the x_search tool entry.

    Only filters the caller supplied are included; the provider treats
    a missing key differently from an explicit empty list or False.
    """
    return _tool_config(request).to_dict()


def build_upstream_request(request: SearchRequest, model: str) -> UpstreamRequest:
    """Assemble the Responses API envelope for a search."""
    return UpstreamRequest(
        model=model,
        input=[
            UpstreamMessage(role="system", content=SYSTEM_PROMPT),
            UpstreamMessage(role="user", content=request.query),
        ],
        tools=[_tool_config(request)],
        text={
            "format": {
                "type": "json_schema",
                "schema": RESPONSE_SCHEMA,
            },
        },
    )


def build_http_request(
    request: SearchRequest,
    settings: XAISettings,
) -> UpstreamHttpRequest:
    """
    Build the outbound HTTP call.

    Args:
        request: Validated search arguments
        settings: xAI settings (base URL, model, timeout, API key)

    Returns:
        UpstreamHttpRequest ready for the provider

    Raises:
        ConfigurationError: if the API key is missing
    """
    api_key = settings.require_api_key()
    body = build_upstream_request(request, settings.model).to_body()

    return UpstreamHttpRequest(
        url=f"{settings.base_url}{RESPONSES_PATH}",
        headers={
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        },
        body=body,
        timeout=settings.timeout_seconds,
    )
