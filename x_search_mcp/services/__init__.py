"""
Services Module - Business Logic Layer

Input validation, request building, response normalization, and the
search pipeline that ties them together.
"""

from x_search_mcp.services.search_service import XSearchService
from x_search_mcp.services.validator import validate_search_args, validate_date
from x_search_mcp.services.request_builder import (
    build_tool_config,
    build_upstream_request,
    build_http_request,
)
from x_search_mcp.services.normalizer import (
    normalize_response,
    normalize_citations,
    dedupe_urls,
)

__all__ = [
    "XSearchService",
    "validate_search_args",
    "validate_date",
    "build_tool_config",
    "build_upstream_request",
    "build_http_request",
    "normalize_response",
    "normalize_citations",
    "dedupe_urls",
]
