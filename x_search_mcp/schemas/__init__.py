"""
Schemas Module - Pydantic Models

Data models for x_search arguments, results, and the upstream request.
"""

from x_search_mcp.schemas.search import SearchRequest, Citation, SearchResult
from x_search_mcp.schemas.upstream import (
    UpstreamMessage,
    XSearchToolConfig,
    UpstreamRequest,
    UpstreamHttpRequest,
)

__all__ = [
    "SearchRequest",
    "Citation",
    "SearchResult",
    "UpstreamMessage",
    "XSearchToolConfig",
    "UpstreamRequest",
    "UpstreamHttpRequest",
]
