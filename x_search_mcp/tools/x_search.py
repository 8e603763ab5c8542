"""
MCP Tool - x_search

Search X posts through xAI's Responses API x_search tool.
"""

import json
import logging
from typing import Any, Dict

from fastmcp.exceptions import ToolError
from fastmcp.tools.tool import Tool, ToolResult
from mcp.types import ToolAnnotations

from x_search_mcp.exceptions import XSearchError
from x_search_mcp.schemas.search import SearchRequest, SearchResult
from x_search_mcp.services import XSearchService

logger = logging.getLogger(__name__)

TOOL_NAME = "x_search"
TOOL_DESCRIPTION = (
    "Search X posts using xAI's Responses API x_search tool. "
    "Returns a normalized answer and citations."
)


def render_json(payload: Dict[str, Any]) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


def render_failure(message: str) -> str:
    """Text body of a failed call: {"error": ..., "status": "failed"}."""
    return render_json({"error": message, "status": "failed"})


class XSearchTool(Tool):
    """
    The x_search tool.

    Receives the caller's arguments untouched so the validator sees the
    raw values (no coercion) and can report every problem at once.
    Any failure becomes an error result; nothing escapes as a
    protocol-level error.
    """

    async def run(self, arguments: Dict[str, Any]) -> ToolResult:
        try:
            service = XSearchService()
            result = await service.search(arguments)
        except XSearchError as exc:
            logger.error("x_search failed: %s", exc)
            raise ToolError(render_failure(str(exc))) from exc
        except Exception as exc:
            logger.exception("x_search failed")
            raise ToolError(render_failure(str(exc) or "Unknown error")) from exc

        payload = result.to_payload()
        return ToolResult(content=render_json(payload), structured_content=payload)


x_search_tool = XSearchTool(
    name=TOOL_NAME,
    title="X Search",
    description=TOOL_DESCRIPTION,
    parameters=SearchRequest.model_json_schema(),
    output_schema=SearchResult.model_json_schema(),
    annotations=ToolAnnotations(
        title="X Search",
        readOnlyHint=True,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
