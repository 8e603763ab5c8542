"""
Services - Search Service

Runs one x_search: validate, build, call xAI, normalize.
"""

import logging
import time
from typing import Any, Mapping

from x_search_mcp.config import get_settings
from x_search_mcp.llm import get_provider
from x_search_mcp.llm.base_provider import BaseResponsesProvider
from x_search_mcp.schemas.search import SearchResult
from x_search_mcp.services.normalizer import normalize_response
from x_search_mcp.services.request_builder import build_http_request
from x_search_mcp.services.validator import validate_search_args

logger = logging.getLogger(__name__)


class XSearchService:
    """Straight pipeline over the xAI Responses API. Holds no per-call state."""

    def __init__(self, settings=None, provider: BaseResponsesProvider = None):
        self.settings = settings or get_settings()
        self.provider = provider or get_provider()

    async def search(self, arguments: Mapping[str, Any]) -> SearchResult:
        """
        Run a search for raw tool arguments.

        Args:
            arguments: Caller-supplied x_search arguments

        Returns:
            Normalized SearchResult

        Raises:
            InputValidationError: arguments violate input rules
            ConfigurationError: XAI_API_KEY is not set
            UpstreamError: the xAI call failed
        """
        request = validate_search_args(arguments)
        http_request = build_http_request(request, self.settings.xai)

        started = time.monotonic()
        response = await self.provider.create_response(http_request)
        result = normalize_response(
            response,
            include_raw_response=request.include_raw_response,
        )

        logger.info(
            "x_search answered in %dms with %d citation(s)",
            int((time.monotonic() - started) * 1000),
            len(result.citations),
        )
        return result
