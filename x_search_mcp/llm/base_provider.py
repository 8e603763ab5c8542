"""
LLM - Base Provider

Abstract base class for Responses API providers.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from x_search_mcp.schemas.upstream import UpstreamHttpRequest


class BaseResponsesProvider(ABC):
    """Base class for providers that answer a prepared Responses API call."""

    @abstractmethod
    async def create_response(self, request: UpstreamHttpRequest) -> Dict[str, Any]:
        """
        Send one request and return the decoded JSON body.

        Args:
            request: Prepared HTTP call (URL, headers, body, timeout)

        Returns:
            Decoded response payload

        Raises:
            UpstreamError: on timeout, transport failure, non-2xx status,
                or an undecodable body
        """
        pass
