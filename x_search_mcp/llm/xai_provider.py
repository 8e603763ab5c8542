"""
LLM - xAI Provider

Single-attempt POST to the xAI Responses API.
"""

import asyncio
import logging
import time
from typing import Any, Callable, Dict, Optional

import httpx

from x_search_mcp.exceptions import (
    UpstreamResponseError,
    UpstreamStatusError,
    UpstreamTimeoutError,
    UpstreamTransportError,
)
from x_search_mcp.llm.base_provider import BaseResponsesProvider
from x_search_mcp.schemas.upstream import UpstreamHttpRequest

logger = logging.getLogger(__name__)

ClientFactory = Callable[[], httpx.AsyncClient]


class XAIProvider(BaseResponsesProvider):
    """xAI Responses API provider. No retries."""

    def __init__(self, client_factory: Optional[ClientFactory] = None):
        self._client_factory = client_factory or httpx.AsyncClient

    async def create_response(self, request: UpstreamHttpRequest) -> Dict[str, Any]:
        """POST the request and decode the JSON body."""
        started = time.monotonic()

        try:
            # The client is closed on every exit path, including timeouts
            async with self._client_factory() as client:
                response = await asyncio.wait_for(
                    client.request(
                        request.method,
                        request.url,
                        json=request.body,
                        headers=request.headers,
                        timeout=request.timeout,
                    ),
                    timeout=request.timeout,
                )
        except (httpx.TimeoutException, asyncio.TimeoutError) as exc:
            raise UpstreamTimeoutError(
                f"xAI API request timed out after {request.timeout * 1000:.0f}ms"
            ) from exc
        except httpx.TransportError as exc:
            raise UpstreamTransportError(f"xAI API request failed: {exc}") from exc

        latency_ms = int((time.monotonic() - started) * 1000)
        logger.debug(
            "POST %s -> %s in %dms", request.url, response.status_code, latency_ms
        )

        text = response.text
        if not response.is_success:
            raise UpstreamStatusError(response.status_code, text)

        try:
            return response.json()
        except (ValueError, RecursionError) as exc:
            raise UpstreamResponseError(
                "xAI API returned a non-JSON response body", body=text
            ) from exc
