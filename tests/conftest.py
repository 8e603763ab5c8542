"""
Shared fixtures for x_search tests.
"""

import json
from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

import httpx
import pytest

from x_search_mcp.config import LogSettings, MCPSettings, Settings, XAISettings


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Keep developer environment variables out of settings."""
    for name in (
        "XAI_API_KEY", "XAI_BASE_URL", "XAI_MODEL", "XAI_TIMEOUT",
        "MCP_TRANSPORT", "MCP_HOST", "MCP_PORT", "LOG_LEVEL", "LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)


def make_settings(api_key: Optional[str] = "test-key", **xai: Any) -> Settings:
    return Settings(
        xai=XAISettings(XAI_API_KEY=api_key, **xai),
        mcp=MCPSettings(),
        log=LogSettings(),
    )


@pytest.fixture
def settings() -> Settings:
    return make_settings()


def make_response(
    text: str,
    annotations: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    """Build a minimal Responses API payload around one output_text."""
    content: Dict[str, Any] = {"type": "output_text", "text": text}
    if annotations is not None:
        content["annotations"] = annotations
    return {
        "id": "resp_123",
        "output": [
            {"type": "x_search_call", "status": "completed"},
            {"type": "message", "role": "assistant", "content": [content]},
        ],
    }


class RecordingHandler:
    """MockTransport handler that records requests and replays a reply."""

    def __init__(
        self,
        reply: Callable[[httpx.Request], Union[httpx.Response, Awaitable[httpx.Response]]],
    ):
        self.reply = reply
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request):
        self.requests.append(request)
        return self.reply(request)

    @property
    def last_body(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)


def client_factory_for(handler: Callable[[httpx.Request], httpx.Response]):
    """Return a client factory whose clients use a MockTransport."""
    def factory() -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return factory
