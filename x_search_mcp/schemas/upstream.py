"""
Schemas - Upstream Models

Request envelope for the xAI Responses API.
"""

from dataclasses import dataclass
from pydantic import BaseModel
from typing import Any, Dict, List, Literal, Optional


SYSTEM_PROMPT = (
    "You answer questions using X search. Return JSON that matches the "
    "provided schema. Use citations when possible."
)

RESPONSE_SCHEMA: Dict[str, Any] = {
    "name": "x_search_answer",
    "schema": {
        "type": "object",
        "properties": {
            "answer": {"type": "string"},
            "citations": {"type": "array", "items": {"type": "string"}},
        },
        "required": ["answer"],
    },
}


class UpstreamMessage(BaseModel):
    """One conversation turn sent to the provider."""
    role: Literal["system", "user"]
    content: str


class XSearchToolConfig(BaseModel):
    """x_search tool entry. Unset filters are dropped on serialization."""
    type: Literal["x_search"] = "x_search"
    allowed_x_handles: Optional[List[str]] = None
    excluded_x_handles: Optional[List[str]] = None
    from_date: Optional[str] = None
    to_date: Optional[str] = None
    enable_image_understanding: Optional[bool] = None
    enable_video_understanding: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class UpstreamRequest(BaseModel):
    """Body of POST /responses."""
    model: str
    input: List[UpstreamMessage]
    tools: List[XSearchToolConfig]
    text: Dict[str, Any]

    def to_body(self) -> Dict[str, Any]:
        return {
            "model": self.model,
            "input": [message.model_dump() for message in self.input],
            "tools": [tool.to_dict() for tool in self.tools],
            "text": self.text,
        }


@dataclass(frozen=True)
class UpstreamHttpRequest:
    """Outbound HTTP call parameters."""
    url: str
    headers: Dict[str, str]
    body: Dict[str, Any]
    timeout: float
    method: str = "POST"
