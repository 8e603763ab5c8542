"""
LLM Module - Provider Abstraction Layer

Responses API providers (xAI).
"""

from x_search_mcp.llm.base_provider import BaseResponsesProvider
from x_search_mcp.llm.xai_provider import XAIProvider

__all__ = [
    "BaseResponsesProvider",
    "XAIProvider",
]


def get_provider():
    """Factory function to get the Responses API provider."""
    return XAIProvider()
