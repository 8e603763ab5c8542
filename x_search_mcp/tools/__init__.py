"""
Tools Module - MCP Tool Implementations

The x_search tool.
"""

from x_search_mcp.tools.x_search import x_search_tool

__all__ = [
    "x_search_tool",
]
