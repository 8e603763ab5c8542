"""
X Search MCP Server

MCP tool that searches X posts through xAI's Responses API.
"""

__version__ = "0.1.0"
