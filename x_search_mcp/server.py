"""
X Search MCP Server - Main Entry Point

FastMCP server with STDIO, SSE and streamable HTTP transport support.
"""

import argparse
import logging
import sys

from fastmcp import FastMCP

from x_search_mcp.config import get_settings
from x_search_mcp.exceptions import ConfigurationError
from x_search_mcp.logging_config import configure_logging
from x_search_mcp.tools import x_search_tool

logger = logging.getLogger(__name__)

SERVER_NAME = "x-search-mcp"


def create_app() -> FastMCP:
    """Create and configure the MCP application."""
    mcp = FastMCP(
        name=SERVER_NAME,
        instructions="Search X posts through xAI and get an answer with citations",
    )

    mcp.add_tool(x_search_tool)

    return mcp


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="X Search MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse", "http"],
        default=None,
        help="Transport protocol (default: from env)"
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Bind address for SSE/HTTP transport (default: from env)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port for SSE/HTTP transport (default: from env)"
    )
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings.log)

    try:
        settings.xai.require_api_key()
    except ConfigurationError as exc:
        logger.error("Fatal error: %s", exc)
        sys.exit(1)

    transport = args.transport or settings.mcp.transport
    host = args.host or settings.mcp.host
    port = args.port or settings.mcp.port

    mcp = create_app()

    if transport == "stdio":
        logger.info("%s running on stdio", SERVER_NAME)
        mcp.run(transport="stdio")
    else:
        logger.info("%s running on %s at %s:%d", SERVER_NAME, transport, host, port)
        mcp.run(transport=transport, host=host, port=port)


if __name__ == "__main__":
    main()
