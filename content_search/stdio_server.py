#!/usr/bin/env python3
"""
MCP STDIO Server for desktop MCP clients.

The client launches this as a subprocess and talks JSON-RPC over
stdin/stdout, so all logging goes to stderr.

Usage:
    content-search-stdio

Environment:
    GHOST_CONTENT_ENDPOINT, GHOST_API_KEY: Ghost Content API access
    CONTENTFUL_SPACE_ID, CONTENTFUL_ACCESS_TOKEN: Contentful GraphQL access
    LOG_LEVEL: Logging level (default: INFO; WARNING keeps stderr quiet)
"""

import asyncio
import logging
import sys

from mcp.server.stdio import stdio_server

from content_search.config import settings
from content_search.server import server
from content_search.services.contentful_client import contentful_client
from content_search.services.ghost_client import ghost_client

logger = logging.getLogger("content_search.stdio")


async def serve() -> None:
    """Run the MCP server over stdio until the client disconnects."""
    logger.info(f"MCP STDIO server started ({settings.mcp_server_name} v{settings.mcp_server_version})")
    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
    finally:
        await ghost_client.close()
        await contentful_client.close()
        logger.info("MCP STDIO server stopped")


def main() -> None:
    # stdout is reserved for JSON-RPC
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    try:
        asyncio.run(serve())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
