# MCP SDK Server
"""MCP Server using the official SDK, shared by the stdio and Streamable HTTP transports."""

import logging

import mcp.types as types
from mcp.server import Server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager

from content_search.config import settings
from content_search.handlers import handle_tools_call, handle_tools_list
from content_search.middleware.correlation import get_correlation_id
from content_search.services.tool_registry import ToolConverter

logger = logging.getLogger("content_search.server")


class ToolExecutionError(Exception):
    """A tool call failed; the message is returned to the client."""


server = Server(settings.mcp_server_name, version=settings.mcp_server_version)

# Session manager for Streamable HTTP transport
session_manager = StreamableHTTPSessionManager(
    app=server,
    json_response=True,
    stateless=True,
)


@server.list_tools()
async def sdk_list_tools() -> list[types.Tool]:
    """List available tools via SDK transport."""
    result = await handle_tools_list(get_correlation_id())
    return ToolConverter.to_sdk_tools(result.tools)


@server.call_tool()
async def sdk_call_tool(name: str, arguments: dict) -> list[types.TextContent]:
    """
    Execute a tool via SDK transport.

    Errors are raised so the SDK marks the result with ``isError``; the
    message is the same text the REST endpoints return.
    """
    result = await handle_tools_call(
        name=name,
        arguments=arguments or {},
        correlation_id=get_correlation_id(),
    )
    if result.isError:
        raise ToolExecutionError(result.content[0].text)
    return [
        types.TextContent(type="text", text=block.text)
        for block in result.content
    ]
