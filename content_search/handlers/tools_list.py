# MCP Tools List Handler
"""Handles MCP tools/list request."""

import logging
from typing import Optional

from content_search.models.mcp import MCPToolsListResponse
from content_search.services.tool_registry import TOOL_DEFINITIONS, ToolConverter

logger = logging.getLogger("content_search.handlers.tools_list")


async def handle_tools_list(correlation_id: Optional[str] = None) -> MCPToolsListResponse:
    """
    Handle MCP tools/list request.

    The tool set is fixed; it is converted to MCP tool format on each call.

    Args:
        correlation_id: Request correlation ID (for logging)

    Returns:
        List of MCP tools
    """
    tools = ToolConverter.to_mcp_tools(TOOL_DEFINITIONS)

    prefix = f"[{correlation_id}] " if correlation_id else ""
    logger.debug(f"{prefix}Returning {len(tools)} tools")
    return MCPToolsListResponse(tools=tools)
