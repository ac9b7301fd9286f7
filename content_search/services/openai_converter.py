# OpenAI Converter Service
"""Convert MCP tools to OpenAI function calling format."""

from typing import List

from content_search.models.mcp import MCPTool
from content_search.models.openai import OpenAIFunctionDef, OpenAITool


def mcp_to_openai_tool(mcp_tool: MCPTool) -> OpenAITool:
    """Wrap an MCP tool as an OpenAI function; the input schema is reused as-is."""
    return OpenAITool(
        function=OpenAIFunctionDef(
            name=mcp_tool.name,
            description=mcp_tool.description,
            parameters=mcp_tool.inputSchema,
        ),
    )


def mcp_tools_to_openai(mcp_tools: List[MCPTool]) -> List[OpenAITool]:
    return [mcp_to_openai_tool(t) for t in mcp_tools]
