# Tool Registry
"""
Definitions of the search tools and their conversion to MCP formats.

Every tool takes a single ``query`` string and is read-only: it fetches
content, filters it and returns matches, without changing anything in the
content sources.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import mcp.types as types

from content_search.models.mcp import MCPTool

logger = logging.getLogger("content_search.services.tool_registry")


@dataclass(frozen=True)
class ToolDefinition:
    """A search tool exposed to agents."""

    name: str
    description: str
    query_description: str

    @property
    def input_schema(self) -> Dict[str, Any]:
        """JSON Schema for the tool arguments."""
        return {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "minLength": 1,
                    "description": self.query_description,
                },
            },
            "required": ["query"],
            "additionalProperties": False,
        }


TOOL_DEFINITIONS: List[ToolDefinition] = [
    ToolDefinition(
        name="search_blog_posts",
        description=(
            "Search Ghost CMS blog posts by matching query against title, excerpt, "
            "and body content. Returns all matching posts."
        ),
        query_description="Search term to match against blog post content",
    ),
    ToolDefinition(
        name="search_blog_pages",
        description=(
            "Search Ghost CMS pages by matching query against title and body content. "
            "Returns all matching pages."
        ),
        query_description="Search term to match against page content",
    ),
    ToolDefinition(
        name="search_learn_pages",
        description=(
            "Search Contentful learn pages by matching query against title, meta title, "
            "meta description, and body content. Returns all matching pages."
        ),
        query_description="Search term to match against learn page content",
    ),
    ToolDefinition(
        name="search_case_studies",
        description=(
            "Search Contentful case studies (success stories) by matching query against "
            "company name, meta title, meta description, overview, quote, use case, impact, "
            "and body content. Returns all matching case studies."
        ),
        query_description="Search term to match against case study content",
    ),
    ToolDefinition(
        name="search_events",
        description=(
            "Search Contentful events (internal event pages and event cards) by matching "
            "query against title, description, and body content. Returns all matching events."
        ),
        query_description="Search term to match against event content",
    ),
]

_TOOLS_BY_NAME: Dict[str, ToolDefinition] = {tool.name: tool for tool in TOOL_DEFINITIONS}


def get_tool(name: str) -> Optional[ToolDefinition]:
    """Look up a tool definition by name."""
    return _TOOLS_BY_NAME.get(name)


class ToolConverter:
    """Converts tool definitions to MCP tool formats."""

    @staticmethod
    def to_mcp_tool(tool: ToolDefinition) -> MCPTool:
        """Convert a tool definition to the internal MCPTool model."""
        return MCPTool(
            name=tool.name,
            description=tool.description,
            inputSchema=tool.input_schema,  # camelCase for MCP
        )

    @staticmethod
    def to_mcp_tools(tools: List[ToolDefinition]) -> List[MCPTool]:
        """Convert multiple tool definitions to MCPTools."""
        return [ToolConverter.to_mcp_tool(t) for t in tools]

    @staticmethod
    def to_sdk_tool(tool: MCPTool) -> types.Tool:
        """
        Convert an MCPTool to an MCP SDK types.Tool with annotations.

        Search tools only read from the content sources, so they are marked
        read-only and idempotent. They reach external services, hence
        openWorldHint.
        """
        return types.Tool(
            name=tool.name,
            description=tool.description,
            inputSchema=tool.inputSchema,
            annotations=types.ToolAnnotations(
                readOnlyHint=True,
                destructiveHint=False,
                idempotentHint=True,
                openWorldHint=True,
            ),
        )

    @staticmethod
    def to_sdk_tools(tools: List[MCPTool]) -> List[types.Tool]:
        """Convert a list of MCPTools to MCP SDK types.Tool list."""
        return [ToolConverter.to_sdk_tool(t) for t in tools]
