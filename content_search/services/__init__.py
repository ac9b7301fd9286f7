# Content Search Services
"""Service layer: text matching, content source clients and search operations."""

from .contentful_client import ContentfulClient, contentful_client
from .errors import ContentSourceError
from .ghost_client import GhostClient, ghost_client
from .openai_converter import mcp_to_openai_tool, mcp_tools_to_openai
from .search_service import SearchService, search_service
from .tool_registry import TOOL_DEFINITIONS, ToolConverter, ToolDefinition, get_tool

__all__ = [
    "ContentSourceError",
    "GhostClient",
    "ghost_client",
    "ContentfulClient",
    "contentful_client",
    "SearchService",
    "search_service",
    "TOOL_DEFINITIONS",
    "ToolDefinition",
    "ToolConverter",
    "get_tool",
    "mcp_to_openai_tool",
    "mcp_tools_to_openai",
]
