# Content Search Models
"""Pydantic models for content records, search results and the MCP/OpenAI tool formats."""

from .content import (
    BlogPage,
    BlogPost,
    CaseStudy,
    EventCard,
    InternalEventPage,
    LearnPage,
    RichTextField,
)
from .mcp import (
    MCPErrorCode,
    MCPTextContent,
    MCPTool,
    MCPToolsCallResponse,
    MCPToolsListResponse,
)
from .openai import (
    OpenAIFunctionDef,
    OpenAITool,
    OpenAIToolsResponse,
)
from .results import (
    BlogPageResult,
    BlogPostResult,
    CaseStudyResult,
    EventResult,
    LearnPageResult,
)

__all__ = [
    # Content records
    "BlogPost",
    "BlogPage",
    "LearnPage",
    "CaseStudy",
    "InternalEventPage",
    "EventCard",
    "RichTextField",
    # Search results
    "BlogPostResult",
    "BlogPageResult",
    "LearnPageResult",
    "CaseStudyResult",
    "EventResult",
    # MCP models
    "MCPErrorCode",
    "MCPTool",
    "MCPTextContent",
    "MCPToolsListResponse",
    "MCPToolsCallResponse",
    # OpenAI models
    "OpenAIFunctionDef",
    "OpenAITool",
    "OpenAIToolsResponse",
]
