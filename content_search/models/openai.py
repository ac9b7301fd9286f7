# OpenAI-Compatible Models
"""Pydantic models for exposing the search tools in OpenAI function calling format."""

from typing import Any, Dict, List, Literal

from pydantic import BaseModel, Field


class OpenAIFunctionDef(BaseModel):
    """OpenAI function definition."""

    name: str = Field(..., description="Function name (same as the MCP tool name)")
    description: str = Field(..., description="Function description")
    parameters: Dict[str, Any] = Field(..., description="JSON Schema for parameters")
    # Strict mode rejects keywords such as minLength used in the tool schemas
    strict: bool = Field(default=False, description="Strict mode for validation")


class OpenAITool(BaseModel):
    """OpenAI tool wrapper."""

    type: Literal["function"] = "function"
    function: OpenAIFunctionDef


class OpenAIToolsResponse(BaseModel):
    """Response listing the search tools in OpenAI format."""

    tools: List[OpenAITool] = Field(..., description="Available tools")
    total: int = Field(..., description="Number of tools")
