# MCP Tools Call Handler
"""Handles MCP tools/call request."""

import json
import logging
from typing import Any, Dict, List, Optional

from jsonschema import Draft7Validator
from pydantic import BaseModel

from content_search.models.mcp import (
    MCPErrorCode,
    MCPTextContent,
    MCPToolsCallResponse,
)
from content_search.services.errors import ContentSourceError
from content_search.services.search_service import search_service
from content_search.services.tool_registry import get_tool

logger = logging.getLogger("content_search.handlers.tools_call")


async def handle_tools_call(
    name: str,
    arguments: Dict[str, Any],
    correlation_id: Optional[str] = None,
) -> MCPToolsCallResponse:
    """
    Handle MCP tools/call request.

    1. Look up the tool
    2. Validate arguments against its JSON Schema
    3. Run the search
    4. Return the matches as a JSON array in one text block

    A content source failure is reported as an error result, never as an
    empty match list.

    Args:
        name: Tool name
        arguments: Tool arguments
        correlation_id: Request correlation ID (for logging)

    Returns:
        MCP tool call response
    """
    prefix = f"[{correlation_id}] " if correlation_id else ""

    tool = get_tool(name)
    if tool is None:
        logger.warning(f"{prefix}Unknown tool: {name}")
        return _error_response(
            MCPErrorCode.TOOL_NOT_FOUND,
            f"Tool '{name}' not found",
        )

    validation_errors = _validate_arguments(arguments, tool.input_schema)
    if validation_errors:
        return _error_response(
            MCPErrorCode.INVALID_ARGUMENT,
            f"Invalid arguments: {'; '.join(validation_errors)}",
        )

    query = arguments["query"]
    logger.info(f"{prefix}Executing tool: {name} (query={query!r})")

    try:
        search = getattr(search_service, tool.name)
        results = await search(query)
    except ContentSourceError as e:
        logger.error(f"{prefix}Content source failed for {name}: {e}")
        return _error_response(
            MCPErrorCode.SOURCE_UNAVAILABLE,
            f"Content source unavailable: {e}",
        )
    except Exception as e:
        logger.exception(f"{prefix}Error executing tool {name}: {e}")
        return _error_response(
            MCPErrorCode.EXECUTION_ERROR,
            f"Execution failed: {str(e)}",
        )

    logger.info(f"{prefix}{name} returned {len(results)} matches")
    return _format_result(results)


def _validate_arguments(
    arguments: Dict[str, Any],
    schema: Dict[str, Any],
) -> List[str]:
    """
    Validate arguments against JSON Schema.

    Returns list of error messages, empty if valid.
    """
    validator = Draft7Validator(schema)
    errors = sorted(validator.iter_errors(arguments), key=lambda e: e.json_path)
    return [f"{e.json_path}: {e.message}" for e in errors]


def _error_response(code: MCPErrorCode, message: str) -> MCPToolsCallResponse:
    """Create an error response."""
    logger.debug(f"Returning {code.value}: {message}")
    return MCPToolsCallResponse(
        content=[MCPTextContent(type="text", text=f"Error: {message}")],
        isError=True,
    )


def _format_result(results: List[BaseModel]) -> MCPToolsCallResponse:
    """Serialize search results as a pretty-printed JSON array."""
    payload = [result.model_dump(mode="json") for result in results]
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    return MCPToolsCallResponse(
        content=[MCPTextContent(type="text", text=text)],
        isError=False,
    )
