# MCP SDK Server Tests
"""Tests for MCP SDK server handlers."""

from unittest.mock import patch

import pytest

from content_search.models.mcp import MCPTextContent, MCPToolsCallResponse
from content_search.server import ToolExecutionError, sdk_call_tool, sdk_list_tools


class TestSDKListTools:
    """Test SDK list_tools handler."""

    @pytest.mark.asyncio
    async def test_list_tools_converts_to_sdk_types(self):
        result = await sdk_list_tools()

        assert len(result) == 5
        tool = result[0]
        assert tool.name == "search_blog_posts"
        assert tool.inputSchema["required"] == ["query"]
        assert tool.annotations is not None
        assert tool.annotations.readOnlyHint is True
        assert tool.annotations.destructiveHint is False
        assert tool.annotations.openWorldHint is True


class TestSDKCallTool:
    """Test SDK call_tool handler."""

    @pytest.mark.asyncio
    async def test_call_tool_delegates_to_handler(self):
        with patch("content_search.server.handle_tools_call") as mock_handler:
            mock_handler.return_value = MCPToolsCallResponse(
                content=[MCPTextContent(type="text", text="[]")],
                isError=False,
            )

            result = await sdk_call_tool("search_events", {"query": "summit"})

            mock_handler.assert_called_once_with(
                name="search_events",
                arguments={"query": "summit"},
                correlation_id=None,
            )
            assert len(result) == 1
            assert result[0].type == "text"
            assert result[0].text == "[]"

    @pytest.mark.asyncio
    async def test_call_tool_none_arguments(self):
        with patch("content_search.server.handle_tools_call") as mock_handler:
            mock_handler.return_value = MCPToolsCallResponse(
                content=[MCPTextContent(type="text", text="[]")],
                isError=False,
            )

            await sdk_call_tool("search_events", None)

            assert mock_handler.call_args.kwargs["arguments"] == {}

    @pytest.mark.asyncio
    async def test_call_tool_error_raises(self):
        """Errors are raised so the SDK returns an isError result."""
        with patch("content_search.server.handle_tools_call") as mock_handler:
            mock_handler.return_value = MCPToolsCallResponse(
                content=[MCPTextContent(type="text", text="Error: Tool 'x' not found")],
                isError=True,
            )

            with pytest.raises(ToolExecutionError, match="not found"):
                await sdk_call_tool("x", {})
