# Tools List Handler Tests
"""Tests for MCP tools/list handler and tool conversion."""

import pytest

from content_search.handlers.tools_list import handle_tools_list
from content_search.services.openai_converter import mcp_tools_to_openai
from content_search.services.tool_registry import TOOL_DEFINITIONS, get_tool

EXPECTED_TOOLS = [
    "search_blog_posts",
    "search_blog_pages",
    "search_learn_pages",
    "search_case_studies",
    "search_events",
]


class TestToolsList:
    """Test tools/list handler."""

    @pytest.mark.asyncio
    async def test_lists_all_search_tools(self):
        result = await handle_tools_list()

        assert [t.name for t in result.tools] == EXPECTED_TOOLS

    @pytest.mark.asyncio
    async def test_query_schema(self):
        result = await handle_tools_list()

        for tool in result.tools:
            schema = tool.inputSchema
            assert schema["type"] == "object"
            assert schema["required"] == ["query"]
            assert schema["properties"]["query"]["type"] == "string"
            assert schema["properties"]["query"]["minLength"] == 1
            assert schema["additionalProperties"] is False

    @pytest.mark.asyncio
    async def test_descriptions_name_searched_fields(self):
        result = await handle_tools_list()
        descriptions = {t.name: t.description for t in result.tools}

        assert "excerpt" in descriptions["search_blog_posts"]
        assert "event cards" in descriptions["search_events"]


class TestToolRegistry:
    """Test tool lookup and format conversion."""

    def test_get_tool(self):
        assert get_tool("search_events").name == "search_events"
        assert get_tool("missing") is None

    def test_every_tool_has_search_method(self):
        from content_search.services.search_service import SearchService

        for tool in TOOL_DEFINITIONS:
            assert callable(getattr(SearchService, tool.name))

    @pytest.mark.asyncio
    async def test_openai_conversion(self):
        result = await handle_tools_list()
        openai_tools = mcp_tools_to_openai(result.tools)

        assert len(openai_tools) == len(EXPECTED_TOOLS)
        first = openai_tools[0]
        assert first.type == "function"
        assert first.function.name == "search_blog_posts"
        assert first.function.parameters == result.tools[0].inputSchema
        assert first.function.strict is False
