# Content Search
"""MCP server exposing substring search over Ghost and Contentful content."""
