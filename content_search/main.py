# Content Search HTTP Entry Point
"""FastAPI application with MCP SDK Streamable HTTP transport."""

import json
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.routing import Route

from content_search.config import settings
from content_search.handlers import handle_tools_call, handle_tools_list
from content_search.middleware.auth import AuthMiddleware
from content_search.middleware.correlation import (
    CORRELATION_HEADER,
    CorrelationMiddleware,
    set_correlation_id,
)
from content_search.models.openai import OpenAIToolsResponse
from content_search.server import session_manager
from content_search.services.contentful_client import contentful_client
from content_search.services.ghost_client import ghost_client
from content_search.services.openai_converter import mcp_tools_to_openai

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("content_search.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(f"Starting content search server v{settings.mcp_server_version}")
    if not settings.ghost_content_endpoint:
        logger.warning("GHOST_CONTENT_ENDPOINT not set; blog search tools will fail")
    if not settings.contentful_space_id:
        logger.warning("CONTENTFUL_SPACE_ID not set; Contentful search tools will fail")

    # Start MCP SDK session manager (manages Streamable HTTP transport lifecycle)
    async with session_manager.run():
        yield

    logger.info("Shutting down content search server")
    await ghost_client.close()
    await contentful_client.close()


app = FastAPI(
    title="Content Search MCP Server",
    description="MCP tools for searching Ghost blog and Contentful content",
    version=settings.mcp_server_version,
    lifespan=lifespan,
)

# Add middleware (order matters - first added = innermost)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(AuthMiddleware)
app.add_middleware(CorrelationMiddleware)


# =============================================================================
# MCP SDK Streamable HTTP Transport at /mcp
# =============================================================================


class MCPTransport:
    """
    ASGI app that propagates the correlation header into context, then
    delegates to the MCP SDK session manager.

    Starlette's Route treats class instances (non-function callables) as
    raw ASGI apps, passing (scope, receive, send) directly.
    """

    async def __call__(self, scope, receive, send):
        if scope["type"] == "http":
            headers = dict(scope.get("headers", []))
            header = CORRELATION_HEADER.lower().encode()
            set_correlation_id(headers.get(header, b"").decode() or None)
        await session_manager.handle_request(scope, receive, send)


# POST for JSON-RPC, GET for SSE streaming, DELETE for session termination.
# Starlette's Mount only matches /mcp/ and /mcp/*, so the bare path is a Route.
app.router.routes.insert(0, Route("/mcp", MCPTransport(), methods=["GET", "POST", "DELETE"]))


# =============================================================================
# Health Endpoints
# =============================================================================


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": settings.mcp_server_name,
        "version": settings.mcp_server_version,
    }


@app.get("/")
async def root():
    """Root endpoint with service info."""
    return {
        "service": settings.mcp_server_name,
        "version": settings.mcp_server_version,
        "endpoints": {
            "health": "/health",
            "mcp": "/mcp",
            "openai": "/openai/tools",
            "rest": "/rest/tools",
        },
    }


# =============================================================================
# REST Convenience Endpoints
# =============================================================================


async def _read_arguments(request: Request) -> dict:
    """
    Read tool arguments from a request body.

    Accepts both ``{"arguments": {...}}`` (MCP style) and bare arguments
    (OpenAI style).
    """
    try:
        body = await request.json()
    except json.JSONDecodeError:
        body = {}
    if not isinstance(body, dict):
        return {}
    if "arguments" in body and isinstance(body["arguments"], dict):
        return body["arguments"]
    return body


@app.get("/rest/tools")
async def list_tools(request: Request):
    """List available MCP tools (REST endpoint for testing)."""
    correlation_id = getattr(request.state, "correlation_id", None)
    result = await handle_tools_list(correlation_id)
    return result.model_dump()


@app.post("/rest/tools/{name}/call")
async def call_tool(name: str, request: Request):
    """Execute an MCP tool (REST endpoint for testing)."""
    result = await handle_tools_call(
        name=name,
        arguments=await _read_arguments(request),
        correlation_id=getattr(request.state, "correlation_id", None),
    )
    return result.model_dump()


# =============================================================================
# OpenAI-Compatible Endpoints
# =============================================================================


@app.get("/openai/tools", response_model=OpenAIToolsResponse)
async def list_openai_tools(request: Request):
    """List the search tools in OpenAI function calling format."""
    correlation_id = getattr(request.state, "correlation_id", None)
    mcp_result = await handle_tools_list(correlation_id)
    openai_tools = mcp_tools_to_openai(mcp_result.tools)

    return OpenAIToolsResponse(
        tools=openai_tools,
        total=len(openai_tools),
    )


@app.post("/openai/tools/{name}")
async def call_openai_tool(name: str, request: Request):
    """
    Execute a tool using OpenAI-compatible format.

    OpenAI clients send arguments directly in the request body; wrapped
    ``arguments`` are accepted too.
    """
    result = await handle_tools_call(
        name=name,
        arguments=await _read_arguments(request),
        correlation_id=getattr(request.state, "correlation_id", None),
    )
    return result.model_dump()


def run():
    """Run the HTTP server with uvicorn."""
    import uvicorn

    config = {
        "app": "content_search.main:app",
        "host": settings.host,
        "port": settings.port,
        "reload": settings.debug,
    }

    if settings.ssl_certfile and settings.ssl_keyfile:
        config["ssl_certfile"] = settings.ssl_certfile
        config["ssl_keyfile"] = settings.ssl_keyfile
        logger.info(f"Starting with HTTPS on port {settings.port}")
    else:
        logger.info(f"Starting with HTTP on port {settings.port}")

    uvicorn.run(**config)


if __name__ == "__main__":
    run()
