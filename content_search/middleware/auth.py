# Authentication Middleware
"""API key authentication for the HTTP surface.

Clients send ``Authorization: Bearer <SERVICE_API_KEY>``. With no key
configured the server runs in dev mode and accepts every request.
"""

import logging
from typing import Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from content_search.config import settings

logger = logging.getLogger("content_search.middleware.auth")


def verify_api_key(authorization: Optional[str]) -> bool:
    """
    Verify API key from Authorization header.

    Args:
        authorization: Authorization header value (e.g., "Bearer xxx")

    Returns:
        True if the bearer token equals the configured service API key
    """
    if not authorization:
        return False

    parts = authorization.split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return False

    return parts[1].strip() == settings.service_api_key


class AuthMiddleware(BaseHTTPMiddleware):
    """Middleware to verify API key authentication."""

    # Paths that don't require authentication
    PUBLIC_PATHS = {"/health", "/health/", "/"}

    async def dispatch(self, request: Request, call_next):
        """Check authentication for protected endpoints."""
        path = request.url.path

        # Skip auth for CORS preflight requests
        if request.method == "OPTIONS":
            return await call_next(request)

        if path in self.PUBLIC_PATHS:
            return await call_next(request)

        if not settings.service_api_key:
            logger.debug("Dev mode: SERVICE_API_KEY not set, skipping auth")
            return await call_next(request)

        if not verify_api_key(request.headers.get("Authorization")):
            logger.warning(f"Unauthorized request to {path}")
            return JSONResponse(
                status_code=401,
                content={"detail": "Invalid or missing API key"},
                headers={"WWW-Authenticate": "Bearer"},
            )

        return await call_next(request)
