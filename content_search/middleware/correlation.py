# Correlation ID Middleware
"""Request correlation ID tracking, forwarded to the content sources."""

import logging
import uuid
from contextvars import ContextVar
from typing import Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("content_search.middleware.correlation")

CORRELATION_HEADER = "X-Correlation-ID"

# Context variable to store correlation ID
_correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from context."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: Optional[str]) -> None:
    """Set the correlation ID in context."""
    _correlation_id.set(correlation_id)


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Middleware to extract or generate correlation ID."""

    async def dispatch(self, request: Request, call_next):
        """Extract or generate correlation ID for request."""
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())

        set_correlation_id(correlation_id)
        request.state.correlation_id = correlation_id

        logger.debug(f"[{correlation_id}] {request.method} {request.url.path}")

        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
