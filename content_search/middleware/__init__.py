# Content Search Middleware
"""Request middleware for authentication and correlation tracking."""

from .auth import AuthMiddleware, verify_api_key
from .correlation import CorrelationMiddleware, get_correlation_id, set_correlation_id

__all__ = [
    "AuthMiddleware",
    "verify_api_key",
    "CorrelationMiddleware",
    "get_correlation_id",
    "set_correlation_id",
]
