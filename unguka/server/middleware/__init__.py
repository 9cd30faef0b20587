"""
Middleware modules for the Unguka server.

This package contains custom middleware for request/response logging
and other cross-cutting concerns.
"""

from .request_logging import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
