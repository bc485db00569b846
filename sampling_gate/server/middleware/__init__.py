"""
Middleware modules for the sampling gate server.

This package contains custom middleware for request/response logging,
tracing, and other cross-cutting concerns.
"""

from .logfire_middleware import LogfireMiddleware

__all__ = ["LogfireMiddleware"]
