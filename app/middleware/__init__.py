"""HTTP middleware for the URL shortener client."""

from app.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
