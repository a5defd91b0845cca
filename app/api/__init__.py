"""API package for the URL shortener client.

This package contains the web layer: page routes, browser stand-ins,
and dependency providers.
"""

from app.api.routes import api_router

__all__ = ["api_router"]
