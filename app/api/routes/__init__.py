"""Routes package initialization.

This module exports the route collection for the application.
"""

from fastapi import APIRouter

from app.api.routes import pages

# Create root router
api_router = APIRouter()

# The page routes own the whole path space: "/" is the submission view
# and every other path is a short code
api_router.include_router(pages.router)

__all__ = ["api_router"]
