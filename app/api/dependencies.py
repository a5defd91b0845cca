"""API dependencies for FastAPI.

This module provides dependency injection functions for the page routes
to access the shortening service client and a per-request view.
"""

from typing import AsyncGenerator

from fastapi import Depends, Request

from app.api.browser import PageBrowser
from app.core.config import settings
from app.services.client import LinkServiceClient
from app.services.view import LinkView


async def get_link_client(request: Request) -> LinkServiceClient:
    """Get the application-wide shortening service client."""
    return request.app.state.link_client


def get_origin(request: Request) -> str:
    """Get the origin used to build displayed short links."""
    if settings.PUBLIC_ORIGIN:
        return settings.PUBLIC_ORIGIN
    return str(request.base_url).rstrip("/")


async def get_browser() -> PageBrowser:
    """Get the browser stand-in for the current request."""
    return PageBrowser()


async def get_view(
    client: LinkServiceClient = Depends(get_link_client),
    browser: PageBrowser = Depends(get_browser),
    origin: str = Depends(get_origin),
) -> AsyncGenerator[LinkView, None]:
    """Get a view that lives for the duration of the request."""
    async with LinkView(client, browser, browser, origin) as view:
        yield view
