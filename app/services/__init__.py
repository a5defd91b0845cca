"""Service layer for the URL shortener client.

This package contains the client-side flow: mode selection, resolution,
submission, and the view that ties them to navigation events.
"""

from app.services.client import LinkServiceClient
from app.services.modes import ResolveMode, ShortenMode, select_mode
from app.services.resolver import Resolver
from app.services.submitter import Submitter
from app.services.view import DisplayState, LinkView

__all__ = [
    "DisplayState",
    "LinkServiceClient",
    "LinkView",
    "ResolveMode",
    "Resolver",
    "ShortenMode",
    "Submitter",
    "select_mode",
]
