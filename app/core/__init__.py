"""Core module for the URL shortener client."""

from app.core.config import settings

__all__ = ["settings"]
