"""Scoped, cancellable timer for deferred client-side navigation."""

import asyncio
import logging
from typing import Callable, Optional

from app.core.config import settings

logger = logging.getLogger(__name__)


class DeferredNavigation:
    """
    One pending navigation at a time, fired after a fixed delay.

    The handle is owned by a view. Scheduling again replaces the pending
    navigation, and leaving the ``with`` block (or calling ``cancel``)
    guarantees the callback never runs.
    """

    def __init__(self, navigate: Callable[[str], None], delay: Optional[float] = None):
        self._navigate = navigate
        self.delay = settings.RECOVERY_DELAY_SECONDS if delay is None else delay
        self._handle: Optional[asyncio.TimerHandle] = None
        self._target: Optional[str] = None

    def __enter__(self) -> "DeferredNavigation":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cancel()

    @property
    def pending(self) -> bool:
        return self._handle is not None

    @property
    def target(self) -> Optional[str]:
        return self._target

    @property
    def when(self) -> Optional[float]:
        """Loop time at which the navigation fires, if one is pending."""
        return self._handle.when() if self._handle is not None else None

    def schedule(self, path: str) -> None:
        """Navigate to ``path`` after ``delay`` seconds on the running loop."""
        self.cancel()
        loop = asyncio.get_running_loop()
        self._target = path
        self._handle = loop.call_later(self.delay, self._fire)
        logger.debug(f"Navigation to '{path}' scheduled in {self.delay}s")

    def cancel(self) -> bool:
        """Drop the pending navigation. Returns True if one was pending."""
        if self._handle is None:
            return False
        self._handle.cancel()
        logger.debug(f"Scheduled navigation to '{self._target}' cancelled")
        self._handle = None
        self._target = None
        return True

    def _fire(self) -> None:
        path = self._target
        self._handle = None
        self._target = None
        self._navigate(path)
