"""Hosting view for the URL shortener client.

The view reacts to navigation events, runs the resolver or the submitter
depending on the selected mode, and owns the display state handed to the
presentation layer.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, FrozenSet, Optional, Set

from app.services import status
from app.services.browser import Clipboard, Navigator
from app.services.client import LinkServiceClient
from app.services.exceptions import ModeError, ViewClosedError
from app.services.modes import Mode, ResolveMode, ShortenMode, select_mode
from app.services.resolver import Resolver
from app.services.status import OperationStatus
from app.services.submitter import Submitter
from app.services.timer import DeferredNavigation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DisplayState:
    """Snapshot of everything the presentation layer renders."""
    path: Optional[str]
    mode: Optional[Mode]
    status: OperationStatus
    short_url: str
    can_submit: bool
    returning_to_root: bool


class LinkView:
    """
    The single view of the client.

    ``navigate`` must be called on every navigation event; it re-selects the
    mode synchronously and starts exactly one resolution per event in resolve
    mode. ``close`` tears the view down: the pending return-to-root timer is
    cancelled and late network results are ignored.
    """

    def __init__(
        self,
        client: LinkServiceClient,
        navigator: Navigator,
        clipboard: Clipboard,
        origin: str,
        recovery_delay: Optional[float] = None,
    ):
        self.status: OperationStatus = status.IDLE
        self.path: Optional[str] = None
        self.mode: Optional[Mode] = None
        self._generation = 0
        self._closed = False
        self._resolution: Optional[asyncio.Task] = None
        self._in_flight: Set[asyncio.Task] = set()

        self.recovery = DeferredNavigation(navigator.push, delay=recovery_delay)
        self.resolver = Resolver(client, navigator, self.recovery, self._apply)
        self.submitter = Submitter(
            client, clipboard, origin, self._apply, is_active=self._is_open
        )

    async def __aenter__(self) -> "LinkView":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def _is_open(self) -> bool:
        return not self._closed

    def _is_current(self, generation: int) -> bool:
        return not self._closed and generation == self._generation

    def _apply(self, transition: Callable[..., OperationStatus], *args) -> None:
        if self._closed:
            return
        self.status = transition(self.status, *args)

    def navigate(self, path: str) -> Mode:
        """Handle a navigation event to ``path``. Must run on the event loop."""
        if self._closed:
            raise ViewClosedError("Cannot navigate a closed view")

        self._generation += 1
        self.recovery.cancel()
        self.path = path
        self.mode = select_mode(path)
        self._resolution = None
        logger.debug(f"Navigated to '{path}', mode {self.mode.name}")

        if isinstance(self.mode, ResolveMode):
            generation = self._generation
            self._resolution = asyncio.get_running_loop().create_task(
                self.resolver.resolve(
                    self.mode.code,
                    is_current=lambda: self._is_current(generation),
                )
            )
            self._in_flight.add(self._resolution)
            self._resolution.add_done_callback(self._resolution_done)
        return self.mode

    @property
    def in_flight(self) -> FrozenSet[asyncio.Task]:
        """Resolutions that have not finished yet, superseded ones included."""
        return frozenset(self._in_flight)

    def _resolution_done(self, task: asyncio.Task) -> None:
        self._in_flight.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(f"Resolution failed unexpectedly: {exc!r}")

    async def wait_resolution(self) -> bool:
        """Wait for the resolution started by the last navigation, if any."""
        if self._resolution is None:
            return False
        return await self._resolution

    async def submit(self, raw_url: str) -> Optional[str]:
        self._require_shorten_mode()
        return await self.submitter.submit(raw_url)

    def copy_to_clipboard(self) -> bool:
        self._require_shorten_mode()
        return self.submitter.copy_to_clipboard()

    def show_short_url(self, short_url: str) -> None:
        """Restore a previously produced display link, e.g. from a form field."""
        self.submitter.short_url = short_url

    def dismiss(self) -> None:
        """Dismiss the current banner."""
        self._apply(status.dismiss)

    def render(self) -> DisplayState:
        """Current display state. Never triggers an operation."""
        return DisplayState(
            path=self.path,
            mode=self.mode,
            status=self.status,
            short_url=self.submitter.short_url,
            can_submit=self.submitter.can_submit,
            returning_to_root=self.recovery.pending,
        )

    def close(self) -> None:
        """Tear the view down."""
        if self._closed:
            return
        self._closed = True
        if self.recovery.cancel():
            logger.debug("Pending return to root dropped on teardown")

    def _require_shorten_mode(self) -> None:
        if self._closed:
            raise ViewClosedError("The view has been closed")
        if not isinstance(self.mode, ShortenMode):
            raise ModeError("Submission is only available on the root path")
