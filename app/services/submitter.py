"""Submission of long URLs to the shortening service."""

import logging
from typing import Callable, Optional

from app.services import status
from app.services.browser import Clipboard
from app.services.client import LinkServiceClient
from app.services.exceptions import (
    EmptyURLError,
    SubmissionError,
    SubmissionInProgressError,
)

logger = logging.getLogger(__name__)

StatusUpdate = Callable[..., None]


def compose_short_url(origin: str, short_url: str) -> str:
    """Build the fully-qualified link shown to the user."""
    return f"{origin}/{short_url}"


class Submitter:
    """
    Shortens user-entered URLs and holds the resulting display link.

    Only one submission may be in flight at a time; the presentation layer
    disables its submit control while ``can_submit`` is False.
    """

    def __init__(
        self,
        client: LinkServiceClient,
        clipboard: Clipboard,
        origin: str,
        apply: StatusUpdate,
        is_active: Optional[Callable[[], bool]] = None,
    ):
        """
        Initialize the submitter.

        Args:
            client: Shortening service client
            clipboard: System clipboard used by the copy affordance
            origin: The client's own origin, e.g. ``https://sho.rt``
            apply: Receives status transitions and their arguments
            is_active: Returns False once the owning view is gone
        """
        self.client = client
        self.clipboard = clipboard
        self.origin = origin
        self._apply = apply
        self._is_active = is_active or (lambda: True)
        self.short_url = ""
        self._pending = False

    @property
    def pending(self) -> bool:
        return self._pending

    @property
    def can_submit(self) -> bool:
        return not self._pending

    async def submit(self, raw_url: str) -> Optional[str]:
        """
        Shorten ``raw_url`` and expose the resulting display link.

        Failures are reported through the status only.

        Returns:
            Optional[str]: The display short URL, or None if the submission failed

        Raises:
            EmptyURLError: If ``raw_url`` is empty
            SubmissionInProgressError: If a previous submission is still pending
        """
        if not raw_url:
            raise EmptyURLError("URL to shorten must not be empty")
        if self._pending:
            raise SubmissionInProgressError("A submission is already in progress")

        self._pending = True
        self._apply(status.begin)
        try:
            result = await self.client.shorten(raw_url)
        except SubmissionError as e:
            message = e.detail or status.GENERIC_ERROR_MESSAGE
            logger.info(f"Shortening {raw_url} failed: {message}")
            if self._is_active():
                self._apply(status.fail, message)
            return None
        finally:
            self._pending = False

        if not self._is_active():
            logger.debug("Discarding shorten result for a closed view")
            return None

        self.short_url = compose_short_url(self.origin, result.short_url)
        logger.info(f"Shortened {raw_url} to {self.short_url}")
        self._apply(status.succeed, status.SHORTENED_MESSAGE)
        return self.short_url

    def copy_to_clipboard(self) -> bool:
        """Copy the current display link and report it."""
        try:
            self.clipboard.write_text(self.short_url)
        except Exception as e:
            logger.error(f"Clipboard write failed: {e}")
            self._apply(status.fail, status.GENERIC_ERROR_MESSAGE)
            return False
        self._apply(status.succeed, status.COPIED_MESSAGE)
        return True
