"""Resolution of short codes into a full navigation.

The resolver looks up a short code with the remote service and replaces the
browsing context with the original URL. Any failure is reported uniformly
and followed by a timed return to the submission view.
"""

import logging
from typing import Callable, Optional

from app.services import status
from app.services.browser import Navigator
from app.services.client import LinkServiceClient
from app.services.exceptions import ResolutionError
from app.services.timer import DeferredNavigation

logger = logging.getLogger(__name__)

ROOT_PATH = "/"

StatusUpdate = Callable[..., None]


def _always_current() -> bool:
    return True


class Resolver:
    """
    Turns a short code into a redirect.

    Status changes are pushed through ``apply``, which receives one of the
    transition functions of ``app.services.status`` and its arguments.
    """

    def __init__(
        self,
        client: LinkServiceClient,
        navigator: Navigator,
        recovery: DeferredNavigation,
        apply: StatusUpdate,
    ):
        self.client = client
        self.navigator = navigator
        self.recovery = recovery
        self._apply = apply

    async def resolve(
        self,
        code: str,
        is_current: Optional[Callable[[], bool]] = None
    ) -> bool:
        """
        Resolve ``code`` and navigate to the original URL.

        Args:
            code: Non-empty short code
            is_current: Returns False once the navigation that started this
                resolution has been superseded; late results are then dropped

        Returns:
            bool: True if a full navigation was performed
        """
        if not code:
            raise ValueError("short code must not be empty")
        is_current = is_current or _always_current

        self._apply(status.begin)
        try:
            result = await self.client.lookup(code)
        except ResolutionError as e:
            if not is_current():
                logger.debug(f"Discarding stale lookup failure for '{code}'")
                return False
            logger.info(f"Could not resolve '{code}': {e}")
            self._apply(status.fail, status.INVALID_OR_EXPIRED_MESSAGE)
            self.recovery.schedule(ROOT_PATH)
            return False

        if not is_current():
            logger.debug(f"Discarding stale lookup result for '{code}'")
            return False

        logger.info(f"Redirecting '{code}' to {result.url}")
        self.navigator.assign(result.url)
        return True
