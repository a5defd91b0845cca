"""HTTP client for the remote URL shortening service.

This module wraps an ``httpx.AsyncClient`` and exposes the two round-trips
the web client needs: looking up a short code and shortening a URL.
Transport and protocol failures are translated into the exceptions of
``app.services.exceptions``.
"""

import logging
from typing import Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from app.core.config import settings
from app.models.link import (
    ResolutionResult,
    ServiceErrorBody,
    SubmissionRequest,
    SubmissionResult,
)
from app.services.exceptions import EmptyURLError, ResolutionError, SubmissionError

logger = logging.getLogger(__name__)


class LinkServiceClient:
    """Async client for the shortening service's lookup and shorten endpoints."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Service base address, defaults to ``settings.API_URL``
            timeout: Per-request timeout in seconds, defaults to ``settings.API_TIMEOUT``
            transport: Optional httpx transport, used to fake the service in tests
        """
        self.base_url = (base_url or settings.API_URL).rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=settings.API_TIMEOUT if timeout is None else timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> "LinkServiceClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def lookup(self, code: str) -> ResolutionResult:
        """
        Look up the original URL for a short code.

        Args:
            code: Short code taken from the navigation path

        Returns:
            ResolutionResult: The mapped original URL

        Raises:
            ResolutionError: On any transport error, non-2xx status or malformed body
        """
        path = "/" + quote(code, safe="/")
        try:
            response = await self._client.get(path)
        except httpx.HTTPError as e:
            logger.warning(f"Lookup of '{code}' failed in transit: {e!r}")
            raise ResolutionError(f"Lookup request failed: {e}") from e

        if not response.is_success:
            logger.info(f"Lookup of '{code}' rejected with status {response.status_code}")
            raise ResolutionError(
                f"Lookup returned status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return ResolutionResult.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning(f"Malformed lookup response for '{code}': {e}")
            raise ResolutionError(
                "Malformed lookup response", status_code=response.status_code
            ) from e

    async def shorten(self, original_url: str) -> SubmissionResult:
        """
        Ask the service to shorten a URL.

        Args:
            original_url: URL exactly as entered by the user

        Returns:
            SubmissionResult: The short code assigned by the service

        Raises:
            SubmissionError: On transport failure or rejection; ``detail`` holds
                the service's explanation when the error body carries one
            EmptyURLError: If ``original_url`` is empty
        """
        if not original_url:
            raise EmptyURLError("URL to shorten must not be empty")
        payload = SubmissionRequest(original_url=original_url)
        try:
            response = await self._client.post("/shorten", json=payload.model_dump())
        except httpx.HTTPError as e:
            logger.warning(f"Shorten request failed in transit: {e!r}")
            raise SubmissionError(f"Shorten request failed: {e}") from e

        if not response.is_success:
            detail = self._error_detail(response)
            logger.info(
                f"Shorten request rejected with status {response.status_code}: {detail}"
            )
            raise SubmissionError(
                f"Shorten returned status {response.status_code}",
                status_code=response.status_code,
                detail=detail,
            )

        try:
            return SubmissionResult.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning(f"Malformed shorten response: {e}")
            raise SubmissionError(
                "Malformed shorten response", status_code=response.status_code
            ) from e

    @staticmethod
    def _error_detail(response: httpx.Response) -> Optional[str]:
        try:
            body = response.json()
        except ValueError:
            return None
        if not isinstance(body, dict):
            return None
        try:
            return ServiceErrorBody.model_validate(body).message()
        except ValidationError:
            return None
