"""Exceptions for the URL shortener client.

This module contains the exception hierarchy for the client service layer,
providing domain-specific exceptions that abstract the HTTP transport.
"""

from typing import Optional


class ClientError(Exception):
    """Base exception for all client-level errors."""
    pass


class ServiceRequestError(ClientError):
    """A round-trip to the remote shortening service did not succeed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ResolutionError(ServiceRequestError):
    """Short code is unknown, expired, or could not be looked up."""
    pass


class SubmissionError(ServiceRequestError):
    """The shorten request was rejected or failed in transit.

    ``detail`` carries the service-provided explanation when there is one.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        detail: Optional[str] = None
    ):
        super().__init__(message, status_code=status_code)
        self.detail = detail


class SubmissionInProgressError(ClientError):
    """A submission was attempted while the previous one is still pending."""
    pass


class EmptyURLError(ClientError, ValueError):
    """The URL to shorten is empty."""
    pass


class ModeError(ClientError):
    """The operation is not available in the view's current mode."""
    pass


class ViewClosedError(ClientError):
    """The view has been torn down and no longer accepts events."""
    pass
