"""
Data models for the URL shortener client.

This module exports the pydantic models exchanged with the remote service.
"""

from app.models.link import (
    ResolutionResult,
    ServiceErrorBody,
    SubmissionRequest,
    SubmissionResult,
)

__all__ = [
    "ResolutionResult",
    "ServiceErrorBody",
    "SubmissionRequest",
    "SubmissionResult",
]
