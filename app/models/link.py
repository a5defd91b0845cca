"""Wire models for the remote shortening service.

These mirror the request and response bodies of the two endpoints the
client consumes: ``GET /{code}`` and ``POST /shorten``.
"""

from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field


class SubmissionRequest(BaseModel):
    """Body of the shorten request."""
    original_url: str = Field(min_length=1, description="The long URL to shorten")


class SubmissionResult(BaseModel):
    """Successful shorten response."""
    short_url: str = Field(description="Short code assigned by the service")


class ResolutionResult(BaseModel):
    """Successful lookup response."""
    url: str = Field(min_length=1, description="Original URL the short code maps to")


class ServiceErrorBody(BaseModel):
    """Error body returned by the service on rejected requests.

    FastAPI services return a string ``detail`` for handled errors and a
    list of validation entries for rejected request bodies.
    """
    detail: Optional[Union[str, List[Any]]] = None

    def message(self) -> Optional[str]:
        """Return the most specific human-readable message, if any."""
        if isinstance(self.detail, str):
            return self.detail.strip() or None
        if isinstance(self.detail, list):
            messages = []
            for entry in self.detail:
                if isinstance(entry, dict) and entry.get("msg"):
                    messages.append(str(entry["msg"]))
                elif isinstance(entry, str) and entry:
                    messages.append(entry)
            return "; ".join(messages) or None
        return None
