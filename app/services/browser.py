"""Browser-side collaborators the client operations act through."""

from typing import Protocol


class Navigator(Protocol):
    """The browsing context the client runs in."""

    def assign(self, url: str) -> None:
        """Replace the whole browsing context with ``url``."""
        ...

    def push(self, path: str) -> None:
        """Client-side route change within the application."""
        ...


class Clipboard(Protocol):
    def write_text(self, text: str) -> None:
        ...
