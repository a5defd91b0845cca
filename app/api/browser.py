"""Browser collaborators for server-rendered pages.

A page request cannot drive the visitor's browser directly, so these
record what the view asked for and the route turns it into a response:
a redirect for a full navigation, a script for a clipboard write.
"""

from typing import List, Optional


class PageBrowser:
    """Records navigations and clipboard writes requested during one request."""

    def __init__(self):
        self.location: Optional[str] = None
        self.pushed: List[str] = []
        self.clipboard: Optional[str] = None

    def assign(self, url: str) -> None:
        self.location = url

    def push(self, path: str) -> None:
        self.pushed.append(path)

    def write_text(self, text: str) -> None:
        self.clipboard = text
