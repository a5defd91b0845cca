"""Mode selection from the current navigation path."""

from dataclasses import dataclass
from typing import Union

PATH_SEPARATOR = "/"


@dataclass(frozen=True)
class ShortenMode:
    """The path is the root: show the submission form."""

    name = "shorten"


@dataclass(frozen=True)
class ResolveMode:
    """The path names a short code to look up."""

    code: str

    name = "resolve"


Mode = Union[ShortenMode, ResolveMode]


def extract_short_code(path: str) -> str:
    """Return ``path`` with exactly one leading separator removed."""
    if path.startswith(PATH_SEPARATOR):
        return path[len(PATH_SEPARATOR):]
    return path


def select_mode(path: str) -> Mode:
    """Decide which operation the client runs for ``path``.

    >>> select_mode("/")
    ShortenMode()
    >>> select_mode("/abc123")
    ResolveMode(code='abc123')
    """
    code = extract_short_code(path)
    if not code:
        return ShortenMode()
    return ResolveMode(code=code)
