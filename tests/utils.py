"""Test utilities for URL shortener client tests."""

import asyncio
import json
import random
import string
from typing import Dict, List, Optional, Tuple

import httpx

from app.services import status

SERVICE_URL = "https://links.example.test"
ORIGIN = "https://sho.rt"

# Short enough for tests that wait for the return to the root path
FAST_RECOVERY_DELAY = 0.05


def random_string(length: int = 10) -> str:
    """Generate a random alphanumeric string."""
    return ''.join(random.choice(string.ascii_letters + string.digits) for _ in range(length))


def random_url() -> str:
    """Generate a random URL for testing."""
    domain = f"{random_string(8)}.com"
    path = random_string(12)
    return f"https://{domain}/{path}"


class FakeLinkService:
    """In-memory stand-in for the remote shortening service.

    Used as the handler of an ``httpx.MockTransport``.
    """

    def __init__(self):
        self.links: Dict[str, str] = {}
        self.requests: List[httpx.Request] = []
        self.next_code: Optional[str] = None
        self.shorten_error: Optional[Tuple[int, object]] = None
        self.lookup_timeout = False
        self.shorten_timeout = False
        self.gate: Optional[asyncio.Event] = None

    def add_link(self, code: str, url: str) -> None:
        self.links[code] = url

    def reject_shorten(self, status_code: int, body: object) -> None:
        self.shorten_error = (status_code, body)

    def requests_for(self, method: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == method]

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.gate is not None:
            await self.gate.wait()

        if request.method == "POST" and request.url.path == "/shorten":
            return self._shorten(request)
        if request.method == "GET":
            return self._lookup(request)
        return httpx.Response(405, json={"detail": "Method Not Allowed"})

    def _shorten(self, request: httpx.Request) -> httpx.Response:
        if self.shorten_timeout:
            raise httpx.ReadTimeout("timed out", request=request)
        if self.shorten_error is not None:
            status_code, body = self.shorten_error
            if isinstance(body, str):
                return httpx.Response(status_code, text=body)
            return httpx.Response(status_code, json=body)

        original_url = json.loads(request.content)["original_url"]
        code = self.next_code or random_string(6)
        self.next_code = None
        self.links[code] = original_url
        return httpx.Response(201, json={"short_url": code})

    def _lookup(self, request: httpx.Request) -> httpx.Response:
        if self.lookup_timeout:
            raise httpx.ConnectTimeout("timed out", request=request)
        code = request.url.path[1:]
        if code in self.links:
            return httpx.Response(200, json={"url": self.links[code]})
        return httpx.Response(404, json={"detail": "URL not found"})


class RecordingBrowser:
    """Navigator and clipboard that remember what they were asked to do."""

    def __init__(self, clipboard_error: Optional[Exception] = None):
        self.assigned: List[str] = []
        self.pushed: List[str] = []
        self.copied: List[str] = []
        self.clipboard_error = clipboard_error

    def assign(self, url: str) -> None:
        self.assigned.append(url)

    def push(self, path: str) -> None:
        self.pushed.append(path)

    def write_text(self, text: str) -> None:
        if self.clipboard_error is not None:
            raise self.clipboard_error
        self.copied.append(text)


class StatusRecorder:
    """Holds the status produced by the transitions an operation applies."""

    def __init__(self):
        self.status = status.IDLE
        self.history = []

    def __call__(self, transition, *args) -> None:
        self.status = transition(self.status, *args)
        self.history.append(self.status)


async def settle(rounds: int = 5) -> None:
    """Let pending tasks on the loop make progress."""
    for _ in range(rounds):
        await asyncio.sleep(0)


async def drain() -> None:
    """Wait for every other task on the loop to finish."""
    others = [task for task in asyncio.all_tasks() if task is not asyncio.current_task()]
    await asyncio.gather(*others)
