"""Test fixtures for the URL shortener client."""

import os

# Keep test runs from writing log files
os.environ.setdefault("LOG_FILE_ENABLED", "false")
os.environ.setdefault("ENVIRONMENT", "testing")

from typing import AsyncGenerator, Generator

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.api.dependencies import get_link_client
from app.main import app as main_app
from app.services.client import LinkServiceClient
from app.services.view import LinkView
from tests.utils import (
    FAST_RECOVERY_DELAY,
    ORIGIN,
    SERVICE_URL,
    FakeLinkService,
    RecordingBrowser,
)


@pytest.fixture
def fake_service() -> FakeLinkService:
    """Return an empty fake shortening service."""
    return FakeLinkService()


@pytest_asyncio.fixture
async def link_client(fake_service) -> AsyncGenerator[LinkServiceClient, None]:
    """Client wired to the fake service."""
    client = LinkServiceClient(
        base_url=SERVICE_URL,
        transport=httpx.MockTransport(fake_service),
    )
    yield client
    await client.aclose()


@pytest.fixture
def browser() -> RecordingBrowser:
    return RecordingBrowser()


@pytest_asyncio.fixture
async def view(link_client, browser) -> AsyncGenerator[LinkView, None]:
    """View with the default two second recovery delay."""
    view = LinkView(link_client, browser, browser, ORIGIN)
    yield view
    view.close()


@pytest_asyncio.fixture
async def fast_view(link_client, browser) -> AsyncGenerator[LinkView, None]:
    """View whose return to the root path fires almost immediately."""
    view = LinkView(
        link_client, browser, browser, ORIGIN, recovery_delay=FAST_RECOVERY_DELAY
    )
    yield view
    view.close()


@pytest.fixture
def test_app(fake_service) -> Generator[FastAPI, None, None]:
    """FastAPI app talking to the fake service."""
    async def _override_get_link_client():
        async with LinkServiceClient(
            base_url=SERVICE_URL,
            transport=httpx.MockTransport(fake_service),
        ) as client:
            yield client

    app = main_app
    app.dependency_overrides[get_link_client] = _override_get_link_client
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(test_app) -> Generator[TestClient, None, None]:
    """Return FastAPI TestClient instance."""
    with TestClient(test_app) as test_client:
        yield test_client
