"""Shared fixtures for API tests."""

from __future__ import annotations

from unittest.mock import patch

import httpx
import pytest

from skyfleet.api.app import app
from skyfleet.api.deps import get_clock
from tests.builders import FixedClock
from tests.persistence.fake_firestore import FakeFirestoreClient


@pytest.fixture
def fake_client():
    """In-memory Firestore fake, shared across all repos in a single test."""
    return FakeFirestoreClient()


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def test_app(fake_client, clock):
    """FastAPI app with dependency overrides for testing."""
    app.dependency_overrides[get_clock] = lambda: clock

    with patch(
        "skyfleet.persistence.repositories.base.get_firestore_client",
        return_value=fake_client,
    ):
        yield app

    app.dependency_overrides.clear()


@pytest.fixture
async def client(test_app):
    """httpx AsyncClient wired to the test app."""
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
