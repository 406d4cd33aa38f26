"""
Fixtures for FastAPI endpoint tests.

Provides an ASGI client bound to the app and a fresh request counter.
"""

from unittest.mock import patch

import pytest
from httpx import ASGITransport, AsyncClient

from src.itinerary_router.adapters.metrics.atomic_counter import AtomicRequestCounter


@pytest.fixture
def anyio_backend():
    """Use asyncio backend for async tests."""
    return "asyncio"


@pytest.fixture
def fresh_counter() -> AtomicRequestCounter:
    """Replace the process-wide counter so tests see exact counts."""
    counter = AtomicRequestCounter(name="flight_requests_total")
    with patch("src.fastapi.itinerary_api.request_counter", counter):
        yield counter


@pytest.fixture
async def client(fresh_counter):
    from src.fastapi.itinerary_api import app

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
