"""Shared test fixtures for the dicespec test suite.

Parser, registry and benchmark tests need no fixtures. HTTP tests use
``async_client``, an AsyncClient wired straight to the FastAPI app.
"""

from __future__ import annotations

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from dicespec.main import app


@pytest_asyncio.fixture
async def async_client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
