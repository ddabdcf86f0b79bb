"""Fixtures serving the full application over httpx."""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from storefront_api.catalog import InMemoryCatalog
from storefront_api.config import Settings
from storefront_api.main import create_app


@pytest.fixture
def app(settings: Settings, catalog: InMemoryCatalog) -> FastAPI:
    return create_app(settings, catalog=catalog)


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Client that keeps the session cookie between requests."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
