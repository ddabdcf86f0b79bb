"""Shared pytest fixtures for storefront-api tests."""

from __future__ import annotations

import time
from typing import Any
from unittest.mock import AsyncMock

import jwt
import pytest
import structlog
from starlette.requests import Request

from storefront_api.catalog import InMemoryCatalog
from storefront_api.config import Settings, load_settings
from storefront_api.models import Product, Vendor
from storefront_api.tokens import TokenVerifier

JWT_SECRET = "storefront-test-secret-0123456789abcdef-0123456789abcdef-0123456789"


@pytest.fixture(autouse=True)
def _reset_structlog() -> Any:
    """Undo setup_logging() between tests so log capture sees every level."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def make_request() -> Any:
    """Factory for creating Starlette Request objects, optionally with a session."""

    def _make(
        method: str = "GET",
        path: str = "/",
        headers: dict[str, str] | None = None,
        query_string: str = "",
        session: dict[str, Any] | None = None,
        body: bytes = b"",
    ) -> Request:
        scope: dict[str, Any] = {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": query_string.encode(),
            "headers": [
                (k.lower().encode(), v.encode()) for k, v in (headers or {}).items()
            ],
            "root_path": "",
        }
        if session is not None:
            scope["session"] = session

        async def receive() -> dict[str, Any]:
            return {"type": "http.request", "body": body, "more_body": False}

        return Request(scope, receive)

    return _make


@pytest.fixture
def settings() -> Settings:
    return load_settings(
        auth={"jwt": {"secret": JWT_SECRET}},
        session={"secret_key": "session-secret"},
        dashboard={"checkout": {"tax_rate": 0.1, "delivery_charge": 4.5}},
        acme_challenge_result="acme-token.thumbprint",
    )


@pytest.fixture
def make_token() -> Any:
    """Factory for signed API tokens."""

    def _make(
        claims: dict[str, Any] | None = None,
        *,
        secret: str = JWT_SECRET,
        expires_in: int = 3600,
    ) -> str:
        payload = {"sub": "account-1", "accountType": "customer"}
        payload.update(claims or {})
        payload.setdefault("exp", int(time.time()) + expires_in)
        return jwt.encode(payload, secret, algorithm="HS256")

    return _make


@pytest.fixture
def verifier() -> TokenVerifier:
    return TokenVerifier(JWT_SECRET)


@pytest.fixture
def mock_verify() -> AsyncMock:
    """Mock async verify callback that returns a sample payload."""
    mock = AsyncMock()
    mock.return_value = {"sub": "account-1", "email": "buyer@example.com"}
    return mock


@pytest.fixture
def catalog() -> InMemoryCatalog:
    return InMemoryCatalog(
        vendors=[
            Vendor(id="v1", name="Green Grocer"),
            Vendor(id="v2", name="Bakehouse"),
        ],
        products=[
            Product(id="p1", vendor_id="v1", name="Apples", price=3.0),
            Product(id="p2", vendor_id="v1", name="Pears", price=2.5),
            Product(id="p3", vendor_id="v2", name="Sourdough", price=6.0),
        ],
    )


@pytest.fixture
def jwt_secret() -> str:
    return JWT_SECRET
