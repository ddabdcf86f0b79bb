"""RouteContext — per-request state container."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from starlette.datastructures import UploadFile
from starlette.requests import Request

from storefront_api._types import ApiTokenPayload, TokenSource
from storefront_api.models import CartData, Product


@dataclass
class RouteContext:
    """Per-request state mutated by pipeline stages and read by handlers.

    Created fresh for every request, so nothing here is shared between
    requests.
    """

    request: Request
    account: Any | None = None
    product: Product | None = None
    cart: CartData = field(default_factory=CartData)
    token_payload: ApiTokenPayload | None = None
    token_source: TokenSource | None = None
    body: dict[str, Any] = field(default_factory=dict)
    files: dict[str, list[UploadFile]] = field(default_factory=dict)
    state: dict[str, Any] = field(default_factory=dict)

    @property
    def is_authenticated(self) -> bool:
        return self.token_payload is not None

    @property
    def session(self) -> dict[str, Any] | None:
        """The request session, or None when no session middleware is installed."""
        if "session" not in self.request.scope:
            return None
        session: dict[str, Any] = self.request.session
        return session
