"""Authorization guards applied by feature routes after the pipeline ran."""

from __future__ import annotations

from typing import Any

from fastapi import Depends

from storefront_api._types import ApiTokenPayload
from storefront_api.context import RouteContext
from storefront_api.dependency import get_route_context
from storefront_api.exceptions import AuthenticationRequired


def require_api_token(
    ctx: RouteContext = Depends(get_route_context),  # noqa: B008
) -> ApiTokenPayload:
    """Dependency: raises 401 when the request carries no verified API token."""
    if ctx.token_payload is None:
        raise AuthenticationRequired()
    return ctx.token_payload


def account_id_from_payload(payload: ApiTokenPayload) -> Any | None:
    """Account identifier claim: ``accountId``, falling back to ``sub``."""
    account_id = payload.get("accountId")
    if account_id is None:
        account_id = payload.get("sub")
    return account_id
