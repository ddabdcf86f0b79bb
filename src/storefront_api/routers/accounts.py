"""Account endpoints backed by the verified token payload."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from storefront_api._types import ApiTokenPayload
from storefront_api.context import RouteContext
from storefront_api.dependency import get_route_context
from storefront_api.guards import account_id_from_payload, require_api_token
from storefront_api.responses import api_response


def build_accounts_router() -> APIRouter:
    router = APIRouter()

    @router.get("/me")
    async def get_own_account(
        payload: ApiTokenPayload = Depends(require_api_token),  # noqa: B008
        ctx: RouteContext = Depends(get_route_context),  # noqa: B008
    ) -> dict[str, Any]:
        ctx.account = {
            "id": account_id_from_payload(payload),
            "email": payload.get("email"),
            "accountType": payload.get("accountType"),
        }
        return api_response("Account retrieved successfully", account=ctx.account)

    return router
