"""Auth endpoints: keep an API token in the session, report auth status."""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from storefront_api._types import VerifyCallback
from storefront_api.bodies import parsed_body
from storefront_api.config import Settings
from storefront_api.context import RouteContext
from storefront_api.dependency import get_route_context
from storefront_api.exceptions import (
    AuthenticationRequired,
    RouteAbort,
    TokenVerificationError,
)
from storefront_api.responses import api_response

logger = structlog.get_logger(__name__)


class SessionLogin(BaseModel):
    apiToken: str = Field(..., min_length=1)


def build_auth_router(settings: Settings, verify: VerifyCallback) -> APIRouter:
    router = APIRouter()
    session_key = settings.auth.session_token_key

    @router.post("/session")
    async def create_session(
        body: SessionLogin = Depends(parsed_body(SessionLogin)),  # noqa: B008
        ctx: RouteContext = Depends(get_route_context),  # noqa: B008
    ) -> dict[str, Any]:
        """Verify ``apiToken`` and remember it in the session for later requests."""
        session = ctx.session
        if session is None:
            raise RouteAbort("Sessions are not enabled", status_code=500)
        try:
            payload = await verify(body.apiToken)
        except TokenVerificationError as exc:
            logger.info("session_login_rejected", error=exc.reason)
            raise AuthenticationRequired("Invalid API token") from exc
        session[session_key] = body.apiToken
        return api_response("Session started", apiTokenPayload=payload)

    @router.delete("/session")
    async def end_session(
        ctx: RouteContext = Depends(get_route_context),  # noqa: B008
    ) -> dict[str, Any]:
        session = ctx.session
        if session is not None:
            session.pop(session_key, None)
        return api_response("Session ended")

    @router.get("/status")
    async def auth_status(
        ctx: RouteContext = Depends(get_route_context),  # noqa: B008
    ) -> dict[str, Any]:
        return api_response(
            "Authenticated" if ctx.is_authenticated else "Not authenticated",
            authenticated=ctx.is_authenticated,
            apiTokenPayload=ctx.token_payload,
            tokenSource=ctx.token_source,
        )

    return router
