"""ACME HTTP-01 challenge responder."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from storefront_api.config import Settings

ACME_CHALLENGE_PATH = "/.well-known/acme-challenge/{challengeKey}"


def build_acme_router(settings: Settings) -> APIRouter:
    router = APIRouter()
    result = settings.acme_challenge_result

    @router.get(ACME_CHALLENGE_PATH, response_class=PlainTextResponse, include_in_schema=False)
    async def acme_challenge(challengeKey: str) -> str:  # noqa: N803
        return result

    return router
