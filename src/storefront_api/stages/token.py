"""ApiTokenExtractor — header → session → none, then verification."""

from __future__ import annotations

import json

import structlog

from storefront_api._types import TokenSource, VerifyCallback
from storefront_api.context import RouteContext
from storefront_api.exceptions import TokenVerificationError
from storefront_api.stage import RouteStage, StageOrder

logger = structlog.get_logger(__name__)


class ApiTokenExtractor(RouteStage):
    """Finds the API token, verifies it and puts the decoded payload on the context.

    An unverifiable token leaves the request unauthenticated; rejecting
    such requests is left to ``require_api_token`` on the routes that
    need it.
    """

    order = StageOrder.AUTHENTICATION

    def __init__(
        self,
        verify: VerifyCallback,
        *,
        header: str = "Authorization",
        session_key: str = "apiToken",
        strict_scheme: bool = False,
        scheme: str = "Bearer",
    ) -> None:
        self._verify = verify
        self._header = header
        self._session_key = session_key
        self._strict_scheme = strict_scheme
        self._scheme = scheme

    async def resolve(self, ctx: RouteContext) -> None:
        ctx.token_payload = None
        ctx.token_source = None

        api_token: str | None = None
        source: TokenSource | None = None

        header_token = self._token_from_header(ctx)
        if header_token:
            api_token, source = header_token, "header"
            logger.debug("api_token_found", source="header")
        else:
            logger.debug("api_token_not_in_header", fallback="session")
            session_token = self._token_from_session(ctx)
            if session_token:
                api_token, source = session_token, "session"
                logger.debug("api_token_found", source="session")
            else:
                logger.debug("api_token_not_in_session")

        if not api_token:
            return

        try:
            payload = await self._verify(api_token)
        except TokenVerificationError as exc:
            logger.warning(
                "api_token_verification_failed", source=source, error=exc.reason
            )
            return

        ctx.token_payload = payload
        ctx.token_source = source
        logger.debug(
            "api_token_payload_decoded",
            payload=json.dumps(payload, indent=4, default=str),
        )

    def _token_from_header(self, ctx: RouteContext) -> str | None:
        auth_value = ctx.request.headers.get(self._header)
        if not auth_value:
            return None

        # Expected format: "Bearer <token>"
        words = auth_value.split()
        if len(words) < 2:
            return None
        if self._strict_scheme and words[0].lower() != self._scheme.lower():
            logger.debug("api_token_scheme_rejected", scheme=words[0])
            return None
        return words[1]

    def _token_from_session(self, ctx: RouteContext) -> str | None:
        session = ctx.session
        if not session:
            return None
        token = session.get(self._session_key)
        if not isinstance(token, str):
            return None
        return token
