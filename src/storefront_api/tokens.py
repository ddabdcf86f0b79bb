"""TokenVerifier — asynchronous wrapper around PyJWT verification."""

from __future__ import annotations

from typing import Any

import jwt
from starlette.concurrency import run_in_threadpool

from storefront_api._types import ApiTokenPayload
from storefront_api.config import JwtSettings, Settings
from storefront_api.exceptions import TokenVerificationError


class TokenVerifier:
    """Verifies signed API tokens against a configured secret and options.

    ``verify`` either resolves with the decoded claims or raises
    ``TokenVerificationError``; callers never see PyJWT exceptions.
    """

    def __init__(
        self,
        secret: str,
        *,
        algorithms: list[str] | None = None,
        audience: str | None = None,
        issuer: str | None = None,
        leeway: int = 0,
        require: list[str] | None = None,
    ) -> None:
        self._secret = secret
        self._algorithms = list(algorithms or ["HS256"])
        self._audience = audience
        self._issuer = issuer
        self._leeway = leeway
        self._require = list(require or [])

    @classmethod
    def from_jwt_settings(cls, jwt_settings: JwtSettings) -> TokenVerifier:
        return cls(
            jwt_settings.secret,
            algorithms=jwt_settings.algorithms,
            audience=jwt_settings.audience,
            issuer=jwt_settings.issuer,
            leeway=jwt_settings.leeway,
            require=jwt_settings.require,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> TokenVerifier:
        return cls.from_jwt_settings(settings.auth.jwt)

    async def verify(self, token: str) -> ApiTokenPayload:
        return await run_in_threadpool(self._decode, token)

    def _decode(self, token: str) -> ApiTokenPayload:
        options: dict[str, Any] = {"require": self._require}
        if self._audience is None:
            options["verify_aud"] = False
        try:
            payload: ApiTokenPayload = jwt.decode(
                token,
                self._secret,
                algorithms=self._algorithms,
                audience=self._audience,
                issuer=self._issuer,
                leeway=self._leeway,
                options=options,
            )
        except jwt.PyJWTError as exc:
            raise TokenVerificationError(f"{type(exc).__name__}: {exc}", cause=exc) from exc
        return payload

    async def __call__(self, token: str) -> ApiTokenPayload:
        return await self.verify(token)
