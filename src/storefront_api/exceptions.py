"""RouteException hierarchy for controlled aborts and token verification results."""

from __future__ import annotations

from typing import Any


class RouteException(Exception):
    """Base for all route pipeline exceptions."""


class RouteAbort(RouteException):
    """Controlled abort with HTTP status code, detail and optional error report."""

    def __init__(
        self,
        detail: str,
        *,
        status_code: int = 400,
        error_report: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail
        self.error_report = error_report


class AuthenticationRequired(RouteAbort):
    """No verified API token on the request (401)."""

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(detail, status_code=401)


class MalformedRequest(RouteAbort):
    """Request body could not be understood (400)."""

    def __init__(
        self, detail: str = "Malformed request", *, error_report: dict[str, Any] | None = None
    ) -> None:
        super().__init__(detail, status_code=400, error_report=error_report)


class ResourceNotFound(RouteAbort):
    """Requested catalog or cart entry does not exist (404)."""

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(detail, status_code=404)


class TokenVerificationError(RouteException):
    """API token was expired, malformed or carried a bad signature."""

    def __init__(self, reason: str, *, cause: Exception | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.cause = cause


class PipelineInternalError(RouteException):
    """Engine-level error wrapping unexpected exceptions."""

    def __init__(self, detail: str, *, cause: Exception | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.cause = cause
