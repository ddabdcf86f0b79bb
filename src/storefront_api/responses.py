"""ApiResponse envelope shared by every JSON endpoint and error handler."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront_api.exceptions import RouteAbort


class ApiResponse(BaseModel):
    """``{"success", "message", "errorReport"?}`` plus endpoint-specific keys."""

    model_config = ConfigDict(extra="allow")

    success: bool
    message: str
    errorReport: dict[str, Any] | None = None


def api_response(message: str, *, success: bool = True, **data: Any) -> dict[str, Any]:
    body = ApiResponse(success=success, message=message, **data).model_dump()
    if body.get("errorReport") is None:
        body.pop("errorReport", None)
    return body


def _error_body(detail: Any, error_report: dict[str, Any] | None) -> dict[str, Any]:
    if isinstance(detail, str):
        return api_response(detail, success=False, errorReport=error_report)
    # Validation-style details keep their structure
    return api_response(
        "Request failed", success=False, errorReport=error_report, detail=detail
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    error_report = None
    if isinstance(exc.__cause__, RouteAbort):
        error_report = exc.__cause__.error_report
    return JSONResponse(
        _error_body(exc.detail, error_report),
        status_code=exc.status_code,
        headers=exc.headers,
    )


async def route_abort_handler(request: Request, exc: RouteAbort) -> JSONResponse:
    return JSONResponse(
        _error_body(exc.detail, exc.error_report),
        status_code=exc.status_code,
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        api_response(
            "Request validation failed",
            success=False,
            errorReport={"errors": jsonable_encoder(_redact_inputs(exc.errors()))},
        ),
        status_code=422,
    )


def _redact_inputs(errors: Sequence[Any]) -> list[dict[str, Any]]:
    # Submitted values may carry credentials such as apiToken
    return [{k: v for k, v in err.items() if k != "input"} for err in errors]
