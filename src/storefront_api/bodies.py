"""parsed_body() — request payload dependency for JSON and multipart clients."""

from __future__ import annotations

import json
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from fastapi import Depends
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from storefront_api.context import RouteContext
from storefront_api.dependency import get_route_context
from storefront_api.stages.multipart import is_multipart

ModelT = TypeVar("ModelT", bound=BaseModel)


def parsed_body(model: type[ModelT]) -> Callable[..., Awaitable[ModelT]]:
    """Return a dependency validating the request payload against ``model``.

    Multipart requests are read from ``ctx.body``, which
    ``MultipartPreprocessor`` filled from the form. Anything else is read
    as a JSON body. Failures raise ``RequestValidationError`` with
    ``body``-rooted locations, as FastAPI's own body binding does.
    """

    async def dependency(
        ctx: RouteContext = Depends(get_route_context),  # noqa: B008
    ) -> ModelT:
        raw = await _raw_payload(ctx)
        try:
            return model.model_validate(raw)
        except ValidationError as exc:
            errors = [
                {**err, "loc": ("body", *err["loc"])}
                for err in exc.errors(include_url=False)
            ]
            raise RequestValidationError(errors) from exc

    return dependency


async def _raw_payload(ctx: RouteContext) -> Any:
    if is_multipart(ctx.request):
        return ctx.body
    body = await ctx.request.body()
    if not body:
        return None
    try:
        return json.loads(body)
    except json.JSONDecodeError as exc:
        raise RequestValidationError(
            [
                {
                    "type": "json_invalid",
                    "loc": ("body", exc.pos),
                    "msg": "JSON decode error",
                    "ctx": {"error": exc.msg},
                }
            ]
        ) from exc
