"""MultipartPreprocessor — unpacks multipart/form-data bodies onto the context."""

from __future__ import annotations

import json
from typing import Any

from starlette.datastructures import UploadFile
from starlette.requests import Request

from storefront_api.context import RouteContext
from storefront_api.exceptions import MalformedRequest
from storefront_api.stage import RouteStage, StageOrder


def is_multipart(request: Request) -> bool:
    content_type = request.headers.get("content-type", "")
    return content_type.lower().startswith("multipart/form-data")


class MultipartPreprocessor(RouteStage):
    """Splits a multipart form into ``ctx.body`` and ``ctx.files``.

    Clients that upload files send the JSON part of the request as a text
    field (``data`` by default); it is decoded and merged into
    ``ctx.body``. Other requests pass through untouched.
    """

    order = StageOrder.PREPROCESSING

    def __init__(self, *, data_field: str = "data") -> None:
        self._data_field = data_field

    async def resolve(self, ctx: RouteContext) -> None:
        if not is_multipart(ctx.request):
            return

        form = await ctx.request.form()
        for name, value in form.multi_items():
            if isinstance(value, UploadFile):
                ctx.files.setdefault(name, []).append(value)
            elif name == self._data_field:
                ctx.body.update(self._decode_data_field(value))
            else:
                ctx.body[name] = value

    def _decode_data_field(self, raw: str) -> dict[str, Any]:
        try:
            decoded = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise MalformedRequest(
                f"Multipart field '{self._data_field}' is not valid JSON",
                error_report={"field": self._data_field, "error": str(exc)},
            ) from None
        if not isinstance(decoded, dict):
            raise MalformedRequest(
                f"Multipart field '{self._data_field}' must be a JSON object",
                error_report={"field": self._data_field},
            )
        return decoded
