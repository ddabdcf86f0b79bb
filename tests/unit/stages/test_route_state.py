"""Tests for RouteStateInitializer."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

from storefront_api.context import RouteContext
from storefront_api.dependency import pipeline_dependency
from storefront_api.exceptions import TokenVerificationError
from storefront_api.models import CartData, Product
from storefront_api.pipeline import Pipeline
from storefront_api.stage import RouteStage, StageOrder
from storefront_api.stages.route_state import RouteStateInitializer
from storefront_api.stages.token import ApiTokenExtractor


class TestRouteStateInitializer:
    def test_order_is_route_state(self) -> None:
        assert RouteStateInitializer.order == StageOrder.ROUTE_STATE

    async def test_resets_fields(self, make_request: Any) -> None:
        ctx = RouteContext(request=make_request())
        ctx.account = {"id": "stale"}
        ctx.product = Product(id="p", vendor_id="v", name="n", price=1.0)
        ctx.cart.add(ctx.product)

        await RouteStateInitializer().resolve(ctx)

        assert ctx.account is None
        assert ctx.product is None
        assert isinstance(ctx.cart, CartData)
        assert ctx.cart.is_empty


class _Snapshot(RouteStage):
    """Records what the token extractor would see when it runs."""

    order = StageOrder.ROUTE_STATE

    async def resolve(self, ctx: RouteContext) -> None:
        ctx.state["seen"] = (ctx.account, ctx.product, ctx.cart.is_empty)


class TestInitializedBeforeTokenExtraction:
    async def test_state_ready_regardless_of_registration_order(
        self, make_request: Any
    ) -> None:
        seen_by_verify: list[tuple[Any, Any, bool]] = []

        async def verify(token: str) -> dict[str, Any]:
            ctx = request.state.route_context
            seen_by_verify.append((ctx.account, ctx.product, ctx.cart.is_empty))
            raise TokenVerificationError("expired")

        request = make_request(headers={"Authorization": "Bearer t"})
        pipeline = Pipeline(ApiTokenExtractor(verify=verify), RouteStateInitializer())
        ctx = await pipeline_dependency(pipeline)(request)

        assert seen_by_verify == [(None, None, True)]
        assert ctx.token_payload is None

    async def test_state_initialized_when_no_token(self, make_request: Any) -> None:
        verify = AsyncMock()
        pipeline = Pipeline(
            ApiTokenExtractor(verify=verify), RouteStateInitializer(), _Snapshot()
        )
        ctx = await pipeline_dependency(pipeline)(make_request())
        assert ctx.state["seen"] == (None, None, True)
        verify.assert_not_awaited()
