"""RouteStateInitializer — resets the per-request scratch fields."""

from __future__ import annotations

from storefront_api.context import RouteContext
from storefront_api.models import CartData
from storefront_api.stage import RouteStage, StageOrder


class RouteStateInitializer(RouteStage):
    """Sets account, product and cart to defined-but-empty values."""

    order = StageOrder.ROUTE_STATE

    async def resolve(self, ctx: RouteContext) -> None:
        ctx.account = None
        ctx.product = None
        ctx.cart = CartData()
