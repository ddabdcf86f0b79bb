"""Cart endpoints operating on the cart loaded by CartInitializer."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from storefront_api.bodies import parsed_body
from storefront_api.catalog import CatalogBackend
from storefront_api.config import CheckoutSettings, Settings
from storefront_api.context import RouteContext
from storefront_api.dependency import get_route_context
from storefront_api.exceptions import ResourceNotFound
from storefront_api.models import CartData
from storefront_api.responses import api_response
from storefront_api.stages.cart import save_cart


class CartItemIn(BaseModel):
    productId: str = Field(..., min_length=1)
    quantity: int = Field(1, ge=1)


def cart_summary(cart: CartData, checkout: CheckoutSettings) -> dict[str, Any]:
    """Items plus totals; delivery is only charged for a non-empty cart."""
    subtotal = cart.subtotal
    tax = round(subtotal * checkout.tax_rate, 2)
    delivery = 0.0 if cart.is_empty else checkout.delivery_charge
    return {
        "items": [
            {**item.to_dict(), "lineTotal": item.line_total}
            for item in cart.items.values()
        ],
        "subtotal": subtotal,
        "tax": tax,
        "deliveryCharge": delivery,
        "total": round(subtotal + tax + delivery, 2),
    }


def build_cart_router(settings: Settings, catalog: CatalogBackend) -> APIRouter:
    router = APIRouter()
    checkout = settings.dashboard.checkout

    @router.get("")
    async def get_cart(
        ctx: RouteContext = Depends(get_route_context),  # noqa: B008
    ) -> dict[str, Any]:
        return api_response(
            "Cart data collected successfully", cartData=cart_summary(ctx.cart, checkout)
        )

    @router.post("/items")
    async def add_cart_item(
        body: CartItemIn = Depends(parsed_body(CartItemIn)),  # noqa: B008
        ctx: RouteContext = Depends(get_route_context),  # noqa: B008
    ) -> dict[str, Any]:
        product = await catalog.get_product(body.productId)
        if product is None:
            raise ResourceNotFound("Product not found")
        ctx.product = product
        ctx.cart.add(product, body.quantity)
        save_cart(ctx)
        return api_response(
            "Item added to cart", cartData=cart_summary(ctx.cart, checkout)
        )

    @router.delete("/items/{product_id}")
    async def remove_cart_item(
        product_id: str,
        ctx: RouteContext = Depends(get_route_context),  # noqa: B008
    ) -> dict[str, Any]:
        if ctx.cart.remove(product_id) is None:
            raise ResourceNotFound("Item not in cart")
        save_cart(ctx)
        return api_response(
            "Item removed from cart", cartData=cart_summary(ctx.cart, checkout)
        )

    @router.delete("")
    async def clear_cart(
        ctx: RouteContext = Depends(get_route_context),  # noqa: B008
    ) -> dict[str, Any]:
        ctx.cart.clear()
        save_cart(ctx)
        return api_response("Cart cleared", cartData=cart_summary(ctx.cart, checkout))

    return router
