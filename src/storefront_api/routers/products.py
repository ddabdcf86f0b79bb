"""Product catalog endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query

from storefront_api.catalog import CatalogBackend
from storefront_api.context import RouteContext
from storefront_api.dependency import get_route_context
from storefront_api.exceptions import ResourceNotFound
from storefront_api.models import Product
from storefront_api.responses import api_response


def build_products_router(catalog: CatalogBackend) -> APIRouter:
    router = APIRouter()

    async def select_product(
        product_id: str,
        ctx: RouteContext = Depends(get_route_context),  # noqa: B008
    ) -> Product:
        """Dependency: looks the product up and stores it as ``ctx.product``."""
        product = await catalog.get_product(product_id)
        if product is None:
            raise ResourceNotFound("Product not found")
        ctx.product = product
        return product

    @router.get("")
    async def list_products(
        vendor_id: str | None = Query(None, alias="vendorId"),
    ) -> dict[str, Any]:
        products = await catalog.list_products(vendor_id=vendor_id)
        return api_response(
            "Products collected successfully",
            products=[p.to_dict() for p in products],
        )

    @router.get("/{product_id}")
    async def get_product(
        product: Product = Depends(select_product),  # noqa: B008
    ) -> dict[str, Any]:
        return api_response("Product retrieved successfully", product=product.to_dict())

    return router
