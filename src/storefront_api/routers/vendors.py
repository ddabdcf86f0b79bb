"""Vendor catalog endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from storefront_api.catalog import CatalogBackend
from storefront_api.exceptions import ResourceNotFound
from storefront_api.models import Vendor
from storefront_api.responses import api_response


def build_vendors_router(catalog: CatalogBackend) -> APIRouter:
    router = APIRouter()

    async def _get_vendor(vendor_id: str) -> Vendor:
        vendor = await catalog.get_vendor(vendor_id)
        if vendor is None:
            raise ResourceNotFound("Vendor not found")
        return vendor

    @router.get("")
    async def list_vendors() -> dict[str, Any]:
        vendors = await catalog.list_vendors()
        return api_response(
            "Vendors collected successfully",
            vendors=[v.to_dict() for v in vendors],
        )

    @router.get("/{vendor_id}")
    async def get_vendor(vendor_id: str) -> dict[str, Any]:
        vendor = await _get_vendor(vendor_id)
        return api_response("Vendor retrieved successfully", vendor=vendor.to_dict())

    @router.get("/{vendor_id}/products")
    async def list_vendor_products(vendor_id: str) -> dict[str, Any]:
        vendor = await _get_vendor(vendor_id)
        products = await catalog.list_products(vendor_id=vendor.id)
        return api_response(
            "Vendor products collected successfully",
            products=[p.to_dict() for p in products],
        )

    return router
