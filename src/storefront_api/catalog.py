"""Catalog backends — CatalogBackend protocol and InMemoryCatalog."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from storefront_api.models import Product, Vendor


@runtime_checkable
class CatalogBackend(Protocol):
    """Pluggable read interface for vendors and products."""

    async def get_vendor(self, vendor_id: str) -> Vendor | None: ...
    async def list_vendors(self) -> list[Vendor]: ...
    async def get_product(self, product_id: str) -> Product | None: ...
    async def list_products(self, *, vendor_id: str | None = None) -> list[Product]: ...


class InMemoryCatalog:
    """Default catalog backend holding records in process memory."""

    def __init__(
        self,
        vendors: Iterable[Vendor] = (),
        products: Iterable[Product] = (),
    ) -> None:
        self._vendors: dict[str, Vendor] = {v.id: v for v in vendors}
        self._products: dict[str, Product] = {p.id: p for p in products}

    async def get_vendor(self, vendor_id: str) -> Vendor | None:
        return self._vendors.get(vendor_id)

    async def list_vendors(self) -> list[Vendor]:
        return list(self._vendors.values())

    async def get_product(self, product_id: str) -> Product | None:
        return self._products.get(product_id)

    async def list_products(self, *, vendor_id: str | None = None) -> list[Product]:
        if vendor_id is None:
            return list(self._products.values())
        return [p for p in self._products.values() if p.vendor_id == vendor_id]
