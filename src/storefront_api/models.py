"""Domain records carried by the route context: catalog entries and cart data."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Vendor:
    id: str
    name: str
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "description": self.description}


@dataclass(frozen=True)
class Product:
    id: str
    vendor_id: str
    name: str
    price: float
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "vendorId": self.vendor_id,
            "name": self.name,
            "price": self.price,
            "description": self.description,
        }


@dataclass
class CartItem:
    """Single cart line; ``unit_price`` is captured when the item is added."""

    product_id: str
    quantity: int
    unit_price: float

    @property
    def line_total(self) -> float:
        return round(self.quantity * self.unit_price, 2)

    def to_dict(self) -> dict[str, Any]:
        return {
            "productId": self.product_id,
            "quantity": self.quantity,
            "unitPrice": self.unit_price,
        }


@dataclass
class CartData:
    """Cart lines keyed by product id, serializable into the session."""

    items: dict[str, CartItem] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def subtotal(self) -> float:
        return round(sum(item.line_total for item in self.items.values()), 2)

    def add(self, product: Product, quantity: int = 1) -> CartItem:
        """Add ``quantity`` of ``product``, merging with an existing line."""
        if quantity < 1:
            raise ValueError("Quantity must be at least 1")
        item = self.items.get(product.id)
        if item is None:
            item = CartItem(product_id=product.id, quantity=quantity, unit_price=product.price)
            self.items[product.id] = item
        else:
            item.quantity += quantity
        return item

    def remove(self, product_id: str) -> CartItem | None:
        return self.items.pop(product_id, None)

    def clear(self) -> None:
        self.items.clear()

    def to_dict(self) -> dict[str, Any]:
        return {"items": [item.to_dict() for item in self.items.values()]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CartData:
        """Rebuild a cart from its session form.

        Raises ``ValueError`` when the data does not have the shape
        produced by ``to_dict``.
        """
        raw_items = data.get("items")
        if not isinstance(raw_items, list):
            raise ValueError("Cart data must contain an 'items' list")
        cart = cls()
        for raw in raw_items:
            try:
                item = CartItem(
                    product_id=str(raw["productId"]),
                    quantity=int(raw["quantity"]),
                    unit_price=float(raw["unitPrice"]),
                )
            except (KeyError, TypeError, ValueError) as exc:
                raise ValueError(f"Invalid cart item: {raw!r}") from exc
            if item.quantity < 1:
                raise ValueError(f"Invalid cart quantity: {item.quantity}")
            cart.items[item.product_id] = item
        return cart
