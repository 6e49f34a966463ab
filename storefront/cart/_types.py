"""
Cart types.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront._types import Money, ProductId
from storefront.catalog import Product


@dataclass(frozen=True, slots=True)
class CartLine:
    """
    One product in a cart.

    Holds the catalog Product itself so an Order snapshot keeps the unit
    price at time of purchase.
    """

    product: Product
    quantity: int = 1

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError(f"Quantity must be >= 1, got {self.quantity}")

    @property
    def product_id(self) -> ProductId:
        return self.product.id

    @property
    def subtotal(self) -> Money:
        return self.product.price.times(self.quantity)


__all__ = ("CartLine",)
