"""
Cart store — ordered lines, at most one per product.
"""

from __future__ import annotations

import logging

from storefront._types import Money, ProductId
from storefront.catalog import Product
from storefront.cart._types import CartLine

logger = logging.getLogger(__name__)


class CartStore:
    """
    Items a user intends to purchase.

    All operations are total: nothing here fails or raises on valid input.

    Note: add() never increments. Re-adding a product already in the cart
    is a no-op, so every quantity stays at 1.
    """

    __slots__ = ("_lines", "_currency")

    def __init__(self, currency: str = "USD") -> None:
        self._lines: list[CartLine] = []
        self._currency = currency

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, product_id: object) -> bool:
        return any(line.product_id == product_id for line in self._lines)

    def add(self, product: Product) -> bool:
        """Insert a quantity-1 line. Returns False if the product was already there."""
        if product.id in self:
            return False
        self._lines.append(CartLine(product))
        logger.debug("cart add %s", product.id.value)
        return True

    def remove(self, product_id: ProductId) -> bool:
        """Delete the line for product_id. Returns False if it was absent."""
        for i, line in enumerate(self._lines):
            if line.product_id == product_id:
                del self._lines[i]
                logger.debug("cart remove %s", product_id.value)
                return True
        return False

    def clear(self) -> None:
        self._lines.clear()

    def total(self) -> Money:
        """Sum of price * quantity in integer minor units."""
        return sum(
            (line.subtotal for line in self._lines),
            start=Money.zero(self._currency),
        )


__all__ = ("CartStore",)
