"""
Order history — in-memory, append-only.
"""

from __future__ import annotations

from storefront._types import OrderId
from storefront.checkout._types import Order


class OrderHistory:
    __slots__ = ("_orders",)

    def __init__(self) -> None:
        self._orders: list[Order] = []

    @property
    def orders(self) -> tuple[Order, ...]:
        """Oldest first."""
        return tuple(self._orders)

    def __len__(self) -> int:
        return len(self._orders)

    def record(self, order: Order) -> None:
        self._orders.append(order)

    def get(self, order_id: OrderId) -> Order | None:
        return next((o for o in self._orders if o.id == order_id), None)


__all__ = ("OrderHistory",)
