"""
Checkout types.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum, auto

from storefront._types import Money, OrderId
from storefront.cart import CartLine
from storefront.profile import Address, PaymentMethod


# ═══════════════════════════════════════════════════════════════════════════════
# Checkout State — Transaction Lifecycle
# ═══════════════════════════════════════════════════════════════════════════════


class CheckoutState(Enum):
    """
    State of one checkout attempt.

    Lifecycle:
        IDLE → ADDRESS_SELECTED → PAYMENT_SELECTED → PLACED → IDLE

    PLACED is passed through inside place_order() and never observed
    between calls: a successful placement always ends back in IDLE.
    """

    IDLE = auto()
    ADDRESS_SELECTED = auto()
    PAYMENT_SELECTED = auto()
    PLACED = auto()


# ═══════════════════════════════════════════════════════════════════════════════
# Order — Immutable Snapshot
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Order:
    id: OrderId
    lines: tuple[CartLine, ...]
    address: Address
    payment_method: PaymentMethod
    total: Money
    created_at: datetime


__all__ = ("CheckoutState", "Order")
