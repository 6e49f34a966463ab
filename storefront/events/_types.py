"""
Event types — facts published by a Session after a mutation.

Named in past tense; immutable.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from storefront._types import AddressId, PaymentMethodId, ProductId
from storefront.cart import CartLine
from storefront.checkout import CheckoutState, Order
from storefront.profile import Address, PaymentMethod


@dataclass(frozen=True, slots=True)
class Event:
    """Base class; subscribe to it to receive every event."""


@dataclass(frozen=True, slots=True)
class CartChanged(Event):
    lines: tuple[CartLine, ...]


@dataclass(frozen=True, slots=True)
class FavoriteToggled(Event):
    product_id: ProductId
    is_favorite: bool


@dataclass(frozen=True, slots=True)
class AddressAdded(Event):
    address_id: AddressId
    address: Address


@dataclass(frozen=True, slots=True)
class PaymentMethodAdded(Event):
    payment_id: PaymentMethodId
    method: PaymentMethod


@dataclass(frozen=True, slots=True)
class CheckoutStateChanged(Event):
    state: CheckoutState


@dataclass(frozen=True, slots=True)
class OrderPlaced(Event):
    order: Order


type Handler[E: Event] = Callable[[E], None]
"""Observer callback."""

type Unsubscribe = Callable[[], bool]
"""Removes the observer; False if it was already removed."""


__all__ = (
    "Event",
    "CartChanged",
    "FavoriteToggled",
    "AddressAdded",
    "PaymentMethodAdded",
    "CheckoutStateChanged",
    "OrderPlaced",
    "Handler",
    "Unsubscribe",
)
