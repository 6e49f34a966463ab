"""
Events — change notification for presentation layers.

    from storefront import events as EV

    unsubscribe = session.subscribe(EV.CartChanged, lambda e: redraw(e.lines))
    ...
    unsubscribe()

Core stores never publish; only Session does, after each successful mutation.
"""

from storefront.events._types import (
    Event,
    CartChanged,
    FavoriteToggled,
    AddressAdded,
    PaymentMethodAdded,
    CheckoutStateChanged,
    OrderPlaced,
    Handler,
    Unsubscribe,
)
from storefront.events._bus import EventBus

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
    "EventBus",
)
