"""
storefront — session-scoped order-state core for a small shop.

    from storefront import catalog as CT   # Immutable product list
    from storefront import cart as CA      # Cart lines and totals
    from storefront import checkout as CO  # Checkout state machine
    from storefront import ops as O        # Request dispatch
    from storefront import wire as W       # HTTP exposure (FastAPI)

    session = Session("u1")
    session.add_to_cart(ProductId("sneakers"))
"""

from storefront import catalog
from storefront import cart
from storefront import favorites
from storefront import profile
from storefront import checkout
from storefront import events
from storefront import ops
from storefront import idempotency
from storefront._types import (
    Result,
    Ok,
    Error,
    LazyCoroResult,
    ProductId,
    AddressId,
    PaymentMethodId,
    OrderId,
    Money,
)
from storefront._errors import ErrorKind, StorefrontError, Errors
from storefront.config import Settings, settings
from storefront.session import Session
from storefront.service import StorefrontService

__version__ = "0.1.0"

__all__ = (
    "catalog",
    "cart",
    "favorites",
    "profile",
    "checkout",
    "events",
    "ops",
    "idempotency",
    "Result",
    "Ok",
    "Error",
    "LazyCoroResult",
    "ProductId",
    "AddressId",
    "PaymentMethodId",
    "OrderId",
    "Money",
    "ErrorKind",
    "StorefrontError",
    "Errors",
    "Settings",
    "settings",
    "Session",
    "StorefrontService",
)
