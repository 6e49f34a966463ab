"""
Checkout — state machine producing immutable orders.

    from storefront import checkout as CO

    checkout = CO.CheckoutOrchestrator(cart, addresses, payments)
    checkout.select_address(address_id)      # IDLE → ADDRESS_SELECTED
    checkout.select_payment(payment_id)      # → PAYMENT_SELECTED
    result = checkout.place_order()          # → PLACED → IDLE, cart cleared

Failures are typed values: EMPTY_CART, INVALID_ADDRESS_REFERENCE,
INVALID_PAYMENT_REFERENCE.
"""

from storefront.checkout._types import CheckoutState, Order
from storefront.checkout._orchestrator import CheckoutOrchestrator
from storefront.checkout._history import OrderHistory

__all__ = ("CheckoutState", "Order", "CheckoutOrchestrator", "OrderHistory")
