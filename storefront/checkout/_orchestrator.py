"""
Checkout orchestrator — validated state machine over cart and profile.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime

from kungfu import Result, Ok, Error

from storefront._types import AddressId, PaymentMethodId, OrderId
from storefront._errors import StorefrontError, Errors
from storefront.cart import CartStore
from storefront.profile import AddressBook, PaymentMethods
from storefront.checkout._types import CheckoutState, Order

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# Selection — One Variant Per Reachable State
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class _Idle:
    pass


@dataclass(frozen=True, slots=True)
class _AddressChosen:
    address_id: AddressId


@dataclass(frozen=True, slots=True)
class _PaymentChosen:
    address_id: AddressId
    payment_id: PaymentMethodId


type _Selection = _Idle | _AddressChosen | _PaymentChosen

_IDLE = _Idle()


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _new_order_id() -> OrderId:
    return OrderId(f"ord_{uuid.uuid4().hex[:12]}")


# ═══════════════════════════════════════════════════════════════════════════════
# Orchestrator
# ═══════════════════════════════════════════════════════════════════════════════


class CheckoutOrchestrator:
    """
    Drives one checkout at a time against a cart and a profile.

    Every transition is gated on an explicit precondition and reports a
    typed failure instead of silently ignoring the action. A payment can only
    be chosen after an address, so "payment without address" is not a state.

    Example:
        checkout = CheckoutOrchestrator(cart, addresses, payments)
        checkout.select_address(AddressId(0))
        checkout.select_payment(PaymentMethodId(0))
        match checkout.place_order():
            case Ok(order): ...
            case Error(err): ...
    """

    __slots__ = ("_cart", "_addresses", "_payments", "_clock", "_new_id", "_selection")

    def __init__(
        self,
        cart: CartStore,
        addresses: AddressBook,
        payments: PaymentMethods,
        *,
        clock: Callable[[], datetime] = _utcnow,
        id_factory: Callable[[], OrderId] = _new_order_id,
    ) -> None:
        self._cart = cart
        self._addresses = addresses
        self._payments = payments
        self._clock = clock
        self._new_id = id_factory
        self._selection: _Selection = _IDLE

    # ───────────────────────────────────────────────────────────────────────────
    # Queries
    # ───────────────────────────────────────────────────────────────────────────

    @property
    def state(self) -> CheckoutState:
        match self._selection:
            case _Idle():
                return CheckoutState.IDLE
            case _AddressChosen():
                return CheckoutState.ADDRESS_SELECTED
            case _PaymentChosen():
                return CheckoutState.PAYMENT_SELECTED

    @property
    def selected_address(self) -> AddressId | None:
        match self._selection:
            case _AddressChosen(address_id=a) | _PaymentChosen(address_id=a):
                return a
            case _:
                return None

    @property
    def selected_payment(self) -> PaymentMethodId | None:
        match self._selection:
            case _PaymentChosen(payment_id=p):
                return p
            case _:
                return None

    # ───────────────────────────────────────────────────────────────────────────
    # Transitions
    # ───────────────────────────────────────────────────────────────────────────

    def select_address(
        self, address_id: AddressId
    ) -> Result[CheckoutState, StorefrontError]:
        """
        Choose the shipping address.

        Unknown id fails and leaves the state as it was. Changing the address
        after a payment was chosen keeps that payment.
        """
        if self._addresses.get(address_id) is None:
            logger.info("select_address rejected: %d unknown", address_id.value)
            return Error(Errors.invalid_address(address_id))

        match self._selection:
            case _PaymentChosen(payment_id=p):
                self._selection = _PaymentChosen(address_id, p)
            case _:
                self._selection = _AddressChosen(address_id)
        return Ok(self.state)

    def select_payment(
        self, payment_id: PaymentMethodId
    ) -> Result[CheckoutState, StorefrontError]:
        match self._selection:
            case _Idle():
                logger.info("select_payment rejected: no address selected")
                return Error(Errors.invalid_address(None))
            case _AddressChosen(address_id=a) | _PaymentChosen(address_id=a):
                if self._payments.get(payment_id) is None:
                    logger.info(
                        "select_payment rejected: %d unknown", payment_id.value
                    )
                    return Error(Errors.invalid_payment(payment_id))
                self._selection = _PaymentChosen(a, payment_id)
                return Ok(self.state)

    def reset(self) -> CheckoutState:
        """Abandon the current attempt."""
        self._selection = _IDLE
        return self.state

    def place_order(self) -> Result[Order, StorefrontError]:
        """
        Snapshot the cart into an Order.

        Empty cart fails first, whatever has been selected. On success the
        cart is cleared and the orchestrator is back in IDLE before this
        returns.
        """
        if self._cart.is_empty:
            logger.info("place_order rejected: empty cart")
            return Error(Errors.empty_cart())

        match self._selection:
            case _Idle():
                logger.info("place_order rejected: no address selected")
                return Error(Errors.invalid_address(None))
            case _AddressChosen():
                logger.info("place_order rejected: no payment selected")
                return Error(Errors.invalid_payment(None))
            case _PaymentChosen(address_id=address_id, payment_id=payment_id):
                pass

        address = self._addresses.get(address_id)
        if address is None:
            return Error(Errors.invalid_address(address_id))
        payment = self._payments.get(payment_id)
        if payment is None:
            return Error(Errors.invalid_payment(payment_id))

        order = Order(
            id=self._new_id(),
            lines=self._cart.lines,
            address=address,
            payment_method=payment,
            total=self._cart.total(),
            created_at=self._clock(),
        )

        self._cart.clear()
        self._selection = _IDLE
        logger.info(
            "order %s placed: %d lines, total %s (%s -> %s -> %s)",
            order.id.value,
            len(order.lines),
            order.total,
            CheckoutState.PAYMENT_SELECTED.name,
            CheckoutState.PLACED.name,
            CheckoutState.IDLE.name,
        )
        return Ok(order)


__all__ = ("CheckoutOrchestrator",)
