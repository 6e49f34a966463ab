"""
Session — one user's storefront context.

Owns one instance of every store, wires the checkout orchestrator to them,
and publishes events after each successful mutation. The catalog is the only
shared piece.

    session = Session("u1")
    session.add_to_cart(ProductId("sneakers"))
    session.select_address(AddressId(0))
    session.select_payment(PaymentMethodId(0))
    match session.place_order():
        case Ok(order): ...
        case Error(err): ...
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from kungfu import Result, Ok, Error

from storefront import events as EV
from storefront._types import Money, ProductId, AddressId, PaymentMethodId, OrderId
from storefront._errors import StorefrontError, Errors
from storefront.config import Settings, settings as default_settings
from storefront.catalog import Catalog, Product, DEFAULT_CATALOG
from storefront.cart import CartStore, CartLine
from storefront.favorites import FavoritesStore
from storefront.profile import Address, PaymentMethod, AddressBook, PaymentMethods
from storefront.checkout import CheckoutState, CheckoutOrchestrator, Order, OrderHistory

logger = logging.getLogger(__name__)


def _seed_addresses(cfg: Settings) -> AddressBook:
    book = AddressBook()
    if cfg.SEED_PROFILE:
        for text in cfg.DEFAULT_ADDRESSES:
            book.add(Address.from_text(text))
    return book


def _seed_payments(cfg: Settings) -> PaymentMethods:
    methods = PaymentMethods()
    if cfg.SEED_PROFILE:
        for text in cfg.DEFAULT_PAYMENT_METHODS:
            methods.add(PaymentMethod.from_text(text))
    return methods


class Session:
    __slots__ = (
        "_user_id",
        "_catalog",
        "_settings",
        "_cart",
        "_favorites",
        "_addresses",
        "_payments",
        "_checkout",
        "_history",
        "_bus",
    )

    def __init__(
        self,
        user_id: str,
        catalog: Catalog = DEFAULT_CATALOG,
        *,
        settings: Settings = default_settings,
        clock: Callable[[], datetime] | None = None,
        id_factory: Callable[[], OrderId] | None = None,
    ) -> None:
        self._user_id = user_id
        self._catalog = catalog
        self._settings = settings
        self._cart = CartStore()
        self._favorites = FavoritesStore()
        self._addresses = _seed_addresses(settings)
        self._payments = _seed_payments(settings)
        overrides: dict[str, Callable] = {}
        if clock is not None:
            overrides["clock"] = clock
        if id_factory is not None:
            overrides["id_factory"] = id_factory
        self._checkout = CheckoutOrchestrator(
            self._cart, self._addresses, self._payments, **overrides
        )
        self._history = OrderHistory()
        self._bus = EV.EventBus()

    @property
    def user_id(self) -> str:
        return self._user_id

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def subscribe[E: EV.Event](
        self, event_type: type[E], handler: EV.Handler[E]
    ) -> EV.Unsubscribe:
        return self._bus.subscribe(event_type, handler)

    # ═══════════════════════════════════════════════════════════════════════════
    # Catalog
    # ═══════════════════════════════════════════════════════════════════════════

    def list_products(
        self, category: str | None = None, search_text: str = ""
    ) -> tuple[Product, ...]:
        return self._catalog.list_products(category, search_text)

    def featured_products(self, limit: int = 3) -> tuple[Product, ...]:
        return self._catalog.featured(limit)

    def get_product(self, product_id: ProductId) -> Result[Product, StorefrontError]:
        product = self._catalog.get(product_id)
        if product is None:
            return Error(Errors.unknown_product(product_id))
        return Ok(product)

    # ═══════════════════════════════════════════════════════════════════════════
    # Cart
    # ═══════════════════════════════════════════════════════════════════════════

    def cart_lines(self) -> tuple[CartLine, ...]:
        return self._cart.lines

    def cart_total(self) -> Money:
        return self._cart.total()

    def add_to_cart(self, product_id: ProductId) -> Result[bool, StorefrontError]:
        """
        Add a product by id.

        Ok(False) when the line already existed, unless CART_REJECT_DUPLICATES
        is set, in which case that is DUPLICATE_CART_LINE.
        """
        match self.get_product(product_id):
            case Error(e):
                return Error(e)
            case Ok(product):
                pass

        if not self._cart.add(product):
            if self._settings.CART_REJECT_DUPLICATES:
                return Error(Errors.duplicate_line(product_id))
            return Ok(False)

        self._bus.publish(EV.CartChanged(self._cart.lines))
        return Ok(True)

    def remove_from_cart(self, product_id: ProductId) -> bool:
        removed = self._cart.remove(product_id)
        if removed:
            self._bus.publish(EV.CartChanged(self._cart.lines))
        return removed

    def clear_cart(self) -> None:
        had_lines = not self._cart.is_empty
        self._cart.clear()
        if had_lines:
            self._bus.publish(EV.CartChanged(()))

    # ═══════════════════════════════════════════════════════════════════════════
    # Favorites
    # ═══════════════════════════════════════════════════════════════════════════

    def toggle_favorite(self, product_id: ProductId) -> Result[bool, StorefrontError]:
        if product_id not in self._catalog:
            return Error(Errors.unknown_product(product_id))
        now = self._favorites.toggle(product_id)
        self._bus.publish(EV.FavoriteToggled(product_id, now))
        return Ok(now)

    def is_favorite(self, product_id: ProductId) -> bool:
        return self._favorites.is_favorite(product_id)

    def favorite_products(self) -> tuple[Product, ...]:
        """Favorited products in catalog order."""
        return tuple(
            p for p in self._catalog.products if self._favorites.is_favorite(p.id)
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # Profile
    # ═══════════════════════════════════════════════════════════════════════════

    def addresses(self) -> tuple[tuple[AddressId, Address], ...]:
        return self._addresses.entries()

    def add_address(self, address: Address | str) -> Result[AddressId, StorefrontError]:
        if isinstance(address, str):
            address = Address.from_text(address)
        result = self._addresses.add(address)
        if isinstance(result, Ok):
            self._bus.publish(EV.AddressAdded(result.value, address))
        return result

    def payment_methods(self) -> tuple[tuple[PaymentMethodId, PaymentMethod], ...]:
        return self._payments.entries()

    def add_payment_method(
        self, method: PaymentMethod | str
    ) -> Result[PaymentMethodId, StorefrontError]:
        if isinstance(method, str):
            method = PaymentMethod.from_text(method)
        result = self._payments.add(method)
        if isinstance(result, Ok):
            self._bus.publish(EV.PaymentMethodAdded(result.value, method))
        return result

    # ═══════════════════════════════════════════════════════════════════════════
    # Checkout
    # ═══════════════════════════════════════════════════════════════════════════

    def checkout_state(self) -> CheckoutState:
        return self._checkout.state

    @property
    def selected_address(self) -> AddressId | None:
        return self._checkout.selected_address

    @property
    def selected_payment(self) -> PaymentMethodId | None:
        return self._checkout.selected_payment

    def select_address(
        self, address_id: AddressId
    ) -> Result[CheckoutState, StorefrontError]:
        before = self._checkout.state
        return self._transition(before, self._checkout.select_address(address_id))

    def select_payment(
        self, payment_id: PaymentMethodId
    ) -> Result[CheckoutState, StorefrontError]:
        before = self._checkout.state
        return self._transition(before, self._checkout.select_payment(payment_id))

    def reset_checkout(self) -> CheckoutState:
        before = self._checkout.state
        state = self._checkout.reset()
        if state != before:
            self._bus.publish(EV.CheckoutStateChanged(state))
        return state

    def place_order(self) -> Result[Order, StorefrontError]:
        """
        Place the order and record it in history.

        Subscribers see OrderPlaced, then the emptied cart, then IDLE.
        """
        result = self._checkout.place_order()
        match result:
            case Ok(order):
                self._history.record(order)
                logger.info("user %s placed order %s", self._user_id, order.id.value)
                self._bus.publish(EV.OrderPlaced(order))
                self._bus.publish(EV.CartChanged(()))
                self._bus.publish(EV.CheckoutStateChanged(CheckoutState.IDLE))
            case Error(e):
                logger.info("user %s place_order failed: %s", self._user_id, e)
        return result

    def orders(self) -> tuple[Order, ...]:
        return self._history.orders

    def get_order(self, order_id: OrderId) -> Order | None:
        return self._history.get(order_id)

    def _transition(
        self,
        before: CheckoutState,
        result: Result[CheckoutState, StorefrontError],
    ) -> Result[CheckoutState, StorefrontError]:
        if isinstance(result, Ok) and result.value != before:
            self._bus.publish(EV.CheckoutStateChanged(result.value))
        return result


__all__ = ("Session",)
