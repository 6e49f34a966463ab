"""
Test configuration and fixtures
"""

import os
from datetime import UTC, datetime
from itertools import count

import pytest

from storefront import OrderId, Settings
from storefront.catalog import DEFAULT_CATALOG
from storefront.cart import CartStore
from storefront.profile import Address, AddressBook, PaymentMethod, PaymentMethods
from storefront.checkout import CheckoutOrchestrator
from storefront.session import Session

FIXED_NOW = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def settings(monkeypatch):
    """Defaults only: STOREFRONT_* variables are cleared and .env is skipped."""
    for name in list(os.environ):
        if name.startswith("STOREFRONT_"):
            monkeypatch.delenv(name)
    return Settings(_env_file=None)


@pytest.fixture
def catalog():
    return DEFAULT_CATALOG


@pytest.fixture
def order_ids():
    """Deterministic order id factory: ord_1, ord_2, ..."""
    counter = count(1)
    return lambda: OrderId(f"ord_{next(counter)}")


@pytest.fixture
def cart():
    return CartStore()


@pytest.fixture
def addresses():
    return AddressBook([Address.from_text("123 Main Street, New York")])


@pytest.fixture
def payments():
    return PaymentMethods([PaymentMethod.from_text("Visa **** 1234")])


@pytest.fixture
def checkout(cart, addresses, payments, order_ids):
    return CheckoutOrchestrator(
        cart, addresses, payments, clock=lambda: FIXED_NOW, id_factory=order_ids
    )


@pytest.fixture
def session(catalog, settings, order_ids):
    """Session seeded with two addresses and one payment method."""
    return Session(
        "alice",
        catalog,
        settings=settings,
        clock=lambda: FIXED_NOW,
        id_factory=order_ids,
    )
