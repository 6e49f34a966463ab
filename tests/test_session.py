"""
Tests for Session: the per-user command surface and its events.
"""

import logging

import pytest

from storefront import AddressId, Error, ErrorKind, Money, Ok, PaymentMethodId, ProductId, Settings
from storefront import events as EV
from storefront.checkout import CheckoutState
from storefront.session import Session


@pytest.fixture
def recorded(session):
    """Every event the session publishes, in order."""
    seen = []
    session.subscribe(EV.Event, seen.append)
    return seen


class TestSeeding:
    """Tests for profile seeding from settings."""

    def test_default_seed(self, session):
        """Test default addresses and payment method are present."""
        assert [a.label for _, a in session.addresses()] == [
            "123 Main Street, New York",
            "45 Hill Road, San Francisco",
        ]
        assert [m.label for _, m in session.payment_methods()] == ["Visa **** 1234"]

    def test_seed_disabled(self):
        """Test SEED_PROFILE=False starts with an empty profile."""
        session = Session("bob", settings=Settings(_env_file=None, SEED_PROFILE=False))
        assert session.addresses() == ()
        assert session.payment_methods() == ()

    def test_sessions_do_not_share_state(self, settings):
        """Test two sessions own separate carts."""
        a = Session("a", settings=settings)
        b = Session("b", settings=settings)
        a.add_to_cart(ProductId("tshirt"))
        assert b.cart_lines() == ()


class TestCatalogQueries:
    """Tests for catalog queries through the session."""

    def test_get_product(self, session):
        """Test known product lookup."""
        result = session.get_product(ProductId("speaker"))
        assert isinstance(result, Ok)
        assert result.value.name == "Speaker"

    def test_get_unknown_product(self, session):
        """Test unknown product fails with UNKNOWN_PRODUCT."""
        result = session.get_product(ProductId("nope"))
        assert isinstance(result, Error)
        assert result.error.kind is ErrorKind.UNKNOWN_PRODUCT

    def test_list_and_featured(self, session):
        """Test list and featured delegate to the catalog."""
        assert len(session.list_products("Clothing")) == 3
        assert len(session.featured_products()) == 3


class TestCartCommands:
    """Tests for cart commands."""

    def test_add_to_cart(self, session):
        """Test adding a known product."""
        assert session.add_to_cart(ProductId("tshirt")) == Ok(True)
        assert session.cart_total() == Money(2500)

    def test_add_twice_is_silent_noop(self, session):
        """Test the second add reports False and changes nothing."""
        session.add_to_cart(ProductId("tshirt"))
        assert session.add_to_cart(ProductId("tshirt")) == Ok(False)
        assert len(session.cart_lines()) == 1

    def test_add_twice_strict(self, settings):
        """Test CART_REJECT_DUPLICATES turns a re-add into an error."""
        strict = Session(
            "s", settings=settings.model_copy(update={"CART_REJECT_DUPLICATES": True})
        )
        strict.add_to_cart(ProductId("tshirt"))
        result = strict.add_to_cart(ProductId("tshirt"))
        assert isinstance(result, Error)
        assert result.error.kind is ErrorKind.DUPLICATE_CART_LINE
        assert len(strict.cart_lines()) == 1

    def test_add_unknown_product(self, session):
        """Test adding an id missing from the catalog."""
        result = session.add_to_cart(ProductId("nope"))
        assert result.error.kind is ErrorKind.UNKNOWN_PRODUCT
        assert session.cart_lines() == ()

    def test_remove_and_clear(self, session):
        """Test remove and clear."""
        session.add_to_cart(ProductId("tshirt"))
        session.add_to_cart(ProductId("hoodie"))
        assert session.remove_from_cart(ProductId("tshirt")) is True
        assert session.remove_from_cart(ProductId("tshirt")) is False
        session.clear_cart()
        assert session.cart_lines() == ()


class TestFavorites:
    """Tests for favorites through the session."""

    def test_toggle_favorite(self, session):
        """Test toggle on and off."""
        assert session.toggle_favorite(ProductId("hoodie")) == Ok(True)
        assert session.is_favorite(ProductId("hoodie"))
        assert session.toggle_favorite(ProductId("hoodie")) == Ok(False)

    def test_toggle_unknown_product(self, session):
        """Test favorites reject ids missing from the catalog."""
        result = session.toggle_favorite(ProductId("nope"))
        assert result.error.kind is ErrorKind.UNKNOWN_PRODUCT
        assert not session.is_favorite(ProductId("nope"))

    def test_favorite_products_in_catalog_order(self, session):
        """Test favorites are listed in catalog order, not toggle order."""
        session.toggle_favorite(ProductId("speaker"))
        session.toggle_favorite(ProductId("sneakers"))
        assert [p.id.value for p in session.favorite_products()] == [
            "sneakers",
            "speaker",
        ]


class TestProfileCommands:
    """Tests for adding addresses and payment methods."""

    def test_add_address_text(self, session):
        """Test free-form address is parsed and appended."""
        assert session.add_address("9 Elm Road, Boston") == Ok(AddressId(2))
        assert session.addresses()[-1][1].city == "Boston"

    def test_add_blank_address(self, session):
        """Test whitespace-only address is rejected."""
        result = session.add_address("   ")
        assert result.error.kind is ErrorKind.INVALID_INPUT
        assert len(session.addresses()) == 2

    def test_add_payment_method(self, session):
        """Test card text is masked and appended."""
        assert session.add_payment_method("Amex 378282246310005") == Ok(
            PaymentMethodId(1)
        )
        assert session.payment_methods()[-1][1].label == "Amex **** 0005"

    def test_full_card_number_never_stored(self, session):
        """Test a spaced card number is masked before it is kept."""
        session.add_payment_method("Visa 4111 1111 1111 1234")
        method = session.payment_methods()[-1][1]
        assert method.label == "Visa **** 1234"
        assert "4111" not in method.kind

    def test_add_blank_payment_method(self, session):
        """Test empty card details are rejected."""
        assert session.add_payment_method("").error.kind is ErrorKind.INVALID_INPUT


class TestCheckoutFlow:
    """Tests for checkout through the session."""

    def test_end_to_end(self, session):
        """Test add, select, place: order recorded, cart empty, IDLE."""
        session.add_to_cart(ProductId("sneakers"))
        session.add_to_cart(ProductId("tshirt"))
        session.select_address(AddressId(0))
        session.select_payment(PaymentMethodId(0))

        result = session.place_order()

        assert isinstance(result, Ok)
        assert result.value.total == Money(10400)
        assert session.cart_lines() == ()
        assert session.checkout_state() is CheckoutState.IDLE
        assert session.orders() == (result.value,)
        assert session.get_order(result.value.id) == result.value

    def test_empty_cart(self, session):
        """Test EMPTY_CART is not recorded in history."""
        session.select_address(AddressId(0))
        session.select_payment(PaymentMethodId(0))
        assert session.place_order().error.kind is ErrorKind.EMPTY_CART
        assert session.orders() == ()

    def test_selected_ids(self, session):
        """Test selection queries."""
        session.select_address(AddressId(1))
        assert session.selected_address == AddressId(1)
        assert session.selected_payment is None
        assert session.reset_checkout() is CheckoutState.IDLE


class TestEvents:
    """Tests for change notification."""

    def test_cart_changed(self, session, recorded):
        """Test adding publishes the new cart lines."""
        session.add_to_cart(ProductId("tshirt"))
        assert len(recorded) == 1
        assert isinstance(recorded[0], EV.CartChanged)
        assert [line.product_id.value for line in recorded[0].lines] == ["tshirt"]

    def test_noop_publishes_nothing(self, session, recorded):
        """Test no-op commands stay silent."""
        session.add_to_cart(ProductId("tshirt"))
        recorded.clear()
        session.add_to_cart(ProductId("tshirt"))
        session.remove_from_cart(ProductId("hoodie"))
        session.add_to_cart(ProductId("nope"))
        session.reset_checkout()
        assert recorded == []

    def test_failed_transition_publishes_nothing(self, session, recorded):
        """Test rejected selections do not notify."""
        session.select_payment(PaymentMethodId(0))
        session.select_address(AddressId(99))
        assert recorded == []

    def test_state_events_only_on_change(self, session, recorded):
        """Test re-selecting within the same state does not notify again."""
        session.select_address(AddressId(0))
        session.select_address(AddressId(1))
        session.select_payment(PaymentMethodId(0))
        session.select_payment(PaymentMethodId(0))
        session.select_address(AddressId(0))
        assert recorded == [
            EV.CheckoutStateChanged(CheckoutState.ADDRESS_SELECTED),
            EV.CheckoutStateChanged(CheckoutState.PAYMENT_SELECTED),
        ]

    def test_place_order_event_sequence(self, session, recorded):
        """Test OrderPlaced, then the empty cart, then IDLE."""
        session.add_to_cart(ProductId("tshirt"))
        session.select_address(AddressId(0))
        session.select_payment(PaymentMethodId(0))
        recorded.clear()

        order = session.place_order().value

        assert recorded == [
            EV.OrderPlaced(order),
            EV.CartChanged(()),
            EV.CheckoutStateChanged(CheckoutState.IDLE),
        ]

    def test_typed_subscription(self, session):
        """Test handlers only receive their event type."""
        toggles = []
        session.subscribe(EV.FavoriteToggled, toggles.append)
        session.add_to_cart(ProductId("tshirt"))
        session.toggle_favorite(ProductId("tshirt"))
        assert toggles == [EV.FavoriteToggled(ProductId("tshirt"), True)]

    def test_unsubscribe(self, session):
        """Test the handle stops delivery and reports only once."""
        seen = []
        unsubscribe = session.subscribe(EV.CartChanged, seen.append)
        assert unsubscribe() is True
        assert unsubscribe() is False
        session.add_to_cart(ProductId("tshirt"))
        assert seen == []

    def test_failing_handler_is_logged(self, session, caplog):
        """Test a raising handler does not break the mutation or others."""
        seen = []

        def broken(event):
            raise RuntimeError("boom")

        session.subscribe(EV.CartChanged, broken)
        session.subscribe(EV.CartChanged, seen.append)

        with caplog.at_level(logging.ERROR, logger="storefront.events._bus"):
            assert session.add_to_cart(ProductId("tshirt")) == Ok(True)

        assert len(seen) == 1
        assert "boom" in caplog.text

    def test_profile_events(self, session, recorded):
        """Test address and payment additions notify with the new id."""
        session.add_address("1 Road")
        session.add_payment_method("Visa 4242")
        assert isinstance(recorded[0], EV.AddressAdded)
        assert recorded[0].address_id == AddressId(2)
        assert isinstance(recorded[1], EV.PaymentMethodAdded)
        assert recorded[1].method.last_four == "4242"
