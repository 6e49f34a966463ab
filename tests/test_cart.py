"""
Unit tests for money and the cart store.
"""

import pytest

from storefront import Money, ProductId
from storefront.cart import CartLine, CartStore


class TestMoney:
    """Tests for Money value object."""

    def test_add(self):
        """Test addition stays in minor units."""
        assert Money(7900) + Money(2500) == Money(10400)

    def test_times(self):
        """Test multiplication by a quantity."""
        assert Money(2500).times(3) == Money(7500)

    def test_mixed_currency_rejected(self):
        """Test that adding different currencies raises ValueError."""
        with pytest.raises(ValueError, match="Cannot add"):
            Money(100, "USD") + Money(100, "EUR")

    def test_format(self):
        """Test presentation formatting."""
        assert Money(10400).format() == "$104.00"
        assert Money(5).format() == "$0.05"
        assert str(Money(20000)) == "$200.00"
        assert Money(150, "JPY").format() == "1.50 JPY"

    def test_sum_with_zero_start(self):
        """Test sum() over Money with an explicit zero start."""
        assert sum([Money(1), Money(2)], start=Money.zero()) == Money(3)


class TestCartLine:
    """Tests for CartLine invariants."""

    def test_quantity_must_be_positive(self, catalog):
        """Test that quantity below 1 raises ValueError."""
        with pytest.raises(ValueError, match="Quantity"):
            CartLine(catalog.get(ProductId("tshirt")), quantity=0)

    def test_subtotal(self, catalog):
        """Test subtotal is price times quantity."""
        line = CartLine(catalog.get(ProductId("tshirt")), quantity=2)
        assert line.subtotal == Money(5000)
        assert line.product_id == ProductId("tshirt")


class TestCartStore:
    """Tests for CartStore operations."""

    def test_starts_empty(self, cart):
        """Test new cart is empty with zero total."""
        assert cart.is_empty
        assert cart.lines == ()
        assert cart.total() == Money(0)

    def test_add_inserts_quantity_one_line(self, cart, catalog):
        """Test add creates a single quantity-1 line."""
        assert cart.add(catalog.get(ProductId("sneakers"))) is True
        assert len(cart) == 1
        assert cart.lines[0].quantity == 1

    def test_add_twice_is_noop(self, cart, catalog):
        """Test re-adding never increments the quantity."""
        sneakers = catalog.get(ProductId("sneakers"))
        cart.add(sneakers)
        assert cart.add(sneakers) is False
        assert len(cart) == 1
        assert cart.lines[0].quantity == 1

    def test_add_preserves_insertion_order(self, cart, catalog):
        """Test lines keep the order they were added in."""
        for slug in ("speaker", "tshirt", "backpack"):
            cart.add(catalog.get(ProductId(slug)))
        assert [line.product_id.value for line in cart.lines] == [
            "speaker",
            "tshirt",
            "backpack",
        ]

    def test_remove(self, cart, catalog):
        """Test remove deletes the line and reports it."""
        cart.add(catalog.get(ProductId("tshirt")))
        assert cart.remove(ProductId("tshirt")) is True
        assert cart.is_empty

    def test_remove_absent_is_noop(self, cart):
        """Test removing an absent product does nothing."""
        assert cart.remove(ProductId("tshirt")) is False

    def test_clear(self, cart, catalog):
        """Test clear empties the cart."""
        cart.add(catalog.get(ProductId("tshirt")))
        cart.add(catalog.get(ProductId("hoodie")))
        cart.clear()
        assert cart.is_empty

    def test_total(self, cart, catalog):
        """Test total sums line subtotals exactly."""
        cart.add(catalog.get(ProductId("sneakers")))
        cart.add(catalog.get(ProductId("tshirt")))
        assert cart.total() == Money(10400)

    def test_contains(self, cart, catalog):
        """Test membership by product id."""
        cart.add(catalog.get(ProductId("tshirt")))
        assert ProductId("tshirt") in cart
        assert ProductId("hoodie") not in cart

    def test_lines_is_snapshot(self, cart, catalog):
        """Test returned lines do not change after later mutations."""
        cart.add(catalog.get(ProductId("tshirt")))
        snapshot = cart.lines
        cart.clear()
        assert len(snapshot) == 1
