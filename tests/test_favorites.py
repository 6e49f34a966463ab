"""
Unit tests for the favorites store.
"""

from storefront import ProductId
from storefront.favorites import FavoritesStore


class TestFavoritesStore:
    """Tests for FavoritesStore toggling."""

    def test_toggle_adds_then_removes(self):
        """Test toggle flips membership and returns the new state."""
        favorites = FavoritesStore()
        pid = ProductId("hoodie")
        assert favorites.toggle(pid) is True
        assert favorites.is_favorite(pid)
        assert favorites.toggle(pid) is False
        assert not favorites.is_favorite(pid)

    def test_double_toggle_restores(self):
        """Test toggling twice leaves the set as it was."""
        favorites = FavoritesStore()
        favorites.toggle(ProductId("a"))
        before = favorites.ids
        favorites.toggle(ProductId("b"))
        favorites.toggle(ProductId("b"))
        assert favorites.ids == before

    def test_ids_snapshot(self):
        """Test ids is an immutable snapshot."""
        favorites = FavoritesStore()
        favorites.toggle(ProductId("a"))
        ids = favorites.ids
        favorites.toggle(ProductId("a"))
        assert ids == frozenset({ProductId("a")})
        assert len(favorites) == 0
