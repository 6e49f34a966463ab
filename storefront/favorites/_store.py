"""
Favorites store — membership only, no ordering.
"""

from __future__ import annotations

from storefront._types import ProductId


class FavoritesStore:
    __slots__ = ("_ids",)

    def __init__(self) -> None:
        self._ids: set[ProductId] = set()

    @property
    def ids(self) -> frozenset[ProductId]:
        return frozenset(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def toggle(self, product_id: ProductId) -> bool:
        """Flip membership. Returns the new membership."""
        if product_id in self._ids:
            self._ids.remove(product_id)
            return False
        self._ids.add(product_id)
        return True

    def is_favorite(self, product_id: ProductId) -> bool:
        return product_id in self._ids


__all__ = ("FavoritesStore",)
