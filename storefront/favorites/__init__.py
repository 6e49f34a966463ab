"""
Favorites — set of favorite product ids.

    from storefront import favorites as F

    favs = F.FavoritesStore()
    favs.toggle(product_id)   # True: now a favorite
"""

from storefront.favorites._store import FavoritesStore

__all__ = ("FavoritesStore",)
