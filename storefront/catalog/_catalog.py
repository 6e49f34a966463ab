"""
Catalog — immutable, process-wide product list.
"""

from __future__ import annotations

from collections.abc import Iterable

from storefront._types import ProductId
from storefront.catalog._data import CATEGORIES, SAMPLE_PRODUCTS
from storefront.catalog._types import ALL_CATEGORIES, Product


class Catalog:
    """
    Read-only product list.

    Never mutated after construction, so it is safe to share across sessions
    without locking.
    """

    __slots__ = ("_products", "_by_id", "_categories")

    def __init__(
        self,
        products: Iterable[Product],
        categories: Iterable[str] = CATEGORIES,
    ) -> None:
        self._products = tuple(products)
        self._by_id = {p.id: p for p in self._products}
        if len(self._by_id) != len(self._products):
            raise ValueError("Duplicate product ids in catalog")
        self._categories = tuple(categories)

    @property
    def products(self) -> tuple[Product, ...]:
        return self._products

    @property
    def categories(self) -> tuple[str, ...]:
        return self._categories

    def get(self, product_id: ProductId) -> Product | None:
        return self._by_id.get(product_id)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._by_id

    def __len__(self) -> int:
        return len(self._products)

    def list_products(
        self,
        category: str | None = None,
        search_text: str = "",
    ) -> tuple[Product, ...]:
        """
        Filter products by category, then by search text.

        category None or "All" keeps every category. Empty search text keeps
        every product; otherwise name or description must contain it
        (case-insensitive). Catalog order is preserved.
        """
        products: Iterable[Product] = self._products
        if category is not None and category != ALL_CATEGORIES:
            products = (p for p in products if p.category == category)
        if search_text:
            products = (p for p in products if p.matches(search_text))
        return tuple(products)

    def featured(self, limit: int = 3) -> tuple[Product, ...]:
        return self._products[:max(limit, 0)]


DEFAULT_CATALOG = Catalog(SAMPLE_PRODUCTS)


__all__ = ("Catalog", "DEFAULT_CATALOG")
