"""
Catalog — immutable product list with category and text filtering.

    from storefront import catalog as CT

    shoes = CT.DEFAULT_CATALOG.list_products(category="Shoes")
    hits = CT.DEFAULT_CATALOG.list_products(search_text="cozy")
"""

from storefront.catalog._types import ALL_CATEGORIES, Product
from storefront.catalog._data import CATEGORIES, SAMPLE_PRODUCTS
from storefront.catalog._catalog import Catalog, DEFAULT_CATALOG

__all__ = (
    "ALL_CATEGORIES",
    "CATEGORIES",
    "SAMPLE_PRODUCTS",
    "Product",
    "Catalog",
    "DEFAULT_CATALOG",
)
