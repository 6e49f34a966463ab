"""
Unit tests for the catalog.

Tests for Product invariants, category/search filtering and lookup.
"""

import pytest

from storefront import Money, ProductId
from storefront.catalog import ALL_CATEGORIES, CATEGORIES, Catalog, Product, SAMPLE_PRODUCTS


def make_product(slug: str, cents: int = 1000, category: str = "Clothing") -> Product:
    return Product(
        id=ProductId(slug),
        name=slug.title(),
        image_ref=slug,
        price=Money(cents),
        description=f"A {slug}",
        category=category,
    )


class TestProduct:
    """Tests for Product value object."""

    def test_negative_price_rejected(self):
        """Test that a negative price raises ValueError."""
        with pytest.raises(ValueError, match="Negative price"):
            make_product("broken", cents=-1)

    def test_zero_price_allowed(self):
        """Test that a free product is valid."""
        assert make_product("freebie", cents=0).price == Money(0)

    def test_matches_name_case_insensitive(self):
        """Test search matches the name regardless of case."""
        assert make_product("hoodie").matches("HOOD")

    def test_matches_description(self):
        """Test search matches the description."""
        product = make_product("hoodie")
        assert product.matches("a hood")
        assert not product.matches("sneaker")


class TestCatalogSeed:
    """Tests for the default catalog data."""

    def test_ten_products(self, catalog):
        """Test the seed contains ten products with unique ids."""
        assert len(catalog) == 10
        assert len({p.id for p in SAMPLE_PRODUCTS}) == 10

    def test_categories(self, catalog):
        """Test category list starts with the All pseudo-category."""
        assert catalog.categories == CATEGORIES
        assert catalog.categories[0] == ALL_CATEGORIES

    def test_known_prices(self, catalog):
        """Test prices are stored as integer cents."""
        assert catalog.get(ProductId("sneakers")).price == Money(7900)
        assert catalog.get(ProductId("tshirt")).price == Money(2500)
        assert catalog.get(ProductId("smartwatch")).price == Money(20000)

    def test_duplicate_ids_rejected(self):
        """Test that a catalog cannot hold two products with the same id."""
        with pytest.raises(ValueError, match="Duplicate"):
            Catalog([make_product("a"), make_product("a")])


class TestListProducts:
    """Tests for Catalog.list_products filtering."""

    def test_no_filters_returns_all_in_order(self, catalog):
        """Test that no filter returns the catalog in order."""
        assert catalog.list_products() == catalog.products

    def test_all_category_is_no_filter(self, catalog):
        """Test that the All category behaves like no category."""
        assert catalog.list_products(ALL_CATEGORIES) == catalog.products

    def test_category_filter(self, catalog):
        """Test exact category match."""
        names = [p.name for p in catalog.list_products("Electronics")]
        assert names == ["Headphones", "Smartwatch", "Speaker"]

    def test_unknown_category_is_empty(self, catalog):
        """Test that an unknown category matches nothing."""
        assert catalog.list_products("Furniture") == ()

    def test_search_filter(self, catalog):
        """Test case-insensitive search over names."""
        assert [p.id.value for p in catalog.list_products(search_text="SNEAK")] == [
            "sneakers"
        ]

    def test_search_over_description(self, catalog):
        """Test search also looks at descriptions."""
        ids = {p.id.value for p in catalog.list_products(search_text="cozy")}
        assert ids == {"hoodie"}

    def test_category_and_search_compose(self, catalog):
        """Test both filters apply together."""
        result = catalog.list_products("Accessories", "sleeve")
        assert [p.id.value for p in result] == ["sleeve"]
        assert catalog.list_products("Clothing", "sleeve") == ()

    def test_empty_search_is_no_filter(self, catalog):
        """Test that empty search text keeps everything."""
        assert catalog.list_products(search_text="") == catalog.products


class TestLookup:
    """Tests for get, membership and featured."""

    def test_get_unknown_is_none(self, catalog):
        """Test lookup of an unknown id."""
        assert catalog.get(ProductId("nope")) is None

    def test_contains(self, catalog):
        """Test membership by ProductId."""
        assert ProductId("backpack") in catalog
        assert ProductId("nope") not in catalog

    def test_featured_is_catalog_prefix(self, catalog):
        """Test featured products are the first N."""
        assert catalog.featured() == catalog.products[:3]
        assert catalog.featured(0) == ()
        assert catalog.featured(-5) == ()
