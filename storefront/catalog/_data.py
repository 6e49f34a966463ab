"""Static catalog seed."""

from storefront._types import Money, ProductId
from storefront.catalog._types import ALL_CATEGORIES, Product


def _product(
    slug: str, name: str, cents: int, description: str, category: str
) -> Product:
    return Product(
        id=ProductId(slug),
        name=name,
        image_ref=slug,
        price=Money(cents),
        description=description,
        category=category,
    )


SAMPLE_PRODUCTS: tuple[Product, ...] = (
    _product("sneakers", "Sneakers", 7900, "Colorful & comfy sneakers.", "Shoes"),
    _product("tshirt", "T-Shirt", 2500, "Stylish cotton t-shirt.", "Clothing"),
    _product("backpack", "Backpack", 4900, "Trendy daily backpack.", "Accessories"),
    _product("headphones", "Headphones", 9900, "Crystal-clear sound.", "Electronics"),
    _product("smartwatch", "Smartwatch", 20000, "Track fitness in style.", "Electronics"),
    _product("hoodie", "Hoodie", 5500, "Bright and cozy hoodie.", "Clothing"),
    _product("sunglasses", "Sunglasses", 3900, "Retro UV protection.", "Accessories"),
    _product("joggers", "Joggers", 4500, "Bold, breathable joggers.", "Clothing"),
    _product("sleeve", "Laptop Sleeve", 2900, "Vibrant protective sleeve.", "Accessories"),
    _product("speaker", "Speaker", 6900, "Loud, colorful, portable.", "Electronics"),
)

CATEGORIES: tuple[str, ...] = (
    ALL_CATEGORIES,
    "Clothing",
    "Shoes",
    "Accessories",
    "Electronics",
)
