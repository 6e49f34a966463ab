"""
Catalog types.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront._types import Money, ProductId

ALL_CATEGORIES = "All"


@dataclass(frozen=True, slots=True)
class Product:
    """
    Immutable catalog entry.

    Created once from static data; never mutated.
    """

    id: ProductId
    name: str
    image_ref: str
    price: Money
    description: str
    category: str

    def __post_init__(self) -> None:
        if self.price.minor < 0:
            raise ValueError(f"Negative price for {self.id.value}")

    def matches(self, search_text: str) -> bool:
        """Case-insensitive substring match on name or description."""
        needle = search_text.lower()
        return needle in self.name.lower() or needle in self.description.lower()


__all__ = ("ALL_CATEGORIES", "Product")
