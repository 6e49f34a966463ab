"""
Op types — one frozen request per storefront query or command.
"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from storefront._types import Money, ProductId, AddressId, PaymentMethodId
from storefront._errors import StorefrontError
from storefront.catalog import Product
from storefront.cart import CartLine
from storefront.profile import Address, PaymentMethod
from storefront.checkout import CheckoutState, Order

T_co = TypeVar("T_co", covariant=True)
E_co = TypeVar("E_co", covariant=True)


class Op(ABC, Generic[T_co, E_co]):
    """
    Base class for operations.

    Type parameters document the handler's Result; the runner does not
    check them.
    """


# ═══════════════════════════════════════════════════════════════════════════════
# Catalog
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class ListProducts(Op[tuple[Product, ...], StorefrontError]):
    category: str | None = None
    search_text: str = ""


@dataclass(frozen=True, slots=True)
class FeaturedProducts(Op[tuple[Product, ...], StorefrontError]):
    limit: int = 3


@dataclass(frozen=True, slots=True)
class GetProduct(Op[Product, StorefrontError]):
    product_id: ProductId


# ═══════════════════════════════════════════════════════════════════════════════
# Cart
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class CartLines(Op[tuple[CartLine, ...], StorefrontError]):
    pass


@dataclass(frozen=True, slots=True)
class CartTotal(Op[Money, StorefrontError]):
    pass


@dataclass(frozen=True, slots=True)
class AddToCart(Op[bool, StorefrontError]):
    product_id: ProductId


@dataclass(frozen=True, slots=True)
class RemoveFromCart(Op[bool, StorefrontError]):
    product_id: ProductId


@dataclass(frozen=True, slots=True)
class ClearCart(Op[None, StorefrontError]):
    pass


# ═══════════════════════════════════════════════════════════════════════════════
# Favorites
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class ToggleFavorite(Op[bool, StorefrontError]):
    product_id: ProductId


@dataclass(frozen=True, slots=True)
class IsFavorite(Op[bool, StorefrontError]):
    product_id: ProductId


@dataclass(frozen=True, slots=True)
class FavoriteProducts(Op[tuple[Product, ...], StorefrontError]):
    pass


# ═══════════════════════════════════════════════════════════════════════════════
# Profile
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class ListAddresses(Op[tuple[tuple[AddressId, Address], ...], StorefrontError]):
    pass


@dataclass(frozen=True, slots=True)
class AddAddress(Op[AddressId, StorefrontError]):
    text: str


@dataclass(frozen=True, slots=True)
class ListPaymentMethods(
    Op[tuple[tuple[PaymentMethodId, PaymentMethod], ...], StorefrontError]
):
    pass


@dataclass(frozen=True, slots=True)
class AddPaymentMethod(Op[PaymentMethodId, StorefrontError]):
    text: str


# ═══════════════════════════════════════════════════════════════════════════════
# Checkout
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class GetCheckoutState(Op[CheckoutState, StorefrontError]):
    pass


@dataclass(frozen=True, slots=True)
class SelectAddress(Op[CheckoutState, StorefrontError]):
    address_id: AddressId


@dataclass(frozen=True, slots=True)
class SelectPayment(Op[CheckoutState, StorefrontError]):
    payment_id: PaymentMethodId


@dataclass(frozen=True, slots=True)
class ResetCheckout(Op[CheckoutState, StorefrontError]):
    pass


@dataclass(frozen=True, slots=True)
class PlaceOrder(Op[Order, StorefrontError]):
    """
    request_token makes the call idempotent at the service boundary:
    a retry with the same token replays the first order.
    """

    request_token: str | None = None


@dataclass(frozen=True, slots=True)
class ListOrders(Op[tuple[Order, ...], StorefrontError]):
    pass


type AnyOp = Op[Any, Any]


__all__ = (
    "Op",
    "AnyOp",
    "ListProducts",
    "FeaturedProducts",
    "GetProduct",
    "CartLines",
    "CartTotal",
    "AddToCart",
    "RemoveFromCart",
    "ClearCart",
    "ToggleFavorite",
    "IsFavorite",
    "FavoriteProducts",
    "ListAddresses",
    "AddAddress",
    "ListPaymentMethods",
    "AddPaymentMethod",
    "GetCheckoutState",
    "SelectAddress",
    "SelectPayment",
    "ResetCheckout",
    "PlaceOrder",
    "ListOrders",
)
