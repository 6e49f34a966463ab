"""
Default handlers — each request mapped onto the Session surface.
"""

from __future__ import annotations

from kungfu import Result, Ok

from storefront._types import Money, AddressId, PaymentMethodId
from storefront._errors import StorefrontError
from storefront.catalog import Product
from storefront.cart import CartLine
from storefront.profile import Address, PaymentMethod
from storefront.checkout import CheckoutState, Order
from storefront.session import Session
from storefront.ops._types import (
    ListProducts,
    FeaturedProducts,
    GetProduct,
    CartLines,
    CartTotal,
    AddToCart,
    RemoveFromCart,
    ClearCart,
    ToggleFavorite,
    IsFavorite,
    FavoriteProducts,
    ListAddresses,
    AddAddress,
    ListPaymentMethods,
    AddPaymentMethod,
    GetCheckoutState,
    SelectAddress,
    SelectPayment,
    ResetCheckout,
    PlaceOrder,
    ListOrders,
)
from storefront.ops._runner import OpsBuilder, Runner, ops

type R[T] = Result[T, StorefrontError]


# ═══════════════════════════════════════════════════════════════════════════════
# Catalog
# ═══════════════════════════════════════════════════════════════════════════════


async def list_products(req: ListProducts, session: Session) -> R[tuple[Product, ...]]:
    return Ok(session.list_products(req.category, req.search_text))


async def featured_products(
    req: FeaturedProducts, session: Session
) -> R[tuple[Product, ...]]:
    return Ok(session.featured_products(req.limit))


async def get_product(req: GetProduct, session: Session) -> R[Product]:
    return session.get_product(req.product_id)


# ═══════════════════════════════════════════════════════════════════════════════
# Cart
# ═══════════════════════════════════════════════════════════════════════════════


async def cart_lines(req: CartLines, session: Session) -> R[tuple[CartLine, ...]]:
    return Ok(session.cart_lines())


async def cart_total(req: CartTotal, session: Session) -> R[Money]:
    return Ok(session.cart_total())


async def add_to_cart(req: AddToCart, session: Session) -> R[bool]:
    return session.add_to_cart(req.product_id)


async def remove_from_cart(req: RemoveFromCart, session: Session) -> R[bool]:
    return Ok(session.remove_from_cart(req.product_id))


async def clear_cart(req: ClearCart, session: Session) -> R[None]:
    session.clear_cart()
    return Ok(None)


# ═══════════════════════════════════════════════════════════════════════════════
# Favorites
# ═══════════════════════════════════════════════════════════════════════════════


async def toggle_favorite(req: ToggleFavorite, session: Session) -> R[bool]:
    return session.toggle_favorite(req.product_id)


async def is_favorite(req: IsFavorite, session: Session) -> R[bool]:
    return Ok(session.is_favorite(req.product_id))


async def favorite_products(
    req: FavoriteProducts, session: Session
) -> R[tuple[Product, ...]]:
    return Ok(session.favorite_products())


# ═══════════════════════════════════════════════════════════════════════════════
# Profile
# ═══════════════════════════════════════════════════════════════════════════════


async def list_addresses(
    req: ListAddresses, session: Session
) -> R[tuple[tuple[AddressId, Address], ...]]:
    return Ok(session.addresses())


async def add_address(req: AddAddress, session: Session) -> R[AddressId]:
    return session.add_address(req.text)


async def list_payment_methods(
    req: ListPaymentMethods, session: Session
) -> R[tuple[tuple[PaymentMethodId, PaymentMethod], ...]]:
    return Ok(session.payment_methods())


async def add_payment_method(
    req: AddPaymentMethod, session: Session
) -> R[PaymentMethodId]:
    return session.add_payment_method(req.text)


# ═══════════════════════════════════════════════════════════════════════════════
# Checkout
# ═══════════════════════════════════════════════════════════════════════════════


async def get_checkout_state(req: GetCheckoutState, session: Session) -> R[CheckoutState]:
    return Ok(session.checkout_state())


async def select_address(req: SelectAddress, session: Session) -> R[CheckoutState]:
    return session.select_address(req.address_id)


async def select_payment(req: SelectPayment, session: Session) -> R[CheckoutState]:
    return session.select_payment(req.payment_id)


async def reset_checkout(req: ResetCheckout, session: Session) -> R[CheckoutState]:
    return Ok(session.reset_checkout())


async def place_order(req: PlaceOrder, session: Session) -> R[Order]:
    # request_token is handled by StorefrontService before dispatch
    return session.place_order()


async def list_orders(req: ListOrders, session: Session) -> R[tuple[Order, ...]]:
    return Ok(session.orders())


# ═══════════════════════════════════════════════════════════════════════════════
# Registration
# ═══════════════════════════════════════════════════════════════════════════════


def default_ops() -> OpsBuilder:
    return (
        ops()
        .on(ListProducts, list_products)
        .on(FeaturedProducts, featured_products)
        .on(GetProduct, get_product)
        .on(CartLines, cart_lines)
        .on(CartTotal, cart_total)
        .on(AddToCart, add_to_cart)
        .on(RemoveFromCart, remove_from_cart)
        .on(ClearCart, clear_cart)
        .on(ToggleFavorite, toggle_favorite)
        .on(IsFavorite, is_favorite)
        .on(FavoriteProducts, favorite_products)
        .on(ListAddresses, list_addresses)
        .on(AddAddress, add_address)
        .on(ListPaymentMethods, list_payment_methods)
        .on(AddPaymentMethod, add_payment_method)
        .on(GetCheckoutState, get_checkout_state)
        .on(SelectAddress, select_address)
        .on(SelectPayment, select_payment)
        .on(ResetCheckout, reset_checkout)
        .on(PlaceOrder, place_order)
        .on(ListOrders, list_orders)
    )


def default_runner() -> Runner:
    return default_ops().compile()


__all__ = ("default_ops", "default_runner")
