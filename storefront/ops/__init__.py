"""
Ops — data-driven dispatch of storefront requests.

Replaces match/case over commands with declarative registration:
    from storefront import ops as O

    runner = O.default_runner()
    result = await runner.run(O.AddToCart(ProductId("sneakers")), session)

Custom handlers override defaults, last registration wins:
    async def audited_place_order(req: O.PlaceOrder, session: Session):
        audit.write(session.user_id)
        return session.place_order()

    runner = O.default_ops().on(O.PlaceOrder, audited_place_order).compile()

Idempotency and per-session locking live in StorefrontService, not here.
"""

from storefront.ops._types import (
    Op,
    AnyOp,
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
from storefront.ops._runner import HandlerFunc, OpsBuilder, Runner, ops
from storefront.ops._handlers import default_ops, default_runner

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
    "HandlerFunc",
    "OpsBuilder",
    "Runner",
    "ops",
    "default_ops",
    "default_runner",
)
