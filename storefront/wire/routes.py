"""
Route table — every storefront op exposed under /sessions/{user_id}.
"""

from storefront.service import StorefrontService
from storefront.wire import models as M
from storefront.wire._app import Application, application
from storefront.wire._endpoint import Endpoint, endpoint
from storefront.wire.codecs.rrc import RequestResponseCodec as RRC
from storefront.wire.triggers.http import HTTPRouteTrigger as HTTP

PREFIX = "/sessions/{user_id}"

# Literal paths before parameterised siblings: /products/featured must win
# over /products/{product_id}.
ROUTES: tuple[tuple[HTTP, RRC], ...] = (
    # Catalog
    (HTTP("GET", f"{PREFIX}/products", "List products"), RRC(M.ListProductsIn, M.ProductListOut)),
    (HTTP("GET", f"{PREFIX}/products/featured", "Featured products"), RRC(M.FeaturedProductsIn, M.ProductListOut)),
    (HTTP("GET", f"{PREFIX}/products/{{product_id}}", "Get product"), RRC(M.GetProductIn, M.ProductView)),
    # Cart
    (HTTP("GET", f"{PREFIX}/cart", "Cart lines"), RRC(M.CartLinesIn, M.CartOut)),
    (HTTP("GET", f"{PREFIX}/cart/total", "Cart total"), RRC(M.CartTotalIn, M.CartTotalOut)),
    (HTTP("POST", f"{PREFIX}/cart/items", "Add to cart"), RRC(M.AddToCartIn, M.AddedOut)),
    (HTTP("DELETE", f"{PREFIX}/cart/items/{{product_id}}", "Remove from cart"), RRC(M.RemoveFromCartIn, M.RemovedOut)),
    (HTTP("DELETE", f"{PREFIX}/cart", "Clear cart"), RRC(M.ClearCartIn, M.DoneOut)),
    # Favorites
    (HTTP("GET", f"{PREFIX}/favorites", "Favorite products"), RRC(M.FavoriteProductsIn, M.ProductListOut)),
    (HTTP("POST", f"{PREFIX}/favorites/toggle", "Toggle favorite"), RRC(M.ToggleFavoriteIn, M.FavoriteOut)),
    (HTTP("GET", f"{PREFIX}/favorites/{{product_id}}", "Is favorite"), RRC(M.IsFavoriteIn, M.FavoriteOut)),
    # Profile
    (HTTP("GET", f"{PREFIX}/addresses", "List addresses"), RRC(M.ListAddressesIn, M.AddressListOut)),
    (HTTP("POST", f"{PREFIX}/addresses", "Add address"), RRC(M.AddAddressIn, M.AddressIdOut)),
    (HTTP("GET", f"{PREFIX}/payment-methods", "List payment methods"), RRC(M.ListPaymentMethodsIn, M.PaymentMethodListOut)),
    (HTTP("POST", f"{PREFIX}/payment-methods", "Add payment method"), RRC(M.AddPaymentMethodIn, M.PaymentMethodIdOut)),
    # Checkout
    (HTTP("GET", f"{PREFIX}/checkout", "Checkout state"), RRC(M.GetCheckoutStateIn, M.CheckoutStateOut)),
    (HTTP("POST", f"{PREFIX}/checkout/address", "Select address"), RRC(M.SelectAddressIn, M.CheckoutStateOut)),
    (HTTP("POST", f"{PREFIX}/checkout/payment", "Select payment"), RRC(M.SelectPaymentIn, M.CheckoutStateOut)),
    (HTTP("POST", f"{PREFIX}/checkout/reset", "Reset checkout"), RRC(M.ResetCheckoutIn, M.CheckoutStateOut)),
    (HTTP("POST", f"{PREFIX}/checkout/place", "Place order"), RRC(M.PlaceOrderIn, M.OrderView)),
    # Orders
    (HTTP("GET", f"{PREFIX}/orders", "List orders"), RRC(M.ListOrdersIn, M.OrderListOut)),
)


def storefront_endpoint(service: StorefrontService) -> Endpoint:
    endp = endpoint(service)
    for trigger, codec in ROUTES:
        endp = endp.expose(trigger, codec)
    return endp


def storefront_application(
    service: StorefrontService, title: str = "Storefront API"
) -> Application:
    return application(title).mount(storefront_endpoint(service))


__all__ = ("PREFIX", "ROUTES", "storefront_endpoint", "storefront_application")
