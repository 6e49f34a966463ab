"""
HTTP models — request models build ops, response views render results.
"""

from datetime import datetime

from pydantic import BaseModel

from storefront import ops as O
from storefront._types import Money, ProductId, AddressId, PaymentMethodId
from storefront._errors import StorefrontError
from storefront.catalog import Product
from storefront.cart import CartLine
from storefront.profile import Address, PaymentMethod
from storefront.checkout import CheckoutState, Order


# ═══════════════════════════════════════════════════════════════════════════════
# Requests
# ═══════════════════════════════════════════════════════════════════════════════


class ListProductsIn(BaseModel):
    category: str | None = None
    search_text: str = ""

    def to_domain(self) -> O.ListProducts:
        return O.ListProducts(self.category, self.search_text)


class FeaturedProductsIn(BaseModel):
    limit: int = 3

    def to_domain(self) -> O.FeaturedProducts:
        return O.FeaturedProducts(self.limit)


class GetProductIn(BaseModel):
    product_id: str

    def to_domain(self) -> O.GetProduct:
        return O.GetProduct(ProductId(self.product_id))


class CartLinesIn(BaseModel):
    def to_domain(self) -> O.CartLines:
        return O.CartLines()


class CartTotalIn(BaseModel):
    def to_domain(self) -> O.CartTotal:
        return O.CartTotal()


class AddToCartIn(BaseModel):
    product_id: str

    def to_domain(self) -> O.AddToCart:
        return O.AddToCart(ProductId(self.product_id))


class RemoveFromCartIn(BaseModel):
    product_id: str

    def to_domain(self) -> O.RemoveFromCart:
        return O.RemoveFromCart(ProductId(self.product_id))


class ClearCartIn(BaseModel):
    def to_domain(self) -> O.ClearCart:
        return O.ClearCart()


class ToggleFavoriteIn(BaseModel):
    product_id: str

    def to_domain(self) -> O.ToggleFavorite:
        return O.ToggleFavorite(ProductId(self.product_id))


class IsFavoriteIn(BaseModel):
    product_id: str

    def to_domain(self) -> O.IsFavorite:
        return O.IsFavorite(ProductId(self.product_id))


class FavoriteProductsIn(BaseModel):
    def to_domain(self) -> O.FavoriteProducts:
        return O.FavoriteProducts()


class ListAddressesIn(BaseModel):
    def to_domain(self) -> O.ListAddresses:
        return O.ListAddresses()


class AddAddressIn(BaseModel):
    text: str

    def to_domain(self) -> O.AddAddress:
        return O.AddAddress(self.text)


class ListPaymentMethodsIn(BaseModel):
    def to_domain(self) -> O.ListPaymentMethods:
        return O.ListPaymentMethods()


class AddPaymentMethodIn(BaseModel):
    text: str

    def to_domain(self) -> O.AddPaymentMethod:
        return O.AddPaymentMethod(self.text)


class GetCheckoutStateIn(BaseModel):
    def to_domain(self) -> O.GetCheckoutState:
        return O.GetCheckoutState()


class SelectAddressIn(BaseModel):
    address_id: int

    def to_domain(self) -> O.SelectAddress:
        return O.SelectAddress(AddressId(self.address_id))


class SelectPaymentIn(BaseModel):
    payment_id: int

    def to_domain(self) -> O.SelectPayment:
        return O.SelectPayment(PaymentMethodId(self.payment_id))


class ResetCheckoutIn(BaseModel):
    def to_domain(self) -> O.ResetCheckout:
        return O.ResetCheckout()


class PlaceOrderIn(BaseModel):
    request_token: str | None = None

    def to_domain(self) -> O.PlaceOrder:
        return O.PlaceOrder(self.request_token or None)


class ListOrdersIn(BaseModel):
    def to_domain(self) -> O.ListOrders:
        return O.ListOrders()


# ═══════════════════════════════════════════════════════════════════════════════
# Views
# ═══════════════════════════════════════════════════════════════════════════════


class MoneyView(BaseModel):
    minor: int
    currency: str
    formatted: str

    @classmethod
    def from_domain(cls, dom: Money) -> "MoneyView":
        return cls(minor=dom.minor, currency=dom.currency, formatted=dom.format())


class ProductView(BaseModel):
    id: str
    name: str
    image_ref: str
    price: MoneyView
    description: str
    category: str

    @classmethod
    def from_domain(cls, dom: Product) -> "ProductView":
        return cls(
            id=dom.id.value,
            name=dom.name,
            image_ref=dom.image_ref,
            price=MoneyView.from_domain(dom.price),
            description=dom.description,
            category=dom.category,
        )


class ProductListOut(BaseModel):
    products: list[ProductView]

    @classmethod
    def from_domain(cls, dom: tuple[Product, ...]) -> "ProductListOut":
        return cls(products=[ProductView.from_domain(p) for p in dom])


class CartLineView(BaseModel):
    product: ProductView
    quantity: int
    subtotal: MoneyView

    @classmethod
    def from_domain(cls, dom: CartLine) -> "CartLineView":
        return cls(
            product=ProductView.from_domain(dom.product),
            quantity=dom.quantity,
            subtotal=MoneyView.from_domain(dom.subtotal),
        )


class CartOut(BaseModel):
    lines: list[CartLineView]

    @classmethod
    def from_domain(cls, dom: tuple[CartLine, ...]) -> "CartOut":
        return cls(lines=[CartLineView.from_domain(line) for line in dom])


class CartTotalOut(BaseModel):
    total: MoneyView

    @classmethod
    def from_domain(cls, dom: Money) -> "CartTotalOut":
        return cls(total=MoneyView.from_domain(dom))


class AddedOut(BaseModel):
    added: bool

    @classmethod
    def from_domain(cls, dom: bool) -> "AddedOut":
        return cls(added=dom)


class RemovedOut(BaseModel):
    removed: bool

    @classmethod
    def from_domain(cls, dom: bool) -> "RemovedOut":
        return cls(removed=dom)


class DoneOut(BaseModel):
    ok: bool = True

    @classmethod
    def from_domain(cls, dom: None) -> "DoneOut":
        return cls()


class FavoriteOut(BaseModel):
    is_favorite: bool

    @classmethod
    def from_domain(cls, dom: bool) -> "FavoriteOut":
        return cls(is_favorite=dom)


class AddressView(BaseModel):
    id: int
    street: str
    city: str
    region: str
    postal_code: str
    label: str

    @classmethod
    def from_domain(cls, dom: tuple[AddressId, Address]) -> "AddressView":
        address_id, address = dom
        return cls(
            id=address_id.value,
            street=address.street,
            city=address.city,
            region=address.region,
            postal_code=address.postal_code,
            label=address.label,
        )


class AddressListOut(BaseModel):
    addresses: list[AddressView]

    @classmethod
    def from_domain(
        cls, dom: tuple[tuple[AddressId, Address], ...]
    ) -> "AddressListOut":
        return cls(addresses=[AddressView.from_domain(entry) for entry in dom])


class AddressIdOut(BaseModel):
    address_id: int

    @classmethod
    def from_domain(cls, dom: AddressId) -> "AddressIdOut":
        return cls(address_id=dom.value)


class PaymentMethodView(BaseModel):
    id: int
    kind: str
    last_four: str
    label: str

    @classmethod
    def from_domain(
        cls, dom: tuple[PaymentMethodId, PaymentMethod]
    ) -> "PaymentMethodView":
        payment_id, method = dom
        return cls(
            id=payment_id.value,
            kind=method.kind,
            last_four=method.last_four,
            label=method.label,
        )


class PaymentMethodListOut(BaseModel):
    payment_methods: list[PaymentMethodView]

    @classmethod
    def from_domain(
        cls, dom: tuple[tuple[PaymentMethodId, PaymentMethod], ...]
    ) -> "PaymentMethodListOut":
        return cls(payment_methods=[PaymentMethodView.from_domain(e) for e in dom])


class PaymentMethodIdOut(BaseModel):
    payment_id: int

    @classmethod
    def from_domain(cls, dom: PaymentMethodId) -> "PaymentMethodIdOut":
        return cls(payment_id=dom.value)


class CheckoutStateOut(BaseModel):
    state: str

    @classmethod
    def from_domain(cls, dom: CheckoutState) -> "CheckoutStateOut":
        return cls(state=dom.name)


class OrderView(BaseModel):
    id: str
    lines: list[CartLineView]
    address: str
    payment_method: str
    total: MoneyView
    created_at: datetime

    @classmethod
    def from_domain(cls, dom: Order) -> "OrderView":
        return cls(
            id=dom.id.value,
            lines=[CartLineView.from_domain(line) for line in dom.lines],
            address=dom.address.label,
            payment_method=dom.payment_method.label,
            total=MoneyView.from_domain(dom.total),
            created_at=dom.created_at,
        )


class OrderListOut(BaseModel):
    orders: list[OrderView]

    @classmethod
    def from_domain(cls, dom: tuple[Order, ...]) -> "OrderListOut":
        return cls(orders=[OrderView.from_domain(o) for o in dom])


class ErrorOut(BaseModel):
    kind: str
    message: str

    @classmethod
    def from_domain(cls, dom: StorefrontError) -> "ErrorOut":
        return cls(kind=dom.kind.name, message=dom.message)


__all__ = (
    "ListProductsIn",
    "FeaturedProductsIn",
    "GetProductIn",
    "CartLinesIn",
    "CartTotalIn",
    "AddToCartIn",
    "RemoveFromCartIn",
    "ClearCartIn",
    "ToggleFavoriteIn",
    "IsFavoriteIn",
    "FavoriteProductsIn",
    "ListAddressesIn",
    "AddAddressIn",
    "ListPaymentMethodsIn",
    "AddPaymentMethodIn",
    "GetCheckoutStateIn",
    "SelectAddressIn",
    "SelectPaymentIn",
    "ResetCheckoutIn",
    "PlaceOrderIn",
    "ListOrdersIn",
    "MoneyView",
    "ProductView",
    "ProductListOut",
    "CartLineView",
    "CartOut",
    "CartTotalOut",
    "AddedOut",
    "RemovedOut",
    "DoneOut",
    "FavoriteOut",
    "AddressView",
    "AddressListOut",
    "AddressIdOut",
    "PaymentMethodView",
    "PaymentMethodListOut",
    "PaymentMethodIdOut",
    "CheckoutStateOut",
    "OrderView",
    "OrderListOut",
    "ErrorOut",
)
