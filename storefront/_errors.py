"""
Storefront errors — typed failure values.

Every domain failure is returned as Error(StorefrontError(...)), never raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from storefront._types import AddressId, PaymentMethodId, ProductId


class ErrorKind(Enum):
    """Kinds of storefront errors."""

    INVALID_ADDRESS_REFERENCE = auto()  # Unknown or missing address selection
    INVALID_PAYMENT_REFERENCE = auto()  # Unknown or missing payment selection
    EMPTY_CART = auto()
    DUPLICATE_CART_LINE = auto()  # Only with CART_REJECT_DUPLICATES
    INVALID_INPUT = auto()  # Blank address / card text
    UNKNOWN_PRODUCT = auto()
    UNKNOWN_OPERATION = auto()  # Request type has no registered handler
    REQUEST_CONFLICT = auto()  # Same request token still in flight
    INTERNAL = auto()  # Handler raised


@dataclass(frozen=True, slots=True)
class StorefrontError:
    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return f"{self.kind.name}: {self.message}"


class Errors:
    @staticmethod
    def invalid_address(address_id: AddressId | None) -> StorefrontError:
        if address_id is None:
            return StorefrontError(
                ErrorKind.INVALID_ADDRESS_REFERENCE, "No address selected"
            )
        return StorefrontError(
            ErrorKind.INVALID_ADDRESS_REFERENCE,
            f"Address {address_id.value} does not exist",
        )

    @staticmethod
    def invalid_payment(payment_id: PaymentMethodId | None) -> StorefrontError:
        if payment_id is None:
            return StorefrontError(
                ErrorKind.INVALID_PAYMENT_REFERENCE, "No payment method selected"
            )
        return StorefrontError(
            ErrorKind.INVALID_PAYMENT_REFERENCE,
            f"Payment method {payment_id.value} does not exist",
        )

    @staticmethod
    def empty_cart() -> StorefrontError:
        return StorefrontError(ErrorKind.EMPTY_CART, "Cart is empty")

    @staticmethod
    def duplicate_line(product_id: ProductId) -> StorefrontError:
        return StorefrontError(
            ErrorKind.DUPLICATE_CART_LINE,
            f"Product {product_id.value} is already in the cart",
        )

    @staticmethod
    def invalid_input(msg: str) -> StorefrontError:
        return StorefrontError(ErrorKind.INVALID_INPUT, msg)

    @staticmethod
    def unknown_product(product_id: ProductId) -> StorefrontError:
        return StorefrontError(
            ErrorKind.UNKNOWN_PRODUCT, f"Product {product_id.value} not found"
        )

    @staticmethod
    def unknown_operation(name: str) -> StorefrontError:
        return StorefrontError(
            ErrorKind.UNKNOWN_OPERATION, f"Op not registered: {name}"
        )

    @staticmethod
    def request_conflict(msg: str) -> StorefrontError:
        return StorefrontError(ErrorKind.REQUEST_CONFLICT, msg)

    @staticmethod
    def internal(msg: str) -> StorefrontError:
        return StorefrontError(ErrorKind.INTERNAL, msg)


__all__ = ("ErrorKind", "StorefrontError", "Errors")
