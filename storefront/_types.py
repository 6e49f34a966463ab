"""
Core types for storefront.

Re-exports from kungfu + identity and money value objects.
"""

from __future__ import annotations

from dataclasses import dataclass

# Re-export from kungfu
from kungfu import Result, Ok, Error, LazyCoroResult

# ═══════════════════════════════════════════════════════════════════════════════
# Identity
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class ProductId:
    value: str


@dataclass(frozen=True, slots=True)
class AddressId:
    """Position of an address inside its AddressBook."""

    value: int


@dataclass(frozen=True, slots=True)
class PaymentMethodId:
    """Position of a payment method inside its PaymentMethods."""

    value: int


@dataclass(frozen=True, slots=True)
class OrderId:
    value: str


# ═══════════════════════════════════════════════════════════════════════════════
# Money — Fixed-Point Amount
# ═══════════════════════════════════════════════════════════════════════════════

_SYMBOLS = {"USD": "$", "EUR": "€", "GBP": "£"}


@dataclass(frozen=True, slots=True)
class Money:
    """
    Amount in integer minor units (cents).

    Arithmetic never leaves integers, so totals carry no rounding drift.
    Formatting is a presentation concern: call format() only at output time.
    """

    minor: int
    currency: str = "USD"

    @classmethod
    def zero(cls, currency: str = "USD") -> Money:
        return cls(0, currency)

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        if other.currency != self.currency:
            raise ValueError(
                f"Cannot add {other.currency} to {self.currency}"
            )
        return Money(self.minor + other.minor, self.currency)

    def times(self, quantity: int) -> Money:
        return Money(self.minor * quantity, self.currency)

    def format(self) -> str:
        """Render as e.g. "$104.00"."""
        sign = "-" if self.minor < 0 else ""
        units, cents = divmod(abs(self.minor), 100)
        symbol = _SYMBOLS.get(self.currency)
        if symbol is None:
            return f"{sign}{units}.{cents:02d} {self.currency}"
        return f"{sign}{symbol}{units}.{cents:02d}"

    def __str__(self) -> str:
        return self.format()


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "LazyCoroResult",
    # Identity
    "ProductId",
    "AddressId",
    "PaymentMethodId",
    "OrderId",
    # Money
    "Money",
)
