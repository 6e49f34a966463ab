"""
Address book and payment methods — append-only, position-addressed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from kungfu import Result, Ok, Error

from storefront._types import AddressId, PaymentMethodId
from storefront._errors import StorefrontError, Errors
from storefront.profile._types import Address, PaymentMethod

logger = logging.getLogger(__name__)


class AddressBook:
    """
    Saved shipping addresses.

    Ids are positions, stable because entries are never removed.
    """

    __slots__ = ("_entries",)

    def __init__(self, addresses: Iterable[Address] = ()) -> None:
        self._entries: list[Address] = list(addresses)

    @property
    def addresses(self) -> tuple[Address, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, address: Address) -> Result[AddressId, StorefrontError]:
        if address.is_blank:
            return Error(Errors.invalid_input("Address must not be empty"))
        self._entries.append(address)
        address_id = AddressId(len(self._entries) - 1)
        logger.debug("address %d added", address_id.value)
        return Ok(address_id)

    def get(self, address_id: AddressId) -> Address | None:
        if 0 <= address_id.value < len(self._entries):
            return self._entries[address_id.value]
        return None

    def entries(self) -> tuple[tuple[AddressId, Address], ...]:
        return tuple((AddressId(i), a) for i, a in enumerate(self._entries))


class PaymentMethods:
    """Saved payment instruments, same contract as AddressBook."""

    __slots__ = ("_entries",)

    def __init__(self, methods: Iterable[PaymentMethod] = ()) -> None:
        self._entries: list[PaymentMethod] = list(methods)

    @property
    def methods(self) -> tuple[PaymentMethod, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, method: PaymentMethod) -> Result[PaymentMethodId, StorefrontError]:
        if method.is_blank:
            return Error(Errors.invalid_input("Card details must not be empty"))
        self._entries.append(method)
        payment_id = PaymentMethodId(len(self._entries) - 1)
        logger.debug("payment method %d added", payment_id.value)
        return Ok(payment_id)

    def get(self, payment_id: PaymentMethodId) -> PaymentMethod | None:
        if 0 <= payment_id.value < len(self._entries):
            return self._entries[payment_id.value]
        return None

    def entries(self) -> tuple[tuple[PaymentMethodId, PaymentMethod], ...]:
        return tuple((PaymentMethodId(i), m) for i, m in enumerate(self._entries))


__all__ = ("AddressBook", "PaymentMethods")
