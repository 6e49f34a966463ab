"""
Profile — saved addresses and payment methods.

    from storefront import profile as P

    book = P.AddressBook()
    match book.add(P.Address.from_text("123 Main Street, New York")):
        case Ok(address_id): ...
        case Error(err): ...   # INVALID_INPUT for blank text
"""

from storefront.profile._types import Address, PaymentMethod
from storefront.profile._books import AddressBook, PaymentMethods

__all__ = ("Address", "PaymentMethod", "AddressBook", "PaymentMethods")
