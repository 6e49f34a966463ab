"""
Codecs — convert transport payloads to storefront ops and back.

    from storefront.wire.codecs import RequestResponseCodec

    # class AddToCartIn(BaseModel): implements to_domain() -> O.AddToCart
    # class AddedOut(BaseModel): implements from_domain(bool)
    # codec = RequestResponseCodec(AddToCartIn, AddedOut)
"""

from storefront.wire.codecs.rrc import (
    RequestResponseCodec,
    ToDomain,
    FromDomain,
)

__all__ = (
    "RequestResponseCodec",
    "ToDomain",
    "FromDomain",
)
