"""
Cart — idempotent item management with exact totals.

    from storefront import cart as CA

    store = CA.CartStore()
    store.add(product)
    store.add(product)   # no-op
    store.total()        # Money in minor units
"""

from storefront.cart._types import CartLine
from storefront.cart._store import CartStore

__all__ = ("CartLine", "CartStore")
