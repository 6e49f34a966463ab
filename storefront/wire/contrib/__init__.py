"""
Contrib — framework integrations. Access integrations via submodules.

    from storefront.wire.contrib import fastapi
    app = fastapi.create_app()
"""

from . import fastapi

__all__ = ("fastapi",)
