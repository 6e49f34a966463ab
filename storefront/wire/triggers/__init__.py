"""
Triggers — describe how endpoints are exposed (HTTP routes).

    from storefront.wire.triggers.http import HTTPRouteTrigger

    http = HTTPRouteTrigger("GET", "/sessions/{user_id}/cart")
"""

from storefront.wire.triggers import http


__all__ = ("http",)
