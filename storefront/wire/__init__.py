"""
Wire — expose storefront ops via triggers and codecs.

    from storefront import wire as W
    from storefront.service import StorefrontService

    service = StorefrontService()
    endp = W.endpoint(service).expose(
        W.HTTPRouteTrigger("POST", "/sessions/{user_id}/cart/items"),
        W.RequestResponseCodec(W.models.AddToCartIn, W.models.AddedOut),
    )
    app = W.contrib.fastapi.from_application(W.application().mount(endp))

The full route table is W.routes.ROUTES; W.contrib.fastapi.create_app()
mounts all of it.
"""

from storefront.wire._endpoint import (
    Endpoint,
    endpoint,
)
from storefront.wire._app import Application, application
from storefront.wire._types import (
    Trigger,
    Codec,
    Exposure,
)

# Common codecs and triggers
from storefront.wire.codecs.rrc import RequestResponseCodec
from storefront.wire.triggers.http import (
    HTTPRouteTrigger,
    Method,
    Path,
)

# Subpackages
from storefront.wire import codecs, triggers, models, routes, contrib

__all__ = (
    # Core API
    "Endpoint",
    "endpoint",
    "Application",
    "application",
    "Trigger",
    "Codec",
    "Exposure",
    # Built-ins
    "RequestResponseCodec",
    "HTTPRouteTrigger",
    "Method",
    "Path",
    # Subpackages
    "codecs",
    "triggers",
    "models",
    "routes",
    "contrib",
)
