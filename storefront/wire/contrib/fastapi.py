"""
FastAPI integration for storefront.wire.

    from storefront.wire.contrib import fastapi
    app = fastapi.create_app()                  # fresh service from settings
    # or: fastapi.from_application(storefront_application(service))

Failures render as {"kind", "message"} with the status from ERROR_STATUS.
"""

from ._fastapi import (
    ERROR_STATUS,
    add_endpoint_to_app,
    compile_to_fastapi_route,
    create_app,
    error_response,
    from_application,
)

__all__ = (
    "ERROR_STATUS",
    "add_endpoint_to_app",
    "compile_to_fastapi_route",
    "create_app",
    "error_response",
    "from_application",
)
