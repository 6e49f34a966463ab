import inspect
import logging
from typing import Annotated, Any, TypeGuard

import fastapi
from fastapi.responses import JSONResponse
from kungfu import Result, Ok, Error

from storefront._errors import ErrorKind, StorefrontError
from storefront.config import Settings, settings as default_settings
from storefront.service import StorefrontService
from storefront.wire._app import Application
from storefront.wire._endpoint import Endpoint
from storefront.wire._types import Exposure
from storefront.wire.codecs.rrc import RequestResponseCodec
from storefront.wire.models import ErrorOut
from storefront.wire.routes import storefront_application
from storefront.wire.triggers.http import HTTPRouteTrigger, Path

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.INVALID_INPUT: 422,
    ErrorKind.UNKNOWN_PRODUCT: 404,
    ErrorKind.UNKNOWN_OPERATION: 404,
    ErrorKind.EMPTY_CART: 409,
    ErrorKind.INVALID_ADDRESS_REFERENCE: 409,
    ErrorKind.INVALID_PAYMENT_REFERENCE: 409,
    ErrorKind.DUPLICATE_CART_LINE: 409,
    ErrorKind.REQUEST_CONFLICT: 409,
    ErrorKind.INTERNAL: 500,
}


def is_target(
    tc: Exposure,
) -> TypeGuard[tuple[HTTPRouteTrigger, RequestResponseCodec]]:
    return isinstance(tc[0], HTTPRouteTrigger) and isinstance(
        tc[1], RequestResponseCodec
    )


def error_response(err: StorefrontError) -> JSONResponse:
    return JSONResponse(
        status_code=ERROR_STATUS.get(err.kind, 500),
        content=ErrorOut.from_domain(err).model_dump(),
    )


def _request_annotation(trigger: HTTPRouteTrigger, req_cls: type[Any]) -> Any:
    """
    Body for write methods whose model has required fields outside the path;
    query and path parameters otherwise.
    """
    fields = req_cls.model_fields
    if not fields:
        return Annotated[req_cls, fastapi.Depends(lambda: req_cls())]
    body_fields = [
        name
        for name, info in fields.items()
        if name not in trigger.path_params and info.is_required()
    ]
    if trigger.accepts_body and body_fields:
        return req_cls
    return Annotated[req_cls, fastapi.Depends()]


def make_handler(
    trigger: HTTPRouteTrigger,
    req_cls: type[Any],
    resp_cls: type[Any],
    service: StorefrontService,
) -> Any:
    async def _route_handler(user_id: str, req: Any) -> Any:
        result: Result[Any, StorefrontError] = await service.execute(
            user_id, req.to_domain()
        )
        match result:
            case Ok(value):
                return resp_cls.from_domain(value)
            case Error(err):
                logger.info("%s %s -> %s", trigger.method, trigger.path, err)
                return error_response(err)

    params = [
        inspect.Parameter(
            "user_id", inspect.Parameter.POSITIONAL_OR_KEYWORD, annotation=str
        ),
        inspect.Parameter(
            "req",
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
            annotation=_request_annotation(trigger, req_cls),
        ),
    ]
    _route_handler.__signature__ = inspect.Signature(params)  # type: ignore[attr-defined]
    _route_handler.__name__ = req_cls.__name__.removesuffix("In")
    return _route_handler


def compile_to_fastapi_route(
    endp: Endpoint,
) -> list[tuple[str, Path, Any, type[Any], str | None]]:  # (method, path, route_func, response, summary)
    routes: list[tuple[str, Path, Any, type[Any], str | None]] = []

    for exposure in endp.exposures:
        if not is_target(exposure):
            continue
        trigger, codec = exposure
        handler = make_handler(trigger, codec.request, codec.response, endp.service)
        routes.append(
            (trigger.method.upper(), trigger.path, handler, codec.response, trigger.summary)
        )

    return routes


def add_endpoint_to_app(app: fastapi.FastAPI, endp: Endpoint) -> None:
    error_responses: dict[int | str, dict[str, Any]] = {
        status: {"model": ErrorOut} for status in sorted(set(ERROR_STATUS.values()))
    }
    for method, path, handler, response, summary in compile_to_fastapi_route(endp):
        app.add_api_route(
            path,
            handler,
            methods=[method],
            response_model=response,
            summary=summary,
            responses=error_responses,
        )


def from_application(app: Application) -> fastapi.FastAPI:
    f_app = fastapi.FastAPI(title=app.title)

    for endp in app.endpoints:
        add_endpoint_to_app(f_app, endp)

    return f_app


def create_app(
    service: StorefrontService | None = None,
    settings: Settings = default_settings,
) -> fastapi.FastAPI:
    """FastAPI app over a service; a fresh service from settings by default."""
    if service is None:
        service = StorefrontService(settings=settings)
    f_app = from_application(storefront_application(service, settings.API_TITLE))
    f_app.state.service = service
    return f_app
