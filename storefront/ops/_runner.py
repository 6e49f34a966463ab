"""
Ops runner — data-driven dispatch of requests to handlers.

Handlers are plain async functions taking the request and the session:

    async def add_to_cart(req: AddToCart, session: Session) -> Result[bool, StorefrontError]:
        return session.add_to_cart(req.product_id)

    runner = ops().on(AddToCart, add_to_cart).compile()
    result = await runner.run(AddToCart(ProductId("sneakers")), session)
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, cast

from combinators import lift as L
from kungfu import Result, Error, LazyCoroResult

from storefront._errors import StorefrontError, Errors
from storefront.ops._types import Op, AnyOp

if TYPE_CHECKING:
    from storefront.session import Session

logger = logging.getLogger(__name__)

type HandlerFunc = Callable[[Any, Session], Awaitable[Result[Any, StorefrontError]]]


@dataclass(slots=True, frozen=True)
class OpsBuilder:
    """Builder for operation handlers."""

    _items: tuple[tuple[type[AnyOp], HandlerFunc], ...] = ()

    def on(self, op_type: type[AnyOp], handler: HandlerFunc) -> OpsBuilder:
        """Register handler for operation type."""
        # Last registration wins
        others = tuple(i for i in self._items if i[0] is not op_type)
        return OpsBuilder(_items=(*others, (op_type, handler)))

    def merge(self, other: OpsBuilder) -> OpsBuilder:
        """Registrations from other override ours."""
        builder = self
        for op_type, handler in other._items:
            builder = builder.on(op_type, handler)
        return builder

    def compile(self) -> Runner:
        return Runner(_registry=MappingProxyType(dict(self._items)))


@dataclass(slots=True, frozen=True)
class Runner:
    """
    Executes operations against a session.

    An unregistered request fails with UNKNOWN_OPERATION. A handler that
    raises fails with INTERNAL; the traceback goes to the log, the message
    to the caller.
    """

    _registry: Mapping[type[AnyOp], HandlerFunc]

    def handles(self, op_type: type[AnyOp]) -> bool:
        return op_type in self._registry

    @property
    def op_types(self) -> tuple[type[AnyOp], ...]:
        return tuple(self._registry)

    async def run[T](
        self, req: Op[T, StorefrontError], session: Session
    ) -> Result[T, StorefrontError]:
        op_type = type(req)
        handler = self._registry.get(op_type)
        if handler is None:
            return Error(Errors.unknown_operation(op_type.__name__))

        def crashed(exc: Exception) -> StorefrontError:
            logger.exception("handler for %s raised", op_type.__name__)
            return Errors.internal(f"{op_type.__name__} failed: {exc}")

        result = await L.catching_async(
            lambda: handler(req, session),
            on_error=crashed,
        ).then(L.from_result)
        return cast(Result[T, StorefrontError], result)

    def __call__[T](
        self, req: Op[T, StorefrontError], session: Session
    ) -> LazyCoroResult[T, StorefrontError]:
        """Execute operation (returns awaitable)."""

        async def inner() -> Result[T, StorefrontError]:
            return await self.run(req, session)

        return LazyCoroResult(inner)


def ops() -> OpsBuilder:
    """Create ops builder: ops().on(...).compile()"""
    return OpsBuilder()


__all__ = ("HandlerFunc", "OpsBuilder", "Runner", "ops")
