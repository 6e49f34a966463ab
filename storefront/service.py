"""
Storefront service — many sessions, one lock each.

Every op for a user runs under that user's asyncio.Lock, so a session is
never mutated by two requests at once. Sessions share nothing but the
catalog.

    service = StorefrontService()
    await service.execute("u1", O.AddToCart(ProductId("sneakers")))
    await service.execute("u1", O.PlaceOrder(request_token="checkout-1"))
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from kungfu import Result, Ok, Error

from storefront import idempotency as I
from storefront import ops as O
from storefront._errors import StorefrontError, Errors
from storefront.catalog import Catalog, DEFAULT_CATALOG
from storefront.checkout import Order
from storefront.config import Settings, settings as default_settings
from storefront.session import Session

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _Slot:
    session: Session
    last_used: float
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)


@dataclass(frozen=True, slots=True)
class _PlaceOrderCall:
    user_id: str
    token: str
    req: O.PlaceOrder
    session: Session


class StorefrontService:
    __slots__ = (
        "_catalog",
        "_settings",
        "_runner",
        "_slots",
        "_place_order",
        "_clock",
        "_idle_ttl",
    )

    def __init__(
        self,
        *,
        catalog: Catalog = DEFAULT_CATALOG,
        settings: Settings = default_settings,
        runner: O.Runner | None = None,
        store: I.StoreAny | None = None,
        policy: I.Policy | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._catalog = catalog
        self._settings = settings
        self._clock = clock
        self._idle_ttl = float(settings.SESSION_IDLE_SECONDS)
        self._runner = runner if runner is not None else O.default_runner()
        self._slots: dict[str, _Slot] = {}
        self._place_order: I.IdempotentExecutor[
            _PlaceOrderCall, Order, StorefrontError
        ] = (
            I.idempotent(self._run_place_order)
            .key(lambda call: f"place_order:{call.user_id}:{call.token}")
            .store(store if store is not None else I.MemoryStore())
            .policy(policy if policy is not None else I.Policy.from_settings(settings))
            .build()
        )

    @property
    def runner(self) -> O.Runner:
        return self._runner

    # ═══════════════════════════════════════════════════════════════════════════
    # Sessions
    # ═══════════════════════════════════════════════════════════════════════════

    def open_session(self, user_id: str) -> Session:
        """
        Existing session for user_id, or a fresh one.

        Marks the session as used and drops every other session idle for
        longer than SESSION_IDLE_SECONDS.
        """
        now = self._clock()
        self._evict_idle(now)
        slot = self._slots.get(user_id)
        if slot is None:
            slot = _Slot(Session(user_id, self._catalog, settings=self._settings), now)
            self._slots[user_id] = slot
            logger.info("session opened for %s", user_id)
        slot.last_used = now
        return slot.session

    def session(self, user_id: str) -> Session | None:
        slot = self._slots.get(user_id)
        return slot.session if slot is not None else None

    def close_session(self, user_id: str) -> bool:
        closed = self._slots.pop(user_id, None) is not None
        if closed:
            logger.info("session closed for %s", user_id)
        return closed

    def _evict_idle(self, now: float) -> None:
        if self._idle_ttl <= 0:
            return
        idle = [
            user_id
            for user_id, slot in self._slots.items()
            if not slot.lock.locked() and now - slot.last_used >= self._idle_ttl
        ]
        for user_id in idle:
            del self._slots[user_id]
        if idle:
            logger.info("evicted %d idle sessions", len(idle))

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._slots

    # ═══════════════════════════════════════════════════════════════════════════
    # Execution
    # ═══════════════════════════════════════════════════════════════════════════

    async def execute[T](
        self, user_id: str, req: O.Op[T, StorefrontError]
    ) -> Result[T, StorefrontError]:
        """Run req against the user's session, opening it if needed."""
        self.open_session(user_id)
        slot = self._slots[user_id]
        async with slot.lock:
            match req:
                case O.PlaceOrder(request_token=str() as token):
                    result: Result[Any, StorefrontError] = (
                        await self._idempotent_place_order(
                            user_id, token, req, slot.session
                        )
                    )
                case _:
                    result = await self._runner.run(req, slot.session)
        return result

    async def _run_place_order(
        self, call: _PlaceOrderCall
    ) -> Result[Order, StorefrontError]:
        return await self._runner.run(call.req, call.session)

    async def _idempotent_place_order(
        self, user_id: str, token: str, req: O.PlaceOrder, session: Session
    ) -> Result[Order, StorefrontError]:
        call = _PlaceOrderCall(user_id, token, req, session)
        match await self._place_order.run(call):
            case Ok(I.IdempotencyResult(value=order, from_cache=replayed)):
                if replayed:
                    logger.info(
                        "place_order replayed %s for %s (token %s)",
                        order.id.value,
                        user_id,
                        token,
                    )
                return Ok(order)
            case Error(
                I.IdempotencyError(
                    kind=I.IdempotencyErrorKind.EXECUTION,
                    original_error=StorefrontError() as err,
                )
            ):
                return Error(err)
            case Error(
                I.IdempotencyError(
                    kind=I.IdempotencyErrorKind.CONFLICT | I.IdempotencyErrorKind.TIMEOUT,
                    message=message,
                )
            ):
                return Error(Errors.request_conflict(message))
            case Error(e):
                logger.error(
                    "place_order idempotency failure for %s: %s", user_id, e.message
                )
                return Error(Errors.internal(e.message))


__all__ = ("StorefrontService",)
