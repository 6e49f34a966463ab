"""
Event bus — observer registration with unsubscribe handles.
"""

from __future__ import annotations

import logging
from typing import Any

from storefront.events._types import Event, Handler, Unsubscribe

logger = logging.getLogger(__name__)


class EventBus:
    """
    Synchronous in-process publisher.

    Handlers registered for a type also receive its subclasses, so
    subscribing to Event receives everything. Handlers run in registration
    order. A failing handler is logged and does not stop the others: the
    mutation that produced the event has already happened.
    """

    __slots__ = ("_subscribers", "_next_token")

    def __init__(self) -> None:
        self._subscribers: dict[int, tuple[type[Event], Handler[Any]]] = {}
        self._next_token = 0

    def __len__(self) -> int:
        return len(self._subscribers)

    def subscribe[E: Event](
        self, event_type: type[E], handler: Handler[E]
    ) -> Unsubscribe:
        token = self._next_token
        self._next_token += 1
        self._subscribers[token] = (event_type, handler)

        def unsubscribe() -> bool:
            return self._subscribers.pop(token, None) is not None

        return unsubscribe

    def publish(self, event: Event) -> int:
        """Deliver to matching handlers. Returns how many were called."""
        delivered = 0
        for event_type, handler in list(self._subscribers.values()):
            if not isinstance(event, event_type):
                continue
            delivered += 1
            try:
                handler(event)
            except Exception:
                logger.exception(
                    "handler %r failed on %s", handler, type(event).__name__
                )
        return delivered


__all__ = ("EventBus",)
