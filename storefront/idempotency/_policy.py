"""
Idempotency policy — retention and conflict behavior.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import timedelta
from enum import Enum, auto

from storefront.config import Settings


class OnPending(Enum):
    """
    What to do when a request arrives while another with the same key runs.

    WAIT: poll until the first finishes and return its outcome.
    FAIL: return CONFLICT immediately.
    """

    WAIT = auto()
    FAIL = auto()


WAIT = OnPending.WAIT
FAIL = OnPending.FAIL


@dataclass(frozen=True, slots=True)
class Policy:
    """
    Immutable; each with_* returns a new Policy.

    Example:
        policy = Policy().with_ttl(seconds=3600).with_on_pending(FAIL)
    """

    result_ttl: timedelta | None = None
    on_pending: OnPending = OnPending.WAIT
    wait_timeout: timedelta = timedelta(seconds=5)
    poll_interval: timedelta = timedelta(milliseconds=50)
    # Off: a failed attempt leaves no record, so the client may retry
    persist_failed: bool = False

    @classmethod
    def from_settings(cls, cfg: Settings) -> Policy:
        return (
            cls()
            .with_ttl(seconds=cfg.IDEMPOTENCY_TTL_SECONDS)
            .with_on_pending(OnPending[cfg.IDEMPOTENCY_ON_PENDING])
            .with_wait_timeout(seconds=cfg.IDEMPOTENCY_WAIT_TIMEOUT_SECONDS)
        )

    def with_ttl(self, *, seconds: float) -> Policy:
        """Zero keeps completed records forever."""
        return replace(
            self, result_ttl=timedelta(seconds=seconds) if seconds > 0 else None
        )

    def with_on_pending(self, strategy: OnPending) -> Policy:
        return replace(self, on_pending=strategy)

    def with_wait_timeout(self, *, seconds: float) -> Policy:
        return replace(self, wait_timeout=timedelta(seconds=seconds))

    def with_poll_interval(self, *, seconds: float) -> Policy:
        return replace(self, poll_interval=timedelta(seconds=seconds))

    def with_store_failed(self, store: bool = True) -> Policy:
        return replace(self, persist_failed=store)


__all__ = ("OnPending", "WAIT", "FAIL", "Policy")
