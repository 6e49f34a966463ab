"""
Idempotency types — records and outcomes.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum, auto


# ═══════════════════════════════════════════════════════════════════════════════
# Record State — Operation Lifecycle
# ═══════════════════════════════════════════════════════════════════════════════


class RecordState(Enum):
    """
    State of an idempotency record.

    Lifecycle:
        PENDING → COMPLETED (success)
                → FAILED (error, only when the policy persists failures)
                → (expired/deleted)
    """

    PENDING = auto()
    COMPLETED = auto()
    FAILED = auto()


@dataclass(frozen=True, slots=True)
class IdempotencyRecord[T, E]:
    """
    Snapshot of a stored record.

    value is set only when COMPLETED, error only when FAILED.
    """

    key: str
    state: RecordState
    value: T | None
    error: E | None
    created_at: datetime
    expires_at: datetime | None

    def is_expired(self, now: datetime | None = None) -> bool:
        if self.expires_at is None:
            return False
        return (now or datetime.now(UTC)) >= self.expires_at


# ═══════════════════════════════════════════════════════════════════════════════
# Outcomes
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class IdempotencyResult[T]:
    """Successful outcome; from_cache marks a replay."""

    value: T
    from_cache: bool
    key: str


class IdempotencyErrorKind(Enum):
    CONFLICT = auto()  # Same key still pending, policy FAIL
    TIMEOUT = auto()  # Waited for pending longer than the policy allows
    STORE_ERROR = auto()
    EXECUTION = auto()  # Wrapped operation returned Error


@dataclass(frozen=True, slots=True)
class IdempotencyError[E]:
    """
    original_error carries the wrapped operation's error for EXECUTION.
    """

    kind: IdempotencyErrorKind
    message: str
    original_error: E | None = None


__all__ = (
    "RecordState",
    "IdempotencyRecord",
    "IdempotencyResult",
    "IdempotencyErrorKind",
    "IdempotencyError",
)
