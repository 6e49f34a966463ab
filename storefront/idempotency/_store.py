"""
Idempotency store — Result-returning storage protocol and memory backend.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any, Protocol

from kungfu import Result, Ok, Error

from storefront.idempotency._types import RecordState, IdempotencyRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StoreError:
    message: str
    cause: Exception | None = None


class Store[T](Protocol):
    """
    Storage backend for idempotency records.

    set_pending must be atomic: exactly one concurrent caller gets Ok(True).
    """

    async def get(
        self, key: str
    ) -> Result[IdempotencyRecord[T, Any] | None, StoreError]:
        """Ok(None) if absent or expired."""
        ...

    async def set_pending(
        self, key: str, ttl: timedelta | None
    ) -> Result[bool, StoreError]:
        """Ok(False) if a live record already exists."""
        ...

    async def set_completed(
        self, key: str, value: T, ttl: timedelta | None
    ) -> Result[None, StoreError]: ...

    async def set_failed(
        self, key: str, error: Any, ttl: timedelta | None
    ) -> Result[None, StoreError]: ...

    async def delete(self, key: str) -> Result[bool, StoreError]:
        """Ok(True) if the record existed."""
        ...


type StoreAny = Store[Any]


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True)
class _StoredRecord:
    state: RecordState
    value: Any
    error: Any
    created_at: datetime
    expires_at: datetime | None


class MemoryStore[T]:
    """
    In-process store.

    Single instance only: records do not survive a restart. Expired records
    are swept whenever a new key is claimed.
    """

    def __init__(self, *, clock: Callable[[], datetime] = _utcnow) -> None:
        self._records: dict[str, _StoredRecord] = {}
        self._lock = asyncio.Lock()
        self._clock = clock

    def __len__(self) -> int:
        return len(self._records)

    def _live(self, key: str) -> _StoredRecord | None:
        record = self._records.get(key)
        if record is None:
            return None
        if record.expires_at is not None and self._clock() >= record.expires_at:
            del self._records[key]
            return None
        return record

    def _sweep(self) -> None:
        now = self._clock()
        expired = [
            key
            for key, record in self._records.items()
            if record.expires_at is not None and now >= record.expires_at
        ]
        for key in expired:
            del self._records[key]
        if expired:
            logger.debug("swept %d expired idempotency records", len(expired))

    def _expiry(self, ttl: timedelta | None) -> datetime | None:
        return self._clock() + ttl if ttl is not None else None

    async def get(
        self, key: str
    ) -> Result[IdempotencyRecord[T, Any] | None, StoreError]:
        async with self._lock:
            record = self._live(key)
            if record is None:
                return Ok(None)
            return Ok(
                IdempotencyRecord(
                    key=key,
                    state=record.state,
                    value=record.value,
                    error=record.error,
                    created_at=record.created_at,
                    expires_at=record.expires_at,
                )
            )

    async def set_pending(
        self, key: str, ttl: timedelta | None
    ) -> Result[bool, StoreError]:
        async with self._lock:
            self._sweep()
            if self._live(key) is not None:
                return Ok(False)
            self._records[key] = _StoredRecord(
                state=RecordState.PENDING,
                value=None,
                error=None,
                created_at=self._clock(),
                expires_at=self._expiry(ttl),
            )
            return Ok(True)

    async def set_completed(
        self, key: str, value: T, ttl: timedelta | None
    ) -> Result[None, StoreError]:
        async with self._lock:
            record = self._records.get(key)
            if record is None:
                return Error(StoreError(f"No pending record for key: {key}"))
            record.state = RecordState.COMPLETED
            record.value = value
            record.expires_at = self._expiry(ttl)
            return Ok(None)

    async def set_failed(
        self, key: str, error: Any, ttl: timedelta | None
    ) -> Result[None, StoreError]:
        async with self._lock:
            record = self._records.get(key)
            if record is None:
                return Error(StoreError(f"No pending record for key: {key}"))
            record.state = RecordState.FAILED
            record.error = error
            record.expires_at = self._expiry(ttl)
            return Ok(None)

    async def delete(self, key: str) -> Result[bool, StoreError]:
        async with self._lock:
            return Ok(self._records.pop(key, None) is not None)


__all__ = ("StoreError", "Store", "StoreAny", "MemoryStore")
