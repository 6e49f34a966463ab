"""
Idempotent execution — look up the key, then replay, wait, fail or execute.

    record absent/expired ──► set_pending ──► operation ──► COMPLETED / delete
    record COMPLETED ───────► replay value (from_cache=True)
    record FAILED ──────────► replay error (only if the policy persists them)
    record PENDING ─────────► WAIT: poll until done or timeout
                              FAIL: CONFLICT
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from kungfu import Result, Ok, Error

from storefront.idempotency._types import (
    RecordState,
    IdempotencyRecord,
    IdempotencyResult,
    IdempotencyError,
    IdempotencyErrorKind,
)
from storefront.idempotency._store import StoreError, StoreAny
from storefront.idempotency._policy import Policy, OnPending

logger = logging.getLogger(__name__)

type Outcome[T, E] = Result[IdempotencyResult[T], IdempotencyError[E]]


@dataclass(frozen=True, slots=True)
class IdempotentCall[K, T, E]:
    key: str
    input_value: K
    operation: Callable[[K], Awaitable[Result[T, E]]]
    store: StoreAny
    policy: Policy


def _store_failure(err: StoreError) -> Error[IdempotencyError[Any]]:
    return Error(
        IdempotencyError(
            kind=IdempotencyErrorKind.STORE_ERROR,
            message=err.message,
            original_error=err.cause,
        )
    )


def _replay[T, E](
    record: IdempotencyRecord[T, E], key: str
) -> Outcome[T, E] | None:
    """Outcome of a finished record, None while it is still pending."""
    match record.state:
        case RecordState.COMPLETED:
            return Ok(IdempotencyResult(value=record.value, from_cache=True, key=key))
        case RecordState.FAILED:
            return Error(
                IdempotencyError(
                    kind=IdempotencyErrorKind.EXECUTION,
                    message="Cached failure",
                    original_error=record.error,
                )
            )
        case RecordState.PENDING:
            return None


async def _wait_for_pending[K, T, E](call: IdempotentCall[K, T, E]) -> Outcome[T, E]:
    loop = asyncio.get_running_loop()
    deadline = loop.time() + call.policy.wait_timeout.total_seconds()
    interval = call.policy.poll_interval.total_seconds()

    while loop.time() < deadline:
        await asyncio.sleep(interval)
        match await call.store.get(call.key):
            case Error(err):
                return _store_failure(err)
            case Ok(None):
                # Owner failed without persisting; take over
                return await _execute(call)
            case Ok(record):
                outcome = _replay(record, call.key)
                if outcome is not None:
                    return outcome

    return Error(
        IdempotencyError(
            kind=IdempotencyErrorKind.TIMEOUT,
            message=f"Timeout waiting for pending operation: {call.key}",
        )
    )


async def _execute[K, T, E](call: IdempotentCall[K, T, E]) -> Outcome[T, E]:
    match await call.store.set_pending(call.key, call.policy.result_ttl):
        case Error(err):
            return _store_failure(err)
        case Ok(False):
            # Lost the race to another caller
            return await _on_pending(call)
        case Ok(True):
            pass

    try:
        result = await call.operation(call.input_value)
    except Exception:
        await call.store.delete(call.key)
        raise

    match result:
        case Ok(value):
            match await call.store.set_completed(call.key, value, call.policy.result_ttl):
                case Error(err):
                    return _store_failure(err)
                case Ok(_):
                    return Ok(IdempotencyResult(value=value, from_cache=False, key=call.key))
        case Error(err):
            if call.policy.persist_failed:
                await call.store.set_failed(call.key, err, call.policy.result_ttl)
            else:
                await call.store.delete(call.key)
            return Error(
                IdempotencyError(
                    kind=IdempotencyErrorKind.EXECUTION,
                    message="Operation returned Error",
                    original_error=err,
                )
            )


async def _on_pending[K, T, E](call: IdempotentCall[K, T, E]) -> Outcome[T, E]:
    match call.policy.on_pending:
        case OnPending.FAIL:
            logger.info("idempotency conflict on %s", call.key)
            return Error(
                IdempotencyError(
                    kind=IdempotencyErrorKind.CONFLICT,
                    message=f"Pending conflict: {call.key}",
                )
            )
        case OnPending.WAIT:
            return await _wait_for_pending(call)


async def run_idempotent[K, T, E](call: IdempotentCall[K, T, E]) -> Outcome[T, E]:
    """
    Run call.operation at most once per live key.

    An exception from the operation removes the pending record and
    propagates.
    """
    match await call.store.get(call.key):
        case Error(err):
            return _store_failure(err)
        case Ok(None):
            return await _execute(call)
        case Ok(record):
            outcome = _replay(record, call.key)
            if outcome is not None:
                logger.debug("idempotency replay for %s", call.key)
                return outcome
            return await _on_pending(call)


__all__ = ("IdempotentCall", "run_idempotent")
