"""
Idempotency — at-most-once execution per key.

    from storefront import idempotency as I

    executor = (
        I.idempotent(place)
        .key(lambda req: f"place_order:{req.user_id}:{req.token}")
        .store(I.MemoryStore())
        .policy(I.Policy().with_ttl(seconds=3600).with_on_pending(I.FAIL))
        .build()
    )

    match await executor.run(req):
        case Ok(I.IdempotencyResult(value=order, from_cache=replayed)): ...
        case Error(I.IdempotencyError(kind=I.IdempotencyErrorKind.CONFLICT)): ...

Failed operations leave no record by default, so a retry executes again.
"""

from storefront.idempotency._types import (
    RecordState,
    IdempotencyRecord,
    IdempotencyResult,
    IdempotencyErrorKind,
    IdempotencyError,
)
from storefront.idempotency._policy import OnPending, WAIT, FAIL, Policy
from storefront.idempotency._store import StoreError, Store, StoreAny, MemoryStore
from storefront.idempotency._run import IdempotentCall, run_idempotent
from storefront.idempotency._builder import (
    KeyFn,
    Idempotent,
    IdempotentExecutor,
    idempotent,
)

__all__ = (
    "RecordState",
    "IdempotencyRecord",
    "IdempotencyResult",
    "IdempotencyErrorKind",
    "IdempotencyError",
    "OnPending",
    "WAIT",
    "FAIL",
    "Policy",
    "StoreError",
    "Store",
    "StoreAny",
    "MemoryStore",
    "IdempotentCall",
    "run_idempotent",
    "KeyFn",
    "Idempotent",
    "IdempotentExecutor",
    "idempotent",
)
