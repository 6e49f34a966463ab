"""
Idempotency builder — fluent API over run_idempotent.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, replace

from kungfu import LazyCoroResult, Result, Ok

from storefront.idempotency._types import IdempotencyResult, IdempotencyError
from storefront.idempotency._store import StoreAny, MemoryStore
from storefront.idempotency._policy import Policy
from storefront.idempotency._run import IdempotentCall, run_idempotent

type KeyFn[K] = Callable[[K], str]


@dataclass(slots=True, frozen=True)
class Idempotent[K, T, E]:
    _operation: Callable[[K], Awaitable[Result[T, E]]]
    _key_fn: KeyFn[K] | None = None
    _store: StoreAny | None = None
    _policy: Policy = Policy()

    def key(self, fn: KeyFn[K]) -> Idempotent[K, T, E]:
        return replace(self, _key_fn=fn)

    def store(self, s: StoreAny) -> Idempotent[K, T, E]:
        return replace(self, _store=s)

    def policy(self, p: Policy) -> Idempotent[K, T, E]:
        return replace(self, _policy=p)

    def build(self) -> IdempotentExecutor[K, T, E]:
        if self._key_fn is None:
            raise ValueError("key() is required")
        return IdempotentExecutor(
            operation=self._operation,
            key_fn=self._key_fn,
            store=self._store if self._store is not None else MemoryStore(),
            policy=self._policy,
        )


@dataclass(slots=True, frozen=True)
class IdempotentExecutor[K, T, E]:
    operation: Callable[[K], Awaitable[Result[T, E]]]
    key_fn: KeyFn[K]
    store: StoreAny
    policy: Policy

    def run(
        self, input_val: K
    ) -> LazyCoroResult[IdempotencyResult[T], IdempotencyError[E]]:
        call = IdempotentCall(
            key=self.key_fn(input_val),
            input_value=input_val,
            operation=self.operation,
            store=self.store,
            policy=self.policy,
        )

        async def execute() -> Result[IdempotencyResult[T], IdempotencyError[E]]:
            return await run_idempotent(call)

        return LazyCoroResult(execute)

    async def invalidate(self, input_val: K) -> bool:
        match await self.store.delete(self.key_fn(input_val)):
            case Ok(deleted):
                return deleted
            case _:
                return False


def idempotent[K, T, E](
    operation: Callable[[K], Awaitable[Result[T, E]]],
) -> Idempotent[K, T, E]:
    """
    Wrap an operation so each key runs it at most once.

    Example:
        executor = (
            I.idempotent(place)
            .key(lambda req: f"place_order:{req.user_id}:{req.token}")
            .store(I.MemoryStore())
            .policy(I.Policy().with_ttl(seconds=3600))
            .build()
        )

        result = await executor.run(req)
    """
    return Idempotent(_operation=operation)


__all__ = ("KeyFn", "Idempotent", "IdempotentExecutor", "idempotent")
