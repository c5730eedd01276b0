"""LazyCoro carrier

Lazy coroutine as a carrier:
- Lazy (nothing runs until awaited)
- Coro (asynchronous)

`EitherT` over `LazyCoro` is the same shape as kungfu `LazyCoroResult`;
`from_lazy_coro_result` / `to_lazy_coro_result` convert between the two."""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Awaitable, Callable, Coroutine
from typing import assert_never

from kungfu import LazyCoroResult, Result
from kungfu.library.caching import acache

from .._types import Continue, Done, Step
from ..capabilities import CarrierCapabilities
from ..either_t import EitherT
from ..typeclass import Apply, Monad


class LazyCoro[T]:
    """Lazy Coroutine.

    Wraps a zero-argument function returning a coroutine. Every await runs
    the function again unless `cache()` is used.

    Monadic laws:
    - Left identity: pure(a).then(f) ≡ f(a)
    - Right identity: m.then(pure) ≡ m
    - Associativity: m.then(f).then(g) ≡ m.then(x => f(x).then(g))
    """

    __slots__ = ("_value",)

    def __init__(
        self,
        value: Callable[[], Coroutine[typing.Any, typing.Any, T]],
        /,
    ) -> None:
        """Create LazyCoro from a fn returning coroutine."""
        self._value = value

    @staticmethod
    def pure[V](value: V) -> LazyCoro[V]:
        """Lift a value."""

        async def wrapper() -> V:
            return value

        return LazyCoro(wrapper)

    @staticmethod
    def from_awaitable[V](thunk: Callable[[], Awaitable[V]]) -> LazyCoro[V]:
        """Wrap any awaitable factory (e.g. a kungfu LazyCoroResult)."""

        async def wrapper() -> V:
            return await thunk()

        return LazyCoro(wrapper)

    # Functor operations

    def map[U](self, f: Callable[[T], U], /) -> LazyCoro[U]:
        async def wrapper() -> U:
            return f(await self())

        return LazyCoro(wrapper)

    # Monad operations

    def then[U](self, f: Callable[[T], LazyCoro[U]], /) -> LazyCoro[U]:
        """Monadic bind (>>=)."""

        async def wrapper() -> U:
            value = await self()
            return await f(value)()

        return LazyCoro(wrapper)

    # Utility operations

    def cache(self) -> LazyCoro[T]:
        """Cache the result - only compute once."""
        return LazyCoro(acache(self))

    # Protocol methods

    def __call__(self) -> Coroutine[typing.Any, typing.Any, T]:
        """Execute the lazy computation, returning coroutine."""
        return self._value()

    def __await__(self) -> typing.Generator[typing.Any, None, T]:
        """Allow direct await."""
        return self().__await__()


def _tail_rec_m[A, B](a: A, f: Callable[[A], LazyCoro[Step[A, B]]]) -> LazyCoro[B]:
    # Plain async loop: no nested awaits, so any number of rounds is fine.
    async def run() -> B:
        current = a
        while True:
            match await f(current)():
                case Continue(seed):
                    current = seed
                case Done(result):
                    return result
                case _ as unreachable:
                    assert_never(unreachable)

    return LazyCoro(run)


def _map2_sequential[A, B, C](fa: LazyCoro[A], fb: LazyCoro[B], f: Callable[[A, B], C]) -> LazyCoro[C]:
    async def run() -> C:
        a = await fa()
        b = await fb()
        return f(a, b)

    return LazyCoro(run)


def _map2_parallel[A, B, C](fa: LazyCoro[A], fb: LazyCoro[B], f: Callable[[A, B], C]) -> LazyCoro[C]:
    async def run() -> C:
        a, b = await asyncio.gather(fa(), fb())
        return f(a, b)

    return LazyCoro(run)


LAZY_CORO_MONAD = Monad(
    pure=LazyCoro.pure,
    flat_map=lambda fa, f: fa.then(f),
    tail_rec_m=_tail_rec_m,
)

LAZY_CORO_APPLY = Apply(
    map=lambda fa, f: fa.map(f),
    map2=_map2_sequential,
)

# Runs both sides concurrently; effect order is no longer left-to-right.
LAZY_CORO_PARALLEL_APPLY = Apply(
    map=lambda fa, f: fa.map(f),
    map2=_map2_parallel,
)

LAZY_CORO = CarrierCapabilities(
    name="lazy_coro",
    apply=LAZY_CORO_APPLY,
    monad=LAZY_CORO_MONAD,
)


# ============================================================================
# kungfu bridge
# ============================================================================


def from_lazy_coro_result[T, E](lazy: LazyCoroResult[T, E]) -> EitherT[T, E]:
    """Convert kungfu LazyCoroResult to EitherT over LazyCoro. Re-runs `lazy` on every await."""
    return EitherT(LazyCoro.from_awaitable(lambda: lazy))


def to_lazy_coro_result[T, E](w: EitherT[T, E]) -> LazyCoroResult[T, E]:
    """Convert EitherT over LazyCoro back to kungfu LazyCoroResult."""

    async def wrapper() -> Result[T, E]:
        return await w.value

    return LazyCoroResult(wrapper)


__all__ = (
    "LazyCoro",
    "LAZY_CORO",
    "LAZY_CORO_MONAD",
    "LAZY_CORO_APPLY",
    "LAZY_CORO_PARALLEL_APPLY",
    "from_lazy_coro_result",
    "to_lazy_coro_result",
)
