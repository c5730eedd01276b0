"""
Eval - lazy, stack-safe values
==============================

Eval[A] is a value that may not be computed yet:

- Eval.now(a)       - already computed
- Eval.later(thunk) - computed once on first use, then cached
- Eval.always(thunk)- recomputed on every use
- Eval.defer(thunk) - thunk producing another Eval (suspension point)

`map` / `flat_map` only build a description. `value()` runs it with an
explicit continuation stack, so chains of any depth never grow the Python
call stack. This is what keeps `fold_right` lazy and usable over long or
conceptually infinite carriers.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from ._types import Thunk


class Eval[A]:
    """Lazy value with stack-safe `flat_map`."""

    __slots__ = ()

    @staticmethod
    def now[V](value: V) -> Eval[V]:
        return Now(value)

    @staticmethod
    def later[V](thunk: Thunk[V]) -> Eval[V]:
        return Later(thunk)

    @staticmethod
    def always[V](thunk: Thunk[V]) -> Eval[V]:
        return Always(thunk)

    @staticmethod
    def defer[V](thunk: Thunk[Eval[V]]) -> Eval[V]:
        return Defer(thunk)

    def map[B](self, f: Callable[[A], B], /) -> Eval[B]:
        return _FlatMap(self, lambda a: Now(f(a)))

    def flat_map[B](self, f: Callable[[A], Eval[B]], /) -> Eval[B]:
        return _FlatMap(self, f)

    def memoize(self) -> Eval[A]:
        """Cache the result of this computation after the first `value()`."""
        return Later(self.value)

    def value(self) -> A:
        return _evaluate(self)


class Now[A](Eval[A]):
    __slots__ = ("_value",)

    def __init__(self, value: A, /) -> None:
        self._value = value

    def memoize(self) -> Eval[A]:
        return self

    def _leaf(self) -> A:
        return self._value

    def __repr__(self) -> str:
        return f"Now({self._value!r})"


class Later[A](Eval[A]):
    __slots__ = ("_thunk", "_value", "_done")

    def __init__(self, thunk: Thunk[A], /) -> None:
        self._thunk: Thunk[A] | None = thunk
        self._value: A | None = None
        self._done = False

    def memoize(self) -> Eval[A]:
        return self

    def _leaf(self) -> A:
        if not self._done:
            thunk = self._thunk
            assert thunk is not None
            self._value = thunk()
            self._done = True
            # release captured closure
            self._thunk = None
        return typing.cast(A, self._value)

    def __repr__(self) -> str:
        if self._done:
            return f"Later({self._value!r})"
        return "Later(<pending>)"


class Always[A](Eval[A]):
    __slots__ = ("_thunk",)

    def __init__(self, thunk: Thunk[A], /) -> None:
        self._thunk = thunk

    def _leaf(self) -> A:
        return self._thunk()

    def __repr__(self) -> str:
        return "Always(<thunk>)"


class Defer[A](Eval[A]):
    __slots__ = ("_thunk",)

    def __init__(self, thunk: Thunk[Eval[A]], /) -> None:
        self._thunk = thunk

    def __repr__(self) -> str:
        return "Defer(<thunk>)"


class _FlatMap[A, B](Eval[B]):
    __slots__ = ("_source", "_fn")

    def __init__(self, source: Eval[A], fn: Callable[[A], Eval[B]], /) -> None:
        self._source = source
        self._fn = fn

    def __repr__(self) -> str:
        return "Eval.flat_map(<pending>)"


def _evaluate[A](start: Eval[A]) -> A:
    continuations: list[Callable[[typing.Any], Eval[typing.Any]]] = []
    current: Eval[typing.Any] = start

    while True:
        match current:
            case _FlatMap():
                continuations.append(current._fn)
                current = current._source
                continue
            case Defer():
                current = current._thunk()
                continue
            case Now() | Later() | Always():
                value = current._leaf()
            case _:
                raise TypeError(f"Unknown Eval node: {current!r}")

        if not continuations:
            return typing.cast(A, value)
        current = continuations.pop()(value)


__all__ = (
    "Eval",
    "Now",
    "Later",
    "Always",
    "Defer",
)
