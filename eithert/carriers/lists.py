"""
List carrier
============

F[A] = list[A]: nondeterminism / many results. `map2` and `flat_map` are
cartesian (left operand outermost), `traverse` runs effects left to right.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterator, Sequence
from typing import assert_never

from .._helpers import cons, unwind
from .._types import Continue, Done, Step
from ..capabilities import CarrierCapabilities
from ..eval import Eval
from ..typeclass import (
    Apply,
    ApplicativeLike,
    Eq,
    EqLike,
    Monad,
    Monoid,
    Order,
    Show,
    SemigroupK,
    Traverse,
)


def _map(fa: Sequence[typing.Any], f: Callable[[typing.Any], typing.Any]) -> list[typing.Any]:
    return [f(a) for a in fa]


def _map2(
    fa: Sequence[typing.Any],
    fb: Sequence[typing.Any],
    f: Callable[[typing.Any, typing.Any], typing.Any],
) -> list[typing.Any]:
    return [f(a, b) for a in fa for b in fb]


def _flat_map(fa: Sequence[typing.Any], f: Callable[[typing.Any], Sequence[typing.Any]]) -> list[typing.Any]:
    return [b for a in fa for b in f(a)]


def _tail_rec_m[A, B](a: A, f: Callable[[A], Sequence[Step[A, B]]]) -> list[B]:
    """Depth-first expansion with an explicit stack of iterators (same order as flat_map)."""
    out: list[B] = []
    stack: list[Iterator[Step[A, B]]] = [iter(f(a))]
    while stack:
        step = next(stack[-1], None)
        if step is None:
            stack.pop()
            continue
        match step:
            case Continue(seed):
                stack.append(iter(f(seed)))
            case Done(result):
                out.append(result)
            case _ as unreachable:
                assert_never(unreachable)
    return out


def _traverse(fa: Sequence[typing.Any], f: Callable[[typing.Any], typing.Any], applicative: ApplicativeLike) -> typing.Any:
    # Accumulate a shared cons chain; the list is rebuilt once at the end.
    acc = applicative.pure(None)
    for a in fa:
        acc = applicative.map2(acc, f(a), cons)
    return applicative.map(acc, unwind)


def _fold_left(fa: Sequence[typing.Any], initial: typing.Any, f: Callable[[typing.Any, typing.Any], typing.Any]) -> typing.Any:
    acc = initial
    for a in fa:
        acc = f(acc, a)
    return acc


def _fold_right(
    fa: Sequence[typing.Any],
    lb: Eval[typing.Any],
    f: Callable[[typing.Any, Eval[typing.Any]], Eval[typing.Any]],
) -> Eval[typing.Any]:
    # Each tail is suspended, so `f` decides whether the rest is ever visited.
    def loop(i: int) -> Eval[typing.Any]:
        if i >= len(fa):
            return lb
        return f(fa[i], Eval.defer(lambda: loop(i + 1)))

    return Eval.defer(lambda: loop(0))


LIST_APPLY = Apply(map=_map, map2=_map2)

LIST_MONAD = Monad(
    pure=lambda a: [a],
    flat_map=_flat_map,
    tail_rec_m=_tail_rec_m,
)

LIST_TRAVERSE = Traverse(
    fold_left=_fold_left,
    fold_right=_fold_right,
    map=_map,
    traverse=_traverse,
)

LIST_SEMIGROUP_K = SemigroupK(combine_k=lambda x, y: [*x, *y])

LIST_MONOID = Monoid(combine=lambda x, y: [*x, *y], empty=list)

LIST = CarrierCapabilities(
    name="list",
    apply=LIST_APPLY,
    monad=LIST_MONAD,
    traverse=LIST_TRAVERSE,
    semigroup_k=LIST_SEMIGROUP_K,
)


# ============================================================================
# Instances over list[A] built from instances over A
# ============================================================================


def list_eq(inner: EqLike) -> Eq:
    def eqv(xs: Sequence[typing.Any], ys: Sequence[typing.Any]) -> bool:
        return len(xs) == len(ys) and all(inner.eqv(x, y) for x, y in zip(xs, ys))

    return Eq(eqv=eqv)


def list_order(inner: Order) -> Order:
    """Lexicographic; a proper prefix sorts first."""

    def compare(xs: Sequence[typing.Any], ys: Sequence[typing.Any]) -> int:
        for x, y in zip(xs, ys):
            c = inner.compare(x, y)
            if c != 0:
                return c
        return (len(xs) > len(ys)) - (len(xs) < len(ys))

    return Order(compare=compare)


def list_show(inner: Show) -> Show:
    return Show(show=lambda xs: "[" + ", ".join(inner.show(x) for x in xs) + "]")


__all__ = (
    "LIST",
    "LIST_APPLY",
    "LIST_MONAD",
    "LIST_TRAVERSE",
    "LIST_SEMIGROUP_K",
    "LIST_MONOID",
    "list_eq",
    "list_order",
    "list_show",
)
