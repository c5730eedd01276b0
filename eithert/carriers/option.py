"""
Optional carrier
================

F[A] = Some[A] | None. `None` is absence: it short-circuits `map2` /
`flat_map` and is the identity of the Option monoid. A present value is
always wrapped in `Some`, so `Some(None)` and absence stay distinct.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass
from typing import assert_never

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
    PartialOrder,
    PartialOrderLike,
    Semigroup,
    SemigroupK,
    Show,
    Traverse,
)


@dataclass(frozen=True, slots=True)
class Some[A]:
    """A present optional value."""

    value: A


type Option[A] = Some[A] | None


def _map(fa: Option[typing.Any], f: Callable[[typing.Any], typing.Any]) -> Option[typing.Any]:
    match fa:
        case Some(a):
            return Some(f(a))
        case None:
            return None
        case _ as unreachable:
            assert_never(unreachable)


def _map2(
    fa: Option[typing.Any],
    fb: Option[typing.Any],
    f: Callable[[typing.Any, typing.Any], typing.Any],
) -> Option[typing.Any]:
    match fa, fb:
        case Some(a), Some(b):
            return Some(f(a, b))
        case _:
            return None


def _flat_map(fa: Option[typing.Any], f: Callable[[typing.Any], Option[typing.Any]]) -> Option[typing.Any]:
    match fa:
        case Some(a):
            return f(a)
        case None:
            return None
        case _ as unreachable:
            assert_never(unreachable)


def _tail_rec_m[A, B](a: A, f: Callable[[A], Option[Step[A, B]]]) -> Option[B]:
    current = a
    while True:
        match f(current):
            case None:
                return None
            case Some(Continue(seed)):
                current = seed
            case Some(Done(result)):
                return Some(result)
            case other:
                raise TypeError(f"tail_rec_m step must be Some(Continue | Done) or None, got {other!r}")


def _traverse(fa: Option[typing.Any], f: Callable[[typing.Any], typing.Any], applicative: ApplicativeLike) -> typing.Any:
    match fa:
        case Some(a):
            return applicative.map(f(a), Some)
        case None:
            return applicative.pure(None)
        case _ as unreachable:
            assert_never(unreachable)


def _fold_left(fa: Option[typing.Any], b: typing.Any, f: Callable[[typing.Any, typing.Any], typing.Any]) -> typing.Any:
    match fa:
        case Some(a):
            return f(b, a)
        case _:
            return b


def _fold_right(
    fa: Option[typing.Any],
    lb: Eval[typing.Any],
    f: Callable[[typing.Any, Eval[typing.Any]], Eval[typing.Any]],
) -> Eval[typing.Any]:
    match fa:
        case Some(a):
            return Eval.defer(lambda: f(a, lb))
        case _:
            return lb


OPTION_APPLY = Apply(map=_map, map2=_map2)

OPTION_MONAD = Monad(
    pure=Some,
    flat_map=_flat_map,
    tail_rec_m=_tail_rec_m,
)

OPTION_TRAVERSE = Traverse(
    fold_left=_fold_left,
    fold_right=_fold_right,
    map=_map,
    traverse=_traverse,
)

# First present value wins
OPTION_SEMIGROUP_K = SemigroupK(combine_k=lambda x, y: x if x is not None else y)

OPTION = CarrierCapabilities(
    name="option",
    apply=OPTION_APPLY,
    monad=OPTION_MONAD,
    traverse=OPTION_TRAVERSE,
    semigroup_k=OPTION_SEMIGROUP_K,
)


# ============================================================================
# Instances over Option[A] built from instances over A
# ============================================================================


def option_monoid(inner: Semigroup) -> Monoid:
    """None is the identity; two present values are combined with `inner`."""

    def combine(x: Option[typing.Any], y: Option[typing.Any]) -> Option[typing.Any]:
        match x, y:
            case Some(a), Some(b):
                return Some(inner.combine(a, b))
            case None, _:
                return y
            case _:
                return x

    return Monoid(combine=combine, empty=lambda: None)


def option_eq(inner: EqLike) -> Eq:
    def eqv(x: Option[typing.Any], y: Option[typing.Any]) -> bool:
        match x, y:
            case Some(a), Some(b):
                return inner.eqv(a, b)
            case _:
                return x is None and y is None

    return Eq(eqv=eqv)


def option_partial_order(inner: PartialOrderLike) -> PartialOrder:
    def partial_compare(x: Option[typing.Any], y: Option[typing.Any]) -> float:
        match x, y:
            case Some(a), Some(b):
                return inner.partial_compare(a, b)
            case None, None:
                return 0.0
            case None, _:
                return -1.0
            case _:
                return 1.0

    return PartialOrder(partial_compare=partial_compare)


def option_order(inner: Order) -> Order:
    """Absence sorts before any present value."""

    def compare(x: Option[typing.Any], y: Option[typing.Any]) -> int:
        match x, y:
            case Some(a), Some(b):
                return inner.compare(a, b)
            case None, None:
                return 0
            case None, _:
                return -1
            case _:
                return 1

    return Order(compare=compare)


def option_show(inner: Show) -> Show:
    def show(x: Option[typing.Any]) -> str:
        match x:
            case Some(a):
                return f"Some({inner.show(a)})"
            case _:
                return "None"

    return Show(show=show)


__all__ = (
    "Some",
    "Option",
    "OPTION",
    "OPTION_APPLY",
    "OPTION_MONAD",
    "OPTION_TRAVERSE",
    "OPTION_SEMIGROUP_K",
    "option_monoid",
    "option_eq",
    "option_partial_order",
    "option_order",
    "option_show",
)
