"""
Result carrier and outcome instances
====================================

Two roles:
- `RESULT`: kungfu `Result[_, E0]` used as a carrier (an outer error channel
  around the inner `EitherT` one), and as an Applicative for `traverse`.
- Eq / Order / Show / Semigroup over `Result[T, E]` built from instances over
  T and E. Errors sort before successes.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from typing import assert_never

from kungfu import Error, Ok, Result

from .. import outcome
from .._types import Continue, Done, Step
from ..capabilities import CarrierCapabilities
from ..typeclass import (
    Eq,
    EqLike,
    Monad,
    Order,
    PartialOrder,
    PartialOrderLike,
    Semigroup,
    SemigroupK,
    Show,
    Traverse,
)


def _tail_rec_m[A, B, E](a: A, f: Callable[[A], Result[Step[A, B], E]]) -> Result[B, E]:
    current = a
    while True:
        match f(current):
            case Error(err):
                return Error(err)
            case Ok(Continue(seed)):
                current = seed
            case Ok(Done(result)):
                return Ok(result)
            case _ as unreachable:
                raise TypeError(f"tail_rec_m step must be Result[Step, E], got {unreachable!r}")


RESULT_MONAD = Monad(
    pure=Ok,
    flat_map=outcome.flat_map,
    tail_rec_m=_tail_rec_m,
)

RESULT_TRAVERSE = Traverse(
    fold_left=outcome.fold_left,
    fold_right=outcome.fold_right,
    map=outcome.map,
    traverse=outcome.traverse,
)


def _combine_k(x: Result[typing.Any, typing.Any], y: Result[typing.Any, typing.Any]) -> Result[typing.Any, typing.Any]:
    match x:
        case Ok(_):
            return x
        case Error(_):
            return y
        case _ as unreachable:
            assert_never(unreachable)


# First success wins
RESULT_SEMIGROUP_K = SemigroupK(combine_k=_combine_k)

RESULT = CarrierCapabilities(
    name="result",
    monad=RESULT_MONAD,
    traverse=RESULT_TRAVERSE,
    semigroup_k=RESULT_SEMIGROUP_K,
)


# ============================================================================
# Instances over Result[T, E] built from instances over T and E
# ============================================================================


def result_semigroup(ok: Semigroup) -> Semigroup:
    """First failure wins; successes are appended with `ok`."""
    return Semigroup(combine=lambda x, y: outcome.combine(x, y, ok))


def result_eq(*, ok: EqLike, error: EqLike) -> Eq:
    def eqv(x: Result[typing.Any, typing.Any], y: Result[typing.Any, typing.Any]) -> bool:
        match x, y:
            case Ok(a), Ok(b):
                return ok.eqv(a, b)
            case Error(a), Error(b):
                return error.eqv(a, b)
            case _:
                return False

    return Eq(eqv=eqv)


def result_partial_order(*, ok: PartialOrderLike, error: PartialOrderLike) -> PartialOrder:
    def partial_compare(x: Result[typing.Any, typing.Any], y: Result[typing.Any, typing.Any]) -> float:
        match x, y:
            case Ok(a), Ok(b):
                return ok.partial_compare(a, b)
            case Error(a), Error(b):
                return error.partial_compare(a, b)
            case Error(_), Ok(_):
                return -1.0
            case _:
                return 1.0

    return PartialOrder(partial_compare=partial_compare)


def result_order(*, ok: Order, error: Order) -> Order:
    def compare(x: Result[typing.Any, typing.Any], y: Result[typing.Any, typing.Any]) -> int:
        match x, y:
            case Ok(a), Ok(b):
                return ok.compare(a, b)
            case Error(a), Error(b):
                return error.compare(a, b)
            case Error(_), Ok(_):
                return -1
            case _:
                return 1

    return Order(compare=compare)


def result_show(*, ok: Show, error: Show) -> Show:
    return Show(show=lambda r: outcome.fold(r, lambda e: f"Error({error.show(e)})", lambda v: f"Ok({ok.show(v)})"))


__all__ = (
    "RESULT",
    "RESULT_MONAD",
    "RESULT_TRAVERSE",
    "RESULT_SEMIGROUP_K",
    "result_semigroup",
    "result_eq",
    "result_partial_order",
    "result_order",
    "result_show",
)
