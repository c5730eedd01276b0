"""
Eval carrier
============

F[A] = Eval[A]: lazy and stack-safe. Nothing runs until `.value()`; long
`flat_map` chains and `tail_rec_m` loops are evaluated without recursion.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import assert_never

from .._types import Continue, Done, Step
from ..capabilities import CarrierCapabilities
from ..eval import Eval
from ..typeclass import Eq, EqLike, Foldable, Monad


def _tail_rec_m[A, B](a: A, f: Callable[[A], Eval[Step[A, B]]]) -> Eval[B]:
    def step(s: Step[A, B]) -> Eval[B]:
        match s:
            case Continue(seed):
                return Eval.defer(lambda: f(seed)).flat_map(step)
            case Done(result):
                return Eval.now(result)
            case _ as unreachable:
                assert_never(unreachable)

    return Eval.defer(lambda: f(a)).flat_map(step)


EVAL_MONAD = Monad(
    pure=Eval.now,
    flat_map=lambda fa, f: fa.flat_map(f),
    tail_rec_m=_tail_rec_m,
)

EVAL_FOLDABLE = Foldable(
    fold_left=lambda fa, b, f: f(b, fa.value()),
    fold_right=lambda fa, lb, f: fa.flat_map(lambda a: f(a, lb)),
)

EVAL = CarrierCapabilities(
    name="eval",
    monad=EVAL_MONAD,
    foldable=EVAL_FOLDABLE,
)


def eval_eq(inner: EqLike) -> Eq:
    """Forces both sides."""
    return Eq(eqv=lambda x, y: inner.eqv(x.value(), y.value()))


__all__ = (
    "EVAL",
    "EVAL_MONAD",
    "EVAL_FOLDABLE",
    "eval_eq",
)
