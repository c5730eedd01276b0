"""
Identity carrier
================

F[A] = A: no effect at all. Useful as the simplest strict carrier and as the
applicative that makes `traverse` collapse to `map` (traverse identity law).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import assert_never

from .._helpers import identity
from .._types import Continue, Done, Step
from ..capabilities import CarrierCapabilities
from ..eval import Eval
from ..typeclass import Applicative, Monad, Traverse


def _tail_rec_m[A, B](a: A, f: Callable[[A], Step[A, B]]) -> B:
    current = a
    while True:
        match f(current):
            case Continue(seed):
                current = seed
            case Done(result):
                return result
            case _ as unreachable:
                assert_never(unreachable)


IDENTITY_MONAD = Monad(
    pure=identity,
    flat_map=lambda fa, f: f(fa),
    tail_rec_m=_tail_rec_m,
)

IDENTITY_APPLICATIVE = Applicative(
    pure=identity,
    map2=lambda fa, fb, f: f(fa, fb),
)

IDENTITY_TRAVERSE = Traverse(
    fold_left=lambda fa, b, f: f(b, fa),
    fold_right=lambda fa, lb, f: Eval.defer(lambda: f(fa, lb)),
    map=lambda fa, f: f(fa),
    # G[Id[B]] is just G[B]
    traverse=lambda fa, f, applicative: f(fa),
)

IDENTITY = CarrierCapabilities(
    name="identity",
    functor=IDENTITY_TRAVERSE,
    applicative=IDENTITY_APPLICATIVE,
    monad=IDENTITY_MONAD,
    traverse=IDENTITY_TRAVERSE,
)


__all__ = (
    "IDENTITY",
    "IDENTITY_APPLICATIVE",
    "IDENTITY_MONAD",
    "IDENTITY_TRAVERSE",
)
