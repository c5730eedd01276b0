"""
Outcome operations
==================

Plain functions over kungfu `Result[T, E]` (`Ok(value)` | `Error(error)`).
`EitherT` runs these inside the carrier; they never touch a carrier
themselves, except `traverse` / `bitraverse`, which work in the target
applicative.

Every function matches both variants explicitly.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from typing import assert_never

from kungfu import Error, Ok, Result

from ._types import Predicate, Thunk
from .eval import Eval
from .partial import PartialFn

if typing.TYPE_CHECKING:
    from .typeclass import ApplicativeLike, Semigroup


def fold[T, E, C](r: Result[T, E], on_error: Callable[[E], C], on_ok: Callable[[T], C]) -> C:
    match r:
        case Ok(value):
            return on_ok(value)
        case Error(err):
            return on_error(err)
        case _ as unreachable:
            assert_never(unreachable)


def is_ok(r: Result[typing.Any, typing.Any]) -> bool:
    match r:
        case Ok(_):
            return True
        case Error(_):
            return False
        case _ as unreachable:
            assert_never(unreachable)


def is_error(r: Result[typing.Any, typing.Any]) -> bool:
    return not is_ok(r)


def swap[T, E](r: Result[T, E]) -> Result[E, T]:
    match r:
        case Ok(value):
            return Error(value)
        case Error(err):
            return Ok(err)
        case _ as unreachable:
            assert_never(unreachable)


def get_or_else[T, E](r: Result[T, E], default: Thunk[T]) -> T:
    """Success value, or `default()` on failure. `default` is called only then."""
    match r:
        case Ok(value):
            return value
        case Error(_):
            return default()
        case _ as unreachable:
            assert_never(unreachable)


def recover[T, E](r: Result[T, E], pf: PartialFn[E, T]) -> Result[T, E]:
    """Turn failures matched by `pf` into successes. Others pass through."""
    match r:
        case Error(err) if pf.is_defined_at(err):
            return Ok(pf.apply(err))
        case Ok(_) | Error(_):
            return r
        case _ as unreachable:
            assert_never(unreachable)


def bimap[T, E, U, F](
    r: Result[T, E],
    on_error: Callable[[E], F],
    on_ok: Callable[[T], U],
) -> Result[U, F]:
    match r:
        case Ok(value):
            return Ok(on_ok(value))
        case Error(err):
            return Error(on_error(err))
        case _ as unreachable:
            assert_never(unreachable)


def map[T, E, U](r: Result[T, E], f: Callable[[T], U]) -> Result[U, E]:
    match r:
        case Ok(value):
            return Ok(f(value))
        case Error(err):
            return Error(err)
        case _ as unreachable:
            assert_never(unreachable)


def left_map[T, E, F](r: Result[T, E], f: Callable[[E], F]) -> Result[T, F]:
    match r:
        case Ok(value):
            return Ok(value)
        case Error(err):
            return Error(f(err))
        case _ as unreachable:
            assert_never(unreachable)


def flat_map[T, E, U](r: Result[T, E], f: Callable[[T], Result[U, E]]) -> Result[U, E]:
    match r:
        case Ok(value):
            return f(value)
        case Error(err):
            return Error(err)
        case _ as unreachable:
            assert_never(unreachable)


def ensure[T, E](r: Result[T, E], predicate: Predicate[T], error: Thunk[E]) -> Result[T, E]:
    """Turn Ok into Error if the value FAILS the predicate."""
    match r:
        case Ok(value):
            if predicate(value):
                return r
            return Error(error())
        case Error(_):
            return r
        case _ as unreachable:
            assert_never(unreachable)


def forall[T](r: Result[T, typing.Any], predicate: Predicate[T]) -> bool:
    """True for any failure (vacuous truth)."""
    match r:
        case Ok(value):
            return predicate(value)
        case Error(_):
            return True
        case _ as unreachable:
            assert_never(unreachable)


def exists[T](r: Result[T, typing.Any], predicate: Predicate[T]) -> bool:
    """False for any failure."""
    match r:
        case Ok(value):
            return predicate(value)
        case Error(_):
            return False
        case _ as unreachable:
            assert_never(unreachable)


def to_optional[T](r: Result[T, typing.Any]) -> T | None:
    match r:
        case Ok(value):
            return value
        case Error(_):
            return None
        case _ as unreachable:
            assert_never(unreachable)


def from_optional[T, E](value: T | None, if_none: Thunk[E]) -> Result[T, E]:
    """None becomes Error(if_none())."""
    if value is None:
        return Error(if_none())
    return Ok(value)


def merge[T](r: Result[T, T]) -> T:
    match r:
        case Ok(value):
            return value
        case Error(err):
            return err
        case _ as unreachable:
            assert_never(unreachable)


def combine[T, E](x: Result[T, E], y: Result[T, E], semigroup: Semigroup) -> Result[T, E]:
    """
    First failure wins; two successes are appended with `semigroup`.

    Error(a) + _      -> Error(a)
    Ok(a) + Error(b)  -> Error(b)
    Ok(a) + Ok(b)     -> Ok(a <> b)
    """
    match x:
        case Error(_):
            return x
        case Ok(a):
            match y:
                case Error(_):
                    return y
                case Ok(b):
                    return Ok(semigroup.combine(a, b))
                case _ as unreachable:
                    assert_never(unreachable)
        case _ as unreachable:
            assert_never(unreachable)


def ap[T, E, U](rf: Result[Callable[[T], U], E], r: Result[T, E]) -> Result[U, E]:
    """Fail-fast application: the function's failure is reported first."""
    match rf:
        case Error(err):
            return Error(err)
        case Ok(f):
            return map(r, f)
        case _ as unreachable:
            assert_never(unreachable)


# ============================================================================
# Traversal / folding
# ============================================================================


def traverse(r: Result[typing.Any, typing.Any], f: Callable[[typing.Any], typing.Any], applicative: ApplicativeLike) -> typing.Any:
    """
    G[Result[U, E]]: run `f` on the success value inside G.
    A failure is already complete and is lifted with `pure`.
    """
    match r:
        case Ok(value):
            return applicative.map(f(value), Ok)
        case Error(err):
            return applicative.pure(Error(err))
        case _ as unreachable:
            assert_never(unreachable)


def bitraverse(
    r: Result[typing.Any, typing.Any],
    on_error: Callable[[typing.Any], typing.Any],
    on_ok: Callable[[typing.Any], typing.Any],
    applicative: ApplicativeLike,
) -> typing.Any:
    match r:
        case Ok(value):
            return applicative.map(on_ok(value), Ok)
        case Error(err):
            return applicative.map(on_error(err), Error)
        case _ as unreachable:
            assert_never(unreachable)


def fold_left[T, C](r: Result[T, typing.Any], initial: C, f: Callable[[C, T], C]) -> C:
    """A failure contributes nothing."""
    match r:
        case Ok(value):
            return f(initial, value)
        case Error(_):
            return initial
        case _ as unreachable:
            assert_never(unreachable)


def fold_right[T, C](
    r: Result[T, typing.Any],
    lb: Eval[C],
    f: Callable[[T, Eval[C]], Eval[C]],
) -> Eval[C]:
    match r:
        case Ok(value):
            return f(value, lb)
        case Error(_):
            return lb
        case _ as unreachable:
            assert_never(unreachable)


def bifold_left[T, E, C](
    r: Result[T, E],
    initial: C,
    on_error: Callable[[C, E], C],
    on_ok: Callable[[C, T], C],
) -> C:
    match r:
        case Ok(value):
            return on_ok(initial, value)
        case Error(err):
            return on_error(initial, err)
        case _ as unreachable:
            assert_never(unreachable)


def bifold_right[T, E, C](
    r: Result[T, E],
    lb: Eval[C],
    on_error: Callable[[E, Eval[C]], Eval[C]],
    on_ok: Callable[[T, Eval[C]], Eval[C]],
) -> Eval[C]:
    match r:
        case Ok(value):
            return on_ok(value, lb)
        case Error(err):
            return on_error(err, lb)
        case _ as unreachable:
            assert_never(unreachable)


__all__ = (
    "fold",
    "is_ok",
    "is_error",
    "swap",
    "get_or_else",
    "recover",
    "bimap",
    "map",
    "left_map",
    "flat_map",
    "ensure",
    "forall",
    "exists",
    "to_optional",
    "from_optional",
    "merge",
    "combine",
    "ap",
    "traverse",
    "bitraverse",
    "fold_left",
    "fold_right",
    "bifold_left",
    "bifold_right",
)
