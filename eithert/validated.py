"""
Validated - error-accumulating outcome
======================================

Same shape as `Result`, different applicative: combining two `Invalid`
values keeps BOTH errors (via a caller-supplied Semigroup) instead of
stopping at the first one. `EitherT.with_validated` switches to this
representation "momentarily" inside an otherwise fail-fast pipeline.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass
from typing import assert_never

from kungfu import Error, Ok, Result

from .typeclass import Applicative, Semigroup


@dataclass(frozen=True, slots=True)
class Valid[T]:
    value: T


@dataclass(frozen=True, slots=True)
class Invalid[E]:
    error: E


type Validated[T, E] = Valid[T] | Invalid[E]


def valid[T](value: T) -> Validated[T, typing.Never]:
    return Valid(value)


def invalid[E](error: E) -> Validated[typing.Never, E]:
    return Invalid(error)


def invalid_nel[E](error: E) -> Validated[typing.Never, list[E]]:
    """Invalid with a one-element error list, ready for list accumulation."""
    return Invalid([error])


def from_result[T, E](r: Result[T, E]) -> Validated[T, E]:
    match r:
        case Ok(value):
            return Valid(value)
        case Error(err):
            return Invalid(err)
        case _ as unreachable:
            assert_never(unreachable)


def to_result[T, E](v: Validated[T, E]) -> Result[T, E]:
    match v:
        case Valid(value):
            return Ok(value)
        case Invalid(err):
            return Error(err)
        case _ as unreachable:
            assert_never(unreachable)


def map[T, E, U](v: Validated[T, E], f: Callable[[T], U]) -> Validated[U, E]:
    match v:
        case Valid(value):
            return Valid(f(value))
        case Invalid(_):
            return v
        case _ as unreachable:
            assert_never(unreachable)


def left_map[T, E, F](v: Validated[T, E], f: Callable[[E], F]) -> Validated[T, F]:
    match v:
        case Valid(_):
            return v
        case Invalid(err):
            return Invalid(f(err))
        case _ as unreachable:
            assert_never(unreachable)


def map2[A, B, C, E](
    va: Validated[A, E],
    vb: Validated[B, E],
    f: Callable[[A, B], C],
    *,
    semigroup: Semigroup,
) -> Validated[C, E]:
    """Combine two validations, accumulating errors left to right."""
    match va, vb:
        case Valid(a), Valid(b):
            return Valid(f(a, b))
        case Invalid(e1), Invalid(e2):
            return Invalid(semigroup.combine(e1, e2))
        case Invalid(_), Valid(_):
            return va
        case Valid(_), Invalid(_):
            return vb
        case _:
            raise TypeError(f"Not a Validated pair: {va!r}, {vb!r}")


def map_n[C, E](
    f: Callable[..., C],
    *validations: Validated[typing.Any, E],
    semigroup: Semigroup,
) -> Validated[C, E]:
    """N-ary `map2`: every error is collected, values are passed to `f` in order."""
    acc: Validated[tuple[typing.Any, ...], E] = Valid(())
    for v in validations:
        acc = map2(acc, v, lambda values, value: (*values, value), semigroup=semigroup)
    return map(acc, lambda values: f(*values))


def validated_applicative(semigroup: Semigroup) -> Applicative:
    """Accumulating applicative for `Validated[_, E]` given a Semigroup on E."""
    return Applicative(
        pure=Valid,
        map2=lambda va, vb, f: map2(va, vb, f, semigroup=semigroup),
    )


__all__ = (
    "Valid",
    "Invalid",
    "Validated",
    "valid",
    "invalid",
    "invalid_nel",
    "from_result",
    "to_result",
    "map",
    "left_map",
    "map2",
    "map_n",
    "validated_applicative",
)
