"""
Partial functions
=================

A function defined only on part of its input domain. Used by `recover` and
`recover_with` to pick which failures are handled; everything outside the
domain passes through untouched.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from ._errors import PartialFunctionError
from ._types import Predicate


@dataclass(frozen=True, slots=True)
class PartialFn[A, B]:
    """
    Partial function: `apply` is only meaningful where `defined_at` holds.

    Example:
        not_found = PartialFn.on(NotFoundError, lambda e: default_user)
        not_found.is_defined_at(NotFoundError())  # True
        not_found(TimeoutError(1.0))              # raises PartialFunctionError
    """

    defined_at: Predicate[A]
    apply: Callable[[A], B]

    @classmethod
    def when(cls, predicate: Predicate[A], f: Callable[[A], B]) -> PartialFn[A, B]:
        """Defined where `predicate` holds."""
        return cls(defined_at=predicate, apply=f)

    @classmethod
    def on(
        cls,
        types: type | tuple[type, ...],
        f: Callable[[A], B],
    ) -> PartialFn[A, B]:
        """Defined on instances of `types`."""
        return cls(defined_at=lambda a: isinstance(a, types), apply=f)

    @classmethod
    def of(cls, mapping: Mapping[A, B]) -> PartialFn[A, B]:
        """Defined on the keys of `mapping`."""
        return cls(defined_at=lambda a: a in mapping, apply=lambda a: mapping[a])

    @classmethod
    def total(cls, f: Callable[[A], B]) -> PartialFn[A, B]:
        """Defined everywhere."""
        return cls(defined_at=lambda _: True, apply=f)

    def is_defined_at(self, value: A) -> bool:
        return self.defined_at(value)

    def __call__(self, value: A) -> B:
        if not self.defined_at(value):
            raise PartialFunctionError(value)
        return self.apply(value)

    def lift(self, value: A, default: Callable[[A], B]) -> B:
        """Apply where defined, otherwise fall back to `default(value)`."""
        if self.defined_at(value):
            return self.apply(value)
        return default(value)

    def or_else(self, other: PartialFn[A, B]) -> PartialFn[A, B]:
        """Try `self` first, then `other`."""

        def apply(value: A) -> B:
            if self.defined_at(value):
                return self.apply(value)
            return other(value)

        return PartialFn(
            defined_at=lambda a: self.defined_at(a) or other.defined_at(a),
            apply=apply,
        )

    def and_then[C](self, f: Callable[[B], C]) -> PartialFn[A, C]:
        """Post-compose with a total function; the domain is unchanged."""
        return PartialFn(defined_at=self.defined_at, apply=lambda a: f(self.apply(a)))


def lift_partial[A, B](pf: PartialFn[A, B] | Callable[[A], B]) -> PartialFn[A, B]:
    """Treat a plain callable as a total partial function."""
    if isinstance(pf, PartialFn):
        return typing.cast(PartialFn[A, B], pf)
    return PartialFn.total(pf)


__all__ = ("PartialFn", "lift_partial")
