"""
Capability records
==================

Each capability is a frozen dataclass of plain functions ("typeclass as a
record"). A carrier declares what it supports by building these records; an
operation declares what it needs by taking one as a keyword argument.

Records are structural: `Monad` exposes `map`, `map2` and `pure`, so it is
accepted anywhere a Functor, Apply or Applicative is expected. `Traverse`
exposes `fold_left` / `fold_right`, so it is accepted as a Foldable.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from kungfu import Error, Ok

from .._types import Continue, Done

if typing.TYPE_CHECKING:
    from ..eval import Eval
    from ..partial import PartialFn


type Fn = Callable[[Any], Any]
type Fn2 = Callable[[Any, Any], Any]


# ============================================================================
# Functor family
# ============================================================================


@dataclass(frozen=True, slots=True)
class Functor:
    """Map over a carrier: `map(fa, f) -> F[B]`."""

    map: Callable[[Any, Fn], Any]


@dataclass(frozen=True, slots=True)
class Apply:
    """Functor plus `map2(fa, fb, f) -> F[C]`."""

    map: Callable[[Any, Fn], Any]
    map2: Callable[[Any, Any, Fn2], Any]

    def ap(self, ff: Any, fa: Any) -> Any:
        """Apply a carrier of functions to a carrier of values."""
        return self.map2(ff, fa, lambda f, a: f(a))

    def product(self, fa: Any, fb: Any) -> Any:
        return self.map2(fa, fb, lambda a, b: (a, b))


@dataclass(frozen=True, slots=True)
class Applicative:
    """`pure` plus `map2`. `map` is derived."""

    pure: Fn
    map2: Callable[[Any, Any, Fn2], Any]

    def map(self, fa: Any, f: Fn) -> Any:
        return self.map2(fa, self.pure(None), lambda a, _: f(a))

    def ap(self, ff: Any, fa: Any) -> Any:
        return self.map2(ff, fa, lambda f, a: f(a))

    def product(self, fa: Any, fb: Any) -> Any:
        return self.map2(fa, fb, lambda a, b: (a, b))


@dataclass(frozen=True, slots=True)
class Monad:
    """
    `pure`, `flat_map` and stack-safe `tail_rec_m`.

    `tail_rec_m(a, f)` repeatedly calls `f(seed) -> F[Step[A, B]]` until it
    yields `Done(b)`. Implementations must loop, never recurse.

    Monadic laws:
    - Left identity: flat_map(pure(a), f) == f(a)
    - Right identity: flat_map(m, pure) == m
    - Associativity: flat_map(flat_map(m, f), g) == flat_map(m, x => flat_map(f(x), g))
    """

    pure: Fn
    flat_map: Callable[[Any, Fn], Any]
    tail_rec_m: Callable[[Any, Fn], Any]

    def map(self, fa: Any, f: Fn) -> Any:
        return self.flat_map(fa, lambda a: self.pure(f(a)))

    def map2(self, fa: Any, fb: Any, f: Fn2) -> Any:
        return self.flat_map(fa, lambda a: self.map(fb, lambda b: f(a, b)))

    def ap(self, ff: Any, fa: Any) -> Any:
        return self.map2(ff, fa, lambda f, a: f(a))

    def product(self, fa: Any, fb: Any) -> Any:
        return self.map2(fa, fb, lambda a, b: (a, b))

    def flatten(self, ffa: Any) -> Any:
        return self.flat_map(ffa, lambda fa: fa)

    def iterate_while(self, fa: Any, predicate: Callable[[Any], bool]) -> Any:
        """Re-run `fa` while its result satisfies `predicate`. Built on `tail_rec_m`."""

        def step(_: Any) -> Any:
            return self.map(fa, lambda a: Continue(None) if predicate(a) else Done(a))

        return self.tail_rec_m(None, step)


@dataclass(frozen=True, slots=True)
class MonadError(Monad):
    """Monad with a failure channel of type E."""

    raise_error: Fn
    handle_error_with: Callable[[Any, Fn], Any]

    def handle_error(self, fa: Any, f: Fn) -> Any:
        return self.handle_error_with(fa, lambda e: self.pure(f(e)))

    def attempt(self, fa: Any) -> Any:
        """Materialize failures: F[A] -> F[Result[A, E]] that never fails."""
        return self.handle_error_with(
            self.map(fa, Ok),
            lambda e: self.pure(Error(e)),
        )

    def recover(self, fa: Any, pf: PartialFn[Any, Any]) -> Any:
        return self.handle_error_with(
            fa,
            lambda e: self.pure(pf.apply(e)) if pf.is_defined_at(e) else self.raise_error(e),
        )

    def recover_with(self, fa: Any, pf: PartialFn[Any, Any]) -> Any:
        return self.handle_error_with(
            fa,
            lambda e: pf.apply(e) if pf.is_defined_at(e) else self.raise_error(e),
        )


type FunctorLike = Functor | Apply | Applicative | Monad | Traverse
type ApplyLike = Apply | Applicative | Monad
type ApplicativeLike = Applicative | Monad


# ============================================================================
# Folding / traversal
# ============================================================================


@dataclass(frozen=True, slots=True)
class Foldable:
    """
    `fold_left(fa, b, f)` is strict.
    `fold_right(fa, lb, f)` is lazy: `f(a, Eval[B]) -> Eval[B]` may skip
    the rest of the structure by not forcing its second argument.
    """

    fold_left: Callable[[Any, Any, Fn2], Any]
    fold_right: Callable[[Any, Eval[Any], Callable[[Any, Eval[Any]], Eval[Any]]], Eval[Any]]

    def to_list(self, fa: Any) -> list[Any]:
        items: list[Any] = []
        self.fold_left(fa, None, lambda _, a: items.append(a))
        return items


@dataclass(frozen=True, slots=True)
class Traverse(Foldable):
    """`traverse(fa, f, applicative) -> G[F[B]]` plus `map`."""

    map: Callable[[Any, Fn], Any]
    traverse: Callable[[Any, Fn, ApplicativeLike], Any]

    def sequence(self, fga: Any, applicative: ApplicativeLike) -> Any:
        return self.traverse(fga, lambda ga: ga, applicative)


type FoldableLike = Foldable | Traverse


# ============================================================================
# Combination
# ============================================================================


@dataclass(frozen=True, slots=True)
class Semigroup:
    """Associative `combine(x, y)`."""

    combine: Fn2

    def combine_all_option(self, items: Iterable[Any]) -> Any | None:
        it = iter(items)
        try:
            acc = next(it)
        except StopIteration:
            return None
        for item in it:
            acc = self.combine(acc, item)
        return acc


@dataclass(frozen=True, slots=True)
class Monoid(Semigroup):
    """Semigroup with identity. `empty` is a factory so mutable identities stay fresh."""

    empty: Callable[[], Any]

    def combine_all(self, items: Iterable[Any]) -> Any:
        acc = self.empty()
        for item in items:
            acc = self.combine(acc, item)
        return acc


@dataclass(frozen=True, slots=True)
class SemigroupK:
    """Combination of two carriers independent of what they hold."""

    combine_k: Fn2


# ============================================================================
# Two-parameter capabilities
# ============================================================================


@dataclass(frozen=True, slots=True)
class Bifunctor:
    """`bimap(fab, on_left, on_right)`."""

    bimap: Callable[[Any, Fn, Fn], Any]

    def left_map(self, fab: Any, f: Fn) -> Any:
        return self.bimap(fab, f, lambda b: b)

    def right_map(self, fab: Any, f: Fn) -> Any:
        return self.bimap(fab, lambda a: a, f)


@dataclass(frozen=True, slots=True)
class Bifoldable:
    bifold_left: Callable[[Any, Any, Fn2, Fn2], Any]
    bifold_right: Callable[[Any, Eval[Any], Fn2, Fn2], Eval[Any]]


@dataclass(frozen=True, slots=True)
class Bitraverse(Bifoldable):
    bitraverse: Callable[[Any, Fn, Fn, ApplicativeLike], Any]


__all__ = (
    "Functor",
    "Apply",
    "Applicative",
    "Monad",
    "MonadError",
    "Foldable",
    "Traverse",
    "Semigroup",
    "Monoid",
    "SemigroupK",
    "Bifunctor",
    "Bifoldable",
    "Bitraverse",
    "FunctorLike",
    "ApplyLike",
    "ApplicativeLike",
    "FoldableLike",
)
