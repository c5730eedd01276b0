"""
EitherT - Result inside an arbitrary carrier
============================================

`EitherT[T, E]` wraps `Carrier[Result[T, E]]`: the fail-fast effect of
kungfu `Result` layered over any carrier (Option, list, Eval, LazyCoro, ...).

The carrier is opaque. Every operation takes the capability record it needs
as a keyword argument (`functor=`, `monad=`, `traverse=`, ...) and goes
through it; the `Result` inside is handled with `eithert.outcome`.

    w = EitherT.right(Some(3), functor=OPTION_MONAD)      # EitherT(Some(Ok(3)))
    w.flat_map(lambda x: EitherT.left(Some("boom"), functor=OPTION_MONAD),
               monad=OPTION_MONAD)                         # EitherT(Some(Error("boom")))
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass
from typing import assert_never

from kungfu import Error, Ok, Result

from . import outcome
from . import validated as V
from ._helpers import identity
from ._types import Carrier, Predicate, Thunk
from .eval import Eval
from .partial import PartialFn
from .typeclass import (
    ApplicativeLike,
    ApplyLike,
    EqLike,
    FoldableLike,
    FunctorLike,
    Monad,
    Order,
    PartialOrderLike,
    Semigroup,
    Show,
    Traverse,
)
from .validated import Validated


@dataclass(frozen=True, slots=True)
class EitherT[T, E]:
    """
    Result transformer: `value` is a `Carrier[Result[T, E]]`.

    Immutable; every operation returns a new wrapper. `Error` is failure and
    short-circuits sequencing, `Ok` is success.

    Monadic laws (for a lawful carrier monad M):
    - Left identity: EitherT.pure(a).flat_map(f) == f(a)
    - Right identity: w.flat_map(EitherT.pure) == w
    - Associativity: w.flat_map(f).flat_map(g) == w.flat_map(x => f(x).flat_map(g))
    """

    value: Carrier[Result[T, E]]

    # ========================================================================
    # Constructors
    # ========================================================================

    @staticmethod
    def right[V](fb: Carrier[V], *, functor: FunctorLike) -> EitherT[V, typing.Any]:
        """Lift a carrier of successes."""
        return EitherT(functor.map(fb, Ok))

    @staticmethod
    def left[Err](fa: Carrier[Err], *, functor: FunctorLike) -> EitherT[typing.Any, Err]:
        """Lift a carrier of failures."""
        return EitherT(functor.map(fa, Error))

    @staticmethod
    def lift_t[V](fb: Carrier[V], *, functor: FunctorLike) -> EitherT[V, typing.Any]:
        """Alias for `right`."""
        return EitherT.right(fb, functor=functor)

    @staticmethod
    def pure[V](value: V, *, applicative: ApplicativeLike) -> EitherT[V, typing.Any]:
        return EitherT(applicative.pure(Ok(value)))

    @staticmethod
    def from_either[V, Err](
        either: Result[V, Err],
        *,
        applicative: ApplicativeLike,
    ) -> EitherT[V, Err]:
        """Lift an already-computed Result."""
        return EitherT(applicative.pure(either))

    @staticmethod
    def from_option[V, Err](
        value: V | None,
        *,
        if_none: Thunk[Err],
        applicative: ApplicativeLike,
    ) -> EitherT[V, Err]:
        """
        Optional to EitherT. None becomes Error(if_none()).

        NOTE: if_none is a thunk so the error is only built when needed.
        """
        return EitherT(applicative.pure(outcome.from_optional(value, if_none)))

    # ========================================================================
    # Outcome wrapper core (Functor)
    # ========================================================================

    def fold[C](
        self,
        on_error: Callable[[E], C],
        on_ok: Callable[[T], C],
        *,
        functor: FunctorLike,
    ) -> Carrier[C]:
        return functor.map(self.value, lambda r: outcome.fold(r, on_error, on_ok))

    def is_left(self, *, functor: FunctorLike) -> Carrier[bool]:
        return functor.map(self.value, outcome.is_error)

    def is_right(self, *, functor: FunctorLike) -> Carrier[bool]:
        return functor.map(self.value, outcome.is_ok)

    def swap(self, *, functor: FunctorLike) -> EitherT[E, T]:
        return EitherT(functor.map(self.value, outcome.swap))

    def get_or_else(self, default: Thunk[T], *, functor: FunctorLike) -> Carrier[T]:
        """Success value, or `default()` on failure (called only then)."""
        return functor.map(self.value, lambda r: outcome.get_or_else(r, default))

    def get_or_else_f(self, default: Thunk[Carrier[T]], *, monad: Monad) -> Carrier[T]:
        """
        Like `get_or_else`, but the default is itself a carrier computation.
        Its effect is spliced in only on the failure path.
        """

        def choose(r: Result[T, E]) -> Carrier[T]:
            match r:
                case Ok(value):
                    return monad.pure(value)
                case Error(_):
                    return default()
                case _ as unreachable:
                    assert_never(unreachable)

        return monad.flat_map(self.value, choose)

    def or_else(self, default: Thunk[EitherT[T, E]], *, monad: Monad) -> EitherT[T, E]:
        """On failure replace the whole computation; on success `default` is never called."""

        def choose(r: Result[T, E]) -> Carrier[Result[T, E]]:
            match r:
                case Ok(_):
                    return monad.pure(r)
                case Error(_):
                    return default().value
                case _ as unreachable:
                    assert_never(unreachable)

        return EitherT(monad.flat_map(self.value, choose))

    def recover(self, pf: PartialFn[E, T], *, functor: FunctorLike) -> EitherT[T, E]:
        """Failures matched by `pf` become successes; others pass through."""
        return EitherT(functor.map(self.value, lambda r: outcome.recover(r, pf)))

    def recover_with(
        self,
        pf: PartialFn[E, EitherT[T, E]],
        *,
        monad: Monad,
    ) -> EitherT[T, E]:
        """Failures matched by `pf` are replaced by the wrapper `pf` returns (which may fail again)."""

        def choose(r: Result[T, E]) -> Carrier[Result[T, E]]:
            match r:
                case Error(err) if pf.is_defined_at(err):
                    return pf.apply(err).value
                case Ok(_) | Error(_):
                    return monad.pure(r)
                case _ as unreachable:
                    assert_never(unreachable)

        return EitherT(monad.flat_map(self.value, choose))

    def value_or(self, f: Callable[[E], T], *, functor: FunctorLike) -> Carrier[T]:
        return self.fold(f, identity, functor=functor)

    def forall(self, predicate: Predicate[T], *, functor: FunctorLike) -> Carrier[bool]:
        return functor.map(self.value, lambda r: outcome.forall(r, predicate))

    def exists(self, predicate: Predicate[T], *, functor: FunctorLike) -> Carrier[bool]:
        return functor.map(self.value, lambda r: outcome.exists(r, predicate))

    def ensure(
        self,
        predicate: Predicate[T],
        *,
        error: Thunk[E],
        functor: FunctorLike,
    ) -> EitherT[T, E]:
        """Turn Ok into Error(error()) if the value FAILS the predicate."""
        return EitherT(functor.map(self.value, lambda r: outcome.ensure(r, predicate, error)))

    def merge(self, *, functor: FunctorLike) -> Carrier[T | E]:
        """Collapse both branches into one carrier value."""
        return functor.map(self.value, outcome.merge)

    def to_optional(self, *, functor: FunctorLike) -> Carrier[T | None]:
        return functor.map(self.value, outcome.to_optional)

    def to_validated(self, *, functor: FunctorLike) -> Carrier[Validated[T, E]]:
        return functor.map(self.value, V.from_result)

    def to_validated_nel(self, *, functor: FunctorLike) -> Carrier[Validated[T, list[E]]]:
        """Like `to_validated`, with the failure wrapped in a one-element list."""
        return functor.map(self.value, lambda r: V.left_map(V.from_result(r), lambda e: [e]))

    def combine(
        self,
        other: EitherT[T, E],
        *,
        apply: ApplyLike,
        semigroup: Semigroup,
    ) -> EitherT[T, E]:
        """
        Pointwise combination through the carrier's `map2`.

        Failure in `self` wins, then failure in `other`; two successes are
        appended with `semigroup`. Carrier-level absence comes from `map2`:

            Some(Error(e1)) + Some(Error(e2)) -> Some(Error(e1))
            Some(Ok(3))     + Some(Error(e1)) -> Some(Error(e1))
            Some(Ok(3))     + Some(Ok(4))     -> Some(Ok(7))
            Some(Ok(3))     + None            -> None
        """
        return EitherT(apply.map2(self.value, other.value, lambda x, y: outcome.combine(x, y, semigroup)))

    # ========================================================================
    # Transform layer
    # ========================================================================

    def bimap[U, F](
        self,
        on_error: Callable[[E], F],
        on_ok: Callable[[T], U],
        *,
        functor: FunctorLike,
    ) -> EitherT[U, F]:
        return EitherT(functor.map(self.value, lambda r: outcome.bimap(r, on_error, on_ok)))

    def map[U](self, f: Callable[[T], U], /, *, functor: FunctorLike) -> EitherT[U, E]:
        return self.bimap(identity, f, functor=functor)

    def left_map[F](self, f: Callable[[E], F], /, *, functor: FunctorLike) -> EitherT[T, F]:
        return self.bimap(f, identity, functor=functor)

    def transform[U, F](
        self,
        f: Callable[[Result[T, E]], Result[U, F]],
        /,
        *,
        functor: FunctorLike,
    ) -> EitherT[U, F]:
        """Rewrite the Result itself, carrier untouched."""
        return EitherT(functor.map(self.value, f))

    def subflat_map[U](
        self,
        f: Callable[[T], Result[U, E]],
        /,
        *,
        functor: FunctorLike,
    ) -> EitherT[U, E]:
        """Bind with a plain Result: may switch branch, adds no carrier effect."""
        return self.transform(lambda r: outcome.flat_map(r, f), functor=functor)

    def apply_alt[U](
        self,
        ff: EitherT[Callable[[T], U], E],
        /,
        *,
        apply: ApplyLike,
    ) -> EitherT[U, E]:
        """
        Apply a wrapped function through the carrier's `map2`.
        Fail-fast: a failure in `ff` is reported before one in `self`.
        """
        return EitherT(apply.map2(self.value, ff.value, lambda r, rf: outcome.ap(rf, r)))

    def with_validated[U, F](
        self,
        f: Callable[[Validated[T, E]], Validated[U, F]],
        /,
        *,
        functor: FunctorLike,
    ) -> EitherT[U, F]:
        """
        Run `f` on the outcome seen as `Validated` and convert back.

        The EitherT applicative fails fast; this lets a step accumulate
        errors "momentarily" (e.g. with `validated.map_n`).
        """
        return EitherT(functor.map(self.value, lambda r: V.to_result(f(V.from_result(r)))))

    # ========================================================================
    # Sequencing layer (Monad)
    # ========================================================================

    def flat_map[U](
        self,
        f: Callable[[T], EitherT[U, E]],
        /,
        *,
        monad: Monad,
    ) -> EitherT[U, E]:
        """
        Monadic bind (>>=).

        - On Ok: continues with `f(value).value`
        - On Error: short-circuit, `f` is never called
        """

        def bind(r: Result[T, E]) -> Carrier[Result[U, E]]:
            match r:
                case Ok(value):
                    return f(value).value
                case Error(err):
                    return monad.pure(Error(err))
                case _ as unreachable:
                    assert_never(unreachable)

        return EitherT(monad.flat_map(self.value, bind))

    def flat_map_f[U](
        self,
        f: Callable[[T], Carrier[Result[U, E]]],
        /,
        *,
        monad: Monad,
    ) -> EitherT[U, E]:
        """Bind with a function returning the raw carrier-of-Result."""
        return self.flat_map(lambda value: EitherT(f(value)), monad=monad)

    def semiflat_map[U](
        self,
        f: Callable[[T], Carrier[U]],
        /,
        *,
        monad: Monad,
    ) -> EitherT[U, E]:
        """Bind with a carrier computation that cannot fail."""
        return self.flat_map(lambda value: EitherT.right(f(value), functor=monad), monad=monad)

    # ========================================================================
    # Traversal & folding
    # ========================================================================

    def traverse(
        self,
        f: Callable[[T], typing.Any],
        /,
        *,
        traverse: Traverse,
        applicative: ApplicativeLike,
    ) -> typing.Any:
        """
        G[EitherT[U, E]]: traverse the carrier, and inside it the success
        branch. Failures are already complete and pass through.
        """
        inner = traverse.traverse(
            self.value,
            lambda r: outcome.traverse(r, f, applicative),
            applicative,
        )
        return applicative.map(inner, EitherT)

    def bitraverse(
        self,
        on_error: Callable[[E], typing.Any],
        on_ok: Callable[[T], typing.Any],
        *,
        traverse: Traverse,
        applicative: ApplicativeLike,
    ) -> typing.Any:
        inner = traverse.traverse(
            self.value,
            lambda r: outcome.bitraverse(r, on_error, on_ok, applicative),
            applicative,
        )
        return applicative.map(inner, EitherT)

    def fold_left[C](
        self,
        initial: C,
        f: Callable[[C, T], C],
        *,
        foldable: FoldableLike,
    ) -> C:
        """A failure contributes nothing; a success contributes its value."""
        return foldable.fold_left(self.value, initial, lambda acc, r: outcome.fold_left(r, acc, f))

    def fold_right[C](
        self,
        lb: Eval[C],
        f: Callable[[T, Eval[C]], Eval[C]],
        *,
        foldable: FoldableLike,
    ) -> Eval[C]:
        """Lazy right fold: `f` receives the rest as an unevaluated `Eval`."""
        return foldable.fold_right(self.value, lb, lambda r, rest: outcome.fold_right(r, rest, f))

    # ========================================================================
    # Comparison / display
    # ========================================================================

    def compare(self, other: EitherT[T, E], *, order: Order) -> int:
        return order.compare(self.value, other.value)

    def partial_compare(self, other: EitherT[T, E], *, order: PartialOrderLike) -> float:
        return order.partial_compare(self.value, other.value)

    def eqv(self, other: EitherT[T, E], *, eq: EqLike) -> bool:
        return eq.eqv(self.value, other.value)

    def show(self, *, show: Show) -> str:
        return show.show(self.value)


__all__ = ("EitherT",)
