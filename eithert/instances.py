"""
Derived EitherT instances
=========================

One adapter per capability: given the carrier's record, build the same kind
of record for `EitherT` by delegating to its methods. The results are plain
capability records, so an `EitherT` over a monadic carrier can itself be
used as a carrier (nesting) or as the applicative of a `traverse`.

`EitherTInstances.derive(caps)` builds every adapter a carrier's declared
capability set allows.

NOTE: there is deliberately no MonadCombine / MonadFilter adapter. With a
Monoid on the failure type it would violate right absorption and the
distributivity laws.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, fields
from typing import Any, assert_never

from kungfu import Error, Ok, Result

from . import outcome
from ._errors import MissingCapabilityError
from ._types import Continue, Done, Step
from .capabilities import CarrierCapabilities
from .either_t import EitherT
from .registry import CapabilityRegistry, default_registry
from .typeclass import (
    Bifoldable,
    Bifunctor,
    Bitraverse,
    EqLike,
    Eq,
    Foldable,
    FoldableLike,
    Functor,
    FunctorLike,
    Monad,
    MonadError,
    Monoid,
    Order,
    PartialOrder,
    PartialOrderLike,
    Semigroup,
    SemigroupK,
    Show,
    Traverse,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Functor / Monad family
# ============================================================================


def either_t_functor(functor: FunctorLike) -> Functor:
    return Functor(map=lambda fa, f: fa.map(f, functor=functor))


def _carrier_step(r: Result[Step[Any, Any], Any]) -> Step[Any, Result[Any, Any]]:
    # Result[Step[A, B], E] -> Step[A, Result[B, E]]
    match r:
        case Error(err):
            return Done(Error(err))
        case Ok(Continue(seed)):
            return Continue(seed)
        case Ok(Done(result)):
            return Done(Ok(result))
        case _ as unexpected:
            raise TypeError(f"tail_rec_m step must be Result[Step, E], got {unexpected!r}")


def either_t_monad(monad: Monad) -> Monad:
    """
    Monad for EitherT over `monad`.

    `tail_rec_m` runs inside the carrier's own `tail_rec_m`, so the loop is as
    stack-safe as the carrier's.
    """

    def tail_rec_m(a: Any, f: Callable[[Any], EitherT[Step[Any, Any], Any]]) -> EitherT[Any, Any]:
        return EitherT(monad.tail_rec_m(a, lambda seed: monad.map(f(seed).value, _carrier_step)))

    return Monad(
        pure=lambda a: EitherT.pure(a, applicative=monad),
        flat_map=lambda fa, f: fa.flat_map(f, monad=monad),
        tail_rec_m=tail_rec_m,
    )


@dataclass(frozen=True, slots=True)
class _EitherTMonadError(MonadError):
    carrier: Monad

    def attempt(self, fa: EitherT[Any, Any]) -> EitherT[Result[Any, Any], Any]:
        # The whole Result becomes the success value; the carrier is untouched.
        return EitherT.right(fa.value, functor=self.carrier)


def either_t_monad_error(monad: Monad) -> MonadError:
    """
    MonadError over the failure channel.

    - raise_error(e) = EitherT.left(pure(e))
    - handle_error_with only ever sees failures; successes pass untouched
    - attempt(fa) = EitherT.right(fa.value)
    """
    base = either_t_monad(monad)

    def handle_error_with(fa: EitherT[Any, Any], f: Callable[[Any], EitherT[Any, Any]]) -> EitherT[Any, Any]:
        def handle(r: Result[Any, Any]) -> Any:
            match r:
                case Error(err):
                    return f(err).value
                case Ok(_):
                    return monad.pure(r)
                case _ as unreachable:
                    assert_never(unreachable)

        return EitherT(monad.flat_map(fa.value, handle))

    return _EitherTMonadError(
        pure=base.pure,
        flat_map=base.flat_map,
        tail_rec_m=base.tail_rec_m,
        raise_error=lambda e: EitherT.left(monad.pure(e), functor=monad),
        handle_error_with=handle_error_with,
        carrier=monad,
    )


def either_t_semigroup_k(monad: Monad) -> SemigroupK:
    """
    `x` unless it failed, then `y`.

    `y` is reached through the carrier's `flat_map`, so its effect only runs
    when `x` failed.
    """

    def combine_k(x: EitherT[Any, Any], y: EitherT[Any, Any]) -> EitherT[Any, Any]:
        def choose(r: Result[Any, Any]) -> Any:
            match r:
                case Error(_):
                    return y.value
                case Ok(_):
                    return monad.pure(r)
                case _ as unreachable:
                    assert_never(unreachable)

        return EitherT(monad.flat_map(x.value, choose))

    return SemigroupK(combine_k=combine_k)


# ============================================================================
# Semigroup / Monoid (over the whole Carrier[Result])
# ============================================================================


def either_t_semigroup(semigroup: Semigroup) -> Semigroup:
    """`semigroup` combines `Carrier[Result[T, E]]` values."""
    return Semigroup(combine=lambda x, y: EitherT(semigroup.combine(x.value, y.value)))


def either_t_monoid(monoid: Monoid) -> Monoid:
    return Monoid(
        combine=lambda x, y: EitherT(monoid.combine(x.value, y.value)),
        empty=lambda: EitherT(monoid.empty()),
    )


# ============================================================================
# Two-parameter / folding
# ============================================================================


def either_t_bifunctor(functor: FunctorLike) -> Bifunctor:
    return Bifunctor(bimap=lambda fab, f, g: fab.bimap(f, g, functor=functor))


def either_t_foldable(foldable: FoldableLike) -> Foldable:
    return Foldable(
        fold_left=lambda fa, b, f: fa.fold_left(b, f, foldable=foldable),
        fold_right=lambda fa, lb, f: fa.fold_right(lb, f, foldable=foldable),
    )


def either_t_traverse(traverse: Traverse) -> Traverse:
    return Traverse(
        fold_left=lambda fa, b, f: fa.fold_left(b, f, foldable=traverse),
        fold_right=lambda fa, lb, f: fa.fold_right(lb, f, foldable=traverse),
        map=lambda fa, f: fa.map(f, functor=traverse),
        traverse=lambda fa, f, applicative: fa.traverse(f, traverse=traverse, applicative=applicative),
    )


def _bifold_left(foldable: FoldableLike) -> Callable[..., Any]:
    def bifold_left(fab: EitherT[Any, Any], c: Any, f: Callable[[Any, Any], Any], g: Callable[[Any, Any], Any]) -> Any:
        return foldable.fold_left(fab.value, c, lambda acc, r: outcome.bifold_left(r, acc, f, g))

    return bifold_left


def _bifold_right(foldable: FoldableLike) -> Callable[..., Any]:
    def bifold_right(fab: EitherT[Any, Any], lc: Any, f: Callable[..., Any], g: Callable[..., Any]) -> Any:
        return foldable.fold_right(fab.value, lc, lambda r, rest: outcome.bifold_right(r, rest, f, g))

    return bifold_right


def either_t_bifoldable(foldable: FoldableLike) -> Bifoldable:
    """`f` folds failures, `g` folds successes."""
    return Bifoldable(bifold_left=_bifold_left(foldable), bifold_right=_bifold_right(foldable))


def either_t_bitraverse(traverse: Traverse) -> Bitraverse:
    return Bitraverse(
        bifold_left=_bifold_left(traverse),
        bifold_right=_bifold_right(traverse),
        bitraverse=lambda fab, f, g, applicative: fab.bitraverse(
            f,
            g,
            traverse=traverse,
            applicative=applicative,
        ),
    )


# ============================================================================
# Comparison / display (over the whole Carrier[Result])
# ============================================================================


def either_t_eq(eq: EqLike) -> Eq:
    return Eq(eqv=lambda x, y: x.eqv(y, eq=eq))


def either_t_partial_order(order: PartialOrderLike) -> PartialOrder:
    return PartialOrder(partial_compare=lambda x, y: x.partial_compare(y, order=order))


def either_t_order(order: Order) -> Order:
    return Order(compare=lambda x, y: x.compare(y, order=order))


def either_t_show(show: Show) -> Show:
    return Show(show=lambda w: w.show(show=show))


# ============================================================================
# Builder
# ============================================================================


@dataclass(frozen=True, slots=True)
class EitherTInstances:
    """
    Every EitherT instance one carrier supports.

    Example:
        inst = EitherTInstances.for_carrier("option")
        inst.require("monad").flat_map(w, f)
        inst.require("traverse")          # present: Option is traversable
        EitherTInstances.for_carrier("eval").require("traverse")
        # MissingCapabilityError
    """

    carrier: str
    functor: Functor | None = None
    bifunctor: Bifunctor | None = None
    monad: Monad | None = None
    monad_error: MonadError | None = None
    semigroup_k: SemigroupK | None = None
    foldable: Foldable | None = None
    traverse: Traverse | None = None
    bifoldable: Bifoldable | None = None
    bitraverse: Bitraverse | None = None

    @classmethod
    def derive(cls, capabilities: CarrierCapabilities) -> EitherTInstances:
        """Build every adapter the carrier's declared capabilities allow."""
        declared = capabilities.declared
        functor = capabilities.as_functor() if "functor" in declared else None
        monad = capabilities.as_monad() if "monad" in declared else None
        foldable = capabilities.as_foldable() if "foldable" in declared else None
        traverse = capabilities.as_traverse() if "traverse" in declared else None

        instances = cls(
            carrier=capabilities.name,
            functor=either_t_functor(functor) if functor is not None else None,
            bifunctor=either_t_bifunctor(functor) if functor is not None else None,
            monad=either_t_monad(monad) if monad is not None else None,
            monad_error=either_t_monad_error(monad) if monad is not None else None,
            semigroup_k=either_t_semigroup_k(monad) if monad is not None else None,
            foldable=either_t_foldable(foldable) if foldable is not None else None,
            traverse=either_t_traverse(traverse) if traverse is not None else None,
            bifoldable=either_t_bifoldable(foldable) if foldable is not None else None,
            bitraverse=either_t_bitraverse(traverse) if traverse is not None else None,
        )
        logger.debug("Derived EitherT instances over %r: %s", capabilities.name, instances.available)
        return instances

    @classmethod
    def for_carrier(cls, name: str, *, registry: CapabilityRegistry | None = None) -> EitherTInstances:
        """Look the carrier up (in the default registry unless given) and derive."""
        registry = registry if registry is not None else default_registry()
        return cls.derive(registry.lookup(name))

    @property
    def available(self) -> tuple[str, ...]:
        return tuple(f.name for f in fields(self) if f.name != "carrier" and getattr(self, f.name) is not None)

    def require(self, capability: str) -> Any:
        instance = getattr(self, capability, None) if capability != "carrier" else None
        if instance is None:
            raise MissingCapabilityError(f"EitherT[{self.carrier}]", capability)
        return instance

    def as_carrier(self) -> CarrierCapabilities:
        """
        EitherT over this carrier, packaged as a carrier itself.
        Register it to stack another EitherT on top.
        """
        return CarrierCapabilities(
            name=f"either_t[{self.carrier}]",
            functor=self.traverse or self.functor,
            monad=self.monad,
            foldable=self.foldable,
            traverse=self.traverse,
            semigroup_k=self.semigroup_k,
        )


__all__ = (
    "EitherTInstances",
    "either_t_functor",
    "either_t_monad",
    "either_t_monad_error",
    "either_t_semigroup_k",
    "either_t_semigroup",
    "either_t_monoid",
    "either_t_bifunctor",
    "either_t_foldable",
    "either_t_traverse",
    "either_t_bifoldable",
    "either_t_bitraverse",
    "either_t_eq",
    "either_t_partial_order",
    "either_t_order",
    "either_t_show",
)
