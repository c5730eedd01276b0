"""
Carrier capability sets
=======================

`CarrierCapabilities` is one carrier's declared capability set: which
records (Functor, Apply, Monad, Traverse, ...) it provides. Operations pull
the record they need with `as_functor()`, `as_monad()`, ... and get a
`MissingCapabilityError` when the carrier does not declare it.

Weaker capabilities are satisfied by stronger ones: a declared Monad also
serves as Functor, Apply and Applicative; a declared Traverse also serves as
Functor and Foldable.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass

from ._errors import MissingCapabilityError
from .typeclass import (
    ApplicativeLike,
    ApplyLike,
    FoldableLike,
    FunctorLike,
    Monad,
    SemigroupK,
    Traverse,
)

type CapabilityName = typing.Literal[
    "functor",
    "apply",
    "applicative",
    "monad",
    "foldable",
    "traverse",
    "semigroup_k",
]

CAPABILITY_NAMES: tuple[CapabilityName, ...] = (
    "functor",
    "apply",
    "applicative",
    "monad",
    "foldable",
    "traverse",
    "semigroup_k",
)


@dataclass(frozen=True, slots=True)
class CarrierCapabilities:
    """
    Declared capability set of one carrier.

    Example:
        OPTION = CarrierCapabilities(
            name="option",
            monad=OPTION_MONAD,
            apply=OPTION_APPLY,
            traverse=OPTION_TRAVERSE,
        )
        OPTION.as_functor()  # OPTION_APPLY (most specific declared record)
    """

    name: str
    functor: FunctorLike | None = None
    apply: ApplyLike | None = None
    applicative: ApplicativeLike | None = None
    monad: Monad | None = None
    foldable: FoldableLike | None = None
    traverse: Traverse | None = None
    semigroup_k: SemigroupK | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("CarrierCapabilities.name must be non-empty")

    # Resolution: most specific declared record first

    def as_functor(self) -> FunctorLike:
        return self._first("functor", self.functor, self.apply, self.traverse, self.applicative, self.monad)

    def as_apply(self) -> ApplyLike:
        return self._first("apply", self.apply, self.applicative, self.monad)

    def as_applicative(self) -> ApplicativeLike:
        return self._first("applicative", self.applicative, self.monad)

    def as_monad(self) -> Monad:
        return self._first("monad", self.monad)

    def as_foldable(self) -> FoldableLike:
        return self._first("foldable", self.foldable, self.traverse)

    def as_traverse(self) -> Traverse:
        return self._first("traverse", self.traverse)

    def as_semigroup_k(self) -> SemigroupK:
        return self._first("semigroup_k", self.semigroup_k)

    def require(self, capability: CapabilityName) -> typing.Any:
        """Resolve a capability by name."""
        match capability:
            case "functor":
                return self.as_functor()
            case "apply":
                return self.as_apply()
            case "applicative":
                return self.as_applicative()
            case "monad":
                return self.as_monad()
            case "foldable":
                return self.as_foldable()
            case "traverse":
                return self.as_traverse()
            case "semigroup_k":
                return self.as_semigroup_k()
            case _:
                raise MissingCapabilityError(self.name, capability)

    def supports(self, capability: CapabilityName) -> bool:
        try:
            self.require(capability)
        except MissingCapabilityError:
            return False
        return True

    @property
    def declared(self) -> frozenset[CapabilityName]:
        """Every capability this carrier can serve, including implied ones."""
        return frozenset(name for name in CAPABILITY_NAMES if self.supports(name))

    def _first[R](self, capability: str, *candidates: R | None) -> R:
        for candidate in candidates:
            if candidate is not None:
                return candidate
        raise MissingCapabilityError(self.name, capability)


__all__ = ("CAPABILITY_NAMES", "CapabilityName", "CarrierCapabilities")
