"""
Comparison and display capabilities
===================================

Eq / PartialOrder / Order / Show as records of functions, plus the
"natural" instances backed by Python's own `==`, `<` and `repr`.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Eq:
    """`eqv(x, y) -> bool`."""

    eqv: Callable[[Any, Any], bool]

    def neqv(self, x: Any, y: Any) -> bool:
        return not self.eqv(x, y)

    def contramap(self, f: Callable[[Any], Any]) -> Eq:
        return Eq(eqv=lambda x, y: self.eqv(f(x), f(y)))


@dataclass(frozen=True, slots=True)
class PartialOrder:
    """
    `partial_compare(x, y) -> float`:
    negative if x < y, 0.0 if equal, positive if x > y, NaN if incomparable.
    """

    partial_compare: Callable[[Any, Any], float]

    def eqv(self, x: Any, y: Any) -> bool:
        return self.partial_compare(x, y) == 0.0

    def try_compare(self, x: Any, y: Any) -> int | None:
        result = self.partial_compare(x, y)
        if math.isnan(result):
            return None
        return _sign(result)

    def lt(self, x: Any, y: Any) -> bool:
        return self.partial_compare(x, y) < 0.0

    def lteqv(self, x: Any, y: Any) -> bool:
        return self.partial_compare(x, y) <= 0.0

    def gt(self, x: Any, y: Any) -> bool:
        return self.partial_compare(x, y) > 0.0

    def gteqv(self, x: Any, y: Any) -> bool:
        return self.partial_compare(x, y) >= 0.0

    def contramap(self, f: Callable[[Any], Any]) -> PartialOrder:
        return PartialOrder(partial_compare=lambda x, y: self.partial_compare(f(x), f(y)))


@dataclass(frozen=True, slots=True)
class Order:
    """Total order: `compare(x, y) -> int` (-1, 0 or 1)."""

    compare: Callable[[Any, Any], int]

    def partial_compare(self, x: Any, y: Any) -> float:
        return float(self.compare(x, y))

    def eqv(self, x: Any, y: Any) -> bool:
        return self.compare(x, y) == 0

    def lt(self, x: Any, y: Any) -> bool:
        return self.compare(x, y) < 0

    def gt(self, x: Any, y: Any) -> bool:
        return self.compare(x, y) > 0

    def min(self, x: Any, y: Any) -> Any:
        return y if self.compare(y, x) < 0 else x

    def max(self, x: Any, y: Any) -> Any:
        return y if self.compare(y, x) > 0 else x

    def contramap(self, f: Callable[[Any], Any]) -> Order:
        return Order(compare=lambda x, y: self.compare(f(x), f(y)))


@dataclass(frozen=True, slots=True)
class Show:
    """`show(a) -> str`."""

    show: Callable[[Any], str]

    def contramap(self, f: Callable[[Any], Any]) -> Show:
        return Show(show=lambda a: self.show(f(a)))


type EqLike = Eq | PartialOrder | Order
type PartialOrderLike = PartialOrder | Order


def _sign(value: float) -> int:
    if value < 0:
        return -1
    if value > 0:
        return 1
    return 0


def _natural_compare(x: Any, y: Any) -> int:
    if x < y:
        return -1
    if y < x:
        return 1
    return 0


def _natural_partial_compare(x: Any, y: Any) -> float:
    if x == y:
        return 0.0
    if x < y:
        return -1.0
    if y < x:
        return 1.0
    return math.nan


# Natural instances (Python's own operators)
NATURAL_EQ = Eq(eqv=lambda x, y: bool(x == y))
NATURAL_ORDER = Order(compare=_natural_compare)
# `<` on sets is subset inclusion, hence partial
NATURAL_PARTIAL_ORDER = PartialOrder(partial_compare=_natural_partial_compare)
REPR_SHOW = Show(show=repr)
STR_SHOW = Show(show=str)


__all__ = (
    "Eq",
    "PartialOrder",
    "Order",
    "Show",
    "EqLike",
    "PartialOrderLike",
    "NATURAL_EQ",
    "NATURAL_ORDER",
    "NATURAL_PARTIAL_ORDER",
    "REPR_SHOW",
    "STR_SHOW",
)
