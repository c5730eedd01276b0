"""Internal helpers for eithert.

Small functions used across several modules."""

from __future__ import annotations

import typing

# (head, tail) cells ending in None; cells are shared, never mutated
type Cons[T] = tuple[T, Cons[T]] | None


# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def cons[T](tail: Cons[T], item: T) -> Cons[T]:
    return (item, tail)


def unwind[T](chain: Cons[T]) -> list[T]:
    """Cons chain built by `cons` back to a list in insertion order."""
    items: list[T] = []
    cell: typing.Any = chain
    while cell is not None:
        item, cell = cell
        items.append(item)
    items.reverse()
    return items


__all__ = (
    "Cons",
    "identity",
    "cons",
    "unwind",
)
