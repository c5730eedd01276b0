"""
Core type definitions for eithert.

Aliases and small records shared across the package.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Thunk = zero-argument callable, evaluated only on demand
type Thunk[T] = Callable[[], T]

# Carrier = caller-chosen effect holding a T (Option, list, Eval, LazyCoro, ...)
# NOTE: Python has no higher-kinded types, so the carrier is opaque here.
#       The parameter only documents what the carrier holds.
type Carrier[T] = typing.Any

# NoError = "never fails" (bottom type)
type NoError = typing.Never

# ============================================================================
# Recursion signal for tail_rec_m
# ============================================================================


@dataclass(frozen=True, slots=True)
class Continue[A]:
    """Loop again with a new seed."""

    seed: A


@dataclass(frozen=True, slots=True)
class Done[B]:
    """Stop the loop with a final result."""

    result: B


type Step[A, B] = Continue[A] | Done[B]

__all__ = (
    # Type aliases
    "Predicate",
    "Thunk",
    "Carrier",
    "NoError",
    # Recursion signal
    "Continue",
    "Done",
    "Step",
)
