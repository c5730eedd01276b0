"""
EitherT: kungfu Result layered over any carrier effect.

`EitherT[T, E]` wraps `Carrier[Result[T, E]]` and short-circuits on `Error`
while staying inside the carrier (Option, list, Eval, LazyCoro, ...).

Architecture:
- Capabilities are records of functions (Functor, Monad, Traverse, ...)
  passed explicitly as keyword arguments
- Built-in carriers ship ready-made capability sets
- `eithert.instances` derives EitherT's own instances from a carrier's
- `CapabilityRegistry` looks carriers up by name
"""

# Core types
from ._types import Carrier, Continue, Done, NoError, Predicate, Step, Thunk

# Errors
from ._errors import MissingCapabilityError, PartialFunctionError, UnknownCarrierError

# Supporting values
from . import outcome, validated
from .eval import Eval
from .partial import PartialFn, lift_partial
from .validated import Invalid, Valid, Validated

# Capability records
from .typeclass import (
    # Functor family
    Applicative,
    Apply,
    Functor,
    Monad,
    MonadError,
    # Folding / traversal
    Foldable,
    Traverse,
    # Combination
    Monoid,
    Semigroup,
    SemigroupK,
    # Two-parameter
    Bifoldable,
    Bifunctor,
    Bitraverse,
    # Comparison / display
    NATURAL_EQ,
    NATURAL_ORDER,
    NATURAL_PARTIAL_ORDER,
    REPR_SHOW,
    STR_SHOW,
    Eq,
    Order,
    PartialOrder,
    Show,
)

# Transformer
from .either_t import EitherT

# Carriers
from .capabilities import CAPABILITY_NAMES, CarrierCapabilities
from .carriers import (
    BUILTIN_CARRIERS,
    EVAL,
    IDENTITY,
    LAZY_CORO,
    LIST,
    OPTION,
    RESULT,
    LazyCoro,
    Some,
    from_lazy_coro_result,
    to_lazy_coro_result,
)

# Registry
from .registry import CapabilityRegistry, default_registry

# Derived instances
from .instances import (
    EitherTInstances,
    either_t_bifoldable,
    either_t_bifunctor,
    either_t_bitraverse,
    either_t_eq,
    either_t_foldable,
    either_t_functor,
    either_t_monad,
    either_t_monad_error,
    either_t_monoid,
    either_t_order,
    either_t_partial_order,
    either_t_semigroup,
    either_t_semigroup_k,
    either_t_show,
    either_t_traverse,
)

__all__ = (
    # Core types
    "Carrier",
    "Continue",
    "Done",
    "NoError",
    "Predicate",
    "Step",
    "Thunk",
    # Transformer
    "EitherT",
    # Supporting values
    "Eval",
    "Invalid",
    "PartialFn",
    "Valid",
    "Validated",
    "lift_partial",
    "outcome",
    "validated",
    # Capability records
    "Applicative",
    "Apply",
    "Bifoldable",
    "Bifunctor",
    "Bitraverse",
    "Eq",
    "Foldable",
    "Functor",
    "Monad",
    "MonadError",
    "Monoid",
    "Order",
    "PartialOrder",
    "Semigroup",
    "SemigroupK",
    "Show",
    "Traverse",
    "NATURAL_EQ",
    "NATURAL_ORDER",
    "NATURAL_PARTIAL_ORDER",
    "REPR_SHOW",
    "STR_SHOW",
    # Carriers
    "BUILTIN_CARRIERS",
    "CAPABILITY_NAMES",
    "CarrierCapabilities",
    "EVAL",
    "IDENTITY",
    "LAZY_CORO",
    "LIST",
    "OPTION",
    "RESULT",
    "LazyCoro",
    "Some",
    "from_lazy_coro_result",
    "to_lazy_coro_result",
    # Registry
    "CapabilityRegistry",
    "default_registry",
    # Derived instances
    "EitherTInstances",
    "either_t_bifoldable",
    "either_t_bifunctor",
    "either_t_bitraverse",
    "either_t_eq",
    "either_t_foldable",
    "either_t_functor",
    "either_t_monad",
    "either_t_monad_error",
    "either_t_monoid",
    "either_t_order",
    "either_t_partial_order",
    "either_t_semigroup",
    "either_t_semigroup_k",
    "either_t_show",
    "either_t_traverse",
    # Errors
    "MissingCapabilityError",
    "PartialFunctionError",
    "UnknownCarrierError",
)
