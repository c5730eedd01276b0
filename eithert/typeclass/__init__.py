from .core import (
    Applicative,
    ApplicativeLike,
    Apply,
    ApplyLike,
    Bifoldable,
    Bifunctor,
    Bitraverse,
    Foldable,
    FoldableLike,
    Functor,
    FunctorLike,
    Monad,
    MonadError,
    Monoid,
    Semigroup,
    SemigroupK,
    Traverse,
)
from .order import (
    NATURAL_EQ,
    NATURAL_ORDER,
    NATURAL_PARTIAL_ORDER,
    REPR_SHOW,
    STR_SHOW,
    Eq,
    EqLike,
    Order,
    PartialOrder,
    PartialOrderLike,
    Show,
)

__all__ = (
    # Functor family
    "Functor",
    "Apply",
    "Applicative",
    "Monad",
    "MonadError",
    "FunctorLike",
    "ApplyLike",
    "ApplicativeLike",
    # Folding / traversal
    "Foldable",
    "Traverse",
    "FoldableLike",
    # Combination
    "Semigroup",
    "Monoid",
    "SemigroupK",
    # Two-parameter
    "Bifunctor",
    "Bifoldable",
    "Bitraverse",
    # Comparison / display
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
