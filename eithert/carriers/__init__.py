"""
Built-in carriers.

Each module exposes its capability records (`*_MONAD`, `*_TRAVERSE`, ...),
a `CarrierCapabilities` bundle (`IDENTITY`, `OPTION`, `LIST`, `RESULT`,
`EVAL`, `LAZY_CORO`) and builders for Eq / Order / Show / Monoid over the
carrier.
"""

from .coro import (
    LAZY_CORO,
    LAZY_CORO_APPLY,
    LAZY_CORO_MONAD,
    LAZY_CORO_PARALLEL_APPLY,
    LazyCoro,
    from_lazy_coro_result,
    to_lazy_coro_result,
)
from .identity import IDENTITY, IDENTITY_APPLICATIVE, IDENTITY_MONAD, IDENTITY_TRAVERSE
from .lazy import EVAL, EVAL_FOLDABLE, EVAL_MONAD, eval_eq
from .lists import (
    LIST,
    LIST_APPLY,
    LIST_MONAD,
    LIST_MONOID,
    LIST_SEMIGROUP_K,
    LIST_TRAVERSE,
    list_eq,
    list_order,
    list_show,
)
from .option import (
    OPTION,
    OPTION_APPLY,
    OPTION_MONAD,
    OPTION_SEMIGROUP_K,
    OPTION_TRAVERSE,
    option_eq,
    option_monoid,
    option_order,
    option_partial_order,
    option_show,
    Option,
    Some,
)
from .result import (
    RESULT,
    RESULT_MONAD,
    RESULT_SEMIGROUP_K,
    RESULT_TRAVERSE,
    result_eq,
    result_order,
    result_partial_order,
    result_semigroup,
    result_show,
)

BUILTIN_CARRIERS = (IDENTITY, OPTION, LIST, RESULT, EVAL, LAZY_CORO)

__all__ = (
    "BUILTIN_CARRIERS",
    # Identity
    "IDENTITY",
    "IDENTITY_APPLICATIVE",
    "IDENTITY_MONAD",
    "IDENTITY_TRAVERSE",
    # Option
    "OPTION",
    "OPTION_APPLY",
    "OPTION_MONAD",
    "OPTION_SEMIGROUP_K",
    "OPTION_TRAVERSE",
    "option_eq",
    "option_monoid",
    "option_order",
    "option_partial_order",
    "option_show",
    "Option",
    "Some",
    # List
    "LIST",
    "LIST_APPLY",
    "LIST_MONAD",
    "LIST_MONOID",
    "LIST_SEMIGROUP_K",
    "LIST_TRAVERSE",
    "list_eq",
    "list_order",
    "list_show",
    # Result
    "RESULT",
    "RESULT_MONAD",
    "RESULT_SEMIGROUP_K",
    "RESULT_TRAVERSE",
    "result_eq",
    "result_order",
    "result_partial_order",
    "result_semigroup",
    "result_show",
    # Eval
    "EVAL",
    "EVAL_FOLDABLE",
    "EVAL_MONAD",
    "eval_eq",
    # LazyCoro
    "LAZY_CORO",
    "LAZY_CORO_APPLY",
    "LAZY_CORO_MONAD",
    "LAZY_CORO_PARALLEL_APPLY",
    "LazyCoro",
    "from_lazy_coro_result",
    "to_lazy_coro_result",
)
