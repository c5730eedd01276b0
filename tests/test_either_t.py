import dataclasses
import math
import operator

import pytest
from kungfu import Error, Ok

from eithert import (
    IDENTITY,
    NATURAL_EQ,
    NATURAL_ORDER,
    NATURAL_PARTIAL_ORDER,
    REPR_SHOW,
    EitherT,
    Eval,
    Invalid,
    PartialFn,
    Semigroup,
    Some,
    Valid,
    validated,
)
from eithert.carriers import (
    IDENTITY_MONAD,
    LIST_APPLY,
    LIST_MONAD,
    LIST_MONOID,
    LIST_TRAVERSE,
    OPTION_APPLY,
    OPTION_MONAD,
    OPTION_TRAVERSE,
    option_eq,
    option_order,
    option_partial_order,
    option_show,
    result_eq,
    result_order,
    result_partial_order,
    result_show,
)

from .support import norm

ADD = Semigroup(combine=operator.add)


def explode(*_):
    raise AssertionError("must not be called")


# ============================================================================
# Constructors
# ============================================================================


class TestConstructors:
    def test_right_wraps_every_carrier_value_in_ok(self):
        assert norm(EitherT.right([1, 2], functor=LIST_APPLY)) == norm(EitherT([Ok(1), Ok(2)]))

    def test_left_wraps_in_error(self):
        assert norm(EitherT.left(Some("boom"), functor=OPTION_APPLY).value) == ("some", ("error", "boom"))

    def test_right_keeps_carrier_absence(self):
        assert EitherT.right(None, functor=OPTION_APPLY).value is None

    def test_present_none_is_not_absence(self):
        assert norm(EitherT.right(Some(None), functor=OPTION_APPLY).value) == ("some", ("ok", None))

    def test_lift_t_is_right(self):
        assert norm(EitherT.lift_t(3, functor=IDENTITY_MONAD)) == norm(EitherT.right(3, functor=IDENTITY_MONAD))

    def test_pure(self):
        assert norm(EitherT.pure(5, applicative=LIST_MONAD).value) == [("ok", 5)]

    def test_from_either(self):
        assert norm(EitherT.from_either(Error("e"), applicative=LIST_MONAD).value) == [("error", "e")]

    def test_from_option_present_never_builds_error(self):
        w = EitherT.from_option(4, if_none=explode, applicative=OPTION_MONAD)
        assert norm(w.value) == ("some", ("ok", 4))

    def test_from_option_missing(self):
        w = EitherT.from_option(None, if_none=lambda: "missing", applicative=OPTION_MONAD)
        assert norm(w.value) == ("some", ("error", "missing"))

    def test_is_frozen_value(self):
        w = EitherT(Ok(1))
        with pytest.raises(dataclasses.FrozenInstanceError):
            w.value = Ok(2)  # type: ignore[misc]

    def test_structural_equality(self):
        assert EitherT([1, 2]) == EitherT([1, 2])
        assert EitherT([1]) != EitherT([2])


# ============================================================================
# Outcome wrapper core
# ============================================================================


class TestCore:
    def test_fold(self):
        w = EitherT([Ok(1), Error("xy")])
        assert w.fold(len, lambda v: v * 10, functor=LIST_APPLY) == [10, 2]

    def test_is_left_is_right(self):
        w = EitherT([Ok(1), Error("x")])
        assert w.is_left(functor=LIST_APPLY) == [False, True]
        assert w.is_right(functor=LIST_APPLY) == [True, False]

    def test_swap(self):
        assert norm(EitherT(Some(Ok(1))).swap(functor=OPTION_APPLY).value) == ("some", ("error", 1))
        assert norm(EitherT(Some(Error("e"))).swap(functor=OPTION_APPLY).value) == ("some", ("ok", "e"))

    def test_get_or_else_is_lazy(self):
        assert EitherT(Ok(1)).get_or_else(explode, functor=IDENTITY_MONAD) == 1
        assert EitherT(Error("x")).get_or_else(lambda: 0, functor=IDENTITY_MONAD) == 0

    def test_get_or_else_f_splices_default_effect_on_failure_only(self):
        w = EitherT([Ok(1), Error("x")])
        assert w.get_or_else_f(lambda: [7, 8], monad=LIST_MONAD) == [1, 7, 8]

    def test_get_or_else_f_never_calls_default_on_success(self):
        assert EitherT(Some(Ok(1))).get_or_else_f(explode, monad=OPTION_MONAD) == Some(1)

    def test_get_or_else_f_keeps_present_none(self):
        assert EitherT(Some(Ok(None))).get_or_else_f(explode, monad=OPTION_MONAD) == Some(None)
        assert EitherT(Some(Error("x"))).get_or_else_f(lambda: Some(5), monad=OPTION_MONAD) == Some(5)

    def test_or_else(self):
        recovered = EitherT(Some(Error("x"))).or_else(lambda: EitherT(Some(Ok(2))), monad=OPTION_MONAD)
        assert norm(recovered.value) == ("some", ("ok", 2))
        kept = EitherT(Some(Ok(1))).or_else(explode, monad=OPTION_MONAD)
        assert norm(kept.value) == ("some", ("ok", 1))

    def test_recover_matched_failure(self):
        pf = PartialFn.of({"not_found": 0})
        assert norm(EitherT(Some(Error("not_found"))).recover(pf, functor=OPTION_APPLY).value) == ("some", ("ok", 0))

    def test_recover_unmatched_failure_passes_through(self):
        pf = PartialFn.of({"not_found": 0})
        assert norm(EitherT(Some(Error("timeout"))).recover(pf, functor=OPTION_APPLY).value) == ("some", ("error", "timeout"))

    def test_recover_leaves_success_alone(self):
        pf = PartialFn.when(lambda _: True, explode)
        assert norm(EitherT(Some(Ok(5))).recover(pf, functor=OPTION_APPLY).value) == ("some", ("ok", 5))

    def test_recover_with_may_fail_again(self):
        pf = PartialFn.of({"retry": EitherT(Some(Error("still failing")))})
        w = EitherT(Some(Error("retry"))).recover_with(pf, monad=OPTION_MONAD)
        assert norm(w.value) == ("some", ("error", "still failing"))

    def test_recover_with_replaces_carrier_effect(self):
        pf = PartialFn.on(str, lambda e: EitherT([Ok(len(e)), Ok(0)]))
        w = EitherT([Error("abc"), Ok(9), Error(7)]).recover_with(pf, monad=LIST_MONAD)
        assert norm(w.value) == [("ok", 3), ("ok", 0), ("ok", 9), ("error", 7)]

    def test_value_or(self):
        assert EitherT(Error("abc")).value_or(len, functor=IDENTITY_MONAD) == 3
        assert EitherT(Ok(1)).value_or(explode, functor=IDENTITY_MONAD) == 1

    def test_forall_and_exists(self):
        w = EitherT([Ok(5), Ok(1), Error("e")])
        assert w.forall(lambda x: x > 3, functor=LIST_APPLY) == [True, False, True]
        assert w.exists(lambda x: x > 3, functor=LIST_APPLY) == [True, False, False]

    def test_ensure_fails_value_outside_predicate(self):
        w = EitherT.right(Some(5), functor=OPTION_APPLY).ensure(lambda x: x > 10, error=lambda: "too small", functor=OPTION_APPLY)
        assert norm(w.value) == ("some", ("error", "too small"))

    def test_ensure_keeps_value_inside_predicate(self):
        w = EitherT.right(Some(20), functor=OPTION_APPLY).ensure(lambda x: x > 10, error=explode, functor=OPTION_APPLY)
        assert norm(w.value) == ("some", ("ok", 20))

    def test_ensure_leaves_failure_alone(self):
        w = EitherT(Some(Error("e"))).ensure(explode, error=explode, functor=OPTION_APPLY)
        assert norm(w.value) == ("some", ("error", "e"))

    def test_merge(self):
        assert EitherT([Ok(1), Error(2)]).merge(functor=LIST_APPLY) == [1, 2]

    def test_to_optional(self):
        assert EitherT([Ok(1), Error("e")]).to_optional(functor=LIST_APPLY) == [1, None]

    def test_to_optional_failure_is_not_carrier_absence(self):
        assert EitherT(Some(Error("e"))).to_optional(functor=OPTION_APPLY) == Some(None)
        assert EitherT(None).to_optional(functor=OPTION_APPLY) is None

    def test_to_validated(self):
        w = EitherT([Ok(1), Error("e")])
        assert w.to_validated(functor=LIST_APPLY) == [Valid(1), Invalid("e")]
        assert w.to_validated_nel(functor=LIST_APPLY) == [Valid(1), Invalid(["e"])]


class TestCombine:
    @pytest.mark.parametrize(
        ("x", "y", "expected"),
        [
            (Some(Error("e1")), Some(Error("e2")), ("some", ("error", "e1"))),
            (Some(Error("e1")), Some(Ok(3)), ("some", ("error", "e1"))),
            (Some(Ok(3)), Some(Error("e1")), ("some", ("error", "e1"))),
            (Some(Ok(3)), Some(Ok(4)), ("some", ("ok", 7))),
            (Some(Ok(3)), None, None),
            (None, Some(Error("e1")), None),
            (Some(Error("e1")), None, None),
            (None, None, None),
        ],
    )
    def test_precedence_over_optional_carrier(self, x, y, expected):
        w = EitherT(x).combine(EitherT(y), apply=OPTION_APPLY, semigroup=ADD)
        assert norm(w.value) == expected

    def test_list_carrier_combines_pointwise(self):
        w = EitherT([Ok(1), Error("a")]).combine(EitherT([Ok(10)]), apply=LIST_APPLY, semigroup=ADD)
        assert norm(w.value) == [("ok", 11), ("error", "a")]


# ============================================================================
# Transform layer
# ============================================================================


class TestTransform:
    def test_bimap(self):
        w = EitherT([Ok(2), Error("e")]).bimap(str.upper, lambda v: v + 1, functor=LIST_APPLY)
        assert norm(w.value) == [("ok", 3), ("error", "E")]

    def test_map_touches_success_only(self):
        w = EitherT([Ok(2), Error("e")]).map(lambda v: v * 2, functor=LIST_APPLY)
        assert norm(w.value) == [("ok", 4), ("error", "e")]

    def test_left_map_touches_failure_only(self):
        w = EitherT([Ok(2), Error("e")]).left_map(str.upper, functor=LIST_APPLY)
        assert norm(w.value) == [("ok", 2), ("error", "E")]

    def test_transform_rewrites_result(self):
        w = EitherT(Some(Ok(1))).transform(lambda _: Error("rewritten"), functor=OPTION_APPLY)
        assert norm(w.value) == ("some", ("error", "rewritten"))

    def test_subflat_map_switches_branch_without_new_effect(self):
        def positive(x):
            return Ok(x) if x > 0 else Error("negative")

        w = EitherT([Ok(1), Ok(-1), Error("e")]).subflat_map(positive, functor=LIST_APPLY)
        assert norm(w.value) == [("ok", 1), ("error", "negative"), ("error", "e")]

    def test_apply_alt(self):
        ff = EitherT(Some(Ok(lambda x: x + 1)))
        assert norm(EitherT(Some(Ok(2))).apply_alt(ff, apply=OPTION_APPLY).value) == ("some", ("ok", 3))
        assert norm(EitherT(Some(Error("v"))).apply_alt(ff, apply=OPTION_APPLY).value) == ("some", ("error", "v"))

    def test_apply_alt_reports_function_failure_first(self):
        w = EitherT(Some(Error("value"))).apply_alt(EitherT(Some(Error("function"))), apply=OPTION_APPLY)
        assert norm(w.value) == ("some", ("error", "function"))


def _name(name):
    return validated.valid(name) if name else validated.invalid_nel("empty name")


def _age(age):
    return validated.valid(age) if age >= 0 else validated.invalid_nel("negative age")


def validate_user(v):
    match v:
        case Valid(raw):
            return validated.map_n(lambda n, a: (n, a), _name(raw["name"]), _age(raw["age"]), semigroup=LIST_MONOID)
        case Invalid(err):
            return Invalid([err])


class TestWithValidated:
    def test_accumulates_every_error(self):
        w = EitherT(Some(Ok({"name": "", "age": -1}))).with_validated(validate_user, functor=OPTION_APPLY)
        assert norm(w.value) == ("some", ("error", ["empty name", "negative age"]))

    def test_valid_input(self):
        w = EitherT(Some(Ok({"name": "ann", "age": 30}))).with_validated(validate_user, functor=OPTION_APPLY)
        assert norm(w.value) == ("some", ("ok", ("ann", 30)))

    def test_existing_failure(self):
        w = EitherT(Some(Error("raw"))).with_validated(validate_user, functor=OPTION_APPLY)
        assert norm(w.value) == ("some", ("error", ["raw"]))


# ============================================================================
# Sequencing layer
# ============================================================================


class TestSequencing:
    def test_flat_map_short_circuits(self):
        w = EitherT(Some(Error("e"))).flat_map(explode, monad=OPTION_MONAD)
        assert norm(w.value) == ("some", ("error", "e"))

    def test_flat_map_over_list(self):
        w = EitherT([Ok(1), Error("e"), Ok(2)]).flat_map(lambda x: EitherT([Ok(x), Ok(x * 10)]), monad=LIST_MONAD)
        assert norm(w.value) == [("ok", 1), ("ok", 10), ("error", "e"), ("ok", 2), ("ok", 20)]

    def test_flat_map_f(self):
        assert norm(EitherT(Some(Ok(2))).flat_map_f(lambda x: Some(Ok(x + 1)), monad=OPTION_MONAD).value) == ("some", ("ok", 3))
        assert EitherT(Some(Ok(2))).flat_map_f(lambda _: None, monad=OPTION_MONAD).value is None

    def test_semiflat_map(self):
        w = EitherT([Ok(1), Error("e")]).semiflat_map(lambda x: [x, -x], monad=LIST_MONAD)
        assert norm(w.value) == [("ok", 1), ("ok", -1), ("error", "e")]

    def test_long_flat_map_chain_over_strict_carrier(self):
        w = EitherT.pure(0, applicative=OPTION_MONAD)
        for _ in range(100_000):
            w = w.flat_map(lambda x: EitherT(Some(Ok(x + 1))), monad=OPTION_MONAD)
        assert norm(w.value) == ("some", ("ok", 100_000))


# ============================================================================
# Traversal & folding
# ============================================================================


class TestTraversal:
    def test_traverse_list_into_option(self):
        w = EitherT([Ok(1), Error("e"), Ok(3)])
        out = w.traverse(lambda x: Some(x * 2), traverse=LIST_TRAVERSE, applicative=OPTION_MONAD)
        assert norm(out) == ("some", ("either_t", [("ok", 2), ("error", "e"), ("ok", 6)]))

    def test_traverse_absence_wins(self):
        w = EitherT([Ok(1), Error("e"), Ok(3)])
        out = w.traverse(lambda x: None if x == 3 else Some(x), traverse=LIST_TRAVERSE, applicative=OPTION_MONAD)
        assert out is None

    def test_traverse_never_visits_failures(self):
        w = EitherT([Error("a"), Error("b")])
        out = w.traverse(explode, traverse=LIST_TRAVERSE, applicative=OPTION_MONAD)
        assert norm(out) == ("some", ("either_t", [("error", "a"), ("error", "b")]))

    def test_bitraverse(self):
        w = EitherT(Some(Error("e")))
        out = w.bitraverse(lambda e: [e, e.upper()], lambda v: [v], traverse=OPTION_TRAVERSE, applicative=LIST_MONAD)
        assert norm(out) == [("either_t", ("some", ("error", "e"))), ("either_t", ("some", ("error", "E")))]

    def test_fold_left_skips_failures(self):
        w = EitherT([Ok(1), Error("x"), Ok(2)])
        assert w.fold_left(0, operator.add, foldable=LIST_TRAVERSE) == 3

    def test_fold_right(self):
        w = EitherT([Ok(1), Error("x"), Ok(2)])
        total = w.fold_right(Eval.now(0), lambda v, rest: rest.map(lambda acc: acc + v), foldable=LIST_TRAVERSE)
        assert total.value() == 3

    def test_fold_right_stops_when_rest_is_not_forced(self):
        calls = []

        def first(v, _rest):
            calls.append(v)
            return Eval.now(v)

        w = EitherT([Error("a"), Ok(1), Ok(2), Ok(3)])
        assert w.fold_right(Eval.later(explode), first, foldable=LIST_TRAVERSE).value() == 1
        assert calls == [1]

    def test_fold_right_over_identity(self):
        w = EitherT(Ok(4))
        out = w.fold_right(Eval.now(1), lambda v, rest: rest.map(lambda acc: acc * v), foldable=IDENTITY.as_foldable())
        assert out.value() == 4


# ============================================================================
# Comparison / display
# ============================================================================

ORDER = option_order(result_order(ok=NATURAL_ORDER, error=NATURAL_ORDER))
EQ = option_eq(result_eq(ok=NATURAL_EQ, error=NATURAL_EQ))
SHOW = option_show(result_show(ok=REPR_SHOW, error=REPR_SHOW))
PARTIAL = option_partial_order(result_partial_order(ok=NATURAL_PARTIAL_ORDER, error=NATURAL_PARTIAL_ORDER))


class TestComparison:
    def test_compare(self):
        assert EitherT(Some(Error("z"))).compare(EitherT(Some(Ok(0))), order=ORDER) == -1
        assert EitherT(None).compare(EitherT(Some(Error("a"))), order=ORDER) == -1
        assert EitherT(Some(Ok(2))).compare(EitherT(Some(Ok(1))), order=ORDER) == 1
        assert EitherT(Some(Ok(1))).compare(EitherT(Some(Ok(1))), order=ORDER) == 0

    def test_eqv(self):
        assert EitherT(Some(Ok(1))).eqv(EitherT(Some(Ok(1))), eq=EQ)
        assert not EitherT(Some(Ok(1))).eqv(EitherT(Some(Error(1))), eq=EQ)
        assert not EitherT(Some(Ok(1))).eqv(EitherT(None), eq=EQ)

    def test_partial_compare(self):
        assert EitherT(Some(Ok({1}))).partial_compare(EitherT(Some(Ok({1, 2}))), order=PARTIAL) == -1.0
        assert math.isnan(EitherT(Some(Ok({1}))).partial_compare(EitherT(Some(Ok({2}))), order=PARTIAL))

    def test_show(self):
        assert EitherT(Some(Ok(1))).show(show=SHOW) == "Some(Ok(1))"
        assert EitherT(Some(Error("x"))).show(show=SHOW) == "Some(Error('x'))"
        assert EitherT(None).show(show=SHOW) == "None"
