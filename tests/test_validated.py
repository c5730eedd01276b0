from kungfu import Error, Ok

from eithert import Invalid, Valid, validated
from eithert.carriers import LIST_MONOID, LIST_TRAVERSE

from .support import norm


def parse(raw):
    return validated.valid(int(raw)) if raw.isdigit() else validated.invalid_nel(f"bad {raw}")


def test_constructors():
    assert validated.valid(1) == Valid(1)
    assert validated.invalid("e") == Invalid("e")
    assert validated.invalid_nel("e") == Invalid(["e"])


def test_result_conversions():
    assert validated.from_result(Ok(1)) == Valid(1)
    assert validated.from_result(Error("e")) == Invalid("e")
    assert norm(validated.to_result(Valid(1))) == ("ok", 1)
    assert norm(validated.to_result(Invalid("e"))) == ("error", "e")


def test_map_and_left_map():
    assert validated.map(Valid(1), str) == Valid("1")
    assert validated.map(Invalid("e"), str) == Invalid("e")
    assert validated.left_map(Invalid("e"), str.upper) == Invalid("E")
    assert validated.left_map(Valid(1), str.upper) == Valid(1)


def test_map2_accumulates():
    assert validated.map2(Invalid(["a"]), Invalid(["b"]), max, semigroup=LIST_MONOID) == Invalid(["a", "b"])
    assert validated.map2(Valid(1), Invalid(["b"]), max, semigroup=LIST_MONOID) == Invalid(["b"])
    assert validated.map2(Valid(1), Valid(2), max, semigroup=LIST_MONOID) == Valid(2)


def test_map_n():
    out = validated.map_n(lambda a, b, c: a + b + c, parse("1"), parse("x"), parse("y"), semigroup=LIST_MONOID)
    assert out == Invalid(["bad x", "bad y"])
    out = validated.map_n(lambda a, b: a + b, parse("1"), parse("2"), semigroup=LIST_MONOID)
    assert out == Valid(3)


def test_applicative_drives_traverse():
    applicative = validated.validated_applicative(LIST_MONOID)
    assert LIST_TRAVERSE.traverse(["1", "x", "y"], parse, applicative) == Invalid(["bad x", "bad y"])
    assert LIST_TRAVERSE.traverse(["1", "2"], parse, applicative) == Valid([1, 2])
    assert applicative.map(Valid(1), lambda x: x + 1) == Valid(2)
