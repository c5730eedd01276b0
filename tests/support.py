"""Shared helpers for the test suite."""

from __future__ import annotations

import typing

from hypothesis import strategies as st
from kungfu import Error, Ok

from eithert import EitherT, Invalid, Some, Valid


def norm(value: typing.Any) -> typing.Any:
    """Plain tuples/lists for comparing nested Results with `==`."""
    match value:
        case Ok(inner):
            return ("ok", norm(inner))
        case Error(inner):
            return ("error", norm(inner))
        case EitherT(inner):
            return ("either_t", norm(inner))
        case Valid(inner):
            return ("valid", norm(inner))
        case Invalid(inner):
            return ("invalid", norm(inner))
        case Some(inner):
            return ("some", norm(inner))
        case list():
            return [norm(item) for item in value]
        case tuple():
            return tuple(norm(item) for item in value)
        case _:
            return value


def results(
    ok: st.SearchStrategy[typing.Any] = st.integers(),
    error: st.SearchStrategy[typing.Any] = st.text(max_size=5),
) -> st.SearchStrategy[typing.Any]:
    return st.one_of(ok.map(Ok), error.map(Error))


def option_either_ts() -> st.SearchStrategy[EitherT[int, str]]:
    return st.one_of(st.none(), results().map(Some)).map(EitherT)


def list_either_ts() -> st.SearchStrategy[EitherT[int, str]]:
    return st.lists(results(), max_size=4).map(EitherT)


__all__ = ("norm", "results", "option_either_ts", "list_either_ts")
