from __future__ import annotations

from _infra import User, banner, run

from eithert import EitherT, Invalid, Valid, Validated, validated
from eithert.carriers import LIST_MONAD, LIST_MONOID, LIST_TRAVERSE
from kungfu import Error, Ok

ROWS = [
    {"id": "1", "name": "ann"},
    {"id": "x", "name": ""},
    {"id": "3", "name": "bob"},
]


def check_id(raw: str) -> Validated[int, list[str]]:
    return validated.valid(int(raw)) if raw.isdigit() else validated.invalid_nel(f"bad id {raw!r}")


def check_name(raw: str) -> Validated[str, list[str]]:
    return validated.valid(raw) if raw else validated.invalid_nel("empty name")


def to_user(v: Validated[dict[str, str], str]) -> Validated[User, list[str]]:
    match v:
        case Valid(row):
            return validated.map_n(User, check_id(row["id"]), check_name(row["name"]), semigroup=LIST_MONOID)
        case Invalid(err):
            return Invalid([err])


async def main() -> None:
    banner("03_validation: fail-fast pipeline with one accumulating step")

    rows = EitherT.right(ROWS, functor=LIST_MONAD)
    users = rows.with_validated(to_user, functor=LIST_MONAD)

    for result in users.value:
        match result:
            case Ok(user):
                print(f"ok: {user}")
            case Error(errors):
                print(f"rejected: {', '.join(errors)}")

    accepted = users.fold_left(0, lambda n, _: n + 1, foldable=LIST_TRAVERSE)
    print(f"accepted: {accepted}")


if __name__ == "__main__":
    run(main)
