from __future__ import annotations

from _infra import Failure, banner, run

from eithert import EitherT, OPTION, PartialFn, Some
from kungfu import Error, Ok

# Missing key -> None (carrier absence); present but malformed -> Error.
SETTINGS: dict[str, str] = {"port": "8080", "workers": "four"}

monad = OPTION.as_monad()


def setting(key: str) -> EitherT[str, Failure]:
    present = Some(SETTINGS[key]) if key in SETTINGS else None
    return EitherT.right(present, functor=monad)


def parse_int(raw: str) -> EitherT[int, Failure]:
    if raw.isdigit():
        return EitherT.pure(int(raw), applicative=monad)
    return EitherT.left(Some(Failure(f"not a number: {raw!r}")), functor=monad)


def show(label: str, w: EitherT[int, Failure]) -> None:
    match w.value:
        case None:
            print(f"{label}: not configured")
        case Some(Ok(value)):
            print(f"{label}: {value}")
        case Some(Error(err)):
            print(f"{label}: invalid ({err})")


async def main() -> None:
    banner("01_quickstart: EitherT over an optional carrier")

    port = setting("port").flat_map(parse_int, monad=monad).ensure(
        lambda p: p < 65536,
        error=lambda: Failure("port out of range"),
        functor=monad,
    )
    workers = setting("workers").flat_map(parse_int, monad=monad)
    timeout = setting("timeout").flat_map(parse_int, monad=monad)

    show("port", port)
    show("workers", workers)
    show("timeout", timeout)

    # Only malformed values are recovered; absence stays absence.
    fallback = PartialFn.when(lambda e: e.message.startswith("not a number"), lambda _: 1)
    show("workers (recovered)", workers.recover(fallback, functor=monad))
    show("timeout (recovered)", timeout.recover(fallback, functor=monad))


if __name__ == "__main__":
    run(main)
