from __future__ import annotations

from _infra import Failure, FakeBackend, User, banner, run

from eithert import EitherT, EitherTInstances, from_lazy_coro_result, to_lazy_coro_result
from kungfu import Error, LazyCoroResult, Ok


def fetch(api: FakeBackend, user_id: int) -> EitherT[User, Failure]:
    return from_lazy_coro_result(LazyCoroResult(lambda: api.fetch_user(user_id)))


async def report(greeting: EitherT[str, Failure], primary: FakeBackend, replica: FakeBackend) -> None:
    match await to_lazy_coro_result(greeting):
        case Ok(message):
            print(message)
        case Error(err):
            print(f"error: {err}")
    print(f"calls: primary={primary.calls} replica={replica.calls}")


async def main() -> None:
    banner("02_async_fallback: EitherT over LazyCoro + SemigroupK fallback")

    primary = FakeBackend(name="primary", delay_seconds=0.01, failures_before_ok=1)
    replica = FakeBackend(name="replica", delay_seconds=0.01)

    instances = EitherTInstances.for_carrier("lazy_coro")
    monad = instances.require("monad")
    fallback = instances.require("semigroup_k")

    # The replica is only called when the primary fails.
    user = fallback.combine_k(fetch(primary, 42), fetch(replica, 42))
    greeting = monad.map(user, lambda u: f"hello, {u.name}")

    await report(greeting, primary, replica)
    # Every await reruns the pipeline: the primary has recovered, the replica stays idle.
    await report(greeting, primary, replica)


if __name__ == "__main__":
    run(main)
