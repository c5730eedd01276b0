from eithert import Eval


def counter():
    calls = []

    def thunk():
        calls.append(1)
        return len(calls)

    return calls, thunk


def test_now():
    assert Eval.now(3).value() == 3


def test_later_runs_once():
    calls, thunk = counter()
    e = Eval.later(thunk)
    assert calls == []
    assert e.value() == 1
    assert e.value() == 1
    assert calls == [1]


def test_always_runs_every_time():
    calls, thunk = counter()
    e = Eval.always(thunk)
    assert e.value() == 1
    assert e.value() == 2


def test_memoize_caches_always():
    calls, thunk = counter()
    e = Eval.always(thunk).map(lambda x: x * 10).memoize()
    assert e.value() == 10
    assert e.value() == 10
    assert len(calls) == 1


def test_map_and_flat_map_are_descriptions():
    calls, thunk = counter()
    e = Eval.later(thunk).map(lambda x: x + 1).flat_map(lambda x: Eval.now(x * 2))
    assert calls == []
    assert e.value() == 4


def test_left_nested_flat_map_chain_is_stack_safe():
    e = Eval.now(0)
    for _ in range(100_000):
        e = e.flat_map(lambda x: Eval.now(x + 1))
    assert e.value() == 100_000


def test_deferred_recursion_is_stack_safe():
    def count(n):
        if n == 0:
            return Eval.now(0)
        return Eval.defer(lambda: count(n - 1)).map(lambda x: x + 1)

    assert count(100_000).value() == 100_000


def test_repr():
    assert repr(Eval.now(1)) == "Now(1)"
    later = Eval.later(lambda: 2)
    assert repr(later) == "Later(<pending>)"
    later.value()
    assert repr(later) == "Later(2)"
