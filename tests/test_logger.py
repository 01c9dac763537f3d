from __future__ import annotations

import random

import pytest

from layered import LOG, LOGGER, Log, Logger, LoggerMonad, emit, merge_logs, tell
from layered._helpers import compose, identity


def sample_loggers(rng: random.Random, count: int = 20) -> list[Logger[str, int]]:
    loggers = []
    for _ in range(count):
        entries = [f"e{rng.randint(0, 9)}" for _ in range(rng.randint(0, 3))]
        loggers.append(Logger(Log(entries), rng.randint(-50, 50)))
    return loggers


@pytest.fixture
def loggers() -> list[Logger[str, int]]:
    return sample_loggers(random.Random(1234))


def test_map_transforms_value_only() -> None:
    assert LOGGER.map(lambda x: x + 3, Logger(Log.of(1, 2), 3)) == Logger(Log.of(1, 2), 6)


def test_pure_has_empty_log() -> None:
    assert LOGGER.pure("table") == Logger(Log(), "table")


def test_apply_puts_left_log_first() -> None:
    result = LOGGER.apply(Logger(Log.of(1, 2), lambda x: x + 7), Logger(Log.of(3, 4), 3))
    assert result == Logger(Log.of(1, 2, 3, 4), 10)


def test_bind_appends_continuation_log() -> None:
    result = LOGGER.bind(lambda a: Logger(Log.of(4, 5), a + 3), Logger(Log.of(1, 2), 3))
    assert result == Logger(Log.of(1, 2, 4, 5), 6)


def test_emit_single_entry() -> None:
    assert emit(1, 2) == Logger(Log.of(1), 2)


def test_tell_logs_without_value() -> None:
    told = LOGGER.bind(lambda _: emit("c", 1), tell("a", "b"))
    assert tell("a", "b") == Logger(Log.of("a", "b"), None)
    assert told == Logger(Log.of("a", "b", "c"), 1)


def test_functor_laws(loggers: list[Logger[str, int]]) -> None:
    for fa in loggers:
        assert LOGGER.map(identity, fa) == fa
        assert LOGGER.map(str, LOGGER.map(abs, fa)) == LOGGER.map(compose(str, abs), fa)


def test_applicative_identity(loggers: list[Logger[str, int]]) -> None:
    for fa in loggers:
        assert LOGGER.apply(LOGGER.pure(identity), fa) == fa


def test_monad_laws(loggers: list[Logger[str, int]]) -> None:
    def g(x: int) -> Logger[str, int]:
        return emit(f"g {x}", x * 2)

    def h(x: int) -> Logger[str, int]:
        return Logger(Log.of("h", str(x)), x - 1)

    for fa in loggers:
        assert LOGGER.bind(g, LOGGER.pure(fa.value)) == g(fa.value)
        assert LOGGER.bind(LOGGER.pure, fa) == fa
        assert LOGGER.bind(h, LOGGER.bind(g, fa)) == LOGGER.bind(
            lambda x: LOGGER.bind(h, g(x)), fa
        )


def test_bind_log_order(loggers: list[Logger[str, int]]) -> None:
    for left, right in zip(loggers, reversed(loggers)):
        combined = LOGGER.bind(lambda _: right, left)
        assert list(combined.log) == [*left.log, *right.log]
        assert combined.value == right.value


def test_bind_does_not_mutate_operands() -> None:
    left = Logger(Log.of("a"), 1)
    right = Logger(Log.of("b"), 2)
    LOGGER.bind(lambda _: right, left)
    assert left.log == ["a"]
    assert right.log == ["b"]


class _SumMonoid:
    def empty(self) -> int:
        return 0

    def combine(self, left: int, right: int) -> int:
        return left + right


def test_log_monoid_is_swappable() -> None:
    counting = LoggerMonad(_SumMonoid())
    step = counting.bind(lambda x: Logger(2, x * 10), Logger(1, 4))
    assert step == Logger(3, 40)
    assert counting.pure("x") == Logger(0, "x")


def test_merge_logs() -> None:
    assert merge_logs([Log.of(1), Log(), Log.of(2, 3)]) == [1, 2, 3]


def test_log_combine_returns_new_log() -> None:
    log = Log.of("a")
    combined = log.combine(Log.of("b"))
    told = combined.tell("c")
    assert log == ["a"]
    assert combined == ["a", "b"]
    assert told == ["a", "b", "c"]
    assert isinstance(told, Log)


def test_log_monoid_keeps_left_when_right_is_empty() -> None:
    left = Log.of("a", "b")
    assert LOG.combine(left, Log()) is left
    assert LOG.combine(["a"], Log()) == Log.of("a")
    assert isinstance(LOG.combine(["a"], Log()), Log)


def test_long_bind_chain_keeps_every_entry_in_order() -> None:
    program = LOGGER.pure(0)
    for _ in range(10_000):
        program = LOGGER.bind(lambda x: emit(x, x + 1), program)
    assert program.value == 10_000
    assert list(program.log) == list(range(10_000))
