from __future__ import annotations

import pytest
from kungfu import Nothing, Some

from layered import (
    IDENTITY,
    LIST,
    LOGGER,
    CapabilityError,
    Id,
    Log,
    Logger,
    OptionalT,
    OptionalTApplicative,
    OptionalTMonad,
    emit,
)
from layered._helpers import compose, identity

from .helpers import INNER, norm

INNER_FOR_OPTIONAL = ("identity", "list", "logger")


def sample_optionals(name: str) -> list[OptionalT[int]]:
    _, variants = INNER[name]
    return [OptionalT(fa) for option in (Some(3), Nothing()) for fa in variants(option)]


@pytest.mark.parametrize("name", INNER_FOR_OPTIONAL)
def test_functor_laws(name: str) -> None:
    m = OptionalTMonad(INNER[name][0])
    for fa in sample_optionals(name):
        assert norm(m.map(identity, fa)) == norm(fa)
        assert norm(m.map(str, m.map(abs, fa))) == norm(m.map(compose(str, abs), fa))


@pytest.mark.parametrize("name", INNER_FOR_OPTIONAL)
def test_applicative_laws(name: str) -> None:
    inner, variants = INNER[name]
    m = OptionalTMonad(inner)
    for fa in sample_optionals(name):
        assert norm(m.apply(m.pure(identity), fa)) == norm(fa)
    assert norm(m.apply(m.pure(abs), m.pure(-4))) == norm(m.pure(4))
    for option in (Some(abs), Nothing()):
        for ff in variants(option):
            u = OptionalT(ff)
            assert norm(m.apply(u, m.pure(-7))) == norm(m.apply(m.pure(lambda f: f(-7)), u))


@pytest.mark.parametrize("name", INNER_FOR_OPTIONAL)
def test_monad_laws(name: str) -> None:
    inner, variants = INNER[name]
    m = OptionalTMonad(inner)

    def g(x: int) -> OptionalT[int]:
        return OptionalT(variants(Some(x + 1))[0]) if x > 0 else m.nothing()

    def h(x: int) -> OptionalT[int]:
        return OptionalT(variants(Some(x * 2))[-1])

    for value in (-1, 2):
        assert norm(m.bind(g, m.pure(value))) == norm(g(value))
    for fa in sample_optionals(name):
        assert norm(m.bind(m.pure, fa)) == norm(fa)
        assert norm(m.bind(h, m.bind(g, fa))) == norm(m.bind(lambda x: m.bind(h, g(x)), fa))


def test_map_over_list() -> None:
    m = OptionalTMonad(LIST)
    result = m.map(lambda x: x + 1, OptionalT([Some(1), Nothing()]))
    assert norm(result.run) == [("Some", 2), ("Nothing",)]


def test_apply_over_list_sequences_both_sides() -> None:
    m = OptionalTMonad(LIST)
    ff = OptionalT([Some(lambda x: x + 1), Some(lambda x: x + 2)])
    fa = OptionalT([Some(1), Nothing()])
    assert norm(m.apply(ff, fa).run) == [("Some", 2), ("Nothing",), ("Some", 3), ("Nothing",)]


def test_apply_keeps_both_logs_when_left_is_nothing() -> None:
    m = OptionalTMonad(LOGGER)
    ff = OptionalT(emit("left", Nothing()))
    fa = OptionalT(emit("right", Some(1)))
    result = m.apply(ff, fa).run
    assert list(result.log) == ["left", "right"]
    assert norm(result.value) == ("Nothing",)


def test_bind_over_list() -> None:
    m = OptionalTMonad(LIST)
    result = m.bind(
        lambda a: OptionalT([Some(a + 1), Some(a + 2)]),
        OptionalT([Some(1), Nothing()]),
    )
    assert norm(result.run) == [("Some", 2), ("Some", 3), ("Nothing",)]


def test_bind_short_circuits_on_nothing() -> None:
    m = OptionalTMonad(LOGGER)

    def poisoned(_: int) -> OptionalT[int]:
        pytest.fail("continuation called after Nothing")

    result = m.bind(poisoned, OptionalT(emit("before abort", Nothing()))).run
    assert list(result.log) == ["before abort"]
    assert norm(result.value) == ("Nothing",)


def test_bind_returns_continuation_effect_unwrapped() -> None:
    m = OptionalTMonad(LOGGER)
    result = m.bind(
        lambda x: OptionalT(emit(f"got {x}", Some(x * 2))),
        OptionalT(emit("start", Some(5))),
    )
    assert list(result.run.log) == ["start", "got 5"]
    assert norm(result.run.value) == ("Some", 10)


def test_abort_in_the_middle_keeps_earlier_log() -> None:
    m = OptionalTMonad(LOGGER)
    calls = []

    def step(x: int) -> OptionalT[int]:
        calls.append(x)
        if x > 2:
            return OptionalT(emit(f"abort at {x}", Nothing()))
        return OptionalT(emit(f"step {x}", Some(x + 1)))

    program = m.pure(0)
    for _ in range(6):
        program = m.bind(step, program)

    assert list(program.run.log) == ["step 0", "step 1", "step 2", "abort at 3"]
    assert norm(program.run.value) == ("Nothing",)
    assert calls == [0, 1, 2, 3]


def test_constructors() -> None:
    m = OptionalTMonad(IDENTITY)
    assert norm(m.nothing().run) == ("Id", ("Nothing",))
    assert norm(m.pure(1).run) == ("Id", ("Some", 1))
    assert norm(m.from_option(Some("x")).run) == ("Id", ("Some", "x"))
    assert norm(OptionalTMonad(LIST).lift([1, 2]).run) == [("Some", 1), ("Some", 2)]
    assert norm(OptionalTMonad(LOGGER).lift(emit("e", 3)).run) == ("Logger", ["e"], ("Some", 3))


class _ZipList:
    """Applicative without bind."""

    def map(self, f, fa):
        return [f(a) for a in fa]

    def pure(self, value):
        return [value]

    def apply(self, ff, fa):
        return [f(a) for f, a in zip(ff, fa)]


def test_applicative_needs_only_applicative_inner() -> None:
    m = OptionalTApplicative(_ZipList())
    ff = OptionalT([Some(lambda x: x + 1), Nothing()])
    fa = OptionalT([Some(1), Some(2)])
    assert norm(m.apply(ff, fa).run) == [("Some", 2), ("Nothing",)]
    with pytest.raises(CapabilityError):
        OptionalTMonad(_ZipList())


def test_equal_values_for_identity() -> None:
    m = OptionalTMonad(IDENTITY)
    assert norm(m.map(str, OptionalT(Id(Some(1))))) == ("OptionalT", ("Id", ("Some", "1")))
    assert Logger(Log(), 1) == LOGGER.pure(1)
