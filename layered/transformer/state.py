"""
StateT
======

State-threading over an arbitrary inner effect F:

    StateT[S, A] ~ S -> F[(A, S)]

The wrapper never inspects F-values. map/pure/apply/bind are delegated to
the inner instance, so a branching inner effect (LIST) fans out and a
non-branching one (IDENTITY, OPTION) collapses to a single result without
any special casing here.

State' is StateT over IDENTITY: see state_, run_state_, exec_, eval_.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .._helpers import Stack, first, push, unwind
from .._types import Kind
from ..instance.identity import IDENTITY, Id, run_id
from ..instance.protocols import Functor, Monad, require


@dataclass(frozen=True, slots=True)
class StateT[S, A]:
    """
    Function from a state to an inner effect of (value, new state).

    run is the only thing that evaluates. Calling it twice with the same
    state gives the same result: nothing is mutated in place.
    """

    run: Callable[[S], Kind]


# ============================================================================
# Instances
# ============================================================================


class StateTFunctor:
    """Functor instance for StateT given a Functor inner effect."""

    __slots__ = ("_inner",)

    def __init__(self, inner: Functor) -> None:
        self._inner = require(inner, Functor)

    @property
    def inner(self) -> Functor:
        return self._inner

    def map[S, A, B](self, f: Callable[[A], B], fa: StateT[S, A], /) -> StateT[S, B]:
        """Transform the produced value, leave the state untouched."""
        inner = self._inner

        def run(state: S) -> Kind:
            return inner.map(first(f), fa.run(state))

        return StateT(run)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._inner!r})"


class StateTMonad(StateTFunctor):
    """
    Applicative and Monad instance for StateT given a Monad inner effect.

    State threads strictly left to right: the state produced by the left
    operand is the input state of the right one, on every branch.
    """

    __slots__ = ()

    _inner: Monad

    def __init__(self, inner: Monad) -> None:
        super().__init__(require(inner, Monad))

    @property
    def inner(self) -> Monad:
        return self._inner

    # Applicative operations

    def pure[S, A](self, value: A, /) -> StateT[S, A]:
        """Yield value, keep the state."""
        inner = self._inner

        def run(state: S) -> Kind:
            return inner.pure((value, state))

        return StateT(run)

    def apply[S, A, B](
        self,
        ff: StateT[S, Callable[[A], B]],
        fa: StateT[S, A],
        /,
    ) -> StateT[S, B]:
        """Run ff, then fa from ff's output state, then apply the function."""
        inner = self._inner

        def run(state: S) -> Kind:
            def continue_with(pair: tuple[Callable[[A], B], S]) -> Kind:
                f, next_state = pair
                return inner.map(first(f), fa.run(next_state))

            return inner.bind(continue_with, ff.run(state))

        return StateT(run)

    # Monad operations

    def bind[S, A, B](
        self,
        f: Callable[[A], StateT[S, B]],
        fa: StateT[S, A],
        /,
    ) -> StateT[S, B]:
        """
        Monadic bind (>>=).

        Run fa, build the next computation from its value and run it from
        the state fa left behind.
        """
        inner = self._inner

        def run(state: S) -> Kind:
            def continue_with(pair: tuple[A, S]) -> Kind:
                value, next_state = pair
                return f(value).run(next_state)

            return inner.bind(continue_with, fa.run(state))

        return StateT(run)

    # State operations

    def get[S](self) -> StateT[S, S]:
        """Produce the current state as the value."""
        inner = self._inner

        def run(state: S) -> Kind:
            return inner.pure((state, state))

        return StateT(run)

    def put[S](self, state: S, /) -> StateT[S, None]:
        """Replace the state."""
        inner = self._inner

        def run(_: S) -> Kind:
            return inner.pure((None, state))

        return StateT(run)

    def modify[S](self, f: Callable[[S], S], /) -> StateT[S, None]:
        """Replace the state with f(state)."""
        inner = self._inner

        def run(state: S) -> Kind:
            return inner.pure((None, f(state)))

        return StateT(run)

    # Collection operations

    def filtering[S, A](
        self,
        predicate: Callable[[A], StateT[S, bool]],
        items: Sequence[A],
        /,
    ) -> StateT[S, list[A]]:
        """
        Keep items whose stateful predicate yields True.

        Same effects and ordering as collection.filtering(self, ...), but run
        threads (kept, state) through the inner bind in a loop, so the stack
        depth does not grow with len(items) for an eager inner effect
        (IDENTITY, OPTION, LIST, Logger, OptionalT over those).
        predicate(item) is only called when its step is reached: after an
        inner short-circuit it never is.
        """
        inner = self._inner

        def step(item: A) -> Callable[[tuple[Stack[A], S]], Kind]:
            def continue_with(pair: tuple[Stack[A], S]) -> Kind:
                kept, state = pair

                def keep_if(result: tuple[bool, S]) -> tuple[Stack[A], S]:
                    keep, next_state = result
                    return (push(kept, item) if keep else kept), next_state

                return inner.map(keep_if, predicate(item).run(state))

            return continue_with

        def run(state: S) -> Kind:
            acc = inner.pure((None, state))
            for item in items:
                acc = inner.bind(step(item), acc)
            return inner.map(first(unwind), acc)

        return StateT(run)

    def lift[S](self, fa: Kind, /) -> StateT[S, typing.Any]:
        """Lift an inner effect, the state passes through unchanged."""
        inner = self._inner

        def run(state: S) -> Kind:
            return inner.map(lambda value: (value, state), fa)

        return StateT(run)


# ============================================================================
# Running
# ============================================================================


def exec_t[S](inner: Functor, st: StateT[S, typing.Any], state: S) -> Kind:
    """Run from state, keep only the resulting state: F[S]."""
    return inner.map(lambda pair: pair[1], st.run(state))


def eval_t[S](inner: Functor, st: StateT[S, typing.Any], state: S) -> Kind:
    """Run from state, keep only the produced value: F[A]."""
    return inner.map(lambda pair: pair[0], st.run(state))


# ============================================================================
# State' = StateT over IDENTITY
# ============================================================================

STATE = StateTMonad(IDENTITY)


def state_[S, A](f: Callable[[S], tuple[A, S]]) -> StateT[S, A]:
    """Build a State' from a plain state transition."""
    def run(state: S) -> Id[tuple[A, S]]:
        return Id(f(state))
    return StateT(run)


def run_state_[S, A](st: StateT[S, A], state: S) -> tuple[A, S]:
    """Run a State' and unwrap the identity."""
    return run_id(st.run(state))


def exec_[S](st: StateT[S, typing.Any], state: S) -> S:
    return run_state_(st, state)[1]


def eval_[S, A](st: StateT[S, A], state: S) -> A:
    return run_state_(st, state)[0]


__all__ = (
    "STATE",
    "StateT",
    "StateTFunctor",
    "StateTMonad",
    "eval_",
    "eval_t",
    "exec_",
    "exec_t",
    "run_state_",
    "state_",
)
