"""Traverse combinators

Applicative traverse / sequence / filtering over any instance.

Effects are sequenced left to right: the accumulated effect of earlier
items is always the left operand of apply, so a stateful instance sees
items in input order. Results are pushed onto cons cells and turned into
a list once, at the end.

NOTE: For a lazy instance (StateT) the fold builds one nested closure per
item, which run then walks recursively. StateTMonad.filtering threads the
items in a loop instead and is what the pipelines use."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from .._helpers import Stack, push, unwind
from .._types import EffectfulPredicate, Kind
from ..instance.protocols import Applicative, lift2


def traverse[A](
    m: Applicative,
    f: Callable[[A], Kind],
    items: Iterable[A],
) -> Kind:
    """Monadic map: A -> F[B] over items, giving F[list[B]]."""
    return sequence(m, (f(item) for item in items))


def sequence(m: Applicative, effects: Iterable[Kind]) -> Kind:
    """F[A] values in order to F[list[A]]."""
    acc = m.pure(None)
    for effect in effects:
        acc = lift2(m, push, acc, effect)
    return m.map(unwind, acc)


def filtering[A](
    m: Applicative,
    predicate: EffectfulPredicate[A],
    items: Sequence[A],
) -> Kind:
    """
    Keep items whose effectful predicate yields True: F[list[A]].

    Retained items keep their input order. predicate(item) only builds the
    effect; nothing is evaluated until the resulting effect is run.
    """
    acc = m.pure(None)
    for item in items:
        def keep_if(kept: Stack[A], keep: bool, item: A = item) -> Stack[A]:
            return push(kept, item) if keep else kept

        acc = lift2(m, keep_if, acc, predicate(item))
    return m.map(unwind, acc)


__all__ = ("filtering", "sequence", "traverse")
