"""Identity effect: exactly one value, no branching, no absence."""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from .._types import Kleisli


@dataclass(frozen=True, slots=True)
class Id[A]:
    """Trivial box around a value."""

    value: A


class IdentityMonad:
    """Monad instance for Id."""

    __slots__ = ()

    def map[A, B](self, f: Callable[[A], B], fa: Id[A], /) -> Id[B]:
        return Id(f(fa.value))

    def pure[A](self, value: A, /) -> Id[A]:
        return Id(value)

    def apply[A, B](self, ff: Id[Callable[[A], B]], fa: Id[A], /) -> Id[B]:
        return Id(ff.value(fa.value))

    def bind[A](self, f: Kleisli[A], fa: Id[A], /) -> typing.Any:
        return f(fa.value)

    def __repr__(self) -> str:
        return "IDENTITY"


IDENTITY = IdentityMonad()

def run_id[A](fa: Id[A]) -> A:
    """Unwrap an Id."""
    return fa.value

__all__ = ("IDENTITY", "Id", "IdentityMonad", "run_id")
