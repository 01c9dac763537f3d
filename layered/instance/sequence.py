"""List instance: the branching effect.

A list of results is a nondeterministic computation. bind is flat-map in
order, apply is the cartesian product with the left operand outermost."""

from __future__ import annotations

from collections.abc import Callable


class ListMonad:
    """Monad instance for list."""

    __slots__ = ()

    def map[A, B](self, f: Callable[[A], B], fa: list[A], /) -> list[B]:
        return [f(a) for a in fa]

    def pure[A](self, value: A, /) -> list[A]:
        return [value]

    def apply[A, B](self, ff: list[Callable[[A], B]], fa: list[A], /) -> list[B]:
        return [f(a) for f in ff for a in fa]

    def bind[A, B](self, f: Callable[[A], list[B]], fa: list[A], /) -> list[B]:
        result: list[B] = []
        for a in fa:
            result.extend(f(a))
        return result

    def __repr__(self) -> str:
        return "LIST"


LIST = ListMonad()

__all__ = ("LIST", "ListMonad")
