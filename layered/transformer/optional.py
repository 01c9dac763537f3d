"""
OptionalT
=========

Optional result over an arbitrary inner effect F:

    OptionalT[A] ~ F[Option[A]]

Absence short-circuits bind: once Nothing is produced, the continuation is
never called. The inner effect is still the outer layer, so whatever it
accumulated before the abort (e.g. a Logger's log) is kept.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass
from typing import assert_never

from kungfu import Nothing, Option, Some

from .._helpers import curry2
from .._types import Kind
from ..instance.option import option_apply, option_map
from ..instance.protocols import Applicative, Functor, Monad, require


@dataclass(frozen=True, slots=True)
class OptionalT[A]:
    """Inner effect producing an optional value: F[Option[A]]."""

    run: Kind


# ============================================================================
# Instances
# ============================================================================


class OptionalTFunctor:
    """Functor instance for OptionalT given a Functor inner effect."""

    __slots__ = ("_inner",)

    def __init__(self, inner: Functor) -> None:
        self._inner = require(inner, Functor)

    @property
    def inner(self) -> Functor:
        return self._inner

    def map[A, B](self, f: Callable[[A], B], fa: OptionalT[A], /) -> OptionalT[B]:
        """Map through both layers."""
        return OptionalT(self._inner.map(lambda option: option_map(f, option), fa.run))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._inner!r})"


class OptionalTApplicative(OptionalTFunctor):
    """Applicative instance for OptionalT given an Applicative inner effect."""

    __slots__ = ()

    _inner: Applicative

    def __init__(self, inner: Applicative) -> None:
        super().__init__(require(inner, Applicative))

    def pure[A](self, value: A, /) -> OptionalT[A]:
        return OptionalT(self._inner.pure(Some(value)))

    def apply[A, B](
        self,
        ff: OptionalT[Callable[[A], B]],
        fa: OptionalT[A],
        /,
    ) -> OptionalT[B]:
        """
        Combine inner effects first (left, then right), then apply option-wise.

        Both inner effects are sequenced even when the left option is Nothing.
        """
        inner = self._inner
        return OptionalT(inner.apply(inner.map(curry2(option_apply), ff.run), fa.run))

    def nothing(self) -> OptionalT[typing.Never]:
        """Absent result in the inner trivial case."""
        return OptionalT(self._inner.pure(Nothing()))

    def from_option[A](self, option: Option[A], /) -> OptionalT[A]:
        return OptionalT(self._inner.pure(option))

    def lift[A](self, fa: Kind, /) -> OptionalT[A]:
        """Lift an inner effect as a present result."""
        return OptionalT(self._inner.map(Some, fa))


class OptionalTMonad(OptionalTApplicative):
    """
    Monad instance for OptionalT given a Monad inner effect.

    Monadic laws hold relative to the inner monad's laws.
    """

    __slots__ = ()

    _inner: Monad

    def __init__(self, inner: Monad) -> None:
        super().__init__(require(inner, Monad))

    def bind[A, B](
        self,
        f: Callable[[A], OptionalT[B]],
        fa: OptionalT[A],
        /,
    ) -> OptionalT[B]:
        """
        Monadic bind (>>=).

        - On Some: f(value).run is returned as is
        - On Nothing: short-circuit, f is never called
        """
        inner = self._inner

        def continue_with(option: Option[A]) -> Kind:
            match option:
                case Some(value):
                    return f(value).run
                case Nothing():
                    return inner.pure(Nothing())
                case _ as unreachable:
                    assert_never(unreachable)

        return OptionalT(inner.bind(continue_with, fa.run))


__all__ = (
    "OptionalT",
    "OptionalTApplicative",
    "OptionalTFunctor",
    "OptionalTMonad",
)
