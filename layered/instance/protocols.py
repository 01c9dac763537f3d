"""
Capability protocols
====================

Functor / Applicative / Monad / Monoid как явные instance-объекты.

Effect values (F[A]) are opaque: an instance object knows how to compose
them. Transformers take the instance of their inner effect as a constructor
argument, so the bound "F is a Monad" is a type of that argument.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._errors import CapabilityError
from .._helpers import curry2, identity
from .._types import Kind, Kleisli


@typing.runtime_checkable
class Functor(typing.Protocol):
    """
    Value transformation inside an effect.

    Laws:
    - Identity: map(identity, fa) == fa
    - Composition: map(g, map(f, fa)) == map(compose(g, f), fa)
    """

    def map(self, f: Callable[[typing.Any], typing.Any], fa: Kind, /) -> Kind: ...


@typing.runtime_checkable
class Applicative(Functor, typing.Protocol):
    """
    Wrap a value with no effect, combine two independent effects.

    Laws:
    - Identity: apply(pure(identity), fa) == fa
    - Homomorphism: apply(pure(f), pure(x)) == pure(f(x))
    - Interchange: apply(ff, pure(y)) == apply(pure(lambda f: f(y)), ff)
    """

    def pure(self, value: typing.Any, /) -> Kind: ...

    def apply(self, ff: Kind, fa: Kind, /) -> Kind: ...


@typing.runtime_checkable
class Monad(Applicative, typing.Protocol):
    """
    Sequencing where the next effect depends on the previous value.

    Laws:
    - Left identity: bind(f, pure(a)) == f(a)
    - Right identity: bind(pure, m) == m
    - Associativity: bind(h, bind(g, m)) == bind(lambda x: bind(h, g(x)), m)
    """

    def bind(self, f: Kleisli[typing.Any], fa: Kind, /) -> Kind: ...


@typing.runtime_checkable
class Monoid[W](typing.Protocol):
    """
    Associative combine with identity element.

    Laws:
    - Left identity: combine(empty(), x) == x
    - Right identity: combine(x, empty()) == x
    - Associativity: combine(combine(x, y), z) == combine(x, combine(y, z))
    """

    def empty(self) -> W: ...

    def combine(self, left: W, right: W, /) -> W: ...


def require[C](instance: object, capability: type[C]) -> C:
    """Check that instance implements capability, raise CapabilityError otherwise."""
    if not isinstance(instance, capability):
        raise CapabilityError(instance, capability.__name__)
    return typing.cast(C, instance)


# ============================================================================
# Derived operations
# ============================================================================


def lift2[A, B, C](
    m: Applicative,
    f: Callable[[A, B], C],
    fa: Kind,
    fb: Kind,
) -> Kind:
    """
    Combine two effects with a binary function. fa's effect runs first.
    """
    return m.apply(m.map(curry2(f), fa), fb)


def join(m: Monad, ffa: Kind) -> Kind:
    """Flatten one layer of nesting: F[F[A]] -> F[A]."""
    return m.bind(identity, ffa)


def then(m: Monad, fa: Kind, fb: Kind) -> Kind:
    """Sequence fa before fb, keep fb's value (Haskell's >>)."""
    def discard(_: object) -> Kind:
        return fb
    return m.bind(discard, fa)


def compose_kleisli[A, B, C](m: Monad, f: Kleisli[A], g: Kleisli[B]) -> Kleisli[A]:
    """
    Kleisli composition (>=>): run f, feed its value into g.
    """
    def composed(a: A) -> Kind:
        return m.bind(g, f(a))
    return composed


__all__ = (
    "Applicative",
    "Functor",
    "Monad",
    "Monoid",
    "compose_kleisli",
    "join",
    "lift2",
    "require",
    "then",
)
