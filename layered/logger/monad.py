"""Logger Monad

Pair of an accumulated log and a result value.

Combining two Loggers always puts the left log first. That order is what
makes bind associative: (a ++ b) ++ c == a ++ (b ++ c)."""

from __future__ import annotations

import typing
from collections.abc import Callable

from ..instance.protocols import Monoid, require
from .log import LOG, Log


class Logger[L, A]:
    """
    Log entries of type L paired with a value of type A.

    Immutable: every operation returns a new Logger.
    """

    __slots__ = ("_log", "_value")
    __match_args__ = ("_log", "_value")

    def __init__(self, log: Log[L], value: A) -> None:
        self._log = log
        self._value = value

    @property
    def log(self) -> Log[L]:
        """The accumulated log."""
        return self._log

    @property
    def value(self) -> A:
        """The produced value."""
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Logger):
            return NotImplemented
        return self._log == other._log and self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Logger({self._log!r}, {self._value!r})"


class LoggerMonad:
    """
    Monad instance for Logger.

    The log combination is an explicit monoid (LOG = list append by default),
    so any associative combine with identity can back the log.

    Monadic laws:
    - Left identity: bind(f, pure(a)) == f(a)
    - Right identity: bind(pure, m) == m
    - Associativity: bind(h, bind(g, m)) == bind(lambda x: bind(h, g(x)), m)
    """

    __slots__ = ("_monoid",)

    def __init__(self, monoid: Monoid[typing.Any] = LOG) -> None:
        self._monoid = require(monoid, Monoid)

    @property
    def monoid(self) -> Monoid[typing.Any]:
        return self._monoid

    # Functor operations

    def map[L, A, B](self, f: Callable[[A], B], fa: Logger[L, A], /) -> Logger[L, B]:
        """Transform the value, log unchanged."""
        return Logger(fa.log, f(fa.value))

    # Applicative operations

    def pure[L, A](self, value: A, /) -> Logger[L, A]:
        """Empty log, given value."""
        return Logger(self._monoid.empty(), value)

    def apply[L, A, B](
        self,
        lf: Logger[L, Callable[[A], B]],
        lx: Logger[L, A],
        /,
    ) -> Logger[L, B]:
        """Left log first, then right log; value is lf.value(lx.value)."""
        return Logger(self._monoid.combine(lf.log, lx.log), lf.value(lx.value))

    # Monad operations

    def bind[L, A, B](
        self,
        f: Callable[[A], Logger[L, B]],
        fa: Logger[L, A],
        /,
    ) -> Logger[L, B]:
        """
        Monadic bind (>>=).

        Log of fa followed by the log of f(fa.value).
        """
        following = f(fa.value)
        return Logger(self._monoid.combine(fa.log, following.log), following.value)

    def __repr__(self) -> str:
        return f"LoggerMonad({self._monoid!r})"


LOGGER = LoggerMonad()

# Convenience Constructors (Log-backed, for the default LOG monoid)
def emit[L, A](entry: L, value: A) -> Logger[L, A]:
    """
    Single-entry log paired with value.

    Example:
        emit("even number: 2", 2)  # Logger(Log(['even number: 2']), 2)
    """
    return Logger(Log.of(entry), value)

def tell[L](*entries: L) -> Logger[L, None]:
    """Write entries to a Log without producing a value."""
    return Logger(Log.of(*entries), None)

__all__ = ("LOGGER", "Logger", "LoggerMonad", "emit", "tell")
