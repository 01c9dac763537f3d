"""
Option instance
===============

Zero-or-one value effect built on kungfu's Option (Some / Nothing).

Absence short-circuits: once Nothing appears, map/apply/bind never call
the user function again.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from typing import assert_never

from kungfu import Nothing, Option, Some

from .._errors import NothingError


# ============================================================================
# Plain option functions
# ============================================================================


def option_map[A, B](f: Callable[[A], B], option: Option[A], /) -> Option[B]:
    """Apply f to the present value, keep Nothing as is."""
    match option:
        case Some(value):
            return Some(f(value))
        case Nothing():
            return Nothing()
        case _ as unreachable:
            assert_never(unreachable)


def option_apply[A, B](
    of: Option[Callable[[A], B]],
    option: Option[A],
    /,
) -> Option[B]:
    """Apply optional function to optional value. Nothing if either side is Nothing."""
    match of:
        case Some(f):
            return option_map(f, option)
        case Nothing():
            return Nothing()
        case _ as unreachable:
            assert_never(unreachable)


def option_bind[A, B](f: Callable[[A], Option[B]], option: Option[A], /) -> Option[B]:
    """Monadic bind for Option. f is not called on Nothing."""
    match option:
        case Some(value):
            return f(value)
        case Nothing():
            return Nothing()
        case _ as unreachable:
            assert_never(unreachable)


def is_some(option: Option[typing.Any], /) -> bool:
    return isinstance(option, Some)


def option_or[A](option: Option[A], default: A, /) -> A:
    """Present value or default."""
    match option:
        case Some(value):
            return value
        case Nothing():
            return default
        case _ as unreachable:
            assert_never(unreachable)


def unwrap_option[A](option: Option[A], /) -> A:
    """
    Present value or NothingError.

    NOTE: Для тестов и границ системы. Внутри композиции используйте bind.
    """
    match option:
        case Some(value):
            return value
        case Nothing():
            raise NothingError()
        case _ as unreachable:
            assert_never(unreachable)


# ============================================================================
# Monad instance
# ============================================================================


class OptionMonad:
    """Monad instance for kungfu Option."""

    __slots__ = ()

    def map[A, B](self, f: Callable[[A], B], fa: Option[A], /) -> Option[B]:
        return option_map(f, fa)

    def pure[A](self, value: A, /) -> Option[A]:
        return Some(value)

    def apply[A, B](self, ff: Option[Callable[[A], B]], fa: Option[A], /) -> Option[B]:
        return option_apply(ff, fa)

    def bind[A, B](self, f: Callable[[A], Option[B]], fa: Option[A], /) -> Option[B]:
        return option_bind(f, fa)

    def __repr__(self) -> str:
        return "OPTION"


OPTION = OptionMonad()

__all__ = (
    "OPTION",
    "OptionMonad",
    "is_some",
    "option_apply",
    "option_bind",
    "option_map",
    "option_or",
    "unwrap_option",
)
