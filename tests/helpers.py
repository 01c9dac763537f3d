"""Shared test helpers: comparable views of effect values and sample inner effects."""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Nothing, Some

from layered import (
    IDENTITY,
    LIST,
    LOGGER,
    OPTION,
    Id,
    Log,
    Logger,
    OptionalT,
    OptionalTMonad,
    unwrap_option,
)


def norm(value: typing.Any) -> typing.Any:
    """Structural view of nested effect values, usable with ==."""
    match value:
        case Some():
            return ("Some", norm(unwrap_option(value)))
        case Nothing():
            return ("Nothing",)
        case Logger():
            return ("Logger", [norm(entry) for entry in value.log], norm(value.value))
        case Id():
            return ("Id", norm(value.value))
        case OptionalT():
            return ("OptionalT", norm(value.run))
        case list():
            return [norm(item) for item in value]
        case tuple():
            return tuple(norm(item) for item in value)
        case _:
            return value


# name -> (instance, variants) where variants(v) lists F-values carrying v
type Variants = Callable[[typing.Any], list[typing.Any]]

INNER: dict[str, tuple[typing.Any, Variants]] = {
    "identity": (IDENTITY, lambda v: [Id(v)]),
    "option": (OPTION, lambda v: [Some(v), Nothing()]),
    "list": (LIST, lambda v: [[v], [v, v], []]),
    "logger": (
        LOGGER,
        lambda v: [Logger(Log.of(f"at {v!r}"), v), Logger(Log(), v)],
    ),
    "optional_logger": (
        OptionalTMonad(LOGGER),
        lambda v: [
            OptionalT(Logger(Log.of(f"at {v!r}"), Some(v))),
            OptionalT(Logger(Log.of("gone"), Nothing())),
        ],
    ),
}

STATES = (0, 1, 5)
