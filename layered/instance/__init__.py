from .identity import IDENTITY, Id, IdentityMonad, run_id
from .option import (
    OPTION,
    OptionMonad,
    is_some,
    option_apply,
    option_bind,
    option_map,
    option_or,
    unwrap_option,
)
from .protocols import (
    Applicative,
    Functor,
    Monad,
    Monoid,
    compose_kleisli,
    join,
    lift2,
    require,
    then,
)
from .sequence import LIST, ListMonad

__all__ = (
    # Protocols
    "Applicative",
    "Functor",
    "Monad",
    "Monoid",
    "require",
    # Derived operations
    "compose_kleisli",
    "join",
    "lift2",
    "then",
    # Identity
    "IDENTITY",
    "Id",
    "IdentityMonad",
    "run_id",
    # Option
    "OPTION",
    "OptionMonad",
    "is_some",
    "option_apply",
    "option_bind",
    "option_map",
    "option_or",
    "unwrap_option",
    # List
    "LIST",
    "ListMonad",
)
