"""
Layered effects library.

Composable effect wrappers that obey their laws when stacked:
state-threading (StateT), optional result (OptionalT) and log
accumulation (Logger), each generic over the effect it wraps.

Architecture:
- Instance objects (Functor / Applicative / Monad) carry the composition
  rules of an effect; values of the effect stay opaque
- Transformers take the instance of their inner effect and are instances themselves
- Pipelines stack transformers to deduplicate with abort and audit log
"""

# Core types
from ._types import EffectfulPredicate, Kind, Kleisli

# Internal helpers (for custom instances)
from . import _helpers

# Capabilities and concrete instances
from . import instance
from .instance import (
    IDENTITY,
    LIST,
    OPTION,
    Applicative,
    Functor,
    Id,
    Monad,
    Monoid,
    compose_kleisli,
    is_some,
    run_id,
    join,
    lift2,
    option_or,
    then,
    unwrap_option,
)

# Logger monad
from . import logger
from .logger import LOG, LOGGER, Log, Logger, LoggerMonad, emit, merge_logs, tell

# Transformers
from . import transformer
from .transformer import (
    STATE,
    OptionalT,
    OptionalTApplicative,
    OptionalTFunctor,
    OptionalTMonad,
    StateT,
    StateTFunctor,
    StateTMonad,
    eval_,
    eval_t,
    exec_,
    exec_t,
    run_state_,
    state_,
)

# Collection operations
from .collection import filtering, sequence, traverse

# Pipelines
from .pipeline import (
    DistinctPolicy,
    distinct,
    distinct_with_abort,
    distinct_with_abort_and_log,
)

# Errors
from ._errors import CapabilityError, NothingError

__all__ = (
    # Types
    "EffectfulPredicate",
    "Kind",
    "Kleisli",
    # Internal helpers (for custom instances)
    "_helpers",
    # Instances
    "instance",
    "Applicative",
    "Functor",
    "Monad",
    "Monoid",
    "IDENTITY",
    "LIST",
    "OPTION",
    "Id",
    "run_id",
    "compose_kleisli",
    "is_some",
    "join",
    "lift2",
    "option_or",
    "then",
    "unwrap_option",
    # Logger
    "logger",
    "LOG",
    "LOGGER",
    "Log",
    "Logger",
    "LoggerMonad",
    "emit",
    "merge_logs",
    "tell",
    # Transformers
    "transformer",
    "OptionalT",
    "OptionalTApplicative",
    "OptionalTFunctor",
    "OptionalTMonad",
    "StateT",
    "StateTFunctor",
    "StateTMonad",
    "eval_t",
    "exec_t",
    "STATE",
    "eval_",
    "exec_",
    "run_state_",
    "state_",
    # Collection
    "filtering",
    "sequence",
    "traverse",
    # Pipelines
    "DistinctPolicy",
    "distinct",
    "distinct_with_abort",
    "distinct_with_abort_and_log",
    # Errors
    "CapabilityError",
    "NothingError",
)
