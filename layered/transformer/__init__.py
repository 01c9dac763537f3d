from .optional import OptionalT, OptionalTApplicative, OptionalTFunctor, OptionalTMonad
from .state import (
    STATE,
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

__all__ = (
    # OptionalT
    "OptionalT",
    "OptionalTApplicative",
    "OptionalTFunctor",
    "OptionalTMonad",
    # StateT
    "StateT",
    "StateTFunctor",
    "StateTMonad",
    "eval_t",
    "exec_t",
    # State'
    "STATE",
    "eval_",
    "exec_",
    "run_state_",
    "state_",
)
