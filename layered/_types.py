"""
Core type definitions for layered.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

# ============================================================================
# Type aliases
# ============================================================================

# Kind = opaque value of some effect F[A]
# NOTE: Python не умеет в higher-kinded types, поэтому F[A] для обёрток
#       непрозрачен. Композицией управляет instance-объект (Functor/Monad).
type Kind = typing.Any

# EffectfulPredicate = A -> F[bool]
type EffectfulPredicate[A] = Callable[[A], Kind]

# Kleisli = A -> F[B]
type Kleisli[A] = Callable[[A], Kind]

__all__ = (
    "EffectfulPredicate",
    "Kind",
    "Kleisli",
)
