"""
Distinct pipelines
==================

Deduplication as a stateful filter over a seen-set, stacked over three
different inner effects:

- distinct                    State' (IDENTITY)          never aborts
- distinct_with_abort         StateT over OPTION         aborts on x > threshold
- distinct_with_abort_and_log StateT over OptionalT      aborts, keeps the log
                              over Logger

The seen-set is a frozenset threaded by value. Every element is inserted
whether or not it was novel.

Logger must stay the *inner* layer of OptionalT: Nothing then lives in the
value slot of a Logger, so the entries written before an abort survive it.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Sequence
from dataclasses import dataclass

from kungfu import Nothing, Option, Some

from ..instance.option import OPTION
from ..logger import LOGGER, Log, Logger, emit
from ..transformer.optional import OptionalT, OptionalTMonad
from ..transformer.state import STATE, StateT, StateTMonad, run_state_, state_

logger = logging.getLogger(__name__)

type SeenSet[A] = frozenset[A]


@dataclass(frozen=True, slots=True)
class DistinctPolicy:
    """
    Abort threshold and audit messages for the distinct pipelines.

    x <= threshold keeps going, x > threshold aborts.
    Messages are str.format templates with x and threshold fields.
    """

    threshold: int = 100
    even_message: str = "even number: {x}"
    abort_message: str = "aborting > {threshold}: {x}"

    def aborts(self, x: typing.Any) -> bool:
        return x > self.threshold

    def even(self, x: typing.Any) -> str:
        return self.even_message.format(x=x, threshold=self.threshold)

    def abort(self, x: typing.Any) -> str:
        return self.abort_message.format(x=x, threshold=self.threshold)


DEFAULT_POLICY = DistinctPolicy()

# StateT over OPTION, StateT over OptionalT over Logger
OPTION_STATE = StateTMonad(OPTION)
LOGGED_OPTION = OptionalTMonad(LOGGER)
LOGGED_OPTION_STATE = StateTMonad(LOGGED_OPTION)


def _observe[A](x: A, seen: SeenSet[A]) -> tuple[bool, SeenSet[A]]:
    """Novelty of x and the seen-set with x inserted."""
    if x in seen:
        return False, seen
    return True, seen | {x}


# ============================================================================
# distinct
# ============================================================================


def distinct[A](xs: Sequence[A]) -> list[A]:
    """
    Remove duplicates, keeping first occurrences in order.

    Example:
        distinct([1, 2, 3, 2, 1])  # [1, 2, 3]
    """

    def novel(x: A) -> StateT[SeenSet[A], bool]:
        return state_(lambda seen: _observe(x, seen))

    kept, _ = run_state_(STATE.filtering(novel, xs), frozenset())
    return kept


# ============================================================================
# distinct_with_abort
# ============================================================================


def distinct_with_abort[A](
    xs: Sequence[A],
    *,
    policy: DistinctPolicy = DEFAULT_POLICY,
) -> Option[list[A]]:
    """
    Remove duplicates, or Nothing if any element is above the threshold.

    Example:
        distinct_with_abort([1, 2, 3, 2, 1])       # Some([1, 2, 3])
        distinct_with_abort([1, 2, 3, 2, 1, 101])  # Nothing()
    """

    def novel(x: A) -> StateT[SeenSet[A], bool]:
        def run(seen: SeenSet[A]) -> Option[tuple[bool, SeenSet[A]]]:
            if policy.aborts(x):
                logger.debug("distinct_with_abort: aborting on %r", x)
                return Nothing()
            return Some(_observe(x, seen))

        return StateT(run)

    logger.debug("distinct_with_abort: %d items, threshold %r", len(xs), policy.threshold)
    result = OPTION_STATE.filtering(novel, xs).run(frozenset())
    return OPTION.map(lambda pair: pair[0], result)


# ============================================================================
# distinct_with_abort_and_log
# ============================================================================


def distinct_with_abort_and_log[A](
    xs: Sequence[A],
    *,
    policy: DistinctPolicy = DEFAULT_POLICY,
) -> Logger[str, Option[list[A]]]:
    """
    Remove duplicates with an audit log, or abort above the threshold.

    Even elements log policy.even(x). An element above the threshold logs
    policy.abort(x) and aborts; the log written up to and including the
    abort is kept next to Nothing.

    Example:
        distinct_with_abort_and_log([1, 2, 3, 2, 6])
        # Logger(Log(['even number: 2', 'even number: 2', 'even number: 6']), Some([1, 2, 3, 6]))
    """

    def novel(x: A) -> StateT[SeenSet[A], bool]:
        def run(seen: SeenSet[A]) -> OptionalT[tuple[bool, SeenSet[A]]]:
            if policy.aborts(x):
                logger.debug("distinct_with_abort_and_log: aborting on %r", x)
                return OptionalT(emit(policy.abort(x), Nothing()))
            observed: Option[tuple[bool, SeenSet[A]]] = Some(_observe(x, seen))
            if x % 2 == 0:
                return OptionalT(emit(policy.even(x), observed))
            return OptionalT(Logger(Log(), observed))

        return StateT(run)

    logger.debug(
        "distinct_with_abort_and_log: %d items, threshold %r", len(xs), policy.threshold
    )
    result = LOGGED_OPTION_STATE.filtering(novel, xs).run(frozenset())
    return LOGGED_OPTION.map(lambda pair: pair[0], result).run


__all__ = (
    "DEFAULT_POLICY",
    "DistinctPolicy",
    "distinct",
    "distinct_with_abort",
    "distinct_with_abort_and_log",
)
