from .distinct import (
    DEFAULT_POLICY,
    DistinctPolicy,
    distinct,
    distinct_with_abort,
    distinct_with_abort_and_log,
)

__all__ = (
    "DEFAULT_POLICY",
    "DistinctPolicy",
    "distinct",
    "distinct_with_abort",
    "distinct_with_abort_and_log",
)
