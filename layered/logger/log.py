"""
Log - Моноидный аккумулятор для Logger
======================================
"""

from __future__ import annotations

from collections.abc import Iterable


class Log[A](list[A]):
    """
    Log accumulator for the Logger monad.

    Обёртка над list с моноидными операциями:
    - empty: пустой лог (просто Log())
    - combine: конкатенация логов, левый операнд первым

    Методы никогда не мутируют self, каждый возвращает новый Log.
    """

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        """Create log with items."""
        return Log[T](items)

    def combine(self, other: Iterable[A], /) -> Log[A]:
        """
        Combine two logs (monoidal append).

        Example:
            Log.of("a", "b").combine(Log.of("c"))  # Log(["a", "b", "c"])
        """
        result: Log[A] = Log(self)
        result.extend(other)
        return result

    def tell(self, item: A, /) -> Log[A]:
        """
        Append single item.

        Equivalent to self.combine(Log.of(item))
        """
        result: Log[A] = Log(self)
        result.append(item)
        return result

    def __repr__(self) -> str:
        return f"Log({list.__repr__(self)})"


class LogMonoid:
    """Monoid instance for Log: empty log, append."""

    __slots__ = ()

    def empty(self) -> Log[object]:
        return Log()

    def combine[A](self, left: Log[A], right: Log[A], /) -> Log[A]:
        if not right and isinstance(left, Log):
            return left
        result: Log[A] = Log(left)
        result.extend(right)
        return result

    def __repr__(self) -> str:
        return "LOG"


LOG = LogMonoid()

def merge_logs[W](logs: Iterable[Log[W]]) -> Log[W]:
    """
    Merge multiple logs into one using monoidal combine.

    Usage:
        merged = merge_logs(logger.log for logger in loggers)
    """
    result = Log[W]()
    for log in logs:
        result = result.combine(log)
    return result

__all__ = ("LOG", "Log", "LogMonoid", "merge_logs")
