"""
Logger Monad
============

Logger - пара (лог, значение):
- Log[L]: append-only аккумулятор записей
- A: результат вычисления

Logger никогда не падает и используется как audit-канал,
а не как сигнал ошибки.
"""

from .log import LOG, Log, LogMonoid, merge_logs
from .monad import LOGGER, Logger, LoggerMonad, emit, tell

__all__ = (
    "LOG",
    "LOGGER",
    "Log",
    "LogMonoid",
    "Logger",
    "LoggerMonad",
    "emit",
    "merge_logs",
    "tell",
)
