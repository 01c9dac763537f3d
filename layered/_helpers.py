"""Internal helpers for layered.

Small function-plumbing used across instance and transformer modules.
These are not part of the public API but can be used for writing custom instances."""

from __future__ import annotations

from collections.abc import Callable

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

def compose[A, B, C](g: Callable[[B], C], f: Callable[[A], B]) -> Callable[[A], C]:
    """
    Right-to-left composition: compose(g, f)(x) == g(f(x)).
    """
    def composed(x: A) -> C:
        return g(f(x))
    return composed

# Pair helpers for (value, state) tuples
def first[A, B, S](f: Callable[[A], B]) -> Callable[[tuple[A, S]], tuple[B, S]]:
    """
    Lift f to act on the first component of a pair.

    Used by StateT to transform the produced value and keep the state.
    """
    def on_first(pair: tuple[A, S]) -> tuple[B, S]:
        value, state = pair
        return f(value), state
    return on_first

def curry2[A, B, C](f: Callable[[A, B], C]) -> Callable[[A], Callable[[B], C]]:
    """Turn a two-argument function into a chain of one-argument functions."""
    def outer(a: A) -> Callable[[B], C]:
        def inner(b: B) -> C:
            return f(a, b)
        return inner
    return outer

# Cons cells: O(1) push during folds, one list at the end
type Stack[A] = tuple[A, Stack[A]] | None

def push[A](stack: Stack[A], item: A) -> Stack[A]:
    """Shares the tail, never copies."""
    return (item, stack)

def unwind[A](stack: Stack[A]) -> list[A]:
    """Items of the stack in push order."""
    items: list[A] = []
    while stack is not None:
        item, stack = stack
        items.append(item)
    items.reverse()
    return items

__all__ = (
    "Stack",
    "compose",
    "curry2",
    "first",
    "identity",
    "push",
    "unwind",
)
