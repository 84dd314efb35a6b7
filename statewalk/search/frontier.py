"""Frontier containers and lazy successor generators.

A frontier holds pending states and fixes the traversal order:

- ``Stack``: push and pop at the same end (depth-first)
- ``Queue``: push at the tail, pop from the head (breadth-first)

Both are created empty at the start of every traversal call and dropped
when it returns.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from typing import Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")

__all__ = [
    "Frontier",
    "Queue",
    "Stack",
    "SuccessorGenerator",
    "generate",
]


@runtime_checkable
class Frontier(Protocol[T]):
    """Pending-work container driving traversal order.

    Implementations must be constructible with no arguments (empty).
    A frontier that also defines ``__len__`` may hold None as a state;
    otherwise ``pop`` returning None marks it empty.
    """

    def push(self, item: T) -> None:
        """Add an item to the frontier."""
        ...

    def pop(self) -> T | None:
        """Remove and return the next item, or None when empty."""
        ...


@runtime_checkable
class SuccessorGenerator(Protocol[T]):
    """Push-style producer that feeds each value to a callback once."""

    def generate(self, callback: Callable[[T], None]) -> None: ...


class Stack(Generic[T]):
    """LIFO frontier."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T | None:
        if not self._items:
            return None
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"


class Queue(Generic[T]):
    """FIFO frontier."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T | None:
        if not self._items:
            return None
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"


def generate(
    source: SuccessorGenerator[T] | Iterable[T], callback: Callable[[T], None]
) -> None:
    """Feed every value produced by ``source`` to ``callback``.

    Objects exposing ``generate`` are driven directly; any other iterable
    (lists, iterators, generator functions) is consumed element by element.
    The source is consumed exactly once.
    """
    if isinstance(source, SuccessorGenerator):
        source.generate(callback)
        return
    for value in source:
        callback(value)
