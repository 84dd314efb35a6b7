"""Permutation enumeration by single swaps (Heap's algorithm).

Each permutation differs from the previous one by exactly one swap, so the
callback sees a single working list that is mutated in place. Copy it if
you need to keep a permutation around.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

T = TypeVar("T")

__all__ = ["iter_permutations", "permutations"]


def permutations(
    elements: Iterable[T], callback: Callable[[list[T]], None]
) -> list[T]:
    """Invoke ``callback`` once per permutation of ``elements``.

    Enumeration order is that of the recursive formulation: for a prefix of
    length ``k``, permute the first ``k - 1`` items, then for ``i`` in
    ``0..k-2`` swap position ``i`` (``k`` even) or ``0`` (``k`` odd) with
    ``k - 1`` and permute again. An explicit counter stack replaces the
    recursion.

    Returns:
        The working list in its final arrangement.
    """
    items = list(elements)
    for arrangement in _swaps(items):
        callback(arrangement)
    return items


def iter_permutations(elements: Iterable[T]) -> Iterator[tuple[T, ...]]:
    """Yield every permutation as a tuple, in ``permutations`` order.

    Permutations are produced one swap at a time, so stopping early skips
    the rest of the enumeration.
    """
    for arrangement in _swaps(list(elements)):
        yield tuple(arrangement)


def _swaps(items: list[T]) -> Iterator[list[T]]:
    # Yields ``items`` itself after every in-place swap
    n = len(items)
    counters = [0] * n
    yield items

    k = 1
    while k < n:
        if counters[k] < k:
            j = 0 if k % 2 == 0 else counters[k]
            items[j], items[k] = items[k], items[j]
            yield items
            counters[k] += 1
            k = 1
        else:
            counters[k] = 0
            k += 1
