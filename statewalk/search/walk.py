"""Queue-driven walker with pluggable traversal order.

The walker decides, for every popped state, one of:

- ``Break(result)``: stop the whole traversal and return ``result``
- ``CONTINUE``: drop the state without expanding it
- ``Next(successors)``: push every successor onto the frontier

The frontier discipline is chosen by the caller: ``walk_deep`` uses a
stack (depth-first), ``walk_broad`` a queue (breadth-first).

No visited-state tracking is done here. Walkers over cyclic spaces must
deduplicate inside ``visit`` or the walk may never terminate.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from statewalk.search.frontier import (
    Frontier,
    Queue,
    Stack,
    SuccessorGenerator,
    generate,
)

logger = logging.getLogger(__name__)

S = TypeVar("S")
R = TypeVar("R")

__all__ = [
    "CONTINUE",
    "Break",
    "Continue",
    "FunctionWalker",
    "Next",
    "VisitDecision",
    "Walker",
    "walk",
    "walk_broad",
    "walk_deep",
]


@dataclass(frozen=True)
class Break(Generic[R]):
    """Stop the traversal with ``result``."""

    result: R


class Continue:
    """Skip the current state."""

    _instance: Continue | None = None

    def __new__(cls) -> Continue:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "CONTINUE"


CONTINUE = Continue()


@dataclass(frozen=True)
class Next(Generic[S]):
    """Expand the current state into ``successors``.

    ``successors`` may be any iterable or an object with a ``generate``
    method; it is consumed once.
    """

    successors: SuccessorGenerator[S] | Iterable[S]


VisitDecision = Union[Break[R], Continue, Next[S]]


class Walker(ABC, Generic[S, R]):
    """Decision logic for ``walk``."""

    @abstractmethod
    def visit(self, state: S) -> VisitDecision[R, S]:
        """Decide what to do with ``state``."""


class FunctionWalker(Walker[S, R]):
    """Walker backed by a plain callable.

    Example:
        >>> walker = FunctionWalker(lambda n: Break(n) if n == 3 else Next([n + 1]))
        >>> walk_broad(walker, 0)
        3
    """

    def __init__(self, visit: Callable[[S], VisitDecision[R, S]]) -> None:
        self._visit = visit

    def visit(self, state: S) -> VisitDecision[R, S]:
        return self._visit(state)


def _drain(frontier: Frontier[S]) -> Iterator[S]:
    # Sized frontiers may hold None; unsized ones report empty with None
    if hasattr(frontier, "__len__"):
        while len(frontier):
            yield frontier.pop()  # type: ignore[misc]
        return
    while True:
        state = frontier.pop()
        if state is None:
            return
        yield state


def walk(
    walker: Walker[S, R],
    initial_state: S,
    frontier_factory: Callable[[], Frontier[S]] = Stack,
) -> R | None:
    """Drive ``walker`` from ``initial_state`` until it breaks or runs dry.

    Args:
        walker: Decision logic applied to every popped state.
        initial_state: First state pushed onto the frontier.
        frontier_factory: Zero-argument callable building an empty frontier.

    Returns:
        The result carried by the first ``Break``, or None when the frontier
        empties without one.

    Raises:
        TypeError: If ``visit`` returns something other than a decision.
    """
    frontier = frontier_factory()
    frontier.push(initial_state)
    visited = 0

    for state in _drain(frontier):
        visited += 1
        decision = walker.visit(state)  # type: ignore[arg-type]
        if isinstance(decision, Break):
            logger.debug("Walk stopped by break after %d visits", visited)
            return decision.result
        if isinstance(decision, Continue):
            continue
        if isinstance(decision, Next):
            generate(decision.successors, frontier.push)
            continue
        raise TypeError(
            f"{type(walker).__name__}.visit returned {decision!r}; "
            "expected Break, CONTINUE or Next"
        )

    logger.debug("Walk exhausted after %d visits", visited)
    return None


def walk_deep(walker: Walker[S, R], initial_state: S) -> R | None:
    """Depth-first ``walk`` (stack frontier)."""
    return walk(walker, initial_state, Stack)


def walk_broad(walker: Walker[S, R], initial_state: S) -> R | None:
    """Breadth-first ``walk`` (queue frontier)."""
    return walk(walker, initial_state, Queue)
