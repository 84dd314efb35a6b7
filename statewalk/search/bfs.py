"""Lowest-cost search over a FIFO frontier.

``find_lowest_cost`` expands states in first-in first-out order and keeps,
for every state it has enqueued, the lowest cost seen so far. A state is
only re-enqueued when a strictly cheaper cost is discovered for it.

Precondition (not checked at runtime):
    The frontier is a plain FIFO queue, not a priority queue. The first
    terminal state found is the cheapest one only when the rule's costs are
    monotonic in pop order, i.e. every cost emitted while expanding depth
    ``d`` is <= every cost emitted at depth ``d + 1``. ``UniformStepRule``
    (one unit per step) satisfies this by construction. Rules with
    non-monotonic costs get the first terminal state found, which may be
    suboptimal.

Example:
    >>> class Spell(UniformStepRule[str]):
    ...     def iter_next_states(self, state):
    ...         return (state + c for c in "ABCDEFGHIJKLMNO")
    ...     def is_final(self, state):
    ...         return state == "DONE"
    >>> result = find_lowest_cost(Spell(), 0, "")
    >>> result.final_state, result.final_cost
    ('DONE', 4)
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from statewalk.search.frontier import Queue

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=Hashable)
C = TypeVar("C")

__all__ = [
    "SearchResult",
    "TransitionRule",
    "UniformStepRule",
    "find_lowest_cost",
    "with_cost",
]


class TransitionRule(ABC, Generic[S, C]):
    """Produces ``(cost, state)`` transitions and recognises terminal states.

    States must be hashable with equality consistent with the rule's
    semantics; costs must be totally ordered.
    """

    @abstractmethod
    def iter_transitions(self, cost: C, state: S) -> Iterable[tuple[C, S]]:
        """Yield ``(next_cost, next_state)`` pairs reachable from ``state``."""

    @abstractmethod
    def should_continue(self, cost: C, state: S) -> bool:
        """Return False when ``state`` reached at ``cost`` ends the search."""


def with_cost(cost: C, states: Iterable[S]) -> Iterator[tuple[C, S]]:
    """Lazily pair every state from ``states`` with the same ``cost``."""
    for state in states:
        yield cost, state


class UniformStepRule(TransitionRule[S, int]):
    """Rule where every transition costs exactly one step.

    Subclasses only describe neighbours and terminal states; the cost of a
    successor is the current cost plus one, which keeps costs monotonic in
    FIFO order.
    """

    @abstractmethod
    def iter_next_states(self, state: S) -> Iterable[S]:
        """Yield the states reachable from ``state`` in one step."""

    @abstractmethod
    def is_final(self, state: S) -> bool:
        """Return True when ``state`` is a terminal state."""

    def iter_transitions(self, cost: int, state: S) -> Iterator[tuple[int, S]]:
        return with_cost(cost + 1, self.iter_next_states(state))

    def should_continue(self, cost: int, state: S) -> bool:
        return not self.is_final(state)


@dataclass
class SearchResult(Generic[S, C]):
    """Outcome of ``find_lowest_cost``.

    Attributes:
        final_state: Terminal state that stopped the search, or None when the
            frontier was exhausted.
        final_cost: Cost at which ``final_state`` was reached, or None.
        seen_states: Lowest cost recorded for every enqueued state. The
            terminal state itself is not recorded.
    """

    final_state: S | None = None
    final_cost: C | None = None
    seen_states: dict[S, C] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        """True when a terminal state was reached."""
        return self.final_cost is not None


def find_lowest_cost(
    rule: TransitionRule[S, C],
    initial_cost: C,
    initial_state: S,
    cost_limit: C | None = None,
) -> SearchResult[S, C]:
    """Search for the first terminal state reachable from ``initial_state``.

    The initial state is recorded as visited but never tested against the
    stopping predicate; only transitions are. For each transition, in order:

    1. if ``rule.should_continue`` is False, return it immediately;
    2. if ``cost_limit`` is set and the cost exceeds it, drop it;
    3. if the state is unseen or strictly cheaper than its record, record
       the new cost and enqueue it.

    Args:
        rule: Transition rule driving the search.
        initial_cost: Cost of the initial state.
        initial_state: Starting state.
        cost_limit: Optional ceiling; transitions costing more are dropped.

    Returns:
        SearchResult with the terminal state and cost, or with both set to
        None after exhaustion. ``seen_states`` is populated in both cases.
    """
    seen_states: dict[S, C] = {initial_state: initial_cost}
    queue: Queue[tuple[C, S]] = Queue()
    queue.push((initial_cost, initial_state))
    expansions = 0

    while queue:
        cost, state = queue.pop()  # type: ignore[misc]
        expansions += 1
        for next_cost, next_state in rule.iter_transitions(cost, state):
            if not rule.should_continue(next_cost, next_state):
                logger.debug(
                    "Terminal state reached at cost %s after %d expansions "
                    "(%d states seen)",
                    next_cost,
                    expansions,
                    len(seen_states),
                )
                return SearchResult(next_state, next_cost, seen_states)
            if cost_limit is not None and cost_limit < next_cost:
                continue
            if next_state not in seen_states or next_cost < seen_states[next_state]:
                seen_states[next_state] = next_cost
                queue.push((next_cost, next_state))

    logger.debug(
        "Frontier exhausted after %d expansions (%d states seen)",
        expansions,
        len(seen_states),
    )
    return SearchResult(None, None, seen_states)
