"""Traversal engines.

- ``find_lowest_cost``: FIFO expansion with best-cost deduplication
- ``walk`` / ``walk_deep`` / ``walk_broad``: walker-driven traversal
"""

from statewalk.search.bfs import (
    SearchResult,
    TransitionRule,
    UniformStepRule,
    find_lowest_cost,
    with_cost,
)
from statewalk.search.frontier import (
    Frontier,
    Queue,
    Stack,
    SuccessorGenerator,
    generate,
)
from statewalk.search.walk import (
    CONTINUE,
    Break,
    Continue,
    FunctionWalker,
    Next,
    VisitDecision,
    Walker,
    walk,
    walk_broad,
    walk_deep,
)

__all__ = [
    "CONTINUE",
    "Break",
    "Continue",
    "Frontier",
    "FunctionWalker",
    "Next",
    "Queue",
    "SearchResult",
    "Stack",
    "SuccessorGenerator",
    "TransitionRule",
    "UniformStepRule",
    "VisitDecision",
    "Walker",
    "find_lowest_cost",
    "generate",
    "walk",
    "walk_broad",
    "walk_deep",
    "with_cost",
]
