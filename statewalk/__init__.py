"""statewalk - generic state-space exploration toolkit.

Key functionality:
- Lowest-cost search over caller-defined transition rules
- Queue-driven walks with depth-first or breadth-first frontiers
- Parsing, grid and interpreter helpers commonly composed with the engines
"""

from statewalk.search import (
    CONTINUE,
    Break,
    Continue,
    Next,
    Queue,
    SearchResult,
    Stack,
    TransitionRule,
    UniformStepRule,
    Walker,
    find_lowest_cost,
    walk,
    walk_broad,
    walk_deep,
)

__version__ = "0.3.0"

__all__ = [
    "CONTINUE",
    "Break",
    "Continue",
    "Next",
    "Queue",
    "SearchResult",
    "Stack",
    "TransitionRule",
    "UniformStepRule",
    "Walker",
    "__version__",
    "find_lowest_cost",
    "walk",
    "walk_broad",
    "walk_deep",
]
