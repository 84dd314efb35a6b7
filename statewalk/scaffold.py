"""Parse input, compute two answers, print them.

A puzzle solution is a ``Problem`` subclass naming its input parser and
its two parts::

    class Day01(Problem):
        parser = Lines(int)

        def solve_part1(self, data):
            return sum(data)

        def solve_part2(self, data):
            return max(data)

    solve(Day01, raw_text)
"""

from __future__ import annotations

import importlib
import importlib.util
import inspect
import logging
import sys
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Any, ClassVar

from rich.console import Console

from statewalk.parse import as_parser

logger = logging.getLogger(__name__)

__all__ = [
    "Answers",
    "Problem",
    "load_problem",
    "solve",
    "solve_part1",
    "solve_part2",
]


class Problem(ABC):
    """A two-part puzzle over a parsed input."""

    parser: ClassVar[Any] = str

    @classmethod
    def parse(cls, raw_input: str) -> Any:
        return as_parser(cls.parser).parse(raw_input)

    @abstractmethod
    def solve_part1(self, data: Any) -> Any: ...

    @abstractmethod
    def solve_part2(self, data: Any) -> Any: ...


@dataclass
class Answers:
    part1: Any
    part2: Any
    elapsed: float = 0.0


def _instance(problem: type[Problem] | Problem) -> Problem:
    return problem() if isinstance(problem, type) else problem


def solve_part1(problem: type[Problem] | Problem, raw_input: str) -> Any:
    """Parse ``raw_input`` and return the first answer."""
    instance = _instance(problem)
    return instance.solve_part1(instance.parse(raw_input))


def solve_part2(problem: type[Problem] | Problem, raw_input: str) -> Any:
    """Parse ``raw_input`` and return the second answer."""
    instance = _instance(problem)
    return instance.solve_part2(instance.parse(raw_input))


def solve(
    problem: type[Problem] | Problem,
    raw_input: str,
    console: Console | None = None,
) -> Answers:
    """Parse once, solve both parts and print them.

    Raises:
        ParseError: If the input does not match the problem's parser.
    """
    console = console or Console()
    instance = _instance(problem)
    start = time.perf_counter()
    data = instance.parse(raw_input)
    part1 = instance.solve_part1(data)
    console.print(f"Part 1: {part1}", highlight=False, markup=False)
    part2 = instance.solve_part2(data)
    console.print(f"Part 2: {part2}", highlight=False, markup=False)
    elapsed = time.perf_counter() - start
    logger.info("Solved %s in %.3fs", type(instance).__name__, elapsed)
    return Answers(part1, part2, elapsed)


def _import(target: str) -> ModuleType:
    path = Path(target)
    if path.suffix == ".py":
        if not path.is_file():
            raise FileNotFoundError(f"No such solution file: {target}")
        spec = importlib.util.spec_from_file_location(path.stem, path)
        if spec is None or spec.loader is None:
            raise ImportError(f"Cannot load {target}")
        module = importlib.util.module_from_spec(spec)
        sys.modules[path.stem] = module
        spec.loader.exec_module(module)
        return module
    return importlib.import_module(target)


def load_problem(target: str) -> type[Problem]:
    """Import a module (dotted name or ``.py`` path) and find its Problem.

    Raises:
        LookupError: If the module defines no Problem subclass, or several.
    """
    module = _import(target)
    found = [
        obj
        for obj in vars(module).values()
        if inspect.isclass(obj)
        and issubclass(obj, Problem)
        and obj is not Problem
        and obj.__module__ == module.__name__
    ]
    if len(found) != 1:
        names = ", ".join(cls.__name__ for cls in found) or "none"
        raise LookupError(
            f"Expected exactly one Problem subclass in {target}, found {names}"
        )
    logger.debug("Loaded %s from %s", found[0].__name__, target)
    return found[0]
