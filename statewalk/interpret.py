"""Linear instruction interpreter.

A program is a sequence of instructions; each one transforms a state and
says where to go next. Execution starts at index 0 and stops on ``STOP``,
on a jump outside the program, or by running off the end. A ``Program``
wraps a sequence so that it can be nested as a single instruction.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar, Union

logger = logging.getLogger(__name__)

S = TypeVar("S")

__all__ = [
    "STOP",
    "Absolute",
    "Instruction",
    "Jump",
    "NEXT",
    "Program",
    "Relative",
    "Stop",
    "execute_program",
]


@dataclass(frozen=True)
class Absolute:
    """Continue at a fixed instruction index."""

    index: int


@dataclass(frozen=True)
class Relative:
    """Continue ``offset`` instructions away from the current one."""

    offset: int = 1


@dataclass(frozen=True)
class Stop:
    """Halt execution."""


STOP = Stop()

Jump = Union[Absolute, Relative, Stop]
NEXT = Relative(1)


class Instruction(Protocol[S]):
    def execute(self, state: S) -> tuple[S, Jump]: ...


def execute_program(program: Sequence[Instruction[S]], state: S) -> S:
    """Run ``program`` against ``state`` and return the final state.

    Relative jumps landing before index 0 halt execution, as do absolute
    or relative jumps past the last instruction.
    """
    index = 0
    steps = 0
    while 0 <= index < len(program):
        state, jump = program[index].execute(state)
        steps += 1
        if isinstance(jump, Stop):
            break
        if isinstance(jump, Absolute):
            index = jump.index
        elif isinstance(jump, Relative):
            index += jump.offset
        else:
            raise TypeError(f"Unknown jump {jump!r} at instruction {index}")
    logger.debug("Program halted at index %d after %d steps", index, steps)
    return state


class Program(Sequence, Generic[S]):
    """Instruction sequence that is itself an instruction.

    Executing a program runs it to completion and returns ``STOP``, so a
    program nested inside another ends the enclosing one as well.
    """

    __slots__ = ("_instructions",)

    def __init__(self, instructions: Iterable[Instruction[S]] = ()) -> None:
        self._instructions = tuple(instructions)

    def __getitem__(self, index):
        return self._instructions[index]

    def __len__(self) -> int:
        return len(self._instructions)

    def __iter__(self) -> Iterator[Instruction[S]]:
        return iter(self._instructions)

    def __repr__(self) -> str:
        return f"Program({list(self._instructions)!r})"

    def execute(self, state: S) -> tuple[S, Jump]:
        return execute_program(self._instructions, state), STOP
