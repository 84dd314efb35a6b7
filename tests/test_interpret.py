"""Tests for interpret.py - linear instruction interpreter."""

from dataclasses import dataclass

import pytest

from statewalk.interpret import (
    NEXT,
    STOP,
    Absolute,
    Program,
    Relative,
    execute_program,
)


@dataclass
class Add:
    amount: int

    def execute(self, state):
        return state + self.amount, NEXT


@dataclass
class JumpIfBelow:
    limit: int
    offset: int

    def execute(self, state):
        return state, Relative(self.offset) if state < self.limit else NEXT


@dataclass
class Goto:
    index: int

    def execute(self, state):
        return state, Absolute(self.index)


class Halt:
    def execute(self, state):
        return state, STOP


class TestExecuteProgram:
    """Test program execution and jump handling."""

    def test_runs_off_the_end(self):
        assert execute_program([Add(1), Add(2), Add(3)], 0) == 6

    def test_empty_program(self):
        assert execute_program([], "state") == "state"

    def test_stop_halts(self):
        assert execute_program([Add(1), Halt(), Add(100)], 0) == 1

    def test_loop_with_relative_jump(self):
        program = [Add(2), JumpIfBelow(10, -1)]
        assert execute_program(program, 0) == 10

    def test_absolute_jump(self):
        program = [Goto(2), Add(100), Add(1)]
        assert execute_program(program, 0) == 1

    def test_jump_before_start_halts(self):
        program = [Add(1), JumpIfBelow(100, -5), Add(100)]
        assert execute_program(program, 0) == 1

    def test_jump_past_end_halts(self):
        assert execute_program([Goto(10), Add(1)], 0) == 0

    def test_default_relative_is_next(self):
        assert Relative() == NEXT

    def test_unknown_jump_raises(self):
        class Bad:
            def execute(self, state):
                return state, "sideways"

        with pytest.raises(TypeError):
            execute_program([Bad()], 0)


class TestProgram:
    """Test programs used as instructions."""

    def test_execute_runs_to_completion_and_stops(self):
        assert Program([Add(1), Add(2)]).execute(0) == (3, STOP)

    def test_is_a_sequence(self):
        program = Program([Add(1), Halt()])
        assert len(program) == 2
        assert program[0] == Add(1)
        assert execute_program(program, 5) == 6

    def test_nested_program_runs_inline(self):
        inner = Program([Add(10), Add(20)])
        assert execute_program([Add(1), inner], 0) == 31

    def test_nested_program_ends_enclosing_program(self):
        inner = Program([Add(10)])
        assert execute_program([inner, Add(100)], 0) == 10

    def test_loop_inside_nested_program(self):
        inner = Program([Add(2), JumpIfBelow(10, -1)])
        assert Program([Add(1), inner]).execute(0) == (11, STOP)

    def test_empty_program(self):
        assert Program().execute("state") == ("state", STOP)
