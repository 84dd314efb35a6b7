"""Tests for search/walk.py and search/frontier.py."""

import pytest

from statewalk.search import (
    CONTINUE,
    Break,
    Continue,
    Frontier,
    FunctionWalker,
    Next,
    Queue,
    Stack,
    SuccessorGenerator,
    Walker,
    generate,
    walk,
    walk_broad,
    walk_deep,
)

TREE = {0: [1, 2], 1: [3, 4], 2: [5, 6]}


class RecordingWalker(Walker[int, int]):
    """Expands TREE, breaking on ``target`` and skipping ``skip``."""

    def __init__(self, target=None, skip=()):
        self.target = target
        self.skip = set(skip)
        self.visited = []

    def visit(self, state):
        self.visited.append(state)
        if state == self.target:
            return Break(state * 10)
        if state in self.skip:
            return CONTINUE
        return Next(TREE.get(state, []))


class TestFrontiers:
    """Test Stack and Queue disciplines."""

    def test_stack_is_lifo(self):
        stack = Stack()
        for item in (1, 2, 3):
            stack.push(item)
        assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]

    def test_queue_is_fifo(self):
        queue = Queue()
        for item in (1, 2, 3):
            queue.push(item)
        assert [queue.pop(), queue.pop(), queue.pop()] == [1, 2, 3]

    @pytest.mark.parametrize("frontier_cls", [Stack, Queue])
    def test_empty_pop_returns_none(self, frontier_cls):
        frontier = frontier_cls()
        assert frontier.pop() is None
        assert len(frontier) == 0
        assert not frontier

    @pytest.mark.parametrize("frontier_cls", [Stack, Queue])
    def test_satisfies_protocol(self, frontier_cls):
        assert isinstance(frontier_cls(), Frontier)

    def test_instances_do_not_share_storage(self):
        first, second = Queue(), Queue()
        first.push(1)
        assert len(second) == 0


class TestGenerate:
    """Test the generator adapter."""

    def test_iterable_source(self):
        out = []
        generate([1, 2, 3], out.append)
        assert out == [1, 2, 3]

    def test_generator_function_source(self):
        out = []
        generate((n * n for n in range(4)), out.append)
        assert out == [0, 1, 4, 9]

    def test_push_style_source(self):
        class Evens:
            def generate(self, callback):
                for n in range(0, 6, 2):
                    callback(n)

        out = []
        generate(Evens(), out.append)
        assert out == [0, 2, 4]

    def test_push_style_source_satisfies_protocol(self):
        class Empty:
            def generate(self, callback):
                pass

        assert isinstance(Empty(), SuccessorGenerator)
        assert not isinstance([1, 2], SuccessorGenerator)


class TestWalkOrder:
    """Test traversal order under each frontier discipline."""

    def test_broad_visits_level_by_level(self):
        walker = RecordingWalker()
        assert walk_broad(walker, 0) is None
        assert walker.visited == [0, 1, 2, 3, 4, 5, 6]

    def test_deep_visits_last_pushed_first(self):
        walker = RecordingWalker()
        assert walk_deep(walker, 0) is None
        assert walker.visited == [0, 2, 6, 5, 1, 4, 3]

    def test_default_walk_is_depth_first(self):
        walker = RecordingWalker()
        walk(walker, 0)
        assert walker.visited == [0, 2, 6, 5, 1, 4, 3]

    def test_custom_frontier_factory(self):
        walker = RecordingWalker()
        walk(walker, 0, Queue)
        assert walker.visited == [0, 1, 2, 3, 4, 5, 6]


class TestWalkDecisions:
    """Test Break, Continue and Next handling."""

    def test_break_returns_result(self):
        assert walk_broad(RecordingWalker(target=4), 0) == 40

    def test_break_short_circuits(self):
        walker = RecordingWalker(target=2)
        walk_broad(walker, 0)
        assert walker.visited == [0, 1, 2]

    def test_break_on_initial_state(self):
        walker = RecordingWalker(target=0)
        assert walk_deep(walker, 0) == 0
        assert walker.visited == [0]

    def test_continue_skips_expansion(self):
        walker = RecordingWalker(skip={1})
        walk_broad(walker, 0)
        assert walker.visited == [0, 1, 2, 5, 6]

    def test_skipped_subtree_hides_target(self):
        assert walk_deep(RecordingWalker(target=3, skip={1}), 0) is None

    def test_continue_is_singleton(self):
        assert Continue() is CONTINUE

    def test_invalid_decision_raises(self):
        walker = FunctionWalker(lambda state: "nope")
        with pytest.raises(TypeError, match="expected Break"):
            walk_deep(walker, 0)

    def test_successors_drained_before_next_pop(self):
        consumed = []

        def successors():
            for n in (1, 2):
                consumed.append(n)
                yield n

        def visit(state):
            if state == 0:
                return Next(successors())
            return Break(state)

        assert walk_deep(FunctionWalker(visit), 0) == 2
        assert consumed == [1, 2]


class TestWalkDisciplines:
    """Depth-first and breadth-first agree on reachability."""

    @pytest.mark.parametrize("target", [0, 3, 6, 99])
    def test_agree_on_finite_acyclic_space(self, target):
        deep = walk_deep(RecordingWalker(target=target), 0)
        broad = walk_broad(RecordingWalker(target=target), 0)
        assert (deep is None) == (broad is None)
        assert deep == broad

    def test_walker_side_deduplication(self):
        graph = {"a": ["b", "c"], "b": ["a", "c"], "c": ["a", "d"], "d": []}
        seen = set()

        def visit(state):
            if state == "d":
                return Break(len(seen))
            if state in seen:
                return CONTINUE
            seen.add(state)
            return Next(graph[state])

        assert walk_broad(FunctionWalker(visit), "a") == 3


class PushPopFrontier:
    """Frontier exposing only push and pop."""

    def __init__(self):
        self._items = []

    def push(self, item):
        self._items.append(item)

    def pop(self):
        return self._items.pop() if self._items else None


class TestUnsizedFrontier:
    """Frontiers without ``__len__`` end when pop returns None."""

    def test_satisfies_protocol(self):
        assert isinstance(PushPopFrontier(), Frontier)

    def test_exhausts_without_visiting_none(self):
        visited = []

        def visit(state):
            visited.append(state)
            return Next(TREE.get(state, []))

        assert walk(FunctionWalker(visit), 0, PushPopFrontier) is None
        assert visited == [0, 2, 6, 5, 1, 4, 3]

    def test_break_still_returns_result(self):
        assert walk(RecordingWalker(target=5), 0, PushPopFrontier) == 50

    def test_sized_frontier_can_hold_none(self):
        graph = {0: [None, 1], None: [2]}
        walker = FunctionWalker(
            lambda state: Break("found") if state == 2 else Next(graph.get(state, []))
        )
        assert walk_broad(walker, 0) == "found"
