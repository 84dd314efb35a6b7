"""Bounded tile grid with cellular-automaton stepping.

``TileMap.step`` repeatedly rebuilds every cell from its 3x3 neighbourhood
in the previous generation until the stepper reports a result. Cells
outside the map appear as ``None`` in a neighbourhood.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

Zone = tuple[
    tuple[Optional[T], Optional[T], Optional[T]],
    tuple[Optional[T], Optional[T], Optional[T]],
    tuple[Optional[T], Optional[T], Optional[T]],
]

__all__ = [
    "Stepper",
    "TileMap",
    "Zone",
    "iter_all",
    "iter_all_neighbours",
    "iter_direct_neighbours",
]


class TileMap(Generic[T]):
    """Rectangular (or ragged) grid of tiles addressed by ``(row, col)``."""

    def __init__(self, rows: Iterable[Iterable[T]]) -> None:
        self._map: list[list[T]] = [list(row) for row in rows]

    @property
    def height(self) -> int:
        return len(self._map)

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < len(self._map) and 0 <= col < len(self._map[row])

    def get(self, row: int, col: int) -> T | None:
        """Tile at ``(row, col)``, or None outside the map."""
        if self._in_bounds(row, col):
            return self._map[row][col]
        return None

    def set(self, row: int, col: int, tile: T) -> bool:
        """Replace a tile; returns False (and changes nothing) out of bounds."""
        if self._in_bounds(row, col):
            self._map[row][col] = tile
            return True
        return False

    def surroundings(self, row: int, col: int) -> Zone[T]:
        """3x3 neighbourhood centred on ``(row, col)``."""
        return tuple(  # type: ignore[return-value]
            tuple(self.get(row + dr, col + dc) for dc in (-1, 0, 1))
            for dr in (-1, 0, 1)
        )

    def copy(self) -> TileMap[T]:
        return TileMap(self._map)

    def to_lists(self) -> list[list[T]]:
        return [list(row) for row in self._map]

    def step(self, stepper: Stepper[T, R]) -> R:
        """Advance generations until ``stepper.step`` returns a result.

        The stepper is consulted before the first generation, so a map that
        already satisfies it is returned unchanged. Runs forever if the
        stepper never produces a result.
        """
        result = stepper.step(self)
        generations = 0
        while result is None:
            self._map = [
                [
                    stepper.apply_step_rule(self.surroundings(r, c))
                    for c in range(len(self._map[r]))
                ]
                for r in range(len(self._map))
            ]
            generations += 1
            result = stepper.step(self)
        logger.debug("Stepper finished after %d generations", generations)
        return result

    def __iter__(self) -> Iterator[T]:
        for row in self._map:
            yield from row

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TileMap):
            return NotImplemented
        return self._map == other._map

    def __hash__(self) -> int:
        return hash(tuple(tuple(row) for row in self._map))

    def __repr__(self) -> str:
        return f"TileMap({self._map!r})"


class Stepper(ABC, Generic[T, R]):
    """Cellular-automaton rule plus a stopping check."""

    @abstractmethod
    def apply_step_rule(self, zone: Zone[T]) -> T:
        """Compute a cell's next tile from its current neighbourhood."""

    @abstractmethod
    def step(self, tile_map: TileMap[T]) -> R | None:
        """Inspect the current generation; return a result to stop."""


def iter_all(zone: Zone[T]) -> Iterator[T]:
    """All in-bounds tiles of the zone, centre included."""
    for row in zone:
        for tile in row:
            if tile is not None:
                yield tile


def iter_all_neighbours(zone: Zone[T]) -> Iterator[T]:
    """The eight surrounding tiles, centre excluded."""
    cells = (*zone[0], zone[1][0], zone[1][2], *zone[2])
    return (tile for tile in cells if tile is not None)


def iter_direct_neighbours(zone: Zone[T]) -> Iterator[T]:
    """The four orthogonal neighbours."""
    cells = (zone[0][1], zone[1][0], zone[1][2], zone[2][1])
    return (tile for tile in cells if tile is not None)
