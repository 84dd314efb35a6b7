"""Lazy 2-D views: flips, rotation and slicing without copying.

Every view wraps another matrix and remaps ``(row, col)`` on access, so
views can be stacked freely::

    Grid(rows).rotate().flip_horizontally().slice(range(1, 3), range(0, 2))
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")

__all__ = [
    "Grid",
    "HorizontallyFlipped",
    "Matrix",
    "Rotated",
    "Sliced",
    "VerticallyFlipped",
]


class Matrix(ABC, Generic[T]):
    """Read-only rectangular matrix."""

    @abstractmethod
    def get(self, row: int, col: int) -> T: ...

    @property
    @abstractmethod
    def rows(self) -> int: ...

    @property
    @abstractmethod
    def cols(self) -> int: ...

    def to_lists(self) -> list[list[T]]:
        """Materialise the view as a list of row lists."""
        return [[self.get(r, c) for c in range(self.cols)] for r in range(self.rows)]

    def flip_vertically(self) -> VerticallyFlipped[T]:
        return VerticallyFlipped(self)

    def flip_horizontally(self) -> HorizontallyFlipped[T]:
        return HorizontallyFlipped(self)

    def rotate(self) -> Rotated[T]:
        return Rotated(self)

    def slice(self, rows: range, cols: range) -> Sliced[T]:
        return Sliced(self, rows, cols)

    def iter_by_rows(self) -> Iterator[T]:
        """Yield every element row by row."""
        for r in range(self.rows):
            for c in range(self.cols):
                yield self.get(r, c)

    def __iter__(self) -> Iterator[T]:
        return self.iter_by_rows()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_lists()!r})"


class Grid(Matrix[T]):
    """Matrix backed by a sequence of equally long rows."""

    def __init__(self, data: Sequence[Sequence[T]]) -> None:
        self._data = data

    def get(self, row: int, col: int) -> T:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"({row}, {col}) outside {self.rows}x{self.cols} grid")
        return self._data[row][col]

    @property
    def rows(self) -> int:
        return len(self._data)

    @property
    def cols(self) -> int:
        return len(self._data[0]) if self._data else 0


class _View(Matrix[T]):
    def __init__(self, matrix: Matrix[T]) -> None:
        self.matrix = matrix

    @property
    def rows(self) -> int:
        return self.matrix.rows

    @property
    def cols(self) -> int:
        return self.matrix.cols


class VerticallyFlipped(_View[T]):
    """Top row becomes the bottom row."""

    def get(self, row: int, col: int) -> T:
        return self.matrix.get(self.matrix.rows - row - 1, col)


class HorizontallyFlipped(_View[T]):
    """Left column becomes the right column."""

    def get(self, row: int, col: int) -> T:
        return self.matrix.get(row, self.matrix.cols - col - 1)


class Rotated(_View[T]):
    """Quarter turn counter-clockwise: the last column becomes the first row."""

    def get(self, row: int, col: int) -> T:
        return self.matrix.get(col, self.matrix.cols - row - 1)

    @property
    def rows(self) -> int:
        return self.matrix.cols

    @property
    def cols(self) -> int:
        return self.matrix.rows


class Sliced(_View[T]):
    """Rectangular window given by a row range and a column range."""

    def __init__(self, matrix: Matrix[T], rows: range, cols: range) -> None:
        super().__init__(matrix)
        self.row_range = rows
        self.col_range = cols

    def get(self, row: int, col: int) -> T:
        return self.matrix.get(self.row_range[row], self.col_range[col])

    @property
    def rows(self) -> int:
        return len(self.row_range)

    @property
    def cols(self) -> int:
        return len(self.col_range)
