"""Grid containers and views used to describe state spaces."""

from statewalk.grid.matrix import (
    Grid,
    HorizontallyFlipped,
    Matrix,
    Rotated,
    Sliced,
    VerticallyFlipped,
)
from statewalk.grid.tile_map import (
    Stepper,
    TileMap,
    Zone,
    iter_all,
    iter_all_neighbours,
    iter_direct_neighbours,
)

__all__ = [
    "Grid",
    "HorizontallyFlipped",
    "Matrix",
    "Rotated",
    "Sliced",
    "Stepper",
    "TileMap",
    "VerticallyFlipped",
    "Zone",
    "iter_all",
    "iter_all_neighbours",
    "iter_direct_neighbours",
]
