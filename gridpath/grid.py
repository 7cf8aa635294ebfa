"""Occupancy grid backed by a small numpy array."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from gridpath.types import OBSTACLE, OPEN, CellState, Coord


class OccupancyGrid:
    """2D grid of OPEN/OBSTACLE cells indexed as ``cells[y, x]``."""

    def __init__(self, cells: np.ndarray | Sequence[Sequence[int]]):
        arr = np.array(cells, dtype=np.int8, copy=True)
        if arr.ndim != 2 or arr.shape[0] == 0 or arr.shape[1] == 0:
            raise ValueError(f"grid must be a non-empty 2D array, got shape {arr.shape}")
        if not np.isin(arr, (OPEN, OBSTACLE)).all():
            raise ValueError("grid cells must be 0 (open) or 1 (obstacle)")
        self.cells = arr

    @classmethod
    def empty(cls, height: int, width: int) -> "OccupancyGrid":
        _check_dimensions(height, width)
        return cls(np.zeros((height, width), dtype=np.int8))

    @classmethod
    def random(
        cls,
        height: int,
        width: int,
        obstacle_probability: float,
        rng: np.random.Generator,
        keep_open: Iterable[Coord] = (),
    ) -> "OccupancyGrid":
        """Draw each cell independently; ``keep_open`` cells are never blocked."""
        _check_dimensions(height, width)
        rolls = rng.random((height, width)) * 100.0
        grid = cls((rolls < obstacle_probability).astype(np.int8))
        for coord in keep_open:
            if grid.is_in_bounds(coord):
                grid.set_cell(coord, OPEN)
        return grid

    # --------------------------------------------------------------------- API
    @property
    def height(self) -> int:
        return int(self.cells.shape[0])

    @property
    def width(self) -> int:
        return int(self.cells.shape[1])

    def is_in_bounds(self, point: Coord) -> bool:
        x, y = point
        return 0 <= x < self.width and 0 <= y < self.height

    def is_open(self, point: Coord) -> bool:
        x, y = point
        return int(self.cells[y, x]) == OPEN

    def set_cell(self, point: Coord, state: CellState) -> None:
        if not self.is_in_bounds(point):
            raise ValueError(f"cell {point} outside {self.width}x{self.height} grid")
        x, y = point
        self.cells[y, x] = state

    def obstacle_count(self) -> int:
        return int(np.count_nonzero(self.cells == OBSTACLE))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OccupancyGrid):
            return NotImplemented
        return self.cells.shape == other.cells.shape and bool((self.cells == other.cells).all())

    def __repr__(self) -> str:
        return f"OccupancyGrid(width={self.width}, height={self.height}, obstacles={self.obstacle_count()})"


def _check_dimensions(height: int, width: int) -> None:
    if height <= 0 or width <= 0:
        raise ValueError(f"grid dimensions must be positive, got {height}x{width}")
