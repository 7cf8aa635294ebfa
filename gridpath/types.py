"""Core data contracts shared across the pathfinding stack."""

from __future__ import annotations

from typing import List, Literal, Tuple

Coord = Tuple[int, int]  # (x, y)
Path = List[Coord]

CellState = Literal[0, 1]

OPEN: CellState = 0
OBSTACLE: CellState = 1

# East, west, north, south. Order decides which of several equal-length
# paths the search returns.
DIRECTIONS: Tuple[Coord, ...] = (
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
)

__all__ = [
    "Coord",
    "Path",
    "CellState",
    "OPEN",
    "OBSTACLE",
    "DIRECTIONS",
]
