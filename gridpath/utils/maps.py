"""Helpers for lightweight ASCII views of a grid and its path."""

from __future__ import annotations

from typing import List, Optional, Sequence

from gridpath.grid import OccupancyGrid
from gridpath.types import Coord

OPEN_CHAR = "."
OBSTACLE_CHAR = "#"
PATH_CHAR = "*"
START_CHAR = "S"
GOAL_CHAR = "G"


def ascii_grid_map(
    grid: OccupancyGrid,
    path: Sequence[Coord],
    start: Optional[Coord] = None,
    goal: Optional[Coord] = None,
) -> str:
    """Return one line per row, highest ``y`` first.

    Start and goal markers win over path cells, path cells win over the
    underlying open/obstacle state. Markers outside the grid are ignored.
    """
    on_path = set(path)
    lines: List[str] = []
    for y in range(grid.height - 1, -1, -1):
        cells: List[str] = []
        for x in range(grid.width):
            key = (x, y)
            if key == start:
                cells.append(START_CHAR)
            elif key == goal:
                cells.append(GOAL_CHAR)
            elif key in on_path:
                cells.append(PATH_CHAR)
            else:
                cells.append(OPEN_CHAR if grid.is_open(key) else OBSTACLE_CHAR)
        lines.append("".join(cells))
    return "\n".join(lines)
