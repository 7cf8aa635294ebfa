from gridpath import OccupancyGrid
from gridpath.utils import ascii_grid_map


def test_ascii_map_draws_highest_row_first():
    grid = OccupancyGrid([[0, 1, 0], [0, 1, 0], [0, 0, 0]])
    path = [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2), (2, 1), (2, 0)]
    text = ascii_grid_map(grid, path, start=(0, 0), goal=(2, 0))
    assert text == "***\n*#*\nS#G"


def test_ascii_map_without_path_or_markers():
    grid = OccupancyGrid([[0, 1], [1, 0]])
    assert ascii_grid_map(grid, []) == "#.\n.#"
