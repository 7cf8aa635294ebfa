import pygame

from gridpath import GridPathfinder, GridPathfinderConfig, OccupancyGrid
from gridpath.viewer import BLACK, BLUE, GREEN, RED, WHITE, cell_at, draw_grid, run_viewer


def _rgb(surface, point):
    return tuple(surface.get_at(point))[:3]


def test_draw_grid_colours_cells():
    grid = OccupancyGrid([[0, 1, 0], [0, 1, 0], [0, 0, 0]])
    surface = pygame.Surface((96, 96))
    path = [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2), (2, 1), (2, 0)]
    draw_grid(surface, grid, path, start=(0, 0), goal=(2, 0), cell_size=32)
    assert _rgb(surface, (16, 80)) == GREEN
    assert _rgb(surface, (80, 80)) == RED
    assert _rgb(surface, (48, 80)) == BLACK
    assert _rgb(surface, (48, 16)) == BLUE


def test_draw_grid_without_path():
    grid = OccupancyGrid([[0, 1, 0], [0, 1, 0], [0, 0, 0]])
    surface = pygame.Surface((96, 96))
    draw_grid(surface, grid, [], start=(0, 0), goal=(2, 0), cell_size=32)
    assert _rgb(surface, (16, 48)) == WHITE


def test_cell_at_maps_pixels_to_cells():
    grid = OccupancyGrid.empty(3, 3)
    assert cell_at(grid, (16, 80), 32) == (0, 0)
    assert cell_at(grid, (90, 5), 32) == (2, 2)
    assert cell_at(grid, (200, 5), 32) is None


def test_run_viewer_handles_click_respawn_and_quit(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    config = GridPathfinderConfig(
        height=10, width=10, start=(0, 0), goal=(3, 3), obstacle_probability=0.0, max_size=4, seed=0
    )
    pathfinder = GridPathfinder(config)
    pathfinder.initialize()

    # Click (9, 9) on the 10x10 grid, then re-spawn down to 4x4.
    events = [
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(9 * 32 + 5, 5)),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r),
        pygame.event.Event(pygame.QUIT),
    ]
    monkeypatch.setattr(pygame.event, "get", lambda: events)
    run_viewer(pathfinder, cell_size=32, fps=0)

    assert config.obstacle_probability == 0.0
    assert (pathfinder.grid.width, pathfinder.grid.height) == (4, 4)
    assert config.obstacle_location is None
    assert len(pathfinder.path) == 7


def test_run_viewer_quits_on_escape(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pathfinder = GridPathfinder(GridPathfinderConfig(seed=1))
    pathfinder.initialize()
    before = pathfinder.grid.obstacle_count()

    events = [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)]
    monkeypatch.setattr(pygame.event, "get", lambda: events)
    run_viewer(pathfinder, cell_size=16, fps=0)
    assert pathfinder.grid.obstacle_count() == before
