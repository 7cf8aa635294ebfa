"""pygame window that shows the grid, the path and the endpoints."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import pygame

from gridpath.grid import OccupancyGrid
from gridpath.pathfinder import GridPathfinder
from gridpath.types import Coord

LOGGER = logging.getLogger(__name__)

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
BLUE = (0, 0, 255)
GREEN = (0, 255, 0)
RED = (255, 0, 0)
GREY = (128, 128, 128)


def cell_rect(grid: OccupancyGrid, point: Coord, cell_size: int) -> pygame.Rect:
    # Screen rows grow downwards, grid y grows upwards.
    x, y = point
    return pygame.Rect(x * cell_size, (grid.height - 1 - y) * cell_size, cell_size, cell_size)


def cell_at(grid: OccupancyGrid, pixel: tuple[int, int], cell_size: int) -> Optional[Coord]:
    px, py = pixel
    point = (px // cell_size, grid.height - 1 - py // cell_size)
    return point if grid.is_in_bounds(point) else None


def draw_grid(
    surface: pygame.Surface,
    grid: OccupancyGrid,
    path: Sequence[Coord],
    start: Coord,
    goal: Coord,
    cell_size: int,
) -> None:
    surface.fill(GREY)

    for y in range(grid.height):
        for x in range(grid.width):
            color = WHITE if grid.is_open((x, y)) else BLACK
            pygame.draw.rect(surface, color, cell_rect(grid, (x, y), cell_size).inflate(-1, -1))

    for step in path:
        pygame.draw.rect(surface, BLUE, cell_rect(grid, step, cell_size).inflate(-1, -1))

    for point, color in ((start, GREEN), (goal, RED)):
        if grid.is_in_bounds(point):
            pygame.draw.rect(surface, color, cell_rect(grid, point, cell_size).inflate(-1, -1))


def run_viewer(pathfinder: GridPathfinder, cell_size: int = 32, fps: int = 30) -> None:
    """Blocking event loop; returns when the window is closed."""
    pygame.init()
    pygame.display.set_caption("gridpath")
    screen = _resize(pathfinder.grid, cell_size)
    clock = pygame.time.Clock()
    running = True

    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                pathfinder.respawn()
                screen = _resize(pathfinder.grid, cell_size)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                point = cell_at(pathfinder.grid, event.pos, cell_size)
                if point is not None:
                    pathfinder.config.obstacle_location = point
                    pathfinder.on_config_changed()
                    LOGGER.debug("Obstacle at %s, path length %s", point, len(pathfinder.path))

        draw_grid(
            screen,
            pathfinder.grid,
            pathfinder.path,
            pathfinder.config.start,
            pathfinder.config.goal,
            cell_size,
        )
        pygame.display.flip()
        clock.tick(fps)

    pygame.quit()


def _resize(grid: OccupancyGrid, cell_size: int) -> pygame.Surface:
    return pygame.display.set_mode((grid.width * cell_size, grid.height * cell_size))
