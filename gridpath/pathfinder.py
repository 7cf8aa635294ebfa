"""Breadth-first pathfinder over a randomly generated occupancy grid."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np

from gridpath.grid import OccupancyGrid
from gridpath.types import DIRECTIONS, OBSTACLE, OPEN, Coord, Path

LOGGER = logging.getLogger(__name__)

# Layout shown before the first initialize() call.
DEFAULT_LAYOUT = (
    (0, 1, 0, 0, 0),
    (0, 1, 0, 1, 0),
    (0, 0, 0, 1, 0),
    (0, 1, 1, 1, 0),
    (0, 0, 0, 0, 0),
)


@dataclass(slots=True)
class GridPathfinderConfig:
    """Host-editable inputs; call ``GridPathfinder.on_config_changed`` after edits."""

    height: int = 5
    width: int = 5
    start: Coord = (0, 1)
    goal: Coord = (4, 4)
    obstacle_probability: float = 25.0  # Percent chance per cell.
    obstacle_location: Optional[Coord] = None
    min_size: int = 4  # Random re-spawn range, inclusive.
    max_size: int = 22
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.height <= 0 or self.width <= 0:
            raise ValueError("height and width must be positive")
        if self.min_size <= 0 or self.max_size < self.min_size:
            raise ValueError("size range must satisfy 0 < min_size <= max_size")
        for name, (x, y) in (("start", self.start), ("goal", self.goal)):
            if not (0 <= x < self.width and 0 <= y < self.height):
                raise ValueError(f"{name} {(x, y)} outside {self.width}x{self.height} grid")


class GridPathfinder:
    """Own a grid plus start/goal cells and keep a shortest path between them."""

    def __init__(self, config: GridPathfinderConfig | None = None):
        self.config = config or GridPathfinderConfig()
        self.rng = np.random.default_rng(self.config.seed)
        self.grid = OccupancyGrid(DEFAULT_LAYOUT)
        self.path: Path = []
        self._applied_probability: Optional[float] = None

    # ------------------------------------------------------------- lifecycle
    def initialize(self) -> Path:
        """Generate a grid with the configured size and compute the first path."""
        self.path = []
        self._clamp_probability()
        self.generate_grid(self.config.height, self.config.width, self.config.obstacle_probability)
        self._applied_probability = self.config.obstacle_probability
        return self.find_path(self.config.start, self.config.goal)

    def on_config_changed(self) -> Path:
        """Re-apply the configuration after the host edited it and recompute the path."""
        self.path = []
        self._clamp_probability()
        if self._applied_probability != self.config.obstacle_probability:
            self.respawn_dimensions()
            self._applied_probability = self.config.obstacle_probability
            self.generate_grid(self.config.height, self.config.width, self.config.obstacle_probability)
        return self._apply_edits()

    def respawn(self) -> Path:
        """Pick new dimensions, draw a fresh grid and recompute the path."""
        self.path = []
        self._clamp_probability()
        self.respawn_dimensions()
        self._applied_probability = self.config.obstacle_probability
        self.generate_grid(self.config.height, self.config.width, self.config.obstacle_probability)
        return self._apply_edits()

    # ------------------------------------------------------------------- API
    def generate_grid(self, height: int, width: int, obstacle_probability: float) -> OccupancyGrid:
        probability = _clamp(obstacle_probability)
        self.grid = OccupancyGrid.random(
            height,
            width,
            probability,
            self.rng,
            keep_open=(self.config.start, self.config.goal),
        )
        LOGGER.debug(
            "Generated %sx%s grid with %s obstacles (p=%.1f%%)",
            width,
            height,
            self.grid.obstacle_count(),
            probability,
        )
        return self.grid

    def respawn_dimensions(self) -> tuple[int, int]:
        """Pick new random grid dimensions large enough to hold start and goal."""
        cfg = self.config
        min_width = max(cfg.min_size, cfg.start[0] + 1, cfg.goal[0] + 1)
        min_height = max(cfg.min_size, cfg.start[1] + 1, cfg.goal[1] + 1)
        cfg.width = int(self.rng.integers(min_width, max(min_width, cfg.max_size) + 1))
        cfg.height = int(self.rng.integers(min_height, max(min_height, cfg.max_size) + 1))
        LOGGER.debug("Re-spawned grid dimensions %sx%s", cfg.width, cfg.height)
        return cfg.height, cfg.width

    def add_obstacle(self, position: Coord) -> None:
        if position in (self.config.start, self.config.goal):
            self.grid.set_cell(position, OPEN)
        else:
            self.grid.set_cell(position, OBSTACLE)

    def is_in_bounds(self, point: Coord) -> bool:
        return self.grid.is_in_bounds(point)

    def find_path(self, start: Coord, goal: Coord) -> Path:
        for name, point in (("start", start), ("goal", goal)):
            if not self.is_in_bounds(point):
                raise ValueError(
                    f"{name} {point} outside {self.grid.width}x{self.grid.height} grid"
                )

        frontier: deque[Coord] = deque([start])
        came_from: dict[Coord, Coord] = {start: start}

        while frontier:
            current = frontier.popleft()
            if current == goal:
                break
            for neighbor in self._neighbors(current):
                if not self.is_in_bounds(neighbor):
                    continue
                if not self.grid.is_open(neighbor):
                    continue
                if neighbor in came_from:
                    continue
                came_from[neighbor] = current
                frontier.append(neighbor)

        if goal not in came_from:
            LOGGER.info("Path not found.")
            self.path = []
            return []

        self.path = self._reconstruct_path(came_from, start, goal)
        return list(self.path)

    # --------------------------------------------------------------- helpers
    def _clamp_probability(self) -> None:
        value = self.config.obstacle_probability
        clamped = _clamp(value)
        if clamped != value:
            LOGGER.warning("Obstacle probability %s outside [0, 100]; using %s", value, clamped)
            self.config.obstacle_probability = clamped

    def _apply_edits(self) -> Path:
        location = self.config.obstacle_location
        if location is not None and not self.is_in_bounds(location):
            LOGGER.debug(
                "Dropping obstacle location %s outside %sx%s grid",
                location,
                self.grid.width,
                self.grid.height,
            )
            self.config.obstacle_location = location = None
        if location is not None:
            self.add_obstacle(location)
        self._open_endpoints()
        return self.find_path(self.config.start, self.config.goal)

    def _open_endpoints(self) -> None:
        for point in (self.config.start, self.config.goal):
            if self.is_in_bounds(point):
                self.grid.set_cell(point, OPEN)

    @staticmethod
    def _neighbors(coord: Coord) -> Iterable[Coord]:
        x, y = coord
        for dx, dy in DIRECTIONS:
            yield (x + dx, y + dy)

    @staticmethod
    def _reconstruct_path(came_from: dict[Coord, Coord], start: Coord, goal: Coord) -> Path:
        path: Path = [goal]
        cur = goal
        while cur != start:
            cur = came_from[cur]
            path.append(cur)
        path.reverse()
        return path


def _clamp(probability: float) -> float:
    return float(min(100.0, max(0.0, probability)))
