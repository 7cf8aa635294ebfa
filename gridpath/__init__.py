"""Breadth-first pathfinding on a small occupancy grid."""

from .grid import OccupancyGrid
from .pathfinder import GridPathfinder, GridPathfinderConfig
from .types import DIRECTIONS, OBSTACLE, OPEN, Coord, Path

__all__ = [
    "OccupancyGrid",
    "GridPathfinder",
    "GridPathfinderConfig",
    "Coord",
    "Path",
    "OPEN",
    "OBSTACLE",
    "DIRECTIONS",
]
