"""Utility exports."""

from .maps import ascii_grid_map

__all__ = ["ascii_grid_map"]
