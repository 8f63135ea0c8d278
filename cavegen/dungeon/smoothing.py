"""Cellular-automaton smoothing (majority rule over the 8-neighbourhood)."""

from __future__ import annotations

from typing import List

from .errors import ConfigurationError
from .grid import Grid
from .tiles import EMPTY, WALL

# Neighbour count at which a cell keeps its current state
WALL_THRESHOLD = 4

_NEIGHBOURS_8 = ((-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1))


def count_wall_neighbours(cells: List[List[str]], x: int, y: int) -> int:
    """Count WALL cells around an interior ``(x, y)`` in column-major ``cells``."""
    return sum(1 for dx, dy in _NEIGHBOURS_8 if cells[x + dx][y + dy] == WALL)


def smooth_pass(grid: Grid) -> int:
    """Apply one pass in place and return how many cells changed.

    Every neighbour count is taken from a snapshot of the grid as it was at the
    start of the pass. Border cells are never written.
    """
    snapshot = [list(col) for col in grid.cells]
    w, h = grid.width, grid.height
    changed = 0
    for x in range(1, w - 1):
        for y in range(1, h - 1):
            walls = count_wall_neighbours(snapshot, x, y)
            if walls > WALL_THRESHOLD:
                new = WALL
            elif walls < WALL_THRESHOLD:
                new = EMPTY
            else:
                continue
            if snapshot[x][y] != new:
                grid.cells[x][y] = new
                changed += 1
    return changed


def smooth(grid: Grid, iterations: int) -> Grid:
    if iterations < 0:
        raise ConfigurationError(f"smoothing iterations must be >= 0, got {iterations}")
    for _ in range(iterations):
        smooth_pass(grid)
    return grid


__all__ = ["WALL_THRESHOLD", "count_wall_neighbours", "smooth_pass", "smooth"]
