"""Random wall/empty noise with a solid border ring."""

from __future__ import annotations

import random

from .grid import Grid
from .tiles import EMPTY, WALL


def seed_noise(width: int, height: int, fill_percent: int, rng: random.Random) -> Grid:
    """Return a bordered grid whose interior cells are walls with ``fill_percent`` probability.

    Interior cells draw from ``rng`` column by column (x outer, y inner), so the
    same seed reproduces the same noise.
    """
    grid = Grid.filled(width, height, WALL)
    for x in range(1, width - 1):
        for y in range(1, height - 1):
            grid.cells[x][y] = WALL if rng.randrange(100) < fill_percent else EMPTY
    return grid


__all__ = ["seed_noise"]
