"""Region connection: a distance-ordered chain of straight corridors.

Regions are sorted by the Manhattan distance from their anchor to the anchor
of the first discovered region, then each consecutive pair is joined with a
straight, plus-shaped (width 3) corridor. This is a chain, not a minimum
spanning tree, so corridors can be longer than strictly necessary on irregular
layouts.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence

from .grid import Coord, Grid
from .regions import Region
from .tiles import EMPTY

_BRUSH = ((0, 0), (0, -1), (0, 1), (1, 0), (-1, 0))


@dataclass(frozen=True)
class Corridor:
    start: Coord
    end: Coord
    cells_opened: int


def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def line_points(start: Coord, end: Coord) -> List[Coord]:
    """Sample ``int(euclidean distance) + 1`` evenly spaced points from start to end.

    Coordinates are rounded half-to-even; consecutive points are always 8-adjacent.
    """
    steps = int(math.dist(start, end))
    if steps == 0:
        return [start]
    (x0, y0), (x1, y1) = start, end
    points = []
    for i in range(steps + 1):
        t = i / steps
        points.append((round(x0 + (x1 - x0) * t), round(y0 + (y1 - y0) * t)))
    return points


def carve_corridor(grid: Grid, start: Coord, end: Coord) -> int:
    """Open a corridor between two interior cells; returns the number of cells changed.

    The outer ring is never written, so the border stays solid.
    """
    opened = 0
    cells = grid.cells
    for px, py in line_points(start, end):
        if not grid.is_interior(px, py):
            continue
        for dx, dy in _BRUSH:
            cx, cy = px + dx, py + dy
            if grid.is_interior(cx, cy) and cells[cx][cy] != EMPTY:
                cells[cx][cy] = EMPTY
                opened += 1
    return opened


def chain_order(regions: Sequence[Region]) -> List[Region]:
    """Regions sorted by anchor distance to the first region's anchor (stable)."""
    origin = regions[0].anchor
    return sorted(regions, key=lambda r: manhattan(r.anchor, origin))


def connect_regions(grid: Grid, regions: Sequence[Region]) -> List[Corridor]:
    if len(regions) < 2:
        return []
    ordered = chain_order(regions)
    corridors = []
    for a, b in zip(ordered, ordered[1:]):
        opened = carve_corridor(grid, a.anchor, b.anchor)
        corridors.append(Corridor(a.anchor, b.anchor, opened))
    return corridors


__all__ = [
    "Corridor",
    "manhattan",
    "line_points",
    "carve_corridor",
    "chain_order",
    "connect_regions",
]
