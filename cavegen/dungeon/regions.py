"""Connected open-region extraction.

Regions are maximal 4-connected components of passable (non-wall) cells. The
outer scan is column-major (x outer, y inner) and each region grows from its
first scanned cell with a FIFO frontier, so ``region.cells[0]`` is always the
scan-order-first cell of that region.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .grid import Coord, Grid
from .tiles import WALL

# left, right, up, down
_NEIGHBOURS_4 = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class Region:
    cells: Tuple[Coord, ...]

    @property
    def anchor(self) -> Coord:
        return self.cells[0]

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Coord]:
        return iter(self.cells)


def flood_region(grid: Grid, start: Coord, visited: bytearray) -> List[Coord]:
    """Collect the component containing ``start``, marking cells in ``visited``.

    ``visited`` is indexed by ``x * height + y``.
    """
    w, h = grid.width, grid.height
    cells = grid.cells
    sx, sy = start
    visited[sx * h + sy] = 1
    q = deque([start])
    out: List[Coord] = []
    while q:
        x, y = q.popleft()
        out.append((x, y))
        for dx, dy in _NEIGHBOURS_4:
            nx, ny = x + dx, y + dy
            if 0 <= nx < w and 0 <= ny < h and not visited[nx * h + ny] and cells[nx][ny] != WALL:
                visited[nx * h + ny] = 1
                q.append((nx, ny))
    return out


def extract_regions(grid: Grid) -> List[Region]:
    """Partition every passable cell into regions, returned in discovery order."""
    w, h = grid.width, grid.height
    visited = bytearray(w * h)
    regions: List[Region] = []
    for x in range(w):
        col = grid.cells[x]
        for y in range(h):
            if visited[x * h + y] or col[y] == WALL:
                continue
            regions.append(Region(tuple(flood_region(grid, (x, y), visited))))
    return regions


__all__ = ["Region", "flood_region", "extract_regions"]
