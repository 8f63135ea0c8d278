"""Dense 2D tile grid that carries its own dimensions.

Storage is column-major (``cells[x][y]``) like the rest of the generator, but
callers index with a coordinate tuple: ``grid[x, y]``.
"""

from __future__ import annotations

from typing import Iterator, List, Tuple

from .tiles import EMPTY, WALL

Coord = Tuple[int, int]


class Grid:
    __slots__ = ("_width", "_height", "cells")

    def __init__(self, width: int, height: int, fill: str = EMPTY):
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self.cells: List[List[str]] = [[fill for _ in range(height)] for _ in range(width)]

    @classmethod
    def filled(cls, width: int, height: int, tile: str) -> "Grid":
        return cls(width, height, fill=tile)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def is_border(self, x: int, y: int) -> bool:
        return x == 0 or y == 0 or x == self._width - 1 or y == self._height - 1

    def is_interior(self, x: int, y: int) -> bool:
        return 0 < x < self._width - 1 and 0 < y < self._height - 1

    def __getitem__(self, pos: Coord) -> str:
        x, y = pos
        if not self.in_bounds(x, y):
            raise IndexError(f"{pos} outside {self._width}x{self._height} grid")
        return self.cells[x][y]

    def __setitem__(self, pos: Coord, tile: str) -> None:
        x, y = pos
        if not self.in_bounds(x, y):
            raise IndexError(f"{pos} outside {self._width}x{self._height} grid")
        self.cells[x][y] = tile

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.size == other.size and self.cells == other.cells

    def __repr__(self) -> str:
        return f"Grid({self._width}x{self._height}, walls={self.count(WALL)})"

    def copy(self) -> "Grid":
        dup = Grid.__new__(Grid)
        dup._width = self._width
        dup._height = self._height
        dup.cells = [list(col) for col in self.cells]
        return dup

    def count(self, tile: str) -> int:
        return sum(col.count(tile) for col in self.cells)

    def border_coords(self) -> Iterator[Coord]:
        w, h = self._width, self._height
        for x in range(w):
            for y in range(h):
                if self.is_border(x, y):
                    yield x, y

    def iter_row_major(self) -> Iterator[Tuple[int, int, str]]:
        """Yield ``(x, y, tile)`` for every cell, y outer and x inner."""
        for y in range(self._height):
            for x in range(self._width):
                yield x, y, self.cells[x][y]

    def rows(self) -> List[str]:
        return ["".join(self.cells[x][y] for x in range(self._width)) for y in range(self._height)]

    def to_ascii(self) -> str:
        return "\n".join(self.rows())

    @classmethod
    def from_rows(cls, rows: List[str]) -> "Grid":
        """Build a grid from row strings (index 0 is the top row)."""
        if not rows or not rows[0]:
            raise ValueError("rows must be non-empty")
        width = len(rows[0])
        if any(len(r) != width for r in rows):
            raise ValueError("rows must all have the same length")
        grid = cls(width, len(rows))
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                grid.cells[x][y] = ch
        return grid


__all__ = ["Grid", "Coord"]
