"""Grid emission boundary.

The generator never renders anything itself. A caller hands ``emit_grid`` a
``materialize(x, y, tile)`` callback and receives whatever it returns for each
non-empty cell. Cells are visited once each in row-major order (y outer, x
inner).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Callable, Dict, List, TypeVar

from .grid import Grid
from .tiles import EMPTY, TILE_NAMES

T = TypeVar("T")


@dataclass(frozen=True)
class TileObject:
    x: int
    y: int
    tile: str
    kind: str

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


def tile_object(x: int, y: int, tile: str) -> TileObject:
    return TileObject(x, y, tile, TILE_NAMES.get(tile, "unknown"))


def emit_grid(grid: Grid, materialize: Callable[[int, int, str], T]) -> List[T]:
    return [materialize(x, y, tile) for x, y, tile in grid.iter_row_major() if tile != EMPTY]


__all__ = ["TileObject", "tile_object", "emit_grid"]
