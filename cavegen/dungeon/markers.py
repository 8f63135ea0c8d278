"""Marker placement across discovered regions."""

from __future__ import annotations

import logging
import math
import random
import warnings
from dataclasses import dataclass
from typing import List, Sequence, Set

from .errors import DegenerateInputWarning
from .grid import Coord, Grid
from .regions import Region

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Placement:
    tile: str
    position: Coord
    region_index: int


def markers_per_region(marker_count: int, region_count: int) -> int:
    if region_count <= 0:
        return 0
    return math.ceil(marker_count / region_count)


def place_markers(
    grid: Grid,
    regions: Sequence[Region],
    markers: Sequence[str],
    rng: random.Random,
) -> List[Placement]:
    """Distribute ``markers`` (in order) over ``regions`` (in discovery order).

    Each region receives up to ``ceil(len(markers) / len(regions))`` markers,
    each on a distinct random cell of that region. Markers that do not fit in a
    small region go to the first region that still has a free cell. With no
    regions nothing is placed.
    """
    if not regions or not markers:
        return []
    quota = markers_per_region(len(markers), len(regions))
    taken: Set[Coord] = set()
    placements: List[Placement] = []
    overflow: List[str] = []
    idx = 0
    for ri, region in enumerate(regions):
        if idx >= len(markers):
            break
        batch = list(markers[idx : idx + quota])
        idx += len(batch)
        fit = min(len(batch), len(region))
        for tile, pos in zip(batch, rng.sample(region.cells, fit)):
            grid[pos] = tile
            taken.add(pos)
            placements.append(Placement(tile, pos, ri))
        overflow.extend(batch[fit:])

    dropped = 0
    for tile in overflow:
        for ri, region in enumerate(regions):
            free = [c for c in region.cells if c not in taken]
            if free:
                pos = rng.choice(free)
                grid[pos] = tile
                taken.add(pos)
                placements.append(Placement(tile, pos, ri))
                break
        else:
            dropped += 1
    if dropped:
        msg = f"open area too small for marker sequence: dropped {dropped} of {len(markers)} markers"
        logger.warning(msg)
        warnings.warn(msg, DegenerateInputWarning, stacklevel=2)
    return placements


__all__ = ["Placement", "markers_per_region", "place_markers"]
