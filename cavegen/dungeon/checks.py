"""Structural diagnostics for generated dungeons.

``analyze`` re-derives every structural guarantee from the finished grid
instead of trusting the pipeline's own metrics, so it is suitable both for
tests and for sweeping many seeds from the command line.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict

from .regions import extract_regions
from .tiles import MARKERS, TILE_NAMES, WALL


def analyze(dungeon) -> Dict[str, Any]:
    grid = dungeon.grid
    border_violations = [(x, y) for x, y in grid.border_coords() if grid[x, y] != WALL]

    regions = extract_regions(grid)
    region_of = {}
    for idx, region in enumerate(regions):
        for pos in region:
            region_of[pos] = idx

    expected = Counter(dungeon.config.markers) if dungeon.regions else Counter()
    actual = Counter(tile for _, _, tile in grid.iter_row_major() if tile in MARKERS)
    marker_mismatches = {
        TILE_NAMES[t]: {"expected": expected[t], "actual": actual[t]}
        for t in sorted(set(expected) | set(actual))
        if expected[t] != actual[t]
    }

    unreachable_markers = []
    if dungeon.placements:
        home = region_of.get(dungeon.placements[0].position)
        unreachable_markers = [
            {"kind": TILE_NAMES[p.tile], "x": p.position[0], "y": p.position[1]}
            for p in dungeon.placements
            if region_of.get(p.position) != home
        ]

    return {
        "seed": dungeon.seed,
        "border_violations": border_violations,
        "regions_after_connect": len(regions),
        "marker_mismatches": marker_mismatches,
        "unreachable_markers": unreachable_markers,
    }


def is_clean(report: Dict[str, Any]) -> bool:
    return (
        not report["border_violations"]
        and report["regions_after_connect"] <= 1
        and not report["marker_mismatches"]
        and not report["unreachable_markers"]
    )


__all__ = ["analyze", "is_clean"]
