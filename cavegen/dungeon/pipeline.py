"""Pipeline orchestration for cave dungeon generation.

Phases, strictly in order, each consuming the grid left by the previous one:

    * ``seed_noise``       random walls inside a solid border ring
    * ``smooth``           majority-rule cellular automaton passes
    * ``extract_regions``  flood fill into 4-connected open regions
    * ``connect_regions``  distance-ordered corridor chain joining every region
    * ``place_markers``    ordered marker sequence spread across regions

Public contract consumed elsewhere:
    Dungeon(GeneratorConfig(...)) OR Dungeon(seed=..., size=(W, H))
    Attributes: grid, regions, corridors, placements, config, metrics, seed
"""

from __future__ import annotations

import dataclasses
import logging
import random
import time
import warnings
from typing import Any, Dict, List, Optional, Tuple

from .config import GeneratorConfig
from .connector import Corridor, connect_regions
from .emitter import emit_grid, tile_object
from .errors import DegenerateInputWarning
from .grid import Grid
from .markers import Placement, place_markers
from .metrics import init_metrics
from .noise import seed_noise
from .regions import Region, extract_regions
from .smoothing import smooth
from .tiles import EMPTY, TILE_NAMES, WALL

logger = logging.getLogger(__name__)


class Dungeon:
    def __init__(
        self,
        config: GeneratorConfig | None = None,
        *,
        seed: int | None = None,
        size: Tuple[int, int] | None = None,
        rng: random.Random | None = None,
    ):
        # Accept either a config object or the short (seed, size) call style
        if config is None:
            config = GeneratorConfig(seed=seed) if size is None else GeneratorConfig(size[0], size[1], seed=seed)
        else:
            overrides = {}
            if seed is not None:
                overrides["seed"] = seed
            if size is not None:
                overrides["width"], overrides["height"] = size[0], size[1]
            if overrides:
                # validated copy; the caller's config is left as it was
                config = dataclasses.replace(config, **overrides)
        self.config = config
        self.seed = config.resolved_seed()
        # Every random draw goes through this source; nothing touches the module-level generator
        self.rng = rng if rng is not None else random.Random(self.seed)
        self.grid: Grid = Grid.filled(config.width, config.height, WALL)
        self.regions: List[Region] = []
        self.corridors: List[Corridor] = []
        self.placements: List[Placement] = []
        self.metrics: Dict[str, Any] = init_metrics()
        self._run_pipeline()

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    def _run_pipeline(self):
        """Execute the ordered generation phases with per-phase timing (``metrics['phase_ms']``)."""
        start = time.perf_counter()
        phase_times = {}

        def _phase(label, fn, *a, **k):
            ps = time.perf_counter()
            r = fn(*a, **k)
            phase_times[label] = round((time.perf_counter() - ps) * 1000, 3)
            return r

        cfg = self.config
        self.grid = _phase("seed_noise", seed_noise, cfg.width, cfg.height, cfg.fill_percent, self.rng)
        _phase("smooth", smooth, self.grid, cfg.smoothing_iterations)
        self.regions = _phase("extract_regions", extract_regions, self.grid)
        self.metrics["regions_initial"] = len(self.regions)
        if not self.regions:
            msg = f"no open regions after smoothing (seed={self.seed}, fill_percent={cfg.fill_percent})"
            logger.warning(msg)
            warnings.warn(msg, DegenerateInputWarning, stacklevel=3)
        self.corridors = _phase("connect_regions", connect_regions, self.grid, self.regions)
        self.metrics["regions_final"] = len(_phase("verify_regions", extract_regions, self.grid))
        self.placements = _phase("place_markers", place_markers, self.grid, self.regions, cfg.markers, self.rng)

        self.metrics.update(
            {
                "seed": self.seed,
                "corridors_carved": len(self.corridors),
                "corridor_cells": sum(c.cells_opened for c in self.corridors),
                "markers_placed": len(self.placements),
                "markers_dropped": len(cfg.markers) - len(self.placements) if self.regions else 0,
                "tiles_wall": self.grid.count(WALL),
                "tiles_empty": self.grid.count(EMPTY),
                "runtime_ms": round((time.perf_counter() - start) * 1000, 3),
                "phase_ms": phase_times,
            }
        )
        logger.debug(
            "generated %dx%d seed=%s regions=%d corridors=%d markers=%d",
            cfg.width,
            cfg.height,
            self.seed,
            len(self.regions),
            len(self.corridors),
            len(self.placements),
        )

    def is_walkable(self, x: int, y: int) -> bool:
        return self.grid.in_bounds(x, y) and self.grid[x, y] != WALL

    def marker_position(self, tile: str) -> Optional[Tuple[int, int]]:
        """First placed position of ``tile`` (e.g. the PLAYER entry point), or None."""
        for p in self.placements:
            if p.tile == tile:
                return p.position
        return None

    def emit(self, materialize=tile_object) -> List[Any]:
        return emit_grid(self.grid, materialize)

    # Convenience outputs
    def to_ascii(self) -> str:
        return self.grid.to_ascii()

    def to_json(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "width": self.config.width,
            "height": self.config.height,
            "grid": self.grid.rows(),
            "markers": [
                {
                    "tile": p.tile,
                    "kind": TILE_NAMES[p.tile],
                    "x": p.position[0],
                    "y": p.position[1],
                    "region": p.region_index,
                }
                for p in self.placements
            ],
            "metrics": self.metrics,
        }


def generate(config: GeneratorConfig | None = None, rng: random.Random | None = None) -> Grid:
    """Run the whole pipeline and return only the finalized grid."""
    return Dungeon(config, rng=rng).grid


__all__ = ["Dungeon", "generate"]
