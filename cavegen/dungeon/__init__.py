"""Public dungeon package interface."""

from .config import GeneratorConfig, parse_markers
from .connector import Corridor, connect_regions
from .emitter import TileObject, emit_grid, tile_object
from .errors import ConfigurationError, DegenerateInputWarning
from .grid import Coord, Grid
from .markers import Placement, place_markers
from .noise import seed_noise
from .pipeline import Dungeon, generate
from .regions import Region, extract_regions
from .smoothing import smooth
from .tiles import (
    DAGGER,
    DEFAULT_MARKERS,
    DOOR,
    EMPTY,
    END,
    ENEMY,
    KEY,
    MARKERS,
    PLAYER,
    WALL,
)  # noqa: F401

__all__ = [
    "Dungeon",
    "generate",
    "GeneratorConfig",
    "parse_markers",
    "ConfigurationError",
    "DegenerateInputWarning",
    "Grid",
    "Coord",
    "Region",
    "Corridor",
    "Placement",
    "TileObject",
    "seed_noise",
    "smooth",
    "extract_regions",
    "connect_regions",
    "place_markers",
    "emit_grid",
    "tile_object",
    "EMPTY",
    "WALL",
    "PLAYER",
    "ENEMY",
    "DOOR",
    "KEY",
    "DAGGER",
    "END",
    "MARKERS",
    "DEFAULT_MARKERS",
]
