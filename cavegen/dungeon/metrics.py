"""Generation counters, filled in by ``Dungeon._run_pipeline``."""

from typing import Any, Dict


def init_metrics() -> Dict[str, Any]:
    return {
        'seed': None,
        'regions_initial': 0,
        'regions_final': 0,
        'corridors_carved': 0,
        'corridor_cells': 0,
        'markers_placed': 0,
        'markers_dropped': 0,
        'tiles_wall': 0,
        'tiles_empty': 0,
        'runtime_ms': 0.0,
        'phase_ms': {},
    }
