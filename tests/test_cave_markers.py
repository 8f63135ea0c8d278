import random
from collections import Counter

import pytest

from cavegen.dungeon import (
    DAGGER,
    DEFAULT_MARKERS,
    DOOR,
    ENEMY,
    KEY,
    PLAYER,
    DegenerateInputWarning,
    Grid,
    extract_regions,
    place_markers,
)
from cavegen.dungeon.markers import markers_per_region
from cavegen.dungeon.tiles import EMPTY, MARKERS


def _open_room(width, height):
    g = Grid.filled(width, height, "#")
    for x in range(1, width - 1):
        for y in range(1, height - 1):
            g[x, y] = EMPTY
    return g


def _grid_markers(g):
    return Counter(t for _, _, t in g.iter_row_major() if t in MARKERS)


def test_markers_per_region_uses_ceiling():
    assert markers_per_region(5, 1) == 5
    assert markers_per_region(5, 2) == 3
    assert markers_per_region(5, 3) == 2
    assert markers_per_region(5, 5) == 1
    assert markers_per_region(5, 7) == 1
    assert markers_per_region(5, 0) == 0


def test_single_region_gets_every_marker_once():
    g = _open_room(10, 10)
    regions = extract_regions(g)
    placed = place_markers(g, regions, DEFAULT_MARKERS, random.Random(1))
    assert [p.tile for p in placed] == list(DEFAULT_MARKERS)
    positions = [p.position for p in placed]
    assert len(set(positions)) == len(positions)
    cells = set(regions[0])
    for p in placed:
        assert p.position in cells
        assert g[p.position] == p.tile
    assert _grid_markers(g) == Counter(DEFAULT_MARKERS)


def test_batches_follow_region_order():
    g = Grid.from_rows(
        [
            "#############",
            "#...#...#...#",
            "#...#...#...#",
            "#...#...#...#",
            "#############",
        ]
    )
    regions = extract_regions(g)
    assert len(regions) == 3
    placed = place_markers(g, regions, DEFAULT_MARKERS, random.Random(4))
    assert [(p.tile, p.region_index) for p in placed] == [
        (PLAYER, 0),
        (DAGGER, 0),
        (ENEMY, 1),
        (KEY, 1),
        (DOOR, 2),
    ]


def test_more_regions_than_markers_leaves_tail_empty():
    g = Grid.from_rows(["#" * 15, "#.#.#.#.#.#.#.#", "#" * 15])
    regions = extract_regions(g)
    assert len(regions) == 7
    placed = place_markers(g, regions, DEFAULT_MARKERS, random.Random(0))
    assert [p.region_index for p in placed] == [0, 1, 2, 3, 4]
    assert g[11, 1] == EMPTY and g[13, 1] == EMPTY


def test_no_regions_places_nothing():
    g = Grid.filled(8, 8, "#")
    before = g.copy()
    assert place_markers(g, [], DEFAULT_MARKERS, random.Random(0)) == []
    assert g == before


def test_small_region_spills_into_next_free_cell():
    g = Grid.from_rows(
        [
            "########",
            "#.#....#",
            "###....#",
            "#......#",
            "########",
        ]
    )
    regions = extract_regions(g)
    assert [len(r) for r in regions] == [1, 14]
    placed = place_markers(g, regions, DEFAULT_MARKERS, random.Random(9))
    assert len(placed) == 5
    assert Counter(p.tile for p in placed) == Counter(DEFAULT_MARKERS)
    assert placed[0].tile == PLAYER and placed[0].position == (1, 1)
    assert all(p.region_index == 1 for p in placed[1:])
    assert len({p.position for p in placed}) == 5
    assert _grid_markers(g) == Counter(DEFAULT_MARKERS)


def test_too_little_floor_drops_with_warning():
    g = Grid.from_rows(["#####", "#.#.#", "#####"])
    regions = extract_regions(g)
    with pytest.warns(DegenerateInputWarning, match="dropped 3 of 5"):
        placed = place_markers(g, regions, DEFAULT_MARKERS, random.Random(0))
    assert [p.tile for p in placed] == [PLAYER, KEY]
    assert g.count(EMPTY) == 0


def test_placement_is_deterministic_for_same_rng_seed():
    a, b = _open_room(16, 12), _open_room(16, 12)
    pa = place_markers(a, extract_regions(a), DEFAULT_MARKERS, random.Random(77))
    pb = place_markers(b, extract_regions(b), DEFAULT_MARKERS, random.Random(77))
    assert pa == pb
    assert a == b
