import random

from cavegen.dungeon import Grid, extract_regions, seed_noise, smooth
from cavegen.dungeon.tiles import EMPTY, WALL

from dungeon_test_utils import bfs_reachable, open_cells


def test_two_rooms_split_by_wall_column():
    g = Grid.from_rows(
        [
            "#######",
            "#..#..#",
            "#..#..#",
            "#######",
        ]
    )
    regions = extract_regions(g)
    assert len(regions) == 2
    assert regions[0].anchor == (1, 1)
    assert regions[1].anchor == (4, 1)
    assert set(regions[0]) == {(1, 1), (1, 2), (2, 1), (2, 2)}
    assert [len(r) for r in regions] == [4, 4]


def test_diagonal_cells_are_separate_regions():
    g = Grid.from_rows(
        [
            "####",
            "#.##",
            "##.#",
            "####",
        ]
    )
    assert len(extract_regions(g)) == 2


def test_markers_count_as_open_floor():
    g = Grid.from_rows(
        [
            "#####",
            "#.@.#",
            "#####",
        ]
    )
    regions = extract_regions(g)
    assert len(regions) == 1
    assert len(regions[0]) == 3


def test_all_wall_grid_has_no_regions():
    assert extract_regions(Grid.filled(12, 9, WALL)) == []


def test_regions_partition_open_cells():
    g = seed_noise(40, 30, 48, random.Random(7))
    smooth(g, 3)
    regions = extract_regions(g)
    seen = set()
    for r in regions:
        cells = set(r)
        assert len(cells) == len(r)
        assert not (cells & seen), "regions overlap"
        seen |= cells
        # each region is exactly one 4-connected component
        assert bfs_reachable(g, r.anchor) == cells
    assert seen == open_cells(g)


def test_anchor_is_first_cell_in_column_scan():
    g = seed_noise(36, 28, 50, random.Random(3))
    smooth(g, 2)
    regions = extract_regions(g)
    assert regions, "expected at least one region"
    for r in regions:
        assert r.anchor == min(r.cells)
    anchors = [r.anchor for r in regions]
    assert anchors == sorted(anchors)


def test_large_open_area_needs_no_recursion():
    g = Grid.filled(300, 300, WALL)
    for x in range(1, 299):
        for y in range(1, 299):
            g[x, y] = EMPTY
    regions = extract_regions(g)
    assert len(regions) == 1
    assert len(regions[0]) == 298 * 298
