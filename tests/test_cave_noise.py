import random

from cavegen.dungeon import EMPTY, WALL, seed_noise

from dungeon_test_utils import border_cells


def test_border_is_solid_for_any_fill():
    for fill in (0, 30, 45, 70, 100):
        g = seed_noise(24, 18, fill, random.Random(fill))
        assert all(g[x, y] == WALL for x, y in border_cells(g)), f"fill={fill}"


def test_fill_zero_opens_whole_interior():
    g = seed_noise(10, 10, 0, random.Random(1))
    assert g.count(EMPTY) == 8 * 8
    assert g.count(WALL) == 10 * 10 - 64


def test_fill_hundred_is_all_wall():
    g = seed_noise(10, 10, 100, random.Random(1))
    assert g.count(EMPTY) == 0


def test_fill_percent_is_roughly_honoured():
    g = seed_noise(50, 50, 50, random.Random(2024))
    interior = 48 * 48
    walls = g.count(WALL) - (50 * 4 - 4)
    ratio = walls / interior
    assert 0.4 < ratio < 0.6, ratio


def test_same_seed_same_noise():
    a = seed_noise(30, 20, 45, random.Random(99))
    b = seed_noise(30, 20, 45, random.Random(99))
    assert a == b
    c = seed_noise(30, 20, 45, random.Random(100))
    assert a != c


def test_tiny_grids_are_all_border():
    for w, h in ((1, 1), (2, 2), (1, 5), (2, 7)):
        g = seed_noise(w, h, 0, random.Random(0))
        assert g.size == (w, h)
        assert g.count(WALL) == w * h
