import itertools

from roguemap.grid import Canvas
from roguemap.mapgen.corridor import carve, corner_tile, path_sides, path_tiles, route
from roguemap.rng import PMRandom
from roguemap.tiles import Side, Tile, is_walkable


def test_route_is_contiguous_and_single_bend():
    for x_first in (True, False):
        path = route((2, 3), (7, 9), x_first)
        assert path[0] == (2, 3) and path[-1] == (7, 9)
        assert len(path) == 5 + 6 + 1
        for (ax, ay), (bx, by) in zip(path, path[1:]):
            assert abs(ax - bx) + abs(ay - by) == 1
        steps = [(bx - ax, by - ay) for (ax, ay), (bx, by) in zip(path, path[1:])]
        bends = sum(1 for s, t in zip(steps, steps[1:]) if s != t)
        assert bends == 1


def test_reverse_route_with_swapped_axes_covers_same_cells():
    pts = [(0, 0), (4, 1), (3, 7), (9, 2)]
    for a, b in itertools.permutations(pts, 2):
        for x_first in (True, False):
            assert set(route(a, b, x_first)) == set(route(b, a, not x_first))


def test_corner_tile_all_turns():
    # moving right then up: opens west and north
    assert corner_tile(1, 0, 0, -1) is Tile.CORRIDOR_NW
    assert corner_tile(1, 0, 0, 1) is Tile.CORRIDOR_SW
    assert corner_tile(-1, 0, 0, -1) is Tile.CORRIDOR_NE
    assert corner_tile(-1, 0, 0, 1) is Tile.CORRIDOR_SE
    assert corner_tile(0, 1, 1, 0) is Tile.CORRIDOR_NE
    assert corner_tile(0, 1, -1, 0) is Tile.CORRIDOR_NW
    assert corner_tile(0, -1, 1, 0) is Tile.CORRIDOR_SE
    assert corner_tile(0, -1, -1, 0) is Tile.CORRIDOR_SW
    # straight runs
    assert corner_tile(1, 0, 1, 0) is Tile.CORRIDOR_H
    assert corner_tile(0, -1, 0, -1) is Tile.CORRIDOR_V


def test_mirrored_turns_are_mirror_images():
    # right-then-up and up-then-right meet at opposite corners of the same box
    assert corner_tile(1, 0, 0, -1).glyph == "╝"
    assert corner_tile(0, -1, 1, 0).glyph == "╔"


def test_path_tiles_orientation():
    # horizontal connection, x first, then down: ═ ═ ╗ ║ then exits east as ╚
    path = route((0, 0), (2, 2), True)
    glyphs = "".join(t.glyph for t in path_tiles(path, horizontal=True))
    assert glyphs == "══╗║╚"
    # vertical straight run
    path = route((4, 0), (4, 3), False)
    assert {t for t in path_tiles(path, horizontal=False)} == {Tile.CORRIDOR_V}


def test_degenerate_single_cell_follows_hint():
    c = Canvas.blank(5, 5)
    carve(c, (2, 2), (2, 2), True, PMRandom.from_seed(1))
    assert c.get(2, 2) is Tile.CORRIDOR_H
    c = Canvas.blank(5, 5)
    carve(c, (2, 2), (2, 2), False, PMRandom.from_seed(1))
    assert c.get(2, 2) is Tile.CORRIDOR_V


def test_crossing_corridors_make_a_cross():
    c = Canvas.blank(7, 7)
    carve(c, (0, 3), (6, 3), True, PMRandom.from_seed(1))
    carve(c, (3, 0), (3, 6), False, PMRandom.from_seed(1))
    assert c.get(3, 3) is Tile.CORRIDOR_CROSS
    assert c.get(2, 3) is Tile.CORRIDOR_H and c.get(3, 2) is Tile.CORRIDOR_V


def test_corridor_ending_on_another_makes_a_tee():
    c = Canvas.blank(7, 7)
    carve(c, (0, 3), (6, 3), True, PMRandom.from_seed(1))
    # no door past the end: the cell only gains the north opening
    carve(c, (3, 0), (3, 3), False, PMRandom.from_seed(1), door_ends=(True, False))
    assert c.get(3, 3) is Tile.CORRIDOR_TEE_N


def test_end_without_door_opens_only_onto_path():
    # from a junction centre, down then right, into a door on the east
    path = route((0, 0), (2, 2), False)
    sides = path_sides(path, horizontal=True, door_ends=(False, True))
    assert sides[0] == {Side.S}
    assert sides[-1] == {Side.W, Side.E}
    assert path_tiles(path, True, (False, True))[2] is Tile.CORRIDOR_NE


def test_carve_shared_axis_is_straight():
    c = Canvas.blank(12, 12)
    path = carve(c, (1, 5), (9, 5), True, PMRandom.from_seed(4))
    assert all(y == 5 for _, y in path)
    path = carve(c, (3, 1), (3, 10), False, PMRandom.from_seed(4))
    assert all(x == 3 for x, _ in path)


def test_carved_cells_walkable_in_both_modes():
    for uniform in (False, True):
        for seed in range(1, 20):
            c = Canvas.blank(20, 20)
            rng = PMRandom.from_seed(seed)
            a = (rng.below(20), rng.below(20))
            b = (rng.below(20), rng.below(20))
            path = carve(c, a, b, rng.coin(), rng, uniform=uniform)
            for x, y in path:
                assert is_walkable(c.get(x, y))
                if uniform:
                    assert c.get(x, y) is Tile.RUBBLE
