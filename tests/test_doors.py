from roguemap.config import GeneratorConfig
from roguemap.grid import Canvas
from roguemap.mapgen.doors import place_doors
from roguemap.mapgen.macro import MacroGrid
from roguemap.mapgen.rooms import TiledRoom, place_room, sub_rect_center
from roguemap.rng import PMRandom
from roguemap.tiles import Side, Tile, is_walkable, open_sides

CFG = GeneratorConfig(grid_size=2, room_budget=(1, 4))


def two_room_grid(horizontal=True):
    g = MacroGrid(2)
    a, b = ((0, 0), (1, 0)) if horizontal else ((0, 0), (0, 1))
    g.cell(*a).is_room = True
    g.cell(*b).is_room = True
    g.connect(a, b)
    return g, a, b


def draw(canvas, rooms):
    for r in rooms.values():
        canvas.draw_room(r)


def test_horizontal_pair_gets_doors_and_corridor():
    for seed in range(1, 25):
        g, a, b = two_room_grid(True)
        rooms = {
            a: TiledRoom(0, 0, 1, 2, 6, 5),
            b: TiledRoom(1, 0, 12, 1, 7, 7),
        }
        c = Canvas.blank(CFG.width, CFG.height)
        draw(c, rooms)
        (conn,) = place_doors(c, g, rooms, PMRandom.from_seed(seed), CFG)

        (dx1, dy1), (dx2, dy2) = conn.door_a, conn.door_b
        assert dx1 == rooms[a].right and rooms[a].y < dy1 < rooms[a].bottom
        assert dx2 == rooms[b].x and rooms[b].y < dy2 < rooms[b].bottom
        assert c.get(dx1, dy1) is Tile.DOOR and c.get(dx2, dy2) is Tile.DOOR
        assert conn.start == (dx1 + 1, dy1)
        assert conn.end == (dx2 - 1, dy2)
        for x, y in conn.path:
            assert is_walkable(c.get(x, y))
            assert not rooms[a].contains(x, y) and not rooms[b].contains(x, y)


def test_vertical_pair_doors_on_bottom_and_top_walls():
    g, a, b = two_room_grid(False)
    rooms = {
        a: TiledRoom(0, 0, 2, 1, 5, 6),
        b: TiledRoom(0, 1, 1, 12, 8, 5),
    }
    c = Canvas.blank(CFG.width, CFG.height)
    draw(c, rooms)
    (conn,) = place_doors(c, g, rooms, PMRandom.from_seed(8), CFG)
    assert conn.door_a[1] == rooms[a].bottom
    assert conn.door_b[1] == rooms[b].y
    assert conn.start == (conn.door_a[0], rooms[a].bottom + 1)
    assert conn.end == (conn.door_b[0], rooms[b].y - 1)
    assert not conn.horizontal


def test_thin_room_skips_door_and_corridor():
    g, a, b = two_room_grid(True)
    rooms = {
        a: TiledRoom(0, 0, 1, 3, 6, 2),  # height 2: no non-corner wall tile
        b: TiledRoom(1, 0, 12, 1, 7, 7),
    }
    c = Canvas.blank(CFG.width, CFG.height)
    draw(c, rooms)
    before = list(c.buf)
    assert place_doors(c, g, rooms, PMRandom.from_seed(1), CFG) == []
    assert c.buf == before
    assert list(c.find(Tile.DOOR)) == []


def test_junction_endpoint_uses_block_centre_without_door():
    g = MacroGrid(2)
    for cell in ((0, 0), (1, 0), (1, 1)):
        g.cell(*cell).is_room = True
    g.connect((0, 0), (1, 0))
    g.connect((1, 0), (1, 1))
    g.cell(1, 0).is_room = False  # junction
    rooms = {
        (0, 0): TiledRoom(0, 0, 1, 1, 6, 6),
        (1, 1): TiledRoom(1, 1, 11, 11, 6, 6),
    }
    c = Canvas.blank(CFG.width, CFG.height)
    draw(c, rooms)
    conns = place_doors(c, g, rooms, PMRandom.from_seed(3), CFG)
    assert len(conns) == 2
    centre = sub_rect_center(1, 0, CFG)
    west, south = conns
    assert west.end == centre and west.door_b is None
    assert south.start == centre and south.door_a is None
    assert len(list(c.find(Tile.DOOR))) == 2
    # the centre opens exactly where the two corridors leave it
    cx, cy = centre
    (wx, wy), (sx, sy) = west.path[-2], south.path[1]
    leaving = {Side.of_delta(wx - cx, wy - cy), Side.of_delta(sx - cx, sy - cy)}
    if len(leaving) == 2:
        assert open_sides(c.get(*centre)) == leaving
    else:
        assert leaving < open_sides(c.get(*centre))


def test_uniform_mode_writes_rubble():
    cfg = GeneratorConfig(grid_size=2, room_budget=(1, 4), uniform_corridors=True)
    g, a, b = two_room_grid(True)
    rooms = {a: TiledRoom(0, 0, 1, 2, 6, 5), b: TiledRoom(1, 0, 12, 1, 7, 7)}
    c = Canvas.blank(cfg.width, cfg.height)
    draw(c, rooms)
    (conn,) = place_doors(c, g, rooms, PMRandom.from_seed(2), cfg)
    assert {c.get(x, y) for x, y in conn.path} == {Tile.RUBBLE}


def test_junction_centre_follows_real_corridor_directions():
    # junction in the middle of a 3x3 grid, with rooms on all four sides
    cfg = GeneratorConfig(room_budget=(1, 9))
    mid = (1, 1)
    arms = [(1, 0), (2, 1), (1, 2), (0, 1)]
    for seed in range(1, 40):
        g = MacroGrid(3)
        for cell in arms:
            g.cell(*cell).is_room = True
            g.connect(cell, mid)
        rng = PMRandom.from_seed(seed)
        rooms = {cell: place_room(*cell, rng, cfg) for cell in arms}
        c = Canvas.blank(cfg.width, cfg.height)
        draw(c, rooms)
        conns = place_doors(c, g, rooms, rng, cfg)
        cx, cy = centre = sub_rect_center(*mid, cfg)
        leaving = set()
        for conn in conns:
            path = conn.path if conn.start == centre else conn.path[::-1]
            nx, ny = path[1]
            leaving.add(Side.of_delta(nx - cx, ny - cy))
        tile = c.get(*centre)
        assert leaving <= open_sides(tile)
        if len(leaving) > 1:
            assert open_sides(tile) == leaving
