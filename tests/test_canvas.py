import pytest

from roguemap.grid import Canvas
from roguemap.mapgen.rooms import TiledRoom
from roguemap.tiles import Tile, is_walkable


def test_blank_canvas_and_bounds():
    c = Canvas.blank(6, 4)
    assert c.get(5, 3) is Tile.BLANK
    with pytest.raises(IndexError):
        c.get(6, 0)
    with pytest.raises(IndexError):
        c.set(0, -1, Tile.FLOOR)


def test_draw_room_outline():
    c = Canvas.blank(10, 10)
    room = TiledRoom(col=0, row=0, x=1, y=2, width=5, height=4)
    c.draw_room(room)
    g = c.glyph_rows()
    assert "".join(g[2][1:6]) == "┌───┐"
    assert "".join(g[3][1:6]) == "│...│"
    assert "".join(g[4][1:6]) == "│...│"
    assert "".join(g[5][1:6]) == "└───┘"
    assert g[1][1] == " " and g[6][1] == " "

    interior = set(room.interior())
    for y in range(room.y, room.bottom + 1):
        for x in range(room.x, room.right + 1):
            assert is_walkable(c.get(x, y)) == ((x, y) in interior)


def test_find():
    c = Canvas.blank(3, 3)
    c.set(2, 1, Tile.GOAL)
    assert list(c.find(Tile.GOAL)) == [(2, 1)]
