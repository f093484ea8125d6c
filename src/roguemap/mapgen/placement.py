# src/roguemap/mapgen/placement.py
from typing import Collection, Dict, Optional, Tuple

from ..grid import Canvas
from ..rng import PMRandom
from ..tiles import Tile
from .macro import Cell, MacroGrid
from .rooms import TiledRoom
from .search import farthest_room

XY = Tuple[int, int]


def pick_start_cell(grid: MacroGrid, rng: PMRandom) -> Cell:
    """
    A dead-end room (one connection) if there is any, then any connected
    room, then any room at all.
    """
    rooms = grid.rooms()
    if not rooms:
        raise ValueError("macro grid has no rooms")
    dead_ends = [c for c in rooms if grid.degree(c) == 1]
    linked = [c for c in rooms if grid.degree(c) > 0]
    return rng.choice(dead_ends or linked or rooms)


def place_random_item(
    canvas: Canvas,
    room: TiledRoom,
    rng: PMRandom,
    tile: Tile,
    taken: Collection[XY] = (),
) -> XY:
    """
    Write `tile` on a random interior tile of `room`, avoiding `taken`.
    Falls back to the whole interior if every tile is taken.
    """
    spots = [p for p in room.interior() if p not in taken] or room.interior()
    x, y = rng.choice(spots)
    canvas.set(x, y, tile)
    return (x, y)


def place_start(rooms: Dict[Cell, TiledRoom], start_cell: Cell) -> XY:
    return rooms[start_cell].center


def place_treasure(
    canvas: Canvas,
    grid: MacroGrid,
    rooms: Dict[Cell, TiledRoom],
    start_cell: Cell,
    rng: PMRandom,
    taken: Collection[XY] = (),
) -> Tuple[Optional[Cell], Optional[XY]]:
    """Treasure goes in any room but the start room; none when it is the only one."""
    others = [c for c in rooms if c != start_cell]
    if not others:
        return None, None
    # Isolated rooms are only used when nothing else is left.
    reachable = [c for c in others if grid.degree(c) > 0]
    cell = rng.choice(reachable or others)
    return cell, place_random_item(canvas, rooms[cell], rng, Tile.TREASURE, taken)


def place_goal(
    canvas: Canvas,
    grid: MacroGrid,
    rooms: Dict[Cell, TiledRoom],
    start_cell: Cell,
    rng: PMRandom,
    taken: Collection[XY] = (),
) -> Tuple[Cell, XY]:
    cell = farthest_room(grid, start_cell)
    return cell, place_random_item(canvas, rooms[cell], rng, Tile.GOAL, taken)
