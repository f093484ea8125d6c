# src/roguemap/mapgen/doors.py
# Doors on facing walls and the corridors between them.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

from ..config import GeneratorConfig, DEFAULT
from ..grid import Canvas
from ..rng import PMRandom
from ..tiles import Side, Tile, corridor_piece
from .corridor import carve
from .macro import Cell, MacroGrid
from .rooms import TiledRoom, sub_rect_center

log = logging.getLogger("roguemap.mapgen")

XY = Tuple[int, int]


@dataclass(frozen=True)
class Connection:
    a: Cell          # lower cell (west / north)
    b: Cell          # higher cell (east / south)
    horizontal: bool
    door_a: Optional[XY]  # None where the endpoint is a junction centre
    door_b: Optional[XY]
    path: Tuple[XY, ...]

    @property
    def start(self) -> XY:
        return self.path[0]

    @property
    def end(self) -> XY:
        return self.path[-1]


def _too_thin(room: Optional[TiledRoom], horizontal: bool) -> bool:
    # A door skips the corners, so the facing wall needs 3+ tiles.
    if room is None:
        return False
    return (room.height if horizontal else room.width) <= 2


def _door_on_far_wall(room: TiledRoom, horizontal: bool, rng: PMRandom) -> XY:
    # East wall for horizontal connections, bottom wall for vertical ones.
    if horizontal:
        return (room.right, rng.randint(room.y + 1, room.bottom - 1))
    return (rng.randint(room.x + 1, room.right - 1), room.bottom)


def _door_on_near_wall(room: TiledRoom, horizontal: bool, rng: PMRandom) -> XY:
    # West wall / top wall.
    if horizontal:
        return (room.x, rng.randint(room.y + 1, room.bottom - 1))
    return (rng.randint(room.x + 1, room.right - 1), room.y)


def _leaving_side(path: List[XY], fallback: Side) -> Side:
    # Side of path[0] the corridor leaves by.
    if len(path) < 2:
        return fallback
    (x0, y0), (x1, y1) = path[0], path[1]
    return Side.of_delta(x1 - x0, y1 - y0)


def place_doors(
    canvas: Canvas,
    grid: MacroGrid,
    rooms: Dict[Cell, TiledRoom],
    rng: PMRandom,
    cfg: GeneratorConfig = DEFAULT,
) -> List[Connection]:
    """
    Carve every corridor of the macro graph, once each, from the lower cell
    to the higher one. Rooms get a door on the facing wall and the corridor
    runs between the tiles just outside the two doors; a junction endpoint
    is the centre of its cell's block and gets no door.
    """
    connections: List[Connection] = []
    junction_sides: Dict[Cell, Set[Side]] = {}

    for a, b in grid.edges():
        horizontal = a[1] == b[1]
        ra, rb = rooms.get(a), rooms.get(b)
        if _too_thin(ra, horizontal) or _too_thin(rb, horizontal):
            log.debug("skipping corridor %s-%s: room too thin for a door", a, b)
            continue

        fwd = Side.E if horizontal else Side.S
        step = fwd.delta

        door_a = None
        if ra is not None:
            door_a = _door_on_far_wall(ra, horizontal, rng)
            start = (door_a[0] + step[0], door_a[1] + step[1])
        else:
            start = sub_rect_center(*a, cfg)

        door_b = None
        if rb is not None:
            door_b = _door_on_near_wall(rb, horizontal, rng)
            end = (door_b[0] - step[0], door_b[1] - step[1])
        else:
            end = sub_rect_center(*b, cfg)

        for door in (door_a, door_b):
            if door is not None:
                canvas.set(door[0], door[1], Tile.DOOR)

        path = carve(
            canvas, start, end, horizontal, rng,
            uniform=cfg.uniform_corridors,
            door_ends=(ra is not None, rb is not None),
        )
        connections.append(Connection(a, b, horizontal, door_a, door_b, tuple(path)))

        if ra is None:
            junction_sides.setdefault(a, set()).add(_leaving_side(path, fwd))
        if rb is None:
            junction_sides.setdefault(b, set()).add(_leaving_side(path[::-1], fwd.opposite))

    if not cfg.uniform_corridors:
        # Several corridors meet at a junction centre; draw the piece joining all of them.
        for cell, sides in junction_sides.items():
            x, y = sub_rect_center(*cell, cfg)
            canvas.set(x, y, corridor_piece(sides))

    log.debug("carved %d corridors, %d junctions", len(connections), len(junction_sides))
    return connections
