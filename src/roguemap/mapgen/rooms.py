# src/roguemap/mapgen/rooms.py
# Room rectangles inside each macro cell's reserved block of the canvas.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..config import GeneratorConfig, DEFAULT
from ..rng import PMRandom
from .macro import Cell, MacroGrid

log = logging.getLogger("roguemap.mapgen")

XY = Tuple[int, int]


@dataclass(frozen=True)
class TiledRoom:
    col: int
    row: int
    x: int  # top-left, canvas tiles
    y: int
    width: int
    height: int

    @property
    def cell(self) -> Cell:
        return (self.col, self.row)

    @property
    def right(self) -> int:
        return self.x + self.width - 1

    @property
    def bottom(self) -> int:
        return self.y + self.height - 1

    @property
    def center(self) -> XY:
        return (self.x + self.width // 2, self.y + self.height // 2)

    def interior(self) -> List[XY]:
        return [
            (x, y)
            for y in range(self.y + 1, self.bottom)
            for x in range(self.x + 1, self.right)
        ]

    def contains(self, x: int, y: int) -> bool:
        return self.x <= x <= self.right and self.y <= y <= self.bottom


def sub_rect(col: int, row: int, cfg: GeneratorConfig = DEFAULT) -> Tuple[int, int, int, int]:
    """(x, y, w, h) of the canvas block reserved for macro cell (col, row)."""
    s = cfg.subgrid_size
    return (col * s, row * s, s, s)


def sub_rect_center(col: int, row: int, cfg: GeneratorConfig = DEFAULT) -> XY:
    x, y, w, h = sub_rect(col, row, cfg)
    return (x + w // 2, y + h // 2)


def place_room(col: int, row: int, rng: PMRandom, cfg: GeneratorConfig = DEFAULT) -> TiledRoom:
    w = rng.randint(cfg.min_room_dim, cfg.max_room_dim)
    h = rng.randint(cfg.min_room_dim, cfg.max_room_dim)

    qx, qy, qw, qh = sub_rect(col, row, cfg)
    # Config validation keeps both slacks non-negative.
    slack_w = qw - w - 2 * cfg.margin
    slack_h = qh - h - 2 * cfg.margin

    x = qx + cfg.margin + rng.randint(0, slack_w)
    y = qy + cfg.margin + rng.randint(0, slack_h)
    return TiledRoom(col=col, row=row, x=x, y=y, width=w, height=h)


def place_rooms(grid: MacroGrid, rng: PMRandom, cfg: GeneratorConfig = DEFAULT) -> Dict[Cell, TiledRoom]:
    rooms: Dict[Cell, TiledRoom] = {}
    for col, row in grid.all_cells():
        if grid.is_room((col, row)):
            rooms[(col, row)] = place_room(col, row, rng, cfg)
    log.debug("placed %d rooms", len(rooms))
    return rooms
