# src/roguemap/engine/player.py
# Engine-only Player: one tile per move request, walkability checks, actor
# marker on the canvas, treasure pickup and goal detection.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..grid import Canvas
from ..tiles import Tile, is_walkable

log = logging.getLogger("roguemap.engine")

XY = Tuple[int, int]


DIRECTIONS: Dict[str, XY] = {
    "left": (-1, 0),
    "right": (1, 0),
    "up": (0, -1),
    "down": (0, 1),
}


@dataclass
class Player:
    canvas: Canvas
    spawn_xy: XY

    # dynamic fields (filled in __post_init__)
    x: int = 0
    y: int = 0
    under: Tile = Tile.FLOOR   # canvas tile hidden by the actor marker
    steps: int = 0
    has_treasure: bool = False
    finished: bool = False

    def __post_init__(self) -> None:
        self.x, self.y = self.spawn_xy
        self.under = self.canvas.get(self.x, self.y)
        self.canvas.set(self.x, self.y, Tile.PLAYER)

    @property
    def pos(self) -> XY:
        return (self.x, self.y)

    def can_move(self, dx: int, dy: int) -> bool:
        nx, ny = self.x + dx, self.y + dy
        if not self.canvas.in_bounds(nx, ny):
            return False
        return is_walkable(self.canvas.get(nx, ny))

    def move(self, dx: int, dy: int) -> Dict[str, bool]:
        """Apply one move request. Returns event flags; a finished run ignores input."""
        events = {"moved": False, "treasure_collected": False, "goal_reached": False}
        if self.finished or not self.can_move(dx, dy):
            return events

        nx, ny = self.x + dx, self.y + dy
        target = self.canvas.get(nx, ny)

        self.canvas.set(self.x, self.y, self.under)
        self.x, self.y = nx, ny
        self.steps += 1
        events["moved"] = True

        if target is Tile.TREASURE:
            self.has_treasure = True
            target = Tile.FLOOR
            events["treasure_collected"] = True
            log.info("treasure collected at %s", self.pos)
        elif target is Tile.GOAL:
            self.finished = True
            events["goal_reached"] = True
            log.info("goal reached at %s after %d steps", self.pos, self.steps)

        self.under = target
        self.canvas.set(nx, ny, Tile.PLAYER)
        return events

    def step(self, direction: Optional[str]) -> Dict[str, bool]:
        if direction not in DIRECTIONS:
            return {"moved": False, "treasure_collected": False, "goal_reached": False}
        return self.move(*DIRECTIONS[direction])
