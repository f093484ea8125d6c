# Canonical tile kinds and their glyphs.

from enum import Enum
from typing import Dict, FrozenSet, Iterable, Tuple


class Tile(Enum):
    BLANK = "blank"
    FLOOR = "floor"
    WALL_H = "wall_h"
    WALL_V = "wall_v"
    CORNER_TL = "corner_tl"
    CORNER_TR = "corner_tr"
    CORNER_BL = "corner_bl"
    CORNER_BR = "corner_br"
    DOOR = "door"
    # Corridor pieces are named by the sides of the tile they open onto.
    CORRIDOR_H = "corridor_h"
    CORRIDOR_V = "corridor_v"
    CORRIDOR_SE = "corridor_se"
    CORRIDOR_SW = "corridor_sw"
    CORRIDOR_NE = "corridor_ne"
    CORRIDOR_NW = "corridor_nw"
    # Tees are named by the side their stem points to.
    CORRIDOR_TEE_N = "corridor_tee_n"
    CORRIDOR_TEE_S = "corridor_tee_s"
    CORRIDOR_TEE_E = "corridor_tee_e"
    CORRIDOR_TEE_W = "corridor_tee_w"
    CORRIDOR_CROSS = "corridor_cross"
    RUBBLE = "rubble"
    TREASURE = "treasure"
    GOAL = "goal"
    PLAYER = "player"

    @property
    def glyph(self) -> str:
        return GLYPHS[self]


GLYPHS: Dict[Tile, str] = {
    Tile.BLANK: " ",
    Tile.FLOOR: ".",
    Tile.WALL_H: "─",
    Tile.WALL_V: "│",
    Tile.CORNER_TL: "┌",
    Tile.CORNER_TR: "┐",
    Tile.CORNER_BL: "└",
    Tile.CORNER_BR: "┘",
    Tile.DOOR: "╬",
    Tile.CORRIDOR_H: "═",
    Tile.CORRIDOR_V: "║",
    Tile.CORRIDOR_SE: "╔",
    Tile.CORRIDOR_SW: "╗",
    Tile.CORRIDOR_NE: "╚",
    Tile.CORRIDOR_NW: "╝",
    Tile.CORRIDOR_TEE_N: "╩",
    Tile.CORRIDOR_TEE_S: "╦",
    Tile.CORRIDOR_TEE_E: "╠",
    Tile.CORRIDOR_TEE_W: "╣",
    Tile.CORRIDOR_CROSS: "╬",
    Tile.RUBBLE: "%",
    Tile.TREASURE: "$",
    Tile.GOAL: ">",
    Tile.PLAYER: "@",
}


class Side(Enum):
    N = (0, -1)
    E = (1, 0)
    S = (0, 1)
    W = (-1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> "Side":
        return _OPPOSITE[self]

    @classmethod
    def of_delta(cls, dx: int, dy: int) -> "Side":
        """Side a unit step (dx, dy) moves towards; only the signs matter."""
        sx = (dx > 0) - (dx < 0)
        sy = (dy > 0) - (dy < 0)
        if (sx == 0) == (sy == 0):
            raise ValueError(f"not an axis-aligned step: {(dx, dy)}")
        return cls((sx, sy))


_OPPOSITE = {Side.N: Side.S, Side.S: Side.N, Side.E: Side.W, Side.W: Side.E}

# Every set of two or more sides maps to exactly one piece.
_PIECES: Dict[FrozenSet[Side], Tile] = {
    frozenset((Side.W, Side.E)): Tile.CORRIDOR_H,
    frozenset((Side.N, Side.S)): Tile.CORRIDOR_V,
    frozenset((Side.S, Side.E)): Tile.CORRIDOR_SE,
    frozenset((Side.S, Side.W)): Tile.CORRIDOR_SW,
    frozenset((Side.N, Side.E)): Tile.CORRIDOR_NE,
    frozenset((Side.N, Side.W)): Tile.CORRIDOR_NW,
    frozenset((Side.W, Side.E, Side.N)): Tile.CORRIDOR_TEE_N,
    frozenset((Side.W, Side.E, Side.S)): Tile.CORRIDOR_TEE_S,
    frozenset((Side.N, Side.S, Side.E)): Tile.CORRIDOR_TEE_E,
    frozenset((Side.N, Side.S, Side.W)): Tile.CORRIDOR_TEE_W,
    frozenset((Side.N, Side.S, Side.E, Side.W)): Tile.CORRIDOR_CROSS,
}
_SIDES_OF: Dict[Tile, FrozenSet[Side]] = {tile: sides for sides, tile in _PIECES.items()}

CORRIDOR_TILES = frozenset(_PIECES.values()) | {Tile.RUBBLE}
ROOM_WALLS = frozenset({
    Tile.WALL_H, Tile.WALL_V,
    Tile.CORNER_TL, Tile.CORNER_TR, Tile.CORNER_BL, Tile.CORNER_BR,
})
WALKABLE = CORRIDOR_TILES | {Tile.FLOOR, Tile.DOOR, Tile.TREASURE, Tile.GOAL, Tile.PLAYER}


def corridor_piece(sides: Iterable[Side]) -> Tile:
    """Corridor tile opening onto exactly the given sides (two or more)."""
    key = frozenset(sides)
    if len(key) == 1:
        # A dead end is drawn as the straight piece along its only axis.
        (side,) = key
        key = frozenset((side, side.opposite))
    try:
        return _PIECES[key]
    except KeyError:
        raise ValueError(f"no corridor piece for sides {sorted(s.name for s in key)}") from None


def open_sides(tile: Tile) -> FrozenSet[Side]:
    """Sides a corridor piece opens onto; empty for anything else."""
    return _SIDES_OF.get(tile, frozenset())


def is_walkable(tile: Tile) -> bool:
    return tile in WALKABLE
