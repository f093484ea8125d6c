# src/roguemap/render/text.py
# Plain-text views of a dungeon: the tile canvas and the macro graph.

from typing import Dict, Optional, Tuple

from ..grid import Canvas
from ..mapgen.macro import MacroGrid
from ..tiles import Tile

XY = Tuple[int, int]

# Tiles whose right-hand side continues as a double (corridor) or single (wall) stroke.
_DOUBLE_EAST = frozenset({
    Tile.CORRIDOR_H, Tile.CORRIDOR_SE, Tile.CORRIDOR_NE,
    Tile.CORRIDOR_TEE_N, Tile.CORRIDOR_TEE_S, Tile.CORRIDOR_TEE_E, Tile.CORRIDOR_CROSS,
})
_DOUBLE_WEST = frozenset({
    Tile.CORRIDOR_H, Tile.CORRIDOR_SW, Tile.CORRIDOR_NW,
    Tile.CORRIDOR_TEE_N, Tile.CORRIDOR_TEE_S, Tile.CORRIDOR_TEE_W, Tile.CORRIDOR_CROSS,
})
_SINGLE_EAST = frozenset({Tile.WALL_H, Tile.CORNER_TL, Tile.CORNER_BL})
_SINGLE_WEST = frozenset({Tile.WALL_H, Tile.CORNER_TR, Tile.CORNER_BR, Tile.DOOR})


def filler(tile: Tile, next_tile: Tile) -> str:
    """Second column of a tile, so horizontal strokes read as continuous lines."""
    if tile in _DOUBLE_EAST:
        return "═"
    if tile is Tile.DOOR and next_tile in _DOUBLE_WEST:
        return "═"
    if tile in _SINGLE_EAST and next_tile in _SINGLE_WEST:
        return "─"
    if tile is Tile.DOOR and next_tile in _SINGLE_WEST:
        return "─"
    return " "


def render_text(canvas: Canvas, actors: Optional[Dict[XY, Tile]] = None) -> str:
    """
    Two columns per tile. `actors` overlays marker tiles (e.g. the player)
    without touching the canvas.
    """
    actors = actors or {}
    lines = []
    for y, row in enumerate(canvas.rows()):
        out = []
        for x, tile in enumerate(row):
            shown = actors.get((x, y), tile)
            nxt = row[x + 1] if x + 1 < canvas.width else Tile.BLANK
            out.append(shown.glyph + (filler(tile, nxt) if shown is tile else " "))
        lines.append("".join(out))
    return "\n".join(lines)


def render_macro(grid: MacroGrid) -> str:
    """
    Debug dump of the macro graph: R room, J junction, # empty; `---` and `|`
    mark corridors.
    """
    def mark(col: int, row: int) -> str:
        if grid.is_room((col, row)):
            return "R"
        return "J" if grid.is_junction((col, row)) else "#"

    lines = []
    n = grid.size
    for row in range(n):
        top = []
        for col in range(n):
            top.append(mark(col, row))
            if col < n - 1:
                top.append("---" if grid.cell(col, row).east else "   ")
        lines.append("".join(top))
        if row < n - 1:
            lines.append("".join(
                ("|" if grid.cell(col, row).south else " ") + ("   " if col < n - 1 else "")
                for col in range(n)
            ))
    return "\n".join(lines)
