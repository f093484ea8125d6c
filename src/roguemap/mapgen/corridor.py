# src/roguemap/mapgen/corridor.py
# Straight or single-bend corridors between two canvas points.
#
# A corridor with a door at `start` opens towards it (west for horizontal
# connections, north for vertical ones); one with a door at `end` opens
# east / south. Every carved cell is drawn as the piece opening onto the
# cells it links, so corners follow from the step direction before and
# after the bend. A cell already holding a corridor piece keeps its sides.

from typing import FrozenSet, List, Tuple

from ..grid import Canvas
from ..rng import PMRandom
from ..tiles import Side, Tile, corridor_piece, open_sides

XY = Tuple[int, int]


def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


def route(start: XY, end: XY, x_first: bool) -> List[XY]:
    """Cells from start to end inclusive, walking one axis fully, then the other."""
    (x, y), (x2, y2) = start, end
    path = [(x, y)]
    for axis in (("x", "y") if x_first else ("y", "x")):
        if axis == "x":
            step = _sign(x2 - x)
            while x != x2:
                x += step
                path.append((x, y))
        else:
            step = _sign(y2 - y)
            while y != y2:
                y += step
                path.append((x, y))
    return path


def corner_tile(dx_in: int, dy_in: int, dx_out: int, dy_out: int) -> Tile:
    """
    Piece for a cell entered moving (dx_in, dy_in) and left moving (dx_out, dy_out).
    Covers all eight turning pairs as well as straight runs.
    """
    came_from = Side.of_delta(-dx_in, -dy_in)
    going_to = Side.of_delta(dx_out, dy_out)
    return corridor_piece((came_from, going_to))


def entry_exit_sides(horizontal: bool) -> Tuple[Side, Side]:
    return (Side.W, Side.E) if horizontal else (Side.N, Side.S)


def path_sides(
    path: List[XY],
    horizontal: bool,
    door_ends: Tuple[bool, bool] = (True, True),
) -> List[FrozenSet[Side]]:
    """
    Sides each cell of `path` opens onto. An end flagged in `door_ends` also
    opens towards its door; an unflagged end opens only onto the path.
    """
    entry, exit_ = entry_exit_sides(horizontal)
    if len(path) == 1:
        return [frozenset((entry, exit_))]

    out = []
    last = len(path) - 1
    for i, (x, y) in enumerate(path):
        if i == 0:
            nx, ny = path[1]
            sides = {Side.of_delta(nx - x, ny - y)}
            if door_ends[0]:
                sides.add(entry)
        elif i == last:
            px, py = path[i - 1]
            sides = {Side.of_delta(px - x, py - y)}
            if door_ends[1]:
                sides.add(exit_)
        else:
            px, py = path[i - 1]
            nx, ny = path[i + 1]
            sides = open_sides(corner_tile(x - px, y - py, nx - x, ny - y))
        out.append(frozenset(sides))
    return out


def path_tiles(
    path: List[XY],
    horizontal: bool,
    door_ends: Tuple[bool, bool] = (True, True),
) -> List[Tile]:
    return [corridor_piece(s) for s in path_sides(path, horizontal, door_ends)]


def carve(
    canvas: Canvas,
    start: XY,
    end: XY,
    horizontal: bool,
    rng: PMRandom,
    uniform: bool = False,
    door_ends: Tuple[bool, bool] = (True, True),
) -> List[XY]:
    """Carve a corridor and return the cells written, in walking order."""
    x1, y1 = start
    x2, y2 = end
    x_first = rng.coin()
    if x1 == x2:
        x_first = False
    if y1 == y2:
        x_first = True

    path = route(start, end, x_first)
    if uniform:
        for x, y in path:
            canvas.set(x, y, Tile.RUBBLE)
        return path

    for (x, y), sides in zip(path, path_sides(path, horizontal, door_ends)):
        # Crossing an earlier corridor keeps its openings too.
        canvas.set(x, y, corridor_piece(open_sides(canvas.get(x, y)) | sides))
    return path
