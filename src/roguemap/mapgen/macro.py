# src/roguemap/mapgen/macro.py
# Coarse N×N layout: which cells host a room, and which neighbours share a corridor.
# Each corridor is stored once, on the lower-index cell (east flag / south flag).

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from ..rng import PMRandom

log = logging.getLogger("roguemap.mapgen")

Cell = Tuple[int, int]  # (col, row)

# up, right, down, left
DIRECTIONS: Tuple[Cell, ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


@dataclass
class MacroCell:
    is_room: bool = False
    east: bool = False
    south: bool = False


@dataclass
class MacroGrid:
    size: int
    cells: List[List[MacroCell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [[MacroCell() for _ in range(self.size)] for _ in range(self.size)]

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.size and 0 <= row < self.size

    def cell(self, col: int, row: int) -> MacroCell:
        if not self.in_bounds(col, row):
            raise IndexError(f"macro cell ({col}, {row}) outside {self.size}x{self.size}")
        return self.cells[row][col]

    def all_cells(self) -> Iterator[Cell]:
        for row in range(self.size):
            for col in range(self.size):
                yield (col, row)

    def connect(self, a: Cell, b: Cell) -> None:
        (ax, ay), (bx, by) = sorted((a, b), key=lambda c: (c[1], c[0]))
        if ay == by and bx == ax + 1:
            self.cell(ax, ay).east = True
        elif ax == bx and by == ay + 1:
            self.cell(ax, ay).south = True
        else:
            raise ValueError(f"cells {a} and {b} are not neighbours")

    def connected(self, a: Cell, b: Cell) -> bool:
        if not (self.in_bounds(*a) and self.in_bounds(*b)):
            return False
        (ax, ay), (bx, by) = sorted((a, b), key=lambda c: (c[1], c[0]))
        if ay == by and bx == ax + 1:
            return self.cell(ax, ay).east
        if ax == bx and by == ay + 1:
            return self.cell(ax, ay).south
        return False

    def neighbors(self, cell: Cell) -> List[Cell]:
        """Cells joined to `cell` by a corridor flag, whatever they host."""
        col, row = cell
        out = []
        for dx, dy in DIRECTIONS:
            n = (col + dx, row + dy)
            if self.connected(cell, n):
                out.append(n)
        return out

    def degree(self, cell: Cell) -> int:
        return len(self.neighbors(cell))

    def is_room(self, cell: Cell) -> bool:
        return self.cell(*cell).is_room

    def is_junction(self, cell: Cell) -> bool:
        return not self.is_room(cell) and self.degree(cell) > 0

    def rooms(self) -> List[Cell]:
        return [c for c in self.all_cells() if self.is_room(c)]

    def junctions(self) -> List[Cell]:
        return [c for c in self.all_cells() if self.is_junction(c)]

    def edges(self) -> List[Tuple[Cell, Cell]]:
        """Every corridor once, as (lower, higher) in row-major order."""
        out = []
        for col, row in self.all_cells():
            c = self.cell(col, row)
            if c.east and col + 1 < self.size:
                out.append(((col, row), (col + 1, row)))
            if c.south and row + 1 < self.size:
                out.append(((col, row), (col, row + 1)))
        return out


def build_macro_graph(size: int, start: Cell, max_rooms: int, rng: PMRandom) -> MacroGrid:
    """
    Randomized depth-first traversal from `start`. A visited cell becomes a
    room; the walk stops everywhere as soon as `max_rooms` rooms exist. The
    start cell is always a room, even for a budget below 1.
    """
    grid = MacroGrid(size)
    grid.cell(*start).is_room = True
    count = 1

    if count < max_rooms:
        stack = [(start, iter(rng.shuffled(DIRECTIONS)))]
        while stack:
            (col, row), dirs = stack[-1]
            for dx, dy in dirs:
                n = (col + dx, row + dy)
                if not grid.in_bounds(*n) or grid.is_room(n):
                    continue
                grid.connect((col, row), n)
                grid.cell(*n).is_room = True
                count += 1
                if count >= max_rooms:
                    stack.clear()
                else:
                    stack.append((n, iter(rng.shuffled(DIRECTIONS))))
                break
            else:
                stack.pop()

    log.debug("macro graph: %d rooms from start %s (budget %d)", count, start, max_rooms)
    return grid


def remove_rooms(grid: MacroGrid, up_to_n: int, rng: PMRandom) -> MacroGrid:
    """
    Turn up to `up_to_n` rooms with two or more connections into junctions.
    Corridor flags stay as they are, so reachability does not change.
    """
    candidates = [c for c in grid.rooms() if grid.degree(c) >= 2]
    rng.shuffle(candidates)
    for cell in candidates[:max(0, up_to_n)]:
        grid.cell(*cell).is_room = False
        log.debug("room at %s converted to junction", cell)
    return grid
