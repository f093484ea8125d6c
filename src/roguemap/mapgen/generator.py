# src/roguemap/mapgen/generator.py
# Full pipeline: macro graph -> rooms -> canvas -> doors/corridors -> markers.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..config import GeneratorConfig, DEFAULT
from ..grid import Canvas
from ..rng import PMRandom, time_seed
from ..tiles import is_walkable
from .doors import Connection, place_doors
from .macro import Cell, MacroGrid, build_macro_graph, remove_rooms
from .placement import pick_start_cell, place_goal, place_start, place_treasure
from .rooms import TiledRoom, place_rooms

log = logging.getLogger("roguemap.mapgen")

XY = Tuple[int, int]


@dataclass
class Dungeon:
    seed: int
    config: GeneratorConfig
    grid: MacroGrid
    rooms: Dict[Cell, TiledRoom]
    canvas: Canvas
    connections: List[Connection]
    start_cell: Cell
    start: XY
    goal_cell: Cell
    goal: XY
    treasure_cell: Optional[Cell] = None
    treasure: Optional[XY] = None

    def is_walkable(self, x: int, y: int) -> bool:
        return self.canvas.in_bounds(x, y) and is_walkable(self.canvas.get(x, y))


def generate_dungeon(seed: Optional[int] = None, config: GeneratorConfig = DEFAULT) -> Dungeon:
    if seed is None:
        seed = time_seed()
    rng = PMRandom.from_seed(seed)
    n = config.grid_size

    lo, hi = config.room_budget
    max_rooms = min(rng.randint(lo, hi), config.cell_count)
    start_col, start_row = rng.below(n), rng.below(n)

    grid = build_macro_graph(n, (start_col, start_row), max_rooms, rng)
    if config.max_junctions:
        remove_rooms(grid, config.max_junctions, rng)

    rooms = place_rooms(grid, rng, config)
    canvas = Canvas.blank(config.width, config.height)
    for room in rooms.values():
        canvas.draw_room(room)

    connections = place_doors(canvas, grid, rooms, rng, config)

    start_cell = pick_start_cell(grid, rng)
    start = place_start(rooms, start_cell)
    treasure_cell, treasure = place_treasure(canvas, grid, rooms, start_cell, rng, taken={start})
    taken = {start} if treasure is None else {start, treasure}
    goal_cell, goal = place_goal(canvas, grid, rooms, start_cell, rng, taken=taken)

    log.info(
        "seed %d: %d rooms, %d junctions, start %s goal %s",
        seed, len(rooms), len(grid.junctions()), start, goal,
    )
    return Dungeon(
        seed=seed,
        config=config,
        grid=grid,
        rooms=rooms,
        canvas=canvas,
        connections=connections,
        start_cell=start_cell,
        start=start,
        goal_cell=goal_cell,
        goal=goal,
        treasure_cell=treasure_cell,
        treasure=treasure,
    )
