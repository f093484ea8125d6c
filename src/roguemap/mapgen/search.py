# src/roguemap/mapgen/search.py
from collections import deque
from typing import Dict

from .macro import Cell, MacroGrid


def hop_distances(grid: MacroGrid, start: Cell) -> Dict[Cell, int]:
    """
    Breadth-first hop counts from `start` over the corridor graph.
    Junction cells conduct the search but are never the answer of
    farthest_room(). Cells are marked when enqueued.
    """
    dist = {start: 0}
    queue = deque([start])
    while queue:
        cur = queue.popleft()
        for n in grid.neighbors(cur):
            if n in dist:
                continue
            if not (grid.is_room(n) or grid.is_junction(n)):
                continue
            dist[n] = dist[cur] + 1
            queue.append(n)
    return dist


def farthest_room(grid: MacroGrid, start: Cell) -> Cell:
    """Room with the largest hop count from `start`; the first found wins ties."""
    best, best_d = start, 0
    for cell, d in hop_distances(grid, start).items():
        if d > best_d and grid.is_room(cell):
            best, best_d = cell, d
    return best
