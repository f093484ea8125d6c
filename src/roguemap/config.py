from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class GeneratorConfig:
    # Macro grid is grid_size x grid_size cells, each backed by a
    # subgrid_size x subgrid_size block of canvas tiles.
    grid_size: int = 3
    subgrid_size: int = 10
    margin: int = 1
    min_room_dim: int = 5
    max_room_dim: int = 8
    # Inclusive range the room budget is drawn from once per run.
    room_budget: Tuple[int, int] = (6, 9)
    # Up to this many rooms with 2+ connections become pass-through junctions.
    max_junctions: int = 1
    # Rubble corridors instead of shape-accurate pieces.
    uniform_corridors: bool = False

    def __post_init__(self) -> None:
        if self.grid_size < 2:
            raise ValueError("grid_size must be at least 2")
        if self.margin < 1:
            raise ValueError("margin must be at least 1")
        if not (3 <= self.min_room_dim <= self.max_room_dim):
            raise ValueError("room dims must satisfy 3 <= min_room_dim <= max_room_dim")
        if self.subgrid_size < self.max_room_dim + 2 * self.margin:
            raise ValueError("subgrid_size too small for max_room_dim plus margins")
        lo, hi = self.room_budget
        if not (1 <= lo <= hi):
            raise ValueError("room_budget must be an increasing range starting at 1 or more")
        if self.max_junctions < 0:
            raise ValueError("max_junctions must not be negative")

    @property
    def width(self) -> int:
        return self.grid_size * self.subgrid_size

    @property
    def height(self) -> int:
        return self.grid_size * self.subgrid_size

    @property
    def cell_count(self) -> int:
        return self.grid_size * self.grid_size

    @classmethod
    def simple(cls, grid_size: int = 3) -> "GeneratorConfig":
        """Every cell a room, rubble corridors, no junctions."""
        n = grid_size * grid_size
        return cls(
            grid_size=grid_size,
            room_budget=(n, n),
            max_junctions=0,
            uniform_corridors=True,
        )


DEFAULT = GeneratorConfig()
