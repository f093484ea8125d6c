from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, List, Tuple

from .tiles import Tile

if TYPE_CHECKING:
    from .mapgen.rooms import TiledRoom

XY = Tuple[int, int]


@dataclass
class Canvas:
    """W×H tile buffer. Every write goes through set(), which range-checks."""
    width: int
    height: int
    buf: List[Tile]

    @classmethod
    def blank(cls, width: int, height: int) -> "Canvas":
        return cls(width=width, height=height, buf=[Tile.BLANK] * (width * height))

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def idx(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height} canvas")
        return y * self.width + x

    def get(self, x: int, y: int) -> Tile:
        return self.buf[self.idx(x, y)]

    def set(self, x: int, y: int, v: Tile) -> None:
        self.buf[self.idx(x, y)] = v

    def draw_room(self, room: "TiledRoom") -> None:
        left, top, right, bottom = room.x, room.y, room.right, room.bottom

        self.set(left, top, Tile.CORNER_TL)
        self.set(right, top, Tile.CORNER_TR)
        self.set(left, bottom, Tile.CORNER_BL)
        self.set(right, bottom, Tile.CORNER_BR)

        for x in range(left + 1, right):
            self.set(x, top, Tile.WALL_H)
            self.set(x, bottom, Tile.WALL_H)
        for y in range(top + 1, bottom):
            self.set(left, y, Tile.WALL_V)
            self.set(right, y, Tile.WALL_V)

        for y in range(top + 1, bottom):
            for x in range(left + 1, right):
                self.set(x, y, Tile.FLOOR)

    def find(self, tile: Tile) -> Iterator[XY]:
        for i, t in enumerate(self.buf):
            if t is tile:
                yield (i % self.width, i // self.width)

    def rows(self) -> List[List[Tile]]:
        w = self.width
        return [self.buf[y * w:(y + 1) * w] for y in range(self.height)]

    def glyph_rows(self) -> List[List[str]]:
        return [[t.glyph for t in row] for row in self.rows()]
