# src/roguemap/render/tileset.py
from __future__ import annotations
import os
import pygame
from functools import lru_cache
from typing import Tuple

from ..tiles import CORRIDOR_TILES, ROOM_WALLS, Tile

ASSET_DIR = os.path.join("assets", "tiles")


def _path_candidates(tile: Tile) -> Tuple[str, ...]:
    return (
        os.path.join(ASSET_DIR, f"{tile.value}.png"),
        os.path.join(ASSET_DIR, f"tile_{tile.value}.png"),
    )


def fallback_color(tile: Tile) -> Tuple[int, int, int, int]:
    if tile is Tile.BLANK:       return (0, 0, 0, 255)
    if tile is Tile.FLOOR:       return (60, 52, 44, 255)
    if tile in ROOM_WALLS:       return (120, 120, 130, 255)
    if tile is Tile.DOOR:        return (150, 100, 40, 255)
    if tile in CORRIDOR_TILES:   return (90, 80, 70, 255)
    if tile is Tile.TREASURE:    return (255, 220, 0, 255)
    if tile is Tile.GOAL:        return (80, 160, 255, 255)
    if tile is Tile.PLAYER:      return (80, 200, 120, 255)
    return (220, 220, 220, 255)


class Tileset:
    """
    Tiny cached loader:
      - Accepts floor.png or tile_floor.png from assets/tiles/
      - Otherwise a coloured square with the tile's glyph on it
    """
    def __init__(self, tile_size: int, font=None):
        self.tile_size = tile_size
        self.font = font or pygame.font.SysFont("dejavusansmono", max(10, tile_size - 4))

    @lru_cache(maxsize=64)
    def get(self, tile: Tile) -> pygame.Surface:
        for p in _path_candidates(tile):
            if os.path.exists(p):
                img = pygame.image.load(p).convert_alpha()
                return self._fit(img)
        img = pygame.Surface((self.tile_size, self.tile_size), pygame.SRCALPHA)
        img.fill(fallback_color(tile))
        if tile is not Tile.BLANK:
            txt = self.font.render(tile.glyph, True, (0, 0, 0))
            r = txt.get_rect(center=(self.tile_size // 2, self.tile_size // 2))
            img.blit(txt, r)
        return img

    def _fit(self, img: pygame.Surface) -> pygame.Surface:
        if img.get_size() == (self.tile_size, self.tile_size):
            return img
        return pygame.transform.scale(img, (self.tile_size, self.tile_size))
