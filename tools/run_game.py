# tools/run_game.py
# Interactive viewer: arrow keys / WASD move the player one tile per key press.
# Pick up the treasure ($) and walk onto the goal (>) to end the run.

from __future__ import annotations

import argparse
import logging
from typing import Optional

import pygame

# Project imports
try:
    from roguemap.config import GeneratorConfig
    from roguemap.engine.player import Player
    from roguemap.log_utils import setup_logging
    from roguemap.mapgen.generator import generate_dungeon
    from roguemap.render.tileset import Tileset
    from roguemap.ui.status_bar import StatusBarState, render_status_bar
except Exception as e:  # pragma: no cover
    print("[run_game] Failed to import project modules:", e)
    print("Ensure you installed the package in editable mode: pip install -e .")
    raise

KEYS = {
    pygame.K_UP: "up", pygame.K_w: "up",
    pygame.K_DOWN: "down", pygame.K_s: "down",
    pygame.K_LEFT: "left", pygame.K_a: "left",
    pygame.K_RIGHT: "right", pygame.K_d: "right",
}


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="roguemap runtime")
    parser.add_argument("--seed", type=int, default=None, help="layout seed (default: time-derived)")
    parser.add_argument("--size", type=int, default=3, help="macro grid size N")
    parser.add_argument("--tile", type=int, default=20, help="tile size in pixels")
    parser.add_argument("--fps", type=int, default=30)
    parser.add_argument("--rubble", action="store_true", help="uniform rubble corridors")
    parser.add_argument("--simple", action="store_true", help="every cell a room, rubble corridors")
    parser.add_argument("--junctions", type=int, default=1, help="max rooms turned into junctions")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    if args.simple:
        cfg = GeneratorConfig.simple(args.size)
    else:
        cfg = GeneratorConfig(
            grid_size=args.size,
            room_budget=(min(6, args.size * args.size), args.size * args.size),
            max_junctions=args.junctions,
            uniform_corridors=args.rubble,
        )

    pygame.init()
    bar_h = args.tile
    screen = pygame.display.set_mode((cfg.width * args.tile, cfg.height * args.tile + bar_h))
    clock = pygame.time.Clock()
    tileset = Tileset(args.tile)

    def new_run(seed):
        dungeon = generate_dungeon(seed, cfg)
        pygame.display.set_caption(f"roguemap - seed {dungeon.seed}")
        return dungeon, Player(canvas=dungeon.canvas, spawn_xy=dungeon.start)

    dungeon, player = new_run(args.seed)

    running = True
    while running:
        # --- Input ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    dungeon, player = new_run(None)
                elif event.key in KEYS:
                    player.step(KEYS[event.key])

        # --- Rendering ---
        screen.fill((0, 0, 0))
        for y, row in enumerate(dungeon.canvas.rows()):
            for x, t in enumerate(row):
                screen.blit(tileset.get(t), (x * args.tile, y * args.tile))

        state = StatusBarState(
            seed=dungeon.seed,
            steps=player.steps,
            has_treasure=player.has_treasure,
            finished=player.finished,
        )
        render_status_bar(screen, (0, cfg.height * args.tile), cfg.width * args.tile, bar_h, state)

        pygame.display.flip()
        clock.tick(args.fps)

    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
