from dataclasses import dataclass


@dataclass
class StatusBarState:
    seed: int = 0
    steps: int = 0
    has_treasure: bool = False
    finished: bool = False


def status_text(state: StatusBarState) -> str:
    parts = [
        f"SEED {state.seed}",
        f"STEPS {state.steps:04d}",
        "TREASURE $" if state.has_treasure else "TREASURE -",
    ]
    if state.finished:
        parts.append("GOAL REACHED  (R: new dungeon, Esc: quit)")
    return "   ".join(parts)


def render_status_bar(screen, origin_xy: tuple, width: int, height: int, state: StatusBarState) -> None:
    """
    Draw a one-line status bar below the map. Does not touch the canvas.
    """
    import pygame  # local import to avoid hard dep when not used
    ox, oy = origin_xy
    pygame.draw.rect(screen, (24, 24, 24), pygame.Rect(ox, oy, width, height))
    font = pygame.font.SysFont(None, max(10, height - 4))
    img = font.render(status_text(state), True, (220, 220, 220))
    screen.blit(img, (ox + height // 2, oy + (height - img.get_height()) // 2))
