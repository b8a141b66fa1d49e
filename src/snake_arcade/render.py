# render.py
from typing import Dict, Tuple

import pygame  # type: ignore

from .state import Snapshot

Color = Tuple[int, int, int]


def tile_size(screen: pygame.Surface, grid_size: int) -> int:
    # square board in the shorter window side, follows window resizes
    return max(1, min(screen.get_width(), screen.get_height()) // grid_size)


def draw_cell(screen: pygame.Surface, gx: int, gy: int, tile: int, color: Color, radius: int = 6) -> None:
    rect = pygame.Rect(gx * tile + 1, gy * tile + 1, tile - 2, tile - 2)
    pygame.draw.rect(screen, color, rect, border_radius=radius)


def draw_grid(screen: pygame.Surface, grid_size: int, tile: int, color: Color) -> None:
    extent = grid_size * tile
    for i in range(grid_size + 1):
        pygame.draw.line(screen, color, (i * tile, 0), (i * tile, extent))
        pygame.draw.line(screen, color, (0, i * tile), (extent, i * tile))


def draw_game(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot, palette: Dict[str, Color]) -> None:
    tile = tile_size(screen, snap.grid_size)
    screen.fill(palette["bg"])
    draw_grid(screen, snap.grid_size, tile, palette["grid"])

    # food
    if snap.food is not None:
        fx, fy = snap.food
        center = (fx * tile + tile // 2, fy * tile + tile // 2)
        pygame.draw.circle(screen, palette["food"], center, max(1, (tile - 4) // 2))

    # mystery item
    if snap.special is not None:
        (sx, sy), _ = snap.special
        draw_cell(screen, sx, sy, tile, palette["special"], radius=tile // 2)
        label = font.render("?", True, palette["bg"])
        screen.blit(label, label.get_rect(center=(sx * tile + tile // 2, sy * tile + tile // 2)))

    # snake, body fades toward the tail
    for i, (x, y) in reversed(list(enumerate(snap.snake))):
        alpha = 1.0 if i == 0 else max(0.4, 0.85 - i * 0.01)
        color = _blend(palette["snake"], palette["bg"], alpha)
        draw_cell(screen, x, y, tile, color)

    # score
    hud = f"Score: {snap.score}   Best: {snap.high_score}"
    if snap.mystery:
        hud += "   ?"
    txt = font.render(hud, True, palette["text"])
    screen.blit(txt, (8, 6))


def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot, palette: Dict[str, Color]) -> None:
    if snap.overlay is None:
        return
    width, height = screen.get_size()

    # Dim with translucent overlay
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    title = font.render(snap.overlay.title, True, (240, 240, 250))
    sub   = font.render(snap.overlay.message, True, (220, 220, 230))

    tx = title.get_rect(center=(width // 2, height // 2 - 16))
    sx = sub.get_rect(center=(width // 2, height // 2 + 16))

    screen.blit(title, tx)
    screen.blit(sub, sx)


def draw_frame(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot, palette: Dict[str, Color]) -> None:
    draw_game(screen, font, snap, palette)
    draw_overlay(screen, font, snap, palette)


def _blend(fg: Color, bg: Color, alpha: float) -> Color:
    return (
        int(fg[0] * alpha + bg[0] * (1 - alpha)),
        int(fg[1] * alpha + bg[1] * (1 - alpha)),
        int(fg[2] * alpha + bg[2] * (1 - alpha)),
    )
