"""Entity drawing and the score overlay."""
from __future__ import annotations

import math

import pygame

from diamond_run import RenderParams
from ui.constants import (
    BG_COLOR,
    DIAMOND_COLOR,
    DIAMOND_SHAPE,
    OUTLINE_COLOR,
    OVERLAY_POS,
    SHIP_COLOR,
    SHIP_SHAPE,
    TEXT_COLOR,
    VICTORY_COLOR,
)


def to_screen(x: float, y: float, width: int, height: int) -> tuple[float, float]:
    """Device coordinates ([-1, 1], y up) to pixels (y down)."""
    return ((x + 1.0) * 0.5 * (width - 1), (1.0 - y) * 0.5 * (height - 1))


def transform(
    shape: list[tuple[float, float]],
    params: RenderParams,
    width: int,
    height: int,
) -> list[tuple[float, float]]:
    """Scale, rotate clockwise by heading, translate, then map to pixels."""
    c = math.cos(params.heading)
    s = math.sin(params.heading)
    points = []
    for vx, vy in shape:
        vx *= params.scale
        vy *= params.scale
        rx = vx * c + vy * s
        ry = -vx * s + vy * c
        points.append(to_screen(rx + params.x, ry + params.y, width, height))
    return points


def draw_frame(
    surface: pygame.Surface,
    font: pygame.font.Font,
    params: list[RenderParams],
    overlay: str,
    won: bool,
    outline: bool,
) -> None:
    """Draw collectibles, then the ship (last entry), then the overlay text."""
    width, height = surface.get_size()
    surface.fill(BG_COLOR)

    *diamonds, ship = params
    for p in diamonds:
        points = transform(DIAMOND_SHAPE, p, width, height)
        pygame.draw.polygon(surface, DIAMOND_COLOR, points)
        if outline:
            pygame.draw.polygon(surface, OUTLINE_COLOR, points, 1)

    points = transform(SHIP_SHAPE, ship, width, height)
    pygame.draw.polygon(surface, SHIP_COLOR, points)
    if outline:
        pygame.draw.polygon(surface, OUTLINE_COLOR, points, 1)

    color = VICTORY_COLOR if won else TEXT_COLOR
    surface.blit(font.render(overlay, True, color), OVERLAY_POS)
