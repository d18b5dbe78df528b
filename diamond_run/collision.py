"""Proximity capture between the ship and collectibles."""
from __future__ import annotations

from diamond_run import vec
from diamond_run.components import Collectible, Ship
from diamond_run.types import Vec2


def within_orbit(pos_a: Vec2, pos_b: Vec2, threshold: float = 0.25) -> bool:
    """True when the points are strictly closer than *threshold*."""
    return vec.distance(pos_a, pos_b) < threshold


def check_capture(
    ship: Ship,
    collectible: Collectible,
    threshold: float = 0.25,
    offscreen_x: float = -5.0,
    growth: float = 1.05,
) -> bool:
    """Capture *collectible* if the ship is within orbit of it.

    On capture the collectible is moved to ``x = offscreen_x`` and marked
    inactive, and the ship's scale is multiplied by *growth*. Scoring is
    left to the caller.
    """
    if not within_orbit(ship.position, collectible.position, threshold):
        return False
    collectible.position = (offscreen_x, collectible.position[1])
    collectible.active = False
    ship.scale *= growth
    return True
