"""Entity state for the ship and the collectibles."""
from __future__ import annotations

from dataclasses import dataclass

from diamond_run.types import Vec2


@dataclass
class Ship:
    """Player ship. Current state eases toward the target_* fields every frame."""

    position: Vec2 = (0.0, 0.0)
    target_position: Vec2 = (0.0, 0.0)
    heading: float = 0.0
    target_heading: float = 0.0
    direction: Vec2 = (0.0, 1.0)
    scale: float = 1.0


@dataclass
class Collectible:
    """A diamond. Captured diamonds are parked off-screen, never removed."""

    position: Vec2 = (0.0, 0.0)
    heading: float = 0.0
    scale: float = 1.0
    active: bool = True


@dataclass(frozen=True, slots=True)
class RenderParams:
    """The four draw-time scalars handed to the renderer for one entity."""

    x: float
    y: float
    heading: float
    scale: float
