"""Game configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """Immutable tuning for the simulation core.

    Attributes:
        angle_epsilon: Heading is "close enough" inside this window.
        heading_step: Fixed per-frame heading change (radians).
        position_epsilon: Position axis is "close enough" inside this window.
        position_gain: Fraction of the remaining gap covered per frame.
        thrust_step: Target-position change per frame while thrust is held.
        orbit_threshold: Capture happens strictly below this distance.
        offscreen_x: Where captured collectibles are parked.
        capture_growth: Ship scale multiplier per capture.
        initial_scale: Scale of every entity after reset.
        quadrant_center: Magnitude of each collectible's quadrant centre.
        quadrant_spread: Divisor for the random offset from the centre.
        spawn_bound: Ship spawns within [-spawn_bound, spawn_bound] on both axes.
        win_score: Score at which the overlay shows the victory message.
        direction_tolerance: Aim directions closer than this count as unchanged.
            ``0.0`` means exact comparison.
        screen_width: Window width in pixels.
        screen_height: Window height in pixels.
        fps: Target frame rate for paced loops.
    """

    angle_epsilon: float = 0.005
    heading_step: float = 0.05
    position_epsilon: float = 0.00005
    position_gain: float = 1.0005
    thrust_step: float = 0.005
    orbit_threshold: float = 0.25
    offscreen_x: float = -5.0
    capture_growth: float = 1.05
    initial_scale: float = 0.125
    quadrant_center: float = 0.7
    quadrant_spread: float = 6.0
    spawn_bound: float = 0.5
    win_score: int = 4
    direction_tolerance: float = 0.0
    screen_width: int = 800
    screen_height: int = 800
    fps: int = 60

    def __post_init__(self) -> None:
        for name in (
            "angle_epsilon",
            "heading_step",
            "position_epsilon",
            "position_gain",
            "thrust_step",
            "orbit_threshold",
            "capture_growth",
            "initial_scale",
            "quadrant_spread",
            "spawn_bound",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.direction_tolerance < 0:
            raise ValueError("direction_tolerance must be non-negative")
        if self.screen_width < 2 or self.screen_height < 2:
            raise ValueError("screen dimensions must be at least 2 pixels")
        if self.fps <= 0:
            raise ValueError("fps must be positive")
