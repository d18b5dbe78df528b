"""Per-frame easing of the ship heading and position toward their targets.

Two step rules are used. Heading moves at a constant rate (linear easing),
position covers a fixed fraction of the remaining gap (proportional decay).
Both snap to the target once inside their epsilon window.
"""
from __future__ import annotations

from diamond_run.components import Ship
from diamond_run.config import GameConfig


def not_close_enough(current: float, target: float, epsilon: float) -> bool:
    return not (target - epsilon < current < target + epsilon)


def step_heading(
    current: float,
    target: float,
    step: float = 0.05,
    epsilon: float = 0.005,
) -> float:
    if not not_close_enough(current, target, epsilon):
        return target
    if current < target:
        return current + step
    return current - step


def step_position(
    current: float,
    target: float,
    gain: float = 1.0005,
    epsilon: float = 0.00005,
) -> float:
    if not not_close_enough(current, target, epsilon):
        return target
    delta = abs(current - target) * gain
    if current < target:
        return current + delta
    return current - delta


def animate_ship(ship: Ship, config: GameConfig) -> None:
    """Advance heading and both position axes of *ship* by one frame."""
    ship.heading = step_heading(
        ship.heading, ship.target_heading, config.heading_step, config.angle_epsilon
    )
    x, y = ship.position
    tx, ty = ship.target_position
    ship.position = (
        step_position(x, tx, config.position_gain, config.position_epsilon),
        step_position(y, ty, config.position_gain, config.position_epsilon),
    )
