"""Turn an aim point into a new target heading and facing direction.

Headings are measured clockwise from north (``(0, 1)``) in radians. The
solver never wraps its result, so the animator always walks the numeric
distance between the current and the target heading.
"""
from __future__ import annotations

import math

from diamond_run import vec
from diamond_run.types import Vec2

FULL_TURN = 2.0 * math.pi


def clockwise(a: Vec2, b: Vec2) -> float:
    """Positive when *b* lies clockwise of *a*, negative when counterclockwise."""
    return -vec.cross(a, b)


def same_direction(a: Vec2, b: Vec2, tolerance: float = 0.0) -> bool:
    if tolerance == 0.0:
        return a == b
    return abs(a[0] - b[0]) <= tolerance and abs(a[1] - b[1]) <= tolerance


def solve_rotation(
    direction: Vec2,
    target_heading: float,
    position: Vec2,
    aim: Vec2,
    tolerance: float = 0.0,
) -> tuple[float, Vec2]:
    """Return ``(new_target_heading, new_direction)`` for facing *aim*.

    *direction* is the ship's current unit facing and *position* its
    current location. When the aim direction matches the current one the
    existing target heading and direction come back unchanged.

    Raises DegenerateVectorError if *aim* coincides with *position*.
    """
    new_direction = vec.normalize(vec.sub(aim, position))

    if same_direction(new_direction, direction, tolerance):
        return target_heading, direction

    theta1 = vec.angle_between(direction, new_direction)
    theta2 = vec.angle_between(vec.NORTH, direction)

    if clockwise(direction, new_direction) > 0:
        # theta2 is unsigned; west-facing ships sit past half a turn.
        if vec.NORTH[0] > direction[0]:
            theta2 = FULL_TURN - theta2
        return theta1 + theta2, new_direction

    if clockwise(vec.NORTH, direction) < 0:
        return FULL_TURN - (theta1 + theta2), new_direction
    return theta2 - theta1, new_direction
