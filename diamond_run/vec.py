"""2D vector math helpers operating on (x, y) tuples."""
from __future__ import annotations

import math

from diamond_run.types import DegenerateVectorError, Vec2

NORTH: Vec2 = (0.0, 1.0)


def add(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] + b[0], a[1] + b[1])


def sub(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] - b[0], a[1] - b[1])


def scale(v: Vec2, s: float) -> Vec2:
    return (v[0] * s, v[1] * s)


def dot(a: Vec2, b: Vec2) -> float:
    return a[0] * b[0] + a[1] * b[1]


def cross(a: Vec2, b: Vec2) -> float:
    """Z component of the 3D cross product of two planar vectors."""
    return a[0] * b[1] - a[1] * b[0]


def magnitude(v: Vec2) -> float:
    return math.sqrt(v[0] * v[0] + v[1] * v[1])


def distance(a: Vec2, b: Vec2) -> float:
    return magnitude(sub(b, a))


def normalize(v: Vec2) -> Vec2:
    """Unit vector along *v*. Raises DegenerateVectorError for a zero vector."""
    mag = magnitude(v)
    if mag == 0.0:
        raise DegenerateVectorError(v, f"Cannot normalize zero-length vector {v!r}")
    return (v[0] / mag, v[1] / mag)


def angle_between(a: Vec2, b: Vec2) -> float:
    """Unsigned angle in [0, pi] between two unit vectors."""
    # Rounding can push the dot product of unit vectors just past +/-1.
    return math.acos(max(-1.0, min(1.0, dot(a, b))))
