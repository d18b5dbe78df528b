"""Coarse pseudo-random sampling used to scatter entities on reset."""
from __future__ import annotations

import random

from diamond_run.types import SamplingBoundError

_RESOLUTION = 600


def make_random(rng: random.Random) -> float:
    """Return a value in (-1, 1) with a resolution of 1/600.

    Even draws are negated, so zero and negative values come from even
    integers and positive values from odd ones.
    """
    value = rng.randrange(_RESOLUTION)
    if value % 2 == 0:
        value = -value
    return value / _RESOLUTION


def keep_within(rng: random.Random, bound: float) -> float:
    """Rejection-sample make_random() until the result lies in [-bound, bound]."""
    if bound <= 0:
        raise SamplingBoundError(f"bound must be positive, got {bound}")
    value = make_random(rng)
    while value > bound or value < -bound:
        value = make_random(rng)
    return value


def scatter_near(rng: random.Random, center: float, spread: float) -> float:
    """Perturb *center* by strictly less than 1/spread.

    The offset is mirrored for negative centres so the four quadrants are
    reflections of one another.
    """
    offset = make_random(rng) / spread
    if center < 0:
        return center + offset
    return center - offset
