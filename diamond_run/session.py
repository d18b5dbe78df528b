"""Own the entities and score, and run one simulation step.

This module has no UI dependencies. It reads an InputSnapshot and mutates
plain entity state; the frontend reads that state back through
render_params() and overlay_text().
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, auto

from diamond_run import vec
from diamond_run.collision import check_capture
from diamond_run.components import Collectible, RenderParams, Ship
from diamond_run.config import GameConfig
from diamond_run.input import InputSnapshot
from diamond_run.motion import animate_ship
from diamond_run.rotation import solve_rotation
from diamond_run.sampling import keep_within, scatter_near

logger = logging.getLogger(__name__)

# Sign pattern of each collectible's quadrant: upper-left, upper-right,
# lower-left, lower-right. Order is identity, not priority.
QUADRANTS: tuple[tuple[int, int], ...] = ((-1, 1), (1, 1), (-1, -1), (1, -1))

VICTORY_MESSAGE = "Congratulations !! You've won the game"


class SessionState(Enum):
    PLAYING = auto()
    RESETTING = auto()


@dataclass(frozen=True)
class FrameOutcome:
    """What a single update did, so the caller can settle the input flags."""

    reset: bool = False
    input_handled: bool = False
    captured: tuple[int, ...] = ()


class GameSession:
    """One ship, four collectibles and a score.

    Usage:
        session = GameSession(GameConfig(), random.Random(7))
        outcome = session.update(aggregator.snapshot())
        for params in session.render_params():
            draw(params)
    """

    def __init__(self, config: GameConfig | None = None, rng: random.Random | None = None) -> None:
        self.config = config if config is not None else GameConfig()
        self.rng = rng if rng is not None else random.Random()

        # Placeholder transforms; reset() assigns the real ones.
        self.ship = Ship()
        self.collectibles: tuple[Collectible, ...] = tuple(Collectible() for _ in QUADRANTS)
        self.score = 0
        self.state = SessionState.PLAYING

        self.reset()

    # =========================================================================
    # RESET
    # =========================================================================

    def reset(self) -> None:
        """Scatter every entity again and zero the score."""
        cfg = self.config
        for collectible, (sx, sy) in zip(self.collectibles, QUADRANTS, strict=True):
            collectible.position = (
                scatter_near(self.rng, sx * cfg.quadrant_center, cfg.quadrant_spread),
                scatter_near(self.rng, sy * cfg.quadrant_center, cfg.quadrant_spread),
            )
            collectible.heading = 0.0
            collectible.scale = cfg.initial_scale
            collectible.active = True

        ship = self.ship
        x = keep_within(self.rng, cfg.spawn_bound)
        y = keep_within(self.rng, cfg.spawn_bound)
        ship.position = (x, y)
        ship.target_position = (x, y)
        ship.heading = 0.0
        ship.target_heading = 0.0
        ship.direction = vec.normalize((x - x, 1.0 - y))
        ship.scale = cfg.initial_scale
        self.score = 0

        logger.debug(
            "Session reset: ship at (%.3f, %.3f), collectibles at %s",
            x,
            y,
            [c.position for c in self.collectibles],
        )

    # =========================================================================
    # SIMULATION
    # =========================================================================

    def update(self, snapshot: InputSnapshot) -> FrameOutcome:
        """Run one frame: reset, or steer → animate → capture."""
        if snapshot.reset_held:
            self.state = SessionState.RESETTING
            self.reset()
            return FrameOutcome(reset=True)

        self.state = SessionState.PLAYING

        handled = snapshot.active
        if handled:
            self._steer(snapshot)

        animate_ship(self.ship, self.config)
        captured = self._check_captures()
        return FrameOutcome(input_handled=handled, captured=captured)

    def _steer(self, snapshot: InputSnapshot) -> None:
        ship = self.ship
        if snapshot.clicked:
            if vec.magnitude(vec.sub(snapshot.cursor, ship.position)) == 0.0:
                logger.debug("Ignoring aim point on top of the ship at %s", ship.position)
            else:
                ship.target_heading, ship.direction = solve_rotation(
                    ship.direction,
                    ship.target_heading,
                    ship.position,
                    snapshot.cursor,
                    self.config.direction_tolerance,
                )

        thrust = vec.scale(ship.direction, self.config.thrust_step)
        if snapshot.forward_held:
            ship.target_position = vec.add(ship.target_position, thrust)
        if snapshot.backward_held:
            ship.target_position = vec.sub(ship.target_position, thrust)

    def _check_captures(self) -> tuple[int, ...]:
        cfg = self.config
        captured: list[int] = []
        for index, collectible in enumerate(self.collectibles):
            if check_capture(
                self.ship,
                collectible,
                cfg.orbit_threshold,
                cfg.offscreen_x,
                cfg.capture_growth,
            ):
                self.score += 1
                captured.append(index)
                logger.debug("Captured collectible %d, score %d", index, self.score)
                if self.score == cfg.win_score:
                    logger.info("All collectibles captured")
        return tuple(captured)

    # =========================================================================
    # QUERIES
    # =========================================================================

    @property
    def won(self) -> bool:
        return self.score >= self.config.win_score

    def render_params(self) -> list[RenderParams]:
        """Draw parameters in draw order: collectibles first, ship last."""
        params = [
            RenderParams(c.position[0], c.position[1], c.heading, c.scale)
            for c in self.collectibles
        ]
        ship = self.ship
        params.append(RenderParams(ship.position[0], ship.position[1], ship.heading, ship.scale))
        return params

    def overlay_text(self) -> str:
        if self.won:
            return VICTORY_MESSAGE
        return f"Score: {self.score}"
