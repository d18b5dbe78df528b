"""Engine - frame loop, pacing, and lifecycle hooks."""

import logging
import random
import time
from typing import Callable

from diamond_run.components import RenderParams
from diamond_run.config import GameConfig
from diamond_run.input import InputStateAggregator
from diamond_run.session import FrameOutcome, GameSession
from diamond_run.types import EventSource, FrameContext, KeyEvent

logger = logging.getLogger(__name__)

Hook = Callable[[GameSession, FrameContext], None]


class Engine:
    """Drives a GameSession from an EventSource, one frame per step().

    Each frame drains the source into the aggregator, updates the session
    with the resulting snapshot, settles the input flags, then calls the
    frame hooks (where a frontend draws).
    """

    def __init__(
        self,
        source: EventSource,
        config: GameConfig | None = None,
        seed: int | None = None,
    ) -> None:
        self._config = config if config is not None else GameConfig()
        self._source = source
        self._dt = 1.0 / self._config.fps
        self._frame_number = 0
        self._start_hooks: list[Hook] = []
        self._frame_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._key_hooks: list[Callable[[KeyEvent], None]] = []
        self._stop_requested: bool = False

        if seed is None:
            seed = time.time_ns()
        self._seed = seed
        self._rng = random.Random(seed)

        self._aggregator = InputStateAggregator(on_passthrough=self._passthrough)
        self._session = GameSession(self._config, self._rng)

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def aggregator(self) -> InputStateAggregator:
        return self._aggregator

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def seed(self) -> int:
        return self._seed

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_frame(self, hook: Hook) -> None:
        self._frame_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def on_key(self, hook: Callable[[KeyEvent], None]) -> None:
        """Receive key events the simulation does not consume itself."""
        self._key_hooks.append(hook)

    def _passthrough(self, event: KeyEvent) -> None:
        for hook in self._key_hooks:
            hook(event)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _context(self) -> FrameContext:
        return FrameContext(
            frame_number=self._frame_number,
            dt=self._dt,
            elapsed=self._frame_number * self._dt,
            request_stop=self._request_stop,
            random=self._rng,
        )

    def _frame(self) -> FrameOutcome:
        self._aggregator.apply_all(self._source.poll())
        outcome = self._session.update(self._aggregator.snapshot())
        if outcome.reset:
            self._aggregator.clear()
        elif outcome.input_handled:
            self._aggregator.consume_click()

        self._frame_number += 1
        ctx = self._context()
        for hook in self._frame_hooks:
            hook(self._session, ctx)
        return outcome

    def _run_hooks(self, hooks: list[Hook]) -> None:
        ctx = self._context()
        for hook in hooks:
            hook(self._session, ctx)

    def step(self) -> FrameOutcome:
        self._stop_requested = False
        return self._frame()

    def run(self, n: int) -> int:
        """Run at most *n* frames. Returns the number actually run."""
        self._stop_requested = False
        self._run_hooks(self._start_hooks)
        logger.info("Engine started (seed %d)", self._seed)

        frames = 0
        for _ in range(n):
            if self._source.should_close():
                break
            self._frame()
            frames += 1
            if self._stop_requested:
                break

        self._run_hooks(self._stop_hooks)
        logger.info("Engine stopped after %d frames", frames)
        return frames

    def run_forever(self, pace: bool = True) -> int:
        """Run until the source asks to close or a hook requests a stop."""
        self._stop_requested = False
        self._run_hooks(self._start_hooks)
        logger.info("Engine started (seed %d)", self._seed)

        dt = self._dt
        frames = 0
        while not self._stop_requested and not self._source.should_close():
            start = time.monotonic()
            self._frame()
            frames += 1
            if self._stop_requested or not pace:
                continue
            sleep_time = dt - (time.monotonic() - start)
            if sleep_time > 0:
                time.sleep(sleep_time)

        self._run_hooks(self._stop_hooks)
        logger.info("Engine stopped after %d frames", frames)
        return frames

    def render_params(self) -> list[RenderParams]:
        return self._session.render_params()

    def overlay_text(self) -> str:
        return self._session.overlay_text()
