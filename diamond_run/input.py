"""Fold raw input events into a per-frame snapshot of held keys, clicks and cursor."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable

from diamond_run.types import (
    Action,
    Button,
    ButtonEvent,
    CursorMoved,
    InputEvent,
    Key,
    KeyEvent,
    Vec2,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InputSnapshot:
    """Consolidated input state for one frame.

    ``cursor`` is in device coordinates ([-1, 1] on both axes, y up).
    The held flags are sticky; ``clicked`` stays set until consumed.
    """

    cursor: Vec2 = (0.0, 0.0)
    forward_held: bool = False
    backward_held: bool = False
    reset_held: bool = False
    clicked: bool = False

    @property
    def active(self) -> bool:
        """True when any movement or aim input needs handling this frame."""
        return self.clicked or self.forward_held or self.backward_held


def normalize_cursor(x: float, y: float, width: int, height: int) -> Vec2:
    """Map pixel coordinates to device space, flipping the vertical axis."""
    nx = x / (width - 1.0) * 2.0 - 1.0
    ny = y / (height - 1.0) * 2.0 - 1.0
    return (nx, -ny)


class InputStateAggregator:
    """Applies events synchronously and hands out immutable snapshots.

    ``on_passthrough(event)`` receives key events the core does not act on
    (the recompile key), so a frontend can react to them.
    """

    def __init__(
        self,
        on_passthrough: Callable[[KeyEvent], None] | None = None,
    ) -> None:
        self._cursor: Vec2 = (0.0, 0.0)
        self._forward = False
        self._backward = False
        self._reset = False
        self._clicked = False
        self._on_passthrough = on_passthrough

    def apply(self, event: InputEvent) -> None:
        if isinstance(event, KeyEvent):
            self._apply_key(event)
        elif isinstance(event, ButtonEvent):
            if event.button is Button.PRIMARY and event.action is Action.PRESS:
                self._clicked = True
        elif isinstance(event, CursorMoved):
            self._cursor = normalize_cursor(event.x, event.y, event.width, event.height)
        else:
            raise TypeError(f"Unsupported input event {type(event).__qualname__}")

    def apply_all(self, events: Iterable[InputEvent]) -> int:
        """Apply every event in order. Returns how many were applied."""
        count = 0
        for event in events:
            self.apply(event)
            count += 1
        return count

    def _apply_key(self, event: KeyEvent) -> None:
        held = event.action is Action.PRESS
        if event.key is Key.THRUST_FORWARD:
            self._forward = held
        elif event.key is Key.THRUST_BACKWARD:
            self._backward = held
        elif event.key is Key.RESET:
            self._reset = held
        elif self._on_passthrough is not None:
            self._on_passthrough(event)
        else:
            logger.debug("Ignoring %s %s", event.key.name, event.action.name)

    def snapshot(self) -> InputSnapshot:
        return InputSnapshot(
            cursor=self._cursor,
            forward_held=self._forward,
            backward_held=self._backward,
            reset_held=self._reset,
            clicked=self._clicked,
        )

    def consume_click(self) -> None:
        """Clear the one-shot click flag after it has been acted on."""
        self._clicked = False

    def clear(self) -> None:
        """Drop every held and one-shot flag. The cursor position is kept."""
        self._forward = False
        self._backward = False
        self._reset = False
        self._clicked = False
