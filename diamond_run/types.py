"""Shared type aliases, input events, and errors for diamond-run."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Iterable, Protocol

Vec2 = tuple[float, float]


class Key(Enum):
    """Logical keys understood by the input layer."""

    RECOMPILE = auto()
    THRUST_FORWARD = auto()
    THRUST_BACKWARD = auto()
    RESET = auto()


class Action(Enum):
    PRESS = auto()
    RELEASE = auto()


class Button(Enum):
    PRIMARY = auto()
    SECONDARY = auto()


@dataclass(frozen=True, slots=True)
class KeyEvent:
    key: Key
    action: Action


@dataclass(frozen=True, slots=True)
class ButtonEvent:
    button: Button
    action: Action


@dataclass(frozen=True, slots=True)
class CursorMoved:
    """Raw pointer position in pixels plus the screen size it was measured in."""

    x: float
    y: float
    width: int
    height: int


InputEvent = KeyEvent | ButtonEvent | CursorMoved


class EventSource(Protocol):
    """Anything that can hand over pending input and answer "keep running?"."""

    def poll(self) -> Iterable[InputEvent]: ...

    def should_close(self) -> bool: ...


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]
    random: _random.Random


class DegenerateVectorError(ValueError):
    """Raised when a direction is derived from a zero-length vector."""

    def __init__(self, vector: tuple[float, ...], message: str) -> None:
        self.vector = vector
        super().__init__(message)


class SamplingBoundError(ValueError):
    """Raised when bounded sampling is asked for an empty range."""
