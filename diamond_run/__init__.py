"""diamond-run - Input-driven ship steering and diamond collecting core."""

from diamond_run.components import Collectible, RenderParams, Ship
from diamond_run.config import GameConfig
from diamond_run.engine import Engine
from diamond_run.input import InputSnapshot, InputStateAggregator
from diamond_run.session import FrameOutcome, GameSession, SessionState
from diamond_run.sources import ScriptedEventSource
from diamond_run.types import (
    Action,
    Button,
    ButtonEvent,
    CursorMoved,
    DegenerateVectorError,
    EventSource,
    FrameContext,
    Key,
    KeyEvent,
    SamplingBoundError,
)

__all__ = [
    "Action",
    "Button",
    "ButtonEvent",
    "Collectible",
    "CursorMoved",
    "DegenerateVectorError",
    "Engine",
    "EventSource",
    "FrameContext",
    "FrameOutcome",
    "GameConfig",
    "GameSession",
    "InputSnapshot",
    "InputStateAggregator",
    "Key",
    "KeyEvent",
    "RenderParams",
    "SamplingBoundError",
    "ScriptedEventSource",
    "SessionState",
    "Ship",
]
