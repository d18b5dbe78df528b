"""Event sources that do not need a window."""
from __future__ import annotations

from collections import deque
from typing import Iterable

from diamond_run.types import InputEvent


class ScriptedEventSource:
    """Replays pre-recorded event batches, one batch per frame.

    Once the script runs out, poll() returns nothing and should_close()
    reports True unless ``close_when_exhausted`` is False.
    """

    def __init__(
        self,
        frames: Iterable[Iterable[InputEvent]] = (),
        close_when_exhausted: bool = True,
    ) -> None:
        self._pending: deque[tuple[InputEvent, ...]] = deque(tuple(batch) for batch in frames)
        self._close_when_exhausted = close_when_exhausted
        self._closed = False

    def push(self, *events: InputEvent) -> None:
        """Append one frame's worth of events to the script."""
        self._pending.append(events)

    def pending(self) -> int:
        return len(self._pending)

    def close(self) -> None:
        self._closed = True

    def poll(self) -> tuple[InputEvent, ...]:
        if not self._pending:
            return ()
        return self._pending.popleft()

    def should_close(self) -> bool:
        if self._closed:
            return True
        return self._close_when_exhausted and not self._pending
