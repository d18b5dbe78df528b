"""pygame-backed EventSource. A thin adapter: no game logic here."""
from __future__ import annotations

import pygame

from diamond_run import Action, Button, ButtonEvent, CursorMoved, Key, KeyEvent
from diamond_run.types import InputEvent

KEY_MAP = {
    pygame.K_r: Key.RECOMPILE,
    pygame.K_UP: Key.THRUST_FORWARD,
    pygame.K_DOWN: Key.THRUST_BACKWARD,
    pygame.K_j: Key.RESET,
}

BUTTON_MAP = {
    1: Button.PRIMARY,
    3: Button.SECONDARY,
}


class PygameEventSource:
    """Drains the pygame event queue into logical input events."""

    def __init__(self, surface: pygame.Surface) -> None:
        self._surface = surface
        self._closing = False

    def poll(self) -> list[InputEvent]:
        events: list[InputEvent] = []
        width, height = self._surface.get_size()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._closing = True
            elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    self._closing = True
                    continue
                key = KEY_MAP.get(event.key)
                if key is None:
                    continue
                action = Action.PRESS if event.type == pygame.KEYDOWN else Action.RELEASE
                events.append(KeyEvent(key, action))
            elif event.type == pygame.MOUSEBUTTONDOWN:
                button = BUTTON_MAP.get(event.button)
                if button is not None:
                    events.append(ButtonEvent(button, Action.PRESS))
            elif event.type == pygame.MOUSEMOTION:
                mx, my = event.pos
                events.append(CursorMoved(float(mx), float(my), width, height))
        return events

    def should_close(self) -> bool:
        return self._closing
