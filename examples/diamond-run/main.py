"""Diamond Run — steer the ship onto every diamond.

Controls:
  Click   Turn toward the cursor
  Up      Thrust forward
  Down    Thrust backward
  J       Reset the board
  R       Toggle outlines
  Esc     Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from diamond_run import Action, Engine, GameConfig, Key, KeyEvent
from ui.constants import FONT_SIZE, FPS, SCREEN_W, TITLE
from ui.events import PygameEventSource
from ui.renderer import draw_frame


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Diamond Run — diamond-run visual demo")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: wall clock)")
    p.add_argument("--size", type=int, default=SCREEN_W, help=f"Window width/height (default: {SCREEN_W})")
    p.add_argument("--fps", type=int, default=FPS, help=f"Frames per second (default: {FPS})")
    p.add_argument("-v", "--verbose", action="store_true", help="Log captures and resets")
    args = p.parse_args()
    args.size = max(200, args.size)
    args.fps = max(1, args.fps)
    return args


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    config = GameConfig(screen_width=args.size, screen_height=args.size, fps=args.fps)

    pygame.init()
    screen = pygame.display.set_mode((config.screen_width, config.screen_height))
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", FONT_SIZE)

    engine = Engine(PygameEventSource(screen), config=config, seed=args.seed)

    outline = [False]

    def on_key(event: KeyEvent) -> None:
        if event.key is Key.RECOMPILE and event.action is Action.PRESS:
            outline[0] = not outline[0]

    def on_frame(session, ctx) -> None:
        draw_frame(
            screen,
            font,
            session.render_params(),
            session.overlay_text(),
            session.won,
            outline[0],
        )
        pygame.display.flip()
        pg_clock.tick(args.fps)

    engine.on_key(on_key)
    engine.on_frame(on_frame)
    engine.run_forever(pace=False)

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
