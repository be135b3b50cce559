"""Window and main loop of the game."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

import pygame

from .hotload import Instance

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 450
TARGET_FPS = 60
WINDOW_TITLE = "test window"


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text}")
    return value


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(
        prog="bulletbalance", description="Run the ball simulation."
    )
    parser.add_argument("--width", type=_positive_int, default=SCREEN_WIDTH)
    parser.add_argument("--height", type=_positive_int, default=SCREEN_HEIGHT)
    parser.add_argument("--fps", type=_positive_int, default=TARGET_FPS)
    parser.add_argument("--title", default=WINDOW_TITLE)
    parser.add_argument(
        "--hotload",
        action="store_true",
        help="rebind the game interface when R is pressed",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run the game until it is closed."""
    args = parse_args(argv)
    with Instance() as game:
        pygame.init()
        try:
            screen = pygame.display.set_mode((args.width, args.height))
            pygame.display.set_caption(args.title)
            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif (
                        args.hotload
                        and event.type == pygame.KEYDOWN
                        and event.key == pygame.K_r
                    ):
                        game.reload()
                if not running:
                    break
                delta_time = clock.tick(args.fps) / 1000.0
                game.update(delta_time, screen, round(clock.get_fps()))
                pygame.display.flip()
        finally:
            pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())