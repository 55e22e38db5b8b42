#!/usr/bin/env python3
"""
Snake — Pygame front end.

Controls
- Arrow keys: move
- Esc or window close: quit

Usage:
    python -m snake_game
    python -m snake_game --seed 7 --ups 15 --log-level DEBUG
"""
import argparse
import logging
import sys

# Try to import pygame with a friendly error if missing.
try:
    import pygame
except ImportError:
    print("This game requires the 'pygame' package.\n"
          "Install it with:\n\n    pip install pygame\n")
    sys.exit(1)

from .config import FPS, MAX_UPS, TITLE, UPS, WINDOW_H, WINDOW_W, GameConfig
from .game import Game
from .grid import Direction
from .render import render

logger = logging.getLogger(__name__)

KEY_TO_DIR = {
    pygame.K_UP:    Direction.UP,
    pygame.K_DOWN:  Direction.DOWN,
    pygame.K_LEFT:  Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def handle_event(game, event, update_event):
    """Feed one pygame event to the game. Returns False when it is time to quit."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return False
        if event.key in KEY_TO_DIR:
            game.press(KEY_TO_DIR[event.key])
    elif event.type == update_event:
        game.update()
    return True


def run(config):
    pygame.init()
    try:
        pygame.display.set_mode((config.width, config.height), pygame.RESIZABLE)
    except pygame.error:
        logger.exception("Could not open a %dx%d window", config.width, config.height)
        pygame.quit()
        raise
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()

    game = Game(width=config.width, height=config.height, seed=config.seed)
    logger.info("Starting %s: %dx%d, %d updates/s, seed=%s",
                TITLE, config.width, config.height, config.ups, config.seed)

    # Timed update event so the game speed is independent of the frame rate
    UPDATE = pygame.USEREVENT + 1
    pygame.time.set_timer(UPDATE, max(1, 1000 // config.ups))

    running = True
    while running:
        for event in pygame.event.get():
            if not handle_event(game, event, UPDATE):
                running = False
                break

        screen = pygame.display.get_surface()
        game.resize(*screen.get_size())
        render(screen, game)
        pygame.display.flip()
        clock.tick(config.fps)

    logger.info("Shutting down")
    pygame.quit()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Grid snake.")
    parser.add_argument("--width", type=int, default=WINDOW_W, help="Window width in pixels (default: %(default)s)")
    parser.add_argument("--height", type=int, default=WINDOW_H, help="Window height in pixels (default: %(default)s)")
    parser.add_argument("--ups", type=int, default=UPS, help="Game updates per second (default: %(default)s)")
    parser.add_argument("--fps", type=int, default=FPS, help="Render frame cap (default: %(default)s)")
    parser.add_argument("--seed", type=int, help="Seed for food placement")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    if args.ups <= 0:
        parser.error("--ups must be positive")
    if args.ups > MAX_UPS:
        parser.error("--ups must be at most %d" % MAX_UPS)
    if args.fps <= 0:
        parser.error("--fps must be positive")
    return args


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    run(GameConfig(width=args.width, height=args.height, ups=args.ups, fps=args.fps, seed=args.seed))


if __name__ == "__main__":
    main()
