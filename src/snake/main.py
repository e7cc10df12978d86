# main.py
import argparse
import logging
from typing import List, Optional

import pygame # type: ignore

from .config import Config
from .game import GameState
from .host import poll_input, draw
from .render import render

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="snake", description="Grid snake with a speed ramp.")
    parser.add_argument("--grid-w", type=int, default=Config.grid_w)
    parser.add_argument("--grid-h", type=int, default=Config.grid_h)
    parser.add_argument("--tile-size", type=int, default=Config.tile_size, help="pixels per grid cell")
    parser.add_argument("--fps", type=int, default=Config.fps, help="frame rate; movement is gated per frame")
    parser.add_argument("--seed", type=int, default=None, help="seed food placement for a reproducible game")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    cfg = Config(
        grid_w=args.grid_w,
        grid_h=args.grid_h,
        tile_size=args.tile_size,
        fps=args.fps,
        seed=args.seed,
    )
    state = GameState(cfg)

    pygame.init()
    try:
        font = pygame.font.SysFont(None, 18)
        screen = pygame.display.set_mode(cfg.screen_size)
        pygame.display.set_caption("Snake")
        clock = pygame.time.Clock()

        while True:
            # 1) input
            intents = poll_input()
            if intents is None:
                break

            # 2) update
            snapshot = state.update(intents)

            # 3) render
            draw(screen, font, render(snapshot, cfg), cfg)
            pygame.display.flip()
            clock.tick(cfg.fps)  # movement is gated inside tick()
    finally:
        pygame.quit()

    logger.info("window closed, final score %d", state.score)

if __name__ == "__main__":
    main()
