# main.py
import argparse
import logging

import pygame # type: ignore

from .config import Config
from .controls import handle_input
from .game import new_game_state, update
from .render import draw_world, draw_paused, draw_grid_full

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> Config:
    defaults = Config()
    parser = argparse.ArgumentParser(description="Snake on a wrap-around grid.")
    parser.add_argument("--width", type=int, default=defaults.width, help="window width in pixels")
    parser.add_argument("--height", type=int, default=defaults.height, help="window height in pixels")
    parser.add_argument("--cell-size", type=int, default=defaults.cell_size, help="pixels per grid cell")
    parser.add_argument(
        "--tps",
        type=int,
        default=defaults.ticks_per_second,
        help="simulation ticks per second (snake moves one cell per tick)",
    )
    parser.add_argument("--fps", type=int, default=defaults.fps, help="render frames per second")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument("--debug", action="store_true", help="log every step")

    args = parser.parse_args(argv)
    try:
        return Config(
            width=args.width,
            height=args.height,
            cell_size=args.cell_size,
            ticks_per_second=args.tps,
            fps=args.fps,
            seed=args.seed,
            debug=args.debug,
        )
    except ValueError as e:
        parser.error(str(e))


def wait_for_restart(clock: pygame.time.Clock) -> bool:
    """Block until R (True) or quit/Escape (False)."""
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_r:
                    return True
                if event.key == pygame.K_ESCAPE:
                    return False
        clock.tick(30)


def main(argv=None):
    cfg = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if cfg.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    try:
        font = pygame.font.SysFont(None, 24)
        screen = pygame.display.set_mode((cfg.width, cfg.height))
        pygame.display.set_caption(cfg.title)
        clock = pygame.time.Clock()

        state = new_game_state(cfg, pygame.time.get_ticks())

        while True:
            # 1) input
            if not handle_input(state.world):
                break

            # 2) update
            alive = update(state, pygame.time.get_ticks())

            # 3) render
            draw_world(screen, state, cfg)
            if not alive:
                draw_grid_full(screen, font)
                pygame.display.flip()
                if not wait_for_restart(clock):
                    break
                state = new_game_state(cfg, pygame.time.get_ticks())
                continue
            if not state.world.running:
                draw_paused(screen, font)
            pygame.display.flip()
            clock.tick(cfg.fps)  # stepping is gated by the ticker, not the frame rate
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
