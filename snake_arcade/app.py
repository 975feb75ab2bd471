"""
Human Play Mode - Play Snake in a pygame window.

Controls:
    Space: Start a run
    Arrow Keys or WASD: Steer the snake
    ESC: Quit
"""
import argparse
import logging
from typing import List, Optional

import pygame

from .core.presenter_interface import PresenterInterface
from .game.config import SnakeConfig
from .game.controller import GameController
from .utils.config_loader import LOG_LEVELS, LoggingConfig, load_config
from .utils.logging_setup import setup_logging
from .visualization.console import ConsolePresenter
from .visualization.input_map import signal_for_key
from .visualization.presenter_group import PresenterGroup
from .visualization.pygame_clock import PygameClock
from .visualization.renderer import SnakeRenderer


logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Snake")
    parser.add_argument("--config", type=str, default=None,
                        help="Path to config.yaml")
    parser.add_argument("--cell-size", type=int, default=None,
                        help="Cell size in pixels (overrides config)")
    parser.add_argument("--no-console", action="store_true",
                        help="Do not print run summaries to the terminal")
    parser.add_argument("--log-level", type=str.upper, default=None, choices=LOG_LEVELS,
                        help="Logging level (overrides config)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for human play mode."""
    args = parse_args(argv)

    # Console logging first, so messages from loading the config are shown
    setup_logging(LoggingConfig(level=args.log_level or "INFO"))

    config = load_config(args.config)
    if args.cell_size is not None:
        config.display.cell_size = args.cell_size
    if args.log_level is not None:
        config.logging = LoggingConfig(level=args.log_level, log_file=config.logging.log_file)
    setup_logging(config.logging)

    game_config = SnakeConfig()

    pygame.init()
    try:
        renderer = SnakeRenderer(
            grid_size=game_config.grid_size,
            cell_size=config.display.cell_size,
            show_grid=config.display.show_grid,
        )
        screen = pygame.display.set_mode(renderer.get_preferred_size())
        pygame.display.set_caption(config.display.window_title)

        presenters: List[PresenterInterface] = [renderer]
        if config.console.enabled and not args.no_console:
            presenters.append(ConsolePresenter())

        clock = PygameClock()
        controller = GameController(PresenterGroup(presenters), clock, config=game_config)
        controller.refresh()

        run_loop(controller, clock, renderer, screen, config.display.render_fps)

        controller.stop()
        logger.info("High score this session: %d", controller.session.high_score)
    finally:
        pygame.quit()

    return 0


def run_loop(
    controller: GameController,
    clock: PygameClock,
    renderer: SnakeRenderer,
    screen: pygame.Surface,
    fps: int,
) -> None:
    """Pump pygame events into the game until the window is closed."""
    frame_clock = pygame.time.Clock()
    running = True

    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    controller.handle_input(signal_for_key(event.key))

            else:
                clock.handle_event(event)

        renderer.draw(screen)
        pygame.display.flip()
        frame_clock.tick(fps)


if __name__ == "__main__":
    raise SystemExit(main())
