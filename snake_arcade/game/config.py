"""
Snake game constants.

These are fixed rules of the game, not user settings; presentation and
logging settings live in ``snake_arcade.utils.config_loader``.
"""
from dataclasses import dataclass
from typing import Tuple

from .state import Direction


# (threshold, decrement): the first row whose threshold is below the
# current delay applies. At or under the last threshold the delay stays put.
SPEED_STEPS: Tuple[Tuple[int, int], ...] = (
    (150, 5),
    (100, 3),
    (50, 2),
    (25, 1),
)


@dataclass(frozen=True)
class SnakeConfig:
    """Configuration for the Snake game."""

    grid_size: int = 20
    initial_speed_delay: int = 200  # ms between ticks
    start_x: int = 10
    start_y: int = 10
    initial_direction: Direction = Direction.RIGHT
