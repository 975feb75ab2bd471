"""
Game session - the single owned aggregate of all mutable game state.
"""
from dataclasses import dataclass
from typing import Optional

from .config import SPEED_STEPS, SnakeConfig
from .food import RandomFoodGenerator
from .state import Direction, Point, SnakeState


def next_speed_delay(delay: int) -> int:
    """
    Tick delay after the snake eats.

    Args:
        delay: Current delay in milliseconds

    Returns:
        The shortened delay; unchanged once at or under the floor
    """
    for threshold, decrement in SPEED_STEPS:
        if delay > threshold:
            return delay - decrement
    return delay


@dataclass
class GameSession:
    """
    Everything that changes while playing.

    Only GameController mutates a session. ``high_score`` is the only field
    that survives ``reset()``.
    """
    snake: SnakeState
    food: Point
    direction: Direction
    speed_delay: int
    started: bool = False
    high_score: int = 0

    @classmethod
    def new(
        cls,
        config: SnakeConfig,
        food_generator: RandomFoodGenerator,
    ) -> "GameSession":
        """Create a session in its start-of-process state."""
        snake = initial_snake(config)
        return cls(
            snake=snake,
            food=food_generator.generate(config.grid_size, snake.segments),
            direction=config.initial_direction,
            speed_delay=config.initial_speed_delay,
        )

    @property
    def score(self) -> int:
        """Segments grown so far; the starting snake scores zero."""
        return len(self.snake) - 1

    def reset(
        self,
        config: SnakeConfig,
        food_generator: RandomFoodGenerator,
    ) -> None:
        """Reinitialise the run. The high score is kept."""
        self.snake = initial_snake(config)
        self.food = food_generator.generate(config.grid_size, self.snake.segments)
        self.direction = config.initial_direction
        self.speed_delay = config.initial_speed_delay
        self.started = False

    def record_high_score(self) -> Optional[int]:
        """
        Raise the high score to the current score if it was beaten.

        Returns:
            The new high score, or None if it did not change
        """
        if self.score > self.high_score:
            self.high_score = self.score
            return self.high_score
        return None

    def increase_speed(self) -> int:
        """Shorten the tick delay per the speed table and return it."""
        self.speed_delay = next_speed_delay(self.speed_delay)
        return self.speed_delay


def initial_snake(config: SnakeConfig) -> SnakeState:
    """Single segment at the configured start cell."""
    return SnakeState((Point(config.start_x, config.start_y),))
