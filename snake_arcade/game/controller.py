"""
Game controller - the Snake state machine.

Owns the GameSession and the clock, turns ticks and input signals into
state changes, and notifies the presenter after each of them.
"""
import logging
from typing import Optional

from ..core.presenter_interface import PresenterInterface, RenderFrame
from .clock import GameClock
from .collision import CollisionKind, check_collision
from .config import SnakeConfig
from .food import RandomFoodGenerator
from .session import GameSession
from .signals import DirectionSignal, InputSignal, StartSignal
from .state import move


logger = logging.getLogger(__name__)


class GameController:
    """
    Drives one Snake session.

    States:
        Idle    - waiting for a StartSignal, clock stopped
        Running - clock ticking, direction input accepted

    Everything happens on the caller's thread: ticks come from the clock's
    backend and input from ``handle_input``, both on the same event loop.
    """

    def __init__(
        self,
        presenter: PresenterInterface,
        clock: GameClock,
        food_generator: Optional[RandomFoodGenerator] = None,
        config: Optional[SnakeConfig] = None,
    ):
        """
        Initialize the controller.

        Args:
            presenter: Receives render, high-score and instruction notifications
            clock: Tick source; the controller is its only user
            food_generator: Food placement (random by default)
            config: Game constants
        """
        self.config = config or SnakeConfig()
        self.presenter = presenter
        self.clock = clock
        self.food_generator = food_generator or RandomFoodGenerator()
        self.session = GameSession.new(self.config, self.food_generator)

    @property
    def running(self) -> bool:
        return self.session.started

    @property
    def score(self) -> int:
        return self.session.score

    def snapshot(self, just_reset: bool = False) -> RenderFrame:
        """Read-only view of the session for presenters."""
        session = self.session
        return RenderFrame(
            snake=session.snake.segments,
            food=session.food,
            direction=session.direction,
            score=session.score,
            high_score=session.high_score,
            speed_delay=session.speed_delay,
            running=session.started,
            just_reset=just_reset,
        )

    def refresh(self) -> None:
        """Push the current state to the presenter without ticking."""
        self.presenter.set_instructions_visible(not self.session.started)
        self.presenter.render(self.snapshot())

    def handle_input(self, signal: Optional[InputSignal]) -> None:
        """
        Apply an input signal.

        StartSignal only works while idle, DirectionSignal only while
        running. Anything else is ignored.
        """
        if isinstance(signal, StartSignal):
            if not self.session.started:
                self.start()
        elif isinstance(signal, DirectionSignal):
            if self.session.started:
                # No reversal guard: turning back into the body is a collision
                self.session.direction = signal.direction

    def start(self) -> None:
        """Idle -> Running."""
        if self.session.started:
            return
        self.session.started = True
        self.presenter.set_instructions_visible(False)
        self.clock.start(self.session.speed_delay, self.tick)
        logger.info("Game started (speed %d ms)", self.session.speed_delay)

    def stop(self) -> None:
        """Running -> Idle without resetting the board."""
        self.clock.stop()
        if not self.session.started:
            return
        self.session.started = False
        self.presenter.set_instructions_visible(True)
        logger.info("Game stopped at score %d", self.session.score)

    def tick(self) -> Optional[CollisionKind]:
        """
        Advance the game one step.

        Returns:
            The collision that ended the run, or None
        """
        session = self.session
        if not session.started:
            return None

        session.snake, ate_food = move(session.snake, session.direction, session.food)

        collision = check_collision(session.snake, self.config.grid_size)
        if collision is not None:
            self._reset(collision)
            self.presenter.render(self.snapshot(just_reset=True))
            return collision

        if ate_food:
            session.food = self.food_generator.generate(
                self.config.grid_size, session.snake.segments
            )
            session.increase_speed()
            # Same tick: the old chain is cancelled before the new one exists
            self.clock.restart(session.speed_delay, self.tick)
            logger.debug(
                "Food eaten, score %d, speed now %d ms",
                session.score, session.speed_delay,
            )

        self.presenter.render(self.snapshot())
        return None

    def _reset(self, collision: CollisionKind) -> None:
        """End the run: record high score, stop the clock, restore defaults."""
        session = self.session
        final_score = session.score

        new_high = session.record_high_score()
        if new_high is not None:
            logger.info("New high score: %d", new_high)
            self.presenter.update_high_score(new_high)

        self.clock.stop()
        session.reset(self.config, self.food_generator)
        self.presenter.set_instructions_visible(True)

        logger.info(
            "Game over (%s collision), score %d, high score %d",
            collision.value, final_score, session.high_score,
        )
