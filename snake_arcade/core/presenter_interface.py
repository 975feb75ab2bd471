"""
Abstract presenter interface for Snake Arcade.

Presenters receive read-only snapshots of the game and never change it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Any, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from ..game.state import Direction, Point


def format_score(value: int) -> str:
    """Score as shown on screen: zero-padded to three digits."""
    return str(value).zfill(3)


@dataclass(frozen=True)
class RenderFrame:
    """Snapshot of a session, taken after a tick (or at start-up)."""

    snake: Tuple["Point", ...]          # Head first
    food: "Point"                       # Only meaningful while running
    direction: "Direction"
    score: int
    high_score: int
    speed_delay: int                    # ms between ticks
    running: bool
    just_reset: bool = False            # This tick ended the run

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "snake": [p.to_dict() for p in self.snake],
            "food": self.food.to_dict(),
            "direction": self.direction.value,
            "score": self.score,
            "high_score": self.high_score,
            "speed_delay": self.speed_delay,
            "running": self.running,
            "just_reset": self.just_reset,
        }


class PresenterInterface(ABC):
    """
    Abstract presentation layer.

    The controller notifies presenters; what they do with it (draw to a
    pygame surface, print to a terminal, record) is up to them.
    """

    @abstractmethod
    def render(self, frame: RenderFrame) -> None:
        """
        Show the latest game state.

        Args:
            frame: Snapshot taken after the most recent tick
        """
        pass

    @abstractmethod
    def update_high_score(self, high_score: int) -> None:
        """
        Show a new high score.

        Args:
            high_score: The improved high score
        """
        pass

    @abstractmethod
    def set_instructions_visible(self, visible: bool) -> None:
        """
        Show or hide the "press space to start" UI.

        Args:
            visible: True while idle, False while running
        """
        pass
