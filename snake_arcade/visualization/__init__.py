"""
Visualization module for Snake Arcade.

Components:
- SnakeRenderer: Pygame presenter (board, score bar, start prompt)
- ConsolePresenter: Rich terminal summaries of each run
- PresenterGroup: Sends notifications to several presenters
- PygameClock: GameClock backed by pygame timers
- signal_for_key: Keyboard mapping
"""

from .renderer import SnakeRenderer
from .console import ConsolePresenter
from .presenter_group import PresenterGroup
from .pygame_clock import PygameClock
from .input_map import signal_for_key

__all__ = [
    'SnakeRenderer',
    'ConsolePresenter',
    'PresenterGroup',
    'PygameClock',
    'signal_for_key',
]
