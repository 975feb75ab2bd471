"""
Pytest configuration and fixtures for Snake Arcade tests.

This module sets up pygame mocking so presenters, the pygame clock and the
application loop can be tested without a display. The game core never
imports pygame and is tested directly.
"""

import sys
from pathlib import Path
from typing import List, Optional
from unittest.mock import MagicMock

import pytest


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from snake_arcade.core.presenter_interface import PresenterInterface, RenderFrame
from snake_arcade.game.clock import SimulatedClock
from snake_arcade.game.controller import GameController
from snake_arcade.game.food import RandomFoodGenerator
from snake_arcade.game.state import Point


def create_mock_pygame():
    """Create a mock of the parts of pygame the project uses."""
    mock_pygame = MagicMock()

    # Basic initialization
    mock_pygame.init.return_value = (6, 0)  # (success, fail) count
    mock_pygame.quit.return_value = None

    # Display
    mock_surface = MagicMock()
    mock_surface.get_width.return_value = 600
    mock_surface.get_height.return_value = 650
    mock_pygame.display.set_mode.return_value = mock_surface
    mock_pygame.display.set_caption.return_value = None
    mock_pygame.display.flip.return_value = None

    # Fonts
    mock_font = MagicMock()
    mock_font.render.return_value = MagicMock()  # Returns a surface
    mock_pygame.font.Font.return_value = mock_font

    # Drawing
    mock_pygame.draw.rect.return_value = None
    mock_pygame.draw.line.return_value = None
    mock_pygame.draw.circle.return_value = None

    # Events
    mock_pygame.event.get.return_value = []

    # Constants
    mock_pygame.QUIT = 256
    mock_pygame.KEYDOWN = 768
    mock_pygame.USEREVENT = 32866
    mock_pygame.K_ESCAPE = 27
    mock_pygame.K_SPACE = 32
    mock_pygame.K_UP = 273
    mock_pygame.K_DOWN = 274
    mock_pygame.K_LEFT = 276
    mock_pygame.K_RIGHT = 275
    mock_pygame.K_w = 119
    mock_pygame.K_a = 97
    mock_pygame.K_s = 115
    mock_pygame.K_d = 100
    mock_pygame.K_r = 114

    # Time
    mock_clock = MagicMock()
    mock_clock.tick.return_value = 16  # ~60fps
    mock_pygame.time.Clock.return_value = mock_clock
    mock_pygame.time.set_timer.return_value = None

    # Rect
    mock_pygame.Rect = MagicMock(side_effect=lambda *args: MagicMock(
        x=args[0] if args else 0,
        y=args[1] if len(args) > 1 else 0,
        width=args[2] if len(args) > 2 else 0,
        height=args[3] if len(args) > 3 else 0,
    ))

    return mock_pygame


@pytest.fixture(scope="session", autouse=True)
def mock_pygame_module():
    """
    Session-scoped fixture that mocks pygame before any imports.

    Modules that import pygame are only imported inside test functions,
    so they bind to this mock.
    """
    mock_pygame = create_mock_pygame()

    # Store original module if it exists
    original_pygame = sys.modules.get('pygame')

    # Install mock
    sys.modules['pygame'] = mock_pygame

    yield mock_pygame

    # Restore original (or remove mock)
    if original_pygame:
        sys.modules['pygame'] = original_pygame
    else:
        del sys.modules['pygame']


@pytest.fixture
def mock_screen(mock_pygame_module):
    """Provide a mock pygame screen surface."""
    screen = MagicMock()
    screen.get_width.return_value = 600
    screen.get_height.return_value = 650
    screen.fill.return_value = None
    screen.blit.return_value = None
    return screen


class RecordingPresenter(PresenterInterface):
    """Presenter that remembers every notification."""

    def __init__(self):
        self.frames: List[RenderFrame] = []
        self.high_scores: List[int] = []
        self.instructions: List[bool] = []

    @property
    def last_frame(self) -> Optional[RenderFrame]:
        return self.frames[-1] if self.frames else None

    def render(self, frame: RenderFrame) -> None:
        self.frames.append(frame)

    def update_high_score(self, high_score: int) -> None:
        self.high_scores.append(high_score)

    def set_instructions_visible(self, visible: bool) -> None:
        self.instructions.append(visible)


class ScriptedFoodGenerator(RandomFoodGenerator):
    """Hands out food positions from a list; repeats the last one when exhausted."""

    def __init__(self, positions):
        super().__init__()
        self.positions = [Point(x, y) for x, y in positions]
        self.calls = 0

    def generate(self, grid_size, occupied=()):
        index = min(self.calls, len(self.positions) - 1)
        self.calls += 1
        return self.positions[index]


@pytest.fixture
def presenter():
    """Provide a presenter that records notifications."""
    return RecordingPresenter()


@pytest.fixture
def sim_clock():
    """Provide a deterministic clock."""
    return SimulatedClock()


@pytest.fixture
def make_controller(presenter, sim_clock):
    """
    Factory for a controller on a simulated clock.

    ``food`` lists the food positions in the order they appear; the first
    one is placed when the session is created.
    """
    def _make(food=((1, 1),)):
        return GameController(presenter, sim_clock, food_generator=ScriptedFoodGenerator(food))

    return _make
