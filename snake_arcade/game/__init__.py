"""
Snake game core - state, rules and the controller that runs them.

Nothing in here imports pygame.
"""

from .state import Direction, Point, SnakeState, MoveResult, move
from .collision import CollisionKind, check_collision
from .food import RandomFoodGenerator
from .config import SnakeConfig, SPEED_STEPS
from .session import GameSession, next_speed_delay
from .clock import GameClock, ClockToken, SimulatedClock
from .signals import StartSignal, DirectionSignal, InputSignal
from .controller import GameController

__all__ = [
    'Direction',
    'Point',
    'SnakeState',
    'MoveResult',
    'move',
    'CollisionKind',
    'check_collision',
    'RandomFoodGenerator',
    'SnakeConfig',
    'SPEED_STEPS',
    'GameSession',
    'next_speed_delay',
    'GameClock',
    'ClockToken',
    'SimulatedClock',
    'StartSignal',
    'DirectionSignal',
    'InputSignal',
    'GameController',
]
