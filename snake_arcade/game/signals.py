"""
Logical input events understood by the game controller.
"""
from dataclasses import dataclass
from typing import Union

from .state import Direction


@dataclass(frozen=True)
class StartSignal:
    """Start a run. Only effective while idle."""
    pass


@dataclass(frozen=True)
class DirectionSignal:
    """Change heading. Only effective while running."""
    direction: Direction


InputSignal = Union[StartSignal, DirectionSignal]
