"""
Keyboard mapping from pygame key codes to game signals.
"""
import pygame
from typing import Optional

from ..game.signals import DirectionSignal, InputSignal, StartSignal
from ..game.state import Direction


def signal_for_key(key: int) -> Optional[InputSignal]:
    """
    Translate a pygame key code.

    Space starts the game; arrow keys and WASD steer.

    Returns:
        The matching signal, or None for keys the game does not use
    """
    if key == pygame.K_SPACE:
        return StartSignal()
    if key in (pygame.K_UP, pygame.K_w):
        return DirectionSignal(Direction.UP)
    if key in (pygame.K_DOWN, pygame.K_s):
        return DirectionSignal(Direction.DOWN)
    if key in (pygame.K_LEFT, pygame.K_a):
        return DirectionSignal(Direction.LEFT)
    if key in (pygame.K_RIGHT, pygame.K_d):
        return DirectionSignal(Direction.RIGHT)
    return None
