"""
Collision detection for the snake.
"""
from enum import Enum
from typing import Optional

from .state import SnakeState


class CollisionKind(Enum):
    """What the snake's head ran into."""
    WALL = "wall"
    SELF = "self"


def check_collision(state: SnakeState, grid_size: int) -> Optional[CollisionKind]:
    """
    Check the head against the walls and the rest of the body.

    Args:
        state: Snake to check (not modified)
        grid_size: Board side length; valid cells are 1..grid_size

    Returns:
        CollisionKind.WALL, CollisionKind.SELF, or None. Wall wins when both apply.
    """
    head = state.head

    # Wall collision
    if head.x < 1 or head.x > grid_size:
        return CollisionKind.WALL
    if head.y < 1 or head.y > grid_size:
        return CollisionKind.WALL

    # Self collision (skip head)
    if head in state.body:
        return CollisionKind.SELF

    return None
