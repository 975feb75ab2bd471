"""
Snake state - body segments, heading and single-step movement.

Pure data and functions only; no clock, no rendering.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, NamedTuple, Sequence, Tuple


class Direction(Enum):
    """Snake movement directions."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> Tuple[int, int]:
        """Unit step (dx, dy) for this direction. Screen y grows downwards."""
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass(frozen=True)
class Point:
    """A cell on the game grid (1-indexed)."""
    x: int
    y: int

    def shifted(self, direction: Direction) -> "Point":
        dx, dy = direction.delta
        return Point(self.x + dx, self.y + dy)

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class SnakeState:
    """
    Ordered body segments, head first.

    Duplicate segments are allowed: they mean the snake ran into itself,
    which the collision check reports.
    """
    segments: Tuple[Point, ...]

    def __post_init__(self):
        if not self.segments:
            raise ValueError("SnakeState needs at least one segment")
        # Accept any sequence but always store a tuple
        object.__setattr__(self, "segments", tuple(self.segments))

    @classmethod
    def from_points(cls, points: Sequence[Tuple[int, int]]) -> "SnakeState":
        """Build a state from (x, y) pairs, head first."""
        return cls(tuple(Point(x, y) for x, y in points))

    @property
    def head(self) -> Point:
        return self.segments[0]

    @property
    def body(self) -> Tuple[Point, ...]:
        """Every segment except the head."""
        return self.segments[1:]

    def __len__(self) -> int:
        return len(self.segments)


class MoveResult(NamedTuple):
    """Outcome of a single move."""
    state: SnakeState
    ate_food: bool


def move(state: SnakeState, direction: Direction, food: Point) -> MoveResult:
    """
    Advance the snake one cell.

    The new head is prepended. If it lands on the food the tail is kept
    (the snake grows by one), otherwise the tail is dropped. Heads outside
    the board are returned as-is; the collision check deals with them.

    Args:
        state: Current snake
        direction: Heading to move in
        food: Current food position

    Returns:
        MoveResult with the new state and whether food was eaten
    """
    new_head = state.head.shifted(direction)
    ate_food = new_head == food

    if ate_food:
        segments = (new_head,) + state.segments
    else:
        segments = (new_head,) + state.segments[:-1]

    return MoveResult(SnakeState(segments), ate_food)
