"""
Food placement.
"""
import random
from typing import Iterable, Optional

from .state import Point


class RandomFoodGenerator:
    """
    Places food on a uniformly random cell.

    Cells passed as ``occupied`` are avoided: random draws are retried and,
    if the board is nearly full, the first free cell is taken instead.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Args:
            rng: Random source (a fresh ``random.Random`` when omitted)
        """
        self.rng = rng or random.Random()

    def generate(self, grid_size: int, occupied: Iterable[Point] = ()) -> Point:
        """
        Pick a food position.

        Args:
            grid_size: Board side length; both axes are drawn from 1..grid_size
            occupied: Cells the food must not land on

        Returns:
            The new food position
        """
        blocked = set(occupied)
        attempts = 0
        max_attempts = grid_size * grid_size

        while attempts < max_attempts:
            food = Point(
                self.rng.randint(1, grid_size),
                self.rng.randint(1, grid_size),
            )
            if food not in blocked:
                return food
            attempts += 1

        # Fallback: find any empty cell (board is almost full)
        for x in range(1, grid_size + 1):
            for y in range(1, grid_size + 1):
                point = Point(x, y)
                if point not in blocked:
                    return point

        # Every cell is covered; any cell will do until the next reset
        return Point(self.rng.randint(1, grid_size), self.rng.randint(1, grid_size))
