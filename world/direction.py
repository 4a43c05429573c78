"""Compass directions used to link neighbouring grid cells."""

from enum import Enum
from typing import Tuple


class Direction(Enum):
    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)

    @property
    def delta(self) -> Tuple[int, int]:
        """(row, col) offset to the neighbouring cell."""
        return self.value

    @property
    def inverse(self) -> "Direction":
        return _INVERSES[self]


_INVERSES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

# Neighbour scan order used everywhere a deterministic order matters.
CARDINAL_DIRECTIONS = (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)
