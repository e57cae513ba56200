"""Compass directions used by the crawler."""

from enum import Enum


class Direction(Enum):
    """Facing directions, in clockwise order."""

    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    @property
    def delta(self) -> tuple[int, int]:
        """Get (dx, dy) for this direction."""
        return _DELTAS[self]

    @property
    def delta_x(self) -> int:
        """Horizontal step of this direction."""
        return _DELTAS[self][0]

    @property
    def delta_y(self) -> int:
        """Vertical step of this direction, with south positive."""
        return _DELTAS[self][1]

    def turn_right(self) -> "Direction":
        """Get direction after a quarter turn clockwise."""
        idx = _CLOCKWISE.index(self)
        return _CLOCKWISE[(idx + 1) % 4]

    def turn_left(self) -> "Direction":
        """Get direction after a quarter turn counter-clockwise."""
        idx = _CLOCKWISE.index(self)
        return _CLOCKWISE[(idx - 1) % 4]

    @property
    def symbol(self) -> str:
        """Arrow character used when drawing the crawler."""
        return _SYMBOLS[self]


_CLOCKWISE = [Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST]

_DELTAS = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}

_SYMBOLS = {
    Direction.NORTH: "^",
    Direction.EAST: ">",
    Direction.SOUTH: "v",
    Direction.WEST: "<",
}
