"""
Crawler: a position and a facing direction moving over a tile grid.

The crawler never leaves the grid. Facing past the border shows the Outside
tile, and walking into it is refused like walking into a wall.
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .direction import Direction
from .exceptions import BlockedMoveError
from .items import Inventory
from .tiles import Room, Tile

if TYPE_CHECKING:
    from .maze_parser import TileGrid


@runtime_checkable
class CrawlerLike(Protocol):
    """What movement strategies and explorers need from a crawler."""

    @property
    def x(self) -> int: ...

    @property
    def y(self) -> int: ...

    @property
    def direction(self) -> Direction: ...

    @property
    def facing_tile(self) -> Tile: ...

    def walk(self) -> Inventory: ...

    def turn_left(self) -> None: ...

    def turn_right(self) -> None: ...


class Crawler:
    """Navigates a TileGrid. Only turn_left, turn_right and walk change it."""

    def __init__(
        self,
        grid: "TileGrid",
        x: int,
        y: int,
        direction: Direction = Direction.NORTH,
    ):
        if grid is None:
            raise ValueError("Crawler requires a grid")
        if not grid.in_bounds(x, y):
            raise ValueError(f"Start position ({x}, {y}) is outside the grid")

        self._grid = grid
        self._x = x
        self._y = y
        self._direction = direction

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def position(self) -> tuple[int, int]:
        return self._x, self._y

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def facing_tile(self) -> Tile:
        """Tile in front of the crawler, Outside past the border."""
        dx, dy = self._direction.delta
        return self._grid.tile_at(self._x + dx, self._y + dy)

    def turn_right(self) -> None:
        self._direction = self._direction.turn_right()

    def turn_left(self) -> None:
        self._direction = self._direction.turn_left()

    def walk(self) -> Inventory:
        """
        Step onto the facing tile.

        Returns:
            Inventory holding what was picked up on the new tile (may be empty).

        Raises:
            BlockedMoveError: If the facing tile is a wall, a locked door or
                the outside. The crawler does not move.
        """
        facing = self.facing_tile
        if not facing.is_traversable:
            raise BlockedMoveError(
                f"Cannot walk {self._direction.value} from ({self._x}, {self._y}) - "
                f"{type(facing).__name__.lower()} blocking"
            )

        dx, dy = self._direction.delta
        self._x += dx
        self._y += dy

        if isinstance(facing, Room):
            return facing.pass_through()
        return Inventory()

    def __repr__(self) -> str:
        return f"Crawler(x={self._x}, y={self._y}, direction={self._direction.name})"
