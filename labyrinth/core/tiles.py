"""
Maze tiles.

The set of tiles is closed: Room, Wall, Door and the Outside sentinel. Each
tile carries a TileKind tag, and display lookups dispatch on that tag.
"""

from enum import Enum
from typing import ClassVar, Optional

from .items import Inventory, Item


class TileKind(Enum):
    """Types of tiles in the maze."""
    ROOM = "room"
    WALL = "wall"
    DOOR = "door"
    OUTSIDE = "outside"


class Tile:
    """Base class for every tile."""

    kind: ClassVar[TileKind]

    @property
    def is_traversable(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Room(Tile):
    """Walkable floor, optionally holding one item."""

    kind = TileKind.ROOM

    def __init__(self, item: Optional[Item] = None):
        self._inventory = Inventory(item)

    @property
    def is_traversable(self) -> bool:
        return True

    @property
    def has_item(self) -> bool:
        return self._inventory.has_item

    @property
    def inventory(self) -> Inventory:
        return self._inventory

    def pass_through(self) -> Inventory:
        """
        Enter the room and pick up whatever it holds.

        Returns:
            A fresh inventory with the room's item, or an empty one.
        """
        picked = Inventory()
        if self._inventory.has_item:
            picked.move_item_from(self._inventory)
        return picked


class Wall(Tile):
    """Impassable tile. Stateless, so a single instance is shared."""

    kind = TileKind.WALL
    SINGLETON: ClassVar["Wall"]


class Door(Tile):
    """A door that starts locked and opens with its paired key only."""

    kind = TileKind.DOOR

    def __init__(self, key: Item):
        self._key = key
        self._locked = True

    @property
    def is_locked(self) -> bool:
        return self._locked

    @property
    def is_traversable(self) -> bool:
        return not self._locked

    def opens_with(self, item: Optional[Item]) -> bool:
        """Check whether `item` is this door's key."""
        return item is not None and item is self._key

    def open(self, inventory: Inventory) -> bool:
        """
        Try to unlock the door with the item held in `inventory`.

        The key is consumed from the inventory when it matches. An already
        unlocked door reports success and leaves the inventory untouched.

        Returns:
            True if the door is now unlocked.
        """
        if not self._locked:
            return True
        if not self.opens_with(inventory.item):
            return False
        inventory.take()
        self._locked = False
        return True

    def __repr__(self) -> str:
        state = "locked" if self._locked else "open"
        return f"Door({state})"


class Outside(Tile):
    """Sentinel for every coordinate beyond the grid."""

    kind = TileKind.OUTSIDE
    SINGLETON: ClassVar["Outside"]


Wall.SINGLETON = Wall()
Outside.SINGLETON = Outside()


_TILE_CHARS = {
    TileKind.WALL: "#",
    TileKind.DOOR: "/",
    TileKind.OUTSIDE: " ",
}


def tile_char(tile: Tile) -> str:
    """Get the display character for a tile."""
    if tile.kind is TileKind.ROOM:
        return "k" if tile.has_item else " "
    return _TILE_CHARS[tile.kind]
