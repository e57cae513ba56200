"""
ASCII maze parser.

Turns a rectangular block of text into a grid of tiles.

Maze Format:
    + - | = Wall (impassable)
    space = Empty room
    x     = Room where the crawler may start
    /     = Door, locked with its own key
    k     = Room holding a key

Each door mints a fresh key. Keys go into key rooms in the order both are
encountered (row by row, left to right), so a key room may come before or
after the door it serves.
"""

import logging
import re
from collections import deque
from typing import Iterator, Sequence

from .events import EventHook, StartFound
from .exceptions import MazeParseError
from .items import Inventory, Key
from .tiles import Door, Outside, Room, Tile, Wall

logger = logging.getLogger(__name__)

WALL_CHARS = {"+", "-", "|"}
VALID_CHARS = WALL_CHARS | {" ", "x", "/", "k"}

_LINE_BREAK = re.compile(r"\r?\n")


class TileGrid:
    """Fixed-size rectangle of tiles, indexed by (x, y) from the top-left."""

    def __init__(self, rows: Sequence[Sequence[Tile]]):
        self._rows: list[tuple[Tile, ...]] = [tuple(row) for row in rows]
        self.height: int = len(self._rows)
        self.width: int = len(self._rows[0]) if self._rows else 0

        if any(len(row) != self.width for row in self._rows):
            raise ValueError("All grid rows must have the same length")

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile_at(self, x: int, y: int) -> Tile:
        """Get tile at position. Out of bounds = Outside."""
        if not self.in_bounds(x, y):
            return Outside.SINGLETON
        return self._rows[y][x]

    def __getitem__(self, position: tuple[int, int]) -> Tile:
        x, y = position
        if not self.in_bounds(x, y):
            raise IndexError(f"Position ({x}, {y}) is outside the grid")
        return self._rows[y][x]

    @property
    def rows(self) -> list[tuple[Tile, ...]]:
        return list(self._rows)

    def __iter__(self) -> Iterator[tuple[int, int, Tile]]:
        """Yield (x, y, tile) in row-major order."""
        for y, row in enumerate(self._rows):
            for x, tile in enumerate(row):
                yield x, y, tile

    def __repr__(self) -> str:
        return f"TileGrid({self.width}x{self.height})"


class Keymaster:
    """
    Creates doors and key rooms, and puts each door's key in a key room.

    Use as a context manager: leaving the block without an error checks that
    every key found a room and every key room received a key.
    """

    def __init__(self) -> None:
        self._unplaced_keys: deque[Key] = deque()
        self._empty_key_rooms: deque[Room] = deque()
        self.doors_created = 0
        self.keys_placed = 0

    def new_door(self) -> Door:
        key = Key()
        door = Door(key)
        self.doors_created += 1
        self._unplaced_keys.append(key)
        self._place_keys()
        return door

    def new_key_room(self) -> Room:
        room = Room()
        self._empty_key_rooms.append(room)
        self._place_keys()
        return room

    def _place_keys(self) -> None:
        while self._unplaced_keys and self._empty_key_rooms:
            room = self._empty_key_rooms.popleft()
            room.inventory.move_item_from(Inventory(self._unplaced_keys.popleft()))
            self.keys_placed += 1

    def check_all_placed(self) -> None:
        """
        Raises:
            MazeParseError: If a door has no key room or a key room no door.
        """
        if self._unplaced_keys or self._empty_key_rooms:
            raise MazeParseError(
                f"Unmatched keys and doors: {len(self._unplaced_keys)} door(s) "
                f"without a key room, {len(self._empty_key_rooms)} key room(s) "
                f"without a door"
            )

    def __enter__(self) -> "Keymaster":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            self.check_all_placed()
        return False


class AsciiParser:
    """
    Parser from ASCII maps to tile grids.

    Every start marker raises a StartFound event on `start_found` as soon as
    it is scanned. The parser reports all of them; picking one is up to the
    listener.

    Example usage:
        parser = AsciiParser()
        parser.start_found.subscribe(lambda e: print(e.x, e.y))
        grid = parser.parse(maze_text)
    """

    def __init__(self) -> None:
        self.start_found: EventHook[StartFound] = EventHook()

    def parse(self, maze_text: str) -> TileGrid:
        """
        Parse maze text into a tile grid.

        Args:
            maze_text: Multi-line string representing the maze grid.

        Returns:
            TileGrid with one tile per character.

        Raises:
            MazeParseError: If rows differ in length, a character is not part
                of the format, or keys and doors do not pair up.
        """
        if not maze_text or not maze_text.strip("\r\n"):
            raise MazeParseError("Maze text is empty")

        lines = _LINE_BREAK.split(maze_text.strip("\r\n"))
        width = len(lines[0])
        rows: list[list[Tile]] = []

        with Keymaster() as keymaster:
            for y, line in enumerate(lines):
                if len(line) != width:
                    raise MazeParseError(
                        f"Invalid map: row {y} has length {len(line)}, "
                        f"expected {width}. All rows must have the same length."
                    )
                rows.append([self._build_tile(char, x, y, keymaster) for x, char in enumerate(line)])

        logger.debug(
            f"Parsed {width}x{len(rows)} grid with "
            f"{keymaster.doors_created} door(s) and {keymaster.keys_placed} key(s)"
        )
        return TileGrid(rows)

    def _build_tile(self, char: str, x: int, y: int, keymaster: Keymaster) -> Tile:
        if char in WALL_CHARS:
            return Wall.SINGLETON
        if char == " ":
            return Room()
        if char == "x":
            self.start_found.emit(StartFound(x, y))
            return Room()
        if char == "/":
            return keymaster.new_door()
        if char == "k":
            return keymaster.new_key_room()
        raise MazeParseError(
            f"Invalid character '{char}' at row {y}, column {x}. "
            f"Valid characters: {', '.join(repr(c) for c in sorted(VALID_CHARS))}"
        )
