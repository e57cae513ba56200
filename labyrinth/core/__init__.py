# Core module
from .crawler import Crawler, CrawlerLike
from .direction import Direction
from .events import CrawlingEvent, EventHook, StartFound
from .exceptions import (
    BlockedMoveError,
    LabyrinthError,
    MazeParseError,
    MazeValidationError,
)
from .explorer import Explorer, ExplorerState
from .items import Inventory, Key
from .maze import Maze, load_maze_file, validate_maze_text
from .maze_parser import AsciiParser, Keymaster, TileGrid
from .strategy import MovementStrategy, RandomMovementStrategy
from .tiles import Door, Outside, Room, Tile, TileKind, Wall, tile_char

__all__ = [
    "AsciiParser",
    "BlockedMoveError",
    "Crawler",
    "CrawlerLike",
    "CrawlingEvent",
    "Direction",
    "Door",
    "EventHook",
    "Explorer",
    "ExplorerState",
    "Inventory",
    "Key",
    "Keymaster",
    "LabyrinthError",
    "Maze",
    "MazeParseError",
    "MazeValidationError",
    "MovementStrategy",
    "Outside",
    "RandomMovementStrategy",
    "Room",
    "StartFound",
    "Tile",
    "TileGrid",
    "TileKind",
    "Wall",
    "load_maze_file",
    "tile_char",
    "validate_maze_text",
]
