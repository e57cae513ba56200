"""
Maze aggregate: a parsed tile grid plus its start position.

Also provides helpers to load maze text from the filesystem and to validate
maze text without raising.
"""

import logging
from pathlib import Path
from typing import Optional

from .crawler import Crawler
from .direction import Direction
from .events import StartFound
from .exceptions import LabyrinthError, MazeParseError, MazeValidationError
from .maze_parser import AsciiParser, TileGrid

logger = logging.getLogger(__name__)


class Maze:
    """
    A maze built from ASCII text, and the factory for crawlers.

    When the text holds several start markers, the last one in row-major
    order is the start.

    Example usage:
        maze = Maze.from_text(maze_text)
        crawler = maze.new_crawler()
    """

    def __init__(self, maze_text: str, parser: AsciiParser):
        """
        Build a maze from text.

        Args:
            maze_text: Multi-line string representing the maze grid.
            parser: Parser that turns the text into tiles.

        Raises:
            ValueError: If no parser is given.
            MazeParseError: If the text is not a valid map.
            MazeValidationError: If the map has no start position.
        """
        if parser is None:
            raise ValueError("Maze requires a parser")

        self._parser = parser
        self._starts: list[tuple[int, int]] = []

        self._parser.start_found.subscribe(self._on_start_found)
        try:
            self.tiles: TileGrid = self._parser.parse(maze_text)
        finally:
            self._parser.start_found.unsubscribe(self._on_start_found)

        if not self._starts:
            raise MazeValidationError("Maze must have a start position (x)")
        if len(self._starts) > 1:
            logger.warning(
                f"Multiple start positions found {self._starts}, "
                f"using the last one at {self._starts[-1]}"
            )

        self.start: tuple[int, int] = self._starts[-1]
        logger.debug(f"Maze {self.width}x{self.height} ready, start at {self.start}")

    @classmethod
    def from_text(cls, maze_text: str) -> "Maze":
        """Build a maze from text with a fresh AsciiParser."""
        return cls(maze_text, AsciiParser())

    def _on_start_found(self, event: StartFound) -> None:
        self._starts.append((event.x, event.y))

    @property
    def width(self) -> int:
        return self.tiles.width

    @property
    def height(self) -> int:
        return self.tiles.height

    @property
    def start_candidates(self) -> list[tuple[int, int]]:
        """Every start marker reported while parsing, in scan order."""
        return list(self._starts)

    def new_crawler(self) -> Crawler:
        """Create a crawler at the start position, facing north."""
        x, y = self.start
        return Crawler(self.tiles, x, y, Direction.NORTH)


def load_maze_file(file_path: Path | str, parser: Optional[AsciiParser] = None) -> Maze:
    """
    Load a maze file from the filesystem.

    Args:
        file_path: Path to the maze file.
        parser: Optional parser. A fresh AsciiParser is used when omitted.

    Returns:
        The constructed Maze.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        MazeParseError: If the path is not a readable file or not a valid map.
        MazeValidationError: If the map has no start position.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Maze file not found: {file_path}")

    if not file_path.is_file():
        raise MazeParseError(f"Path is not a file: {file_path}")

    try:
        maze_text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MazeParseError(f"Failed to read maze file: {e}") from e

    logger.info(f"Loading maze from {file_path}")
    if parser is None:
        return Maze.from_text(maze_text)
    return Maze(maze_text, parser)


def validate_maze_text(maze_text: str) -> tuple[bool, Optional[str]]:
    """
    Validate maze text without raising exceptions.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid.
    """
    try:
        Maze.from_text(maze_text)
        return True, None
    except LabyrinthError as e:
        return False, str(e)
