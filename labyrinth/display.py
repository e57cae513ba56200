"""
Text rendering of a maze and its crawler.

Rendering is kept out of the core: a Display only consumes the grid and the
explorer's position/direction notifications.
"""

import sys
from typing import Optional, Protocol, TextIO

from labyrinth.core import Direction, TileGrid, tile_char


class Display(Protocol):
    """Anything that can show a maze and follow the crawler on it."""

    def show_labyrinth(self, grid: TileGrid, x: int, y: int, direction: Direction) -> None: ...

    def update_explorer_position(self, x: int, y: int, direction: Direction) -> None: ...

    def clear(self) -> None: ...


def render_grid(
    grid: TileGrid,
    crawler_position: Optional[tuple[int, int]] = None,
    direction: Direction = Direction.NORTH,
) -> str:
    """
    Generate ASCII visualization of a grid.

    Args:
        grid: The tile grid to draw.
        crawler_position: If provided, draws the crawler there as an arrow.
        direction: Direction of the arrow.

    Returns:
        ASCII string representation.
    """
    lines = []
    for y, row in enumerate(grid.rows):
        line = ""
        for x, tile in enumerate(row):
            if crawler_position == (x, y):
                line += direction.symbol
            else:
                line += tile_char(tile)
        lines.append(line)

    return "\n".join(lines)


class AsciiDisplay:
    """Display that writes a full frame to a text stream on every update."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream if stream is not None else sys.stdout
        self._grid: Optional[TileGrid] = None
        self.frames_drawn = 0

    def show_labyrinth(self, grid: TileGrid, x: int, y: int, direction: Direction) -> None:
        if grid is None:
            raise ValueError("Display requires a grid")
        self._grid = grid
        self._draw(x, y, direction)

    def update_explorer_position(self, x: int, y: int, direction: Direction) -> None:
        if self._grid is None:
            return
        self._draw(x, y, direction)

    def clear(self) -> None:
        self._grid = None

    def _draw(self, x: int, y: int, direction: Direction) -> None:
        self._stream.write(render_grid(self._grid, (x, y), direction) + "\n\n")
        self.frames_drawn += 1
