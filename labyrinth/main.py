"""Labyrinth Crawler - console runner."""

import logging
import random
import time
from typing import Optional

from labyrinth.config import Settings, get_settings
from labyrinth.core import CrawlingEvent, Explorer, Maze, RandomMovementStrategy, load_maze_file
from labyrinth.display import AsciiDisplay, render_grid
from labyrinth.services.history_service import (
    ExplorationRecorder,
    format_history,
    format_statistics,
)

logger = logging.getLogger("labyrinth")

SAMPLE_MAZE = """
+--+--------+
|  /        |
|  +--+--+  |
|     |k    |
+--+  |  +--+
   |k  x    |
+  +-------/|
|           |
+-----------+
""".strip("\n")


def configure_logging(settings: Settings) -> None:
    """Configure logging for the console runner."""
    logging.basicConfig(
        level=settings.effective_log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def run(settings: Settings, display: Optional[AsciiDisplay] = None) -> bool:
    """
    Build the configured maze and let an explorer try to get out.

    Returns:
        True if the exit was found.
    """
    if settings.maze_file is not None:
        maze = load_maze_file(settings.maze_file)
    else:
        maze = Maze.from_text(SAMPLE_MAZE)

    crawler = maze.new_crawler()
    strategy = RandomMovementStrategy(random.Random(settings.random_seed))
    explorer = Explorer(crawler, strategy)
    recorder = ExplorationRecorder(explorer)

    if display is not None:
        display.show_labyrinth(maze.tiles, crawler.x, crawler.y, crawler.direction)

        def redraw(event: CrawlingEvent) -> None:
            display.update_explorer_position(event.x, event.y, event.direction)
            if settings.step_delay_ms:
                time.sleep(settings.step_delay_ms / 1000)

        explorer.position_changed.subscribe(redraw)
        explorer.direction_changed.subscribe(redraw)

    logger.info(
        f"Exploring {maze.width}x{maze.height} maze from {maze.start} "
        f"with up to {settings.max_moves} moves"
    )
    found = explorer.get_out(max_moves=settings.max_moves)
    report = recorder.build_report(found)

    print(render_grid(maze.tiles, (crawler.x, crawler.y), crawler.direction))
    print()
    print(format_statistics(report))
    if settings.show_history:
        print()
        print(format_history(report))
    return found


def main() -> int:
    settings = get_settings()
    configure_logging(settings)
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    found = run(settings, AsciiDisplay())
    return 0 if found else 1


if __name__ == "__main__":
    raise SystemExit(main())
