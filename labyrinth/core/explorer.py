"""
Explorer: drives a crawler with a movement strategy until it faces the
outside or runs out of moves.

Keys picked up on the way are kept in a bag. Whenever the crawler faces a
locked door, the explorer tries the keys it already carries; it never goes
looking for a key on purpose.
"""

import logging
from enum import Enum
from typing import Optional

from .crawler import CrawlerLike
from .direction import Direction
from .events import CrawlingEvent, EventHook
from .exceptions import BlockedMoveError
from .items import Inventory
from .strategy import MovementStrategy, RandomMovementStrategy
from .tiles import Door, Outside, Tile

logger = logging.getLogger(__name__)


class ExplorerState(Enum):
    """Where an exploration run stands."""
    EXPLORING = "exploring"
    EXIT_FOUND = "exit_found"
    BUDGET_EXHAUSTED = "budget_exhausted"


class _CollectingCrawler:
    """Crawler wrapper that bags every item picked up by a walk."""

    def __init__(self, crawler: CrawlerLike, bag: list[Inventory]):
        self._crawler = crawler
        self._bag = bag

    @property
    def x(self) -> int:
        return self._crawler.x

    @property
    def y(self) -> int:
        return self._crawler.y

    @property
    def direction(self) -> Direction:
        return self._crawler.direction

    @property
    def facing_tile(self) -> Tile:
        return self._crawler.facing_tile

    def turn_left(self) -> None:
        self._crawler.turn_left()

    def turn_right(self) -> None:
        self._crawler.turn_right()

    def walk(self) -> Inventory:
        inventory = self._crawler.walk()
        if inventory.has_item:
            logger.debug(
                f"Picked up {inventory.item!r} at ({self._crawler.x}, {self._crawler.y})"
            )
            self._bag.append(inventory)
        return inventory


class Explorer:
    """
    Tries to get a crawler out of its maze.

    Example usage:
        explorer = Explorer(maze.new_crawler())
        explorer.position_changed.subscribe(lambda e: print(e.x, e.y))
        found = explorer.get_out(max_moves=1000)
    """

    def __init__(self, crawler: CrawlerLike, strategy: Optional[MovementStrategy] = None):
        """
        Args:
            crawler: The crawler to drive.
            strategy: Movement policy. Defaults to RandomMovementStrategy.

        Raises:
            ValueError: If no crawler is given.
        """
        if crawler is None:
            raise ValueError("Explorer requires a crawler")

        self._crawler = crawler
        self._strategy = strategy if strategy is not None else RandomMovementStrategy()
        self._bag: list[Inventory] = []

        self.position_changed: EventHook[CrawlingEvent] = EventHook()
        self.direction_changed: EventHook[CrawlingEvent] = EventHook()

        self.state = ExplorerState.EXPLORING
        self.moves_made = 0

    @property
    def crawler(self) -> CrawlerLike:
        return self._crawler

    @property
    def bag(self) -> list[Inventory]:
        """Inventories picked up so far, oldest first."""
        return list(self._bag)

    def get_out(self, max_moves: int) -> bool:
        """
        Run the strategy until the crawler faces the outside.

        Every iteration consumes one move, including those where the walk
        was blocked.

        Args:
            max_moves: Maximum number of strategy executions.

        Returns:
            True if the crawler faces the outside, False if max_moves ran out.

        Raises:
            ValueError: If max_moves is negative.
        """
        if max_moves < 0:
            raise ValueError(f"max_moves must not be negative, got {max_moves}")

        self.state = ExplorerState.EXPLORING
        walker = _CollectingCrawler(self._crawler, self._bag)

        for move in range(max_moves):
            position = (self._crawler.x, self._crawler.y)
            direction = self._crawler.direction

            self._unlock_facing_door()

            try:
                self._strategy.execute(walker)
            except BlockedMoveError as e:
                logger.debug(f"Move {move + 1}: {e}")
            self.moves_made += 1

            if (self._crawler.x, self._crawler.y) != position:
                self.position_changed.emit(self._current_event())
            if self._crawler.direction != direction:
                self.direction_changed.emit(self._current_event())

            if isinstance(self._crawler.facing_tile, Outside):
                self.state = ExplorerState.EXIT_FOUND
                logger.info(
                    f"Exit found after {move + 1} move(s) at "
                    f"({self._crawler.x}, {self._crawler.y}) facing "
                    f"{self._crawler.direction.value}"
                )
                return True

        self.state = ExplorerState.BUDGET_EXHAUSTED
        logger.info(f"No exit found within {max_moves} move(s)")
        return False

    def _unlock_facing_door(self) -> None:
        facing = self._crawler.facing_tile
        if not isinstance(facing, Door) or not facing.is_locked:
            return

        for slot in self._bag:
            if slot.has_item and facing.open(slot):
                self._bag.remove(slot)
                logger.info(
                    f"Unlocked door in front of ({self._crawler.x}, {self._crawler.y})"
                )
                return

    def _current_event(self) -> CrawlingEvent:
        return CrawlingEvent(self._crawler.x, self._crawler.y, self._crawler.direction)
