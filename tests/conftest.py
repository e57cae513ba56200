"""Pytest configuration and fixtures."""

from typing import Callable

import pytest

from labyrinth.core import Direction, Inventory, Maze, Room, Tile


class ScriptedRandom:
    """Random source that replays a fixed sequence of draws."""

    def __init__(self, sequence: list[int]):
        self._sequence = list(sequence)
        self._index = 0

    def randrange(self, stop: int) -> int:
        if self._index >= len(self._sequence):
            raise RuntimeError("Scripted random sequence exhausted")
        value = self._sequence[self._index]
        self._index += 1
        return value % stop


class RecordingCrawler:
    """Crawler double with a fixed facing tile that logs every call."""

    def __init__(self, facing_tile: Tile):
        self._facing_tile = facing_tile
        self.calls: list[str] = []

    x = 0
    y = 0
    direction = Direction.NORTH

    @property
    def facing_tile(self) -> Tile:
        return self._facing_tile

    def walk(self) -> Inventory:
        self.calls.append("walk")
        return Inventory()

    def turn_right(self) -> None:
        self.calls.append("right")

    def turn_left(self) -> None:
        self.calls.append("left")


class SlidingCrawler(RecordingCrawler):
    """Crawler double that moves one column east on every walk."""

    def __init__(self):
        super().__init__(Room())
        self.x = 0
        self.y = 0

    def walk(self) -> Inventory:
        self.calls.append("walk")
        self.x += 1
        return Inventory()


class CountingStrategy:
    """Strategy that only walks and counts how often it ran."""

    def __init__(self):
        self.execute_count = 0

    def execute(self, crawler) -> None:
        self.execute_count += 1
        crawler.walk()


@pytest.fixture
def scripted_random() -> Callable[[list[int]], ScriptedRandom]:
    """Factory for random sources replaying a fixed sequence."""
    return ScriptedRandom


@pytest.fixture
def recording_crawler() -> Callable[[Tile], RecordingCrawler]:
    """Factory for crawler doubles facing a given tile."""
    return RecordingCrawler


@pytest.fixture
def sliding_crawler() -> SlidingCrawler:
    return SlidingCrawler()


@pytest.fixture
def counting_strategy() -> CountingStrategy:
    return CountingStrategy()


@pytest.fixture
def new_crawler():
    """Build a maze from text and return its crawler."""

    def _new_crawler(maze_text: str):
        return Maze.from_text(maze_text).new_crawler()

    return _new_crawler
