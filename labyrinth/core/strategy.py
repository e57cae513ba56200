"""Movement strategies: one turn-then-walk decision per call."""

import random
from typing import Optional, Protocol

from .crawler import CrawlerLike

NO_TURN = 0
TURN_RIGHT = 1
TURN_LEFT = 2


class MovementStrategy(Protocol):
    """A policy that makes the crawler act once."""

    def execute(self, crawler: CrawlerLike) -> None: ...


class RandomMovementStrategy:
    """
    Random walk: maybe turn, then always walk.

    Each call draws one of three equally likely outcomes: keep the heading,
    turn right, or turn left. A blocked walk raises out of execute().
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Args:
            rng: Random source with a randrange() method. Pass a seeded
                instance for reproducible runs.
        """
        self._rng = rng if rng is not None else random.Random()

    def execute(self, crawler: CrawlerLike) -> None:
        turn = self._rng.randrange(3)
        if turn == TURN_RIGHT:
            crawler.turn_right()
        elif turn == TURN_LEFT:
            crawler.turn_left()

        crawler.walk()
