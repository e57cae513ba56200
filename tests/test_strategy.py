"""Tests for movement strategies."""

import random

import pytest

from labyrinth.core import BlockedMoveError, Room, RandomMovementStrategy


class TestRandomMovementStrategy:
    """Tests for the random turn-then-walk policy."""

    def test_performs_scripted_movements(self, recording_crawler, scripted_random):
        """Test 1 = right, 2 = left, 0 = no turn, always followed by a walk."""
        crawler = recording_crawler(Room())
        strategy = RandomMovementStrategy(scripted_random([1, 2, 0, 1, 2]))

        for _ in range(5):
            strategy.execute(crawler)

        assert crawler.calls.count("walk") == 5
        assert crawler.calls.count("right") == 2
        assert crawler.calls.count("left") == 2
        assert crawler.calls == [
            "right", "walk",
            "left", "walk",
            "walk",
            "right", "walk",
            "left", "walk",
        ]

    def test_draws_one_value_per_execution(self, recording_crawler, scripted_random):
        strategy = RandomMovementStrategy(scripted_random([0]))
        strategy.execute(recording_crawler(Room()))

        with pytest.raises(RuntimeError, match="exhausted"):
            strategy.execute(recording_crawler(Room()))

    def test_blocked_walk_propagates(self, new_crawler, scripted_random):
        crawler = new_crawler("+--+\n| x|\n+--+")
        strategy = RandomMovementStrategy(scripted_random([0]))

        with pytest.raises(BlockedMoveError):
            strategy.execute(crawler)

    def test_default_random_source(self, recording_crawler):
        crawler = recording_crawler(Room())
        strategy = RandomMovementStrategy()

        strategy.execute(crawler)

        assert crawler.calls[-1] == "walk"
        assert len(crawler.calls) in (1, 2)

    def test_seeded_runs_are_reproducible(self, recording_crawler):
        first = recording_crawler(Room())
        second = recording_crawler(Room())
        first_strategy = RandomMovementStrategy(random.Random(42))
        second_strategy = RandomMovementStrategy(random.Random(42))

        for _ in range(20):
            first_strategy.execute(first)
            second_strategy.execute(second)

        assert first.calls == second.calls
