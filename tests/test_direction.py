"""Tests for compass directions."""

import pytest

from labyrinth.core import Direction


class TestDirectionDeltas:
    """Tests for direction unit vectors."""

    @pytest.mark.parametrize(
        "direction, expected",
        [
            (Direction.NORTH, (0, -1)),
            (Direction.EAST, (1, 0)),
            (Direction.SOUTH, (0, 1)),
            (Direction.WEST, (-1, 0)),
        ],
    )
    def test_delta(self, direction, expected):
        """Test each direction's (dx, dy)."""
        assert direction.delta == expected
        assert (direction.delta_x, direction.delta_y) == expected

    def test_symbols(self):
        """Test arrow characters used for drawing."""
        assert [d.symbol for d in Direction] == ["^", ">", "v", "<"]


class TestDirectionRotation:
    """Tests for quarter turns."""

    def test_turn_right_cycle(self):
        """Test clockwise order north, east, south, west."""
        assert Direction.NORTH.turn_right() == Direction.EAST
        assert Direction.EAST.turn_right() == Direction.SOUTH
        assert Direction.SOUTH.turn_right() == Direction.WEST
        assert Direction.WEST.turn_right() == Direction.NORTH

    def test_turn_left_cycle(self):
        """Test counter-clockwise order."""
        assert Direction.NORTH.turn_left() == Direction.WEST
        assert Direction.WEST.turn_left() == Direction.SOUTH
        assert Direction.SOUTH.turn_left() == Direction.EAST
        assert Direction.EAST.turn_left() == Direction.NORTH

    @pytest.mark.parametrize("direction", list(Direction))
    def test_four_turns_return_to_start(self, direction):
        """Test that four turns the same way come back around."""
        right = direction
        left = direction
        for _ in range(4):
            right = right.turn_right()
            left = left.turn_left()

        assert right == direction
        assert left == direction

    @pytest.mark.parametrize("direction", list(Direction))
    def test_opposite_turns_cancel(self, direction):
        """Test right then left, and left then right."""
        assert direction.turn_right().turn_left() == direction
        assert direction.turn_left().turn_right() == direction

    def test_turning_returns_new_value(self):
        """Test that directions are values."""
        direction = Direction.NORTH
        turned = direction.turn_right()

        assert direction == Direction.NORTH
        assert turned == Direction.EAST
