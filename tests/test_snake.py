"""Tests for the Snake module."""

import pytest

from smooth_snake.snake import Direction, Snake


class TestDirection:
    def test_opposites(self):
        assert Direction.UP.opposite == Direction.DOWN
        assert Direction.DOWN.opposite == Direction.UP
        assert Direction.LEFT.opposite == Direction.RIGHT
        assert Direction.RIGHT.opposite == Direction.LEFT

    def test_step(self):
        assert Direction.UP.step((5, 5)) == (4, 5)
        assert Direction.DOWN.step((5, 5)) == (6, 5)
        assert Direction.LEFT.step((5, 5)) == (5, 4)
        assert Direction.RIGHT.step((5, 5)) == (5, 6)


class TestSnakeInit:
    def test_default_creation(self):
        snake = Snake(5, 5)
        assert snake.head == (5, 5)
        assert len(snake) == 3
        assert snake.heading == Direction.RIGHT

    def test_body_extends_opposite_to_heading(self):
        snake = Snake(2, 2, Direction.RIGHT, length=3)
        assert snake.cells() == ((2, 2), (2, 1), (2, 0))

    def test_body_extends_up(self):
        snake = Snake(5, 5, Direction.UP, length=3)
        assert snake.cells() == ((5, 5), (6, 5), (7, 5))

    def test_minimum_length(self):
        with pytest.raises(ValueError, match="at least 1"):
            Snake(0, 0, length=0)


class TestSnakeMovement:
    def test_next_head_uses_heading(self):
        snake = Snake(5, 5, Direction.RIGHT)
        assert snake.next_head() == (5, 6)
        assert snake.next_head(Direction.UP) == (4, 5)

    def test_advance_then_shrink_keeps_length(self):
        snake = Snake(5, 5, Direction.RIGHT, length=3)
        snake.advance((5, 6))
        vacated = snake.shrink()
        assert snake.head == (5, 6)
        assert snake.length == 3
        assert vacated == (5, 3)

    def test_advance_then_grow_adds_segment(self):
        snake = Snake(5, 5, Direction.RIGHT, length=3)
        snake.advance((5, 6))
        snake.grow()
        assert snake.head == (5, 6)
        assert snake.length == 4
        assert snake.tail == (5, 3)


class TestSnakeContains:
    def test_contains(self):
        snake = Snake(5, 5, Direction.RIGHT, length=3)
        assert snake.contains((5, 5))
        assert snake.contains((5, 3))
        assert not snake.contains((0, 0))

    def test_contains_without_tail(self):
        snake = Snake(5, 5, Direction.RIGHT, length=3)
        assert not snake.contains((5, 3), include_tail=False)
        assert snake.contains((5, 4), include_tail=False)

    def test_cells_is_a_copy(self):
        snake = Snake(5, 5, Direction.RIGHT, length=2)
        cells = snake.cells()
        snake.advance((5, 6))
        assert cells == ((5, 5), (5, 4))
