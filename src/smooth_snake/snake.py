"""Snake representation and movement primitives."""

from __future__ import annotations

import enum
from collections import deque

Cell = tuple[int, int]


class Direction(enum.Enum):
    """Cardinal movement directions with (row_delta, col_delta) values."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def opposite(self) -> Direction:
        """Return the direction that would reverse this one."""
        return _OPPOSITES[self]

    def step(self, cell: Cell) -> Cell:
        """Return *cell* moved one square in this direction."""
        dr, dc = self.value
        return cell[0] + dr, cell[1] + dc


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake represented as an ordered deque of (row, col) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. The snake is a passive
    container: bounds and collision rules are enforced by the engine.
    """

    def __init__(
        self,
        start_row: int,
        start_col: int,
        heading: Direction = Direction.RIGHT,
        length: int = 3,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        dr, dc = heading.value
        self.body: deque[Cell] = deque()
        for i in range(length):
            self.body.append((start_row - dr * i, start_col - dc * i))
        self.heading = heading

    @property
    def head(self) -> Cell:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> Cell:
        """Return the tail coordinate."""
        return self.body[-1]

    @property
    def length(self) -> int:
        return len(self.body)

    def __len__(self) -> int:
        return len(self.body)

    def next_head(self, direction: Direction | None = None) -> Cell:
        """Compute the next head position without moving."""
        return (direction or self.heading).step(self.head)

    def advance(self, new_head: Cell) -> None:
        """Prepend *new_head*. The caller has already validated the move."""
        self.body.appendleft(new_head)

    def grow(self) -> None:
        """Keep the tail for this tick."""

    def shrink(self) -> Cell:
        """Drop the tail and return the vacated cell."""
        return self.body.pop()

    def contains(self, cell: Cell, include_tail: bool = True) -> bool:
        """Check whether the snake occupies *cell*.

        With ``include_tail=False`` the current tail is ignored, since it is
        vacated on a move that does not grow.
        """
        if include_tail:
            return cell in self.body
        return any(seg == cell for seg in list(self.body)[:-1])

    def cells(self) -> tuple[Cell, ...]:
        """Return an immutable copy of the body, head first."""
        return tuple(self.body)
