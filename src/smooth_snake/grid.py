"""Fixed-size grid model for the snake game."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import numpy as np

from smooth_snake.snake import Cell


class Grid:
    """Fixed rows x cols coordinate space.

    Coordinates use (row, col) ordering consistent with NumPy indexing.
    The grid holds no game state; it only answers geometric questions.
    """

    def __init__(self, rows: int = 20, cols: int = 28) -> None:
        if rows < 4 or cols < 4:
            raise ValueError("Grid dimensions must be at least 4×4.")
        self.rows = rows
        self.cols = cols

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self.rows * self.cols

    def in_bounds(self, cell: Cell) -> bool:
        """Check whether a coordinate lies within the grid."""
        row, col = cell
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cells(self) -> Iterator[Cell]:
        """Iterate over every cell in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col

    def free_cells(self, excluded: Iterable[Cell]) -> list[Cell]:
        """Return all in-bounds cells not listed in *excluded*."""
        occupied = np.zeros((self.rows, self.cols), dtype=bool)
        for cell in excluded:
            if self.in_bounds(cell):
                occupied[cell] = True
        rows, cols = np.where(~occupied)
        return list(zip(rows.tolist(), cols.tolist(), strict=True))
