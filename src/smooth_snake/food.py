"""Food spawning logic."""

from __future__ import annotations

import logging
from collections.abc import Collection
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from smooth_snake.grid import Grid
    from smooth_snake.snake import Cell

logger = logging.getLogger(__name__)

# Below this share of free cells, sample from the free list directly.
_SPARSE_FREE_RATIO = 0.25


class FoodSpawner:
    """Picks a uniformly random unoccupied cell for the next food item.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()

    def spawn(self, excluded: Collection[Cell]) -> Cell | None:
        """Return a random cell not in *excluded*, or ``None`` if the board is full."""
        taken = set(excluded)
        free = self.grid.size - sum(1 for cell in taken if self.grid.in_bounds(cell))
        if free <= 0:
            logger.warning("No free cells available for food spawning.")
            return None

        if free < self.grid.size * _SPARSE_FREE_RATIO:
            candidates = self.grid.free_cells(taken)
            return candidates[int(self.rng.integers(len(candidates)))]

        while True:
            cell = (
                int(self.rng.integers(self.grid.rows)),
                int(self.rng.integers(self.grid.cols)),
            )
            if cell not in taken:
                return cell
