"""Tick-based game state machine composing grid, snake, and food logic."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

import numpy as np

from smooth_snake.config import GameConfig
from smooth_snake.food import FoodSpawner
from smooth_snake.grid import Grid
from smooth_snake.snake import Cell, Direction, Snake

logger = logging.getLogger(__name__)


class GameState(str, enum.Enum):
    """Lifecycle states of a single game."""

    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class GameOverReason(str, enum.Enum):
    """Why a game ended."""

    WALL = "wall"
    SELF = "self"
    BOARD_FULL = "board_full"


@dataclass(frozen=True)
class Snapshot:
    """Immutable copy of simulation state handed to renderers."""

    snake: tuple[Cell, ...]
    previous_snake: tuple[Cell, ...]
    food: Cell | None
    score: int
    high_score: int
    state: GameState
    reason: GameOverReason | None
    fraction: float
    tick: int
    tick_interval_ms: int
    rows: int
    cols: int

    def interpolated(self) -> list[tuple[float, float]]:
        """Blend each segment from its previous cell toward its current one.

        Segments with no previous counterpart (the one just grown) are drawn
        at their current cell.
        """
        t = self.fraction
        positions: list[tuple[float, float]] = []
        for i, (row, col) in enumerate(self.snake):
            prev_row, prev_col = (
                self.previous_snake[i] if i < len(self.previous_snake) else (row, col)
            )
            positions.append(
                (prev_row + (row - prev_row) * t, prev_col + (col - prev_col) * t),
            )
        return positions

    def to_dict(self) -> dict:
        """Return a JSON-serializable view."""
        return {
            "snake": [list(c) for c in self.snake],
            "previous_snake": [list(c) for c in self.previous_snake],
            "food": list(self.food) if self.food is not None else None,
            "score": self.score,
            "high_score": self.high_score,
            "state": self.state.value,
            "reason": self.reason.value if self.reason is not None else None,
            "fraction": self.fraction,
            "tick": self.tick,
            "tick_interval_ms": self.tick_interval_ms,
            "grid": {"rows": self.rows, "cols": self.cols},
        }


class GameEngine:
    """Single-snake game state machine.

    The engine is the only writer of the snake, food, score, high score,
    tick interval, and direction. Each call to :meth:`step` performs one
    logical tick; renderers read :meth:`snapshot` copies.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config or GameConfig()
        self.grid = Grid(rows=self.config.rows, cols=self.config.cols)
        self.rng = np.random.default_rng(self.config.seed)
        self.food_spawner = FoodSpawner(self.grid, rng=self.rng)
        self.high_score = 0
        self._reset()

    def _reset(self) -> None:
        row, col = self.config.start_cell
        self.snake = Snake(
            row, col, self.config.start_heading, length=self.config.initial_length,
        )
        self.previous_cells = self.snake.cells()
        self.pending_direction = self.snake.heading
        self.score = 0
        self.tick = 0
        self.tick_interval_ms = self.config.initial_tick_ms
        self.state = GameState.RUNNING
        self.reason: GameOverReason | None = None
        self.food = self.food_spawner.spawn(self.snake.body)
        if self.food is None:
            self._end(GameOverReason.BOARD_FULL)

    @property
    def heading(self) -> Direction:
        return self.snake.heading

    def set_direction(self, direction: Direction) -> None:
        """Buffer a turn for the next tick, ignoring 180° reversals."""
        if self.state == GameState.GAME_OVER:
            return
        if direction == self.snake.heading.opposite:
            return
        self.pending_direction = direction

    def toggle_pause(self) -> None:
        """Flip between running and paused. No effect once the game is over."""
        if self.state == GameState.RUNNING:
            self.state = GameState.PAUSED
        elif self.state == GameState.PAUSED:
            self.state = GameState.RUNNING

    def restart(self) -> None:
        """Start a fresh game, keeping the high score."""
        self._reset()
        logger.info("Game restarted (high score %d).", self.high_score)

    def step(self) -> bool:
        """Advance the game by one tick.

        Returns True if a tick was executed; paused and finished games are
        left untouched.
        """
        if self.state != GameState.RUNNING:
            return False

        self.tick += 1
        self.previous_cells = self.snake.cells()
        self.snake.heading = self.pending_direction

        new_head = self.snake.next_head()

        # --- boundary check ---
        if not self.grid.in_bounds(new_head):
            self._end(GameOverReason.WALL)
            return True

        # --- self-collision check ---
        # The tail cell is vacated this tick unless the snake grows.
        eating = new_head == self.food
        if self.snake.contains(new_head, include_tail=eating):
            self._end(GameOverReason.SELF)
            return True

        # --- move ---
        self.snake.advance(new_head)
        if eating:
            self.snake.grow()
            self._eat()
        else:
            self.snake.shrink()
        return True

    def _eat(self) -> None:
        self.score += self.config.food_reward
        self.high_score = max(self.high_score, self.score)
        self.tick_interval_ms = max(
            self.config.min_tick_ms,
            self.tick_interval_ms - self.config.tick_step_ms,
        )
        logger.debug(
            "Food eaten at tick %d; score %d, interval %d ms.",
            self.tick, self.score, self.tick_interval_ms,
        )
        self.food = self.food_spawner.spawn(self.snake.body)
        if self.food is None:
            self._end(GameOverReason.BOARD_FULL)

    def _end(self, reason: GameOverReason) -> None:
        self.state = GameState.GAME_OVER
        self.reason = reason
        logger.info(
            "Game over (%s) at tick %d with score %d.",
            reason.value, self.tick, self.score,
        )

    def snapshot(self, fraction: float = 0.0) -> Snapshot:
        """Return an immutable copy of the current state."""
        return Snapshot(
            snake=self.snake.cells(),
            previous_snake=self.previous_cells,
            food=self.food,
            score=self.score,
            high_score=self.high_score,
            state=self.state,
            reason=self.reason,
            fraction=min(1.0, max(0.0, fraction)),
            tick=self.tick,
            tick_interval_ms=self.tick_interval_ms,
            rows=self.grid.rows,
            cols=self.grid.cols,
        )
