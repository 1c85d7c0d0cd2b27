"""Game configuration constants."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path

from smooth_snake.snake import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Fixed-at-startup tuning for one game.

    Times are in milliseconds. Supports JSON serialization so a run can be
    reproduced from a file.
    """

    # Grid
    rows: int = 20
    cols: int = 28

    # Speed
    initial_tick_ms: int = 180
    tick_step_ms: int = 6
    min_tick_ms: int = 60
    frame_ms: int = 17

    # Scoring
    food_reward: int = 10

    # Starting snake
    initial_length: int = 3
    start_row: int | None = None
    start_col: int | None = None
    start_heading: Direction = Direction.RIGHT

    seed: int | None = None

    def __post_init__(self) -> None:
        if self.rows < 4 or self.cols < 4:
            raise ValueError("rows and cols must each be at least 4.")
        if self.min_tick_ms <= 0:
            raise ValueError("min_tick_ms must be positive.")
        if self.initial_tick_ms < self.min_tick_ms:
            raise ValueError("initial_tick_ms must be >= min_tick_ms.")
        if self.tick_step_ms < 0:
            raise ValueError("tick_step_ms must be >= 0.")
        if not 0 < self.frame_ms <= 1000:
            raise ValueError("frame_ms must be between 1 and 1000.")
        if self.food_reward < 0:
            raise ValueError("food_reward must be >= 0.")
        if self.initial_length < 1:
            raise ValueError("initial_length must be at least 1.")

        row, col = self.start_cell
        dr, dc = self.start_heading.value
        for seg in range(self.initial_length):
            r = row - dr * seg
            c = col - dc * seg
            if not (0 <= r < self.rows and 0 <= c < self.cols):
                raise ValueError(
                    "initial snake does not fit the configured grid; "
                    "move the start cell or reduce initial_length."
                )

    @property
    def start_cell(self) -> tuple[int, int]:
        """Head cell of a fresh snake."""
        row = self.rows // 2 if self.start_row is None else self.start_row
        col = self.cols // 2 if self.start_col is None else self.start_col
        return row, col

    def with_overrides(self, **overrides) -> GameConfig:
        """Return a copy with the non-``None`` overrides applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self

    def to_dict(self) -> dict:
        """Serialize to a plain dict (the heading becomes its name)."""
        data = asdict(self)
        data["start_heading"] = self.start_heading.name.lower()
        return data

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def from_dict(cls, raw: dict) -> GameConfig:
        """Build a config from parsed JSON, rejecting unknown keys and headings."""
        if not isinstance(raw, dict):
            raise ValueError("config must be a JSON object.")
        unknown = sorted(set(raw) - {f.name for f in fields(cls)})
        if unknown:
            raise ValueError(f"unknown config keys: {', '.join(unknown)}.")
        data = dict(raw)
        if "start_heading" in data:
            name = str(data["start_heading"]).upper()
            if name not in Direction.__members__:
                raise ValueError(
                    "start_heading must be one of up, down, left, right; "
                    f"got '{data['start_heading']}'."
                )
            data["start_heading"] = Direction[name]
        return cls(**data)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls.from_dict(json.loads(Path(path).read_text()))
