"""A game engine paired with its clock: the unit a host drives."""

from __future__ import annotations

import logging

from smooth_snake.clock import GameClock, monotonic_ms
from smooth_snake.config import GameConfig
from smooth_snake.controls import InputEvent, InputMapper
from smooth_snake.engine import GameEngine, GameState, Snapshot

logger = logging.getLogger(__name__)


class GameSession:
    """Owns one engine, its clock, and its input mapper.

    Hosts call :meth:`frame` at their render rate and :meth:`handle` for each
    input event. At most one logical tick runs per frame.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        now_ms: float | None = None,
    ) -> None:
        self.engine = GameEngine(config)
        self.controls = InputMapper(self.engine)
        self.clock = GameClock(
            self.engine.tick_interval_ms,
            monotonic_ms() if now_ms is None else now_ms,
        )

    @property
    def config(self) -> GameConfig:
        return self.engine.config

    def frame(self, now_ms: float) -> Snapshot:
        """Run one render frame and return the snapshot to draw."""
        active = self.engine.state == GameState.RUNNING
        if self.clock.frame(now_ms, active=active):
            self.engine.step()
            self.clock.tick_interval_ms = float(self.engine.tick_interval_ms)
        return self.engine.snapshot(self.clock.fraction)

    def handle(self, event: InputEvent, now_ms: float) -> None:
        """Apply an input event, keeping the clock in step with the engine."""
        self.controls.handle(event)
        if event == InputEvent.RESTART:
            self.clock.reset(now_ms, self.engine.tick_interval_ms)
        elif event == InputEvent.TOGGLE_PAUSE:
            if self.engine.state == GameState.PAUSED:
                self.clock.hold(now_ms)
            else:
                self.clock.release(now_ms)
            logger.debug("Pause toggled; state is now %s.", self.engine.state.value)

    def run_ticks(self, ticks: int) -> Snapshot:
        """Advance by *ticks* logical ticks without consulting any clock."""
        for _ in range(ticks):
            if not self.engine.step():
                break
        self.clock.tick_interval_ms = float(self.engine.tick_interval_ms)
        return self.engine.snapshot(0.0)

    def snapshot(self) -> Snapshot:
        return self.engine.snapshot(self.clock.fraction)
