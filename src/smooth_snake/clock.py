"""Fixed-timestep game clock with render interpolation."""

from __future__ import annotations

import time


def monotonic_ms() -> float:
    """Current monotonic time in milliseconds."""
    return time.monotonic() * 1000.0


class GameClock:
    """Decouples the logical tick rate from the render frame rate.

    Hosts call :meth:`frame` once per render frame. It reports whether a
    logical tick is due and keeps :attr:`fraction`, the progress in [0, 1]
    between the last tick and the next one. The fraction is for rendering
    only and never feeds back into game logic.
    """

    def __init__(self, tick_interval_ms: float, now_ms: float) -> None:
        if tick_interval_ms <= 0:
            raise ValueError("tick_interval_ms must be positive.")
        self.tick_interval_ms = float(tick_interval_ms)
        self.last_tick_ms = float(now_ms)
        self.fraction = 0.0
        self._held_at: float | None = None

    @property
    def held(self) -> bool:
        return self._held_at is not None

    def frame(self, now_ms: float, active: bool = True) -> bool:
        """Advance the clock to *now_ms*. Returns True when a tick is due.

        With ``active=False`` (paused or game over) the tick-due branch is
        skipped.
        """
        if self._held_at is not None:
            return False

        elapsed = now_ms - self.last_tick_ms
        if active and elapsed >= self.tick_interval_ms:
            self.last_tick_ms = float(now_ms)
            self.fraction = 0.0
            return True

        self.fraction = min(1.0, max(0.0, elapsed / self.tick_interval_ms))
        return False

    def hold(self, now_ms: float) -> None:
        """Freeze the clock, e.g. while paused."""
        if self._held_at is None:
            self._held_at = float(now_ms)

    def release(self, now_ms: float) -> None:
        """Resume a held clock from the same in-between position."""
        if self._held_at is None:
            return
        self.last_tick_ms += now_ms - self._held_at
        self._held_at = None

    def reset(self, now_ms: float, tick_interval_ms: float | None = None) -> None:
        """Start a fresh tick period at *now_ms*."""
        if tick_interval_ms is not None:
            if tick_interval_ms <= 0:
                raise ValueError("tick_interval_ms must be positive.")
            self.tick_interval_ms = float(tick_interval_ms)
        self.last_tick_ms = float(now_ms)
        self.fraction = 0.0
        self._held_at = None
