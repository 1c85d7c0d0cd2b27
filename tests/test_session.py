"""Tests for GameSession: engine and clock driven together."""

import pytest

from smooth_snake.config import GameConfig
from smooth_snake.controls import InputEvent
from smooth_snake.engine import GameState
from smooth_snake.session import GameSession


def _session(**kwargs) -> GameSession:
    session = GameSession(GameConfig(seed=0, **kwargs), now_ms=0.0)
    engine = session.engine
    engine.food = (engine.grid.rows - 1, engine.grid.cols - 1)
    return session


class TestSessionFrames:
    def test_frames_interpolate_until_tick(self):
        session = _session()
        snap = session.frame(90.0)
        assert snap.tick == 0
        assert snap.fraction == pytest.approx(0.5)

        snap = session.frame(180.0)
        assert snap.tick == 1
        assert snap.fraction == 0.0

    def test_tick_rate_independent_of_frame_rate(self):
        coarse = _session()
        fine = _session()
        for now in range(0, 1801, 60):
            coarse.frame(float(now))
        for now in range(0, 1801, 5):
            fine.frame(float(now))
        assert coarse.snapshot().snake == fine.snapshot().snake
        assert coarse.engine.tick == fine.engine.tick == 10

    def test_interval_follows_engine(self):
        session = _session()
        engine = session.engine
        engine.food = engine.snake.next_head()
        session.frame(180.0)
        assert engine.score == 10
        assert session.clock.tick_interval_ms == 174


class TestSessionInput:
    def test_pause_freezes_and_resumes(self):
        session = _session()
        session.frame(60.0)
        session.handle(InputEvent.TOGGLE_PAUSE, 60.0)
        body = session.snapshot().snake

        snap = session.frame(5000.0)
        assert snap.state == GameState.PAUSED
        assert snap.snake == body
        assert snap.fraction == pytest.approx(1 / 3)

        session.handle(InputEvent.TOGGLE_PAUSE, 5000.0)
        assert session.frame(5060.0).tick == 0
        assert session.frame(5120.0).tick == 1

    def test_restart_resets_clock(self):
        session = _session(rows=5, cols=5)
        session.engine.food = (0, 0)
        session.run_ticks(3)
        assert session.engine.state == GameState.GAME_OVER

        session.handle(InputEvent.RESTART, 1000.0)
        assert session.engine.state == GameState.RUNNING
        assert session.clock.last_tick_ms == 1000.0
        assert session.clock.tick_interval_ms == 180
        assert session.frame(1100.0).tick == 0

    def test_game_over_suppresses_ticks(self):
        session = _session(rows=5, cols=5)
        session.engine.food = (0, 0)
        session.run_ticks(3)
        snap = session.frame(10_000.0)
        assert snap.state == GameState.GAME_OVER
        assert snap.tick == 3


class TestRunTicks:
    def test_run_ticks_stops_at_game_over(self):
        session = _session(rows=5, cols=5)
        session.engine.food = (0, 0)
        snap = session.run_ticks(10)
        assert snap.tick == 3
        assert snap.state == GameState.GAME_OVER
