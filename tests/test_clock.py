"""Tests for the GameClock module."""

import pytest

from smooth_snake.clock import GameClock


class TestClockInit:
    def test_starts_at_zero_fraction(self):
        clock = GameClock(180, now_ms=1000)
        assert clock.fraction == 0.0
        assert clock.last_tick_ms == 1000

    def test_rejects_non_positive_interval(self):
        with pytest.raises(ValueError, match="positive"):
            GameClock(0, now_ms=0)


class TestClockFrames:
    def test_fraction_grows_between_ticks(self):
        clock = GameClock(100, now_ms=0)
        fractions = []
        for now in (10, 30, 50, 90):
            assert not clock.frame(now)
            fractions.append(clock.fraction)
        assert fractions == pytest.approx([0.1, 0.3, 0.5, 0.9])

    def test_tick_due_resets(self):
        clock = GameClock(100, now_ms=0)
        clock.frame(60)
        assert clock.frame(100)
        assert clock.fraction == 0.0
        assert clock.last_tick_ms == 100

    def test_late_frame_fires_single_tick(self):
        clock = GameClock(100, now_ms=0)
        assert clock.frame(350)
        assert not clock.frame(360)
        assert clock.fraction == pytest.approx(0.1)

    def test_inactive_skips_tick_and_clamps(self):
        clock = GameClock(100, now_ms=0)
        assert not clock.frame(250, active=False)
        assert clock.fraction == 1.0
        assert clock.last_tick_ms == 0

    def test_backwards_time_clamps_to_zero(self):
        clock = GameClock(100, now_ms=500)
        clock.frame(400)
        assert clock.fraction == 0.0


class TestClockHold:
    def test_hold_freezes_fraction(self):
        clock = GameClock(100, now_ms=0)
        clock.frame(40)
        clock.hold(40)
        assert clock.held
        assert not clock.frame(500)
        assert clock.fraction == pytest.approx(0.4)

    def test_release_continues_from_same_point(self):
        clock = GameClock(100, now_ms=0)
        clock.frame(40)
        clock.hold(40)
        clock.release(1040)
        assert not clock.held
        assert not clock.frame(1050)
        assert clock.fraction == pytest.approx(0.5)
        assert clock.frame(1100)

    def test_release_without_hold_is_noop(self):
        clock = GameClock(100, now_ms=0)
        clock.release(50)
        assert clock.last_tick_ms == 0

    def test_reset(self):
        clock = GameClock(100, now_ms=0)
        clock.hold(10)
        clock.reset(500, 80)
        assert not clock.held
        assert clock.tick_interval_ms == 80
        assert clock.last_tick_ms == 500
        assert clock.frame(580)
