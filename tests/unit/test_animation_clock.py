"""Tests for AnimationClock timing."""
import math

import pytest

from animation.clock import AnimationClock, ClockState


@pytest.fixture
def clock():
    clock = AnimationClock()
    clock.start()
    return clock


def test_initial_state():
    clock = AnimationClock()
    assert clock.state is ClockState.UNSTARTED
    assert clock.phase == 0.0
    assert clock.speed == 1.0
    assert clock.last_timestamp_ms is None


def test_unstarted_clock_ignores_ticks():
    clock = AnimationClock()
    assert clock.advance(1000) == 0.0
    assert clock.phase == 0.0


def test_first_tick_only_sets_baseline(clock):
    assert clock.state is ClockState.RUNNING
    assert clock.advance(5000) == 0.0
    assert clock.phase == 0.0
    assert clock.last_timestamp_ms == 5000


def test_phase_advances_by_elapsed_seconds(clock):
    clock.advance(1000)
    assert clock.advance(1016) == pytest.approx(0.016)
    assert clock.phase == pytest.approx(0.016)
    clock.advance(1036)
    assert clock.phase == pytest.approx(0.036)


def test_large_gap_is_clamped(clock):
    clock.set_speed(2.0)
    clock.advance(0)
    assert clock.advance(2000) == pytest.approx(0.05)
    assert clock.phase == pytest.approx(0.1)


def test_speed_scales_phase(clock):
    clock.set_speed(3.0)
    clock.advance(0)
    clock.advance(10)
    assert clock.phase == pytest.approx(0.03)


def test_zero_speed_freezes_phase(clock):
    clock.set_speed(0)
    clock.advance(0)
    clock.advance(20)
    clock.advance(40)
    assert clock.phase == 0.0
    assert clock.state is ClockState.RUNNING


def test_backwards_timestamp_does_not_rewind(clock):
    clock.advance(1000)
    clock.advance(1020)
    phase = clock.phase
    clock.advance(900)
    assert clock.phase == phase
    clock.advance(910)
    assert clock.phase == pytest.approx(phase + 0.01)


def test_stop_resets_and_ignores_ticks(clock):
    clock.advance(0)
    clock.advance(30)
    clock.stop()
    assert clock.state is ClockState.STOPPED
    assert clock.phase == 0.0
    assert clock.last_timestamp_ms is None
    assert clock.advance(60) == 0.0
    assert clock.phase == 0.0


def test_restart_resets_phase(clock):
    clock.advance(0)
    clock.advance(40)
    clock.start()
    assert clock.phase == 0.0
    assert clock.advance(100) == 0.0


@pytest.mark.parametrize("value,expected", [
    (-5, 0.0),
    (100, 10.0),
    (2.5, 2.5),
    ("2.5", 2.5),
    (0, 0.0),
    (10, 10.0),
])
def test_set_speed_clamps(value, expected):
    clock = AnimationClock()
    assert clock.set_speed(value) is True
    assert clock.speed == expected


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, "fast", None, object(), True, 10 ** 400])
def test_set_speed_ignores_non_numbers(value):
    clock = AnimationClock(speed=4.0)
    assert clock.set_speed(value) is False
    assert clock.speed == 4.0
