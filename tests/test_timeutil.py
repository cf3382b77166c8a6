import time

from philosophers.timeutil import current_time_ms, precise_sleep


def test_current_time_matches_wall_clock():
    reference = time.time() * 1000
    assert abs(current_time_ms() - reference) < 1000


def test_current_time_is_integer_and_non_decreasing():
    first = current_time_ms()
    second = current_time_ms()
    assert isinstance(first, int)
    assert second >= first


def test_precise_sleep_waits_at_least_requested():
    start = current_time_ms()
    result = precise_sleep(20)
    elapsed = current_time_ms() - start
    assert result is None
    assert elapsed >= 20


def test_precise_sleep_zero_returns_quickly():
    start = current_time_ms()
    result = precise_sleep(0)
    elapsed = current_time_ms() - start
    assert result is None
    assert 0 <= elapsed < 500


def test_precise_sleep_does_not_overshoot_wildly():
    start = current_time_ms()
    result = precise_sleep(30)
    elapsed = current_time_ms() - start
    assert result is None
    assert 30 <= elapsed < 1000