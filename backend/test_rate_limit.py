"""Tests for the sliding-window rate limiter"""

import pytest

from graphboard.canvas.rate_limit import RateLimiter


class FakeClock:
    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


def make_limiter(max_calls, period):
    clock = FakeClock()
    return RateLimiter(max_calls, period, clock=clock, sleep=clock.sleep), clock


def test_calls_under_limit_do_not_wait():
    limiter, clock = make_limiter(3, 10)

    for _ in range(3):
        limiter.acquire()

    assert clock.sleeps == []
    assert len(limiter) == 3


def test_call_over_limit_waits_for_window():
    limiter, clock = make_limiter(2, 10)
    limiter.acquire()
    clock.now = 4
    limiter.acquire()

    limiter.acquire()

    assert clock.sleeps == [6.0]
    assert clock.now == 10
    assert len(limiter) == 2


def test_window_slides():
    limiter, clock = make_limiter(1, 5)
    limiter.acquire()
    clock.now = 5

    assert limiter.wait_time() == 0
    limiter.acquire()
    assert clock.sleeps == []


def test_separate_limiters_do_not_share_state():
    first, _ = make_limiter(1, 60)
    second, _ = make_limiter(1, 60)
    first.acquire()

    assert second.wait_time() == 0


@pytest.mark.parametrize("max_calls, period", [(0, 1), (1, 0)])
def test_invalid_configuration(max_calls, period):
    with pytest.raises(ValueError):
        RateLimiter(max_calls, period)
