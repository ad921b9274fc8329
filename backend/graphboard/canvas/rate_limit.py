import time
from collections import deque
from typing import Callable, Deque


class RateLimiter:
    """
    Sliding-window limiter: at most max_calls acquisitions in any window
    of `period` seconds. State lives on the instance; share one object
    between every client that talks to the same board.
    """

    def __init__(
        self,
        max_calls: int = 900,
        period: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if max_calls <= 0:
            raise ValueError("max_calls must be positive")
        if period <= 0:
            raise ValueError("period must be positive")
        self.max_calls = max_calls
        self.period = period
        self._clock = clock
        self._sleep = sleep
        self._calls: Deque[float] = deque()

    def _evict(self, now: float) -> None:
        while self._calls and now - self._calls[0] >= self.period:
            self._calls.popleft()

    def wait_time(self) -> float:
        """Seconds until the next call would be allowed (0 if now)."""
        now = self._clock()
        self._evict(now)
        if len(self._calls) < self.max_calls:
            return 0.0
        return self.period - (now - self._calls[0])

    def acquire(self) -> None:
        delay = self.wait_time()
        while delay > 0:
            self._sleep(delay)
            delay = self.wait_time()
        self._calls.append(self._clock())

    def __len__(self) -> int:
        self._evict(self._clock())
        return len(self._calls)
