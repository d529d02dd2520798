"""Helpers for throttling the game loop to a fixed step rate."""

import time


def now():
    return time.monotonic()


class StepLimiter:
    """Let a step through at most `rate` times per second, however often it is polled."""

    def __init__(self, rate=30):
        if rate <= 0:
            raise ValueError("rate must be positive")
        self.interval = 1.0 / rate
        self._prev = None
        self._wait = 0.0

    def ready(self, timestamp):
        """Accumulate time elapsed since the last poll; True when a step is due."""
        if self._prev is None:
            self._prev = timestamp
        elapsed = timestamp - self._prev
        self._prev = timestamp

        self._wait -= elapsed
        if self._wait > 0:
            return False
        self._wait = self.interval
        return True
