"""Wall-clock utilities."""

import time
from collections.abc import Callable

Clock = Callable[[], int]


def current_millis() -> int:
    """Return wall-clock time as integer milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


class ManualClock:
    """Clock that only moves when told to. For tests and replays."""

    def __init__(self, now: int) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int = 1) -> None:
        self.now += ms
