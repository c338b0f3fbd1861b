"""Time source for decay calculations."""

import time
from typing import Protocol


class Clock(Protocol):
    """Supplies the current time as integer UNIX seconds."""

    def now(self) -> int: ...


class SystemClock:
    """Wall-clock time, truncated to whole seconds."""

    def now(self) -> int:
        return int(time.time())


class ManualClock:
    """A clock that only moves when told to, for tests and simulations."""

    def __init__(self, start: int = 0) -> None:
        self.current = start

    def now(self) -> int:
        return self.current

    def advance(self, seconds: int) -> int:
        self.current += seconds
        return self.current
