import time
from abc import ABC, abstractmethod


class Clock(ABC):
    """Source of monotonic time in seconds."""

    @abstractmethod
    def now(self) -> float:
        ...


class PerfCounterClock(Clock):
    def now(self) -> float:
        return time.perf_counter()
