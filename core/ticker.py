# core/ticker.py
import time
from typing import Callable, Optional


class TickGate:
    """
    Fixed-step gate for the simulation.
    - ready() is True at most once per call, when a full tick period has passed
    - on time: the tick phase advances by exactly one period, so coarse polling
      (e.g. 8 ms frames against a 16.7 ms period) still averages the target rate
    - after a stall (2+ periods late) it does NOT replay missed ticks; the phase
      jumps to now and the next eligible tick just runs
    """

    def __init__(self, rate: float, clock: Callable[[], float] = time.perf_counter):
        if rate <= 0:
            raise ValueError(f"tick rate must be positive, got {rate!r}")
        self.period = 1.0 / float(rate)
        self.clock = clock
        self.last: Optional[float] = None
        self.ticks = 0

    def ready(self, now: Optional[float] = None) -> bool:
        if now is None:
            now = self.clock()

        if self.last is None:
            self.last = now
            self.ticks += 1
            return True

        elapsed = now - self.last
        if elapsed < self.period:
            return False

        if elapsed < self.period * 2:
            self.last += self.period
        else:
            self.last = now
        self.ticks += 1
        return True
