# world/wave_powerups.py
import random
from typing import Callable, Tuple

from core.settings import (
    DONUT_BOX_FIRST_INTERVAL,
    DONUT_BOX_INTERVAL,
    LIFE_INTERVAL_BASE,
    LIFE_INTERVAL_FLOOR,
    LIFE_INTERVAL_SPREAD,
    LIFE_INTERVAL_STEP,
    TEXAS_BOX_INTERVAL_BASE,
    TEXAS_BOX_INTERVAL_FLOOR,
    TEXAS_BOX_INTERVAL_SPREAD,
    TEXAS_BOX_INTERVAL_STEP,
)
from world.powerup_defs import DONUT_BOX, LIFE, TEXAS_BOX


# Wave number -> (lo, hi) tick range for the next spawn of each powerup kind

def donut_box_interval(wave: int) -> Tuple[int, int]:
    return DONUT_BOX_INTERVAL


def texas_box_interval(wave: int) -> Tuple[int, int]:
    lo = max(TEXAS_BOX_INTERVAL_FLOOR, TEXAS_BOX_INTERVAL_BASE - TEXAS_BOX_INTERVAL_STEP * (wave - 1))
    return lo, lo + TEXAS_BOX_INTERVAL_SPREAD


def life_interval(wave: int) -> Tuple[int, int]:
    lo = max(LIFE_INTERVAL_FLOOR, LIFE_INTERVAL_BASE - LIFE_INTERVAL_STEP * (wave - 1))
    return lo, lo + LIFE_INTERVAL_SPREAD


WAVE_POWERUPS = {
    DONUT_BOX: donut_box_interval,
    TEXAS_BOX: texas_box_interval,
    LIFE: life_interval,
}

# first box of a wave comes a bit sooner than the rest
FIRST_INTERVALS = {
    DONUT_BOX: lambda wave: DONUT_BOX_FIRST_INTERVAL,
}


class SpawnTimer:
    """Counts down once per tick; on firing re-seeds from interval_fn(wave)."""

    def __init__(self, interval_fn: Callable[[int], Tuple[int, int]], rng: random.Random):
        self.interval_fn = interval_fn
        self.rng = rng
        self.remaining = 0

    def seed(self, wave: int, interval: Tuple[int, int] = None):
        lo, hi = interval or self.interval_fn(wave)
        self.remaining = self.rng.randint(int(lo), int(hi))

    def update(self, wave: int) -> bool:
        self.remaining -= 1
        if self.remaining <= 0:
            self.seed(wave)
            return True
        return False
