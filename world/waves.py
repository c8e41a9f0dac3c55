# world/waves.py
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from core.logger import get_logger
from core.settings import POWERUP_MAX_LIVE, WAVE_DELAY
from world.balance import enemy_count, spawn_delay
from world.wave_powerups import FIRST_INTERVALS, WAVE_POWERUPS, SpawnTimer

logger = get_logger(__name__)


@dataclass
class SpawnOrders:
    """What the scheduler wants the Session to do this tick."""
    spawn_freddie: bool = False
    powerups: List[str] = field(default_factory=list)
    wave_completed: bool = False
    wave_started: bool = False


class WaveScheduler:
    """
    Dedicated wave system.
    - SPAWNING: Freddies come out one per spawn_delay(wave) ticks until enemy_count(wave)
    - COMPLETE: everything spawned AND nothing alive -> WAVE_DELAY countdown
    - countdown hits 0 -> wave += 1 and back to SPAWNING
    Powerup timers only run while SPAWNING.
    """

    def __init__(self, rng: Optional[random.Random] = None, wave_delay: int = WAVE_DELAY):
        self.rng = rng or random.Random()
        self.wave_delay = int(wave_delay)

        self.wave = 1
        self.total = 0
        self.spawned = 0
        self.spawn_timer = 0

        self.complete = False
        self.delay = 0

        self.timers: Dict[str, SpawnTimer] = {
            kind: SpawnTimer(fn, self.rng) for kind, fn in WAVE_POWERUPS.items()
        }
        self.start_wave()

    def start_wave(self):
        self.complete = False
        self.delay = 0
        self.total = enemy_count(self.wave)
        self.spawned = 0
        self.spawn_timer = 0  # first Freddie drops on the first tick

        for kind, timer in self.timers.items():
            first = FIRST_INTERVALS.get(kind)
            timer.seed(self.wave, first(self.wave) if first else None)

        logger.info("wave %d: %d Freddies, one every %d ticks", self.wave, self.total, spawn_delay(self.wave))

    def update(self, alive_enemies: int, live_powerups: Optional[Dict[str, int]] = None) -> SpawnOrders:
        orders = SpawnOrders()
        live_powerups = live_powerups or {}

        if self.complete:
            self.delay -= 1
            if self.delay > 0:
                return orders
            # new wave starts spawning on this same tick
            self.wave += 1
            self.start_wave()
            orders.wave_started = True

        elif self.spawned >= self.total and alive_enemies <= 0:
            self.complete = True
            self.delay = self.wave_delay
            orders.wave_completed = True
            logger.info("wave %d complete", self.wave)
            return orders

        self.spawn_timer -= 1
        if self.spawn_timer <= 0 and self.spawned < self.total:
            self.spawned += 1
            self.spawn_timer = spawn_delay(self.wave)
            orders.spawn_freddie = True

        for kind, timer in self.timers.items():
            if timer.update(self.wave) and live_powerups.get(kind, 0) < POWERUP_MAX_LIVE:
                orders.powerups.append(kind)

        return orders
