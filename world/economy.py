# world/economy.py
from core.logger import get_logger
from core.settings import REGEN_INTERVAL, REGEN_INTERVAL_COMPACT
from world.balance import donut_cap, wave_start_donuts

logger = get_logger(__name__)


class Economy:
    """
    Donut (ammo) bookkeeping.
    - wave start: ammo is SET to the wave grant, not added to
    - every regen interval: +1 donut while below the wave cap
    - spending is refused at 0
    """

    def __init__(self, compact: bool = False):
        self.regen_interval = REGEN_INTERVAL_COMPACT if compact else REGEN_INTERVAL
        self.donuts = 0
        self.cap = 0
        self.regen_timer = 0

    def start_wave(self, wave: int):
        self.donuts = wave_start_donuts(wave)
        self.cap = donut_cap(wave)
        self.regen_timer = 0
        logger.debug("wave %d grant: %d donuts (cap %d)", wave, self.donuts, self.cap)

    def spend(self) -> bool:
        if self.donuts <= 0:
            return False
        self.donuts -= 1
        return True

    def grant(self, amount: int):
        self.donuts += max(0, int(amount))

    def update(self) -> bool:
        """Advance the regen clock one tick. Returns True when a donut was added."""
        self.regen_timer += 1
        if self.regen_timer < self.regen_interval:
            return False

        self.regen_timer = 0
        if self.donuts < self.cap:
            self.donuts += 1
            return True
        return False
