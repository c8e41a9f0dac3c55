# core/special.py
from __future__ import annotations
from dataclasses import dataclass

from core.settings import TEXAS_ANIMATION_TICKS, TEXAS_DONUT_REQUIRED, TEXAS_PHASES


@dataclass
class SpecialAttack:
    """
    Texas Donut charge container.
    - progress counts fully satisfied Freddies toward the next charge
    - stockpile holds ready charges
    - while active, clock runs 0..animation_ticks and then returns to idle
    """
    required: int = TEXAS_DONUT_REQUIRED
    animation_ticks: int = TEXAS_ANIMATION_TICKS
    progress: int = 0
    stockpile: int = 0
    active: bool = False
    clock: int = 0

    @property
    def ready(self) -> bool:
        return self.stockpile > 0 and not self.active

    @property
    def phase(self) -> str:
        if not self.active:
            return "idle"
        for name, end in TEXAS_PHASES:
            if self.clock < end:
                return name
        return TEXAS_PHASES[-1][0]

    @property
    def animation_progress(self) -> float:
        if not self.active:
            return 0.0
        return min(1.0, self.clock / self.animation_ticks)

    def add_progress(self) -> bool:
        """Count one satisfied Freddie. Returns True when a charge was earned."""
        self.progress += 1
        if self.progress >= self.required:
            self.progress = 0
            self.stockpile += 1
            return True
        return False

    def add_charge(self, amount: int = 1):
        self.stockpile += int(amount)

    def activate(self) -> bool:
        if not self.ready:
            return False
        self.stockpile -= 1
        self.active = True
        self.clock = 0
        return True

    def update(self):
        if not self.active:
            return
        self.clock += 1
        if self.clock >= self.animation_ticks:
            self.active = False
            self.clock = 0
