# world/session.py
import random
from enum import Enum
from typing import Dict, List, Optional

import pygame

from core.logger import get_logger
from core.settings import (
    COMPACT_WIDTH,
    GOLD,
    HEIGHT,
    LAUNCH_OFFSET,
    ORANGE,
    RED,
    SCORE_FREDDIE_SATISFIED,
    START_LIVES,
    WIDTH,
)
from core.special import SpecialAttack
from entities.base import compact
from entities.donut import Donut
from entities.enemy import Freddie
from entities.particle import Shockwave, burst
from entities.powerup import PowerUp
from world.collisions import resolve_collisions
from world.economy import Economy
from world.powerup_defs import DONUT_BOX, LIFE, TEXAS_BOX
from world.waves import WaveScheduler

logger = get_logger(__name__)


class GameState(Enum):
    START = "start"
    PLAYING = "playing"
    GAME_OVER = "gameover"


class Session:
    """
    Everything one game owns. The driver calls tick() once per simulation step;
    renderers and the HUD read the fields afterwards and never write them.

    Tick order: scheduler -> entity updates -> collisions -> economy/timers.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None,
                 world_w: int = WIDTH, world_h: int = HEIGHT, compact_display: Optional[bool] = None):
        self.rng = rng or random.Random(seed)
        self.world_w = int(world_w)
        self.world_h = int(world_h)
        if compact_display is None:
            compact_display = self.world_w < COMPACT_WIDTH
        self.compact_display = bool(compact_display)

        self.state = GameState.START
        self._reset()

    def _reset(self):
        self.score = 0
        self.lives = START_LIVES

        self.freddies: List[Freddie] = []
        self.donuts_in_flight: List[Donut] = []
        self.donut_boxes: List[PowerUp] = []
        self.texas_boxes: List[PowerUp] = []
        self.life_pickups: List[PowerUp] = []
        self.effects: List[object] = []

        self.scheduler = WaveScheduler(self.rng)
        self.economy = Economy(compact=self.compact_display)
        self.economy.start_wave(self.scheduler.wave)
        self.special = SpecialAttack()

    # ------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------
    @property
    def wave(self) -> int:
        return self.scheduler.wave

    @property
    def wave_complete(self) -> bool:
        return self.scheduler.complete

    @property
    def donuts(self) -> int:
        return self.economy.donuts

    @donuts.setter
    def donuts(self, value: int):
        self.economy.donuts = max(0, int(value))

    @property
    def playing(self) -> bool:
        return self.state is GameState.PLAYING

    @property
    def launch_point(self) -> pygame.Vector2:
        return pygame.Vector2(self.world_w / 2, self.world_h - LAUNCH_OFFSET)

    def powerup_lists(self) -> Dict[str, List[PowerUp]]:
        return {
            DONUT_BOX: self.donut_boxes,
            TEXAS_BOX: self.texas_boxes,
            LIFE: self.life_pickups,
        }

    # ------------------------------------------------------------
    # Commands (input)
    # ------------------------------------------------------------
    def start(self):
        """Start or restart. Never additive: every counter goes back to its initial value."""
        self._reset()
        self.state = GameState.PLAYING
        logger.info("session started (wave 1, %d lives, %d donuts)", self.lives, self.donuts)

    def launch(self, x: float, y: float) -> bool:
        if not self.playing:
            return False
        if not self.economy.spend():
            return False

        lp = self.launch_point
        self.donuts_in_flight.append(Donut(lp.x, lp.y, x, y, world_w=self.world_w, world_h=self.world_h))
        return True

    def activate_special(self) -> bool:
        if not self.playing:
            return False
        if not self.special.activate():
            return False

        fed = 0
        for f in self.freddies:
            if f.hittable:
                f.satisfy()
                self.score += SCORE_FREDDIE_SATISFIED * self.wave
                fed += 1

        cx, cy = self.world_w / 2, self.world_h / 2
        self.effects.append(Shockwave(cx, cy, GOLD, max_radius=max(self.world_w, self.world_h) * 0.6))
        self.effects.extend(burst(cx, cy, GOLD, 50, self.rng))
        self.effects.extend(burst(cx, cy, ORANGE, 50, self.rng))
        logger.info("Texas Donut! fed %d Freddies (%d charges left)", fed, self.special.stockpile)
        return True

    # ------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------
    def tick(self) -> bool:
        if not self.playing:
            return False

        self._run_scheduler()
        self._advance_entities()
        if not self.playing:
            return True

        resolve_collisions(self)
        self.economy.update()
        self.special.update()
        return True

    def _run_scheduler(self):
        live = {kind: len(items) for kind, items in self.powerup_lists().items()}
        orders = self.scheduler.update(len(self.freddies), live)

        if orders.wave_started:
            self.economy.start_wave(self.wave)

        if orders.spawn_freddie:
            self.freddies.append(Freddie.spawn(self.wave, self.rng, self.world_w, self.world_h))
            logger.debug("Freddie %d/%d spawned", self.scheduler.spawned, self.scheduler.total)

        lists = self.powerup_lists()
        for kind in orders.powerups:
            lists[kind].append(PowerUp.spawn(kind, self.wave, self.rng, self.world_w, self.world_h))
            logger.debug("%s dropped", kind)

    def _advance_entities(self):
        for f in self.freddies:
            f.update()
            if f.alive:
                continue
            if f.satisfied:
                self.score += SCORE_FREDDIE_SATISFIED * self.wave
                self.effects.extend(burst(f.pos.x, f.pos.y, GOLD, 15, self.rng))
            elif f.escaped:
                self.effects.extend(burst(f.pos.x, self.world_h - 20, RED, 20, self.rng))
                self._lose_life()
        self.freddies = compact(self.freddies)

        for items in self.powerup_lists().values():
            for p in items:
                p.update()
        self.donut_boxes = compact(self.donut_boxes)
        self.texas_boxes = compact(self.texas_boxes)
        self.life_pickups = compact(self.life_pickups)

        for d in self.donuts_in_flight:
            d.update()
        self.donuts_in_flight = compact(self.donuts_in_flight)

        for e in self.effects:
            e.update()
        self.effects = compact(self.effects)

    def _lose_life(self):
        self.lives = max(0, self.lives - 1)
        if self.lives == 0 and self.playing:
            self.state = GameState.GAME_OVER
            logger.info("game over on wave %d with %d points", self.wave, self.score)

    # ------------------------------------------------------------
    # Game over text
    # ------------------------------------------------------------
    def game_over_message(self) -> str:
        w = self.wave
        if w < 3:
            return "The Freddies were too hungry! Try feeding them faster!"
        if w < 5:
            return f"Not bad! You survived {w} waves of hungry Freddies!"
        if w < 8:
            return "Impressive! You're a donut-throwing master!"
        return f"LEGENDARY! You survived {w} waves! The Freddies are in awe!"
