# entities/powerup.py
import math
import random

import pygame

from core.settings import (
    HEIGHT,
    OFFSCREEN_MARGIN,
    POWERUP_SPAWN_Y,
    POWERUP_SPEED,
    POWERUP_SPIN,
    POWERUP_WIDTH,
    POWERUP_WOBBLE_AMP,
    POWERUP_WOBBLE_SPEED,
    WIDTH,
)
from core.utils import clamp
from world.balance import donut_box_reward
from world.powerup_defs import DONUT_BOX, POWERUPS


class PowerUp:
    def __init__(self, power_id: str, x: float, y: float = POWERUP_SPAWN_Y, wave: int = 1,
                 wobble: float = 0.0, world_w: int = WIDTH, world_h: int = HEIGHT):
        p = POWERUPS[power_id]

        self.power_id = power_id
        self.pos = pygame.Vector2(x, y)
        self.width = float(POWERUP_WIDTH)
        self.speed = POWERUP_SPEED
        self.wobble = float(wobble)
        self.rotation = 0.0
        self.alive = True

        self.max_health = int(p["health"])
        self.health = self.max_health
        self.hit_score = int(p["hit_score"])
        self.score = int(p["score"])
        # donut boxes scale with the wave, the others always give one of their thing
        self.reward = donut_box_reward(wave) if power_id == DONUT_BOX else 1

        self.color = p["color"]
        self.world_w = world_w
        self.world_h = world_h

    @classmethod
    def spawn(cls, power_id: str, wave: int, rng: random.Random,
              world_w: int = WIDTH, world_h: int = HEIGHT) -> "PowerUp":
        return cls(
            power_id,
            x=rng.uniform(40, world_w - 40),
            wave=wave,
            wobble=rng.uniform(0.0, math.pi * 2),
            world_w=world_w,
            world_h=world_h,
        )

    @property
    def half_width(self) -> float:
        return self.width * 0.5

    def hit(self) -> bool:
        """Returns True when this hit collected the powerup."""
        if not self.alive:
            return False
        self.health -= 1
        if self.health <= 0:
            self.health = 0
            self.alive = False
            return True
        return False

    def update(self):
        if not self.alive:
            return

        self.pos.y += self.speed
        self.wobble += POWERUP_WOBBLE_SPEED
        self.pos.x += math.sin(self.wobble) * POWERUP_WOBBLE_AMP
        self.rotation += POWERUP_SPIN
        self.pos.x = clamp(self.pos.x, self.half_width, self.world_w - self.half_width)

        if self.pos.y > self.world_h + OFFSCREEN_MARGIN + 10:
            self.alive = False
