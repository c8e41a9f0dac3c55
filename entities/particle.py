# entities/particle.py
import random
from typing import List

import pygame

from core.settings import PARTICLE_GRAVITY, PARTICLE_LIFE, PARTICLE_SPREAD, TEXAS_ANIMATION_TICKS


class Particle:
    def __init__(self, x: float, y: float, color, vx: float = 0.0, vy: float = 0.0,
                 size: float = 6.0, life: int = PARTICLE_LIFE):
        self.pos = pygame.Vector2(x, y)
        self.vel = pygame.Vector2(vx, vy)
        self.color = color
        self.size = size
        self.life = int(life)
        self.max_life = int(life)
        self.alive = True

    @property
    def fade(self) -> float:
        return max(0.0, self.life / self.max_life)

    def update(self):
        if not self.alive:
            return
        self.pos += self.vel
        self.vel.y += PARTICLE_GRAVITY
        self.life -= 1
        if self.life <= 0:
            self.alive = False


class Shockwave:
    """Expanding ring behind the Texas Donut."""

    def __init__(self, x: float, y: float, color, max_radius: float = 250.0,
                 life: int = TEXAS_ANIMATION_TICKS):
        self.pos = pygame.Vector2(x, y)
        self.color = color
        self.max_radius = max_radius
        self.life = int(life)
        self.max_life = int(life)
        self.alive = True

    @property
    def fade(self) -> float:
        return max(0.0, self.life / self.max_life)

    @property
    def radius(self) -> float:
        return self.max_radius * (1.0 - self.fade)

    def update(self):
        if not self.alive:
            return
        self.life -= 1
        if self.life <= 0:
            self.alive = False


def burst(x: float, y: float, color, count: int, rng: random.Random) -> List[Particle]:
    s = PARTICLE_SPREAD
    return [
        Particle(x, y, color, vx=rng.uniform(-s, s), vy=rng.uniform(-s, s), size=rng.uniform(4.0, 12.0))
        for _ in range(count)
    ]
