# entities/enemy.py
import math
import random

import pygame

from core.settings import (
    BOTTOM_MARGIN,
    FREDDIE_HEIGHT,
    FREDDIE_SPAWN_Y,
    FREDDIE_WIDTH,
    FREDDIE_WOBBLE_AMP,
    FREDDIE_WOBBLE_SPEED,
    HEIGHT,
    SATISFIED_FALL,
    SATISFIED_SHRINK,
    SATISFIED_SPIN,
    SATISFIED_TICKS,
    WIDTH,
)
from core.utils import clamp
from world.balance import enemy_health, enemy_speed


class Freddie:
    """
    A hungry Freddie falling toward the danger zone.
    - Falls at a constant speed with a sinusoidal side-to-side wobble
    - hit() takes one health; at zero it becomes "satisfied" for good
    - Satisfied: falls faster, spins, shrinks, and expires after SATISFIED_TICKS
    - Unsatisfied and below the bottom edge -> escaped (Session takes a life)
    """

    def __init__(
        self,
        x: float,
        y: float = FREDDIE_SPAWN_Y,
        health: int = 1,
        speed: float = 1.0,
        wobble: float = 0.0,
        wobble_speed: float = 0.1,
        wobble_amp: float = 0.5,
        hue: float = 0.0,
        world_w: int = WIDTH,
        world_h: int = HEIGHT,
    ):
        self.pos = pygame.Vector2(x, y)
        self.width = float(FREDDIE_WIDTH)
        self.height = float(FREDDIE_HEIGHT)

        # health
        self.max_health = int(health)
        self.health = int(health)

        # movement
        self.speed = float(speed)
        self.wobble = float(wobble)
        self.wobble_speed = float(wobble_speed)
        self.wobble_amp = float(wobble_amp)
        self.angle = 0.0

        # state
        self.satisfied = False
        self.satisfied_timer = 0
        self.escaped = False
        self.alive = True

        # cosmetic
        self.hue = float(hue)

        self.world_w = world_w
        self.world_h = world_h

    @classmethod
    def spawn(cls, wave: int, rng: random.Random, world_w: int = WIDTH, world_h: int = HEIGHT) -> "Freddie":
        health = enemy_health(wave)
        return cls(
            x=rng.uniform(30, world_w - 30),
            health=health,
            speed=enemy_speed(wave, health),
            wobble=rng.uniform(0.0, math.pi * 2),
            wobble_speed=rng.uniform(*FREDDIE_WOBBLE_SPEED),
            wobble_amp=rng.uniform(*FREDDIE_WOBBLE_AMP),
            hue=rng.uniform(-30.0, 30.0),
            world_w=world_w,
            world_h=world_h,
        )

    @property
    def half_width(self) -> float:
        return self.width * 0.5

    @property
    def hittable(self) -> bool:
        return self.alive and not self.satisfied

    def hit(self) -> bool:
        """Returns True when this hit satisfied the Freddie."""
        if not self.hittable:
            return False
        self.health -= 1
        if self.health <= 0:
            self.health = 0
            self.satisfy()
            return True
        return False

    def satisfy(self):
        if self.satisfied:
            return
        self.satisfied = True
        self.satisfied_timer = 0

    def reached_bottom(self) -> bool:
        return self.pos.y > self.world_h + BOTTOM_MARGIN

    def update(self):
        if not self.alive:
            return

        if self.satisfied:
            self.satisfied_timer += 1
            self.pos.y += SATISFIED_FALL
            self.angle += SATISFIED_SPIN
            self.width *= SATISFIED_SHRINK
            self.height *= SATISFIED_SHRINK
            if self.satisfied_timer > SATISFIED_TICKS:
                self.alive = False
            return

        self.pos.y += self.speed
        self.wobble += self.wobble_speed
        self.pos.x += math.sin(self.wobble) * self.wobble_amp
        self.pos.x = clamp(self.pos.x, self.half_width, self.world_w - self.half_width)

        if self.reached_bottom():
            self.escaped = True
            self.alive = False
