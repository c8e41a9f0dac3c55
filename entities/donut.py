# entities/donut.py
import math

import pygame

from core.settings import DONUT_RADIUS, DONUT_SPEED, DONUT_SPIN, HEIGHT, OFFSCREEN_MARGIN, WIDTH


class Donut:
    """Thrown donut. Aimed once at spawn, flies straight, gone when off screen."""

    def __init__(self, x: float, y: float, target_x: float, target_y: float,
                 speed: float = DONUT_SPEED, world_w: int = WIDTH, world_h: int = HEIGHT):
        self.pos = pygame.Vector2(x, y)

        dx = target_x - x
        dy = target_y - y
        if dx == 0 and dy == 0:
            dy = -1.0  # clicked the launcher itself: throw straight up
        angle = math.atan2(dy, dx)
        self.vel = pygame.Vector2(math.cos(angle) * speed, math.sin(angle) * speed)

        self.radius = DONUT_RADIUS
        self.rotation = 0.0
        self.alive = True

        self.world_w = world_w
        self.world_h = world_h

    def off_screen(self) -> bool:
        m = OFFSCREEN_MARGIN
        return (
            self.pos.x < -m or self.pos.x > self.world_w + m
            or self.pos.y < -m or self.pos.y > self.world_h + m
        )

    def update(self):
        if not self.alive:
            return

        self.pos += self.vel
        self.rotation += DONUT_SPIN

        if self.off_screen():
            self.alive = False
