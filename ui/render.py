# ui/render.py
import math

import pygame

from core.settings import (
    DANGER_COLOR,
    DANGER_ZONE_HEIGHT,
    GOLD,
    HOT_PINK,
    ORANGE,
    PINK,
    SATISFIED_TICKS,
    SKY_BOTTOM,
    SKY_TOP,
)
from entities.particle import Shockwave
from world.powerup_defs import DONUT_BOX, LIFE, POWERUPS


class Renderer:
    """Draws a Session onto the world-sized surface. Never writes to the session."""

    def __init__(self, assets, size):
        self.assets = assets
        self.background = self._make_sky(size)
        self.cloud_offset = 0.0

    @staticmethod
    def _make_sky(size) -> pygame.Surface:
        w, h = size
        surf = pygame.Surface((w, h))
        for y in range(h):
            t = y / max(1, h - 1)
            c = [int(a + (b - a) * t) for a, b in zip(SKY_TOP, SKY_BOTTOM)]
            pygame.draw.line(surf, c, (0, y), (w, y))
        return surf

    def draw(self, surf: pygame.Surface, session):
        surf.blit(self.background, (0, 0))
        self._draw_clouds(surf)

        fx = pygame.Surface(surf.get_size(), pygame.SRCALPHA)
        for e in session.effects:
            self._draw_effect(fx, e)
        surf.blit(fx, (0, 0))
        for d in session.donuts_in_flight:
            self._draw_donut(surf, d.pos, d.radius, d.rotation)
        for box in (*session.donut_boxes, *session.texas_boxes, *session.life_pickups):
            self._draw_powerup(surf, box)
        for f in session.freddies:
            self._draw_freddie(surf, f)

        if session.special.active:
            self._draw_texas(surf, session.special.animation_progress)

        w, h = surf.get_size()
        zone = pygame.Surface((w, DANGER_ZONE_HEIGHT), pygame.SRCALPHA)
        zone.fill((*DANGER_COLOR, 26))
        surf.blit(zone, (0, h - DANGER_ZONE_HEIGHT))

        lp = session.launch_point
        self._draw_donut(surf, lp, 12, 0.0)

    def _draw_clouds(self, surf):
        # purely decorative, advances per frame not per tick
        self.cloud_offset += 0.2
        w = surf.get_width()
        layer = pygame.Surface(surf.get_size(), pygame.SRCALPHA)
        for i in range(5):
            x = ((self.cloud_offset + i * 250) % (w + 200)) - 100
            y = 50 + i * 40
            for dx, r in ((0, 30), (25, 35), (50, 30)):
                pygame.draw.circle(layer, (255, 255, 255, 150), (int(x + dx), y), r)
        surf.blit(layer, (0, 0))

    def _draw_donut(self, surf, pos, radius, rotation):
        cx, cy = int(pos.x), int(pos.y)
        pygame.draw.circle(surf, PINK, (cx, cy), radius)
        pygame.draw.circle(surf, SKY_TOP, (cx, cy), max(1, int(radius * 0.4)))
        for i in range(6):
            a = rotation + (math.pi * 2 / 6) * i
            sx = cx + int(math.cos(a) * radius * 0.7)
            sy = cy + int(math.sin(a) * radius * 0.7)
            pygame.draw.circle(surf, HOT_PINK, (sx, sy), 3)

    def _draw_freddie(self, surf, f):
        sprite = self.assets.freddie
        if f.satisfied:
            sprite = pygame.transform.smoothscale(sprite, (max(1, int(f.width)), max(1, int(f.height))))
        img = pygame.transform.rotate(sprite, -math.degrees(f.angle))
        if f.satisfied:
            img.set_alpha(int(255 * max(0.0, 1 - f.satisfied_timer / SATISFIED_TICKS)))
        surf.blit(img, img.get_rect(center=(int(f.pos.x), int(f.pos.y))))

        if not f.satisfied and f.health < f.max_health:
            self._health_bar(surf, f.pos.x, f.pos.y - f.height * 0.6, f.width, f.health / f.max_health)

    def _draw_powerup(self, surf, box):
        p = POWERUPS[box.power_id]
        half = int(box.half_width)
        cx, cy = int(box.pos.x), int(box.pos.y)
        rect = pygame.Rect(cx - half, cy - half, half * 2, half * 2)

        if box.power_id == LIFE:
            pygame.draw.circle(surf, p["color"], (cx - half // 3, cy - 4), half // 2)
            pygame.draw.circle(surf, p["color"], (cx + half // 3, cy - 4), half // 2)
            pygame.draw.polygon(surf, p["color"], [(cx - half + 4, cy), (cx + half - 4, cy), (cx, cy + half - 2)])
            return

        pygame.draw.rect(surf, p["color"], rect)
        pygame.draw.rect(surf, p["trim"], rect, 3)
        if box.power_id == DONUT_BOX:
            self._draw_donut(surf, box.pos, 15, box.rotation)
            label = self.assets.font_small.render(f"+{box.reward}", True, GOLD)
            surf.blit(label, label.get_rect(center=(cx, cy - half - 12)))
        else:
            self._draw_donut(surf, box.pos, 18, box.rotation)
            pygame.draw.circle(surf, GOLD, (cx, cy), 20, 2)

        if box.health < box.max_health:
            self._health_bar(surf, box.pos.x, box.pos.y + half + 4, box.width, box.health / box.max_health)

    @staticmethod
    def _health_bar(surf, cx, top, width, pct):
        x = int(cx - width * 0.4)
        w = int(width * 0.8)
        pygame.draw.rect(surf, (255, 0, 0), (x, int(top), w, 5))
        pygame.draw.rect(surf, (0, 255, 0), (x, int(top), int(w * pct), 5))

    @staticmethod
    def _draw_effect(layer, e):
        alpha = int(255 * e.fade)
        if isinstance(e, Shockwave):
            pygame.draw.circle(layer, (*e.color, alpha), (int(e.pos.x), int(e.pos.y)), max(1, int(e.radius)), 6)
        else:
            pygame.draw.circle(layer, (*e.color, alpha), (int(e.pos.x), int(e.pos.y)), max(1, int(e.size)))

    def _draw_texas(self, surf, progress):
        w, h = surf.get_size()
        size = 100 + progress * 400
        layer = pygame.Surface((w, h), pygame.SRCALPHA)
        alpha = int(255 * (1 - progress))
        c = (w // 2, h // 2)
        pygame.draw.circle(layer, (*ORANGE, alpha), c, int(size / 2))
        pygame.draw.circle(layer, (*GOLD, alpha), c, int(size / 2.6))
        pygame.draw.circle(layer, (*SKY_TOP, alpha // 2), c, int(size / 5))
        spin = progress * math.pi * 4
        for i in range(20):
            a = spin + (math.pi * 2 / 20) * i
            x = c[0] + int(math.cos(a) * size / 3)
            y = c[1] + int(math.sin(a) * size / 3)
            pygame.draw.circle(layer, (*HOT_PINK, alpha), (x, y), 8)
        surf.blit(layer, (0, 0))
