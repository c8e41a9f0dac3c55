# "Python-only assets": fonts and the Freddie sprite are generated in code.

import pygame

from core.settings import FREDDIE_HEIGHT, FREDDIE_WIDTH


class Assets:
    def __init__(self):
        self.font_small = None
        self.font_big = None
        self.freddie = None

    def load(self):
        # Default pygame font (no external file)
        self.font_small = pygame.font.Font(None, 26)
        self.font_big = pygame.font.Font(None, 64)
        self.freddie = self._make_freddie()

    @staticmethod
    def _make_freddie() -> pygame.Surface:
        w, h = FREDDIE_WIDTH, FREDDIE_HEIGHT
        surf = pygame.Surface((w, h), pygame.SRCALPHA)
        # body, face, hungry mouth
        pygame.draw.ellipse(surf, (200, 120, 60), (0, h * 0.15, w, h * 0.85))
        pygame.draw.circle(surf, (240, 200, 160), (w // 2, int(h * 0.3)), int(w * 0.32))
        pygame.draw.circle(surf, (20, 20, 26), (int(w * 0.38), int(h * 0.26)), 3)
        pygame.draw.circle(surf, (20, 20, 26), (int(w * 0.62), int(h * 0.26)), 3)
        pygame.draw.ellipse(surf, (120, 20, 30), (w * 0.38, h * 0.36, w * 0.24, h * 0.1))
        return surf
