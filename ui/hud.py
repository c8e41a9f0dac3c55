# ui/hud.py
import pygame

from core.settings import GOLD, HUD_COLOR
from world.session import GameState


class HUD:
    """
    Read-only overlay:
    - lives / donuts / wave / score line
    - Texas Donut progress bar + stockpile
    - wave complete banner, start and game over screens
    """

    def __init__(self, assets):
        self.font = assets.font_small
        self.big = assets.font_big

    def _text(self, surf, font, msg, pos, color=HUD_COLOR, center=False):
        img = font.render(msg, True, color)
        r = img.get_rect()
        if center:
            r.center = pos
        else:
            r.topleft = pos
        surf.blit(img, r)

    def draw(self, surf: pygame.Surface, session):
        w, h = surf.get_size()

        if session.state is GameState.START:
            self._overlay(surf)
            self._text(surf, self.big, "Feed the Freddies!", (w // 2, h // 2 - 40), GOLD, center=True)
            self._text(surf, self.font, "Click to throw donuts - Space for Texas Donut",
                       (w // 2, h // 2 + 10), center=True)
            self._text(surf, self.font, "Click or press Enter to start", (w // 2, h // 2 + 40), center=True)
            return

        # -------------------------
        # Stats line
        # -------------------------
        x, y = 14, 12
        stats = f"LIVES {session.lives}   DONUTS {session.donuts}   WAVE {session.wave}   SCORE {session.score}"
        self._text(surf, self.font, stats, (x, y))

        # -------------------------
        # Texas Donut bar
        # -------------------------
        sp = session.special
        bw, bh = 200, 14
        by = y + 28
        pct = max(0.0, min(1.0, sp.progress / sp.required))
        pygame.draw.rect(surf, (40, 40, 55), (x, by, bw, bh))
        pygame.draw.rect(surf, GOLD, (x, by, int(bw * pct), bh))
        pygame.draw.rect(surf, (230, 230, 240), (x, by, bw, bh), 2)

        if sp.stockpile > 0:
            label = f"TEXAS DONUT READY x{sp.stockpile}"
        else:
            label = f"Texas Donut: {sp.progress}/{sp.required}"
        self._text(surf, self.font, label, (x + bw + 10, by - 2), GOLD if sp.stockpile else HUD_COLOR)

        if session.wave_complete and session.playing:
            band = pygame.Surface((w, 100), pygame.SRCALPHA)
            band.fill((0, 0, 0, 180))
            surf.blit(band, (0, h // 2 - 50))
            self._text(surf, self.big, f"Wave {session.wave} Complete!", (w // 2, h // 2 - 10), GOLD, center=True)
            self._text(surf, self.font, "Next wave incoming...", (w // 2, h // 2 + 30), center=True)

        if session.state is GameState.GAME_OVER:
            self._overlay(surf)
            self._text(surf, self.big, "Game Over", (w // 2, h // 2 - 60), GOLD, center=True)
            self._text(surf, self.font, f"Final score: {session.score}", (w // 2, h // 2), center=True)
            self._text(surf, self.font, session.game_over_message(), (w // 2, h // 2 + 30), center=True)
            self._text(surf, self.font, "Click or press Enter to play again", (w // 2, h // 2 + 70), center=True)

    @staticmethod
    def _overlay(surf):
        shade = pygame.Surface(surf.get_size(), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 160))
        surf.blit(shade, (0, 0))
