# core/game.py
import pygame

from core.assets import Assets
from core.camera import Camera
from core.input import Input
from core.logger import get_logger
from core.settings import COMPACT_WIDTH, FPS, HEIGHT, TITLE, WIDTH
from core.ticker import TickGate
from ui.hud import HUD
from ui.render import Renderer
from world.session import Session

logger = get_logger(__name__)


class Game:
    def __init__(self, seed=None, width: int = WIDTH, height: int = HEIGHT, compact=None):
        pygame.init()
        pygame.display.set_caption(TITLE)

        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.running = True

        self.assets = Assets()
        self.assets.load()

        # the world is always WIDTH x HEIGHT; the window just scales it
        self.world = pygame.Surface((WIDTH, HEIGHT))
        self.camera = Camera((WIDTH, HEIGHT), (width, height))
        self.input = Input(self.camera)
        self.gate = TickGate(FPS)

        if compact is None:
            compact = width < COMPACT_WIDTH
        self.session = Session(seed=seed, compact_display=compact)

        self.renderer = Renderer(self.assets, (WIDTH, HEIGHT))
        self.hud = HUD(self.assets)

    def run(self):
        logger.info("starting %s (%dx%d)", TITLE, *self.screen.get_size())
        try:
            while self.running:
                # poll faster than the tick rate; the gate decides when a tick is due
                self.clock.tick(FPS * 2)

                for event in pygame.event.get():
                    self.input.handle(event, self.session)
                if self.input.quit_requested:
                    self.running = False
                    break

                if not self.gate.ready():
                    continue

                self.session.tick()
                self._draw()
        finally:
            pygame.quit()

    def _draw(self):
        self.renderer.draw(self.world, self.session)
        self.hud.draw(self.world, self.session)

        self.screen.fill((0, 0, 0))
        view = self.camera.viewport()
        if view.size == self.world.get_size():
            self.screen.blit(self.world, view)
        else:
            self.screen.blit(pygame.transform.smoothscale(self.world, view.size), view)
        pygame.display.flip()
