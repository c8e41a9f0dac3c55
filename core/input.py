import pygame

from core.camera import Camera

SPECIAL_KEYS = (pygame.K_SPACE, pygame.K_t)
START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)


class Input:
    """
    Turns pygame events into Session commands.
    Mouse positions are window pixels; the camera maps them into world space first.
    """

    def __init__(self, camera: Camera):
        self.camera = camera
        self.quit_requested = False

    def handle(self, event, session):
        if event.type == pygame.QUIT:
            self.quit_requested = True

        elif event.type == pygame.VIDEORESIZE:
            self.camera.resize(event.size)

        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.quit_requested = True
            elif event.key in SPECIAL_KEYS:
                session.activate_special()
            elif event.key in START_KEYS and not session.playing:
                session.start()

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if not session.playing:
                session.start()
                return
            p = self.camera.to_world(event.pos)
            session.launch(p.x, p.y)
