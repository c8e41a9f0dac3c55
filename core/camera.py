# core/camera.py
import pygame


class Camera:
    """
    Single-screen viewport: the simulation lives in a fixed world size and the
    window may be any size. Keeps aspect ratio and letterboxes the rest.
    """

    def __init__(self, world_size, window_size=None):
        self.world_w, self.world_h = (int(v) for v in world_size)
        if self.world_w <= 0 or self.world_h <= 0:
            raise ValueError(f"world size must be positive, got {world_size!r}")
        self.scale = 1.0
        self.offset = pygame.Vector2(0, 0)
        self.resize(window_size or world_size)

    def resize(self, window_size):
        win_w, win_h = (int(v) for v in window_size)
        if win_w <= 0 or win_h <= 0:
            raise ValueError(f"window size must be positive, got {window_size!r}")

        self.scale = min(win_w / self.world_w, win_h / self.world_h)
        self.offset = pygame.Vector2(
            (win_w - self.world_w * self.scale) * 0.5,
            (win_h - self.world_h * self.scale) * 0.5,
        )

    def to_world(self, screen_pos) -> pygame.Vector2:
        return (pygame.Vector2(screen_pos) - self.offset) / self.scale

    def to_screen(self, world_pos) -> pygame.Vector2:
        return pygame.Vector2(world_pos) * self.scale + self.offset

    def viewport(self) -> pygame.Rect:
        # where the scaled world surface lands in the window
        return pygame.Rect(
            int(self.offset.x),
            int(self.offset.y),
            int(self.world_w * self.scale),
            int(self.world_h * self.scale),
        )
