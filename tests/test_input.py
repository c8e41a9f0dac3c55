import pygame
import pytest

from core.camera import Camera
from core.input import Input
from world.session import Session


@pytest.fixture
def wired():
    cam = Camera((800, 600), (400, 300))
    return Input(cam), Session(seed=3)


def click(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos)


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def test_click_starts_then_throws_in_world_space(wired):
    inp, s = wired
    inp.handle(click((200, 100)), s)
    assert s.playing
    assert s.donuts_in_flight == []

    inp.handle(click((200, 100)), s)
    assert len(s.donuts_in_flight) == 1
    d = s.donuts_in_flight[0]
    # window (200, 100) is world (400, 200), straight above the launcher
    assert d.vel.x == pytest.approx(0.0, abs=1e-9)
    assert d.vel.y < 0


def test_enter_starts_and_escape_quits(wired):
    inp, s = wired
    inp.handle(key(pygame.K_RETURN), s)
    assert s.playing
    inp.handle(key(pygame.K_ESCAPE), s)
    assert inp.quit_requested


def test_space_fires_special(wired):
    inp, s = wired
    s.start()
    s.special.stockpile = 1
    inp.handle(key(pygame.K_SPACE), s)
    assert s.special.active


def test_resize_updates_camera(wired):
    inp, s = wired
    inp.handle(pygame.event.Event(pygame.VIDEORESIZE, size=(800, 600), w=800, h=600), s)
    assert inp.camera.scale == pytest.approx(1.0)
