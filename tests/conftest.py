import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from world.session import Session


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def session():
    """A started session with nothing on screen yet."""
    s = Session(seed=7)
    s.start()
    return s
