import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from barco.session import GameSession


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def session(rng):
    return GameSession(800, 600, rng=rng)
