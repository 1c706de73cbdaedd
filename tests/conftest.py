import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from barrel_dash.settings import GameConfig


@pytest.fixture
def config():
    return GameConfig()
