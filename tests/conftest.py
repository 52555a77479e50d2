import os

# Headless pygame for rendering/input tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from gridsnake.config import Config
from gridsnake.world import GridWorld


@pytest.fixture
def world():
    return GridWorld(20, 20, seed=7)


@pytest.fixture
def small_cfg():
    # 8 rows x 10 cols
    return Config(width=100, height=80, cell_size=10, ticks_per_second=10, seed=3)
