import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest  # noqa: E402

from grid_invaders.config import GameConfig  # noqa: E402
from grid_invaders.entities import World  # noqa: E402
from grid_invaders.input import InputState  # noqa: E402
from grid_invaders.systems import TickContext  # noqa: E402


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def world(config):
    return World.create(config)


@pytest.fixture
def ctx(world):
    return TickContext(world=world, input_state=InputState())


def kill_all_but(world, *keep):
    """Leave only the (row, col) slots in ``keep`` alive."""
    for e in world.enemies:
        e.alive = (e.row, e.col) in keep
