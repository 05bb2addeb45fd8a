import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from tetris_config import CONFIG
from tetris_engine import GameEngine
from tetris_rng import PieceRandom
from tetris_scheduler import DropScheduler


class RecordingTimer:
    """Stands in for pygame.time.set_timer; remembers every call."""
    def __init__(self):
        self.calls = []

    def __call__(self, event_type, millis):
        self.calls.append((event_type, millis))

    @property
    def last(self):
        return self.calls[-1][1] if self.calls else None


class FixedRandom(PieceRandom):
    """Hands out kinds from a fixed list, then repeats the last one."""
    def __init__(self, *kinds):
        super().__init__(0)
        self.kinds = list(kinds)

    def next_kind(self):
        return self.kinds.pop(0) if len(self.kinds) > 1 else self.kinds[0]


@pytest.fixture(autouse=True)
def restore_config():
    saved = dict(CONFIG)
    yield
    CONFIG.clear()
    CONFIG.update(saved)


@pytest.fixture
def timer():
    return RecordingTimer()


@pytest.fixture
def scheduler(timer):
    return DropScheduler(set_timer=timer)


@pytest.fixture
def make_engine(scheduler):
    def make(*kinds):
        return GameEngine(scheduler, FixedRandom(*(kinds or ("O",))))
    return make
