import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from blockfall_shapes import SHAPES


class FakeTimer:
    def __init__(self):
        self.running = False
        self.starts = 0
        self.stops = 0

    def start(self, interval_ms=None):
        self.running = True; self.starts += 1

    def stop(self):
        self.running = False; self.stops += 1


class FixedRng:
    """Always picks the shape with the given name."""
    def __init__(self, name):
        self.name = name

    def choice(self, seq):
        return next(s for s in seq if s.name == self.name)


@pytest.fixture
def timer():
    return FakeTimer()


@pytest.fixture
def rng_o():
    return FixedRng("O")


@pytest.fixture
def shapes_by_name():
    return {s.name: s for s in SHAPES}


@pytest.fixture
def rng_for():
    return FixedRng
