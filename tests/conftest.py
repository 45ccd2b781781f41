"""Shared fixtures. Everything runs headless on SDL's dummy drivers."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pytest

from pixel_starfield.scheduler import FrameScheduler
from pixel_starfield.settings import StarFieldSettings
from pixel_starfield.ui.starfield import StarField
from pixel_starfield.ui.viewport import Viewport


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def scheduler():
    return FrameScheduler()


@pytest.fixture
def viewport():
    return Viewport(320, 240)


@pytest.fixture
def starfield(scheduler, rng):
    return StarField(scheduler, StarFieldSettings(), rng)


@pytest.fixture
def mounted(starfield, viewport):
    assert starfield.mount(viewport)
    return starfield
