"""Shared fixtures for the breakout test suite."""

from __future__ import annotations

import os

# pygame must never open a real window or audio device under test.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from breakout.core import Simulation, build_world
from helpers import RecordingText


@pytest.fixture
def world():
    return build_world()


@pytest.fixture
def text():
    return RecordingText()


@pytest.fixture
def sim(text):
    return Simulation(text=text)
