"""Pytest configuration and shared fixtures."""

import os
import sys
from pathlib import Path

import numpy as np
import pytest

# Headless SDL: must be set before pygame opens any display.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pygame  # noqa: E402

from canvas import Canvas  # noqa: E402
from settings import from_config  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    """Initialize pygame once for the whole test run."""
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def sample_config():
    """Provide a small configuration for tests."""
    return {
        "run_id": "test_run",
        "logging": {"level": "DEBUG", "format": "%(levelname)s - %(message)s"},
        "particles": {
            "length": 100,
            "duration": 2,
            "velocity": 50,
            "effect": -1.0,
            "size": 4,
            "color": "f50b02",
        },
        "text": {"content": "", "size": 40, "font": "arial", "y_offset_ratio": 0.1},
    }


@pytest.fixture
def settings(sample_config):
    """Provide resolved settings with text emission disabled."""
    return from_config(sample_config)


@pytest.fixture
def canvas():
    """Provide a small transparent canvas."""
    return Canvas(200, 100)


@pytest.fixture
def rng():
    """Provide a seeded generator so emission in tests is repeatable."""
    return np.random.default_rng(1234)


class RecordingCanvas:
    """Stands in for Canvas and records fill_circle calls."""

    def __init__(self):
        self.circles = []

    def fill_circle(self, x, y, radius, color, opacity):
        self.circles.append((x, y, radius, color, opacity))


@pytest.fixture
def recording_canvas():
    """Provide a canvas double that only records what was drawn."""
    return RecordingCanvas()
