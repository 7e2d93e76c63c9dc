"""Pytest configuration and shared fixtures."""

import os
import sys
from pathlib import Path

import pytest

# pygame must not try to open a real display during tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Add the source root to the path
src_root = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_root))

from camera.camera import Camera  # noqa: E402
from core.vector import Vector3  # noqa: E402


class RecordingCanvas:
    """Pixel sink that keeps the unclamped colors it receives."""

    def __init__(self):
        self.pixels = {}

    def set_pixel(self, x, y, color):
        self.pixels[(x, y)] = color


@pytest.fixture
def recording_canvas():
    return RecordingCanvas()


@pytest.fixture
def default_camera():
    """An oblique camera; looking straight down has no defined basis."""
    return Camera(Vector3(0.0, 2.0, 5.0), Vector3(0.0, 0.0, 0.0))
