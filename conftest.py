import os
import sys

import pytest

# Add repository root and ``src`` directory to Python path for tests
ROOT_DIR = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, ROOT_DIR)
sys.path.insert(0, os.path.join(ROOT_DIR, "src"))

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def pygame_headless():
    """Initialise Pygame in headless mode for tests."""
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
    pygame.init()
    yield
    pygame.quit()


class DummyPoint:
    """Minimal 2D point implementing only the spatial protocol."""

    def __init__(self, x, y):
        self.x = x
        self.y = y

    def add(self, other):
        return DummyPoint(self.x + other.x, self.y + other.y)

    def sub(self, other):
        return DummyPoint(self.x - other.x, self.y - other.y)

    def scale(self, s):
        return DummyPoint(self.x * s, self.y * s)

    def __eq__(self, other):
        return (self.x, self.y) == (other.x, other.y)

    def __repr__(self):
        return f"DummyPoint({self.x}, {self.y})"


class DummyAngle:
    """Angle in degrees that interpolates along the shortest arc."""

    def __init__(self, degrees):
        self.degrees = degrees % 360

    def lerp(self, other, t):
        delta = (other.degrees - self.degrees + 180) % 360 - 180
        return DummyAngle(self.degrees + delta * t)
