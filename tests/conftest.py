"""
Shared fixtures for the raster paintbrush tests.

The project uses a flat module layout, so the repository root is put on the
path before the test modules import ``raster``, ``shapes`` and friends.
"""
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))


class RecordingSurface:
    """Drawing surface stand-in that remembers every call."""

    def __init__(self):
        self.clears = []
        self.pixels = []

    def clear(self, width, height):
        self.clears.append((width, height))
        self.pixels = []

    def set_pixel(self, x, y):
        self.pixels.append((x, y))


@pytest.fixture
def surface():
    return RecordingSurface()
