"""Shared fixtures for the year progress wallpaper tests."""

from datetime import datetime

import pytest
from PIL import Image

from wallpaper_generator import compute_grid_layout
from wallpaper_service import WallpaperSurface

CANVAS_SIZE = (1080, 1920)


class RecordingSurface(WallpaperSurface):
    """In-memory surface that remembers every lock and post."""

    def __init__(self, size=CANVAS_SIZE, available=True):
        self._size = size
        self.available = available
        self.locks = 0
        self.posted = []

    def lock_canvas(self):
        self.locks += 1
        if not self.available:
            return None
        return Image.new("RGB", self._size)

    def unlock_canvas_and_post(self, canvas):
        self.posted.append(canvas)


@pytest.fixture
def canvas_size():
    return CANVAS_SIZE


@pytest.fixture
def layout(canvas_size):
    return compute_grid_layout(*canvas_size)


@pytest.fixture
def leap_day():
    """Scenario A: Feb 29 of a leap year."""
    return datetime(2024, 2, 29, 9, 30)


@pytest.fixture
def new_year():
    """Scenario B: Jan 1 of a common year."""
    return datetime(2023, 1, 1, 0, 5)


@pytest.fixture
def new_years_eve():
    """Scenario C: Dec 31 of a common year."""
    return datetime(2023, 12, 31, 23, 59)


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def unavailable_surface():
    """Surface whose host has no canvas to hand out."""
    return RecordingSurface(available=False)
