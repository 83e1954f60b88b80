"""Pytest configuration and shared fixtures."""

import pytest

from doubleslider.config.settings import SliderConfig
from doubleslider.domain.geometry import Orientation, Pos2, Rect


# Default handle radius 7 + padding 2 insets the track by 9px at both ends,
# so a 218px wide rectangle gives a 200px track starting at x=9.
TRACK_START = 9.0
TRACK_LENGTH = 200.0


def _track_point(position: float, y: float = 9.0) -> Pos2:
    """Pointer position over the horizontal test track at a normalized position."""
    return Pos2(TRACK_START + position * TRACK_LENGTH, y)


@pytest.fixture
def rect():
    """Horizontal widget rectangle with a 200px track."""
    return Rect(0.0, 0.0, 218.0, 18.0)


@pytest.fixture
def vertical_rect():
    """Vertical widget rectangle with a 200px track."""
    return Rect(0.0, 0.0, 18.0, 218.0)


@pytest.fixture
def config():
    """Default configuration on [0, 100]."""
    return SliderConfig()


@pytest.fixture
def separated_config():
    """Configuration on [0, 100] with a separation distance of 10."""
    return SliderConfig(axis_min=0.0, axis_max=100.0, separation_distance=10.0)


@pytest.fixture
def log_config():
    """Logarithmic configuration on [1, 1000]."""
    return SliderConfig(axis_min=1.0, axis_max=1000.0, logarithmic=True)


@pytest.fixture
def vertical_config():
    """Vertical configuration on [0, 100]."""
    return SliderConfig(orientation=Orientation.VERTICAL)


@pytest.fixture
def track_point():
    """Map a normalized position to a pointer over the horizontal test track."""
    return _track_point
