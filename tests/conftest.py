"""Pytest configuration for raypick tests.

Shared fixtures for primitives and rays used across test modules.
"""

import pytest

from raypick.core.ray import Ray
from raypick.geometry.ball import Ball
from raypick.geometry.plane import Plane


@pytest.fixture
def origin_plane():
    """Plane through the origin accepting +z."""
    return Plane(position=(0.0, 0.0, 0.0), normal=(0.0, 0.0, 1.0))


@pytest.fixture
def unit_ball():
    """Unit ball at the local origin."""
    return Ball(1.0)


@pytest.fixture
def axis_ray():
    """Ray along +z from z=-10 through the origin."""
    return Ray(eye=(0.0, 0.0, -10.0), target=(0.0, 0.0, 0.0))
