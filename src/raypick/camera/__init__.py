"""Interaction helpers built on the scene algebra.

Components:
    trackball: VirtualTrackball mapping drag ray pairs to (axis, angle)
    orbit: OrbitCamera turning pointer positions into rays and applying
        rotations to the view
"""

from .orbit import OrbitCamera
from .trackball import VirtualTrackball

__all__ = [
    "VirtualTrackball",
    "OrbitCamera",
]
