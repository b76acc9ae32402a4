"""Geometric primitives and closed-form intersection.

Components:
    plane: Plane primitive, ray-plane intersection, half-space clipping
    ball: Ball primitive centred at the local origin, ray-sphere intersection
    results: Tagged results (Miss, HitOnce, HitTwice, Inside, Outside)

Primitives live in their own local frame and know nothing about placement;
position them with a ``Transformed`` node from ``raypick.scene``.
"""

from .ball import Ball
from .plane import Plane, clip_point
from .results import Clipped, HitOnce, HitTwice, Inside, IntersectResult, Miss, Outside

__all__ = [
    "Plane",
    "Ball",
    "clip_point",
    "IntersectResult",
    "Miss",
    "HitOnce",
    "HitTwice",
    "Clipped",
    "Inside",
    "Outside",
]
