"""Ray intersection against a small scene algebra, plus a virtual trackball.

raypick answers "what does this ray hit, and with what surface normal?"
for scenes built from a handful of primitives, and turns pointer drags into
3D rotations for interactive camera and object manipulation.

Subpackages:
    core: Ray and intersection value types, vector helpers, affine transforms
    geometry: Plane and ball primitives, tagged query results, clipping
    scene: The composable Model tree evaluated per ray
    camera: Virtual trackball and orbit camera helpers

Everything is pure and synchronous: models, transforms and trackballs are
immutable once built and can be shared between threads.
"""

from .camera import OrbitCamera, VirtualTrackball
from .core import (
    DegenerateRayError,
    Intersection,
    NonInvertibleTransformError,
    Ray,
    RaypickError,
    Transform,
)
from .geometry import Ball, HitOnce, HitTwice, Inside, Miss, Outside, Plane, clip_point
from .scene import And, Clip, Model, Object, Or, Scene, Transformed

__version__ = "0.1.0"

__all__ = [
    "Ray",
    "Intersection",
    "Transform",
    "RaypickError",
    "NonInvertibleTransformError",
    "DegenerateRayError",
    "Plane",
    "Ball",
    "clip_point",
    "Miss",
    "HitOnce",
    "HitTwice",
    "Inside",
    "Outside",
    "Model",
    "Object",
    "Scene",
    "Transformed",
    "Clip",
    "And",
    "Or",
    "VirtualTrackball",
    "OrbitCamera",
]
