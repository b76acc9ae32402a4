"""Core value types and affine transforms.

Components:
    ray: Ray and Intersection value types, vector utilities
    transform: Transform (forward, inverse and normal matrices) and
        matrix constructors
    errors: Exception hierarchy
"""

from .errors import DegenerateRayError, NonInvertibleTransformError, RaypickError
from .ray import (
    DOUBLE,
    FLOAT,
    Intersection,
    Ray,
    cross,
    dot,
    length,
    length_squared,
    normalize,
    transform_point,
    vec3,
)
from .transform import Transform, compose, identity, rotation, scaling, translation

__all__ = [
    "Ray",
    "Intersection",
    "vec3",
    "dot",
    "cross",
    "length",
    "length_squared",
    "normalize",
    "transform_point",
    "FLOAT",
    "DOUBLE",
    "Transform",
    "identity",
    "translation",
    "scaling",
    "rotation",
    "compose",
    "RaypickError",
    "NonInvertibleTransformError",
    "DegenerateRayError",
]
