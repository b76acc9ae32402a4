"""Exceptions raised by raypick.

A miss is never an error: intersection queries report it as ``None`` or
``Miss``. Exceptions are reserved for inputs that cannot produce a valid
object or a defined answer.
"""


class RaypickError(Exception):
    """Base class for all raypick errors."""


class NonInvertibleTransformError(RaypickError, ValueError):
    """The matrix (or its linear 3x3 block) is singular."""


class DegenerateRayError(RaypickError, ValueError):
    """A ray has no usable direction for the requested query."""
