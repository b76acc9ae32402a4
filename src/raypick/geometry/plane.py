"""Plane primitive: ray-plane intersection and half-space clipping.

A plane is a point on the plane plus a unit normal. The normal also picks
the accepted half-space used by clipping: a point ``p`` is inside when
``(p - position) . normal >= 0``.

Ray-plane intersection solves ``(eye + t * delta - position) . normal = 0``:

    t = (position . normal - eye . normal) / (delta . normal)

A ray whose direction is exactly perpendicular to the normal is parallel to
the plane and misses. The test is an exact comparison with zero, so a ray
that is parallel up to rounding noise may still report a very distant hit.

Example:
    >>> from raypick.core.ray import Ray
    >>> from raypick.geometry.plane import Plane
    >>> floor = Plane(position=(0.0, 0.0, 0.0), normal=(0.0, 0.0, 1.0))
    >>> floor.intersect(Ray(eye=(0.0, 0.0, -1.0), target=(0.0, 0.0, 0.0)))
    HitOnce(hit=Intersection(position=[0.0, 0.0, 0.0], normal=[-0.0, -0.0, -1.0]))
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from raypick.core.ray import FLOAT, Intersection, Ray, Vec3, VecLike, dot, vec3
from raypick.geometry.results import Clipped, HitOnce, Inside, IntersectResult, Miss, Outside


@dataclass(frozen=True, eq=False)
class Plane:
    """An infinite plane.

    Attributes:
        position: Any point on the plane.
        normal: Unit normal pointing into the accepted half-space.
    """

    position: Vec3
    normal: Vec3

    def __post_init__(self) -> None:
        normal = vec3(self.normal)
        if not np.any(normal):
            raise ValueError("Plane normal must be non-zero")
        object.__setattr__(self, "position", vec3(self.position))
        object.__setattr__(self, "normal", normal)

    def __repr__(self) -> str:
        return f"Plane(position={self.position.tolist()}, normal={self.normal.tolist()})"

    def intersect(self, ray: Ray) -> IntersectResult:
        """Intersect a ray with the plane.

        Args:
            ray: The query ray. Only points in front of ``ray.eye``
                (``t >= 0``) count.

        Returns:
            ``Miss`` if the ray is parallel to the plane or the crossing is
            behind the eye. Otherwise ``HitOnce`` whose normal faces back
            toward the eye: ``normal`` when the ray arrives from the accepted
            side, ``-normal`` when it arrives from behind.
        """
        delta = ray.delta()
        denom = dot(delta, self.normal)
        if denom == 0.0:
            return Miss()

        t = (dot(self.position, self.normal) - dot(ray.eye, self.normal)) / denom
        if t < 0.0:
            return Miss()

        position = ray.eye + FLOAT(t) * delta
        normal = self.normal if denom < 0.0 else -self.normal
        return HitOnce(Intersection(position=position, normal=normal))

    def signed_distance(self, point: VecLike) -> float:
        """Distance of ``point`` along the normal; negative when outside."""
        return dot(vec3(point) - self.position, self.normal)


def clip_point(point: VecLike, plane: Plane) -> Clipped[Vec3]:
    """Classify a point against the accepted half-space of ``plane``.

    Args:
        point: The point to classify.
        plane: The clipping plane.

    Returns:
        ``Inside(point)`` when the signed distance is non-negative.
        Otherwise ``Outside`` carrying the closest point on the plane, not
        the original point; inspect the tag to tell the two apart.
    """
    point = vec3(point)
    dist = plane.signed_distance(point)
    if dist >= 0.0:
        return Inside(point)
    return Outside(vec3(point - FLOAT(dist) * plane.normal))
