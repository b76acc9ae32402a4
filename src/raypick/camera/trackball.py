"""Virtual trackball mapping pointer drags to 3D rotations.

The trackball is a sphere placed in the scene. A drag produces two rays,
one through the pointer position where the drag started and one through its
current position. Each ray is mapped to a point on the sphere, and the
rotation carrying the first point to the second becomes the drag result
(Shoemake's virtual trackball).

Rays that pass outside the sphere's silhouette are common near the edges of
the screen. They are handled by intersecting a plane through the centre,
facing the eye, and pushing the planar hit out radially onto the sphere.
A drag whose rays cannot be mapped, or whose points give no rotation axis,
reports no rotation.

The axis and angle are computed in double precision. Drag vectors from
consecutive frames are nearly parallel, and single precision loses most of
the cross product to cancellation.

Example:
    >>> import math
    >>> from raypick.camera.trackball import VirtualTrackball
    >>> from raypick.core.ray import Ray
    >>> trackball = VirtualTrackball(position=(0.0, 0.0, 0.0), radius=1.0)
    >>> axis, angle = trackball.compute(
    ...     Ray(eye=(0.0, 0.0, -2.0), target=(0.0, 0.0, 0.0)),
    ...     Ray(eye=(-2.0, 0.0, -2.0), target=(0.0, 0.0, 0.0)),
    ... )
    >>> round(math.degrees(angle), 3)
    45.0
"""

from __future__ import annotations

import logging
import math
from typing import Optional

import numpy as np

from raypick.core.errors import DegenerateRayError
from raypick.core.ray import DOUBLE, FLOAT, Ray, Vec3, VecLike, vec3
from raypick.core.transform import Transform, translation
from raypick.geometry.ball import Ball
from raypick.geometry.plane import Plane
from raypick.scene.model import Model, Object, Transformed

logger = logging.getLogger(__name__)


class VirtualTrackball:
    """A sphere used to turn drags into rotations.

    The trackball holds no state between calls. It can be built once per
    interaction and queried every frame, from any thread.

    Args:
        position: World-space centre of the sphere.
        radius: Sphere radius, positive.

    Raises:
        ValueError: If ``radius`` is not positive.
        NonInvertibleTransformError: If the placement transform cannot be
            inverted. A pure translation always can.
    """

    __slots__ = ("_position", "_radius", "_model")

    def __init__(self, position: VecLike, radius: float) -> None:
        self._position: Vec3 = vec3(position)
        self._radius = float(radius)
        self._model: Model = Transformed(
            Transform(translation(self._position)),
            Object(Ball(self._radius)),
        )

    def __repr__(self) -> str:
        return f"VirtualTrackball(position={self._position.tolist()}, radius={self._radius})"

    @property
    def position(self) -> Vec3:
        """World-space centre."""
        return self._position

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def model(self) -> Model:
        """The wrapped sphere model."""
        return self._model

    def _surface_point(self, ray: Ray) -> Vec3:
        """Point on the sphere picked by ``ray``.

        Uses the nearest sphere hit when there is one. Otherwise intersects
        the plane through the centre whose normal points from the eye to the
        centre, and projects that point radially onto the sphere.

        Raises:
            DegenerateRayError: If the fallback plane is undefined (eye at
                the centre), the ray never reaches it, or it lands exactly
                on the centre.
        """
        hit = self._model.intersect(ray)
        if hit is not None:
            return hit.position

        towards_centre = self._position - ray.eye
        if not np.any(towards_centre):
            raise DegenerateRayError("Ray eye coincides with the trackball centre")
        plane = Plane(position=self._position, normal=towards_centre / np.linalg.norm(towards_centre))
        planar = plane.intersect(ray).closest()
        if planar is None:
            raise DegenerateRayError(f"{ray!r} does not reach the trackball plane")

        offset = planar.position - self._position
        norm = np.linalg.norm(offset)
        if norm == 0.0:
            raise DegenerateRayError(f"{ray!r} passes through the trackball centre")
        logger.debug("%r misses the trackball; projected from plane hit %s", ray, planar.position)
        return vec3(self._position + offset / norm * FLOAT(self._radius))

    def compute(self, start: Ray, end: Ray) -> Optional[tuple[Vec3, float]]:
        """Rotation carrying the drag start point to the drag end point.

        Args:
            start: Ray through the pointer where the drag began.
            end: Ray through the pointer now.

        Returns:
            ``(axis, angle)`` with a unit ``float32`` axis and the angle in
            radians, or None when there is no rotation to apply: the rays
            are equal, both pick the same surface point (or opposite ones,
            where the axis is undefined), or either ray cannot be mapped to
            the sphere.
        """
        if start == end:
            logger.debug("Drag without movement; no rotation")
            return None

        try:
            start_point = self._surface_point(start)
            end_point = self._surface_point(end)
        except DegenerateRayError as e:
            logger.debug("Drag not mapped to the trackball: %s", e)
            return None

        start_vec = (start_point - self._position).astype(DOUBLE)
        end_vec = (end_point - self._position).astype(DOUBLE)

        normal = np.cross(start_vec, end_vec)
        normal_length = np.linalg.norm(normal)
        if normal_length == 0.0:
            logger.debug("Drag points are collinear with the centre; no rotation")
            return None
        axis = normal / normal_length
        angle = math.atan2(normal_length, float(np.dot(start_vec, end_vec)))
        return axis.astype(FLOAT), float(np.float32(angle))

    def test(self, ray: Ray) -> bool:
        """True when ``ray`` hits the sphere itself (no plane fallback)."""
        return self._model.test(ray)
