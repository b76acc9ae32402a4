"""Orbit camera: screen-space picking rays and rotation updates.

This is the boundary between raypick and an interactive viewer. The viewer
owns the window and the renderer; it hands pointer positions to
``OrbitCamera.screen_ray`` to get rays in world space, passes pairs of rays
to ``VirtualTrackball.compute`` and applies the resulting rotation with
``OrbitCamera.rotated``.

Screen rays are built by turning the view direction by angles proportional
to the pointer offset from the screen centre:

    fovx   = fovy * width / height
    yaw    = -(x / width * fovx - fovx / 2)     about up
    pitch  = -(y / height * fovy - fovy / 2)    about direction x up

with pixel ``(0, 0)`` at the top-left corner.

Example:
    >>> from raypick.camera.orbit import OrbitCamera
    >>> from raypick.camera.trackball import VirtualTrackball
    >>> camera = OrbitCamera(eye=(0.0, 0.0, -3.0))
    >>> trackball = VirtualTrackball(position=camera.target, radius=1.0)
    >>> start = camera.screen_ray(400, 300, 800, 600)
    >>> end = camera.screen_ray(420, 300, 800, 600)
    >>> rotation = trackball.compute(start, end)
    >>> if rotation is not None:
    ...     axis, angle = rotation
    ...     camera = camera.rotated(axis, -angle)
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Optional

import numpy as np

from raypick.core.ray import FLOAT, Ray, Vec3, VecLike, normalize, transform_point
from raypick.core.transform import compose, rotation, translation


def _as_tuple(v: np.ndarray) -> tuple[float, float, float]:
    return (float(v[0]), float(v[1]), float(v[2]))


@dataclass(frozen=True)
class OrbitCamera:
    """View parameters of a perspective camera.

    Attributes:
        eye: Camera position in world space (x, y, z).
        target: Point the camera looks at in world space (x, y, z).
        up: Up direction for camera orientation.
        fovy: Vertical field of view in degrees.
        aspect: Width divided by height of the viewport.
    """

    eye: tuple[float, float, float] = (0.0, 0.0, -1.0)
    target: tuple[float, float, float] = (0.0, 0.0, 0.0)
    up: tuple[float, float, float] = (0.0, 1.0, 0.0)
    fovy: float = 60.0
    aspect: float = 1.0

    def forward(self) -> Vec3:
        """Unit view direction."""
        return normalize(np.subtract(self.target, self.eye, dtype=FLOAT))

    def right(self) -> Vec3:
        """Unit vector pointing to the right of the view."""
        delta = np.subtract(self.target, self.eye, dtype=FLOAT)
        return normalize(np.cross(delta, np.asarray(self.up, dtype=FLOAT)))

    def screen_ray(self, x: float, y: float, width: float, height: float) -> Ray:
        """Ray from the eye through a pointer position.

        Args:
            x: Pointer column in pixels, 0 at the left edge.
            y: Pointer row in pixels, 0 at the top edge.
            width: Viewport width in pixels.
            height: Viewport height in pixels.

        Returns:
            A ray whose eye is the camera eye and whose target lies one view
            distance away in the picked direction.

        Raises:
            ValueError: If the viewport size is not positive.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Viewport size must be positive, got {width}x{height}")

        fovx = self.fovy * width / height
        yaw = math.radians(-((x / width) * fovx - fovx / 2.0))
        pitch = math.radians(-((y / height) * self.fovy - self.fovy / 2.0))

        direction = np.subtract(self.target, self.eye, dtype=FLOAT)
        up = np.asarray(self.up, dtype=FLOAT)
        turn = compose(rotation(up, yaw), rotation(np.cross(direction, up), pitch))
        rotated = turn[:3, :3] @ direction

        eye = np.asarray(self.eye, dtype=FLOAT)
        return Ray(eye=eye, target=eye + rotated)

    def rotated(self, axis: VecLike, angle: float, pivot: Optional[VecLike] = None) -> OrbitCamera:
        """Camera rotated by ``angle`` radians about ``axis`` through ``pivot``.

        Eye and target orbit the pivot; ``up`` turns with them. The pivot
        defaults to the current target.
        """
        pivot = np.asarray(self.target if pivot is None else pivot, dtype=FLOAT)
        turn = rotation(axis, angle)
        about_pivot = compose(translation(pivot), turn, translation(-pivot))
        up = turn[:3, :3] @ np.asarray(self.up, dtype=FLOAT)
        return replace(
            self,
            eye=_as_tuple(transform_point(about_pivot, self.eye)),
            target=_as_tuple(transform_point(about_pivot, self.target)),
            up=_as_tuple(up),
        )
