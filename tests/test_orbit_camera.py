"""Unit tests for the orbit camera.

Tests cover:
- Camera basis vectors
- Screen-space ray construction from pointer positions
- Applying rotations about a pivot
- Driving the camera from trackball drags
"""

import dataclasses
import math

import numpy as np
import pytest

from raypick.camera.orbit import OrbitCamera
from raypick.camera.trackball import VirtualTrackball


class TestCameraBasis:
    """Tests for forward / right vectors."""

    def test_defaults(self):
        camera = OrbitCamera()
        assert camera.eye == (0.0, 0.0, -1.0)
        assert camera.target == (0.0, 0.0, 0.0)
        assert camera.up == (0.0, 1.0, 0.0)
        assert camera.fovy == 60.0

    def test_forward(self):
        camera = OrbitCamera(eye=(0.0, 0.0, -5.0))
        np.testing.assert_allclose(camera.forward(), [0.0, 0.0, 1.0])

    def test_right(self):
        """Test right is forward x up."""
        np.testing.assert_allclose(OrbitCamera().right(), [-1.0, 0.0, 0.0])

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            OrbitCamera().fovy = 45.0


class TestScreenRay:
    """Tests for OrbitCamera.screen_ray."""

    def test_centre_looks_forward(self):
        camera = OrbitCamera(eye=(0.0, 0.0, -3.0))
        ray = camera.screen_ray(400, 300, 800, 600)
        np.testing.assert_allclose(ray.eye, [0.0, 0.0, -3.0])
        np.testing.assert_allclose(ray.target, [0.0, 0.0, 0.0], atol=1e-6)

    def test_left_edge_turns_right_handed_left(self):
        """Test the left edge is half the horizontal field of view off-axis."""
        camera = OrbitCamera(fovy=90.0)
        ray = camera.screen_ray(0, 50, 100, 100)
        direction = ray.delta() / np.linalg.norm(ray.delta())
        np.testing.assert_allclose(direction, [math.sqrt(0.5), 0.0, math.sqrt(0.5)], atol=1e-6)
        assert np.dot(direction, camera.right()) < 0.0

    def test_top_edge_turns_up(self):
        camera = OrbitCamera(fovy=90.0)
        ray = camera.screen_ray(50, 0, 100, 100)
        direction = ray.delta() / np.linalg.norm(ray.delta())
        np.testing.assert_allclose(direction, [0.0, math.sqrt(0.5), math.sqrt(0.5)], atol=1e-6)

    def test_aspect_widens_horizontal_fov(self):
        """Test the horizontal angle scales with width / height."""
        camera = OrbitCamera(fovy=40.0)
        ray = camera.screen_ray(0, 50, 200, 100)
        direction = ray.delta() / np.linalg.norm(ray.delta())
        assert math.degrees(math.atan2(direction[0], direction[2])) == pytest.approx(40.0, rel=1e-5)

    @pytest.mark.parametrize("size", [(0, 100), (100, 0), (-1, 10)])
    def test_invalid_viewport(self, size):
        with pytest.raises(ValueError):
            OrbitCamera().screen_ray(0, 0, *size)


class TestRotated:
    """Tests for OrbitCamera.rotated."""

    def test_quarter_turn_about_target(self):
        camera = OrbitCamera().rotated((0.0, 1.0, 0.0), math.pi / 2.0)
        np.testing.assert_allclose(camera.eye, [-1.0, 0.0, 0.0], atol=1e-6)
        np.testing.assert_allclose(camera.target, [0.0, 0.0, 0.0], atol=1e-6)
        np.testing.assert_allclose(camera.up, [0.0, 1.0, 0.0], atol=1e-6)

    def test_up_turns_with_camera(self):
        camera = OrbitCamera().rotated((0.0, 0.0, 1.0), math.pi / 2.0)
        np.testing.assert_allclose(camera.up, [-1.0, 0.0, 0.0], atol=1e-6)
        np.testing.assert_allclose(camera.eye, [0.0, 0.0, -1.0], atol=1e-6)

    def test_explicit_pivot(self):
        camera = OrbitCamera(eye=(0.0, 0.0, -1.0), target=(0.0, 0.0, 1.0))
        turned = camera.rotated((0.0, 1.0, 0.0), math.pi, pivot=(0.0, 0.0, 0.0))
        np.testing.assert_allclose(turned.eye, [0.0, 0.0, 1.0], atol=1e-6)
        np.testing.assert_allclose(turned.target, [0.0, 0.0, -1.0], atol=1e-6)

    def test_original_unchanged(self):
        camera = OrbitCamera()
        camera.rotated((0.0, 1.0, 0.0), 1.0)
        assert camera.eye == (0.0, 0.0, -1.0)

    def test_keeps_other_fields(self):
        camera = OrbitCamera(fovy=35.0, aspect=1.5).rotated((1.0, 0.0, 0.0), 0.2)
        assert camera.fovy == 35.0
        assert camera.aspect == 1.5


class TestTrackballDrag:
    """Tests for driving the camera from trackball drags."""

    def test_drag_orbits_at_constant_distance(self):
        camera = OrbitCamera(eye=(0.0, 0.0, -3.0))
        trackball = VirtualTrackball(position=camera.target, radius=1.0)
        start = camera.screen_ray(400, 300, 800, 600)
        end = camera.screen_ray(460, 280, 800, 600)
        axis, angle = trackball.compute(start, end)
        moved = camera.rotated(axis, -angle)
        assert np.linalg.norm(moved.eye) == pytest.approx(3.0, rel=1e-5)
        assert moved.target == pytest.approx((0.0, 0.0, 0.0), abs=1e-6)
        assert moved.eye != pytest.approx(camera.eye)

    def test_no_drag_no_rotation(self):
        camera = OrbitCamera(eye=(0.0, 0.0, -3.0))
        trackball = VirtualTrackball(position=camera.target, radius=1.0)
        ray = camera.screen_ray(123, 45, 800, 600)
        assert trackball.compute(ray, ray) is None

    def test_outward_drag_past_silhouette_keeps_camera_finite(self):
        """Test frames that project to one sphere point leave the camera usable."""
        camera = OrbitCamera(eye=(0.0, 0.0, -5.0))
        trackball = VirtualTrackball(position=camera.target, radius=1.0)
        previous = camera.screen_ray(700, 300, 800, 600)
        for x in (720, 740, 760):
            current = camera.screen_ray(x, 300, 800, 600)
            rotation = trackball.compute(previous, current)
            if rotation is not None:
                axis, angle = rotation
                camera = camera.rotated(axis, -angle)
            previous = current
        assert np.all(np.isfinite(camera.eye + camera.target + camera.up))
        assert np.linalg.norm(camera.eye) == pytest.approx(5.0, rel=1e-5)
