"""Unit tests for the ray module.

Tests cover:
- Ray construction, delta and parametric evaluation
- Ray equality and immutability
- Ray transformation by affine matrices
- Intersection distance and transformation
- Vector utility functions
"""

import math

import numpy as np
import pytest

from raypick.core.ray import (
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
from raypick.core.transform import compose, rotation, scaling, translation


class TestRayBasics:
    """Tests for Ray construction and derived values."""

    def test_delta_is_not_normalized(self):
        """Test delta keeps the full target - eye magnitude."""
        ray = Ray(eye=(0.0, 0.0, -10.0), target=(0.0, 0.0, 0.0))
        np.testing.assert_array_equal(ray.delta(), [0.0, 0.0, 10.0])

    def test_at(self):
        """Test at() walks along delta."""
        ray = Ray(eye=(1.0, 2.0, 3.0), target=(1.0, 2.0, 5.0))
        np.testing.assert_allclose(ray.at(0.0), [1.0, 2.0, 3.0])
        np.testing.assert_allclose(ray.at(1.0), [1.0, 2.0, 5.0])
        np.testing.assert_allclose(ray.at(-0.5), [1.0, 2.0, 2.0])

    def test_components_are_float32(self):
        """Test points are stored at pipeline precision."""
        ray = Ray(eye=(0, 0, 0), target=(1, 2, 3))
        assert ray.eye.dtype == FLOAT
        assert ray.target.dtype == FLOAT

    def test_components_are_read_only(self):
        """Test the stored arrays cannot be mutated."""
        ray = Ray(eye=(0.0, 0.0, 0.0), target=(0.0, 0.0, 1.0))
        with pytest.raises(ValueError):
            ray.eye[0] = 5.0

    def test_input_is_copied(self):
        """Test mutating the source array does not affect the ray."""
        source = np.array([1.0, 1.0, 1.0])
        ray = Ray(eye=source, target=(0.0, 0.0, 0.0))
        source[0] = 9.0
        assert ray.eye[0] == 1.0

    def test_wrong_shape_rejected(self):
        """Test a non-3-vector is rejected."""
        with pytest.raises(ValueError):
            Ray(eye=(0.0, 0.0), target=(0.0, 0.0, 1.0))


class TestRayEquality:
    """Tests for componentwise ray equality."""

    def test_equal_rays(self):
        a = Ray(eye=(0.0, 0.0, -2.0), target=(0.0, 0.0, 0.0))
        b = Ray(eye=np.array([0.0, 0.0, -2.0]), target=[0, 0, 0])
        assert a == b

    def test_different_rays(self):
        a = Ray(eye=(0.0, 0.0, -2.0), target=(0.0, 0.0, 0.0))
        b = Ray(eye=(-2.0, 0.0, -2.0), target=(0.0, 0.0, 0.0))
        assert a != b

    def test_compare_with_other_type(self):
        ray = Ray(eye=(0.0, 0.0, 0.0), target=(0.0, 0.0, 1.0))
        assert ray != (0.0, 0.0, 0.0)

    def test_unhashable(self):
        """Test rays cannot be used as dict keys or set members."""
        with pytest.raises(TypeError):
            hash(Ray(eye=(0.0, 0.0, 0.0), target=(0.0, 0.0, 1.0)))


class TestRayTransform:
    """Tests for Ray.transform."""

    def test_translation(self):
        """Test a translation moves eye and target by the offset."""
        ray = Ray(eye=(0.0, 0.0, 0.0), target=(0.0, 0.0, 5.0))
        moved = ray.transform(translation((1.0, 1.0, 1.0)))
        np.testing.assert_allclose(moved.eye, [1.0, 1.0, 1.0])
        np.testing.assert_allclose(moved.target, [1.0, 1.0, 6.0])

    def test_round_trip(self):
        """Test transforming by M then M^-1 recovers the ray."""
        ray = Ray(eye=(0.5, -1.0, 2.0), target=(3.0, 4.0, -1.5))
        matrix = compose(
            translation((2.0, -3.0, 1.0)),
            rotation((1.0, 1.0, 0.0), 0.7),
            scaling((2.0, 0.5, 3.0)),
        )
        back = ray.transform(matrix).transform(np.linalg.inv(matrix))
        np.testing.assert_allclose(back.eye, ray.eye, atol=1e-4)
        np.testing.assert_allclose(back.target, ray.target, atol=1e-4)

    def test_transform_point_divides_by_w(self):
        """Test homogeneous points are divided by w."""
        matrix = np.identity(4, dtype=np.float32)
        matrix[3, 3] = 2.0
        np.testing.assert_allclose(transform_point(matrix, (2.0, 4.0, 6.0)), [1.0, 2.0, 3.0])


class TestIntersection:
    """Tests for Intersection."""

    def test_distance(self):
        """Test distance is measured from the ray eye."""
        ray = Ray(eye=(0.0, 0.0, -10.0), target=(0.0, 0.0, 0.0))
        hit = Intersection(position=(0.0, 3.0, -6.0), normal=(0.0, 0.0, -1.0))
        assert hit.distance(ray) == pytest.approx(5.0)

    def test_transform_renormalizes_normal(self):
        """Test the normal is renormalized after the normal matrix."""
        hit = Intersection(position=(1.0, 0.0, 0.0), normal=(1.0, 0.0, 0.0))
        moved = hit.transform(translation((0.0, 2.0, 0.0)), np.identity(3) * 4.0)
        np.testing.assert_allclose(moved.position, [1.0, 2.0, 0.0])
        np.testing.assert_allclose(moved.normal, [1.0, 0.0, 0.0])

    def test_equality(self):
        a = Intersection(position=(0.0, 0.0, -5.0), normal=(0.0, 0.0, -1.0))
        b = Intersection(position=(0.0, 0.0, -5.0), normal=(0.0, 0.0, -1.0))
        c = Intersection(position=(0.0, 0.0, 5.0), normal=(0.0, 0.0, 1.0))
        assert a == b
        assert a != c

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Intersection(position=(0.0, 0.0, -5.0), normal=(0.0, 0.0, -1.0)))


class TestVectorUtilities:
    """Tests for vector helper functions."""

    def test_dot(self):
        assert dot((1.0, 2.0, 3.0), (4.0, 5.0, 6.0)) == pytest.approx(32.0)

    def test_cross(self):
        np.testing.assert_allclose(cross((1.0, 0.0, 0.0), (0.0, 1.0, 0.0)), [0.0, 0.0, 1.0])

    def test_length(self):
        assert length((3.0, 4.0, 0.0)) == pytest.approx(5.0)
        assert length_squared((3.0, 4.0, 0.0)) == pytest.approx(25.0)

    def test_normalize(self):
        unit = normalize(vec3((0.0, 3.0, 4.0)))
        np.testing.assert_allclose(unit, [0.0, 0.6, 0.8], rtol=1e-6)
        assert length(unit) == pytest.approx(1.0)

    def test_normalize_zero_is_nan(self):
        """Test a zero vector has no direction."""
        assert all(math.isnan(c) for c in normalize((0.0, 0.0, 0.0)))
