"""Ray and intersection value types plus vector utilities.

Points and vectors are NumPy ``float32`` arrays of shape ``(3,)``. Values
stored on a ``Ray`` or ``Intersection`` are read-only copies, so both types
are safe to share between queries.

A ray is described by two points rather than an origin and a direction. The
direction is derived on demand by ``delta()`` and is deliberately left
unnormalized: its magnitude sets the parametric scale ``t`` used by the
root finders in ``raypick.geometry``.

Example:
    >>> from raypick.core.ray import Ray
    >>> ray = Ray(eye=(0.0, 0.0, -10.0), target=(0.0, 0.0, 0.0))
    >>> ray.delta()
    array([ 0.,  0., 10.], dtype=float32)
    >>> ray.at(0.5)
    array([ 0.,  0., -5.], dtype=float32)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np
import numpy.typing as npt

# Pipeline precision for points, vectors and matrices
FLOAT = np.float32
# Precision used where cancellation matters (see camera.trackball)
DOUBLE = np.float64

Vec3 = npt.NDArray[np.float32]
VecLike = Union[Sequence[float], npt.NDArray[np.floating]]


# =============================================================================
# Vector Utility Functions
# =============================================================================


def vec3(value: VecLike, dtype: npt.DTypeLike = FLOAT) -> Vec3:
    """Convert a 3-sequence to a read-only vector.

    Args:
        value: Any sequence or array with exactly three components.
        dtype: Component type, ``float32`` unless stated otherwise.

    Returns:
        A new read-only array of shape (3,).

    Raises:
        ValueError: If ``value`` does not hold exactly three components.
    """
    result = np.array(value, dtype=dtype)
    if result.shape != (3,):
        raise ValueError(f"Expected a 3-component vector, got shape {result.shape}")
    result.setflags(write=False)
    return result


def dot(a: VecLike, b: VecLike) -> float:
    """Dot product of two vectors."""
    return float(np.dot(a, b))


def cross(a: VecLike, b: VecLike) -> Vec3:
    """Cross product of two vectors, keeping the precision of the inputs."""
    return np.cross(a, b)


def length(v: VecLike) -> float:
    """Euclidean length of a vector."""
    return float(np.linalg.norm(v))


def length_squared(v: VecLike) -> float:
    """Squared length, avoiding the square root when comparing magnitudes."""
    return float(np.dot(v, v))


def normalize(v: VecLike) -> npt.NDArray[np.floating]:
    """Scale a vector to unit length.

    A zero vector has no direction and comes back as NaNs, matching the
    behavior of the usual ``v / |v|`` formula. Callers that can see a zero
    vector must check for it first.
    """
    v = np.asarray(v)
    with np.errstate(invalid="ignore", divide="ignore"):
        return v / np.linalg.norm(v)


def transform_point(matrix: npt.NDArray[np.floating], point: VecLike) -> Vec3:
    """Map a point through a 4x4 affine matrix in homogeneous coordinates.

    Args:
        matrix: A 4x4 matrix acting on column vectors.
        point: The point to map.

    Returns:
        The mapped point, divided through by the homogeneous coordinate.
    """
    homogeneous = matrix @ np.append(np.asarray(point, dtype=FLOAT), FLOAT(1.0))
    return vec3(homogeneous[:3] / homogeneous[3])


# =============================================================================
# Value Types
# =============================================================================


@dataclass(frozen=True, eq=False)
class Ray:
    """A ray through two points.

    Attributes:
        eye: The origin of the ray.
        target: A second point on the ray. ``target - eye`` is the direction.
    """

    eye: Vec3
    target: Vec3

    def __post_init__(self) -> None:
        object.__setattr__(self, "eye", vec3(self.eye))
        object.__setattr__(self, "target", vec3(self.target))

    # Compared by array value, so unhashable like the arrays themselves.
    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ray):
            return NotImplemented
        return bool(np.array_equal(self.eye, other.eye) and np.array_equal(self.target, other.target))

    def __repr__(self) -> str:
        return f"Ray(eye={self.eye.tolist()}, target={self.target.tolist()})"

    def delta(self) -> Vec3:
        """Return ``target - eye`` without normalizing it."""
        return self.target - self.eye

    def at(self, t: float) -> Vec3:
        """Point at parameter ``t``: ``eye + t * delta()``."""
        return self.eye + FLOAT(t) * self.delta()

    def transform(self, matrix: npt.NDArray[np.floating]) -> Ray:
        """Map both points of the ray through a 4x4 affine matrix."""
        return Ray(eye=transform_point(matrix, self.eye), target=transform_point(matrix, self.target))


@dataclass(frozen=True, eq=False)
class Intersection:
    """A surface hit.

    Attributes:
        position: World-space point where the surface was hit.
        normal: Unit surface normal at ``position``.
    """

    position: Vec3
    normal: Vec3

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", vec3(self.position))
        object.__setattr__(self, "normal", vec3(self.normal))

    # Compared by array value, so unhashable like the arrays themselves.
    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return bool(
            np.array_equal(self.position, other.position) and np.array_equal(self.normal, other.normal)
        )

    def __repr__(self) -> str:
        return f"Intersection(position={self.position.tolist()}, normal={self.normal.tolist()})"

    def distance(self, ray: Ray) -> float:
        """Euclidean distance from ``ray.eye`` to the hit position."""
        return length(self.position - ray.eye)

    def transform(
        self,
        position_transform: npt.NDArray[np.floating],
        normal_transform: npt.NDArray[np.floating],
    ) -> Intersection:
        """Map the hit through a pair of matrices.

        Args:
            position_transform: 4x4 affine matrix applied to the position.
            normal_transform: 3x3 matrix applied to the normal, usually the
                inverse-transpose of the linear part of ``position_transform``.

        Returns:
            The mapped intersection, with the normal renormalized.
        """
        return Intersection(
            position=transform_point(position_transform, self.position),
            normal=normalize(normal_transform @ self.normal),
        )
