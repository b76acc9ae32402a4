"""Affine transforms for moving rays into local space and hits back out.

A ``Transform`` is built once from a 4x4 affine matrix and precomputes the
three matrices needed by the scene algebra:

- ``affine``: local to world, applied to hit positions.
- ``inverse_affine``: world to local, applied to query rays.
- ``normal``: inverse-transpose of the linear 3x3 block, applied to hit
  normals. Positions and normals transform differently under non-uniform
  scaling, so the linear block must be invertible.

Matrices act on column vectors, so ``compose(a, b)`` applies ``b`` first.

Example:
    >>> from raypick.core.ray import Ray
    >>> from raypick.core.transform import Transform, translation
    >>> t = Transform(translation((1.0, 2.0, 3.0)))
    >>> t.apply_forward(Ray(eye=(1.0, 2.0, 0.0), target=(1.0, 2.0, 3.0)))
    Ray(eye=[0.0, 0.0, -3.0], target=[0.0, 0.0, 0.0])
"""

from __future__ import annotations

import logging
import math
from functools import reduce

import numpy as np
import numpy.typing as npt

from raypick.core.errors import NonInvertibleTransformError
from raypick.core.ray import FLOAT, Intersection, Ray, VecLike, normalize, vec3

logger = logging.getLogger(__name__)

Mat4 = npt.NDArray[np.float32]
Mat3 = npt.NDArray[np.float32]


# =============================================================================
# Matrix Constructors
# =============================================================================


def identity() -> Mat4:
    """4x4 identity matrix."""
    return np.identity(4, dtype=FLOAT)


def translation(offset: VecLike) -> Mat4:
    """Matrix translating points by ``offset``."""
    matrix = identity()
    matrix[:3, 3] = vec3(offset)
    return matrix


def scaling(factors: float | VecLike) -> Mat4:
    """Matrix scaling about the origin.

    Args:
        factors: A single uniform factor or one factor per axis.
    """
    if np.isscalar(factors):
        factors = (factors, factors, factors)
    matrix = identity()
    matrix[:3, :3] = np.diag(vec3(factors))
    return matrix


def rotation(axis: VecLike, angle: float) -> Mat4:
    """Right-handed rotation of ``angle`` radians about ``axis``.

    Built with Rodrigues' formula. ``axis`` need not be unit length.

    Raises:
        ValueError: If ``axis`` is the zero vector or not finite.
    """
    axis = np.asarray(axis, dtype=np.float64)
    norm = np.linalg.norm(axis)
    if norm == 0.0 or not np.isfinite(norm):
        raise ValueError(f"Rotation axis must be finite and non-zero, got {axis.tolist()}")
    x, y, z = axis / norm
    k = np.array([[0.0, -z, y], [z, 0.0, -x], [-y, x, 0.0]])
    linear = np.identity(3) + math.sin(angle) * k + (1.0 - math.cos(angle)) * (k @ k)
    matrix = identity()
    matrix[:3, :3] = linear
    return matrix


def compose(*matrices: npt.NDArray[np.floating]) -> Mat4:
    """Matrix product of ``matrices`` from left to right.

    The rightmost matrix is applied to a point first.
    """
    if not matrices:
        return identity()
    return reduce(np.matmul, (np.asarray(m, dtype=FLOAT) for m in matrices))


# =============================================================================
# Transform
# =============================================================================


class Transform:
    """Precomputed forward, inverse and normal matrices of an affine map.

    Attributes:
        affine: The original 4x4 matrix (local to world).
        inverse_affine: Its inverse (world to local).
        normal: Inverse-transpose of the linear 3x3 block of ``affine``.

    Raises:
        NonInvertibleTransformError: If the matrix or its linear block is
            singular. There is no identity fallback; a caller that cannot
            build the transform must not build the node that needs it.
    """

    __slots__ = ("affine", "inverse_affine", "normal")

    def __init__(self, matrix: npt.NDArray[np.floating]) -> None:
        affine = np.array(matrix, dtype=FLOAT)
        if affine.shape != (4, 4):
            raise ValueError(f"Expected a 4x4 matrix, got shape {affine.shape}")
        try:
            linear_inverse = np.linalg.inv(affine[:3, :3])
            inverse_affine = np.linalg.inv(affine)
        except np.linalg.LinAlgError as e:
            logger.debug("Rejected singular transform matrix:\n%s", affine)
            raise NonInvertibleTransformError("non-invertible transform") from e
        if not (np.all(np.isfinite(linear_inverse)) and np.all(np.isfinite(inverse_affine))):
            logger.debug("Rejected transform with non-finite inverse:\n%s", affine)
            raise NonInvertibleTransformError("non-invertible transform")

        affine.setflags(write=False)
        inverse_affine.setflags(write=False)
        normal = np.ascontiguousarray(linear_inverse.T)
        normal.setflags(write=False)

        self.affine: Mat4 = affine
        self.inverse_affine: Mat4 = inverse_affine
        self.normal: Mat3 = normal

    @classmethod
    def from_matrix(cls, matrix: npt.NDArray[np.floating]) -> Transform:
        """Alias of the constructor, for symmetry with the matrix helpers."""
        return cls(matrix)

    def __repr__(self) -> str:
        return f"Transform(affine={self.affine.tolist()})"

    def apply_forward(self, ray: Ray) -> Ray:
        """Map a world-space ray into this transform's local space."""
        return ray.transform(self.inverse_affine)

    def apply_backward(self, intersection: Intersection) -> Intersection:
        """Map a local-space hit back to world space.

        The position goes through ``affine``; the normal goes through
        ``normal`` and is renormalized.
        """
        return intersection.transform(self.affine, self.normal)

    def inverse(self) -> Transform:
        """Transform undoing this one."""
        return Transform(self.inverse_affine)

    def then(self, other: Transform) -> Transform:
        """Transform applying ``self`` first and ``other`` second."""
        return Transform(compose(other.affine, self.affine))

    def transform_normal(self, normal: VecLike) -> npt.NDArray[np.floating]:
        """Map a single local-space normal to world space, renormalized."""
        return normalize(self.normal @ vec3(normal))
