"""Composable scene algebra evaluated per ray by recursive descent.

A model is an immutable tree built from six node types:

    Object(primitive)         a single Plane, Ball or other Primitive
    Scene(children)           the nearest hit among any number of models
    Transformed(t, child)     ``child`` defined in the local space of ``t``
    Clip(plane, child)        hits of ``child`` in the plane's half-space
    And(a, b)                 both must hit; the nearer hit wins
    Or(a, b)                  either may hit; the nearer hit wins

"Nearer" always means nearer to the eye of the ray being evaluated. Every
query is a pure function of (model, ray), so a tree can be shared freely
across threads once built. There is no acceleration structure; scenes are
expected to be small.

``And`` and ``Or`` compare single nearest hits rather than walking the
in/out intervals of each solid along the ray. This is exact for the
single-ball trackball and for disjoint convex parts, but nested booleans
of overlapping solids can report a surface that is not on the true
boolean result.

Example:
    >>> from raypick.core.ray import Ray
    >>> from raypick.core.transform import Transform, translation
    >>> from raypick.geometry import Ball, Plane
    >>> from raypick.scene.model import Clip, Object, Scene, Transformed
    >>> hemisphere = Clip(
    ...     Plane(position=(0.0, 0.0, 0.0), normal=(0.0, 1.0, 0.0)),
    ...     Object(Ball(1.0)),
    ... )
    >>> scene = Scene([
    ...     hemisphere,
    ...     Transformed(Transform(translation((3.0, 0.0, 0.0))), Object(Ball(0.5))),
    ... ])
    >>> scene.intersect(Ray(eye=(3.0, 0.0, -5.0), target=(3.0, 0.0, 0.0))).position
    array([ 3. ,  0. , -0.5], dtype=float32)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Protocol, runtime_checkable

from raypick.core.ray import Intersection, Ray
from raypick.core.transform import Transform
from raypick.geometry.plane import Plane, clip_point
from raypick.geometry.results import Inside, IntersectResult


@runtime_checkable
class Primitive(Protocol):
    """Anything that can answer a single-shape ray query."""

    def intersect(self, ray: Ray) -> IntersectResult: ...


def _nearer(ray: Ray, a: Intersection, b: Intersection) -> Intersection:
    """Return ``a`` if strictly nearer ``ray.eye`` than ``b``, else ``b``."""
    return a if a.distance(ray) < b.distance(ray) else b


class Model:
    """Base class of all scene nodes."""

    __slots__ = ()

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        """Nearest qualifying hit of ``ray``, or None on a miss."""
        raise NotImplementedError

    def test(self, ray: Ray) -> bool:
        """True when ``ray`` hits the model."""
        return self.intersect(ray) is not None


@dataclass(frozen=True)
class Object(Model):
    """Leaf node wrapping a single primitive."""

    primitive: Primitive

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        return self.primitive.intersect(ray).closest()


@dataclass(frozen=True, init=False)
class Scene(Model):
    """Group of models; the hit nearest the eye wins.

    Every child sees the original ray. Ties keep the first child reaching
    the minimum distance. An empty scene never hits.
    """

    children: tuple[Model, ...]

    def __init__(self, children: Iterable[Model] = ()) -> None:
        object.__setattr__(self, "children", tuple(children))

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        nearest: Optional[Intersection] = None
        nearest_distance = 0.0
        for child in self.children:
            hit = child.intersect(ray)
            if hit is None:
                continue
            distance = hit.distance(ray)
            if nearest is None or distance < nearest_distance:
                nearest, nearest_distance = hit, distance
        return nearest


@dataclass(frozen=True)
class Transformed(Model):
    """Places ``child``, defined in local coordinates, into the parent space."""

    transform: Transform
    child: Model

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        hit = self.child.intersect(self.transform.apply_forward(ray))
        if hit is None:
            return None
        return self.transform.apply_backward(hit)


@dataclass(frozen=True)
class Clip(Model):
    """Keeps hits of ``child`` lying in the accepted half-space of ``plane``.

    A hit on the rejected side is dropped, not projected onto the plane, and
    the surface behind it is not searched: clipping cuts the surface away
    and does not expose the far side of a solid.
    """

    plane: Plane
    child: Model

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        hit = self.child.intersect(ray)
        if hit is None:
            return None
        if isinstance(clip_point(hit.position, self.plane), Inside):
            return hit
        return None


@dataclass(frozen=True)
class And(Model):
    """Both children must hit; returns the nearer of the two hits."""

    a: Model
    b: Model

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        hit_a = self.a.intersect(ray)
        if hit_a is None:
            return None
        hit_b = self.b.intersect(ray)
        if hit_b is None:
            return None
        return _nearer(ray, hit_a, hit_b)


@dataclass(frozen=True)
class Or(Model):
    """Either child may hit; returns the nearer hit when both do."""

    a: Model
    b: Model

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        hit_a = self.a.intersect(ray)
        hit_b = self.b.intersect(ray)
        if hit_a is None:
            return hit_b
        if hit_b is None:
            return hit_a
        return _nearer(ray, hit_a, hit_b)
