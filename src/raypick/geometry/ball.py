"""Ball primitive with closed-form ray-sphere intersection.

The ball is centred at the local origin; placing it anywhere else is the job
of an enclosing ``Transformed`` model node. A point ``eye + t * delta`` lies
on the sphere when

    |eye + t * delta|^2 = radius^2

which expands to the quadratic ``a*t^2 + b*t + c = 0`` with

    a = delta . delta
    b = 2 * (eye . delta)
    c = eye . eye - radius^2

Roots are taken along the whole line: a ray starting inside the ball also
reports the point behind its eye. Normals point away from the centre.

Example:
    >>> from raypick.core.ray import Ray
    >>> from raypick.geometry.ball import Ball
    >>> Ball(5.0).intersect(Ray(eye=(5.0, 0.0, -10.0), target=(5.0, 0.0, 0.0)))
    HitOnce(hit=Intersection(position=[5.0, 0.0, 0.0], normal=[1.0, 0.0, 0.0]))
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from raypick.core.ray import Intersection, Ray, dot, normalize
from raypick.geometry.results import HitOnce, HitTwice, IntersectResult, Miss


def _solve_linear(b: float, c: float) -> tuple[float, ...]:
    """Roots of ``b*t + c = 0``.

    A vanishing equation (``b == c == 0``) is satisfied everywhere; ``t = 0``
    stands in for the whole line.
    """
    if b == 0.0:
        return (0.0,) if c == 0.0 else ()
    return (-c / b,)


def _solve_quadratic(a: float, b: float, c: float) -> tuple[float, ...]:
    """Real roots of ``a*t^2 + b*t + c = 0`` in increasing order.

    Args:
        a: Quadratic coefficient. Zero degrades to the linear equation.
        b: Linear coefficient.
        c: Constant term.

    Returns:
        An empty tuple when there are no real roots, one root when the
        discriminant is exactly zero, otherwise two roots with ``t0 < t1``.
    """
    if a == 0.0:
        return _solve_linear(b, c)

    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return ()

    a2 = 2.0 * a
    frac = -b / a2
    if discriminant == 0.0:
        return (frac,)

    sq = math.sqrt(discriminant) / a2
    t0, t1 = frac - sq, frac + sq
    if t0 > t1:
        t0, t1 = t1, t0
    return (t0, t1)


@dataclass(frozen=True)
class Ball:
    """A sphere of ``radius`` centred at the local origin."""

    radius: float

    def __post_init__(self) -> None:
        if not self.radius > 0.0:
            raise ValueError(f"Ball radius must be positive, got {self.radius}")
        object.__setattr__(self, "radius", float(self.radius))

    def _hit_at(self, ray: Ray, t: float) -> Intersection:
        position = ray.at(t)
        return Intersection(position=position, normal=normalize(position))

    def intersect(self, ray: Ray) -> IntersectResult:
        """Intersect a ray with the sphere.

        Args:
            ray: Query ray in the ball's local space.

        Returns:
            ``Miss`` when the line misses the sphere, ``HitOnce`` when it is
            tangent, or ``HitTwice`` with the hit nearer ``ray.eye`` first.
        """
        delta = ray.delta()
        a = dot(delta, delta)
        b = 2.0 * dot(ray.eye, delta)
        c = dot(ray.eye, ray.eye) - self.radius * self.radius

        roots = _solve_quadratic(a, b, c)
        if not roots:
            return Miss()
        if len(roots) == 1:
            return HitOnce(self._hit_at(ray, roots[0]))

        first, second = (self._hit_at(ray, t) for t in roots)
        # Increasing t is not increasing distance when the eye is inside
        if first.distance(ray) > second.distance(ray):
            first, second = second, first
        return HitTwice(first, second)
