"""Tagged results of primitive queries.

``IntersectResult`` is the outcome of intersecting one primitive with a ray:
``Miss``, ``HitOnce`` (a plane, or a ray grazing a ball) or ``HitTwice``
(entering and leaving a ball). The two hits of ``HitTwice`` are ordered by
increasing distance from the ray's eye.

``Clipped`` classifies a value against a half-space: ``Inside`` carries the
value unchanged, ``Outside`` carries its projection onto the boundary.

All variants are frozen dataclasses, so ``match`` statements work on them:

    >>> match ball.intersect(ray):
    ...     case HitTwice(first, second):
    ...         ...
    ...     case HitOnce(hit):
    ...         ...
    ...     case Miss():
    ...         ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from raypick.core.ray import Intersection

T = TypeVar("T")


@dataclass(frozen=True)
class Miss:
    """The ray does not touch the primitive."""

    def closest(self) -> None:
        return None

    def farthest(self) -> None:
        return None

    @property
    def hits(self) -> tuple[Intersection, ...]:
        return ()


@dataclass(frozen=True)
class HitOnce:
    """A single hit: a plane crossing, or a tangent ray on a ball."""

    hit: Intersection

    def closest(self) -> Intersection:
        return self.hit

    def farthest(self) -> Intersection:
        return self.hit

    @property
    def hits(self) -> tuple[Intersection, ...]:
        return (self.hit,)


@dataclass(frozen=True)
class HitTwice:
    """Two hits along the ray, ``first`` nearer the eye than ``second``."""

    first: Intersection
    second: Intersection

    def closest(self) -> Intersection:
        return self.first

    def farthest(self) -> Intersection:
        return self.second

    @property
    def hits(self) -> tuple[Intersection, ...]:
        return (self.first, self.second)


IntersectResult = Union[Miss, HitOnce, HitTwice]


@dataclass(frozen=True)
class Inside(Generic[T]):
    """The value lies in the accepted half-space."""

    value: T


@dataclass(frozen=True)
class Outside(Generic[T]):
    """The value was rejected; ``value`` is its projection onto the plane."""

    value: T


Clipped = Union[Inside[T], Outside[T]]
