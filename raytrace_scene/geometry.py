"""Vectors, rays, triangles and the ray/triangle intersection shared by figures."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from numbers import Real
from typing import Iterator

DEFAULT_RADIUS = 1_000_000_000.0


@dataclass(frozen=True)
class Point3D:
    """A point or vector in three-dimensional space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Point3D) -> Point3D:
        if not isinstance(other, Point3D):
            return NotImplemented
        return Point3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Point3D) -> Point3D:
        if not isinstance(other, Point3D):
            return NotImplemented
        return Point3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, q: float) -> Point3D:
        if not isinstance(q, Real):
            return NotImplemented
        return Point3D(self.x * q, self.y * q, self.z * q)

    __rmul__ = __mul__

    def __truediv__(self, q: float) -> Point3D:
        if not isinstance(q, Real):
            return NotImplemented
        return Point3D(self.x / q, self.y / q, self.z / q)

    def __neg__(self) -> Point3D:
        return Point3D(-self.x, -self.y, -self.z)

    def dot(self, other: Point3D) -> float:
        """Scalar product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Point3D) -> Point3D:
        """Vector product."""
        return Point3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Point3D:
        """Unit vector with the same direction; a zero vector stays zero."""
        length = self.norm()
        if length == 0.0:
            return self
        return self / length


@dataclass(frozen=True)
class Ray:
    """A ray; a zero direction marks the absence of an intersection."""

    origin: Point3D = field(default_factory=Point3D)
    direction: Point3D = field(default_factory=Point3D)

    def is_miss(self) -> bool:
        """True when the ray carries no direction, i.e. nothing was hit."""
        return self.direction == Point3D()


@dataclass(frozen=True)
class Polygon:
    """A triangle given by its three vertices."""

    a: Point3D
    b: Point3D
    c: Point3D

    @property
    def points(self) -> tuple[Point3D, Point3D, Point3D]:
        return (self.a, self.b, self.c)

    def __iter__(self) -> Iterator[Point3D]:
        return iter(self.points)


class Figure(ABC):
    """A scene object that can be triangulated and intersected by rays."""

    @abstractmethod
    def polygons(self) -> list[Polygon]:
        """Triangles approximating the figure's surface."""

    @abstractmethod
    def normal_in_reflection(self, incident: Ray) -> Ray:
        """Intersection point and surface normal, or a miss ray."""


def polygon_normal_in_reflection(
    polygon: Polygon,
    incident: Ray,
    normal: Point3D,
    ab: Point3D,
    ac: Point3D,
    bc: Point3D,
    radius: float = DEFAULT_RADIUS,
) -> Ray:
    """Intersect ``incident`` with a triangle.

    Returns a ray starting at the intersection point and pointing along
    ``normal``, or an empty ray when there is no intersection.
    """
    direction = incident.direction
    origin = incident.origin

    facing = direction.dot(normal)
    if facing <= 0:
        return Ray()

    a = polygon.a
    q = (a - origin).dot(normal) / facing
    if q < 0:
        return Ray()

    intersection = direction * q + origin

    ai = intersection - a
    if ai.norm() > radius:
        return Ray()

    # AB border
    rest = ai - ab * (ai.dot(ab) / ab.dot(ab))
    if rest.dot(ac) <= 0:
        return Ray()

    # AC border
    rest = ai - ac * (ai.dot(ac) / ac.dot(ac))
    if rest.dot(ab) <= 0:
        return Ray()

    # BC border
    bi = intersection - polygon.b
    rest = bi - bi * (bi.dot(bc) / bc.dot(bc))
    if rest.dot(-ab) <= 0:
        return Ray()

    return Ray(intersection, normal)