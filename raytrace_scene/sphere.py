"""A sphere figure, intersected analytically and triangulated from an icosahedron-like grid."""

from __future__ import annotations

import math

from raytrace_scene.geometry import Figure, Point3D, Polygon, Ray

_SQRT3 = 1.732050807568877
_BASE_POLYGONS = 20


class Sphere(Figure):
    """A sphere; ``accuracy`` is the number of subdivision passes of its mesh."""

    def __init__(self, center: Point3D, radius: float, accuracy: int = 1) -> None:
        if accuracy < 0:
            raise ValueError(f"accuracy must be non-negative, got {accuracy!r}")
        self.center = center
        self.radius = float(radius)
        self.accuracy = accuracy

    def _arc_center(self, a: Point3D, b: Point3D) -> Point3D:
        """Point on the sphere halfway along the arc between ``a`` and ``b``."""
        p = (a - self.center) + (b - self.center)
        return p / p.norm() * self.radius + self.center

    def _bisect(self, source: Polygon) -> list[Polygon]:
        a, b, c = source
        ab = self._arc_center(a, b)
        bc = self._arc_center(b, c)
        ca = self._arc_center(c, a)
        return [
            Polygon(a, ab, ca),
            Polygon(ab, b, bc),
            Polygon(ca, bc, c),
            Polygon(bc, ca, ab),
        ]

    def _grid(self) -> list[Point3D]:
        c, r = self.center, self.radius
        small_r = _SQRT3 * r / 2
        lower = [
            Point3D(
                c.x - math.cos(2 * k * math.pi / 5) * small_r,
                c.y - math.sin(2 * k * math.pi / 5) * small_r,
                c.z - r / 2,
            )
            for k in range(5)
        ]
        upper = [
            Point3D(
                c.x + math.cos(2 * k * math.pi / 5) * small_r,
                c.y + math.sin(2 * k * math.pi / 5) * small_r,
                c.z + r / 2,
            )
            for k in range(5)
        ]
        # the first vertex of each ring sits exactly on the x axis
        lower[0] = Point3D(c.x - small_r, c.y, c.z - r / 2)
        upper[0] = Point3D(c.x + small_r, c.y, c.z + r / 2)
        return [Point3D(c.x, c.y, c.z - r), *lower, *upper, Point3D(c.x, c.y, c.z + r)]

    def polygons(self) -> list[Polygon]:
        g = self._grid()
        indices = [
            (0, 2, 1), (0, 3, 2), (0, 4, 3), (0, 5, 4), (0, 1, 5),
            (1, 2, 9), (2, 3, 10), (3, 4, 6), (4, 5, 7), (5, 1, 8),
            (9, 8, 1), (10, 9, 2), (6, 10, 3), (7, 6, 4), (8, 7, 5),
            (6, 7, 11), (7, 8, 11), (8, 9, 11), (9, 10, 11), (10, 6, 11),
        ]
        polygons = [Polygon(g[i], g[j], g[k]) for i, j, k in indices]
        for _ in range(self.accuracy):
            polygons = [part for polygon in polygons for part in self._bisect(polygon)]
        return polygons

    def normal_in_reflection(self, incident: Ray) -> Ray:
        direction = incident.direction
        oc = incident.origin - self.center

        k = direction.dot(oc)
        a = direction.dot(direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = k * k - a * c
        if discriminant <= 0:
            return Ray()

        # nearest root of the quadratic along the ray
        q = (-k - math.sqrt(discriminant)) / a
        if q < 0:
            return Ray()

        intersection = incident.origin + direction * q
        normal = (intersection - self.center).normalized()
        return Ray(intersection, normal)