"""A four-cornered figure made of two triangles."""

from __future__ import annotations

from raytrace_scene.geometry import Figure, Point3D, Polygon, Ray, polygon_normal_in_reflection


class Quadrangle(Figure):
    """A quadrangle p0-p1-p2-p3 split along the p1-p3 diagonal."""

    def __init__(self, p0: Point3D, p1: Point3D, p2: Point3D, p3: Point3D) -> None:
        self.points = (p0, p1, p2, p3)

        # first triangle: p0, p1, p3
        self._ab = p1 - p0
        self._ac = p3 - p0
        self._bc = p3 - p1
        self._radius1 = max(self._ab.norm(), self._ac.norm()) + 1
        self._normal1 = self._ab.cross(self._ac).normalized()

        # second triangle: p1, p2, p3 (possibly in the same plane)
        self._de = p2 - p1
        self._df = p3 - p1
        self._ef = p3 - p2
        self._radius2 = max(self._de.norm(), self._df.norm()) + 1
        self._normal2 = self._de.cross(self._df).normalized()

    def polygons(self) -> list[Polygon]:
        p0, p1, p2, p3 = self.points
        return [Polygon(p0, p1, p3), Polygon(p2, p3, p1)]

    def normal_in_reflection(self, incident: Ray) -> Ray:
        p0, p1, p2, p3 = self.points
        hit = polygon_normal_in_reflection(
            Polygon(p0, p1, p3), incident, self._normal1,
            self._ab, self._ac, self._bc, self._radius1,
        )
        if not hit.is_miss():
            return hit
        return polygon_normal_in_reflection(
            Polygon(p1, p2, p3), incident, self._normal2,
            self._de, self._df, self._ef, self._radius2,
        )