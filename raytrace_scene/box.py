"""An axis-aligned box made of twelve triangles."""

from __future__ import annotations

from typing import NamedTuple

from raytrace_scene.geometry import Figure, Point3D, Polygon, Ray, polygon_normal_in_reflection


class _Face(NamedTuple):
    polygon: Polygon
    normal: Point3D
    ab: Point3D
    ac: Point3D
    bc: Point3D
    radius: float


def _face(polygon: Polygon) -> _Face:
    a, b, c = polygon
    ab, ac, bc = b - a, c - a, c - b
    radius = max(ab.norm(), bc.norm()) + 1
    normal = ab.cross(bc).normalized()
    return _Face(polygon, normal, ab, ac, bc, radius)


class Box(Figure):
    """A box spanned by its minimum and maximum corners, normals facing out."""

    def __init__(self, min_point: Point3D, max_point: Point3D) -> None:
        self.min_point = min_point
        self.max_point = max_point
        lo, hi = min_point, max_point
        P = Point3D
        triangles = [
            Polygon(lo, P(hi.x, lo.y, lo.z), P(lo.x, lo.y, hi.z)),
            Polygon(P(lo.x, lo.y, hi.z), P(hi.x, lo.y, lo.z), P(hi.x, lo.y, hi.z)),
            Polygon(lo, P(lo.x, lo.y, hi.z), P(lo.x, hi.y, lo.z)),
            Polygon(P(lo.x, lo.y, hi.z), P(lo.x, hi.y, hi.z), P(lo.x, hi.y, lo.z)),
            Polygon(lo, P(lo.x, hi.y, lo.z), P(hi.x, lo.y, lo.z)),
            Polygon(P(hi.x, hi.y, lo.z), P(hi.x, lo.y, lo.z), P(lo.x, hi.y, lo.z)),
            Polygon(hi, P(lo.x, hi.y, hi.z), P(hi.x, lo.y, hi.z)),
            Polygon(P(lo.x, lo.y, hi.z), P(hi.x, lo.y, hi.z), P(lo.x, hi.y, hi.z)),
            Polygon(hi, P(hi.x, lo.y, hi.z), P(hi.x, hi.y, lo.z)),
            Polygon(P(hi.x, lo.y, lo.z), P(hi.x, hi.y, lo.z), P(hi.x, lo.y, hi.z)),
            Polygon(hi, P(hi.x, hi.y, lo.z), P(lo.x, hi.y, hi.z)),
            Polygon(P(lo.x, hi.y, lo.z), P(lo.x, hi.y, hi.z), P(hi.x, hi.y, lo.z)),
        ]
        self._faces = [_face(t) for t in triangles]

    def polygons(self) -> list[Polygon]:
        return [face.polygon for face in self._faces]

    def normal_in_reflection(self, incident: Ray) -> Ray:
        for face in self._faces:
            hit = polygon_normal_in_reflection(
                face.polygon, incident, face.normal, face.ab, face.ac, face.bc, face.radius
            )
            if not hit.is_miss():
                return hit
        return Ray()