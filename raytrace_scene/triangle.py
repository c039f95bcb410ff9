"""A single-triangle figure."""

from __future__ import annotations

from raytrace_scene.geometry import Figure, Polygon, Ray, polygon_normal_in_reflection


class Triangle(Figure):
    """A flat triangle whose front side faces along AB x AC."""

    def __init__(self, polygon: Polygon) -> None:
        self.polygon = polygon
        a, b, c = polygon
        self.ab = b - a
        self.ac = c - a
        self.bc = c - b
        self.radius = max(self.ab.norm(), self.ac.norm()) + 1
        self.normal = self.ab.cross(self.ac).normalized()

    def polygons(self) -> list[Polygon]:
        return [self.polygon]

    def normal_in_reflection(self, incident: Ray) -> Ray:
        return polygon_normal_in_reflection(
            self.polygon, incident, self.normal, self.ab, self.ac, self.bc, self.radius
        )