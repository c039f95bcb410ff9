import pytest

from raytrace_scene.geometry import Point3D, Polygon, Ray
from raytrace_scene.triangle import Triangle

A = Point3D(0.0, 0.0, 0.0)
B = Point3D(1.0, 0.0, 0.0)
C = Point3D(0.0, 1.0, 0.0)


@pytest.fixture
def triangle():
    return Triangle(Polygon(A, B, C))


def test_polygons_is_the_single_polygon(triangle):
    assert triangle.polygons() == [Polygon(A, B, C)]


def test_normal_is_unit_and_orthogonal_to_edges(triangle):
    assert triangle.normal.norm() == pytest.approx(1.0)
    assert triangle.normal.dot(B - A) == 0
    assert triangle.normal.dot(C - A) == 0
    assert triangle.normal == Point3D(0.0, 0.0, 1.0)


def test_edges_match_vertices(triangle):
    assert triangle.ab == B - A
    assert triangle.ac == C - A
    assert triangle.bc == C - B


def test_hit_inside(triangle):
    hit = triangle.normal_in_reflection(Ray(Point3D(0.25, 0.25, -3.0), Point3D(0, 0, 1)))
    assert hit.origin == Point3D(0.25, 0.25, 0.0)
    assert hit.direction == triangle.normal


def test_miss_from_front_side(triangle):
    hit = triangle.normal_in_reflection(Ray(Point3D(0.25, 0.25, 3.0), Point3D(0, 0, -1)))
    assert hit.is_miss()


def test_miss_outside_edge(triangle):
    hit = triangle.normal_in_reflection(Ray(Point3D(0.5, -0.5, -1.0), Point3D(0, 0, 1)))
    assert hit.is_miss()


def test_miss_far_away(triangle):
    hit = triangle.normal_in_reflection(Ray(Point3D(50.0, 50.0, -1.0), Point3D(0, 0, 1)))
    assert hit.is_miss()


def test_degenerate_triangle_never_hits():
    flat = Triangle(Polygon(A, B, Point3D(2.0, 0.0, 0.0)))
    assert flat.normal == Point3D()
    hit = flat.normal_in_reflection(Ray(Point3D(0.5, 0.0, -1.0), Point3D(0, 0, 1)))
    assert hit.is_miss()