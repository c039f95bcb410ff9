import math

import pytest

from raytrace_scene.geometry import (
    Figure,
    Point3D,
    Polygon,
    Ray,
    polygon_normal_in_reflection,
)


def _unit_triangle():
    a = Point3D(0.0, 0.0, 0.0)
    b = Point3D(1.0, 0.0, 0.0)
    c = Point3D(0.0, 1.0, 0.0)
    polygon = Polygon(a, b, c)
    ab, ac, bc = b - a, c - a, c - b
    normal = ab.cross(ac).normalized()
    return polygon, normal, ab, ac, bc


def test_add_then_sub_round_trip():
    a = Point3D(1.0, -2.0, 3.0)
    b = Point3D(4.0, 5.0, -6.0)
    assert (a + b) - b == a


def test_scale_round_trip_and_commutes():
    a = Point3D(3.0, -5.0, 7.0)
    assert (a * 4) / 4 == a
    assert 4 * a == a * 4


def test_negation_cancels():
    a = Point3D(2.5, -1.5, 8.0)
    assert a + (-a) == Point3D()


def test_dot_with_self_is_norm_squared():
    a = Point3D(2.0, 3.0, 6.0)
    assert a.dot(a) == pytest.approx(a.norm() ** 2)


def test_cross_is_orthogonal_to_operands():
    a = Point3D(1.0, 2.0, 3.0)
    b = Point3D(-4.0, 0.0, 5.0)
    c = a.cross(b)
    assert c.dot(a) == 0
    assert c.dot(b) == 0
    assert b.cross(a) == -c


def test_cross_of_unit_axes():
    assert Point3D(1, 0, 0).cross(Point3D(0, 1, 0)) == Point3D(0, 0, 1)


def test_normalized_has_unit_length_and_same_direction():
    a = Point3D(3.0, -4.0, 12.0)
    n = a.normalized()
    assert n.norm() == pytest.approx(1.0)
    assert a.cross(n).norm() == pytest.approx(0.0, abs=1e-12)
    assert a.dot(n) > 0


def test_normalized_zero_stays_zero():
    assert Point3D().normalized() == Point3D()


def test_multiplying_by_point_raises():
    with pytest.raises(TypeError):
        Point3D(1, 2, 3) * Point3D(1, 2, 3)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Point3D(1, 2, 3) / 0


def test_point_iterates_over_coordinates():
    assert tuple(Point3D(1.5, 2.5, 3.5)) == (1.5, 2.5, 3.5)


def test_points_compare_by_value():
    assert Point3D(1, 2, 3) == Point3D(1.0, 2.0, 3.0)
    assert {Point3D(1, 2, 3), Point3D(1.0, 2.0, 3.0)} == {Point3D(1, 2, 3)}


def test_default_ray_is_miss():
    assert Ray().is_miss()
    assert not Ray(Point3D(), Point3D(0, 0, 1)).is_miss()


def test_polygon_points_and_iteration():
    a, b, c = Point3D(1, 0, 0), Point3D(0, 1, 0), Point3D(0, 0, 1)
    polygon = Polygon(a, b, c)
    assert polygon.points == (a, b, c)
    assert list(polygon) == [a, b, c]


def test_figure_is_abstract():
    with pytest.raises(TypeError):
        Figure()


def test_hit_inside_triangle():
    polygon, normal, ab, ac, bc = _unit_triangle()
    incident = Ray(Point3D(0.2, 0.2, -1.0), Point3D(0.0, 0.0, 1.0))
    hit = polygon_normal_in_reflection(polygon, incident, normal, ab, ac, bc, 2.0)
    assert hit.origin == Point3D(0.2, 0.2, 0.0)
    assert hit.direction == normal


def test_ray_against_normal_misses():
    polygon, normal, ab, ac, bc = _unit_triangle()
    incident = Ray(Point3D(0.2, 0.2, 1.0), Point3D(0.0, 0.0, -1.0))
    hit = polygon_normal_in_reflection(polygon, incident, normal, ab, ac, bc)
    assert hit.is_miss()


def test_plane_behind_origin_misses():
    polygon, normal, ab, ac, bc = _unit_triangle()
    incident = Ray(Point3D(0.2, 0.2, 1.0), Point3D(0.0, 0.0, 1.0))
    hit = polygon_normal_in_reflection(polygon, incident, normal, ab, ac, bc)
    assert hit.is_miss()


def test_point_beyond_radius_misses():
    polygon, normal, ab, ac, bc = _unit_triangle()
    incident = Ray(Point3D(0.2, 0.2, -1.0), Point3D(0.0, 0.0, 1.0))
    hit = polygon_normal_in_reflection(polygon, incident, normal, ab, ac, bc, 0.1)
    assert hit.is_miss()


@pytest.mark.parametrize("x, y", [(0.5, -0.2), (-0.2, 0.5)])
def test_point_outside_edges_misses(x, y):
    polygon, normal, ab, ac, bc = _unit_triangle()
    incident = Ray(Point3D(x, y, -1.0), Point3D(0.0, 0.0, 1.0))
    hit = polygon_normal_in_reflection(polygon, incident, normal, ab, ac, bc)
    assert hit.is_miss()


def test_oblique_hit_lies_on_plane():
    polygon, normal, ab, ac, bc = _unit_triangle()
    incident = Ray(Point3D(0.0, 0.0, -2.0), Point3D(0.1, 0.15, 1.0))
    hit = polygon_normal_in_reflection(polygon, incident, normal, ab, ac, bc)
    assert hit.origin.z == pytest.approx(0.0)
    offset = hit.origin - incident.origin
    assert offset.cross(incident.direction).norm() == pytest.approx(0.0, abs=1e-12)
    assert math.isclose(hit.direction.norm(), normal.norm())