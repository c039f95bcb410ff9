import pytest

from raytrace_scene.box import Box
from raytrace_scene.geometry import Point3D, Ray

LO = Point3D(0.0, 0.0, 0.0)
HI = Point3D(2.0, 2.0, 2.0)
CENTER = (LO + HI) / 2

AXES = [
    Point3D(1, 0, 0),
    Point3D(-1, 0, 0),
    Point3D(0, 1, 0),
    Point3D(0, -1, 0),
    Point3D(0, 0, 1),
    Point3D(0, 0, -1),
]


@pytest.fixture
def box():
    return Box(LO, HI)


def test_twelve_polygons(box):
    assert len(box.polygons()) == 12


def test_all_vertices_are_corners(box):
    for polygon in box.polygons():
        for vertex in polygon:
            assert vertex.x in (LO.x, HI.x)
            assert vertex.y in (LO.y, HI.y)
            assert vertex.z in (LO.z, HI.z)


def test_every_polygon_lies_on_a_face(box):
    for polygon in box.polygons():
        shared = [
            axis
            for axis in ("x", "y", "z")
            if len({getattr(v, axis) for v in polygon}) == 1
        ]
        assert len(shared) == 1


def test_polygons_returns_a_copy(box):
    box.polygons().clear()
    assert len(box.polygons()) == 12


def test_corners_kept(box):
    assert box.min_point == LO
    assert box.max_point == HI


@pytest.mark.parametrize("direction", AXES)
def test_ray_from_center_hits_face_it_points_at(box, direction):
    hit = box.normal_in_reflection(Ray(CENTER, direction))
    assert hit.direction == direction
    expected_surface = HI if direction.dot(HI - LO) > 0 else LO
    # coordinate along the ray equals the face's coordinate
    assert hit.origin.dot(direction) == pytest.approx(expected_surface.dot(direction))
    # the other coordinates stay at the centre
    off_axis = hit.origin - CENTER
    assert off_axis.cross(direction).norm() == pytest.approx(0.0, abs=1e-12)


def test_ray_leaving_box_misses(box):
    hit = box.normal_in_reflection(Ray(Point3D(1.0, 1.0, 5.0), Point3D(0, 0, 1)))
    assert hit.is_miss()


def test_ray_passing_beside_box_misses(box):
    hit = box.normal_in_reflection(Ray(Point3D(10.0, 10.0, 1.0), Point3D(1, 0, 0)))
    assert hit.is_miss()


def test_ray_entering_from_outside_hits_far_face(box):
    origin = Point3D(1.0, 1.0, -5.0)
    hit = box.normal_in_reflection(Ray(origin, Point3D(0, 0, 1)))
    assert hit.origin == Point3D(origin.x, origin.y, HI.z)
    assert hit.direction == Point3D(0, 0, 1)