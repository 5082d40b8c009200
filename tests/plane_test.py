import math
import os
import sys
from dataclasses import FrozenInstanceError
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from geometry.Plane import Plane
from geometry.Ray3 import Ray3
from geometry.Vector3 import Vector3


@pytest.fixture
def ground():
    return Plane().from_points(Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(0, 1, 0))


def test_from_points_normal(ground):
    assert ground.normal.as_tuple() == pytest.approx((0, 0, 1))
    assert ground.constant == 0
    assert ground.distance(Vector3(3, 4, 5)) == pytest.approx(5)
    assert ground.distance(Vector3(0, 0, -2)) == pytest.approx(-2)


def test_from_points_is_normalized():
    p = Plane().from_points(Vector3(0, 0, 2), Vector3(4, 0, 2), Vector3(0, 4, 2))
    assert p.normal.length() == pytest.approx(1)
    assert p.distance(Vector3(9, 9, 2)) == pytest.approx(0)


def test_from_point_normal():
    p = Plane().from_point_normal(Vector3(0, 0, 3), Vector3(0, 0, 1))
    assert p.constant == -3
    assert p.distance(Vector3(1, 1, 4)) == 1


def test_ray_intersection(ground):
    ray = Ray3(Vector3(1, 2, 5), Vector3(0, 0, -1))
    assert ground.ray_distance(ray) == pytest.approx(5)
    hit = Vector3()
    assert ground.intersection(ray, hit)
    assert hit.as_tuple() == pytest.approx((1, 2, 0))
    assert ray.point_at(5).as_tuple() == pytest.approx((1, 2, 0))


def test_ray_pointing_away_misses(ground):
    ray = Ray3(Vector3(0, 0, 5), Vector3(0, 0, 1))
    assert ground.ray_distance(ray) < 0
    hit = Vector3(7, 7, 7)
    assert not ground.intersection(ray, hit)
    assert hit.as_tuple() == (7, 7, 7)


def test_parallel_ray_is_nan(ground):
    ray = Ray3(Vector3(0, 0, 5), Vector3(1, 0, 0))
    assert math.isnan(ground.ray_distance(ray))
    assert not ground.intersection(ray, Vector3())


def test_origin_on_plane(ground):
    ray = Ray3(Vector3(2, 2, 0), Vector3(1, 0, 0))
    assert ground.ray_distance(ray) == 0
    hit = Vector3()
    assert ground.intersection(ray, hit)
    assert hit.as_tuple() == (2, 2, 0)


def test_negate(ground):
    flipped = ground.negate()
    assert flipped.normal.as_tuple() == pytest.approx((0, 0, -1))
    assert flipped.distance(Vector3(0, 0, 5)) == pytest.approx(-5)
    assert ground.negate_local() is ground


def test_constant_planes_are_frozen():
    assert Plane.XY_PLANE.distance(Vector3(0, 0, 2)) == 2
    assert Plane.XZ_PLANE.distance(Vector3(0, 3, 0)) == 3
    assert Plane.YZ_PLANE.distance(Vector3(4, 0, 0)) == 4
    with pytest.raises(FrozenInstanceError):
        Plane.XY_PLANE.from_point_normal(Vector3(), Vector3(1, 0, 0))
    with pytest.raises(FrozenInstanceError):
        Plane.XY_PLANE.constant = 1
