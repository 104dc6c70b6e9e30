
import pytest

from core import aabb, interval
from util import Ray, point3, vec3


@pytest.mark.unittest
def test_should_hit(ray_that_hits, unit_box):
    t = unit_box.hit(ray_that_hits)
    assert t is not None
    assert t.min == pytest.approx(4.0)
    assert t.max == pytest.approx(5.0)


@pytest.mark.unittest
def test_should_miss(ray_that_misses, unit_box):
    assert unit_box.hit(ray_that_misses) is None


@pytest.mark.unittest
def test_inside_box(ray_inside_box, unit_box):
    t = unit_box.hit(ray_inside_box)
    assert t is not None
    assert t.min == 0.0
    assert t.max == pytest.approx(0.5)


def test_box_behind_ray_is_missed(unit_box):
    r = Ray(point3(0.5, 0.5, 5), vec3(0, 0, 1))
    assert unit_box.hit(r) is None


def test_zero_direction_component_inside_slab(unit_box):
    r = Ray(point3(0.5, 0.5, -2), vec3(0, 0, 1))
    t = unit_box.hit(r)
    assert t is not None
    assert t.min == pytest.approx(2.0)
    assert t.max == pytest.approx(3.0)


@pytest.mark.parametrize("x", [2.0, -1.0])
def test_zero_direction_component_outside_slab(unit_box, x):
    r = Ray(point3(x, 0.5, -2), vec3(0, 0, 1))
    assert unit_box.hit(r) is None


def test_origin_on_slab_plane_with_zero_component(unit_box):
    # (max - origin) * inf is nan here; it must not narrow the interval
    r = Ray(point3(1.0, 0.5, -2), vec3(0, 0, 1))
    t = unit_box.hit(r)
    assert t is not None
    assert t.min <= t.max


def test_degenerate_box_is_hittable():
    flat = aabb.from_points(point3(0, 0, 0), point3(1, 1, 0))
    r = Ray(point3(0.5, 0.5, 1), vec3(0, 0, -1))
    t = flat.hit(r)
    assert t is not None
    assert t.min == pytest.approx(1.0)
    assert t.max == pytest.approx(1.0)


def test_hit_respects_ray_interval(ray_that_hits, unit_box):
    assert unit_box.hit(ray_that_hits, interval(0.0, 3.0)) is None
    t = unit_box.hit(ray_that_hits, interval(4.5, 10.0))
    assert t.min == pytest.approx(4.5)


def test_from_points_is_order_independent():
    a = point3(1, -2, 3)
    b = point3(-1, 2, 0)
    assert aabb.from_points(a, b) == aabb.from_points(b, a)
    box = aabb.from_points(a, b)
    assert box.x == interval(-1, 1)
    assert box.y == interval(-2, 2)
    assert box.z == interval(0, 3)


def test_union_contains_both(unit_box):
    other = aabb.from_points(point3(2, -1, 0.5), point3(3, 0.5, 4))
    u = aabb.union(unit_box, other)
    assert u.x == interval(0, 3)
    assert u.y == interval(-1, 1)
    assert u.z == interval(0, 4)
    assert (unit_box | other) == u


def test_empty_box_is_union_identity(unit_box):
    assert (aabb.empty | unit_box) == unit_box
    assert (unit_box | aabb.empty) == unit_box


def test_centroid():
    box = aabb.from_points(point3(0, 0, 0), point3(2, 6, 4))
    assert box.centroid(0) == 1.0
    assert box.centroid(1) == 3.0
    assert box.centroid(2) == 2.0


def test_interval_predicates():
    i = interval(1.0, 2.0)
    assert not i.surrounds(1.0) and not i.surrounds(2.0)
    assert i.surrounds(1.5)
    assert i.middle() == 1.5


def test_interval_sentinels():
    assert interval.empty.min > interval.empty.max
    assert interval.universe.surrounds(0.0)
    assert interval.from_intervals(interval.empty, interval(3, 4)) == interval(3, 4)


def test_ray_inverse_direction_follows_ieee():
    r = Ray(point3(0, 0, 0), vec3(0.0, -0.0, 4.0))
    assert r.inv_direction == (float("inf"), float("-inf"), 0.25)
    assert all(type(c) is float for c in r.inv_direction)
