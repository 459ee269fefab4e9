import math
import dataclasses

import pytest
from vecmath import (
    Vec2, Vec3, Vec4, Point2, Point3, InnerSpace,
    dot, dist, v_dist, v_angle, cross,
)


def test_dot_products():
    assert dot(Vec2(1.0, 1.0), Vec2(1.0, 1.0)) == 2.0
    assert dot(Vec3(1.0, 2.0, 3.0), Vec3(4.0, 5.0, 6.0)) == 32.0
    assert dot(Vec4(1.0, 2.0, 3.0, 4.0), Vec4(5.0, 6.0, 7.0, 8.0)) == 70.0

def test_dot_rejects_mixed_dimensions():
    with pytest.raises(TypeError):
        dot(Vec2(1.0, 0.0), Vec3(1.0, 0.0, 0.0))

def test_v_angle():
    assert v_angle(Vec2(1.0, 0.0), Vec2(0.0, 1.0)) == math.pi / 2.0
    assert v_angle(Vec3(1.0, 0.0, 0.0), Vec3(-1.0, 0.0, 0.0)) == pytest.approx(math.pi)
    assert v_angle(Vec4(1.0, 1.0, 0.0, 0.0), Vec4(1.0, 0.0, 0.0, 0.0)) == pytest.approx(math.pi / 4.0)

def test_v_angle_zero_vector_is_nan():
    assert math.isnan(v_angle(Vec2(0.0, 0.0), Vec2(1.0, 0.0)))

def test_dist():
    assert dist(Vec2(0.0, 0.0), Vec2(3.0, 4.0)) == 5.0
    assert v_dist(Vec3(1.0, 1.0, 1.0), Vec3(1.0, 1.0, 3.0)) == 2.0
    assert dist(Vec4(1.0, 1.0, 1.0, 1.0), Vec4(2.0, 2.0, 2.0, 2.0)) == 2.0

def test_cross_right_handed():
    assert cross(Vec3(1.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0)) == Vec3(0.0, 0.0, 1.0)
    assert cross(Vec3(0.0, 1.0, 0.0), Vec3(0.0, 0.0, 1.0)) == Vec3(1.0, 0.0, 0.0)
    assert cross(Vec3(0.0, 0.0, 1.0), Vec3(1.0, 0.0, 0.0)) == Vec3(0.0, 1.0, 0.0)

def test_cross_general():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(4.0, 5.0, 6.0)
    c = cross(a, b)
    assert c == Vec3(-3.0, 6.0, -3.0)
    assert dot(c, a) == 0.0
    assert dot(c, b) == 0.0
    assert cross(b, a) == -c

def test_cross_only_for_vec3():
    with pytest.raises(TypeError):
        cross(Vec2(1.0, 0.0), Vec2(0.0, 1.0))

def test_length_and_normalize():
    v = Vec2(3.0, 4.0)
    assert v.length() == 5.0
    assert v.normalize() == Vec2(0.6, 0.8)
    assert Vec3(0.0, 0.0, 2.0).normalize() == Vec3(0.0, 0.0, 1.0)
    assert Vec4(2.0, 0.0, 0.0, 0.0).normalize().length() == 1.0

def test_normalize_zero_vector_propagates_nan():
    n = Vec3.zero().normalize()
    assert all(math.isnan(c) for c in n)

def test_arithmetic():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(0.5, 0.5, 0.5)
    assert a + b == Vec3(1.5, 2.5, 3.5)
    assert a - b == Vec3(0.5, 1.5, 2.5)
    assert a * 2.0 == Vec3(2.0, 4.0, 6.0)
    assert 2.0 * a == Vec3(2.0, 4.0, 6.0)
    assert -a == Vec3(-1.0, -2.0, -3.0)
    # Operands are untouched
    assert a == Vec3(1.0, 2.0, 3.0)

def test_mixed_dimension_arithmetic_fails():
    with pytest.raises(TypeError):
        Vec2(1.0, 1.0) + Vec3(1.0, 1.0, 1.0)
    with pytest.raises(TypeError):
        Vec2(1.0, 1.0) * Vec2(1.0, 1.0)

def test_vectors_are_frozen():
    v = Vec2(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 5.0

def test_constructors():
    assert Vec2.zero() == Vec2(0.0, 0.0)
    assert Vec4.zero() == Vec4(0.0, 0.0, 0.0, 0.0)
    assert Vec3.new(1.0, 2.0, 3.0) == Vec3(1.0, 2.0, 3.0)
    assert Vec2.from_point(Point2(1.0, 2.0)) == Vec2(1.0, 2.0)
    assert Vec3.from_point(Point3(1.0, 2.0, 3.0)) == Vec3(1.0, 2.0, 3.0)
    assert tuple(Vec4(1.0, 2.0, 3.0, 4.0)) == (1.0, 2.0, 3.0, 4.0)

def test_inner_space_capability():
    for v in (Vec2(1.0, 0.0), Vec3(1.0, 0.0, 0.0), Vec4(1.0, 0.0, 0.0, 0.0)):
        assert isinstance(v, InnerSpace)
    assert Vec2(1.0, 0.0).dist(Vec2(1.0, 2.0)) == 2.0

def test_points():
    p = Point2.from_vec(Vec2(1.0, 2.0))
    assert p == Point2(1.0, 2.0)
    assert p.to_vec() == Vec2(1.0, 2.0)
    assert Point3.new(1.0, 2.0, 3.0).to_vec() == Vec3(1.0, 2.0, 3.0)
    with pytest.raises(TypeError):
        Point2(1.0, 1.0) + Point2(1.0, 1.0)
