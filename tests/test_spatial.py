import math

import pytest

from sdfshapes.mesh.spatial import (
    TriangleFeature,
    canalis_transform,
    centroid,
    closest_on_triangle2,
    dist_to_line,
    dist_to_line_infinite,
    divergence,
    edge_equation,
    gradient,
    in_triangle,
    laplacian,
    triangle_normal,
)
from sdfshapes.vec2 import Vec2
from sdfshapes.vec3 import Vec3

TRI2 = (Vec2(0, 0), Vec2(1, 0), Vec2(0, 1))
TRI3 = (Vec3(1, 2, 3), Vec3(4, 0, 1), Vec3(2, 5, -1))


def components(v):
    return (v.x, v.y, v.z)


def test_in_triangle():
    assert in_triangle(Vec2(0.2, 0.2), TRI2)
    assert not in_triangle(Vec2(2, 2), TRI2)
    assert in_triangle(Vec2(1, 0), TRI2)
    assert not in_triangle(Vec2(-0.1, 0.5), TRI2)


def test_closest_inside_is_face():
    p = Vec2(0.25, 0.25)
    q, feat = closest_on_triangle2(p, TRI2)
    assert q == p
    assert feat is TriangleFeature.FACE


def test_closest_near_edge():
    q, feat = closest_on_triangle2(Vec2(0.5, -1), TRI2)
    assert feat is TriangleFeature.E0
    assert q.x == pytest.approx(0.5)
    assert q.y == pytest.approx(0)


@pytest.mark.parametrize(
    "p", [Vec2(2, -1), Vec2(-1, -1), Vec2(-0.5, 3), Vec2(0.5, -0.3)]
)
def test_closest_lies_on_triangle(p):
    q, feat = closest_on_triangle2(p, TRI2)
    assert feat is not TriangleFeature.FACE
    assert in_triangle(q, TRI2)
    d = (p - q).norm()
    for v in TRI2:
        assert d <= (p - v).norm() + 1e-12


def test_dist_to_line_segment():
    vec, where = dist_to_line(Vec2(0.5, -1), (Vec2(0, 0), Vec2(1, 0)))
    assert where == 2
    assert vec.x == pytest.approx(0)
    assert vec.y == pytest.approx(-1)


def test_dist_to_line_past_end():
    p = Vec2(3, 0)
    vec, where = dist_to_line(p, (Vec2(0, 0), Vec2(1, 0)))
    assert where == 0
    assert vec == p - Vec2(1, 0)


def test_dist_to_line_before_start():
    p = Vec2(-2, 1)
    vec, where = dist_to_line(p, (Vec2(0, 0), Vec2(1, 0)))
    assert where == 1
    assert vec == p


def test_dist_to_line_infinite():
    line = (Vec2(0, 0), Vec2(1, 0))
    assert dist_to_line_infinite(Vec2(100, 3), line) == pytest.approx(3)
    assert dist_to_line_infinite(Vec2(-7, -3), line) == pytest.approx(3)
    assert dist_to_line_infinite(Vec2(5, 0), line) == 0


def test_edge_equation_sign():
    line = (Vec2(0, 0), Vec2(2, 2))
    left = edge_equation(Vec2(0, 1), line)
    right = edge_equation(Vec2(1, 0), line)
    assert left == pytest.approx(-right)
    assert left != 0
    assert edge_equation(Vec2(5, 5), line) == 0


def test_canalis_transform_places_triangle():
    t = canalis_transform(TRI3)
    a, b, c = (t.transform(v) for v in TRI3)
    assert components(a) == pytest.approx((0, 0, 0), abs=1e-9)
    assert b.y == pytest.approx(0, abs=1e-9)
    assert b.z == pytest.approx(0, abs=1e-9)
    assert b.x == pytest.approx((TRI3[1] - TRI3[0]).norm())
    assert c.z == pytest.approx(0, abs=1e-9)
    assert (c - b).norm() == pytest.approx((TRI3[2] - TRI3[1]).norm())


def test_canalis_transform_inverse_round_trip():
    t = canalis_transform(TRI3)
    inv = t.inv()
    for v in [Vec3(0.3, -2, 7), Vec3(10, 10, 10), TRI3[2]]:
        back = inv.transform(t.transform(v))
        assert components(back) == pytest.approx(components(v), abs=1e-9)


def test_triangle_normal():
    n = triangle_normal((Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(0, 1, 0)))
    assert n == Vec3(0, 0, 1)
    n3 = triangle_normal(TRI3)
    assert n3.dot(TRI3[1] - TRI3[0]) == pytest.approx(0)
    assert n3.dot(TRI3[2] - TRI3[0]) == pytest.approx(0)


def test_centroid():
    c = centroid(TRI3)
    expected = (TRI3[0] + TRI3[1] + TRI3[2]).scale(1 / 3)
    assert components(c) == pytest.approx(components(expected), abs=1e-9)
    assert centroid((Vec3(3, 0, 0), Vec3(0, 3, 0), Vec3(0, 0, 3))) == Vec3(1, 1, 1)


def test_gradient_of_distance_points_outward():
    p = Vec3(1, 2, 3)
    g = gradient(p, 1e-6, lambda v: v.norm())
    assert components(g.unit()) == pytest.approx(components(p.unit()), abs=1e-6)


def test_gradient_of_constant_is_zero():
    assert gradient(Vec3(4, 5, 6), 1e-3, lambda v: 7.0) == Vec3()


def test_divergence_of_identity_field():
    tol = 1e-3
    d = divergence(Vec3(1, -1, 2), tol, lambda v: v)
    assert d / (2 * tol) == pytest.approx(3)


def test_divergence_of_constant_field():
    assert divergence(Vec3(1, 1, 1), 1e-3, lambda v: Vec3(1, 2, 3)) == 0


def test_laplacian_of_linear_field():
    assert laplacian(Vec3(0.5, 1, 2), 1e-3, lambda v: 2 * v.x - v.y + v.z) == 0
    assert not math.isnan(laplacian(Vec3(1, 2, 3), 1e-3, lambda v: v.norm()))