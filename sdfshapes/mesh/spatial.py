"""2D and 3D spatial helpers for triangle distance queries and scalar fields."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import Callable, Sequence

from sdfshapes.transform3 import Transform3, new_transform3
from sdfshapes.vec2 import Vec2
from sdfshapes.vec3 import Vec3


class TriangleFeature(IntEnum):
    """The part of a triangle a point was found closest to."""

    V0 = 0
    V1 = 1
    V2 = 2
    E0 = 3
    E1 = 4
    E2 = 5
    FACE = 6


def closest_on_triangle2(
    p: Vec2, tri: Sequence[Vec2]
) -> tuple[Vec2, TriangleFeature]:
    """Closest point of a 2D triangle to ``p`` and the feature it lies on."""
    if in_triangle(p, tri):
        return p, TriangleFeature.FACE
    min_dist = sys.float_info.max
    point = Vec2()
    feature = TriangleFeature.V0
    for j, a in enumerate(tri):
        b = tri[(j + 1) % 3]
        distance, got = dist_to_line(p, (a, b))
        d2 = distance.norm2()
        if d2 < min_dist:
            if got < 2:
                feature = TriangleFeature((j + got) % 3)
            else:
                feature = TriangleFeature(TriangleFeature.E0 + j % 3)
            min_dist = d2
            point = p - distance
    return point, feature


def _d2_sign(p1: Vec2, p2: Vec2, p3: Vec2) -> float:
    return (p1.x - p3.x) * (p2.y - p3.y) - (p2.x - p3.x) * (p1.y - p3.y)


def in_triangle(pt: Vec2, tri: Sequence[Vec2]) -> bool:
    """True if ``pt`` lies within the triangle, boundary included."""
    d1 = _d2_sign(pt, tri[0], tri[1])
    d2 = _d2_sign(pt, tri[1], tri[2])
    d3 = _d2_sign(pt, tri[2], tri[0])
    has_neg = d1 < 0 or d2 < 0 or d3 < 0
    has_pos = d1 > 0 or d2 > 0 or d3 > 0
    return not (has_neg and has_pos)


def dist_to_line(p: Vec2, line: Sequence[Vec2]) -> tuple[Vec2, int]:
    """Distance vector from a point to a segment, and where it was closest.

    The integer is 0 when past the segment's second end, 1 when before its
    first end, and 2 when closest to the segment between them.
    """
    a, b = line[0], line[1]
    line_dir = b - a
    perpendicular = Vec2(-line_dir.y, line_dir.x)
    if edge_equation(p, (b, b + perpendicular)) > 0:
        return p - b, 0
    if edge_equation(p, (a, a + perpendicular)) < 0:
        return p - a, 1
    e3 = dist_to_line_infinite(p, line)
    return perpendicular.unit().scale(-e3), 2


def dist_to_line_infinite(p: Vec2, line: Sequence[Vec2]) -> float:
    """Unsigned distance from ``p`` to the infinite line through two points."""
    p1, p2 = line[0], line[1]
    num = abs((p2.x - p1.x) * (p1.y - p.y) - (p1.x - p.x) * (p2.y - p1.y))
    return num / (p2 - p1).norm()


def edge_equation(p: Vec2, line: Sequence[Vec2]) -> float:
    """Signed edge function of ``p`` against the line through two points.

    E(x, y) = (x - X) * dY - (y - Y) * dX
    """
    dxy = line[1] - line[0]
    return (p.x - line[0].x) * dxy.y - (p.y - line[0].y) * dxy.x


def canalis_transform(triangle: Sequence[Vec3]) -> Transform3:
    """Transform placing a triangle's first vertex at the origin, its first
    edge on the x axis and its third vertex in the xy plane."""
    t0, t1, t2 = triangle[0], triangle[1], triangle[2]
    u2 = t1 - t0
    u3 = t2 - t0
    xc = u2.unit()
    yc = (u3 - xc.scale(xc.dot(u3))).unit()
    zc = xc.cross(yc)
    rot = new_transform3(
        [
            xc.x, xc.y, xc.z, 0,
            yc.x, yc.y, yc.z, 0,
            zc.x, zc.y, zc.z, 0,
            0, 0, 0, 1,
        ]
    )
    return rot.translate(-rot.transform(t0))


def triangle_normal(triangle: Sequence[Vec3]) -> Vec3:
    """Outward normal of a triangle (right-hand rule); not normalised."""
    t0, t1, t2 = triangle[0], triangle[1], triangle[2]
    return (t1 - t0).cross(t2 - t1)


def centroid(triangle: Sequence[Vec3]) -> Vec3:
    return (triangle[0] + triangle[1] + triangle[2]).scale(1.0 / 3.0)


def gradient(p: Vec3, tol: float, f: Callable[[Vec3], float]) -> Vec3:
    """Central-difference gradient of a scalar field, not divided by 2*tol.

    For a signed distance field this points along the surface normal.
    """
    return Vec3(
        f(p + Vec3(x=tol)) - f(p + Vec3(x=-tol)),
        f(p + Vec3(y=tol)) - f(p + Vec3(y=-tol)),
        f(p + Vec3(z=tol)) - f(p + Vec3(z=-tol)),
    )


def divergence(p: Vec3, tol: float, f: Callable[[Vec3], Vec3]) -> float:
    """Central-difference divergence of a vector field, not divided by 2*tol."""
    dx = f(p + Vec3(x=tol)) - f(p + Vec3(x=-tol))
    dy = f(p + Vec3(y=tol)) - f(p + Vec3(y=-tol))
    dz = f(p + Vec3(z=tol)) - f(p + Vec3(z=-tol))
    return dx.x + dy.y + dz.z


def laplacian(p: Vec3, tol: float, f: Callable[[Vec3], float]) -> float:
    """Divergence of the gradient field, with the gradient taken at ``p``."""
    return divergence(p, tol, lambda _v: gradient(p, tol, f))