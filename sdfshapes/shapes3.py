"""Basic 3D signed distance shapes: box, sphere, cylinder and truncated cone."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from sdfshapes.shapes2 import ShapeError, sdf_box2d
from sdfshapes.vec2 import Vec2
from sdfshapes.vec3 import Box3, Vec3, abs_elem, elem, lte_zero, max_component


class SDF3(ABC):
    """A 3D signed distance field with a bounding box."""

    @abstractmethod
    def evaluate(self, p: Vec3) -> float:
        """Signed distance from ``p`` to the shape surface (negative inside)."""

    @abstractmethod
    def bounds(self) -> Box3:
        """Axis-aligned bounding box of the shape."""


def sdf_box3d(p: Vec3, s: Vec3) -> float:
    """Signed distance from ``p`` to a box centred at the origin with half-size ``s``."""
    d = abs_elem(p) - s
    if d.x > 0 and d.y > 0 and d.z > 0:
        return d.norm()
    if d.x > 0 and d.y > 0:
        return math.hypot(d.x, d.y)
    if d.x > 0 and d.z > 0:
        return math.hypot(d.x, d.z)
    if d.y > 0 and d.z > 0:
        return math.hypot(d.y, d.z)
    if d.x > 0:
        return d.x
    if d.y > 0:
        return d.y
    if d.z > 0:
        return d.z
    return max_component(d)


def saw_tooth(x: float, period: float) -> float:
    """Sawtooth function of ``x`` with values in [-period/2, period/2)."""
    x += period / 2
    t = x / period
    return period * (t - math.floor(t)) - period / 2


class Cuboid(SDF3):
    """A box centred at the origin, edges rounded by ``round``."""

    def __init__(self, size: Vec3, round: float = 0.0) -> None:
        if lte_zero(size):
            raise ShapeError("size <= 0")
        if round < 0:
            raise ShapeError("round < 0")
        half = size.scale(0.5)
        self.size = size
        self.round = round
        self._inner = half - elem(round)
        self._bb = Box3(-half, half)

    def evaluate(self, p: Vec3) -> float:
        return sdf_box3d(p, self._inner) - self.round

    def bounds(self) -> Box3:
        return self._bb


class Sphere(SDF3):
    """A sphere centred at the origin (exact distance field)."""

    def __init__(self, radius: float) -> None:
        if radius <= 0:
            raise ShapeError("radius <= 0")
        self.radius = radius
        d = elem(radius)
        self._bb = Box3(-d, d)

    def evaluate(self, p: Vec3) -> float:
        return p.norm() - self.radius

    def bounds(self) -> Box3:
        return self._bb


class Cylinder(SDF3):
    """A cylinder along z centred at the origin, edges rounded by ``round``."""

    def __init__(self, height: float, radius: float, round: float = 0.0) -> None:
        if radius <= 0:
            raise ShapeError("radius <= 0")
        if round < 0:
            raise ShapeError("round < 0")
        if round > radius:
            raise ShapeError("round > radius")
        if height < 2.0 * round:
            raise ShapeError("height < 2 * round")
        self.height = height
        self.radius = radius
        self.round = round
        self._inner = Vec2(radius - round, height / 2 - round)
        d = Vec3(radius, radius, height / 2)
        self._bb = Box3(-d, d)

    def evaluate(self, p: Vec3) -> float:
        d = sdf_box2d(Vec2(math.hypot(p.x, p.y), p.z), self._inner)
        return d - self.round

    def bounds(self) -> Box3:
        return self._bb


class Cone(SDF3):
    """A truncated cone along z with base radius ``r0`` and top radius ``r1``."""

    def __init__(self, height: float, r0: float, r1: float, round: float = 0.0) -> None:
        if height <= 0:
            raise ShapeError("height <= 0")
        if round < 0:
            raise ShapeError("round < 0")
        if height < 2.0 * round:
            raise ShapeError("height < 2 * round")
        self.round = round
        self._h = height / 2 - round
        # Cone slope vector and its outward normal.
        self._u = (Vec2(r1, height / 2) - Vec2(r0, -height / 2)).unit()
        self._n = Vec2(self._u.y, -self._u.x)
        # Inset the radii for the rounding.
        ofs = round / self._n.x
        self._r0 = r0 - (1 + self._n.y) * ofs
        self._r1 = r1 - (1 - self._n.y) * ofs
        self._l = (Vec2(self._r1, self._h) - Vec2(self._r0, -self._h)).norm()
        r = max(self._r0 + round, self._r1 + round)
        self._bb = Box3(Vec3(-r, -r, -height / 2), Vec3(r, r, height / 2))

    def evaluate(self, p: Vec3) -> float:
        # Surface-of-revolution 2D coordinates.
        p2 = Vec2(math.hypot(p.x, p.y), p.z)
        h, rnd = self._h, self.round
        if p2.y >= h and p2.x <= self._r1:
            return p2.y - h - rnd
        if p2.y <= -h and p2.x <= self._r0:
            return -p2.y - h - rnd
        v = p2 - Vec2(self._r0, -h)
        d_slope = v.dot(self._n)
        if d_slope < 0 and abs(p2.y) < h:
            return -min(-d_slope, h - abs(p2.y)) - rnd
        t = v.dot(self._u)
        if 0 <= t <= self._l:
            return d_slope - rnd
        if t < 0:
            return v.norm() - rnd
        return (p2 - Vec2(self._r1, h)).norm() - rnd

    def bounds(self) -> Box3:
        return self._bb


def box(size: Vec3, round: float) -> Cuboid:
    """Box of the given size, rounded edges when ``round`` > 0."""
    return Cuboid(size, round)


def sphere(radius: float) -> Sphere:
    return Sphere(radius)


def cylinder(height: float, radius: float, round: float) -> Cylinder:
    """Cylinder with rounded edges when ``round`` > 0."""
    return Cylinder(height, radius, round)


def capsule(height: float, radius: float) -> Cylinder:
    """Cylinder with fully rounded ends."""
    return Cylinder(height, radius, radius)


def cone(height: float, r0: float, r1: float, round: float) -> Cone:
    """Truncated cone with rounded edges when ``round`` > 0."""
    return Cone(height, r0, r1, round)