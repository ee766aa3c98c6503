"""Two-dimensional vectors, polar coordinates and axis-aligned boxes."""

from __future__ import annotations

import math
import random as _random
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def add(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def sub(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def scale(self, k: float) -> Vec2:
        return Vec2(k * self.x, k * self.y)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vec2) -> float:
        """Z component of the 3D cross product of the two vectors."""
        return self.x * other.y - self.y * other.x

    def norm(self) -> float:
        return math.hypot(self.x, self.y)

    def norm2(self) -> float:
        return self.x * self.x + self.y * self.y

    def unit(self) -> Vec2:
        """Unit vector along this one; NaN components for the zero vector."""
        n = self.norm()
        if n == 0:
            return Vec2(math.nan, math.nan)
        return self.scale(1 / n)

    def __add__(self, other: Vec2) -> Vec2:
        return self.add(other)

    def __sub__(self, other: Vec2) -> Vec2:
        return self.sub(other)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, k: float) -> Vec2:
        return self.scale(k)

    __rmul__ = __mul__


def elem(sides: float) -> Vec2:
    """Vector with both components equal to ``sides``."""
    return Vec2(sides, sides)


def equal_within(a: Vec2, b: Vec2, tol: float) -> bool:
    return abs(a.x - b.x) <= tol and abs(a.y - b.y) <= tol


def lt_zero(a: Vec2) -> bool:
    """True if any component is negative."""
    return a.x < 0 or a.y < 0


def lte_zero(a: Vec2) -> bool:
    """True if any component is zero or negative."""
    return a.x <= 0 or a.y <= 0


def min_elem(a: Vec2, b: Vec2) -> Vec2:
    return Vec2(min(a.x, b.x), min(a.y, b.y))


def max_elem(a: Vec2, b: Vec2) -> Vec2:
    return Vec2(max(a.x, b.x), max(a.y, b.y))


def _clamp(x: float, a: float, b: float) -> float:
    return min(b, max(x, a))


def clamp(x: Vec2, a: Vec2, b: Vec2) -> Vec2:
    """Clamp each component of ``x`` between those of ``a`` and ``b``."""
    return Vec2(_clamp(x.x, a.x, b.x), _clamp(x.y, a.y, b.y))


def max_component(a: Vec2) -> float:
    return max(a.x, a.y)


def min_component(a: Vec2) -> float:
    return min(a.x, a.y)


def abs_elem(a: Vec2) -> Vec2:
    return Vec2(abs(a.x), abs(a.y))


def ceil_elem(a: Vec2) -> Vec2:
    return Vec2(float(math.ceil(a.x)), float(math.ceil(a.y)))


def mul_elem(a: Vec2, b: Vec2) -> Vec2:
    return Vec2(a.x * b.x, a.y * b.y)


def div_elem(a: Vec2, b: Vec2) -> Vec2:
    return Vec2(a.x / b.x, a.y / b.y)


def sin_elem(a: Vec2) -> Vec2:
    return Vec2(math.sin(a.x), math.sin(a.y))


def cos_elem(a: Vec2) -> Vec2:
    return Vec2(math.cos(a.x), math.cos(a.y))


def _nonempty(vectors: Iterable[Vec2]) -> list[Vec2]:
    items = list(vectors)
    if not items:
        raise ValueError("empty vector set")
    return items


def set_min(vectors: Iterable[Vec2]) -> Vec2:
    """Componentwise minimum of a non-empty set of vectors."""
    items = _nonempty(vectors)
    result = items[0]
    for v in items[1:]:
        result = min_elem(result, v)
    return result


def set_max(vectors: Iterable[Vec2]) -> Vec2:
    """Componentwise maximum of a non-empty set of vectors."""
    items = _nonempty(vectors)
    result = items[0]
    for v in items[1:]:
        result = max_elem(result, v)
    return result


@dataclass(frozen=True)
class Polar:
    """A polar coordinate (radius, angle in radians)."""

    r: float
    theta: float

    def to_cartesian(self) -> Vec2:
        return Vec2(self.r * math.cos(self.theta), self.r * math.sin(self.theta))


def cartesian_to_polar(a: Vec2) -> Polar:
    return Polar(a.norm(), math.atan2(a.y, a.x))


def polar_to_xy(r: float, theta: float) -> Vec2:
    return Polar(r, theta).to_cartesian()


def overlap(a: Vec2, b: Vec2) -> bool:
    """True if the 1D segments [a.x, a.y] and [b.x, b.y] overlap."""
    return a.y >= b.x and b.y >= a.x


def sort_by_x(vectors: Iterable[Vec2]) -> list[Vec2]:
    """Vectors sorted by ascending x component."""
    return sorted(vectors, key=lambda v: v.x)


def _random_range(a: float, b: float) -> float:
    return a + (b - a) * _random.random()


@dataclass(frozen=True)
class Box2:
    """An axis-aligned 2D bounding box."""

    min: Vec2
    max: Vec2

    def equals(self, other: Box2, tol: float) -> bool:
        return equal_within(self.min, other.min, tol) and equal_within(
            self.max, other.max, tol
        )

    def extend(self, other: Box2) -> Box2:
        """Smallest box enclosing both boxes."""
        return Box2(min_elem(self.min, other.min), max_elem(self.max, other.max))

    def include(self, v: Vec2) -> Box2:
        """Smallest box enclosing this box and the point ``v``."""
        return Box2(min_elem(self.min, v), max_elem(self.max, v))

    def translate(self, v: Vec2) -> Box2:
        return Box2(self.min + v, self.max + v)

    def size(self) -> Vec2:
        return self.max - self.min

    def center(self) -> Vec2:
        return self.min + self.size().scale(0.5)

    def scale_about_center(self, k: float) -> Box2:
        return box2_from_center(self.center(), self.size().scale(k))

    def enlarge(self, v: Vec2) -> Box2:
        """Box grown by ``v`` in total, half on each side."""
        half = v.scale(0.5)
        return Box2(self.min - half, self.max + half)

    def contains(self, v: Vec2) -> bool:
        """True if ``v`` lies in the box, boundary included."""
        return (
            self.min.x <= v.x <= self.max.x and self.min.y <= v.y <= self.max.y
        )

    def vertices(self) -> list[Vec2]:
        """Corners: bottom left, bottom right, top left, top right."""
        return [
            self.min,
            Vec2(self.max.x, self.min.y),
            Vec2(self.min.x, self.max.y),
            self.max,
        ]

    def bottom_left(self) -> Vec2:
        return self.min

    def top_left(self) -> Vec2:
        return Vec2(self.min.x, self.max.y)

    def min_max_dist2(self, p: Vec2) -> Vec2:
        """Minimum and maximum squared distance from ``p`` to the box as (min, max)."""
        moved = self.translate(-p)
        dists = [v.norm2() for v in moved.vertices()]
        min_dist2 = min(dists)
        max_dist2 = max(0.0, *dists)

        within_x = moved.min.x < 0 < moved.max.x
        within_y = moved.min.y < 0 < moved.max.y
        if within_x and within_y:
            min_dist2 = 0.0
        else:
            if within_x:
                d = min(abs(moved.max.y), abs(moved.min.y))
                min_dist2 = min(min_dist2, d * d)
            if within_y:
                d = min(abs(moved.max.x), abs(moved.min.x))
                min_dist2 = min(min_dist2, d * d)
        return Vec2(min_dist2, max_dist2)

    def random(self) -> Vec2:
        """A uniformly random point within the box."""
        return Vec2(
            _random_range(self.min.x, self.max.x),
            _random_range(self.min.y, self.max.y),
        )

    def random_set(self, n: int) -> list[Vec2]:
        return [self.random() for _ in range(n)]


def box2_from_center(center: Vec2, size: Vec2) -> Box2:
    """Box with the given center and size."""
    half = size.scale(0.5)
    return Box2(center - half, center + half)