"""Three-dimensional vectors and axis-aligned boxes."""

from __future__ import annotations

import math
import random as _random
from dataclasses import dataclass
from typing import Iterable

from sdfshapes.vec2 import Vec2


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def add(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, k: float) -> Vec3:
        return Vec3(k * self.x, k * self.y, k * self.z)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def norm(self) -> float:
        return math.sqrt(self.norm2())

    def norm2(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def unit(self) -> Vec3:
        """Unit vector along this one; NaN components for the zero vector."""
        n = self.norm()
        if n == 0:
            return Vec3(math.nan, math.nan, math.nan)
        return self.scale(1 / n)

    def __add__(self, other: Vec3) -> Vec3:
        return self.add(other)

    def __sub__(self, other: Vec3) -> Vec3:
        return self.sub(other)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, k: float) -> Vec3:
        return self.scale(k)

    __rmul__ = __mul__


def elem(sides: float) -> Vec3:
    """Vector with all components equal to ``sides``."""
    return Vec3(sides, sides, sides)


def equal_within(a: Vec3, b: Vec3, tol: float) -> bool:
    return abs(a.x - b.x) <= tol and abs(a.y - b.y) <= tol and abs(a.z - b.z) <= tol


def lt_zero(a: Vec3) -> bool:
    """True if any component is negative."""
    return a.x < 0 or a.y < 0 or a.z < 0


def lte_zero(a: Vec3) -> bool:
    """True if any component is zero or negative."""
    return a.x <= 0 or a.y <= 0 or a.z <= 0


def min_elem(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))


def max_elem(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))


def _clamp(x: float, a: float, b: float) -> float:
    return min(b, max(x, a))


def clamp(x: Vec3, a: Vec3, b: Vec3) -> Vec3:
    """Clamp each component of ``x`` between those of ``a`` and ``b``."""
    return Vec3(_clamp(x.x, a.x, b.x), _clamp(x.y, a.y, b.y), _clamp(x.z, a.z, b.z))


def max_component(a: Vec3) -> float:
    return max(a.x, a.y, a.z)


def min_component(a: Vec3) -> float:
    return min(a.x, a.y, a.z)


def abs_elem(a: Vec3) -> Vec3:
    return Vec3(abs(a.x), abs(a.y), abs(a.z))


def ceil_elem(a: Vec3) -> Vec3:
    return Vec3(float(math.ceil(a.x)), float(math.ceil(a.y)), float(math.ceil(a.z)))


def mul_elem(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(a.x * b.x, a.y * b.y, a.z * b.z)


def div_elem(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(a.x / b.x, a.y / b.y, a.z / b.z)


def sin_elem(a: Vec3) -> Vec3:
    return Vec3(math.sin(a.x), math.sin(a.y), math.sin(a.z))


def cos_elem(a: Vec3) -> Vec3:
    return Vec3(math.cos(a.x), math.cos(a.y), math.cos(a.z))


def _nonempty(vectors: Iterable[Vec3]) -> list[Vec3]:
    items = list(vectors)
    if not items:
        raise ValueError("empty vector set")
    return items


def set_min(vectors: Iterable[Vec3]) -> Vec3:
    """Componentwise minimum of a non-empty set of vectors."""
    items = _nonempty(vectors)
    result = items[0]
    for v in items[1:]:
        result = min_elem(result, v)
    return result


def set_max(vectors: Iterable[Vec3]) -> Vec3:
    """Componentwise maximum of a non-empty set of vectors."""
    items = _nonempty(vectors)
    result = items[0]
    for v in items[1:]:
        result = max_elem(result, v)
    return result


def from_vec2(v: Vec2, z: float) -> Vec3:
    return Vec3(v.x, v.y, z)


def _random_range(a: float, b: float) -> float:
    return a + (b - a) * _random.random()


@dataclass(frozen=True)
class Box3:
    """An axis-aligned 3D bounding box."""

    min: Vec3
    max: Vec3

    def equals(self, other: Box3, tol: float) -> bool:
        return equal_within(self.min, other.min, tol) and equal_within(
            self.max, other.max, tol
        )

    def extend(self, other: Box3) -> Box3:
        """Smallest box enclosing both boxes."""
        return Box3(min_elem(self.min, other.min), max_elem(self.max, other.max))

    def include(self, v: Vec3) -> Box3:
        """Smallest box enclosing this box and the point ``v``."""
        return Box3(min_elem(self.min, v), max_elem(self.max, v))

    def translate(self, v: Vec3) -> Box3:
        return Box3(self.min + v, self.max + v)

    def size(self) -> Vec3:
        return self.max - self.min

    def center(self) -> Vec3:
        return self.min + self.size().scale(0.5)

    def scale_about_center(self, k: float) -> Box3:
        return new_box(self.center(), self.size().scale(k))

    def enlarge(self, v: Vec3) -> Box3:
        """Box grown by ``v`` in total, half on each side."""
        half = v.scale(0.5)
        return Box3(self.min - half, self.max + half)

    def contains(self, v: Vec3) -> bool:
        """True if ``v`` lies in the box, boundary included."""
        return (
            self.min.x <= v.x <= self.max.x
            and self.min.y <= v.y <= self.max.y
            and self.min.z <= v.z <= self.max.z
        )

    def vertices(self) -> list[Vec3]:
        """The eight corners, from ``min`` to ``max`` with z varying fastest."""
        lo, hi = self.min, self.max
        return [
            lo,
            Vec3(lo.x, lo.y, hi.z),
            Vec3(lo.x, hi.y, lo.z),
            Vec3(lo.x, hi.y, hi.z),
            Vec3(hi.x, lo.y, lo.z),
            Vec3(hi.x, lo.y, hi.z),
            Vec3(hi.x, hi.y, lo.z),
            hi,
        ]

    def min_max_dist2(self, p: Vec3) -> tuple[float, float]:
        """Minimum and maximum squared distance from ``p`` to the box."""
        moved = self.translate(-p)
        dists = [v.norm2() for v in moved.vertices()]
        min_dist2 = min(dists)
        max_dist2 = max(0.0, *dists)

        within_x = moved.min.x < 0 < moved.max.x
        within_y = moved.min.y < 0 < moved.max.y
        within_z = moved.min.z < 0 < moved.max.z
        if within_x and within_y and within_z:
            min_dist2 = 0.0
        else:
            if within_x and within_y:
                d = min(abs(moved.max.z), abs(moved.min.z))
                min_dist2 = min(min_dist2, d * d)
            if within_x and within_z:
                d = min(abs(moved.max.y), abs(moved.min.y))
                min_dist2 = min(min_dist2, d * d)
            if within_y and within_z:
                d = min(abs(moved.max.x), abs(moved.min.x))
                min_dist2 = min(min_dist2, d * d)
        return min_dist2, max_dist2

    def random(self) -> Vec3:
        """A uniformly random point within the box."""
        return Vec3(
            _random_range(self.min.x, self.max.x),
            _random_range(self.min.y, self.max.y),
            _random_range(self.min.z, self.max.z),
        )

    def random_set(self, n: int) -> list[Vec3]:
        return [self.random() for _ in range(n)]


def new_box(center: Vec3, size: Vec3) -> Box3:
    """Box with the given center and size."""
    half = size.scale(0.5)
    return Box3(center - half, center + half)


def centered_box(center: Vec3, size: Vec3) -> Box3:
    """Box with the given center and size; negative sizes count as zero."""
    return new_box(center, max_elem(size, Vec3()))