"""Basic 2D signed distance shapes: circle, rectangle and line."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from sdfshapes.vec2 import Box2, Vec2, abs_elem, elem

SQRT_HALF = 0.7071067811865476
TOLERANCE = 1e-9
INCHES_PER_MILLIMETRE = 1.0 / 25.4


class ShapeError(ValueError):
    """Raised when a shape is given invalid dimensions."""


class SDF2(ABC):
    """A 2D signed distance field with a bounding box."""

    @abstractmethod
    def evaluate(self, p: Vec2) -> float:
        """Signed distance from ``p`` to the shape surface (negative inside)."""

    @abstractmethod
    def bounds(self) -> Box2:
        """Axis-aligned bounding box of the shape."""


def sdf_box2d(p: Vec2, s: Vec2) -> float:
    """Signed distance from ``p`` to a box centred at the origin with half-size ``s``."""
    p = abs_elem(p)
    d = p - s
    k = s.y - s.x
    if d.x > 0 and d.y > 0:
        return d.norm()
    if p.y - p.x > k:
        return d.y
    return d.x


def sign(f: float) -> float:
    """-1, 0 or 1 according to the sign of ``f``."""
    if f == 0:
        return 0.0
    return math.copysign(1.0, f)


@dataclass(frozen=True)
class Circle(SDF2):
    """A circle centred at the origin."""

    radius: float

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise ShapeError("radius < 0")

    def evaluate(self, p: Vec2) -> float:
        return p.norm() - self.radius

    def bounds(self) -> Box2:
        d = elem(self.radius)
        return Box2(-d, d)


@dataclass(frozen=True)
class Rect(SDF2):
    """A rectangle centred at the origin, corners rounded by ``round``."""

    size: Vec2
    round: float = 0.0
    _inner: Vec2 = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        half = self.size.scale(0.5)
        object.__setattr__(self, "_inner", half - elem(self.round))

    def evaluate(self, p: Vec2) -> float:
        return sdf_box2d(p, self._inner) - self.round

    def bounds(self) -> Box2:
        half = self.size.scale(0.5)
        return Box2(-half, half)


@dataclass(frozen=True)
class Line(SDF2):
    """A segment from (-length/2, 0) to (length/2, 0), thickened by ``round``."""

    length: float
    round: float = 0.0

    def evaluate(self, p: Vec2) -> float:
        half = self.length / 2
        p = abs_elem(p)
        if p.x <= half:
            return p.y - self.round
        return (p - Vec2(half, 0.0)).norm() - self.round

    def bounds(self) -> Box2:
        half = self.length / 2
        r = self.round
        return Box2(Vec2(-half - r, -r), Vec2(half + r, r))


def circle(radius: float) -> Circle:
    """Circle of the given radius; raises ShapeError for a negative radius."""
    return Circle(radius)


def box(size: Vec2, round: float) -> Rect:
    """Rectangle of the given size with rounded corners when ``round`` > 0."""
    return Rect(size, round)


def line(length: float, round: float) -> Line:
    """Line of the given length centred on the origin along x."""
    return Line(length, round)