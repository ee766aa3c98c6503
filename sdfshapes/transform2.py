"""3x3 homogeneous matrices for 2D transformations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from sdfshapes.vec2 import Box2, Vec2, max_elem, min_elem

_ZERO = (0.0,) * 9


@dataclass(frozen=True)
class Transform2:
    """A 2D spatial transformation stored row-major as nine values.

    The all-zero matrix is treated as the identity when applied to points
    and boxes.
    """

    data: tuple[float, ...] = _ZERO

    def __post_init__(self) -> None:
        values = tuple(float(v) for v in self.data)
        if len(values) != 9:
            raise ValueError("bad length")
        object.__setattr__(self, "data", values)

    def _is_identity(self) -> bool:
        return self.data == _ZERO

    def at(self, i: int, j: int) -> float:
        return self.data[i * 3 + j]

    def scale(self, k: float) -> Transform2:
        """Every element multiplied by ``k``."""
        return Transform2(tuple(v * k for v in self.data))

    def mul(self, other: Transform2) -> Transform2:
        """Matrix product ``self @ other``."""
        return Transform2(
            tuple(
                sum(self.at(i, n) * other.at(n, j) for n in range(3))
                for i in range(3)
                for j in range(3)
            )
        )

    def __matmul__(self, other: Transform2) -> Transform2:
        return self.mul(other)

    def add(self, other: Transform2) -> Transform2:
        return Transform2(tuple(a + b for a, b in zip(self.data, other.data)))

    def apply_position(self, p: Vec2) -> Vec2:
        if self._is_identity():
            return p
        return Vec2(
            self.at(0, 0) * p.x + self.at(0, 1) * p.y + self.at(0, 2),
            self.at(1, 0) * p.x + self.at(1, 1) * p.y + self.at(1, 2),
        )

    def apply_box(self, box: Box2) -> Box2:
        """Transform a box and re-fit it to the axes."""
        if self._is_identity():
            return box
        r = Vec2(self.at(0, 0), self.at(1, 0))
        u = Vec2(self.at(0, 1), self.at(1, 1))
        t = Vec2(self.at(0, 2), self.at(1, 2))
        xa, xb = r.scale(box.min.x), r.scale(box.max.x)
        ya, yb = u.scale(box.min.y), u.scale(box.max.y)
        xa, xb = min_elem(xa, xb), max_elem(xa, xb)
        ya, yb = min_elem(ya, yb), max_elem(ya, yb)
        return Box2(xa + ya + t, xb + yb + t)

    def determinant(self) -> float:
        a = self.at
        return (
            a(0, 0) * (a(1, 1) * a(2, 2) - a(1, 2) * a(2, 1))
            - a(0, 1) * (a(1, 0) * a(2, 2) - a(1, 2) * a(2, 0))
            + a(0, 2) * (a(1, 0) * a(2, 1) - a(1, 1) * a(2, 0))
        )

    def inverse(self) -> Transform2:
        """Matrix inverse; raises ValueError for a singular matrix."""
        det = self.determinant()
        if det == 0:
            raise ValueError("singular transform")
        d = 1 / det
        a = self.at
        return Transform2(
            (
                (a(1, 1) * a(2, 2) - a(1, 2) * a(2, 1)) * d,
                (a(2, 1) * a(0, 2) - a(0, 1) * a(2, 2)) * d,
                (a(0, 1) * a(1, 2) - a(1, 1) * a(0, 2)) * d,
                (a(1, 2) * a(2, 0) - a(2, 2) * a(1, 0)) * d,
                (a(2, 2) * a(0, 0) - a(2, 0) * a(0, 2)) * d,
                (a(0, 2) * a(1, 0) - a(1, 2) * a(0, 0)) * d,
                (a(1, 0) * a(2, 1) - a(2, 0) * a(1, 1)) * d,
                (a(2, 0) * a(0, 1) - a(0, 0) * a(2, 1)) * d,
                (a(0, 0) * a(1, 1) - a(0, 1) * a(1, 0)) * d,
            )
        )


def new_transform2(data: Sequence[float] | None) -> Transform2:
    """Transform from nine row-major values; ``None`` gives all zeros."""
    if data is None:
        return Transform2()
    return Transform2(tuple(data))


def transform2_identity() -> Transform2:
    """The all-zero transform, which applies as the identity."""
    return Transform2()