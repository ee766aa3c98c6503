"""4x4 homogeneous matrices for 3D transformations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from sdfshapes.vec3 import Vec3

_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)
_ZERO = (0.0,) * 16
_SINGULAR_TOL = 1e-16


@dataclass(frozen=True)
class Rotation:
    """A quaternion rotation ``real + imag*i + jmag*j + kmag*k``."""

    real: float = 0.0
    imag: float = 0.0
    jmag: float = 0.0
    kmag: float = 0.0


def _det3(a: Sequence[float]) -> float:
    return (
        a[0] * (a[4] * a[8] - a[5] * a[7])
        - a[1] * (a[3] * a[8] - a[5] * a[6])
        + a[2] * (a[3] * a[7] - a[4] * a[6])
    )


@dataclass(frozen=True)
class Transform3:
    """A 3D spatial transformation stored row-major as sixteen values.

    The default value is the identity transform.
    """

    m: tuple[float, ...] = _IDENTITY

    def __post_init__(self) -> None:
        values = tuple(float(v) for v in self.m)
        if len(values) != 16:
            raise ValueError("Transform is initialized with 16 values")
        object.__setattr__(self, "m", values)

    def _at(self, i: int, j: int) -> float:
        return self.m[i * 4 + j]

    def _minor(self, row: int, col: int) -> float:
        sub = [
            self._at(i, j)
            for i in range(4)
            if i != row
            for j in range(4)
            if j != col
        ]
        return _det3(sub)

    def transform(self, v: Vec3) -> Vec3:
        """Apply the transform to a point, with perspective division."""
        m = self.m
        denom = m[12] * v.x + m[13] * v.y + m[14] * v.z + m[15]
        w = 1 / denom if denom != 0 else math.copysign(math.inf, denom)
        return Vec3(
            (m[0] * v.x + m[1] * v.y + m[2] * v.z + m[3]) * w,
            (m[4] * v.x + m[5] * v.y + m[6] * v.z + m[7]) * w,
            (m[8] * v.x + m[9] * v.y + m[10] * v.z + m[11]) * w,
        )

    def translate(self, v: Vec3) -> Transform3:
        """The transform with ``v`` added to its translation."""
        m = list(self.m)
        m[3] += v.x
        m[7] += v.y
        m[11] += v.z
        return Transform3(tuple(m))

    def _scale(self, factor: Vec3) -> Transform3:
        m = list(self.m)
        for row in range(4):
            m[row * 4] *= factor.x
            m[row * 4 + 1] *= factor.y
            m[row * 4 + 2] *= factor.z
        return Transform3(tuple(m))

    def scale(self, origin: Vec3, factor: Vec3) -> Transform3:
        """The transform with scaling by ``factor`` added around ``origin``."""
        if origin == Vec3():
            return self._scale(factor)
        t = self.translate(-origin)
        t = t._scale(factor)
        return t.translate(origin)

    def mul(self, other: Transform3) -> Transform3:
        """Matrix product ``self @ other``: both transforms combined in one."""
        if self.is_identity():
            return other
        if other.is_identity():
            return self
        return Transform3(
            tuple(
                sum(self._at(i, n) * other._at(n, j) for n in range(4))
                for i in range(4)
                for j in range(4)
            )
        )

    def __matmul__(self, other: Transform3) -> Transform3:
        return self.mul(other)

    def det(self) -> float:
        return sum(
            (-1) ** j * self._at(0, j) * self._minor(0, j) for j in range(4)
        )

    def inv(self) -> Transform3:
        """Inverse transform; the all-zero transform if the matrix is singular."""
        if self.is_identity():
            return self
        det = self.det()
        if abs(det) < _SINGULAR_TOL:
            return Transform3(_ZERO)
        d = 1 / det
        return Transform3(
            tuple(
                (-1) ** (i + j) * self._minor(j, i) * d
                for i in range(4)
                for j in range(4)
            )
        )

    def transpose(self) -> Transform3:
        return Transform3(tuple(self._at(j, i) for i in range(4) for j in range(4)))

    def equals(self, other: Transform3, tolerance: float) -> bool:
        """True if every element differs by less than ``tolerance``."""
        return all(abs(a - b) < tolerance for a, b in zip(self.m, other.m))

    def values(self) -> list[float]:
        """A copy of the sixteen elements in row-major order."""
        return list(self.m)

    def is_identity(self) -> bool:
        return self.m == _IDENTITY


def new_transform3(values: Sequence[float] | None) -> Transform3:
    """Transform from sixteen row-major values; ``None`` gives all zeros."""
    if values is None:
        return Transform3(_ZERO)
    return Transform3(tuple(values))


def compose_transform(position: Vec3, scale: Vec3, q: Rotation) -> Transform3:
    """Transform translating to ``position``, scaling by ``scale`` and rotating by ``q``.

    ``compose_transform(Vec3(), Vec3(1, 1, 1), Rotation())`` is the identity.
    """
    x2 = q.imag + q.imag
    y2 = q.jmag + q.jmag
    z2 = q.kmag + q.kmag
    xx = q.imag * x2
    yy = q.jmag * y2
    zz = q.kmag * z2
    xy = q.imag * y2
    xz = q.imag * z2
    yz = q.jmag * z2
    wx = q.real * x2
    wy = q.real * y2
    wz = q.real * z2
    return Transform3(
        (
            (1 - (yy + zz)) * scale.x, (xy - wz) * scale.y, (xz + wy) * scale.z, position.x,
            (xy + wz) * scale.x, (1 - (xx + zz)) * scale.y, (yz - wx) * scale.z, position.y,
            (xz - wy) * scale.x, (yz + wx) * scale.y, (1 - (xx + yy)) * scale.z, position.z,
            0.0, 0.0, 0.0, 1.0,
        )
    )