"""Polygon signed distance fields and a builder for polygon outlines."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from enum import Enum
from itertools import pairwise
from typing import Iterable

from sdfshapes.shapes2 import SDF2, SQRT_HALF, TOLERANCE, ShapeError, sign
from sdfshapes.transform2 import Transform2
from sdfshapes.vec2 import Box2, Vec2, equal_within, polar_to_xy, set_max, set_min


def rotation(angle: float) -> Transform2:
    """2D transform rotating by ``angle`` radians about the origin."""
    c, s = math.cos(angle), math.sin(angle)
    return Transform2((c, -s, 0.0, s, c, 0.0, 0.0, 0.0, 1.0))


def _clamp_unit(x: float) -> float:
    if math.isnan(x):
        return x
    return min(1.0, max(-1.0, x))


class Polygon(SDF2):
    """An SDF2 made from a closed set of line segments."""

    def __init__(self, vertices: Iterable[Vec2]) -> None:
        pts = list(vertices)
        if len(pts) < 3:
            raise ShapeError("number of vertices < 3")
        if not equal_within(pts[0], pts[-1], TOLERANCE):
            pts.append(pts[0])
        segments = [b - a for a, b in pairwise(pts)]
        self._vertex = tuple(pts)
        self._length = tuple(s.norm() for s in segments)
        self._vector = tuple(s.unit() for s in segments)
        self._bb = Box2(set_min(pts[:-1]), set_max(pts[:-1]))

    def evaluate(self, p: Vec2) -> float:
        """Signed distance to the polygon outline, negative inside."""
        dd = sys.float_info.max
        winding = 0
        pb = p - self._vertex[0]
        for a, b, u, length in zip(
            self._vertex, self._vertex[1:], self._vector, self._length
        ):
            pa = pb
            pb = p - b
            t = pa.dot(u)
            dn = pa.dot(Vec2(u.y, -u.x))
            if t < 0:
                dd = min(dd, pa.norm2())
            elif t > length:
                dd = min(dd, pb.norm2())
            else:
                dd = min(dd, dn * dn)
            # Winding number test for inclusion.
            if a.y <= p.y:
                if b.y > p.y and dn < 0:
                    winding += 1
            elif b.y <= p.y and dn > 0:
                winding -= 1
        d = math.sqrt(dd)
        return -d if winding != 0 else d

    def bounds(self) -> Box2:
        return self._bb


def polygon(vertices: Iterable[Vec2]) -> Polygon:
    """Polygon from its vertices; raises ShapeError for fewer than three."""
    return Polygon(vertices)


class VertexType(Enum):
    NORMAL = 0
    SMOOTH = 1
    ARC = 2


@dataclass
class PolygonVertex:
    """A vertex in a polygon outline, with optional smoothing or arc marking."""

    vertex: Vec2
    relative: bool = False
    vtype: VertexType = VertexType.NORMAL
    facets: int = 0
    radius: float = 0.0

    def rel(self) -> PolygonVertex:
        """Position this vertex relative to the prior one."""
        self.relative = True
        return self

    def polar(self) -> PolygonVertex:
        """Treat the vertex values as polar coordinates (r, theta)."""
        self.vertex = polar_to_xy(self.vertex.x, self.vertex.y)
        return self

    def smooth(self, radius: float, facets: int) -> PolygonVertex:
        """Round this corner with an arc of ``radius`` split into ``facets``."""
        if radius != 0 and facets != 0:
            self.radius = radius
            self.facets = facets
            self.vtype = VertexType.SMOOTH
        return self

    def chamfer(self, size: float) -> PolygonVertex:
        """Cut this corner with a single facet (exact only for right angles)."""
        if size != 0:
            self.radius = size * SQRT_HALF
            self.facets = 1
            self.vtype = VertexType.SMOOTH
        return self

    def arc(self, radius: float, facets: int) -> PolygonVertex:
        """Replace the segment ending here with a circular arc.

        The sign of ``radius`` picks the side of the chord the arc bulges to.
        """
        if radius != 0 and facets != 0:
            self.radius = radius
            self.facets = facets
            self.vtype = VertexType.ARC
        return self


class PolygonBuilder:
    """Collects polygon vertices and resolves arcs, smoothing and relative points."""

    def __init__(self) -> None:
        self._closed = False
        self._reverse = False
        self._vlist: list[PolygonVertex] = []

    def close(self) -> None:
        self._closed = True

    def closed(self) -> bool:
        return self._closed

    def reverse(self) -> None:
        """Return the vertices in reverse order."""
        self._reverse = True

    def add_vec(self, v: Vec2) -> PolygonVertex:
        vertex = PolygonVertex(v)
        self._vlist.append(vertex)
        return vertex

    def add_vecs(self, vectors: Iterable[Vec2]) -> None:
        for v in vectors:
            self.add_vec(v)

    def add(self, x: float, y: float) -> PolygonVertex:
        return self.add_vec(Vec2(x, y))

    def drop(self) -> None:
        """Remove the last vertex."""
        self._vlist.pop()

    def vertices(self) -> list[Vec2]:
        """Resolved vertex positions; raises ValueError if there are none."""
        if not self._vlist:
            raise ValueError("empty vertex list")
        self._fixups()
        points = [v.vertex for v in self._vlist]
        return points[::-1] if self._reverse else points

    def _next(self, i: int) -> PolygonVertex | None:
        if i == len(self._vlist) - 1:
            return self._vlist[0] if self._closed else None
        return self._vlist[i + 1]

    def _prev(self, i: int) -> PolygonVertex | None:
        if i == 0:
            return self._vlist[-1] if self._closed else None
        return self._vlist[i - 1]

    def _arc_vertex(self, i: int) -> bool:
        v = self._vlist[i]
        if v.vtype is not VertexType.ARC:
            return False
        v.vtype = VertexType.NORMAL
        pv = self._prev(i)
        if pv is None:
            return False
        side = sign(v.radius)
        radius = abs(v.radius)
        a, b = pv.vertex, v.vertex
        ba = (b - a).unit()
        n = Vec2(ba.y, -ba.x).scale(side)
        mid = (a + b).scale(0.5)
        d_mid = (mid - a).norm()
        square = radius * radius - d_mid * d_mid
        if square < -TOLERANCE:
            raise ShapeError("arc radius smaller than half the chord")
        c = mid + n.scale(math.sqrt(max(square, 0.0)))
        ac = (a - c).unit()
        bc = (b - c).unit()
        dtheta = -side * math.acos(_clamp_unit(ac.dot(bc))) / v.facets
        m = rotation(dtheta)
        rv = m.apply_position(a - c)
        inserted = []
        for _ in range(v.facets - 1):
            inserted.append(PolygonVertex(c + rv))
            rv = m.apply_position(rv)
        self._vlist[i:i] = inserted
        return True

    def _create_arcs(self) -> None:
        done = False
        while not done:
            done = True
            for i in range(len(self._vlist)):
                if self._arc_vertex(i):
                    done = False

    def _smooth_vertex(self, i: int) -> bool:
        v = self._vlist[i]
        if v.vtype is not VertexType.SMOOTH:
            return False
        vn = self._next(i)
        vp = self._prev(i)
        if vp is None or vn is None:
            # Endpoints of an open polygon cannot be smoothed.
            return False
        v0 = (vp.vertex - v.vertex).unit()
        v1 = (vn.vertex - v.vertex).unit()
        theta = math.acos(_clamp_unit(v0.dot(v1)))
        tan_half = math.tan(theta / 2.0)
        if tan_half == 0:
            return False
        d1 = v.radius / tan_half
        if d1 > (vp.vertex - v.vertex).norm() or d1 > (vn.vertex - v.vertex).norm():
            # Radius too large for the adjoining segments.
            return False
        p0 = v.vertex + v0.scale(d1)
        d2 = v.radius / math.sin(theta / 2.0)
        c = v.vertex + (v0 + v1).unit().scale(d2)
        dtheta = sign(v1.cross(v0)) * (math.pi - theta) / v.facets
        rm = rotation(dtheta)
        rv = p0 - c
        points = []
        for _ in range(v.facets + 1):
            points.append(PolygonVertex(c + rv))
            rv = rm.apply_position(rv)
        self._vlist[i : i + 1] = points
        return True

    def _smooth_vertices(self) -> None:
        done = False
        while not done:
            done = True
            for i in range(len(self._vlist)):
                if self._smooth_vertex(i):
                    done = False

    def _rel_to_abs(self) -> None:
        for i, v in enumerate(self._vlist):
            if not v.relative:
                continue
            pv = self._prev(i)
            if pv is None or pv.relative:
                raise ValueError("relative vertex needs an absolute reference")
            v.vertex = v.vertex + pv.vertex
            v.relative = False

    def _fixups(self) -> None:
        self._rel_to_abs()
        self._create_arcs()
        self._smooth_vertices()


def new_polygon() -> PolygonBuilder:
    """An empty polygon builder."""
    return PolygonBuilder()


def nagon(n: int, radius: float) -> list[Vec2]:
    """Vertices of a regular ``n``-sided polygon; empty when ``n`` < 3."""
    if n < 3:
        return []
    m = rotation(2 * math.pi / n)
    p = Vec2(radius, 0.0)
    out = []
    for _ in range(n):
        out.append(p)
        p = m.apply_position(p)
    return out