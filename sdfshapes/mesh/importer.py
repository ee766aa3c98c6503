"""Signed distance fields built from triangle meshes such as STL models."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from typing import Sequence

from sdfshapes.mesh.spatial import (
    TriangleFeature,
    canalis_transform,
    centroid,
    closest_on_triangle2,
    triangle_normal,
)
from sdfshapes.shapes3 import SDF3
from sdfshapes.transform3 import Transform3
from sdfshapes.vec2 import Vec2
from sdfshapes.vec3 import Box3, Vec3, max_elem, min_elem

_INT64_MAX = 2**63 - 1


def _clamp_unit(x: float) -> float:
    return min(1.0, max(-1.0, x))


@dataclass
class _PseudoVertex:
    position: Vec3
    # Angle-weighted pseudo normal of the vertex.
    normal: Vec3 = field(default_factory=Vec3)


@dataclass(frozen=True)
class _MeshTriangle:
    centroid: Vec3
    vertices: tuple[int, int, int]
    normal: Vec3  # face pseudo normal, scaled by 2*pi
    inverse: Transform3
    transform: Transform3
    flat: tuple[Vec2, Vec2, Vec2]  # vertices in the triangle's own plane
    reach: float  # largest distance from centroid to a vertex


class ImportedSDF3(SDF3):
    """A signed distance field of a closed triangle mesh."""

    def __init__(
        self,
        bounds: Box3,
        vertices: list[_PseudoVertex],
        triangles: list[_MeshTriangle],
        edge_normals: dict[tuple[int, int], Vec3],
    ) -> None:
        self._bb = bounds
        self._vertices = vertices
        self._triangles = triangles
        self._edge_normals = edge_normals

    def _closest(self, tri: _MeshTriangle, q: Vec3) -> tuple[float, TriangleFeature, Vec3]:
        local = tri.transform.transform(q)
        on, feature = closest_on_triangle2(Vec2(local.x, local.y), tri.flat)
        closest = tri.inverse.transform(Vec3(on.x, on.y, 0.0))
        return (q - closest).norm2(), feature, closest

    def _signed(
        self, tri: _MeshTriangle, feature: TriangleFeature, closest: Vec3, q: Vec3, dist: float
    ) -> float:
        if feature <= TriangleFeature.V2:
            index = min(
                tri.vertices,
                key=lambda v: (self._vertices[v].position - closest).norm2(),
            )
            vertex = self._vertices[index]
            signed = vertex.normal.dot(q - vertex.position)
        elif feature <= TriangleFeature.E2:
            k = feature - TriangleFeature.E0
            a, b = tri.vertices[k], tri.vertices[(k + 1) % 3]
            edge = (min(a, b), max(a, b))
            signed = self._edge_normals[edge].dot(q - closest)
        else:
            signed = tri.normal.dot(q - closest)
        return math.copysign(dist, signed)

    def evaluate(self, q: Vec3) -> float:
        """Signed distance from ``q`` to the mesh surface (negative inside)."""
        candidates = sorted(
            (max(0.0, (q - t.centroid).norm() - t.reach) ** 2, idx)
            for idx, t in enumerate(self._triangles)
        )
        best_d2 = math.inf
        best = None
        for lower, idx in candidates:
            if lower > best_d2:
                break
            tri = self._triangles[idx]
            d2, feature, closest = self._closest(tri, q)
            if d2 < best_d2:
                best_d2 = d2
                best = (tri, feature, closest)
        tri, feature, closest = best
        return self._signed(tri, feature, closest, q, math.sqrt(best_d2))

    def bounds(self) -> Box3:
        return self._bb


def import_model(triangles: Sequence[Sequence[Vec3]], vertex_tol: float = 0.0) -> ImportedSDF3:
    """SDF3 of the manifold surface formed by ``triangles``.

    Vertices closer than ``vertex_tol`` are merged; it should be around a
    thousandth of the smallest triangle's size. Zero picks one automatically.
    Raises ValueError when no usable tolerance exists.
    """
    tris = [tuple(t) for t in triangles]
    if not tris:
        raise ValueError("no triangles in model")
    big = sys.float_info.max
    bb_min = Vec3(big, big, big)
    bb_max = Vec3(-big, -big, -big)
    min_dist2 = big
    max_dist2 = -big
    for tri in tris:
        for j, vert in enumerate(tri):
            bb_min = min_elem(bb_min, vert)
            bb_max = max_elem(bb_max, vert)
            side2 = (tri[(j + 1) % 3] - vert).norm2()
            min_dist2 = min(min_dist2, side2)
            max_dist2 = max(max_dist2, side2)
    bounds = Box3(bb_min, bb_max)

    suggested = math.sqrt(min_dist2) / 256
    if vertex_tol > math.sqrt(max_dist2) / 2:
        raise ValueError(
            "vertex tolerance is too large to generate appropiate mesh, "
            f"suggested tolerance: {suggested:g}"
        )
    tol = suggested if vertex_tol == 0 else vertex_tol
    size = bounds.size()
    max_dim = max(size.x, size.y, size.z)
    if tol <= 0:
        raise ValueError("tolerance too small. overflowed int64")
    div = int(max_dim / tol + 1e-12)
    if div <= 0:
        raise ValueError("tolerance larger than model size")
    if div > _INT64_MAX // 2:
        raise ValueError("tolerance too small. overflowed int64")

    ri = 1 / tol
    cache: dict[tuple[int, int, int], int] = {}
    vertices: list[_PseudoVertex] = []
    edge_normals: dict[tuple[int, int], Vec3] = {}
    mesh_triangles: list[_MeshTriangle] = []
    for tri in tris:
        norm = triangle_normal(tri).unit()
        indices = []
        for j, vert in enumerate(tri):
            key = (int(vert.x * ri), int(vert.y * ri), int(vert.z * ri))
            index = cache.get(key)
            if index is None:
                index = len(vertices)
                cache[key] = index
                vertices.append(_PseudoVertex(vert))
            s1 = vert - tri[(j + 1) % 3]
            s2 = vert - tri[(j + 2) % 3]
            alpha = math.acos(_clamp_unit(s1.dot(s2) / (s1.norm() * s2.norm())))
            vertices[index].normal = vertices[index].normal + norm.scale(alpha)
            indices.append(index)
        for j in range(3):
            a, b = indices[j], indices[(j + 1) % 3]
            edge = (min(a, b), max(a, b))
            edge_normals[edge] = edge_normals.get(edge, Vec3()) + norm.scale(math.pi)

        transform = canalis_transform(tri)
        c = centroid(tri)
        positions = [vertices[i].position for i in indices]
        flat = tuple(
            Vec2(p.x, p.y) for p in (transform.transform(v) for v in positions)
        )
        mesh_triangles.append(
            _MeshTriangle(
                centroid=c,
                vertices=(indices[0], indices[1], indices[2]),
                normal=norm.scale(2 * math.pi),
                inverse=transform.inv(),
                transform=transform,
                flat=flat,
                reach=max((p - c).norm() for p in positions),
            )
        )
    return ImportedSDF3(bounds, vertices, mesh_triangles, edge_normals)