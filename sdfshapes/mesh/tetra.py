"""Volumetric tetrahedron meshes that fit a signed distance field."""

from __future__ import annotations

from dataclasses import dataclass, field

from sdfshapes.mesh.bcc import Tetra, make_bcc_mesh
from sdfshapes.mesh.spatial import gradient
from sdfshapes.shapes3 import SDF3
from sdfshapes.vec3 import Vec3

_GRADIENT_STEP = 1e-6
_SMOOTH_PASSES = 6


@dataclass
class _ONode:
    pos: Vec3
    # (tetrahedron index, position of the node within it)
    tetras: list[tuple[int, int]] = field(default_factory=list)
    # unique indices of nodes sharing a tetrahedron with this one
    connectivity: list[int] = field(default_factory=list)


class _OMesh:
    def __init__(self, nodes: list[Vec3], tetras: list[Tetra]) -> None:
        self.nodes: dict[int, _ONode] = {}
        self.tetras = tetras
        for tetidx, tetra in enumerate(tetras):
            for hint, n in enumerate(tetra):
                on = self.nodes.setdefault(n, _ONode(nodes[n]))
                on.tetras.append((tetidx, hint))
                for c in tetra:
                    if c != n and c not in on.connectivity:
                        on.connectivity.append(c)

    def compress_and_smooth(self, compress: float, s: SDF3) -> None:
        """Pull outside nodes toward the surface, then Laplacian-smooth the rest."""
        if not 0 <= compress <= 1:
            raise ValueError("compress must be positive and less equal to 1")
        boundary = set()
        for i, on in self.nodes.items():
            d = s.evaluate(on.pos)
            if d > 0:
                boundary.add(i)
                g = gradient(on.pos, _GRADIENT_STEP, s.evaluate)
                if g.norm() > 0:
                    on.pos = on.pos - g.unit().scale(compress * d)
        for i, on in self.nodes.items():
            if i in boundary:
                continue
            total = Vec3()
            for conn in on.connectivity:
                total = total + self.nodes[conn].pos
            on.pos = total.scale(1 / len(on.connectivity))


def uniform_tetrahedron_mesh(resolution: float, s: SDF3) -> tuple[list[Vec3], list[Tetra]]:
    """Tetrahedron mesh that tries its best to encapsulate ``s``.

    Returns node positions and the tetrahedra as node index quadruples.
    Smooth models that make good use of rounding give the best results.
    """
    nodes, tetras = make_bcc_mesh(s.bounds(), resolution).mesh_tetra()
    kept = [t for t in tetras if any(s.evaluate(nodes[n]) < 0 for n in t)]
    omesh = _OMesh(nodes, kept)
    for step in range(1, _SMOOTH_PASSES + 1):
        omesh.compress_and_smooth(step / _SMOOTH_PASSES, s)
    positions = list(nodes)
    for i, on in omesh.nodes.items():
        positions[i] = on.pos
    return positions, omesh.tetras