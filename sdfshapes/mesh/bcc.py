"""Body centred cubic lattices for isotropic tetrahedron mesh generation.

The approach follows "Tetrahedral Mesh Generation for Deformable Bodies"
by Molino, Bridson and Fedkiw.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum
from itertools import product

from sdfshapes.vec3 import Box3, Vec3


class _Node(IntEnum):
    """Indices of the nodes of a BCC cell: eight corners, then the centre."""

    I000 = 0
    IX00 = 1
    IXY0 = 2
    I0Y0 = 3
    I00Z = 4
    IX0Z = 5
    IXYZ = 6
    I0YZ = 7
    ICTR = 8


_N_BCC = 9
_CORNERS = tuple(_Node)[:8]

# Unit offsets of each corner from the cell's minimum corner.
_CORNER_OFFSETS = {
    _Node.I000: (0, 0, 0),
    _Node.IX00: (1, 0, 0),
    _Node.IXY0: (1, 1, 0),
    _Node.I0Y0: (0, 1, 0),
    _Node.I00Z: (0, 0, 1),
    _Node.IX0Z: (1, 0, 1),
    _Node.IXYZ: (1, 1, 1),
    _Node.I0YZ: (0, 1, 1),
}

# For each corner: the x, y and z face neighbours sharing it, and the
# label the corner has in that neighbour.
_SHARED_CORNERS = {
    _Node.I000: (((-1, 0, 0), _Node.IX00), ((0, -1, 0), _Node.I0Y0), ((0, 0, -1), _Node.I00Z)),
    _Node.IX00: (((1, 0, 0), _Node.I000), ((0, -1, 0), _Node.IXY0), ((0, 0, -1), _Node.IX0Z)),
    _Node.IXY0: (((1, 0, 0), _Node.I0Y0), ((0, 1, 0), _Node.IX00), ((0, 0, -1), _Node.IXYZ)),
    _Node.I0Y0: (((-1, 0, 0), _Node.IXY0), ((0, 1, 0), _Node.I000), ((0, 0, -1), _Node.I0YZ)),
    _Node.I00Z: (((-1, 0, 0), _Node.IX0Z), ((0, -1, 0), _Node.I0YZ), ((0, 0, 1), _Node.I000)),
    _Node.IX0Z: (((1, 0, 0), _Node.I00Z), ((0, -1, 0), _Node.IXYZ), ((0, 0, 1), _Node.IX00)),
    _Node.IXYZ: (((1, 0, 0), _Node.I0YZ), ((0, 1, 0), _Node.IX0Z), ((0, 0, 1), _Node.IXY0)),
    _Node.I0YZ: (((-1, 0, 0), _Node.IXYZ), ((0, 1, 0), _Node.I00Z), ((0, 0, 1), _Node.I0Y0)),
}

Tetra = tuple[int, int, int, int]


@dataclass
class _Cell:
    pos: Vec3
    labels: list[int] = field(default_factory=lambda: [-1] * _N_BCC)


class BCCMesh:
    """A grid of cubic cells whose centres and corners form a BCC lattice."""

    def __init__(self, bounds: Box3, resolution: float, div: tuple[int, int, int]) -> None:
        self.resolution = resolution
        self.div = div
        origin = bounds.min
        self._cells = [
            _Cell(
                Vec3(
                    (i + 0.5) * resolution + origin.x,
                    (j + 0.5) * resolution + origin.y,
                    (k + 0.5) * resolution + origin.z,
                )
            )
            for i, j, k in product(range(div[0]), range(div[1]), range(div[2]))
        ]

    def _at(self, i: int, j: int, k: int) -> _Cell | None:
        di, dj, dk = self.div
        if not (0 <= i < di and 0 <= j < dj and 0 <= k < dk):
            return None
        return self._cells[(i * dj + j) * dk + k]

    def _shared_node(self, i: int, j: int, k: int, corner: _Node) -> int:
        found = []
        for (di, dj, dk), label in _SHARED_CORNERS[corner]:
            cell = self._at(i + di, j + dj, k + dk)
            found.append(-1 if cell is None else cell.labels[label])
        meshed = {n for n in found if n >= 0}
        if len(meshed) > 1:
            raise RuntimeError("bad mesh operation detected")
        return meshed.pop() if meshed else -1

    def _corner_position(self, cell: _Cell, corner: _Node) -> Vec3:
        ox, oy, oz = _CORNER_OFFSETS[corner]
        r = self.resolution
        return Vec3(
            cell.pos.x + (ox - 0.5) * r,
            cell.pos.y + (oy - 0.5) * r,
            cell.pos.z + (oz - 0.5) * r,
        )

    def _cell_tetras(self, i: int, j: int, k: int) -> list[Tetra]:
        """Tetrahedra joining this cell to its already meshed minor neighbours."""
        n = self._at(i, j, k).labels
        ctr = n[_Node.ICTR]
        tetras: list[Tetra] = []
        zm = self._at(i, j, k - 1)
        if zm is not None and zm.labels[_Node.ICTR] >= 0:
            z = zm.labels[_Node.ICTR]
            tetras += [
                (ctr, n[_Node.I000], n[_Node.IX00], z),
                (ctr, n[_Node.IX00], n[_Node.IXY0], z),
                (ctr, n[_Node.IXY0], n[_Node.I0Y0], z),
                (ctr, n[_Node.I0Y0], n[_Node.I000], z),
            ]
        ym = self._at(i, j - 1, k)
        if ym is not None and ym.labels[_Node.ICTR] >= 0:
            y = ym.labels[_Node.ICTR]
            tetras += [
                (ctr, n[_Node.IX00], n[_Node.I000], y),
                (ctr, n[_Node.IX0Z], n[_Node.IX00], y),
                (ctr, n[_Node.I00Z], n[_Node.IX0Z], y),
                (ctr, n[_Node.I000], n[_Node.I00Z], y),
            ]
        xm = self._at(i - 1, j, k)
        if xm is not None and xm.labels[_Node.ICTR] >= 0:
            x = xm.labels[_Node.ICTR]
            tetras += [
                (ctr, n[_Node.I000], n[_Node.I0Y0], x),
                (ctr, n[_Node.I00Z], n[_Node.I000], x),
                (ctr, n[_Node.I0YZ], n[_Node.I00Z], x),
                (ctr, n[_Node.I0Y0], n[_Node.I0YZ], x),
            ]
        return tetras

    def mesh_tetra(self) -> tuple[list[Vec3], list[Tetra]]:
        """Node positions and the tetrahedra (as node index quadruples) of the lattice."""
        for cell in self._cells:
            cell.labels = [-1] * _N_BCC
        nodes: list[Vec3] = []
        tetras: list[Tetra] = []
        for i, j, k in product(range(self.div[0]), range(self.div[1]), range(self.div[2])):
            cell = self._at(i, j, k)
            cell.labels[_Node.ICTR] = len(nodes)
            nodes.append(cell.pos)
            for corner in _CORNERS:
                shared = self._shared_node(i, j, k, corner)
                if shared == -1:
                    cell.labels[corner] = len(nodes)
                    nodes.append(self._corner_position(cell, corner))
                else:
                    cell.labels[corner] = shared
            tetras.extend(self._cell_tetras(i, j, k))
        return nodes, tetras


def make_bcc_mesh(bounds: Box3, resolution: float) -> BCCMesh:
    """BCC lattice covering ``bounds`` with cubic cells of side ``resolution``.

    Raises ValueError if fewer than three cells fit along any axis.
    """
    size = bounds.size()
    div = (
        math.ceil(size.x / resolution),
        math.ceil(size.y / resolution),
        math.ceil(size.z / resolution),
    )
    if min(div) < 3:
        raise ValueError("resolution too low")
    return BCCMesh(bounds, resolution, div)