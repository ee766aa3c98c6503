from itertools import product

import pytest

from sdfshapes.mesh.importer import import_model
from sdfshapes.shapes3 import box
from sdfshapes.vec3 import Vec3

_QUADS = [
    [(1, -1, -1), (1, 1, -1), (1, 1, 1), (1, -1, 1)],
    [(-1, -1, -1), (-1, -1, 1), (-1, 1, 1), (-1, 1, -1)],
    [(-1, 1, -1), (-1, 1, 1), (1, 1, 1), (1, 1, -1)],
    [(-1, -1, -1), (1, -1, -1), (1, -1, 1), (-1, -1, 1)],
    [(-1, -1, 1), (1, -1, 1), (1, 1, 1), (-1, 1, 1)],
    [(-1, -1, -1), (-1, 1, -1), (1, 1, -1), (1, -1, -1)],
]


def _cube_triangles():
    triangles = []
    for quad in _QUADS:
        a, b, c, d = (Vec3(*p) for p in quad)
        triangles.append((a, b, c))
        triangles.append((a, c, d))
    return triangles


_COORDS = (-2.3, -0.7, 0.35, 1.6, 2.9)


@pytest.mark.parametrize("tol", [0.0, 1e-3])
def test_cube_matches_analytic_box(tol):
    imported = import_model(_cube_triangles(), tol)
    reference = box(Vec3(2, 2, 2), 0)
    for x, y, z in product(_COORDS, repeat=3):
        p = Vec3(x, y, z)
        assert imported.evaluate(p) == pytest.approx(reference.evaluate(p), abs=1e-9)


def test_inside_points_are_negative():
    imported = import_model(_cube_triangles())
    for x, y, z in product((-0.7, 0.35), repeat=3):
        assert imported.evaluate(Vec3(x, y, z)) < 0


def test_outside_points_are_positive():
    imported = import_model(_cube_triangles())
    for x, y, z in product((-2.3, 2.9), repeat=3):
        assert imported.evaluate(Vec3(x, y, z)) > 0


def test_bounds_enclose_vertices():
    imported = import_model(_cube_triangles())
    bb = imported.bounds()
    assert bb.min == Vec3(-1, -1, -1)
    assert bb.max == Vec3(1, 1, 1)


def test_tolerance_too_large_raises():
    with pytest.raises(ValueError):
        import_model(_cube_triangles(), 10.0)


def test_empty_model_raises():
    with pytest.raises(ValueError):
        import_model([])