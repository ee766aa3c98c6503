import pytest

from sdfshapes.mesh.bcc import make_bcc_mesh
from sdfshapes.mesh.tetra import uniform_tetrahedron_mesh
from sdfshapes.shapes3 import sphere


@pytest.fixture(scope="module")
def sphere_mesh():
    s = sphere(1.0)
    nodes, tetras = uniform_tetrahedron_mesh(0.25, s)
    bcc_nodes, bcc_tetras = make_bcc_mesh(s.bounds(), 0.25).mesh_tetra()
    return s, nodes, tetras, bcc_nodes, bcc_tetras


def test_low_resolution_raises():
    with pytest.raises(ValueError):
        uniform_tetrahedron_mesh(1.0, sphere(1.0))


def test_node_count_matches_lattice(sphere_mesh):
    _, nodes, _, bcc_nodes, _ = sphere_mesh
    assert len(nodes) == len(bcc_nodes)


def test_tetras_are_a_nonempty_subset_of_lattice(sphere_mesh):
    _, _, tetras, _, bcc_tetras = sphere_mesh
    assert len(tetras) > 0
    assert len(tetras) < len(bcc_tetras)
    assert set(tetras) <= set(bcc_tetras)


def test_fully_inside_lattice_tetras_are_kept(sphere_mesh):
    s, _, tetras, bcc_nodes, bcc_tetras = sphere_mesh
    kept = set(tetras)
    for t in bcc_tetras:
        if all(s.evaluate(bcc_nodes[n]) < 0 for n in t):
            assert t in kept


def test_used_nodes_end_inside_or_on_surface(sphere_mesh):
    s, nodes, tetras, _, _ = sphere_mesh
    used = {n for t in tetras for n in t}
    for n in used:
        assert s.evaluate(nodes[n]) <= 1e-9


def test_some_nodes_land_on_surface(sphere_mesh):
    s, nodes, tetras, _, _ = sphere_mesh
    used = {n for t in tetras for n in t}
    on_surface = [n for n in used if abs(s.evaluate(nodes[n])) < 1e-6]
    assert len(on_surface) > 0


def test_unused_nodes_keep_lattice_positions(sphere_mesh):
    _, nodes, tetras, bcc_nodes, _ = sphere_mesh
    used = {n for t in tetras for n in t}
    unused = [i for i in range(len(nodes)) if i not in used]
    assert unused
    for i in unused:
        assert nodes[i] == bcc_nodes[i]