# sdfshapes

Signed distance field (SDF) building blocks for 3D modeling and 3D printing.

An SDF here is an object with an `evaluate(p)` method, which returns the
signed distance from point `p` to the surface (negative inside), and a
`bounds()` method, which returns its axis-aligned bounding box. 2D shapes
derive from `sdfshapes.shapes2.SDF2`, 3D shapes from `sdfshapes.shapes3.SDF3`.

## Modules

- `sdfshapes.vec2`, `sdfshapes.vec3`: immutable `Vec2` and `Vec3` vectors
  (with `+`, `-`, scalar `*`, `dot`, `cross`, `norm`, `unit`), `Box2` and
  `Box3` bounding boxes, `Polar` coordinates and element-wise helpers such as
  `min_elem`, `max_elem`, `abs_elem` and `clamp`.
- `sdfshapes.transform2`: `Transform2`, a 3x3 matrix for 2D points and boxes.
  The all-zero matrix, which `transform2_identity()` returns, leaves points
  and boxes unchanged.
- `sdfshapes.transform3`: `Transform3`, a 4x4 matrix whose default value is
  the identity, with `translate`, `scale`, `mul` (also `a @ b`), `det`, `inv`
  and `transpose`; `compose_transform` builds one from a position, a scale and
  a quaternion `Rotation`. `new_transform3(None)` gives the all-zero matrix.
- `sdfshapes.shapes2`: 2D primitives made with `circle`, `box` (a rounded
  `Rect`) and `line`.
- `sdfshapes.polygon`: `Polygon` SDFs (`polygon`), and `PolygonBuilder`
  (`new_polygon`) whose vertices can be relative (`rel`), polar (`polar`),
  smoothed (`smooth`), chamfered (`chamfer`) or turned into arcs (`arc`).
  `nagon(n, radius)` lists the vertices of a regular polygon; `rotation`
  gives a 2D rotation transform.
- `sdfshapes.shapes3`: 3D primitives made with `box` (`Cuboid`), `sphere`,
  `cylinder`, `capsule` and `cone`.
- `sdfshapes.matter`: material models for printing allowances: `Ideal`,
  `Viscoelastic` and the ready-made `PLA`. `internal_dim_scale` gives the
  dimension to model so that an internal feature prints at its real size.
- `sdfshapes.thread.params`: thread `Parameters` (with `hex_radius` and
  `hex_height`), `Basic` and `metric_f2f`, the metric hex flat-to-flat size
  for a nominal radius.
- `sdfshapes.thread.profiles`: thread forms `ISO`, `Acme`, `ANSIButtress`,
  `PlasticButtress`, `UTS` and `NPT` (with `set_from_nominal` for standard
  pipe sizes in inches).
- `sdfshapes.thread.screw`: the `Threader` interface and `screw(length,
  thread)`, which sweeps a thread profile helically along z.
- `sdfshapes.mesh.bcc`: `make_bcc_mesh`, a body-centred cubic lattice over a
  box, and `BCCMesh.mesh_tetra` for its nodes and tetrahedra.
- `sdfshapes.mesh.tetra`: `uniform_tetrahedron_mesh(resolution, s)`, a
  tetrahedron mesh fitted to an SDF3 by compression toward the surface and
  Laplacian smoothing.
- `sdfshapes.mesh.importer`: `import_model(triangles, vertex_tol)`, an SDF3
  of a closed triangle surface given as triples of `Vec3`.
- `sdfshapes.mesh.spatial`: triangle and line distance helpers and
  finite-difference `gradient`, `divergence` and `laplacian`.

`circle`, `polygon` and the 3D constructors raise `ShapeError` (a
`ValueError`) for invalid dimensions, such as a negative radius. Other
invalid input, such as an unknown NPT size or a mesh resolution that gives
fewer than three cells along an axis, raises `ValueError`.

## Example

```python
from sdfshapes.shapes3 import cylinder, sphere
from sdfshapes.vec3 import Vec3
from sdfshapes.thread.profiles import ISO
from sdfshapes.thread.screw import screw
from sdfshapes.mesh.tetra import uniform_tetrahedron_mesh

rod = cylinder(10.0, 2.0, 0.5)
print(rod.evaluate(Vec3(0, 0, 0)))   # negative: inside
print(rod.bounds())

m16 = screw(20.0, ISO(16, 2, True))
print(m16.evaluate(Vec3(10, 0, 0)))

nodes, tetras = uniform_tetrahedron_mesh(0.5, sphere(1.0))
print(len(nodes), len(tetras))
```

## What it does not do

The package evaluates single shapes only. It has no boolean operations
(union, difference, intersection), no wrapper that moves or scales an SDF by
a transform, no extrusion or revolution of 2D shapes into 3D, and no ready
nuts, bolts or heads. It does not extract surfaces from an SDF, and it reads
and writes no files: `import_model` takes triangles already in memory, and
meshes come back as lists of `Vec3` and index quadruples. There is no
command-line program.

## Installing and testing

```
pip install .
pip install .[test]
pytest
```