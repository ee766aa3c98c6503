"""Signed distance field shapes, transforms, screw threads and meshing for 3D modeling."""

__version__ = "0.1.0"