import math

import pytest

from sdfshapes.thread.params import Basic, Parameters, metric_f2f

# (name, major diameter [mm], hex flat-to-flat [mm]) for ISO threads.
ISO_THREADS = [
    ("M1x0.25", 1, 1.75),
    ("M1.2x0.25", 1.2, 2.0),
    ("M1.6x0.35", 1.6, 3.2),
    ("M2x0.4", 2, 4),
    ("M2.5x0.45", 2.5, 5),
    ("M3x0.5", 3, 6),
    ("M4x0.7", 4, 7),
    ("M5x0.8", 5, 8),
    ("M6x1", 6, 10),
    ("M8x1.25", 8, 13),
    ("M10x1.5", 10, 17),
    ("M12x1.75", 12, 19),
    ("M16x2", 16, 24),
    ("M20x2.5", 20, 30),
    ("M24x3", 24, 36),
    ("M30x3.5", 30, 46),
    ("M36x4", 36, 55),
    ("M42x4.5", 42, 65),
    ("M48x5", 48, 75),
    ("M56x5.5", 56, 85),
    ("M64x6", 64, 95),
    ("M1x0.2", 1, 1.75),
    ("M1.2x0.2", 1.2, 2.0),
    ("M1.6x0.2", 1.6, 3.2),
    ("M2x0.25", 2, 4),
    ("M2.5x0.35", 2.5, 5),
    ("M3x0.35", 3, 6),
    ("M4x0.5", 4, 7),
    ("M5x0.5", 5, 8),
    ("M6x0.75", 6, 10),
    ("M8x1", 8, 13),
    ("M10x1.25", 10, 17),
    ("M12x1.5", 12, 19),
    ("M16x1.5", 16, 24),
    ("M20x2", 20, 30),
    ("M24x2", 24, 36),
    ("M30x2", 30, 46),
    ("M36x3", 36, 55),
    ("M42x3", 42, 65),
    ("M48x3", 48, 75),
    ("M56x4", 56, 85),
    ("M64x4", 64, 95),
]


@pytest.mark.parametrize("name,diameter,f2f", ISO_THREADS)
def test_metric_f2f(name, diameter, f2f):
    assert metric_f2f(diameter / 2.0) == f2f, name


def test_basic_thread_params():
    p = Basic(d=16, p=2).thread_params()
    assert p == Parameters(
        name="basic", radius=8, pitch=2, starts=1, taper=0.0, hex_f2f=24
    )


def test_hex_radius_and_height():
    p = Parameters(hex_f2f=24)
    assert p.hex_radius() == pytest.approx(24 / (2.0 * math.cos(math.pi / 6)))
    assert p.hex_height() == pytest.approx(2.0 * p.hex_radius() * 5.0 / 12.0)


def test_hex_radius_exceeds_half_f2f():
    p = Basic(d=8, p=1.25).thread_params()
    assert p.hex_radius() > p.hex_f2f / 2