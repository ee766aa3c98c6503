import pytest

from sdfshapes.matter import PLA, Ideal, Viscoelastic
from sdfshapes.shapes2 import circle


def test_ideal_is_identity():
    m = Ideal()
    assert m.internal_dim_scale(7.25) == 7.25
    shape = circle(3.0)
    assert m.scale(shape) is shape


def test_pla_constants():
    assert PLA.shrink == 0.3e-2
    assert PLA.pull_shrink == 0.45
    same = Viscoelastic(shrink=PLA.shrink, pull_shrink=PLA.pull_shrink)
    assert same.internal_dim_scale(2.0) == PLA.internal_dim_scale(2.0)


def test_pla_internal_dim_scale_value():
    assert PLA.internal_dim_scale(10.0) == pytest.approx(10.48)


def test_internal_dim_scale_grows_dimension():
    for real in (0.5, 3.0, 23.0):
        assert PLA.internal_dim_scale(real) > real


def test_internal_dim_scale_is_monotonic():
    values = [PLA.internal_dim_scale(x) for x in (1.0, 2.0, 4.0, 8.0)]
    assert values == sorted(values)


def test_no_shrink_only_adds_pull():
    m = Viscoelastic(shrink=0.0, pull_shrink=0.2)
    assert m.internal_dim_scale(5.0) == pytest.approx(5.2)


@pytest.mark.parametrize("real", [0.0, -1.0])
def test_internal_dim_scale_rejects_non_positive(real):
    with pytest.raises(ValueError):
        PLA.internal_dim_scale(real)