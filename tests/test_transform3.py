import math

import pytest

from sdfshapes.transform3 import Rotation, Transform3, compose_transform, new_transform3
from sdfshapes.vec3 import Vec3, equal_within


def _general() -> Transform3:
    return new_transform3(
        [2, 0.5, 0, 1, 0.1, 3, 0.2, -2, 0, 0.3, 1.5, 4, 0, 0, 0, 1]
    )


def test_default_is_identity():
    t = Transform3()
    v = Vec3(1.5, -2.0, 3.25)
    assert t.is_identity()
    assert t.transform(v) == v


def test_new_transform_none_is_zero():
    assert new_transform3(None).values() == [0.0] * 16


def test_new_transform_bad_length():
    with pytest.raises(ValueError):
        new_transform3([1.0, 2.0, 3.0])


def test_values_round_trip():
    vals = [float(i) for i in range(16)]
    assert new_transform3(vals).values() == vals


def test_translate_moves_points():
    shift = Vec3(1, 2, 3)
    v = Vec3(-4, 5, 0.5)
    assert Transform3().translate(shift).transform(v) == v + shift


def test_scale_at_origin():
    t = Transform3().scale(Vec3(), Vec3(2, 3, 4))
    v = Vec3(1, 1, 1)
    assert t.transform(v) == Vec3(2, 3, 4)
    assert t.det() == pytest.approx(2 * 3 * 4)


def test_inverse_times_transform_is_identity():
    t = _general()
    assert t.inv().mul(t).equals(Transform3(), 1e-12)
    assert (t @ t.inv()).equals(Transform3(), 1e-12)


def test_inverse_undoes_transform():
    t = _general()
    v = Vec3(0.3, -1.2, 2.0)
    assert equal_within(t.inv().transform(t.transform(v)), v, 1e-12)


def test_singular_inverse_is_zero():
    assert new_transform3([1.0] * 16).inv().values() == [0.0] * 16


def test_identity_inverse_is_identity():
    assert Transform3().inv().is_identity()


def test_mul_with_identity():
    t = _general()
    assert Transform3().mul(t) == t
    assert t.mul(Transform3()) == t


def test_det_of_product():
    a = _general()
    b = Transform3().translate(Vec3(1, 1, 1)).scale(Vec3(), Vec3(1, 2, 0.5))
    assert a.mul(b).det() == pytest.approx(a.det() * b.det())


def test_transpose_twice():
    t = _general()
    assert t.transpose().transpose() == t
    assert t.transpose().values()[1] == t.values()[4]


def test_equals_tolerance():
    t = _general()
    nudged = new_transform3([v + 1e-9 for v in t.values()])
    assert t.equals(nudged, 1e-6)
    assert not t.equals(nudged, 1e-12)


def test_compose_identity():
    t = compose_transform(Vec3(), Vec3(1, 1, 1), Rotation())
    assert t.is_identity()


def test_compose_rotation_about_z():
    half = math.pi / 4
    q = Rotation(real=math.cos(half), kmag=math.sin(half))
    t = compose_transform(Vec3(), Vec3(1, 1, 1), q)
    assert equal_within(t.transform(Vec3(1, 0, 0)), Vec3(0, 1, 0), 1e-12)
    assert t.det() == pytest.approx(1.0)


def test_compose_position_and_scale():
    t = compose_transform(Vec3(1, 2, 3), Vec3(2, 2, 2), Rotation())
    assert t.transform(Vec3()) == Vec3(1, 2, 3)
    assert t.transform(Vec3(1, 1, 1)) == Vec3(3, 4, 5)