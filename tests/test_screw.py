import math

import pytest

from sdfshapes.shapes2 import SDF2, ShapeError, box
from sdfshapes.thread.params import Parameters
from sdfshapes.thread.screw import Screw, Threader, screw
from sdfshapes.vec2 import Vec2
from sdfshapes.vec3 import Box3, Vec3

PITCH = 1.0
RADIUS = 2.0


class RectThread(Threader):
    def __init__(self, width, starts=1, taper=0.0):
        self.width = width
        self.starts = starts
        self.taper = taper

    def thread(self) -> SDF2:
        return box(Vec2(self.width, 2 * RADIUS), 0)

    def thread_params(self) -> Parameters:
        return Parameters(
            name="rect", radius=RADIUS, pitch=PITCH, starts=self.starts, taper=self.taper
        )


class BrokenThread(Threader):
    def thread(self) -> SDF2:
        raise ShapeError("bad profile")

    def thread_params(self) -> Parameters:
        return Parameters(pitch=PITCH, starts=1)


def test_bounds_follow_profile_and_length():
    s = screw(10, RectThread(PITCH / 2))
    assert s.bounds() == Box3(Vec3(-RADIUS, -RADIUS, -5), Vec3(RADIUS, RADIUS, 5))


def test_taper_widens_bounds():
    plain = screw(10, RectThread(PITCH / 2)).bounds()
    tapered = screw(10, RectThread(PITCH / 2, taper=0.05)).bounds()
    assert tapered.max.x > plain.max.x
    assert tapered.max.z == plain.max.z


def test_periodic_along_axis():
    s = screw(20, RectThread(PITCH / 2))
    for p in [Vec3(1.0, 0.5, 0.1), Vec3(0.3, 1.2, -0.4), Vec3(2.5, 0.2, 0.35)]:
        shifted = Vec3(p.x, p.y, p.z + PITCH)
        assert s.evaluate(shifted) == pytest.approx(s.evaluate(p))


def test_helical_invariance():
    s = screw(20, RectThread(PITCH / 2))
    r, z = 1.5, 0.2
    base = s.evaluate(Vec3(r, 0, z))
    for angle in [0.3, 0.9, 1.4]:
        p = Vec3(r * math.cos(angle), r * math.sin(angle), z + PITCH * angle / (2 * math.pi))
        assert s.evaluate(p) == pytest.approx(base)


def test_left_hand_is_mirror_of_right_hand():
    right = screw(20, RectThread(PITCH / 2, starts=1))
    left = screw(20, RectThread(PITCH / 2, starts=-1))
    for p in [Vec3(1.0, 0.5, 0.1), Vec3(0.3, 1.2, -0.4)]:
        mirrored = Vec3(p.x, -p.y, p.z)
        assert left.evaluate(mirrored) == pytest.approx(right.evaluate(p))


def test_screw_attributes():
    s = screw(8, RectThread(PITCH, starts=2))
    assert isinstance(s, Screw)
    assert s.lead == pytest.approx(-2 * PITCH)
    assert s.length == pytest.approx(4)


def test_errors():
    with pytest.raises(ValueError, match="nil threader"):
        screw(10, None)
    with pytest.raises(ValueError, match="greater than zero"):
        screw(0, RectThread(PITCH))
    with pytest.raises(ShapeError, match="bad profile"):
        screw(10, BrokenThread())