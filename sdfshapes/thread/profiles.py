"""Standard screw thread forms: ISO, Acme, buttress, UTS and NPT."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from sdfshapes.polygon import Polygon, PolygonBuilder, polygon
from sdfshapes.thread.params import Basic, Parameters
from sdfshapes.thread.screw import Threader


@dataclass(frozen=True)
class ISO(Threader):
    """ISO metric thread of nominal diameter ``d`` and pitch ``p`` [mm].

    ``ext`` selects an external (True) or internal (False) thread.
    For M16x2 the pitch is 2 mm.
    """

    d: float
    p: float
    ext: bool = False

    def thread_params(self) -> Parameters:
        return Basic(d=self.d, p=self.p).thread_params()

    def thread(self) -> Polygon:
        radius = self.d / 2
        theta = 30.0 * math.pi / 180.0
        h = self.p / (2.0 * math.tan(theta))
        r_major = radius
        r0 = r_major - (7.0 / 8.0) * h

        poly = PolygonBuilder()
        if self.ext:
            r_root = (self.p / 8.0) / math.cos(theta)
            x_ofs = (1.0 / 16.0) * self.p
            poly.add(self.p, 0)
            poly.add(self.p, r0 + h)
            poly.add(self.p / 2.0, r0).smooth(r_root, 5)
            poly.add(x_ofs, r_major)
            poly.add(-x_ofs, r_major)
            poly.add(-self.p / 2.0, r0).smooth(r_root, 5)
            poly.add(-self.p, r0 + h)
            poly.add(-self.p, 0)
        else:
            r_minor = r0 + (1.0 / 4.0) * h
            r_crest = (self.p / 16.0) / math.cos(theta)
            x_ofs = (1.0 / 8.0) * self.p
            poly.add(self.p, 0)
            poly.add(self.p, r_minor)
            poly.add(self.p / 2 - x_ofs, r_minor)
            poly.add(0, r0 + h).smooth(r_crest, 5)
            poly.add(-self.p / 2 + x_ofs, r_minor)
            poly.add(-self.p, r_minor)
            poly.add(-self.p, 0)
        return polygon(poly.vertices())


@dataclass(frozen=True)
class Acme(Threader):
    """Trapezoidal (Acme) thread of nominal diameter ``d`` and pitch ``p``."""

    d: float
    p: float

    def thread_params(self) -> Parameters:
        return Basic(d=self.d, p=self.p).thread_params()

    def thread(self) -> Polygon:
        radius = self.d / 2
        h = radius - 0.5 * self.p
        theta = (29.0 / 2.0) * math.pi / 180.0
        delta = 0.25 * self.p * math.tan(theta)
        x_ofs0 = 0.25 * self.p - delta
        x_ofs1 = 0.25 * self.p + delta

        poly = PolygonBuilder()
        poly.add(radius, 0)
        poly.add(radius, h)
        poly.add(x_ofs1, h)
        poly.add(x_ofs0, radius)
        poly.add(-x_ofs0, radius)
        poly.add(-x_ofs1, h)
        poly.add(-radius, h)
        poly.add(-radius, 0)
        return polygon(poly.vertices())


def _buttress_dims(p: float) -> tuple[float, float, float, float, float]:
    t0 = math.tan(45.0 * math.pi / 180)
    t1 = math.tan(7.0 * math.pi / 180)
    b = 0.6  # thread engagement
    h0 = p / (t0 + t1)
    h1 = ((b / 2.0) * p) + (0.5 * h0)
    return t0, t1, h0, h1, p / 2.0


@dataclass(frozen=True)
class ANSIButtress(Threader):
    """ANSI 45/7 buttress thread (ASME B1.9-1973)."""

    d: float
    p: float

    def thread_params(self) -> Parameters:
        return Basic(d=self.d, p=self.p).thread_params()

    def thread(self) -> Polygon:
        radius = self.d / 2
        t0, t1, h0, h1, hp = _buttress_dims(self.p)
        tp = PolygonBuilder()
        tp.add(self.p, 0)
        tp.add(self.p, radius)
        tp.add(hp - ((h0 - h1) * t1), radius)
        tp.add(t0 * h0 - hp, radius - h1).smooth(0.0714 * self.p, 5)
        tp.add((h0 - h1) * t0 - hp, radius)
        tp.add(-self.p, radius)
        tp.add(-self.p, 0)
        return polygon(tp.vertices())


@dataclass(frozen=True)
class PlasticButtress(Threader):
    """Screw-top plastic buttress thread: ANSI 45/7 with more corner rounding."""

    d: float
    p: float

    def thread_params(self) -> Parameters:
        return Basic(d=self.d, p=self.p).thread_params()

    def thread(self) -> Polygon:
        radius = self.d / 2
        t0, t1, h0, h1, hp = _buttress_dims(self.p)
        tp = PolygonBuilder()
        tp.add(self.p, 0)
        tp.add(self.p, radius)
        tp.add(hp - ((h0 - h1) * t1), radius).smooth(0.05 * self.p, 5)
        tp.add(t0 * h0 - hp, radius - h1).smooth(0.15 * self.p, 5)
        tp.add((h0 - h1) * t0 - hp, radius).smooth(0.15 * self.p, 5)
        tp.add(-self.p, radius)
        tp.add(-self.p, 0)
        return polygon(tp.vertices())


@dataclass(frozen=True)
class UTS(Threader):
    """Unified thread standard, e.g. external UNC 1/4: ``UTS(d=0.25, tpi=20, ext=True)``."""

    d: float
    tpi: float
    ext: bool = False

    def thread_params(self) -> Parameters:
        return Basic(d=self.d, p=1.0 / self.tpi).thread_params()

    def thread(self) -> Polygon:
        return ISO(d=self.d, p=1.0 / self.tpi, ext=self.ext).thread()


@dataclass(frozen=True)
class _NPTSpec:
    nominal: float  # usually a fraction of an inch
    d: float  # screw major diameter
    tpi: float  # threads per inch
    f2f: float  # hex head flat to flat distance


_NPT_TABLE = (
    _NPTSpec(1.0 / 8.0, 0.405, 27, 11.2 / 25.4),
    _NPTSpec(1.0 / 4.0, 0.540, 18, 15.7 / 25.4),
    _NPTSpec(3.0 / 8.0, 0.675, 18, 17.5 / 25.4),
    _NPTSpec(1.0 / 2.0, 0.840, 14, 22.4 / 25.4),
    _NPTSpec(3.0 / 4.0, 1.050, 14, 26.9 / 25.4),
    _NPTSpec(1.0, 1.315, 11.5, 35.1 / 25.4),
    _NPTSpec(1 + 1.0 / 4.0, 1.660, 11.5, 44.5 / 25.4),
    _NPTSpec(1 + 1.0 / 2.0, 1.900, 11.5, 50.8 / 25.4),
    _NPTSpec(2, 2.375, 11.5, 63.5 / 25.4),
    _NPTSpec(2 + 1.0 / 2.0, 2.875, 8, 76.2 / 25.4),
    _NPTSpec(3, 3.500, 8, 88.9 / 25.4),
    _NPTSpec(4, 4.500, 8, 117.3 / 25.4),
)

_NPT_LOOKUP_TOL = 1.0 / 32.0


@dataclass
class NPT(Threader):
    """National pipe thread: diameter ``d``, threads per inch ``tpi``,
    and optional hex flat-to-flat distance ``f2f``."""

    d: float = 0.0
    tpi: float = 0.0
    f2f: float = 0.0

    def thread_params(self) -> Parameters:
        p = ISO(d=self.d, p=1.0 / self.tpi).thread_params()
        p = replace(p, name="NPT", taper=math.atan(1.0 / 32.0))
        if self.f2f > 0:
            p = replace(p, hex_f2f=self.f2f)
        return p

    def thread(self) -> Polygon:
        return ISO(d=self.d, p=1.0 / self.tpi).thread()

    def set_from_nominal(self, nominal: float) -> None:
        """Set dimensions from a nominal size in inches, e.g. 1/8 for NPT 1/8.

        Raises ValueError if the size is not a standard one.
        """
        for spec in _NPT_TABLE:
            if abs(spec.nominal - nominal) < _NPT_LOOKUP_TOL:
                self.d = spec.d
                self.f2f = spec.f2f
                self.tpi = spec.tpi
                return
        raise ValueError("nominal measurement not found")