"""Screw thread parameters and metric hex head sizing."""

from __future__ import annotations

import math
from dataclasses import dataclass

# Metric hex flat-to-flat dimensions [mm].
METRIC_F2F_TABLE = (
    1.75, 2, 3.2, 4, 5, 6, 7, 8, 10, 13, 17, 19, 24, 30, 36, 46, 55, 65, 75, 85, 95,
)


@dataclass
class Parameters:
    """Values that define a screw thread."""

    name: str = ""
    radius: float = 0.0  # nominal major radius
    pitch: float = 0.0  # thread to thread distance
    starts: int = 0  # number of thread starts
    taper: float = 0.0  # thread taper (radians)
    hex_f2f: float = 0.0  # hex head flat to flat distance

    def hex_radius(self) -> float:
        """Hex head radius."""
        return self.hex_f2f / (2.0 * math.cos(30 * math.pi / 180))

    def hex_height(self) -> float:
        """Hex head height (empirical)."""
        return 2.0 * self.hex_radius() * (5.0 / 12.0)


def metric_f2f(radius: float) -> float:
    """A reasonable hex flat-to-flat dimension for a metric screw of nominal radius."""
    if radius < 1.2 / 2:
        est = 3.2 * radius
    elif radius < 3.8 / 2:
        est = 4.5 * radius
    elif radius < 4.2 / 2:
        est = 4.0 * radius
    else:
        est = 3.5 * radius
    if abs(radius - 56 / 2) < 1:
        est = 86
    for v in reversed(METRIC_F2F_TABLE):
        if est - 1e-2 > v:
            return v
    return METRIC_F2F_TABLE[0]


@dataclass(frozen=True)
class Basic:
    """A plain thread of nominal diameter ``d`` and pitch ``p`` [mm]."""

    d: float
    p: float

    def thread_params(self) -> Parameters:
        radius = self.d / 2
        return Parameters(
            name="basic",
            radius=radius,
            pitch=self.p,
            starts=1,
            taper=0.0,
            hex_f2f=metric_f2f(radius),
        )