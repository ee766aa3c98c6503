"""Screws made by sweeping a 2D thread profile helically along z.

A thread profile is a polygon of one thread period centred on the y-axis,
with the x-axis as the screw axis and y as the radial distance.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from sdfshapes.shapes2 import SDF2
from sdfshapes.shapes3 import SDF3, saw_tooth
from sdfshapes.thread.params import Parameters
from sdfshapes.vec2 import Vec2
from sdfshapes.vec3 import Box3, Vec3


class Threader(ABC):
    """A thread form: a 2D profile and its defining parameters."""

    @abstractmethod
    def thread(self) -> SDF2:
        """The 2D profile of one thread period."""

    @abstractmethod
    def thread_params(self) -> Parameters:
        """The thread's parameters."""


@dataclass(frozen=True)
class ScrewParameters:
    length: float
    taper: float


class Screw(SDF3):
    """A 3D screw form; negative thread starts give a left-hand thread."""

    def __init__(self, profile: SDF2, params: Parameters, length: float) -> None:
        self.thread = profile
        self.pitch = params.pitch
        self.length = length / 2
        self.taper = params.taper
        self.lead = -self.pitch * params.starts
        # The profile's max y is the thread radius; add the taper increment.
        r = profile.bounds().max.y + self.length * math.tan(self.taper)
        self._bb = Box3(Vec3(-r, -r, -self.length), Vec3(r, r, self.length))

    def evaluate(self, p: Vec3) -> float:
        radial = math.sqrt(p.x * p.x + p.y * p.y)
        if self.taper != 0:
            radial += p.z * math.atan(self.taper)
        theta = math.atan2(p.y, p.x)
        z = p.z + self.lead * theta / (2 * math.pi)
        d0 = self.thread.evaluate(Vec2(saw_tooth(z, self.pitch), radial))
        d1 = abs(p.z) - self.length
        return max(d0, d1)

    def bounds(self) -> Box3:
        return self._bb


def screw(length: float, thread: Threader | None) -> Screw:
    """Screw of total ``length`` with the given thread form."""
    if thread is None:
        raise ValueError("nil threader")
    if length <= 0:
        raise ValueError("need greater than zero length")
    profile = thread.thread()
    return Screw(profile, thread.thread_params(), length)