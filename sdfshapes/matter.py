"""Material models that correct dimensions for 3D printing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar

_S = TypeVar("_S")


class Ideal:
    """A material that prints exactly to size."""

    def scale(self, s: _S) -> _S:
        """Return the shape unchanged."""
        return s

    def internal_dim_scale(self, real: float) -> float:
        return real


@dataclass(frozen=True)
class Viscoelastic:
    """A material that shrinks as it cools and pulls inward on internal features.

    ``shrink`` is the thermal contraction ratio; ``pull_shrink`` is the extra
    allowance, in model units, for viscoelastic pull on internal dimensions.
    """

    shrink: float
    pull_shrink: float

    def internal_dim_scale(self, real: float) -> float:
        """Dimension to model so that an internal feature prints as ``real``."""
        if real <= 0:
            raise ValueError("InternalDimScale only works for non-zero dimensions")
        return real * (self.shrink + 1) + self.pull_shrink


# PLA (polylactic acid), the most widely used 3D printing filament: 0.3% shrinkage.
PLA = Viscoelastic(shrink=0.3e-2, pull_shrink=0.45)