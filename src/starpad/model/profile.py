"""
Radial Profile of a Single Jag
==============================
Maps an arc-length coordinate `s` to an accumulated circumference `c` across
the three physical zones of one jag:

1. Body (s < s1): the uncut pad, a plain circle, c = 2 pi s.
2. Recovery (s1 <= s < s2): the compressed felt springs back, the
   circumference drops linearly and steeply.
3. Collapse (s >= s2): circumference drops 1:1 with arc length towards the
   jag tip at s3.

The three formulas join continuously at s1 and s2.
"""
from __future__ import annotations

from dataclasses import dataclass
from math import isfinite, pi
from typing import TYPE_CHECKING

import numpy as np

from starpad.errors import InvalidParameter

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class RadialProfile:
    """
    Piecewise circumference function of one jag.

    Attributes:
        radius: Pad radius R (> 0).
        height: Felt height h (>= 0).
        overlap_fraction: Fraction rf of the radius that overlaps, in (0, 1].
        recovery_fraction: Fraction hf of the overlap used to recover the
            compressed material, in (0, 1].
    """
    radius: float
    height: float
    overlap_fraction: float
    recovery_fraction: float

    def __post_init__(self) -> None:
        if not (isfinite(self.radius) and isfinite(self.height)):
            raise InvalidParameter(
                f"Pad radius and felt height must be finite, got R={self.radius}, h={self.height}."
            )
        if not self.radius > 0.0:
            raise InvalidParameter(f"Pad radius must be > 0, got R={self.radius}.")
        if not self.height >= 0.0:
            raise InvalidParameter(f"Felt height must be >= 0, got h={self.height}.")
        if not 0.0 < self.overlap_fraction <= 1.0:
            raise InvalidParameter(
                f"Overlap fraction must lie in (0, 1], got rf={self.overlap_fraction}."
            )
        if not 0.0 < self.recovery_fraction <= 1.0:
            raise InvalidParameter(
                f"Recovery fraction must lie in (0, 1], got hf={self.recovery_fraction}."
            )

    # --------------------------------------------------------------------------
    # Zone boundaries
    # --------------------------------------------------------------------------
    @property
    def s1(self) -> float:
        """Start of the recovery zone (edge of the pad body)."""
        return self.radius + self.height

    @property
    def s2(self) -> float:
        """Start of the collapse zone."""
        return self.radius * (1.0 + self.recovery_fraction * self.overlap_fraction) + self.height

    @property
    def s3(self) -> float:
        """Jag tip."""
        return self.radius * (1.0 + self.overlap_fraction) + self.height

    @property
    def recovery_span(self) -> float:
        """R * hf * rf, the length of the recovery zone."""
        return self.radius * self.recovery_fraction * self.overlap_fraction

    # --------------------------------------------------------------------------
    # Zone formulas
    # --------------------------------------------------------------------------
    def body(self, s):
        return 2.0 * pi * s

    def recovery(self, s):
        slope = 2.0 * pi * (self.height + self.recovery_span) / self.recovery_span
        return self.body(self.s1) - slope * (s - self.s1)

    def collapse(self, s):
        return self.recovery(self.s2) - 2.0 * pi * (s - self.s2)

    def circumference(self, s: float | npt.NDArray[np.float64]) -> float | npt.NDArray[np.float64]:
        """
        Evaluate the circumference at arc length(s) `s`.

        Values beyond s3 follow the collapse formula; the closure tail of the
        sampler can land a rounding error past the tip.

        Raises:
            InvalidParameter: If any `s` is negative.
        """
        s_arr = np.asarray(s, dtype=np.float64)
        if np.any(s_arr < 0.0):
            raise InvalidParameter(f"Arc length must be >= 0, got {s}.")

        c = np.select(
            [s_arr < self.s1, s_arr < self.s2],
            [self.body(s_arr), self.recovery(s_arr)],
            default=self.collapse(s_arr),
        )
        if c.ndim == 0:
            return float(c)
        return c

    @property
    def tip_circumference(self) -> float:
        """Circumference left at the jag tip, 2 pi R (1 - rf) analytically."""
        return self.circumference(self.s3)
