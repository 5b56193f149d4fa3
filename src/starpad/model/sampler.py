"""
Contour Sampling
================
Builds the ladder of (s, c) samples describing one half-jag.

The ladder has two parts:
1. K profile samples evenly spaced over [s1, s3).
2. Kappa - K closure samples. `s` is frozen at s_K while `c` unwinds
   linearly in steps of ds * 2N, bringing the outline back towards the
   symmetry axis so the sector joins its mirror image.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import TYPE_CHECKING

import numpy as np

from starpad.config import SNAP_TOLERANCE
from starpad.errors import InvalidParameter, InconsistentSampling
from starpad.model.profile import RadialProfile

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Ladder:
    """
    Ordered (s, c) samples of one half-jag.

    Attributes:
        s: Arc-length positions, shape (Kappa,).
        c: Circumference values, shape (Kappa,).
        profile_count: Number K of profile samples at the front of the ladder.
    """
    s: npt.NDArray[np.float64]
    c: npt.NDArray[np.float64]
    profile_count: int

    def __post_init__(self) -> None:
        if self.s.shape != self.c.shape:
            raise InconsistentSampling(
                f"Ladder columns differ in length: {self.s.shape} vs {self.c.shape}."
            )

    def __len__(self) -> int:
        return len(self.s)

    @property
    def kappa(self) -> int:
        return len(self.s)

    @property
    def tail_count(self) -> int:
        return self.kappa - self.profile_count

    @property
    def samples(self) -> list[tuple[float, float]]:
        """The ladder as a list of (s, c) pairs."""
        return list(zip(self.s.tolist(), self.c.tolist()))


def sample_spacing(profile: RadialProfile, sample_count: int) -> float:
    """Step ds between two profile samples."""
    return (profile.s3 - profile.s1) / sample_count


def ladder_length(profile: RadialProfile, sample_count: int, jag_count: int) -> int:
    """
    Kappa = floor(K + c(s3) / (ds * 2N)).

    A tail count that is negative only by round-off (rf == 1 puts c(s3) at
    zero analytically) is snapped to zero first. A non-finite tail count
    raises InconsistentSampling.
    """
    ds = sample_spacing(profile, sample_count)
    tail = profile.tip_circumference / (ds * jag_count * 2.0)
    if not math.isfinite(tail):
        raise InconsistentSampling(
            f"Closure tail count is not finite (c(s3)={profile.tip_circumference}, ds={ds}, N={jag_count})."
        )
    if -SNAP_TOLERANCE < tail < 0.0:
        tail = 0.0
    return math.floor(sample_count + tail)


def build_ladder(profile: RadialProfile, sample_count: int, jag_count: int) -> Ladder:
    """
    Sample the profile of one half-jag, closure tail included.

    Args:
        profile: The radial profile to sample.
        sample_count: K, number of samples across [s1, s3).
        jag_count: N, number of jags of the star.

    Returns:
        A Ladder of length Kappa >= K.

    Raises:
        InvalidParameter: If K or N is not a positive integer.
        InconsistentSampling: If the computed Kappa is smaller than K.
    """
    if sample_count <= 0:
        raise InvalidParameter(f"Sample count must be > 0, got K={sample_count}.")
    if jag_count <= 0:
        raise InvalidParameter(f"Jag count must be > 0, got N={jag_count}.")

    ds = sample_spacing(profile, sample_count)
    kappa = ladder_length(profile, sample_count, jag_count)
    if kappa < sample_count:
        raise InconsistentSampling(
            f"Ladder length Kappa={kappa} is smaller than K={sample_count} "
            f"(N={jag_count}, c(s3)={profile.tip_circumference})."
        )
    logger.debug(f"Sampling profile: K={sample_count}, N={jag_count}, ds={ds:.6g}, Kappa={kappa}")

    k = np.arange(sample_count, dtype=np.float64)
    s_profile = profile.s1 + ds * k
    c_profile = profile.circumference(s_profile)

    # Closure tail
    s_last = profile.s1 + ds * sample_count
    c_last = profile.circumference(s_last)
    steps = np.arange(kappa - sample_count, dtype=np.float64)
    s_tail = np.full(steps.shape, s_last)
    c_tail = c_last - ds * 2.0 * jag_count * steps

    return Ladder(
        s=np.concatenate((s_profile, s_tail)),
        c=np.concatenate((c_profile, c_tail)),
        profile_count=sample_count,
    )
