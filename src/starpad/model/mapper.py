"""Conversion of a sampled ladder into Cartesian coordinates."""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from starpad.errors import InvalidParameter, InconsistentSampling
from starpad.model.geometry_utils import polar_to_cartesian
from starpad.model.sampler import Ladder

if TYPE_CHECKING:
    import numpy.typing as npt


def ladder_to_sector(ladder: Ladder, jag_count: int) -> npt.NDArray[np.float64]:
    """
    Map every (s, c) sample of a ladder to an XY point of the half-jag sector.

    The circumference is shared by 2N half-jags, so each sample is placed at
    polar radius s and angle c / (2N) / s.

    Args:
        ladder: Samples of one half-jag.
        jag_count: N, number of jags of the star.

    Returns:
        Array of shape (len(ladder), 2).
    """
    if jag_count <= 0:
        raise InvalidParameter(f"Jag count must be > 0, got N={jag_count}.")

    frac = 0.5 / jag_count
    sector = polar_to_cartesian(ladder.s, ladder.c * frac, offset=0.0)
    if len(sector) != len(ladder):
        raise InconsistentSampling(
            f"Sector has {len(sector)} points, ladder has {len(ladder)} samples."
        )
    return sector
