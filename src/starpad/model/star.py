"""
Star Generation
===============
Composes the pipeline for one radius:

    RadialProfile -> Ladder -> sector (XY) -> Star

Every stage returns a new object, nothing is shared between calls, so
`generate_star` can be called from several threads with distinct inputs.
"""
from __future__ import annotations

import logging

from starpad.model.mapper import ladder_to_sector
from starpad.model.parameters import StarParameters
from starpad.model.profile import RadialProfile
from starpad.model.sampler import build_ladder
from starpad.model.symmetry import Star, expand_sector

logger = logging.getLogger(__name__)


def generate_star(
    radius: float,
    height: float,
    overlap_fraction: float,
    recovery_fraction: float,
    sample_count: int,
    jag_count: int,
) -> Star:
    """
    Generate the closed outline of a star-shaped pad.

    Args:
        radius: Pad radius R.
        height: Felt height h.
        overlap_fraction: rf, fraction of the radius that overlaps.
        recovery_fraction: hf, fraction of the overlap used for recovery.
        sample_count: K, number of samples across the radial span.
        jag_count: N, number of jags.

    Raises:
        InvalidParameter: On any precondition violation.
        InconsistentSampling: If the derived sample counts disagree.
    """
    profile = RadialProfile(
        radius=radius,
        height=height,
        overlap_fraction=overlap_fraction,
        recovery_fraction=recovery_fraction,
    )
    ladder = build_ladder(profile, sample_count, jag_count)
    sector = ladder_to_sector(ladder, jag_count)
    star = expand_sector(sector, jag_count)
    logger.debug(f"Star for R={radius}: {len(ladder)} samples per half-jag, {len(star)} points")
    return star


def generate_star_from(params: StarParameters) -> Star:
    """Shortcut for `generate_star` with the parameters derived for one radius."""
    return generate_star(
        radius=params.radius,
        height=params.height,
        overlap_fraction=params.overlap_fraction,
        recovery_fraction=params.recovery_fraction,
        sample_count=params.sample_count,
        jag_count=params.jag_count,
    )
