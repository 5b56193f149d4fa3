"""
Batch Driver
============
Runs the star generation for every radius of a parameter file.

Why is this file needed?
------------------------
1. Isolation: A bad radius (e.g. below `min_radius`) is logged and skipped,
   the remaining radii are still generated.
2. Orchestration: It connects the file reader, the geometry pipeline and the
   SVG writer, so the CLI stays a thin argument parser.

Classes:
    BatchReport: Outcome of one run.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
import os
from typing import List, Optional, Sequence, Tuple

from starpad.errors import InvalidParameter, InconsistentSampling
from starpad.model.io import IOManager
from starpad.model.parameters import BatchParameters
from starpad.model.star import generate_star_from
from starpad.model.symmetry import Star

logger = logging.getLogger(__name__)


@dataclass
class BatchReport:
    written: List[str] = field(default_factory=list)
    skipped: List[Tuple[float, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.skipped


def generate_for_radius(params: BatchParameters, radius: float) -> Star:
    """
    Derive the per-radius parameters and generate the star.

    Raises:
        InvalidParameter, InconsistentSampling: Propagated from the pipeline.
    """
    star_params = params.derive(radius)
    logger.debug(
        f"R={radius}: N={star_params.jag_count}, K={star_params.sample_count}, "
        f"rf={star_params.overlap_fraction:.6g}"
    )
    return generate_star_from(star_params)


def process_radii(
    params: BatchParameters,
    radii: Sequence[float],
    output_dir: str = ".",
    preview: bool = False,
) -> BatchReport:
    """
    Generate and save one SVG per radius.

    Args:
        params: Header values of the run.
        radii: Radii to generate, in order.
        output_dir: Directory the SVG files are written to.
        preview: Show every generated star with matplotlib.

    Returns:
        A BatchReport listing written files and skipped radii.
    """
    report = BatchReport()
    for radius in radii:
        logger.info(f"Generating star for R = {radius:g}")
        try:
            star = generate_for_radius(params, radius)
        except (InvalidParameter, InconsistentSampling) as e:
            logger.error(f"Skipping R = {radius:g}: {e}")
            report.skipped.append((radius, str(e)))
            continue

        filepath = os.path.join(output_dir, IOManager.output_filename(radius))
        IOManager.save_svg(star, filepath)
        report.written.append(filepath)

        if preview:
            star.plot(title=f"R = {radius:.1f}")

    logger.info(f"Finished: {len(report.written)} written, {len(report.skipped)} skipped.")
    return report


def run_batch(
    param_file: str,
    output_dir: Optional[str] = None,
    preview: bool = False,
) -> BatchReport:
    """
    Read a parameter file and generate every star it lists.

    Raises:
        MalformedInput, InvalidParameter: If the file header is unusable.
        OSError: If the file cannot be read or an output cannot be written.
    """
    params, radii = IOManager.read_parameters(param_file)
    if not radii:
        logger.warning(f"No radii found in {param_file}.")
    return process_radii(params, radii, output_dir=output_dir or ".", preview=preview)
