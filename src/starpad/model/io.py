"""
Input/Output Manager
Reads parameter files and writes star outlines as SVG paths.
"""
import logging
import os
from typing import Iterable, List, Tuple
from importlib.metadata import version, PackageNotFoundError

from starpad.config import STROKE_STYLE, PATH_ID, COORDINATE_FORMAT, FILENAME_FORMAT
from starpad.errors import MalformedInput, InconsistentSampling
from starpad.model.geometry_primitives import Point2D
from starpad.model.parameters import BatchParameters
from starpad.model.symmetry import Star

# Get module logger
logger = logging.getLogger(__name__)

try:
    APP_VERSION = version("starpad")
except PackageNotFoundError:
    APP_VERSION = "0.0.0-dev"

HEADER_SIZE = len(BatchParameters.FIELD_ORDER)


class IOManager:

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------
    @staticmethod
    def parse_parameters(text: str) -> Tuple[BatchParameters, List[float]]:
        """
        Parse a whitespace separated parameter stream.

        Layout: resolution, height, max_jag_chord, min_radius,
        max_overlap_radius, recovery_fraction, then any number of radii.

        Raises:
            MalformedInput: If the header is incomplete or a token is not a number.
            InvalidParameter: If a header value is out of range.
        """
        values: List[float] = []
        for position, token in enumerate(text.split()):
            try:
                values.append(float(token))
            except ValueError:
                raise MalformedInput(
                    f"Token {position + 1} ('{token}') is not a number.", position=position
                ) from None

        if len(values) < HEADER_SIZE:
            missing = BatchParameters.FIELD_ORDER[len(values)]
            raise MalformedInput(
                f"Parameter stream ended after {len(values)} values, "
                f"'{missing}' is missing.",
                position=len(values),
            )

        params = BatchParameters.from_sequence(values[:HEADER_SIZE])
        radii = values[HEADER_SIZE:]
        logger.debug(f"Parsed parameters {params} and {len(radii)} radii.")
        return params, radii

    @staticmethod
    def read_parameters(filepath: str) -> Tuple[BatchParameters, List[float]]:
        logger.info(f"Reading parameters from: {filepath}")
        with open(filepath, "r", encoding="utf-8") as f:
            text = f.read()
        return IOManager.parse_parameters(text)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    @staticmethod
    def output_filename(radius: float) -> str:
        """File name for a radius, e.g. 10.0 -> '10.0.svg'."""
        return FILENAME_FORMAT.format(radius)

    @staticmethod
    def format_path_data(points: Iterable[Point2D]) -> str:
        """
        SVG path `d` attribute of a closed polygon: 'M x0 y0 L x1 y1 ... Z'.

        Raises:
            InconsistentSampling: If there are no points.
        """
        fmt = COORDINATE_FORMAT
        commands = [
            f"{'M' if i == 0 else 'L'} {p.x:{fmt}} {p.y:{fmt}}"
            for i, p in enumerate(points)
        ]
        if not commands:
            raise InconsistentSampling("Cannot serialize an empty outline.")
        return " ".join(commands) + " Z"

    @staticmethod
    def to_svg(star: Star) -> str:
        path_data = IOManager.format_path_data(star)
        return (
            '<?xml version="1.0" encoding="UTF-8" standalone="no"?>\n'
            f'<!-- Generated by starpad {APP_VERSION} -->\n'
            '<svg version="1.1">\n'
            '<g\n'
            f'style="{STROKE_STYLE}">\n'
            f'<path d="{path_data}"\n'
            f'id="{PATH_ID}" />\n'
            '</g>\n'
            '</svg>\n'
        )

    @staticmethod
    def save_svg(star: Star, filepath: str) -> None:
        logger.debug(f"Saving {len(star)} points to: {filepath}")
        content = IOManager.to_svg(star)
        directory = os.path.dirname(filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(content)
        logger.info(f"Star saved to: {filepath}")
