"""
Command-Line Entry Point
========================
Parses the command line, configures logging and hands over to the batch
driver.

Usage:
    $ starpad params.txt
    $ starpad params.txt -o out/ --verbose

Exit status:
    0: every radius produced an SVG file.
    1: at least one radius was skipped.
    2: the parameter file could not be used at all.
"""
import argparse
import logging
import sys
from typing import List, Optional

from starpad.controller.batch import run_batch
from starpad.errors import StarpadError
from starpad.logging_config import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_SKIPPED = 1
EXIT_FATAL = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="starpad",
        description="Generate star-shaped pad outlines (one SVG per radius).",
    )
    parser.add_argument(
        "param_file",
        help="Parameter file: resolution height max_jag_chord min_radius "
             "max_overlap_radius recovery_fraction, followed by radii.",
    )
    parser.add_argument("-o", "--output-dir", default=".", help="Directory for the SVG files.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file.")
    parser.add_argument("--preview", action="store_true", help="Plot every star with matplotlib.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO, log_file=args.log_file)

    # 2. Run the batch
    try:
        report = run_batch(args.param_file, output_dir=args.output_dir, preview=args.preview)
    except (StarpadError, OSError) as e:
        logger.error(f"Cannot process '{args.param_file}': {e}")
        return EXIT_FATAL

    return EXIT_OK if report.ok else EXIT_SKIPPED


if __name__ == "__main__":
    sys.exit(main())
