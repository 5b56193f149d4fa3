"""
Configuration
=============
This module serves as the central registry for global constants.

Output styling and number formatting live here instead of being scattered
through the serializer.

Exports:
    STROKE_STYLE (str): SVG style attribute of the outline group.
    PATH_ID (str): SVG id of the outline path.
    COORDINATE_FORMAT (str): Format spec for point coordinates.
    FILENAME_FORMAT (str): Output file name pattern, formatted with the radius.
    SNAP_TOLERANCE (float): Round-off tolerance for the closure tail count.
"""

# SVG output
STROKE_STYLE: str = "fill:none;stroke:#000000;stroke-opacity:1;stroke-width:0.1"
PATH_ID: str = "path1"
COORDINATE_FORMAT: str = ".6g"  # six significant digits
FILENAME_FORMAT: str = "{:.1f}.svg"

# Numerics
SNAP_TOLERANCE: float = 1e-9
