"""
starpad
=======
Generates closed outlines of star-shaped, multi-jagged pads (e.g. templates
for cutting felt buffer disks) and writes them as SVG paths.
"""
from starpad.errors import InvalidParameter, InconsistentSampling, MalformedInput, StarpadError
from starpad.model.star import generate_star
from starpad.model.symmetry import Star

__all__ = [
    "generate_star",
    "Star",
    "StarpadError",
    "InvalidParameter",
    "InconsistentSampling",
    "MalformedInput",
]
