"""
Batch Parameters
================
The six header scalars of a parameter file and the per-radius values derived
from them.

Classes:
    BatchParameters: Header values shared by every radius of a run.
    StarParameters: Everything `generate_star` needs for one radius.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
import math
from typing import Any, Dict

from starpad.errors import InvalidParameter


def jag_count_for(radius: float, max_jag_chord: float) -> int:
    """Number of jags so that no jag spans more than `max_jag_chord` of circumference."""
    return int(math.ceil(2.0 * math.pi * radius / max_jag_chord))


@dataclass(frozen=True)
class StarParameters:
    radius: float
    height: float
    overlap_fraction: float
    recovery_fraction: float
    sample_count: int
    jag_count: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class BatchParameters:
    """
    Header of a parameter file.

    Attributes:
        resolution: Radial distance between two profile samples.
        height: Felt height h.
        max_jag_chord: Largest circumference a single jag may cover.
        min_radius: Radius below which no overlap is generated.
        max_overlap_radius: Upper bound of the overlapping radial length.
        recovery_fraction: hf, shared by every radius.
    """
    resolution: float
    height: float
    max_jag_chord: float
    min_radius: float
    max_overlap_radius: float
    recovery_fraction: float

    FIELD_ORDER = (
        "resolution",
        "height",
        "max_jag_chord",
        "min_radius",
        "max_overlap_radius",
        "recovery_fraction",
    )

    def __post_init__(self) -> None:
        for name in self.FIELD_ORDER:
            value = getattr(self, name)
            if not math.isfinite(value):
                raise InvalidParameter(f"{name} must be finite, got {value}.")
        if not self.resolution > 0.0:
            raise InvalidParameter(f"resolution must be > 0, got {self.resolution}.")
        if not self.height >= 0.0:
            raise InvalidParameter(f"height must be >= 0, got {self.height}.")
        if not self.max_jag_chord > 0.0:
            raise InvalidParameter(f"max_jag_chord must be > 0, got {self.max_jag_chord}.")
        if not self.min_radius >= 0.0:
            raise InvalidParameter(f"min_radius must be >= 0, got {self.min_radius}.")
        if not self.max_overlap_radius > 0.0:
            raise InvalidParameter(
                f"max_overlap_radius must be > 0, got {self.max_overlap_radius}."
            )
        if not 0.0 < self.recovery_fraction <= 1.0:
            raise InvalidParameter(
                f"recovery_fraction must lie in (0, 1], got {self.recovery_fraction}."
            )

    @classmethod
    def from_sequence(cls, values) -> BatchParameters:
        """Build from the six header values in file order."""
        if len(values) != len(cls.FIELD_ORDER):
            raise InvalidParameter(
                f"Expected {len(cls.FIELD_ORDER)} header values, got {len(values)}."
            )
        return cls(**dict(zip(cls.FIELD_ORDER, (float(v) for v in values))))

    def overlap_fraction_for(self, radius: float) -> float:
        """rf = min(R - min_radius, max_overlap_radius) / R."""
        return min(radius - self.min_radius, self.max_overlap_radius) / radius

    def derive(self, radius: float) -> StarParameters:
        """
        Derive N, K and rf for one radius.

        The resulting values are not range-checked here; `generate_star`
        rejects e.g. a radius below `min_radius` (rf <= 0) or a radius smaller
        than the resolution (K == 0).

        Raises:
            InvalidParameter: If the radius is not a finite positive number.
        """
        if not (math.isfinite(radius) and radius > 0.0):
            raise InvalidParameter(f"Pad radius must be finite and > 0, got R={radius}.")
        samples = radius / self.resolution
        jags = 2.0 * math.pi * radius / self.max_jag_chord
        if not (math.isfinite(samples) and math.isfinite(jags)):
            raise InvalidParameter(
                f"R={radius} overflows the sample or jag count "
                f"(resolution={self.resolution}, max_jag_chord={self.max_jag_chord})."
            )
        return StarParameters(
            radius=radius,
            height=self.height,
            overlap_fraction=self.overlap_fraction_for(radius),
            recovery_fraction=self.recovery_fraction,
            sample_count=int(math.floor(samples)),
            jag_count=jag_count_for(radius, self.max_jag_chord),
        )
