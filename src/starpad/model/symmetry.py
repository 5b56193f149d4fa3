"""
Symmetry Expansion
==================
Turns one computed half-jag (the sector) into the full star.

The star has the rotational and mirror symmetry of a regular N-gon. Jag n is
built from two copies of the sector:

* descending half: the sector in reverse order, rotated by n * dalpha;
* ascending half: the sector in forward order, rotated by n * dalpha and then
  mirrored across the axis at (n + 0.5) * dalpha.

with dalpha = 2 pi / N, so the profile is only ever sampled once per star.
"""
from __future__ import annotations

from dataclasses import dataclass
from math import pi
from typing import TYPE_CHECKING, Iterator

import numpy as np
import matplotlib.pyplot as plt

from starpad.errors import InvalidParameter, InconsistentSampling
from starpad.model.geometry_primitives import Point2D
from starpad.model.geometry_utils import as_points, rotate_points, mirror_points

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True, eq=False)
class Star:
    """
    Closed outline of an N-jag pad.

    The last point connects back to the first one implicitly; it is not
    repeated at the end of `points`.
    """
    points: npt.NDArray[np.float64]
    jag_count: int
    sector_size: int

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point2D]:
        for x, y in self.points:
            yield Point2D(float(x), float(y))

    def __getitem__(self, index: int) -> Point2D:
        x, y = self.points[index]
        return Point2D(float(x), float(y))

    @property
    def radii(self) -> npt.NDArray[np.float64]:
        return np.hypot(self.points[:, 0], self.points[:, 1])

    def plot(self, title: str | None = None) -> None:
        """
        Plot the star outline.
        """
        closed = np.vstack((self.points, self.points[:1]))

        plt.rcParams["figure.constrained_layout.use"] = True
        plt.figure(figsize=(6, 6))

        plt.plot(closed[:, 0], closed[:, 1], 'k', lw=1)

        plt.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
        plt.minorticks_on()
        plt.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

        plt.gca().set_aspect('equal', 'box')
        plt.title(title or f"Star with {self.jag_count} jags")
        plt.xlabel("x")
        plt.ylabel("y")
        plt.show()


def jag_angle(jag_count: int) -> float:
    """Angular pitch dalpha = 2 pi / N between neighbouring jags."""
    return 2.0 * pi / jag_count


def expand_sector(sector: npt.ArrayLike, jag_count: int) -> Star:
    """
    Replicate a half-jag sector into the full N-jag star.

    Args:
        sector: Points of one half-jag, shape (I, 2).
        jag_count: N, number of jags.

    Returns:
        Star with exactly 2 * N * I points.

    Raises:
        InvalidParameter: If N is not positive.
        InconsistentSampling: If the assembled outline has the wrong size.
    """
    if jag_count <= 0:
        raise InvalidParameter(f"Jag count must be > 0, got N={jag_count}.")

    xy0 = as_points(sector)
    size = len(xy0)
    dalpha = jag_angle(jag_count)

    halves = []
    for n in range(jag_count):
        rotated = rotate_points(xy0, n * dalpha)
        halves.append(rotated[::-1])
        halves.append(mirror_points(rotated, (n + 0.5) * dalpha))

    points = np.concatenate(halves)
    if len(points) != 2 * jag_count * size:
        raise InconsistentSampling(
            f"Star has {len(points)} points, expected 2 * {jag_count} * {size}."
        )
    return Star(points=points, jag_count=jag_count, sector_size=size)
