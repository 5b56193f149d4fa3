from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy import typing as npt


def as_points(points: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """
    Coerce input into a float array of shape (n, 2).

    Raises:
        ValueError: If the input cannot be viewed as a list of XY pairs.
    """
    arr = np.asarray(points, dtype=np.float64)
    if arr.ndim == 1 and arr.size == 2:
        arr = arr.reshape(1, 2)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected shape (N, 2), got {arr.shape}.")
    return arr


def polar_to_cartesian(
    s: float | npt.ArrayLike,
    c: float | npt.ArrayLike,
    offset: float = 0.0
) -> npt.NDArray[np.float64]:
    """
    Turn a length `s` and a circumference measurement `c` into XY points.

    `s` is used as the polar radius and `c` as an arc length along the circle
    of that radius, so the polar angle is c / s (plus `offset`).

    Args:
        s: Length(s), must be non-zero.
        c: Circumference value(s), broadcast against `s`.
        offset: Angular offset in radians added to every point.

    Returns:
        Array of shape (n, 2) with the (x, y) coordinates.
    """
    s_arr, c_arr = np.broadcast_arrays(
        np.atleast_1d(np.asarray(s, dtype=np.float64)),
        np.atleast_1d(np.asarray(c, dtype=np.float64)),
    )
    angle = c_arr / s_arr + offset
    return np.column_stack((s_arr * np.cos(angle), s_arr * np.sin(angle)))


def rotation_matrix(angle: float) -> npt.NDArray[np.float64]:
    cos_a, sin_a = np.cos(angle), np.sin(angle)
    return np.array([[cos_a, -sin_a], [sin_a, cos_a]])


def rotate_points(points: npt.ArrayLike, angle: float) -> npt.NDArray[np.float64]:
    """Rotate (n, 2) points around the origin by `angle` radians (CCW)."""
    pts = as_points(points)
    return pts @ rotation_matrix(angle).T


def mirror_points(points: npt.ArrayLike, axis_angle: float) -> npt.NDArray[np.float64]:
    """
    Reflect (n, 2) points across the line through the origin at `axis_angle`.

    Uses mirr(p, c) = 2 (p . m) m - p with m = (cos c, sin c).
    """
    pts = as_points(points)
    m = np.array([np.cos(axis_angle), np.sin(axis_angle)])
    projection = pts @ m
    return 2.0 * projection[:, None] * m[None, :] - pts
