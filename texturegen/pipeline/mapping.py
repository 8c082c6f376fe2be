"""
Coordinate mapping
==================

Turns pixel positions into a gradient parameter ``t``:

- ``AXIS_X`` / ``AXIS_Y``: position along the axis, 0 at the first and 1 at
  the last pixel
- ``RADIAL``: distance from the image center, 1 at the edge midpoints and
  about 1.414 in the corners (not clamped)
- ``ANGULAR``: angle around the image center in turns, offset by
  ``offset_angle`` degrees and wrapped into [0, 1)
"""

from __future__ import annotations

from typing import Tuple, assert_never

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import ScalarOrArray
from ..types.mode_types import SpatialMode


def axis_fraction(v: ScalarOrArray, size: int) -> NDArray:
    """Position ``v`` divided by ``size - 1``; a single-pixel axis maps to 0."""
    v = np.asarray(v, dtype=float)
    if size <= 1:
        return np.zeros_like(v)
    return v / (size - 1.0)


def wrap_unit(v: ScalarOrArray) -> NDArray:
    """Floored modulo 1, guaranteed to land in [0, 1)."""
    v = np.asarray(v, dtype=float)
    wrapped = v - np.floor(v)
    # tiny negative inputs round up to exactly 1.0
    return np.where(wrapped >= 1.0, 0.0, wrapped)


def pixel_grid(width: int, height: int) -> Tuple[NDArray, NDArray]:
    """Return float (ys, xs) index grids of shape (height, width)."""
    indices = np.indices((height, width), dtype=float)
    return indices[0], indices[1]


def map_coordinates(
    x: ScalarOrArray,
    y: ScalarOrArray,
    width: int,
    height: int,
    mode: SpatialMode,
    offset_angle: float = 0.0,
) -> NDArray:
    """
    Map pixel position(s) to the gradient parameter.

    Args:
        x, y: Pixel coordinates (scalars or broadcastable arrays)
        width, height: Image size in pixels
        mode: Spatial mode (enum member or its string value)
        offset_angle: Rotation in degrees, used by ``ANGULAR`` only

    Returns:
        t with the broadcast shape of x and y
    """
    mode = SpatialMode(mode)
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)

    if mode is SpatialMode.AXIS_X:
        return np.broadcast_to(axis_fraction(x, width), np.broadcast(x, y).shape).copy()
    if mode is SpatialMode.AXIS_Y:
        return np.broadcast_to(axis_fraction(y, height), np.broadcast(x, y).shape).copy()
    if mode is SpatialMode.RADIAL:
        dx = axis_fraction(x, width) - 0.5
        dy = axis_fraction(y, height) - 0.5
        return 2.0 * np.sqrt(dx * dx + dy * dy)
    if mode is SpatialMode.ANGULAR:
        turns = np.arctan2(y - height / 2.0, x - width / 2.0) / (2.0 * np.pi)
        return wrap_unit(turns + offset_angle / 360.0)
    assert_never(mode)
