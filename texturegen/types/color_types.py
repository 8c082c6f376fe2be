from __future__ import annotations
from typing import Sequence, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ColorTuple = Tuple[float, float, float, float]
ColorInput = Union[Sequence[Scalar], ndarray]
ScalarOrArray = Union[float, ndarray]

BLACK: ColorTuple = (0.0, 0.0, 0.0, 1.0)
WHITE: ColorTuple = (1.0, 1.0, 1.0, 1.0)


def to_rgba(color: ColorInput) -> ColorTuple:
    """
    Normalize an RGB or RGBA color input to a float RGBA tuple.

    Args:
        color: Tuple, list or 1D array with 3 or 4 unit-range channels

    Returns:
        (r, g, b, a) tuple of floats; RGB inputs get an alpha of 1.0
    """
    if isinstance(color, ndarray):
        if color.ndim != 1:
            raise ValueError(f"Color array must be 1-dimensional, got shape {color.shape}")
        values = color.tolist()
    elif isinstance(color, (tuple, list)):
        values = list(color)
    else:
        raise TypeError(f"Unsupported color input type: {type(color).__name__}")

    if len(values) == 3:
        values.append(1.0)
    if len(values) != 4:
        raise ValueError(f"Color expects 3 or 4 channels, got {len(values)}")
    return tuple(float(v) for v in values)  # type: ignore[return-value]


def colors_to_array(colors: Sequence[ColorInput]) -> ndarray:
    """Stack color inputs into an (N, 4) float array."""
    if len(colors) == 0:
        return np.zeros((0, 4), dtype=float)
    return np.array([to_rgba(c) for c in colors], dtype=float)


def lerp(a: ndarray, b: ndarray, t: ScalarOrArray) -> ndarray:
    """
    Per-channel linear interpolation between colors.

    ``a`` and ``b`` are broadcastable (..., 4) arrays; ``t`` gains a trailing
    channel axis so a (H, W) parameter grid yields (H, W, 4) colors.
    """
    t = np.asarray(t, dtype=float)[..., None]
    return a * (1 - t) + b * t
