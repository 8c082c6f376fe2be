from __future__ import annotations

import warnings
from dataclasses import dataclass

import numpy as np
from numpy import ndarray as NDArray

from ..config import DEFAULT_STEP_COUNT
from ..types.color_types import ScalarOrArray


@dataclass(frozen=True)
class ShapingConfig:
    """
    Post-processing of the gradient parameter.

    Attributes:
        flip: Replace t with 1 - t, applied after quantization
        discrete_steps: Quantize t into ``step_count`` levels
        step_count: Number of levels (callers keep this >= 1)
        circular: Levels are k / n instead of k / (n - 1), so the last
            level stops short of 1 and wraps cleanly on cyclic mappings
    """
    flip: bool = False
    discrete_steps: bool = False
    step_count: int = DEFAULT_STEP_COUNT
    circular: bool = False


def quantize(t: ScalarOrArray, step_count: int, circular: bool = False) -> NDArray:
    """Snap t to one of ``step_count`` evenly spaced levels."""
    t = np.asarray(t, dtype=float)
    if step_count < 1:
        warnings.warn(f"step_count must be >= 1, got {step_count}; using 1", UserWarning, stacklevel=2)
        step_count = 1
    if step_count == 1:
        return np.zeros_like(t)

    step_index = np.clip(np.floor(t * step_count), 0, step_count - 1)
    denominator = step_count if circular else step_count - 1
    return np.asarray(step_index, dtype=float) / denominator


def shape_values(t: ScalarOrArray, config: ShapingConfig) -> NDArray:
    """Apply quantization then flip, as configured."""
    t = np.asarray(t, dtype=float)
    if config.discrete_steps:
        t = quantize(t, config.step_count, config.circular)
    if config.flip:
        t = 1.0 - t
    return t
