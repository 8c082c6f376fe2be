from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..config import FALLBACK_COLOR
from ..types.color_types import ColorInput, ScalarOrArray, to_rgba
from ..types.mode_types import GradientMode


@dataclass(frozen=True)
class GradientStop:
    """
    A (position, color, alpha) key.

    ``alpha`` defaults to the color's own alpha channel, or 1.0 for RGB input.
    """
    position: float
    color: ColorInput
    alpha: Optional[float] = None

    def rgba(self) -> Tuple[float, float, float, float]:
        r, g, b, a = to_rgba(self.color)
        return r, g, b, a if self.alpha is None else float(self.alpha)


def _sorted_keys(keys: Sequence[Tuple[float, object]]) -> list:
    # stable, so equal positions keep insertion order
    return sorted(keys, key=lambda k: k[0])


def _sample_keys(positions: NDArray, values: NDArray, t: NDArray, mode: GradientMode) -> NDArray:
    """Sample (N, C) key values at t, clamping outside the key range."""
    if mode is GradientMode.FIXED:
        idx = np.searchsorted(positions, t, side="left")
        idx = np.clip(idx, 0, len(positions) - 1)
        return values[idx]
    return np.stack(
        [np.interp(t, positions, values[:, ch]) for ch in range(values.shape[1])],
        axis=-1,
    )


@dataclass(frozen=True)
class KeyedGradient:
    """
    Gradient defined by color keys and alpha keys at explicit positions.

    Color and alpha keys are independent lists, as gradient editors usually
    keep them. Between keys the gradient blends linearly (or holds, in
    ``GradientMode.FIXED``); before the first and after the last key the
    end values are held.
    """
    color_keys: Tuple[Tuple[float, Tuple[float, float, float]], ...] = field(
        default=((0.0, (0.0, 0.0, 0.0)), (1.0, (1.0, 1.0, 1.0)))
    )
    alpha_keys: Tuple[Tuple[float, float], ...] = field(default=((0.0, 1.0), (1.0, 1.0)))
    mode: GradientMode = GradientMode.BLEND

    def __post_init__(self) -> None:
        color_keys = tuple(
            (float(pos), to_rgba(color)[:3]) for pos, color in _sorted_keys(self.color_keys)
        )
        alpha_keys = tuple((float(pos), float(a)) for pos, a in _sorted_keys(self.alpha_keys))
        for pos, _ in color_keys + alpha_keys:
            if not 0.0 <= pos <= 1.0:
                raise ValueError(f"Gradient key position must be in [0, 1], got {pos}")
        object.__setattr__(self, "color_keys", color_keys)
        object.__setattr__(self, "alpha_keys", alpha_keys)
        object.__setattr__(self, "mode", GradientMode(self.mode))

    @classmethod
    def from_stops(
        cls,
        stops: Sequence[GradientStop],
        mode: GradientMode = GradientMode.BLEND,
    ) -> "KeyedGradient":
        """
        Build a gradient from combined (position, color, alpha) stops.

        Each stop contributes one color key and one alpha key at its position.
        """
        stops = [s if isinstance(s, GradientStop) else GradientStop(*s) for s in stops]
        rgba = [s.rgba() for s in stops]
        return cls(
            color_keys=tuple((s.position, c[:3]) for s, c in zip(stops, rgba)),
            alpha_keys=tuple((s.position, c[3]) for s, c in zip(stops, rgba)),
            mode=mode,
        )

    def evaluate(self, t: ScalarOrArray) -> NDArray:
        """
        Sample the gradient.

        Args:
            t: Parameter(s), clamped to [0, 1]

        Returns:
            RGBA colors of shape t.shape + (4,)
        """
        t = np.asarray(np.clip(np.asarray(t, dtype=float), 0.0, 1.0))

        if self.color_keys:
            positions = np.array([k[0] for k in self.color_keys], dtype=float)
            values = np.array([k[1] for k in self.color_keys], dtype=float)
            rgb = _sample_keys(positions, values, t, self.mode)
        else:
            rgb = np.broadcast_to(np.array(FALLBACK_COLOR[:3]), t.shape + (3,))

        if self.alpha_keys:
            positions = np.array([k[0] for k in self.alpha_keys], dtype=float)
            values = np.array([[k[1]] for k in self.alpha_keys], dtype=float)
            alpha = _sample_keys(positions, values, t, self.mode)
        else:
            alpha = np.full(t.shape + (1,), FALLBACK_COLOR[3])

        return np.concatenate([rgb, alpha], axis=-1)
