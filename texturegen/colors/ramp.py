from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence

import numpy as np
from numpy import ndarray as NDArray

from ..config import DEFAULT_RAMP_COLORS, FALLBACK_COLOR
from ..types.color_types import ColorInput, ColorTuple, ScalarOrArray, colors_to_array, lerp, to_rgba


def evaluate_ramp(colors: Sequence[ColorInput], t: ScalarOrArray) -> NDArray:
    """
    Evaluate a list of colors as an evenly spaced piecewise-linear gradient.

    Args:
        colors: Ordered color stops; stop k sits at t = k / (N - 1)
        t: Parameter(s), clamped to [0, 1]

    Returns:
        Colors of shape t.shape + (4,). An empty list yields white everywhere,
        a single color is returned for every t.

    Example:
        >>> evaluate_ramp([(1, 0, 0), (0, 1, 0), (0, 0, 1)], 0.25)
        array([0.5, 0.5, 0. , 1. ])
    """
    t = np.asarray(np.clip(np.asarray(t, dtype=float), 0.0, 1.0))
    table = colors_to_array(colors)
    count = len(table)

    if count == 0:
        return np.broadcast_to(np.array(FALLBACK_COLOR), t.shape + (4,)).copy()
    if count == 1:
        return np.broadcast_to(table[0], t.shape + (4,)).copy()

    scaled = t * (count - 1)
    lower = np.clip(np.floor(scaled).astype(int), 0, count - 1)
    upper = np.clip(np.ceil(scaled).astype(int), 0, count - 1)
    fraction = scaled - lower

    return lerp(table[lower], table[upper], fraction)


class ColorRamp:
    """
    Ordered, editable list of colors read as an evenly spaced gradient.

    The list is owned by whoever edits it (usually a UI) and is only read
    during synthesis.
    """

    def __init__(self, colors: Optional[Iterable[ColorInput]] = None) -> None:
        if colors is None:
            colors = DEFAULT_RAMP_COLORS
        self._colors: List[ColorTuple] = [to_rgba(c) for c in colors]

    @property
    def colors(self) -> List[ColorTuple]:
        return list(self._colors)

    def evaluate(self, t: ScalarOrArray) -> NDArray:
        return evaluate_ramp(self._colors, t)

    def append(self, color: ColorInput) -> None:
        self._colors.append(to_rgba(color))

    def insert(self, index: int, color: ColorInput) -> None:
        self._colors.insert(index, to_rgba(color))

    def remove_at(self, index: int) -> ColorTuple:
        return self._colors.pop(index)

    def move(self, source: int, destination: int) -> None:
        """Move the color at ``source`` so it ends up at ``destination``."""
        color = self._colors.pop(source)
        self._colors.insert(destination, color)

    def clear(self) -> None:
        self._colors.clear()

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[ColorTuple]:
        return iter(self._colors)

    def __getitem__(self, index: int) -> ColorTuple:
        return self._colors[index]

    def __repr__(self) -> str:
        return f"ColorRamp(colors={self._colors!r})"
