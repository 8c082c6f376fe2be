from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Sequence, Tuple, Union

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import ScalarOrArray


class ResponseCurve(ABC):
    """Base class for scalar response curves mapping t to a new value."""

    @abstractmethod
    def __call__(self, t: ScalarOrArray) -> NDArray:
        """Apply the curve to value(s)."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class IdentityCurve(ResponseCurve):
    """Returns t unchanged."""

    def __call__(self, t: ScalarOrArray) -> NDArray:
        return np.asarray(t, dtype=float)


class FunctionCurve(ResponseCurve):
    """Curve defined by a callable on floats."""

    def __init__(self, func: Callable[[float], float], vectorized: bool = False):
        self.func = func
        self.vectorized = vectorized

    def __call__(self, t: ScalarOrArray) -> NDArray:
        t = np.asarray(t, dtype=float)
        if self.vectorized:
            return np.asarray(self.func(t), dtype=float)
        return np.vectorize(self.func, otypes=[float])(t)

    def __repr__(self) -> str:
        return f"FunctionCurve(func={getattr(self.func, '__name__', 'lambda')})"


@dataclass(frozen=True)
class Keyframe:
    """A curve key with Hermite tangents (slopes in value per unit time)."""
    time: float
    value: float
    in_tangent: float = 0.0
    out_tangent: float = 0.0


KeyframeInput = Union[Keyframe, Tuple[float, float], Tuple[float, float, float, float]]


class KeyframeCurve(ResponseCurve):
    """
    Cubic Hermite curve through keyframes.

    Outside the key range the first/last value is held. A curve without
    keys evaluates to 0 everywhere, one key gives a constant.
    """

    def __init__(self, keys: Sequence[KeyframeInput] = ()):
        frames = [k if isinstance(k, Keyframe) else Keyframe(*k) for k in keys]
        frames.sort(key=lambda k: k.time)
        self.keys: Tuple[Keyframe, ...] = tuple(frames)

        self._times = np.array([k.time for k in frames], dtype=float)
        self._values = np.array([k.value for k in frames], dtype=float)
        self._in = np.array([k.in_tangent for k in frames], dtype=float)
        self._out = np.array([k.out_tangent for k in frames], dtype=float)

    @classmethod
    def linear(cls, time_start: float = 0.0, value_start: float = 0.0,
               time_end: float = 1.0, value_end: float = 1.0) -> "KeyframeCurve":
        """Straight line between two keys."""
        if time_end == time_start:
            return cls([Keyframe(time_start, value_start)])
        slope = (value_end - value_start) / (time_end - time_start)
        return cls([
            Keyframe(time_start, value_start, slope, slope),
            Keyframe(time_end, value_end, slope, slope),
        ])

    @classmethod
    def ease_in_out(cls, time_start: float = 0.0, value_start: float = 0.0,
                    time_end: float = 1.0, value_end: float = 1.0) -> "KeyframeCurve":
        """S-curve with flat tangents at both keys."""
        return cls([Keyframe(time_start, value_start), Keyframe(time_end, value_end)])

    @classmethod
    def constant(cls, value: float) -> "KeyframeCurve":
        return cls([Keyframe(0.0, value)])

    def __call__(self, t: ScalarOrArray) -> NDArray:
        t = np.asarray(t, dtype=float)
        count = len(self._times)
        if count == 0:
            return np.zeros_like(t)
        if count == 1:
            return np.full_like(t, self._values[0])

        t = np.clip(t, self._times[0], self._times[-1])
        idx = np.clip(np.searchsorted(self._times, t, side="right") - 1, 0, count - 2)

        t0 = self._times[idx]
        t1 = self._times[idx + 1]
        dt = t1 - t0
        s = np.divide(t - t0, dt, out=np.zeros_like(t), where=dt != 0)

        s2 = s * s
        s3 = s2 * s
        h00 = 2 * s3 - 3 * s2 + 1
        h10 = s3 - 2 * s2 + s
        h01 = -2 * s3 + 3 * s2
        h11 = s3 - s2

        return (
            h00 * self._values[idx]
            + h10 * dt * self._out[idx]
            + h01 * self._values[idx + 1]
            + h11 * dt * self._in[idx + 1]
        )

    def __repr__(self) -> str:
        return f"KeyframeCurve(keys={len(self.keys)})"
