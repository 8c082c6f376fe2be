"""
Color sources
=============

Gradient-family sources turn a shaped parameter ``t`` into colors:

- ``FlatColor``: one color everywhere
- ``GradientSource``: position-keyed gradient
- ``CurveRamp``: response curve followed by an evenly spaced color ramp,
  with an optional alpha response curve

Pattern sources read pixel positions directly:

- ``Checkerboard``: alternating cells of two colors
- ``WhiteNoise``: independent uniform sample per pixel blending two colors
- ``HslWheel``: hue across x, lightness across y, full saturation
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Union, assert_never

import numpy as np
from numpy import ndarray as NDArray

from ..colors.ramp import ColorRamp, evaluate_ramp
from ..conversions.hsv import np_hsv_to_unit_rgb
from ..curves.response import IdentityCurve, ResponseCurve
from ..gradients.keyed import GradientStop, KeyedGradient
from ..types.color_types import BLACK, WHITE, ColorInput, ColorTuple, ScalarOrArray, lerp, to_rgba
from ..types.mode_types import GradientMode
from .mapping import axis_fraction


@dataclass(frozen=True)
class FlatColor:
    color: ColorInput = WHITE

    def __post_init__(self) -> None:
        object.__setattr__(self, "color", to_rgba(self.color))


@dataclass(frozen=True)
class GradientSource:
    """
    Position-keyed gradient lookup.

    ``gradient`` may also be given as a sequence of GradientStop objects or
    (position, color[, alpha]) tuples, which is converted with
    ``KeyedGradient.from_stops``.
    """
    gradient: KeyedGradient = field(default_factory=KeyedGradient)

    def __post_init__(self) -> None:
        if isinstance(self.gradient, KeyedGradient):
            return
        if isinstance(self.gradient, (list, tuple)):
            object.__setattr__(self, "gradient", KeyedGradient.from_stops(self.gradient))
            return
        raise TypeError(f"Unsupported gradient: {type(self.gradient).__name__}")

    @classmethod
    def from_stops(
        cls,
        stops: Sequence[GradientStop],
        mode: GradientMode = GradientMode.BLEND,
    ) -> "GradientSource":
        return cls(KeyedGradient.from_stops(stops, mode=mode))


@dataclass(frozen=True)
class CurveRamp:
    """
    ``ramp(color_curve(t))``, with alpha scaled by ``alpha_curve(t)`` when given.

    ``ramp`` may be a ColorRamp (read at call time, so edits between calls
    show up) or a plain sequence of colors, stored as a tuple of RGBA tuples.
    """
    ramp: Union[ColorRamp, Sequence[ColorInput]] = field(default_factory=ColorRamp)
    color_curve: ResponseCurve = field(default_factory=IdentityCurve)
    alpha_curve: Optional[ResponseCurve] = None

    def __post_init__(self) -> None:
        if not isinstance(self.ramp, ColorRamp):
            object.__setattr__(self, "ramp", tuple(to_rgba(c) for c in self.ramp))


@dataclass(frozen=True)
class Checkerboard:
    cell_width: int = 8
    cell_height: int = 8
    color_a: ColorInput = BLACK
    color_b: ColorInput = WHITE

    def __post_init__(self) -> None:
        if self.cell_width < 1 or self.cell_height < 1:
            raise ValueError(
                f"Checker cells must be at least 1x1, got {self.cell_width}x{self.cell_height}"
            )
        object.__setattr__(self, "color_a", to_rgba(self.color_a))
        object.__setattr__(self, "color_b", to_rgba(self.color_b))


@dataclass(frozen=True)
class WhiteNoise:
    color_a: ColorInput = BLACK
    color_b: ColorInput = WHITE

    def __post_init__(self) -> None:
        object.__setattr__(self, "color_a", to_rgba(self.color_a))
        object.__setattr__(self, "color_b", to_rgba(self.color_b))


@dataclass(frozen=True)
class HslWheel:
    pass


ColorSource = Union[FlatColor, GradientSource, CurveRamp]
PatternSource = Union[Checkerboard, WhiteNoise, HslWheel]

COLOR_SOURCE_TYPES = (FlatColor, GradientSource, CurveRamp)
PATTERN_SOURCE_TYPES = (Checkerboard, WhiteNoise, HslWheel)


def _constant(color: ColorTuple, shape: tuple) -> NDArray:
    return np.broadcast_to(np.array(color, dtype=float), shape + (4,)).copy()


def _resolve_curve_ramp(t: NDArray, source: CurveRamp) -> NDArray:
    colors = source.ramp.colors if isinstance(source.ramp, ColorRamp) else source.ramp
    result = evaluate_ramp(colors, source.color_curve(t))
    if source.alpha_curve is not None:
        alpha = np.broadcast_to(source.alpha_curve(t), t.shape)
        result[..., 3] = np.clip(result[..., 3] * alpha, 0.0, 1.0)
    return result


def resolve_color(t: ScalarOrArray, source: ColorSource) -> NDArray:
    """
    Resolve gradient parameter(s) into RGBA colors.

    Args:
        t: Shaped parameter(s)
        source: One of FlatColor, GradientSource, CurveRamp

    Returns:
        Colors of shape t.shape + (4,)
    """
    if not isinstance(source, COLOR_SOURCE_TYPES):
        raise TypeError(f"Unsupported color source: {type(source).__name__}")
    t = np.asarray(t, dtype=float)

    if isinstance(source, FlatColor):
        return _constant(source.color, t.shape)
    if isinstance(source, GradientSource):
        return source.gradient.evaluate(t)
    if isinstance(source, CurveRamp):
        return _resolve_curve_ramp(t, source)
    assert_never(source)


def _checkerboard(xs: NDArray, ys: NDArray, pattern: Checkerboard) -> NDArray:
    cells = np.floor_divide(xs, pattern.cell_width) + np.floor_divide(ys, pattern.cell_height)
    is_a = (cells % 2 == 0)[..., None]
    return np.where(is_a, np.array(pattern.color_a), np.array(pattern.color_b))


def _white_noise(xs: NDArray, pattern: WhiteNoise, rng: np.random.Generator) -> NDArray:
    u = rng.random(xs.shape)
    return lerp(np.array(pattern.color_a), np.array(pattern.color_b), u)


def _hsl_wheel(xs: NDArray, ys: NDArray, width: int, height: int) -> NDArray:
    u = axis_fraction(xs, width)
    v = axis_fraction(ys, height)

    hue = np.concatenate([np_hsv_to_unit_rgb(u * 360.0, 1.0, 1.0), np.ones(u.shape + (1,))], axis=-1)
    darker = lerp(np.array(BLACK), hue, v * 2.0)
    lighter = lerp(hue, np.array(WHITE), (v - 0.5) * 2.0)
    return np.where((v < 0.5)[..., None], darker, lighter)


def resolve_pattern(
    xs: ScalarOrArray,
    ys: ScalarOrArray,
    width: int,
    height: int,
    pattern: PatternSource,
    rng: Optional[np.random.Generator] = None,
) -> NDArray:
    """
    Resolve pixel position(s) into RGBA colors for a pattern source.

    Args:
        xs, ys: Pixel coordinates, broadcastable to one shape
        width, height: Image size in pixels
        pattern: One of Checkerboard, WhiteNoise, HslWheel
        rng: Random generator for WhiteNoise; a fresh unseeded one if None

    Returns:
        Colors of shape broadcast(xs, ys).shape + (4,)
    """
    if not isinstance(pattern, PATTERN_SOURCE_TYPES):
        raise TypeError(f"Unsupported pattern source: {type(pattern).__name__}")
    xs, ys = np.broadcast_arrays(np.asarray(xs, dtype=float), np.asarray(ys, dtype=float))

    if isinstance(pattern, Checkerboard):
        return _checkerboard(xs, ys, pattern)
    if isinstance(pattern, WhiteNoise):
        return _white_noise(xs, pattern, rng if rng is not None else np.random.default_rng())
    if isinstance(pattern, HslWheel):
        return _hsl_wheel(xs, ys, width, height)
    assert_never(pattern)
