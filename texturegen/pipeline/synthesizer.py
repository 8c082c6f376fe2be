from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union, assert_never

import numpy as np
from numpy import ndarray as NDArray

from ..config import DEFAULT_IMAGE_SIZE
from ..types.mode_types import SpatialMode
from .mapping import map_coordinates, pixel_grid
from .shaping import ShapingConfig, shape_values
from .sources import (
    COLOR_SOURCE_TYPES,
    PATTERN_SOURCE_TYPES,
    ColorSource,
    GradientSource,
    PatternSource,
    resolve_color,
    resolve_pattern,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Dimensions:
    width: int = DEFAULT_IMAGE_SIZE
    height: int = DEFAULT_IMAGE_SIZE

    def __post_init__(self) -> None:
        if int(self.width) != self.width or int(self.height) != self.height:
            raise ValueError(f"Texture dimensions must be whole pixels, got {self.width}x{self.height}")
        if int(self.width) < 1 or int(self.height) < 1:
            raise ValueError(f"Texture dimensions must be at least 1x1, got {self.width}x{self.height}")
        object.__setattr__(self, "width", int(self.width))
        object.__setattr__(self, "height", int(self.height))

    @classmethod
    def coerce(cls, dimensions: Union["Dimensions", Tuple[int, int]]) -> "Dimensions":
        if isinstance(dimensions, Dimensions):
            return dimensions
        width, height = dimensions
        return cls(width, height)


@dataclass(frozen=True)
class SpatialMapping:
    mode: SpatialMode = SpatialMode.AXIS_X
    offset_angle: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "mode", SpatialMode(self.mode))


@dataclass(frozen=True)
class GradientPipeline:
    """Map pixel positions to t, shape t, then look up a color source."""
    source: ColorSource = field(default_factory=GradientSource)
    mapping: SpatialMapping = field(default_factory=SpatialMapping)
    shaping: ShapingConfig = field(default_factory=ShapingConfig)

    def __post_init__(self) -> None:
        if not isinstance(self.source, COLOR_SOURCE_TYPES):
            raise TypeError(f"Unsupported color source: {type(self.source).__name__}")


@dataclass(frozen=True)
class PatternPipeline:
    """Color pixels straight from their positions."""
    pattern: PatternSource

    def __post_init__(self) -> None:
        if not isinstance(self.pattern, PATTERN_SOURCE_TYPES):
            raise TypeError(f"Unsupported pattern source: {type(self.pattern).__name__}")


Pipeline = Union[GradientPipeline, PatternPipeline]


def _render(
    xs: NDArray,
    ys: NDArray,
    dimensions: Dimensions,
    pipeline: Pipeline,
    rng: Optional[np.random.Generator],
) -> NDArray:
    if isinstance(pipeline, GradientPipeline):
        t = map_coordinates(
            xs, ys,
            dimensions.width, dimensions.height,
            pipeline.mapping.mode, pipeline.mapping.offset_angle,
        )
        t = shape_values(t, pipeline.shaping)
        return resolve_color(t, pipeline.source)
    if isinstance(pipeline, PatternPipeline):
        return resolve_pattern(xs, ys, dimensions.width, dimensions.height, pipeline.pattern, rng)
    assert_never(pipeline)


def _check_pipeline(pipeline: Pipeline) -> None:
    if not isinstance(pipeline, (GradientPipeline, PatternPipeline)):
        raise TypeError(f"Unsupported pipeline: {type(pipeline).__name__}")


def synthesize(
    dimensions: Union[Dimensions, Tuple[int, int]],
    pipeline: Pipeline,
    rng: Optional[np.random.Generator] = None,
) -> NDArray:
    """
    Synthesize a full texture.

    Args:
        dimensions: (width, height), both >= 1
        pipeline: GradientPipeline or PatternPipeline
        rng: Random generator consumed by WhiteNoise only. Defaults to a
            fresh unseeded generator, so noise differs between calls.

    Returns:
        float64 array of shape (height, width, 4), indexed [y, x], RGBA in [0, 1]
    """
    dimensions = Dimensions.coerce(dimensions)
    _check_pipeline(pipeline)
    logger.debug(
        "Synthesizing %dx%d texture with %s",
        dimensions.width, dimensions.height, type(pipeline).__name__,
    )

    ys, xs = pixel_grid(dimensions.width, dimensions.height)
    return _render(xs, ys, dimensions, pipeline, rng)


def synthesize_pixel(
    x: int,
    y: int,
    dimensions: Union[Dimensions, Tuple[int, int]],
    pipeline: Pipeline,
    rng: Optional[np.random.Generator] = None,
) -> Tuple[float, float, float, float]:
    """Color of a single pixel, computed the same way ``synthesize`` does."""
    dimensions = Dimensions.coerce(dimensions)
    _check_pipeline(pipeline)
    if not (0 <= x < dimensions.width and 0 <= y < dimensions.height):
        raise ValueError(f"Pixel ({x}, {y}) outside {dimensions.width}x{dimensions.height} texture")

    color = _render(np.asarray(float(x)), np.asarray(float(y)), dimensions, pipeline, rng)
    return tuple(float(c) for c in color)  # type: ignore[return-value]


def to_uint8(buffer: NDArray) -> NDArray:
    """Clamp a float RGBA buffer to [0, 1] and quantize to 0-255."""
    return np.round(np.clip(buffer, 0.0, 1.0) * 255.0).astype(np.uint8)


def to_image(buffer: NDArray, flip_y: bool = False):
    """
    Wrap a synthesized buffer in an RGBA ``PIL.Image`` for export.

    Row 0 of the buffer becomes the top image row; pass ``flip_y=True`` for
    consumers that put the texture origin at the bottom-left.
    """
    from PIL import Image

    pixels = to_uint8(buffer)
    if flip_y:
        pixels = pixels[::-1]
    return Image.fromarray(np.ascontiguousarray(pixels))
