from .mapping import axis_fraction, map_coordinates, pixel_grid, wrap_unit
from .shaping import ShapingConfig, quantize, shape_values
from .sources import (
    Checkerboard,
    ColorSource,
    CurveRamp,
    FlatColor,
    GradientSource,
    HslWheel,
    PatternSource,
    WhiteNoise,
    resolve_color,
    resolve_pattern,
)
from .synthesizer import (
    Dimensions,
    GradientPipeline,
    PatternPipeline,
    Pipeline,
    SpatialMapping,
    synthesize,
    synthesize_pixel,
    to_image,
    to_uint8,
)
from .preview import preview_dimensions, render_preview

__all__ = [
    # mapping
    "axis_fraction",
    "map_coordinates",
    "pixel_grid",
    "wrap_unit",
    # shaping
    "ShapingConfig",
    "quantize",
    "shape_values",
    # sources
    "Checkerboard",
    "ColorSource",
    "CurveRamp",
    "FlatColor",
    "GradientSource",
    "HslWheel",
    "PatternSource",
    "WhiteNoise",
    "resolve_color",
    "resolve_pattern",
    # synthesis
    "Dimensions",
    "GradientPipeline",
    "PatternPipeline",
    "Pipeline",
    "SpatialMapping",
    "synthesize",
    "synthesize_pixel",
    "to_image",
    "to_uint8",
    "preview_dimensions",
    "render_preview",
]
