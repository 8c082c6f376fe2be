"""
Texturegen - Procedural Texture Synthesis
=========================================

Generates 2D textures (gradients, ramps, checkerboards, white noise and
hue/lightness wheels) as float RGBA pixel buffers.

Quick Start
-----------
>>> from texturegen import (
...     GradientPipeline, SpatialMapping, SpatialMode, ShapingConfig,
...     CurveRamp, ColorRamp, synthesize, to_image,
... )
>>>
>>> pipeline = GradientPipeline(
...     source=CurveRamp(ColorRamp([(1, 0, 0), (0, 0, 1)])),
...     mapping=SpatialMapping(SpatialMode.ANGULAR, offset_angle=90.0),
...     shaping=ShapingConfig(discrete_steps=True, step_count=8, circular=True),
... )
>>> buffer = synthesize((256, 256), pipeline)   # (256, 256, 4) floats
>>> image = to_image(buffer)                    # PIL.Image, RGBA

Modules
-------
- colors: evenly spaced color ramps
- gradients: position-keyed gradients
- curves: scalar response curves
- pipeline: coordinate mapping, value shaping, color sources, synthesis
- conversions: HSV to RGB
"""

from .types.color_types import BLACK, WHITE, lerp, to_rgba
from .types.mode_types import GradientMode, SpatialMode
from .colors import ColorRamp, evaluate_ramp
from .gradients import GradientStop, KeyedGradient
from .curves import FunctionCurve, IdentityCurve, Keyframe, KeyframeCurve, ResponseCurve
from .conversions import np_hsv_to_unit_rgb
from .pipeline import (
    Checkerboard,
    CurveRamp,
    Dimensions,
    FlatColor,
    GradientPipeline,
    GradientSource,
    HslWheel,
    PatternPipeline,
    ShapingConfig,
    SpatialMapping,
    WhiteNoise,
    map_coordinates,
    preview_dimensions,
    render_preview,
    resolve_color,
    resolve_pattern,
    shape_values,
    synthesize,
    synthesize_pixel,
    to_image,
    to_uint8,
)

__version__ = "0.1.0"

__all__ = [
    # colors
    "BLACK", "WHITE",
    "lerp", "to_rgba",
    "ColorRamp", "evaluate_ramp",
    "GradientStop", "KeyedGradient",

    # modes
    "GradientMode", "SpatialMode",

    # curves
    "ResponseCurve", "IdentityCurve", "FunctionCurve",
    "Keyframe", "KeyframeCurve",

    # conversions
    "np_hsv_to_unit_rgb",

    # pipeline
    "Dimensions", "SpatialMapping", "ShapingConfig",
    "FlatColor", "GradientSource", "CurveRamp",
    "Checkerboard", "WhiteNoise", "HslWheel",
    "GradientPipeline", "PatternPipeline",
    "map_coordinates", "shape_values",
    "resolve_color", "resolve_pattern",
    "synthesize", "synthesize_pixel",
    "to_uint8", "to_image",
    "preview_dimensions", "render_preview",

    # Version
    "__version__",
]
