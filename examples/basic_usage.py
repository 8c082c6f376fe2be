"""Basic texturegen usage examples.

Run directly with:
    python examples/basic_usage.py [output_dir]
"""
import sys
from pathlib import Path

import numpy as np

from texturegen import (
    Checkerboard,
    ColorRamp,
    CurveRamp,
    GradientPipeline,
    GradientSource,
    GradientStop,
    HslWheel,
    KeyframeCurve,
    PatternPipeline,
    ShapingConfig,
    SpatialMapping,
    SpatialMode,
    WhiteNoise,
    preview_dimensions,
    synthesize,
    to_image,
)


def demonstrate_gradients() -> dict:
    # Keyed gradient with a transparent end, banded into 6 circular steps around the center.
    sunset = GradientPipeline(
        source=GradientSource.from_stops([
            GradientStop(0.0, (0.1, 0.0, 0.3)),
            GradientStop(0.6, (0.9, 0.3, 0.1)),
            GradientStop(1.0, (1.0, 0.9, 0.4), alpha=0.0),
        ]),
        mapping=SpatialMapping(SpatialMode.ANGULAR, offset_angle=90.0),
        shaping=ShapingConfig(discrete_steps=True, step_count=6, circular=True),
    )

    # Even ramp through an ease curve, radial, flipped so the center is bright.
    glow = GradientPipeline(
        source=CurveRamp(
            ColorRamp([(0.0, 0.0, 0.0), (0.2, 0.4, 1.0), (1.0, 1.0, 1.0)]),
            color_curve=KeyframeCurve.ease_in_out(),
        ),
        mapping=SpatialMapping(SpatialMode.RADIAL),
        shaping=ShapingConfig(flip=True),
    )
    return {"sunset": sunset, "glow": glow}


def demonstrate_patterns() -> dict:
    return {
        "checker": PatternPipeline(Checkerboard(16, 16, (0.2, 0.2, 0.2), (0.8, 0.8, 0.8))),
        "noise": PatternPipeline(WhiteNoise()),
        "wheel": PatternPipeline(HslWheel()),
    }


if __name__ == "__main__":
    out_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("texturegen_examples")
    out_dir.mkdir(parents=True, exist_ok=True)

    size = (512, 512)
    print("Preview size for", size, "->", preview_dimensions(size))

    pipelines = {**demonstrate_gradients(), **demonstrate_patterns()}
    rng = np.random.default_rng(0)
    for name, pipeline in pipelines.items():
        buffer = synthesize(size, pipeline, rng=rng)
        path = out_dir / f"{name}.png"
        to_image(buffer).save(path)
        print(f"Saved {path} ({buffer.shape[1]}x{buffer.shape[0]})")
