from enum import Enum


class SpatialMode(str, Enum):
    """How a pixel position is turned into a gradient parameter."""
    AXIS_X = "x"
    AXIS_Y = "y"
    RADIAL = "radial"
    ANGULAR = "angular"


class GradientMode(str, Enum):
    """
    Key blending for position-keyed gradients.

    BLEND:  Linear interpolation between neighbouring keys
    FIXED:  Hold the color of the next key at or after t
    """
    BLEND = "blend"
    FIXED = "fixed"
