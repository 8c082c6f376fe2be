"""
HSV conversions used by the hue-wheel pattern.

np_hsv_to_unit_rgb(h, s, v)
    Vectorized HSV (hue in degrees) to unit RGB, returns (..., 3)
"""

from .hsv import np_hsv_to_unit_rgb

__all__ = ["np_hsv_to_unit_rgb"]
