"""
Default values shared by the synthesis pipeline and its callers.
"""

from typing import Tuple

from .types.color_types import BLACK, WHITE, ColorTuple

DEFAULT_IMAGE_SIZE = 256

# Previews never exceed this size, whatever export size was requested
PREVIEW_SIZE_MAX: Tuple[int, int] = (256, 256)

DEFAULT_STEP_COUNT = 4

DEFAULT_RAMP_COLORS: Tuple[ColorTuple, ...] = (BLACK, WHITE)

# Returned by an empty ramp or gradient
FALLBACK_COLOR: ColorTuple = WHITE
