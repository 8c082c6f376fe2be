from __future__ import annotations

from typing import Callable, Optional, Tuple, Union

import numpy as np
from numpy import ndarray as NDArray

from ..config import PREVIEW_SIZE_MAX
from .synthesizer import Dimensions, Pipeline, synthesize

SynthesizeFn = Callable[..., NDArray]


def preview_dimensions(
    dimensions: Union[Dimensions, Tuple[int, int]],
    max_size: Tuple[int, int] = PREVIEW_SIZE_MAX,
) -> Dimensions:
    """Component-wise minimum of the requested size and ``max_size``."""
    dimensions = Dimensions.coerce(dimensions)
    return Dimensions(min(dimensions.width, max_size[0]), min(dimensions.height, max_size[1]))


def render_preview(
    pipeline: Pipeline,
    dimensions: Union[Dimensions, Tuple[int, int]],
    synthesize_fn: SynthesizeFn = synthesize,
    max_size: Tuple[int, int] = PREVIEW_SIZE_MAX,
    rng: Optional[np.random.Generator] = None,
) -> NDArray:
    """
    Synthesize a preview-sized buffer for the given export settings.

    The pipeline is evaluated at the bounded size directly rather than
    downsampling a full-size render.
    """
    return synthesize_fn(preview_dimensions(dimensions, max_size), pipeline, rng=rng)
