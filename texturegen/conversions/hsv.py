import numpy as np
from numpy import ndarray as NDArray


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized HSV to unit-range RGB.

    Args:
        h, s, v: array-like or scalar; hue in degrees, saturation and value in [0, 1]

    Returns:
        rgb: array of shape (..., 3)
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    h6 = (h % 360.0) / 60.0
    sector = np.floor(h6).astype(int) % 6
    f = h6 - np.floor(h6)

    p = v * (1 - s)
    q = v * (1 - s * f)
    t = v * (1 - s * (1 - f))

    r = np.choose(sector, [v, q, p, p, t, v])
    g = np.choose(sector, [t, v, v, q, p, p])
    b = np.choose(sector, [p, p, t, v, v, q])

    return np.stack([r, g, b], axis=-1)
