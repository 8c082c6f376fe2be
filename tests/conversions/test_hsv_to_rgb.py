import numpy as np

from texturegen.conversions.hsv import np_hsv_to_unit_rgb

samples_hsv_rgb = {
    (0.0, 1.0, 1.0): (1.0, 0.0, 0.0),
    (30.0, 1.0, 1.0): (1.0, 0.5, 0.0),
    (60.0, 1.0, 1.0): (1.0, 1.0, 0.0),
    (120.0, 1.0, 1.0): (0.0, 1.0, 0.0),
    (180.0, 1.0, 1.0): (0.0, 1.0, 1.0),
    (240.0, 1.0, 1.0): (0.0, 0.0, 1.0),
    (300.0, 1.0, 1.0): (1.0, 0.0, 1.0),
    (360.0, 1.0, 1.0): (1.0, 0.0, 0.0),
    (0.0, 0.0, 0.5): (0.5, 0.5, 0.5),
    (210.0, 0.5, 0.8): (0.4, 0.6, 0.8),
}


def test_hsv_to_unit_rgb_numpy():
    the_matrix = np.array(list(samples_hsv_rgb.keys()))
    expected = np.array(list(samples_hsv_rgb.values()))
    result = np_hsv_to_unit_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(result, expected, atol=1/510)


def test_hsv_to_unit_rgb_numpy_broadcasts_scalars():
    hues = np.array([[0.0, 120.0], [240.0, 360.0]])
    result = np_hsv_to_unit_rgb(hues, 1.0, 1.0)
    assert result.shape == (2, 2, 3)
    assert np.allclose(result[0, 1], (0, 1, 0))
    assert np.allclose(result[1, 1], (1, 0, 0))
