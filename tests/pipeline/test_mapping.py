import numpy as np
import pytest

from texturegen.pipeline.mapping import axis_fraction, map_coordinates, pixel_grid, wrap_unit
from texturegen.types.mode_types import SpatialMode


def test_axis_x_spans_zero_to_one():
    xs = np.arange(4)
    t = map_coordinates(xs, 0, 4, 1, SpatialMode.AXIS_X)
    assert np.allclose(t, [0.0, 1/3, 2/3, 1.0])


def test_axis_y_ignores_x():
    ys, xs = pixel_grid(3, 5)
    t = map_coordinates(xs, ys, 3, 5, SpatialMode.AXIS_Y)
    assert t.shape == (5, 3)
    assert np.allclose(t[:, 0], [0.0, 0.25, 0.5, 0.75, 1.0])
    assert np.allclose(t, t[:, :1])


def test_single_pixel_axis_maps_to_zero():
    assert np.array_equal(axis_fraction(np.arange(3), 1), np.zeros(3))
    t = map_coordinates(0, 0, 1, 1, SpatialMode.AXIS_X)
    assert float(t) == 0.0


def test_radial_distance():
    assert float(map_coordinates(1, 1, 3, 3, SpatialMode.RADIAL)) == pytest.approx(0.0)
    assert float(map_coordinates(0, 1, 3, 3, SpatialMode.RADIAL)) == pytest.approx(1.0)
    # corners are not clamped
    assert float(map_coordinates(0, 0, 3, 3, SpatialMode.RADIAL)) == pytest.approx(np.sqrt(2))


def test_angular_reference_directions():
    # straight right of the center is angle 0
    assert float(map_coordinates(3, 2, 4, 4, SpatialMode.ANGULAR)) == pytest.approx(0.0)
    # +y is a quarter turn
    assert float(map_coordinates(2, 3, 4, 4, SpatialMode.ANGULAR)) == pytest.approx(0.25)


def test_angular_offset_rotates():
    assert float(map_coordinates(3, 2, 4, 4, SpatialMode.ANGULAR, 90.0)) == pytest.approx(0.25)
    assert float(map_coordinates(3, 2, 4, 4, SpatialMode.ANGULAR, -90.0)) == pytest.approx(0.75)
    assert float(map_coordinates(3, 2, 4, 4, SpatialMode.ANGULAR, 720.0)) == pytest.approx(0.0)


@pytest.mark.parametrize("offset", [-720.0, -90.0, -0.1, 0.0, 45.0, 180.0, 359.9, 1080.5])
def test_angular_always_in_unit_interval(offset):
    ys, xs = pixel_grid(16, 9)
    t = map_coordinates(xs, ys, 16, 9, SpatialMode.ANGULAR, offset)
    assert t.shape == (9, 16)
    assert np.all(t >= 0.0)
    assert np.all(t < 1.0)


def test_wrap_unit_is_floored_modulo():
    assert np.allclose(wrap_unit(np.array([-0.25, 0.0, 0.5, 1.0, 2.75])), [0.75, 0.0, 0.5, 0.0, 0.75])
    tiny = wrap_unit(-1e-20)
    assert 0.0 <= float(tiny) < 1.0


def test_mode_accepts_string_values():
    assert float(map_coordinates(0, 1, 3, 3, "radial")) == pytest.approx(1.0)


def test_unknown_mode_fails_fast():
    with pytest.raises(ValueError):
        map_coordinates(0, 0, 4, 4, "diagonal")


def test_pixel_grid_layout():
    ys, xs = pixel_grid(4, 2)
    assert ys.shape == xs.shape == (2, 4)
    assert xs[1, 3] == 3.0
    assert ys[1, 3] == 1.0
