import numpy as np
import pytest

from texturegen.colors.ramp import ColorRamp, evaluate_ramp
from texturegen.types.color_types import BLACK, WHITE, to_rgba

RED = (1.0, 0.0, 0.0, 1.0)
GREEN = (0.0, 1.0, 0.0, 1.0)
BLUE = (0.0, 0.0, 1.0, 1.0)


def test_black_to_white_endpoints_and_midpoint():
    """Two stops interpolate linearly across the whole range."""
    stops = [BLACK, WHITE]
    assert np.allclose(evaluate_ramp(stops, 0.0), BLACK)
    assert np.allclose(evaluate_ramp(stops, 1.0), WHITE)
    assert np.allclose(evaluate_ramp(stops, 0.5), (0.5, 0.5, 0.5, 1.0))


def test_three_stops_segment_midpoint():
    """t=0.25 is the middle of the first of two equal segments."""
    result = evaluate_ramp([RED, GREEN, BLUE], 0.25)
    assert np.allclose(result, (0.5, 0.5, 0.0, 1.0))


def test_exact_stop_colors_at_stop_positions():
    stops = [RED, GREEN, BLUE]
    assert np.allclose(evaluate_ramp(stops, 0.0), RED)
    assert np.allclose(evaluate_ramp(stops, 0.5), GREEN)
    assert np.allclose(evaluate_ramp(stops, 1.0), BLUE)


def test_parameter_is_clamped():
    stops = [RED, BLUE]
    assert np.allclose(evaluate_ramp(stops, -3.0), RED)
    assert np.allclose(evaluate_ramp(stops, 1.414), BLUE)


def test_parameter_grid_is_clamped_per_element():
    """A whole (H, W) grid of t values is looked up in one call."""
    t = np.array([[-1.0, 0.0, 0.5], [0.75, 1.0, 2.0]])
    result = evaluate_ramp([BLACK, WHITE], t)
    assert result.shape == (2, 3, 4)
    assert np.allclose(result[..., 0], [[0.0, 0.0, 0.5], [0.75, 1.0, 1.0]])
    assert np.allclose(result[..., 3], 1.0)


def test_empty_ramp_falls_back_to_white():
    assert np.allclose(evaluate_ramp([], 0.3), WHITE)
    result = evaluate_ramp([], np.zeros((2, 3)))
    assert result.shape == (2, 3, 4)
    assert np.allclose(result, WHITE)


def test_single_color_everywhere():
    t = np.linspace(-1.0, 2.0, 7)
    result = evaluate_ramp([(0.2, 0.4, 0.6)], t)
    assert result.shape == (7, 4)
    assert np.allclose(result, (0.2, 0.4, 0.6, 1.0))


def test_vectorized_matches_scalar():
    stops = [RED, GREEN, BLUE, WHITE]
    t = np.array([[0.0, 0.1, 0.33], [0.5, 0.9, 1.0]])
    grid = evaluate_ramp(stops, t)
    assert grid.shape == (2, 3, 4)
    for idx in np.ndindex(t.shape):
        assert np.allclose(grid[idx], evaluate_ramp(stops, t[idx]))


def test_evaluation_is_pure():
    ramp = ColorRamp([RED, GREEN, BLUE])
    first = ramp.evaluate(0.37)
    second = ramp.evaluate(0.37)
    assert np.array_equal(first, second)


def test_default_ramp_is_black_to_white():
    ramp = ColorRamp()
    assert ramp.colors == [BLACK, WHITE]
    assert np.allclose(ramp.evaluate(0.25), (0.25, 0.25, 0.25, 1.0))


def test_ramp_editing():
    """Edits between evaluations change the result."""
    ramp = ColorRamp([RED])
    ramp.append(BLUE)
    ramp.insert(1, GREEN)
    assert list(ramp) == [RED, GREEN, BLUE]
    assert np.allclose(ramp.evaluate(0.5), GREEN)

    ramp.move(0, 2)
    assert ramp.colors == [GREEN, BLUE, RED]
    assert ramp[2] == RED

    removed = ramp.remove_at(1)
    assert removed == BLUE
    assert len(ramp) == 2

    ramp.clear()
    assert len(ramp) == 0
    assert np.allclose(ramp.evaluate(0.5), WHITE)


def test_colors_property_is_a_copy():
    ramp = ColorRamp()
    ramp.colors.append(RED)
    assert len(ramp) == 2


def test_to_rgba_normalization():
    assert to_rgba((1, 0, 0)) == (1.0, 0.0, 0.0, 1.0)
    assert to_rgba([0.1, 0.2, 0.3, 0.4]) == (0.1, 0.2, 0.3, 0.4)
    assert to_rgba(np.array([0.5, 0.5, 0.5])) == (0.5, 0.5, 0.5, 1.0)


def test_to_rgba_rejects_bad_input():
    with pytest.raises(ValueError):
        to_rgba((1.0, 0.0))
    with pytest.raises(ValueError):
        to_rgba(np.zeros((2, 3)))
    with pytest.raises(TypeError):
        to_rgba("red")
