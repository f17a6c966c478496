import math

import numpy as np
import pytest

from terrainkit.diamond_square import DiamondSquare
from terrainkit.evaluator import Evaluator, slope_map


def _peak():
    heights = np.zeros((3, 3), dtype=np.float32)
    heights[1, 1] = 1.0
    return heights


def test_slope_of_single_peak():
    expected = np.array([[1, 0, 1], [0, 1, 0], [1, 0, 1]], dtype=np.float32)
    np.testing.assert_array_equal(slope_map(_peak()), expected)


def test_slope_of_constant_map_is_zero():
    assert not slope_map(np.full((5, 5), 0.3)).any()


def test_slope_rejects_thin_grid():
    with pytest.raises(ValueError):
        slope_map(np.zeros((1, 6)))


def test_slope_rejects_non_2d():
    with pytest.raises(ValueError):
        slope_map(np.zeros(9))


def test_evaluator_maps_for_peak():
    evaluator = Evaluator(_peak(), 0.5, 0.5)
    ones = np.array([[1, 0, 1], [0, 1, 0], [1, 0, 1]], dtype=bool)
    np.testing.assert_array_equal(evaluator.accessibility_map != 0, ones)
    np.testing.assert_array_equal(evaluator.unit_map, ones)
    np.testing.assert_array_equal(evaluator.flatness_map, ~ones)
    assert not evaluator.building_map.any()


def test_erosion_score_for_peak():
    evaluator = Evaluator(_peak(), 0.5, 0.5)
    assert evaluator.erosion_score == pytest.approx(math.sqrt(20) / 5, rel=1e-6)


def test_erosion_score_for_flat_map():
    evaluator = Evaluator(np.zeros((4, 4)), 0.1, 0.1)
    assert evaluator.erosion_score == -1.0
    assert evaluator.flatness_map.all()


def test_largest_component_is_chosen():
    heights = np.zeros((3, 8), dtype=np.float32)
    heights[1, 1] = 1.0
    heights[0, 5] = 1.0
    heights[2, 5] = 1.0
    heights[1, 6] = 1.0
    evaluator = Evaluator(heights, 0.5, 0.5)
    unit = evaluator.unit_map
    assert not unit[:, :3].any()
    assert unit[:, 4:].sum() > 3


def test_invariants_on_generated_terrain():
    heights = DiamondSquare().generate(17, seed=1337)
    n = heights.shape[0]
    evaluator = Evaluator(heights, 2 / n, 8 / n)
    accessible = evaluator.accessibility_map != 0
    assert not (evaluator.unit_map & ~accessible).any()
    np.testing.assert_array_equal(
        evaluator.building_map, evaluator.unit_map & evaluator.flatness_map
    )
    assert evaluator.slope_map.shape == (n, n)
    assert evaluator.erosion_score >= 0