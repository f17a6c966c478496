import numpy as np
import pytest

from terrainkit.diamond_square import DiamondSquare
from terrainkit.kernel import KernelType
from terrainkit.thermal_erosion import ThermalErosion
from terrainkit.utils import normalize
from terrainkit.voronoi import Voronoi


@pytest.fixture
def combined():
    ds = DiamondSquare().generate(33, decay=0.5, seed=1337)
    vrn = Voronoi(33, 33, [-1.0, 1.0], 20, seed=1337, regularize=False).generate()
    return normalize(0.67 * ds + 0.33 * vrn)


def test_erosion_conserves_mass(combined):
    eroded = combined.astype(np.float64)
    ThermalErosion(KernelType.MOORE).apply(eroded, 3)
    assert eroded.sum() == pytest.approx(combined.astype(np.float64).sum(), rel=1e-9)


def test_erosion_smooths_terrain(combined):
    eroded = combined.astype(np.float64)
    ThermalErosion(KernelType.MOORE).apply(eroded, 3)
    assert eroded.std() < combined.std()
    assert not np.allclose(eroded, combined)


def test_flat_terrain_unchanged():
    flat = np.full((6, 6), 0.4)
    ThermalErosion().apply(flat, 2)
    np.testing.assert_array_equal(flat, np.full((6, 6), 0.4))


def test_slopes_below_talus_unchanged():
    gentle = np.add.outer(np.arange(5), np.arange(5)) * 0.001
    original = gentle.copy()
    ThermalErosion(KernelType.MOORE).apply(gentle)
    np.testing.assert_array_equal(gentle, original)


def test_peak_spreads_symmetrically():
    peak = np.zeros((3, 3))
    peak[1, 1] = 1.0
    ThermalErosion(KernelType.MOORE).apply(peak)
    assert peak.sum() == pytest.approx(1.0)
    assert peak[1, 1] < 1.0
    ring = np.delete(peak.ravel(), 4)
    assert np.allclose(ring, ring[0])
    assert ring[0] > 0


def test_operation_only_feeds_lower_neighbours():
    grid = np.array([[0.0, 1.0, 2.0]])
    ThermalErosion(KernelType.VON_NEUMANN).operation(grid, (0, 1), [(0, 0), (0, 2)])
    assert grid[0, 2] == 2.0
    assert grid[0, 0] > 0.0
    assert grid.sum() == pytest.approx(3.0)


def test_rejects_non_2d():
    with pytest.raises(ValueError):
        ThermalErosion().apply(np.zeros(4))