"""Ready-made terrain operations combining the generators and filters."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from terrainkit.diamond_square import DiamondSquare
from terrainkit.fast_erosion import FastErosion
from terrainkit.kernel import KernelType
from terrainkit.thermal_erosion import ThermalErosion
from terrainkit.utils import normalize
from terrainkit.voronoi import Voronoi


def combine(first, second, alpha: float) -> np.ndarray:
    """Blend two heightmaps as ``alpha * first + (1 - alpha) * second``, scaled into [0, 1]."""
    a = np.asarray(first, dtype=np.float32)
    b = np.asarray(second, dtype=np.float32)
    if a.shape != b.shape:
        raise ValueError(f"shapes differ: {a.shape} and {b.shape}")
    blended = alpha * a.astype(np.float64) + (1.0 - alpha) * b.astype(np.float64)
    return normalize(blended)


def diamond_square_heightmap(n: int, persistence: float = 0.5, seed: int | None = -1) -> np.ndarray:
    """Return a normalised ``n`` x ``n`` diamond-square heightmap."""
    return DiamondSquare().generate(n, decay=persistence, seed=seed)


def voronoi_heightmap(
    n: int,
    n_points: int,
    coeffs: Iterable[float],
    seed: int | None = -1,
    weights: Iterable[float] | None = None,
) -> tuple[np.ndarray, list[tuple[int, int]]]:
    """Return a normalised ``n`` x ``n`` Voronoi heightmap and its (x, y) feature points.

    Without ``weights`` the points are placed freely; with them the points are
    spread out and each region's height is scaled by its weight.
    """
    if weights is None:
        diagram = Voronoi(n, n, coeffs, n_points, seed, regularize=False)
    else:
        diagram = Voronoi(n, n, coeffs, n_points, seed, regularize=True)
        diagram.set_weights(weights)
    heightmap = diagram.generate(True)
    return heightmap, list(diagram.points)


def thermal_erode(heightmap) -> np.ndarray:
    """Return a normalised copy of ``heightmap`` after one thermal erosion pass."""
    eroded = np.array(heightmap, dtype=np.float32)
    ThermalErosion(KernelType.MOORE).apply(eroded)
    return normalize(eroded)


def fast_erode(heightmap) -> np.ndarray:
    """Return a normalised copy of ``heightmap`` after one fast erosion pass."""
    eroded = np.array(heightmap, dtype=np.float32)
    FastErosion(KernelType.VON_NEUMANN2).apply(eroded)
    return normalize(eroded)