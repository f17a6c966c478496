"""Terrain quality measures derived from a heightmap's slope."""

from __future__ import annotations

import numpy as np
from scipy import ndimage

_DIAGONALS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def _as_grid(heightmap) -> np.ndarray:
    data = np.asarray(heightmap, dtype=np.float32)
    if data.ndim != 2:
        raise ValueError("heightmap must be two-dimensional")
    rows, cols = data.shape
    if rows < 2 or cols < 2:
        raise ValueError("heightmap needs at least two rows and two columns")
    return data


def slope_map(heightmap) -> np.ndarray:
    """Return the largest absolute height step to any diagonal neighbour of each cell."""
    data = _as_grid(heightmap)
    rows, cols = data.shape
    slope = np.zeros((rows, cols), dtype=np.float32)
    for dr, dc in _DIAGONALS:
        centres = (
            slice(max(0, -dr), rows - max(0, dr)),
            slice(max(0, -dc), cols - max(0, dc)),
        )
        targets = (
            slice(max(0, dr), rows - max(0, -dr)),
            slice(max(0, dc), cols - max(0, -dc)),
        )
        step = np.abs(data[centres] - data[targets])
        np.maximum(slope[centres], step, out=slope[centres])
    return slope


class Evaluator:
    """Computes slope-based maps and an erosion score for a heightmap.

    ``accessibility_map`` is 1 where the slope exceeds ``unit_thres``;
    ``unit_map`` marks the largest 8-connected region of such cells;
    ``flatness_map`` marks cells whose slope is below ``building_thres``;
    ``building_map`` is where both unit and flatness maps hold.
    """

    def __init__(self, height_map, building_thres: float, unit_thres: float) -> None:
        self.height_map = _as_grid(height_map)
        self.building_thres = float(building_thres)
        self.unit_thres = float(unit_thres)
        self.slope_map = slope_map(self.height_map)
        self.accessibility_map = (self.slope_map > self.unit_thres).astype(np.float32)
        self.unit_map = self._largest_component(self.accessibility_map)
        self.flatness_map = self.slope_map < self.building_thres
        self.building_map = self.unit_map & self.flatness_map
        self.erosion_score = self._erosion_score(self.slope_map)

    @staticmethod
    def _largest_component(mask: np.ndarray) -> np.ndarray:
        labels, count = ndimage.label(mask != 0, structure=np.ones((3, 3), dtype=bool))
        largest = 0
        if count:
            sizes = np.bincount(labels.ravel(), minlength=count + 1)
            largest = int(np.argmax(sizes[1:])) + 1
        return labels == largest

    @staticmethod
    def _erosion_score(slope: np.ndarray) -> float:
        values = slope.astype(np.float64)
        mean = float(values.mean())
        if mean == 0:
            return -1.0
        return float(values.std()) / mean