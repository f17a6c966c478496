"""Thermal erosion: material slides down slopes steeper than a talus angle."""

from __future__ import annotations

import itertools
from collections.abc import Sequence

import numpy as np

from terrainkit.kernel import Kernel, KernelType, Point, move_material


class ThermalErosion(Kernel):
    """Moves material from each cell to all neighbours lower by more than the talus angle."""

    def __init__(
        self,
        kernel_type: KernelType = KernelType.MOORE,
        talus_angle: float = 0.0078,
        magnitude: float = 0.5,
    ) -> None:
        super().__init__(kernel_type)
        self.talus_angle = talus_angle
        self.magnitude = magnitude

    def operation(self, heightmap: np.ndarray, center: Point, neighbours: Sequence[Point]) -> None:
        """Spread material from ``center`` to its sufficiently lower neighbours."""
        height = float(heightmap[center])
        lower = [
            (point, diff)
            for point in neighbours
            if (diff := height - float(heightmap[point])) > self.talus_angle
        ]
        if not lower:
            return
        diff_max = max(diff for _, diff in lower)
        diff_total = sum(diff for _, diff in lower)
        share = self.magnitude * (diff_max - self.talus_angle) / diff_total
        for point, diff in lower:
            move_material(heightmap, center, point, share * diff)

    def apply(self, heightmap: np.ndarray, iterations: int = 1) -> None:
        """Erode ``heightmap`` in place, visiting cells column by column."""
        if heightmap.ndim != 2:
            raise ValueError("heightmap must be two-dimensional")
        rows, cols = heightmap.shape
        for _ in range(iterations):
            for col, row in itertools.product(range(cols), range(rows)):
                center = (row, col)
                self.operation(heightmap, center, self.neighbours(center, rows, cols))