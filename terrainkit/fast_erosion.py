"""Fast erosion: each cell sheds half its drop to its lowest neighbour."""

from __future__ import annotations

import itertools
from collections.abc import Sequence

import numpy as np

from terrainkit.kernel import Kernel, KernelType, Point, move_material


class FastErosion(Kernel):
    """Moves half the largest height drop to the steepest lower neighbour."""

    def __init__(
        self,
        kernel_type: KernelType = KernelType.VON_NEUMANN2,
        talus_angle: float = 0.0078,
    ) -> None:
        super().__init__(kernel_type)
        self.talus_angle = talus_angle

    def operation(self, heightmap: np.ndarray, center: Point, neighbours: Sequence[Point]) -> None:
        """Move material from ``center`` to its lowest neighbour if steep enough."""
        height = float(heightmap[center])
        diff_max = 0.0
        lowest: Point | None = None
        for point in neighbours:
            diff = height - float(heightmap[point])
            if diff > diff_max:
                diff_max, lowest = diff, point
        if lowest is not None and diff_max >= self.talus_angle:
            move_material(heightmap, center, lowest, diff_max / 2)

    def apply(self, heightmap: np.ndarray, iterations: int = 1) -> None:
        """Erode ``heightmap`` in place, visiting cells column by column."""
        if heightmap.ndim != 2:
            raise ValueError("heightmap must be two-dimensional")
        rows, cols = heightmap.shape
        for _ in range(iterations):
            for col, row in itertools.product(range(cols), range(rows)):
                center = (row, col)
                self.operation(heightmap, center, self.neighbours(center, rows, cols))