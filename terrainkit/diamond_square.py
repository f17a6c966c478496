"""Diamond-square fractal heightmap generation."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from terrainkit.rng import make_generator
from terrainkit.utils import normalize


def _check_size(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise TypeError("side length must be an integer")
    if n < 3 or (n - 1) & (n - 2):
        raise ValueError(f"side length must be 2**x + 1 with x >= 1, got {n}")


class DiamondSquare:
    """Generates square heightmaps with the diamond-square algorithm."""

    def generate(
        self,
        n: int,
        corners: Sequence[float] | None = None,
        decay: float = 0.5,
        seed: int | None = -1,
        normalized: bool = True,
    ) -> np.ndarray:
        """Return an ``n`` x ``n`` float32 heightmap.

        ``n`` must be 2**x + 1.  ``corners`` gives the initial heights of the
        top-left, top-right, bottom-left and bottom-right corners; when omitted
        they are drawn uniformly from [-1, 1).  ``decay`` scales the random
        offset after every level, so larger values give rougher terrain.  A
        positive ``seed`` makes the result reproducible.  With ``normalized``
        the heights are scaled into [0, 1].
        """
        _check_size(n)
        rng = make_generator(seed)
        if corners is None:
            corner_values = [float(v) for v in rng.uniform(-1.0, 1.0, 4)]
        else:
            corner_values = [float(v) for v in corners]
            if len(corner_values) != 4:
                raise ValueError("exactly four corner values are required")

        heightmap = np.zeros((n, n), dtype=np.float32)
        last = n - 1
        (
            heightmap[0, 0],
            heightmap[0, last],
            heightmap[last, 0],
            heightmap[last, last],
        ) = corner_values

        weight = 1.0
        k = n
        while k > 2:
            self._diamond(heightmap, k, weight, rng)
            self._square(heightmap, k, weight, rng)
            weight *= decay
            k = (k + 1) // 2

        return normalize(heightmap) if normalized else heightmap

    @staticmethod
    def _diamond(heightmap: np.ndarray, k: int, weight: float, rng: np.random.Generator) -> None:
        n = heightmap.shape[0]
        half, stride = k // 2, k - 1
        centres = np.arange(half, n, stride)
        rows, cols = np.meshgrid(centres, centres, indexing="ij")
        mean = (
            heightmap[rows - half, cols - half]
            + heightmap[rows + half, cols - half]
            + heightmap[rows - half, cols + half]
            + heightmap[rows + half, cols + half]
        ) / 4
        heightmap[rows, cols] = mean + weight * rng.uniform(-1.0, 1.0, rows.shape)

    @classmethod
    def _square(cls, heightmap: np.ndarray, k: int, weight: float, rng: np.random.Generator) -> None:
        n = heightmap.shape[0]
        half, stride = k // 2, k - 1
        odd = np.arange(half, n, stride)
        even = np.arange(0, n, stride)
        cls._square_pass(heightmap, odd, even, half, weight, rng)
        cls._square_pass(heightmap, even, odd, half, weight, rng)

    @staticmethod
    def _square_pass(
        heightmap: np.ndarray,
        row_idx: np.ndarray,
        col_idx: np.ndarray,
        half: int,
        weight: float,
        rng: np.random.Generator,
    ) -> None:
        n = heightmap.shape[0]
        rows, cols = np.meshgrid(row_idx, col_idx, indexing="ij")
        sums = np.zeros(rows.shape, dtype=np.float64)
        counts = np.zeros(rows.shape, dtype=np.int64)
        for dr, dc in ((0, -half), (0, half), (-half, 0), (half, 0)):
            nr, nc = rows + dr, cols + dc
            valid = (nr >= 0) & (nr < n) & (nc >= 0) & (nc < n)
            sums[valid] += heightmap[nr[valid], nc[valid]]
            counts += valid
        offsets = weight * rng.uniform(-1.0, 1.0, rows.shape)
        heightmap[rows, cols] = sums / counts + offsets