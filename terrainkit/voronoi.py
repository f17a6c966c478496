"""Voronoi-style heightmaps built from distances to nearest feature points."""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable, Sequence

import numpy as np
from scipy.spatial import KDTree

from terrainkit.rng import make_generator

Point = tuple[int, int]


class Voronoi:
    """Heightmap whose value at a pixel is a weighted sum of squared distances.

    Points are stored as (x, y) pairs, x being the column and y the row.
    Distances are measured in coordinates normalised to [0, 1) on each axis.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        coeffs: Iterable[float],
        points: int | Iterable[Sequence[int]],
        seed: int | None = -1,
        regularize: bool = True,
    ) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError("rows and cols must be positive")
        self.rows = int(rows)
        self.cols = int(cols)
        self.coeffs = [float(c) for c in coeffs]
        self.seed = seed
        if isinstance(points, numbers.Integral):
            self.points = self._generate_points(int(points), seed, regularize)
        else:
            self.points = [(int(x), int(y)) for x, y in points]
        self.multipliers = np.ones(len(self.points), dtype=np.float32)
        self.heatmap: np.ndarray | None = None

    def _generate_points(self, n_points: int, seed: int | None, regularize: bool) -> list[Point]:
        if n_points < 0:
            raise ValueError("number of points must not be negative")
        rows, cols = self.rows, self.cols
        cells = rows * cols
        rng = make_generator(seed)

        if not regularize:
            indices = rng.integers(0, cells, size=n_points)
            return [(int(i % cols), int(i // cols)) for i in indices]

        occupied = np.zeros((rows, cols), dtype=bool)
        n_x = int(math.sqrt(n_points * cols // rows))
        radius = int(0.8 * cols / (n_x + 1))
        ys, xs = np.ogrid[:rows, :cols]
        points: list[Point] = []
        for _ in range(n_points):
            if occupied.all():
                raise ValueError(
                    f"no room left for {n_points} regularised points in a {rows}x{cols} grid"
                )
            while True:
                index = int(rng.integers(0, cells))
                x, y = index % cols, index // cols
                if not occupied[y, x]:
                    break
            points.append((x, y))
            occupied |= (xs - x) ** 2 + (ys - y) ** 2 <= radius**2
        return points

    def draw_points(self, image: np.ndarray) -> None:
        """Set the pixel of every feature point in a float32 image to 1."""
        if image.dtype != np.float32 or image.ndim != 2:
            raise TypeError("image must be a 2-D float32 array")
        for x, y in self.points:
            image[y, x] = 1.0

    def generate(self, normalize: bool = True) -> np.ndarray:
        """Compute the heightmap, scaled into [0, 1] when ``normalize`` is set."""
        knn = len(self.coeffs)
        if knn == 0:
            raise ValueError("at least one coefficient is required")
        if knn > len(self.points):
            raise ValueError(
                f"{knn} coefficients need at least as many points, got {len(self.points)}"
            )
        rows, cols = self.rows, self.cols
        features = np.array([(x / cols, y / rows) for x, y in self.points], dtype=np.float64)
        tree = KDTree(features)

        ys, xs = np.mgrid[:rows, :cols]
        queries = np.column_stack((xs.ravel() / cols, ys.ravel() / rows))
        distances, indices = tree.query(queries, k=list(range(1, knn + 1)))

        partial = np.cumsum(np.asarray(self.coeffs) * distances**2, axis=1)
        max_value = max(0.0, float(partial.max()))
        min_value = float(partial.min())

        heat = (partial[:, -1] * self.multipliers[indices[:, 0]]).reshape(rows, cols)
        if normalize:
            span = max_value - min_value
            heat = (heat - min_value) / span if span > 0 else np.zeros_like(heat)
        self.heatmap = heat.astype(np.float32)
        return self.heatmap

    def binary_mask(self, keep: float, seed: int | None = -1) -> None:
        """Zero the multipliers of a uniformly chosen ``1 - keep`` share of regions."""
        if keep >= 1:
            return
        rng = make_generator(seed)
        order = rng.permutation(len(self.points))
        dropped = math.ceil((1.0 - keep) * len(order))
        self.multipliers[order[:dropped]] = 0.0

    def shift_height_mask(self, mean: float, stdev: float, seed: int | None = -1) -> None:
        """Scale each live region by a normal draw clipped to [0, 1]."""
        rng = make_generator(seed)
        draws = np.clip(rng.normal(mean, stdev, len(self.multipliers)), 0.0, 1.0)
        live = self.multipliers > 0
        self.multipliers[live] *= draws[live].astype(np.float32)

    def set_weights(self, weights: Iterable[float]) -> None:
        """Replace the per-region multipliers."""
        values = np.asarray(list(weights), dtype=np.float32)
        if values.shape != (len(self.points),):
            raise ValueError(f"expected {len(self.points)} weights, got {values.size}")
        self.multipliers = values