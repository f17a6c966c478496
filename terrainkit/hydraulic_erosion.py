"""Hydraulic erosion driven by rain, dissolution, flow and evaporation."""

from __future__ import annotations

import numpy as np

from terrainkit.kernel import Kernel, KernelType
from terrainkit.kernel import neighbours as kernel_neighbours
from terrainkit.utils import normalize


def _shifted(dr: int, dc: int, rows: int, cols: int) -> tuple[tuple[slice, slice], tuple[slice, slice]]:
    """Slices of centres and of their neighbours at offset (dr, dc)."""
    centres = (slice(max(0, -dr), rows - max(0, dr)), slice(max(0, -dc), cols - max(0, dc)))
    targets = (slice(max(0, dr), rows - max(0, -dr)), slice(max(0, dc), cols - max(0, -dc)))
    return centres, targets


class HydraulicErosion(Kernel):
    """Water-based erosion with persistent water and sediment maps."""

    def __init__(
        self,
        kernel_type: KernelType,
        rows: int,
        cols: int,
        k_rain: float = 0.01,
        k_solubility: float = 0.01,
        k_evaporation: float = 0.5,
        k_capacity: float = 0.01,
    ) -> None:
        super().__init__(kernel_type)
        if rows <= 0 or cols <= 0:
            raise ValueError("rows and cols must be positive")
        self.rows = int(rows)
        self.cols = int(cols)
        self.k_rain = k_rain
        self.k_solubility = k_solubility
        self.k_evaporation = k_evaporation
        self.k_capacity = k_capacity
        self.watermap = np.zeros((self.rows, self.cols), dtype=np.float32)
        self.sedimentmap = np.zeros((self.rows, self.cols), dtype=np.float32)
        self._offsets = [
            (r - 1, c - 1) for r, c in kernel_neighbours((1, 1), 3, 3, self.kernel_type)
        ]

    def _check(self, heightmap: np.ndarray) -> None:
        if heightmap.shape != (self.rows, self.cols):
            raise ValueError(
                f"heightmap shape {heightmap.shape} does not match ({self.rows}, {self.cols})"
            )

    def apply(self, heightmap: np.ndarray, iterations: int = 1) -> None:
        """Run full rain, erosion, transfer and evaporation cycles in place."""
        self._check(heightmap)
        for _ in range(iterations):
            self.rain()
            self.erode(heightmap)
            self.transfer(heightmap)
            self.evaporate(heightmap)

    def rain(self) -> None:
        """Add a uniform layer of water."""
        self.watermap += np.float32(self.k_rain)

    def erode(self, heightmap: np.ndarray) -> None:
        """Dissolve terrain into sediment in proportion to the water."""
        self._check(heightmap)
        dissolved = (self.k_solubility * self.watermap).astype(np.float32)
        heightmap -= dissolved
        self.sedimentmap += dissolved

    def transfer(self, heightmap: np.ndarray) -> None:
        """Let water and its sediment flow to lower neighbouring cells."""
        self._check(heightmap)
        rows, cols = self.rows, self.cols
        water = self.watermap.astype(np.float64)
        sediment = self.sedimentmap.astype(np.float64)
        altitude = heightmap.astype(np.float64) + water

        drop_total = np.zeros_like(altitude)
        lower_count = np.zeros_like(altitude)
        lower_altitude = np.zeros_like(altitude)
        drops = []
        for dr, dc in self._offsets:
            centres, targets = _shifted(dr, dc, rows, cols)
            diff = altitude[centres] - altitude[targets]
            lower = diff > 0
            drop = np.zeros_like(altitude)
            drop[centres] = np.where(lower, diff, 0.0)
            drop_total += drop
            lower_count[centres] += lower
            lower_altitude[centres] += np.where(lower, altitude[targets], 0.0)
            drops.append((centres, targets, drop))

        has_lower = lower_count > 0
        mean_lower = lower_altitude / np.where(has_lower, lower_count, 1.0)
        movable = np.minimum(water, altitude - mean_lower)
        scale = np.where(has_lower, movable / np.where(has_lower, drop_total, 1.0), 0.0)
        concentration = np.divide(
            sediment, water, out=np.zeros_like(sediment), where=water != 0
        )

        delta_water = np.zeros_like(altitude)
        delta_sediment = np.zeros_like(altitude)
        for centres, targets, drop in drops:
            flow = scale * drop
            carried = flow * concentration
            delta_water -= flow
            delta_water[targets] += flow[centres]
            delta_sediment -= carried
            delta_sediment[targets] += carried[centres]

        self.watermap += delta_water.astype(np.float32)
        self.sedimentmap += delta_sediment.astype(np.float32)

    def evaporate(self, heightmap: np.ndarray) -> None:
        """Evaporate water and deposit sediment beyond the carrying capacity."""
        self._check(heightmap)
        self.watermap *= np.float32(1.0 - self.k_evaporation)
        capacity = self.k_capacity * self.watermap
        deposit = np.maximum(0.0, self.sedimentmap - capacity).astype(np.float32)
        self.sedimentmap -= deposit
        heightmap += deposit

    def normalized_watermap(self) -> np.ndarray:
        """Return the water map scaled into [0, 1] for viewing."""
        return normalize(self.watermap)

    def normalized_sedimentmap(self) -> np.ndarray:
        """Return the sediment map scaled into [0, 1] for viewing."""
        return normalize(self.sedimentmap)