"""Small numeric helpers shared by the terrain generators."""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np

_EPSILON = np.finfo(np.float64).eps


def average(values: Iterable[float]) -> float:
    """Return the arithmetic mean of ``values``; NaN when there are none."""
    items = list(values)
    if not items:
        return math.nan
    return math.fsum(items) / len(items)


def total(values: Iterable[float]) -> float:
    """Return the sum of ``values``."""
    return math.fsum(values)


def point_in_range(row: int, col: int, rows: int, cols: int) -> bool:
    """Tell whether (row, col) lies inside a grid of ``rows`` x ``cols``."""
    return 0 <= row < rows and 0 <= col < cols


def normalize(array) -> np.ndarray:
    """Scale an array linearly so that its minimum is 0 and its maximum is 1.

    A constant array maps to all zeros.  The result is a new float32 array.
    """
    data = np.asarray(array, dtype=np.float32)
    if data.size == 0:
        return data.copy()
    low = float(data.min())
    high = float(data.max())
    span = high - low
    if span <= _EPSILON:
        return np.zeros_like(data)
    return ((data - low) / span).astype(np.float32)