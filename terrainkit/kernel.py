"""Neighbourhood kernels over a 2-D grid."""

from __future__ import annotations

import abc
import enum

import numpy as np

from terrainkit.utils import point_in_range

Point = tuple[int, int]


class KernelType(enum.Enum):
    """Shape of the neighbourhood around a cell."""

    MOORE = "moore"
    VON_NEUMANN = "von_neumann"
    VON_NEUMANN2 = "von_neumann2"


_OFFSETS: dict[KernelType, tuple[Point, ...]] = {
    KernelType.MOORE: (
        (-1, -1), (-1, 0), (-1, 1),
        (0, -1), (0, 1),
        (1, -1), (1, 0), (1, 1),
    ),
    KernelType.VON_NEUMANN: ((-1, 0), (0, -1), (0, 1), (1, 0)),
    KernelType.VON_NEUMANN2: ((-1, -1), (-1, 1), (1, -1), (1, 1)),
}


def neighbours(point: Point, rows: int, cols: int, kernel_type: KernelType) -> list[Point]:
    """Return the in-grid neighbours of ``point`` given as (row, col)."""
    row, col = point
    return [
        (row + dr, col + dc)
        for dr, dc in _OFFSETS[KernelType(kernel_type)]
        if point_in_range(row + dr, col + dc, rows, cols)
    ]


def move_material(heightmap: np.ndarray, source: Point, target: Point, amount: float) -> None:
    """Move ``amount`` of height from ``source`` to ``target`` in place."""
    heightmap[source] -= amount
    heightmap[target] += amount


class Kernel(abc.ABC):
    """Base class for operations that visit each cell's neighbourhood."""

    def __init__(self, kernel_type: KernelType = KernelType.MOORE) -> None:
        self.kernel_type = KernelType(kernel_type)

    def neighbours(self, point: Point, rows: int, cols: int) -> list[Point]:
        """Return the in-grid neighbours of ``point`` for this kernel's shape."""
        return neighbours(point, rows, cols, self.kernel_type)

    @abc.abstractmethod
    def apply(self, heightmap: np.ndarray, iterations: int = 1) -> None:
        """Modify ``heightmap`` in place over ``iterations`` passes."""