"""Seeded random number helpers."""

from __future__ import annotations

import enum
from collections.abc import MutableSequence

import numpy as np


def make_generator(seed: int | None = -1) -> np.random.Generator:
    """Return a generator seeded with ``seed`` when it is positive.

    Any other seed (zero, negative or None) gives a generator seeded from
    operating-system entropy.
    """
    if seed is not None and seed > 0:
        return np.random.default_rng(seed)
    return np.random.default_rng()


class _Distribution(enum.Enum):
    UNIFORM_INT = enum.auto()
    UNIFORM_REAL = enum.auto()
    NORMAL = enum.auto()


class Random:
    """A random source drawing from one chosen distribution at a time."""

    def __init__(self, seed: int | None = -1) -> None:
        self._generator = make_generator(seed)
        self._distribution: _Distribution | None = None
        self._params: tuple[float, float] = (0.0, 0.0)

    def seed(self, seed: int | None) -> None:
        """Reseed; a non-positive seed draws one from system entropy."""
        self._generator = make_generator(seed)

    def set_uniform_int(self, low: int, high: int) -> None:
        """Draw integers uniformly from ``low`` to ``high`` inclusive."""
        if low > high:
            raise ValueError(f"empty integer range [{low}, {high}]")
        self._distribution = _Distribution.UNIFORM_INT
        self._params = (int(low), int(high))

    def set_uniform_real(self, low: float, high: float) -> None:
        """Draw floats uniformly from ``low`` up to ``high``."""
        if low > high:
            raise ValueError(f"empty real range [{low}, {high})")
        self._distribution = _Distribution.UNIFORM_REAL
        self._params = (float(low), float(high))

    def set_normal(self, mean: float, stdev: float) -> None:
        """Draw floats from a normal distribution."""
        if stdev <= 0:
            raise ValueError("standard deviation must be positive")
        self._distribution = _Distribution.NORMAL
        self._params = (float(mean), float(stdev))

    def next(self) -> int | float:
        """Draw one value from the current distribution."""
        first, second = self._params
        if self._distribution is _Distribution.UNIFORM_INT:
            return int(self._generator.integers(first, second, endpoint=True))
        if self._distribution is _Distribution.UNIFORM_REAL:
            return float(self._generator.uniform(first, second))
        if self._distribution is _Distribution.NORMAL:
            return float(self._generator.normal(first, second))
        raise ValueError("no distribution has been chosen")

    def randf(self) -> float:
        """Draw one value as a float."""
        return float(self.next())

    def randi(self) -> int:
        """Draw one value as an int."""
        return int(self.next())

    def shuffle(self, items: MutableSequence) -> None:
        """Shuffle ``items`` in place uniformly."""
        order = self._generator.permutation(len(items))
        items[:] = [items[i] for i in order]