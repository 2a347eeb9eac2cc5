"""Seedable random number source."""

from __future__ import annotations

import random


class Random:
    """Uniform random integers and floats from a Mersenne Twister."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def int_range(self, start: int, end: int) -> int:
        """Integer uniformly drawn from ``start`` to ``end`` inclusive."""
        if start > end:
            raise ValueError(f"empty range: {start} > {end}")
        return self._rng.randint(start, end)

    def int_value(self) -> int:
        """Either 0 or 1."""
        return self.int_range(0, 1)

    def float_range(self, start: float, end: float) -> float:
        """Float uniformly drawn from ``[start, end)``."""
        if start > end:
            raise ValueError(f"empty range: {start} > {end}")
        value = start + (end - start) * self._rng.random()
        return value if value < end or start == end else start

    def float_value(self) -> float:
        """Float uniformly drawn from ``[0, 1)``."""
        return self.float_range(0.0, 1.0)