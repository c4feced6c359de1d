"""
Shared deterministic random source.

Every probabilistic decision in a run (initial population, gender, age,
breeding rolls, litter sizes, neighbour order) draws from one Randomizer
instance, so the same seed and the same parameters replay the same run.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

import numpy as np

from predprey_savanna.config import SEED

T = TypeVar("T")


class Randomizer:
    def __init__(self, seed: int | None = SEED):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def reset(self) -> None:
        """Restart the stream from the construction seed."""
        self._rng = np.random.default_rng(self.seed)

    def next_int(self, n: int) -> int:
        """Uniform int in [0, n)."""
        return int(self._rng.integers(n))

    def next_double(self) -> float:
        """Uniform float in [0, 1)."""
        return float(self._rng.random())

    def choice(self, seq: Sequence[T]) -> T:
        return seq[self.next_int(len(seq))]
