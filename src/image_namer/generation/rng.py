"""Seeded pseudo-random sequence used for word selection.

A linear congruential recurrence, reproducible for a given seed. It is not
cryptographically strong and must not be used for anything security related.
"""

from __future__ import annotations

import math
import random
import time
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

_MULTIPLIER = 9301
_INCREMENT = 49297
_MODULUS = 233280


class SeededRNG:
    """Reproducible stream of fractions in [0, 1).

    Two generators built from the same seed yield the same sequence.
    """

    def __init__(self, seed: float | None = None):
        # Mix wall clock with a random component so parallel sessions diverge
        self._seed = seed or time.time() * 1000 + random.random() * 1_000_000

    @property
    def seed(self) -> float:
        return self._seed

    def next(self) -> float:
        self._seed = (self._seed * _MULTIPLIER + _INCREMENT) % _MODULUS
        return self._seed / _MODULUS

    def next_int(self, bound: int) -> int:
        return math.floor(self.next() * bound)

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            raise IndexError("Cannot choose from an empty sequence")
        return items[self.next_int(len(items))]
