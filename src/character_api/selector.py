"""Uniform random selection over in-memory sequences."""

from __future__ import annotations

import threading
import time
from typing import List, Optional, Sequence, TypeVar

import numpy as np

from character_api.models import Sex

T = TypeVar("T")

SEXES = (Sex.MALE, Sex.FEMALE)


class RandomSelector:
    """Thread-safe uniform picker backed by a numpy ``Generator``.

    Seeded from the clock unless a seed is given, so every process run
    draws a different sequence. numpy generators are not safe for
    concurrent use, so each draw holds ``_lock``.
    """

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = time.time_ns()
        self._rng = np.random.default_rng(seed)
        self._lock = threading.Lock()

    def pick(self, sequence: Sequence[T]) -> T:
        """Return a uniformly random element of a non-empty sequence."""
        size = len(sequence)
        if size == 0:
            raise ValueError("Cannot pick from an empty sequence.")
        with self._lock:
            index = int(self._rng.integers(size))
        return sequence[index]

    def pick_n(self, sequence: Sequence[T], n: int) -> List[T]:
        """Draw ``n`` independent picks from ``sequence``.

        Not used by the request path; exists for bulk statistical checks
        of the distribution.
        """
        size = len(sequence)
        if size == 0:
            raise ValueError("Cannot pick from an empty sequence.")
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}.")
        with self._lock:
            indices = self._rng.integers(size, size=n)
        return [sequence[int(i)] for i in indices]

    def pick_sex(self) -> Sex:
        return self.pick(SEXES)
