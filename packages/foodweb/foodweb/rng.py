"""SimulationRng - the single seeded random source of a session."""

from __future__ import annotations

import os
import random
from typing import Sequence, TypeVar

T = TypeVar("T")


class SimulationRng:
    """Deterministic random source.

    Every tie-break in the simulation goes through one instance, so the same
    seed plus the same call sequence reproduces the same run. The generator
    cursor advances on each draw; do not share an instance between sessions.
    """

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._random = random.Random(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def next_int(self, bound: int) -> int:
        """Return an integer in ``[0, bound)``."""
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        return self._random.randrange(bound)

    def next_float(self) -> float:
        return self._random.random()

    def pick_one(self, items: Sequence[T]) -> T | None:
        """Return one element chosen uniformly, or None for an empty input.

        An empty input consumes no generator state.
        """
        if not items:
            return None
        return items[self.next_int(len(items))]

    def shuffle(self, items: Sequence[T]) -> list[T]:
        """Return a shuffled copy of *items*."""
        result = list(items)
        self._random.shuffle(result)
        return result
