"""Drawing the integers ``0 .. n-1`` at random without replacement."""

from __future__ import annotations

import random


class Sampler:
    """Hands out each integer in ``range(n)`` once, in random order."""

    def __init__(self, n: int, rng: random.Random | None = None) -> None:
        if n < 0:
            raise ValueError(f"size must be non-negative, got {n}")
        self._elements = list(range(n))
        self._rng = rng if rng is not None else random.Random()

    def __len__(self) -> int:
        return len(self._elements)

    def sample(self) -> int:
        """Remove and return one remaining element chosen uniformly."""
        if not self._elements:
            raise IndexError("no more elements to sample")
        index = self._rng.randrange(len(self._elements))
        last = self._elements.pop()
        if index == len(self._elements):
            return last
        selected = self._elements[index]
        self._elements[index] = last
        return selected