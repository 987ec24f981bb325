"""Random unit displacements for diffusing aggregates."""

from __future__ import annotations

import math
import random


class LatticeBrownianMovement:
    """Unit step of +1 or -1 along one randomly chosen lattice axis."""

    def __init__(self, dim: int, rng_seed: int) -> None:
        self.dim = dim
        self._rng = random.Random(rng_seed)

    def delta_x(self) -> list[int]:
        sign = 1 if self._rng.random() > 0.5 else -1
        chosen = int(self._rng.random() * self.dim)
        return [sign if axis == chosen else 0 for axis in range(self.dim)]

    def random(self) -> float:
        """A uniform number in ``[0, 1)`` from the same stream."""
        return self._rng.random()


class OffLatticeBrownianMovement:
    """Unit-length step in a random direction of continuous space."""

    def __init__(self, dim: int, rng_seed: int) -> None:
        self.dim = dim
        self._rng = random.Random(rng_seed)

    def delta_x(self) -> list[float]:
        step = [-1.0 + 2.0 * self._rng.random() for _ in range(self.dim)]
        norm = math.sqrt(sum(c * c for c in step))
        return [c / norm for c in step]

    def random(self) -> float:
        """A uniform number in ``[0, 1)`` from the same stream."""
        return self._rng.random()