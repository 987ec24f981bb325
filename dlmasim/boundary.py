"""Boundary conditions that fold coordinates back into a box."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BoundaryCondition(ABC):
    """A rule mapping a coordinate back into ``[0, length)``."""

    @abstractmethod
    def refill(self, x, length):
        """Return ``x`` folded back into the box of the given length."""


class PeriodicBoundary(BoundaryCondition):
    """Periodic wrap for coordinates at most one box length outside."""

    def refill(self, x, length):
        if x < 0:
            return x + length
        if x >= length:
            return x - length
        return x