"""A continuous periodic box with a cell list for neighbour search."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import product
from math import prod

from .boundary import BoundaryCondition


class OffLatticeBox:
    """Continuous box split into cells roughly one contact distance wide."""

    def __init__(
        self,
        dim: int,
        lengths: Sequence[float],
        boundaries: Sequence[BoundaryCondition],
        tolerance: float,
    ) -> None:
        self.dim = dim
        self.lengths = tuple(lengths[:dim])
        self.half_lengths = tuple(0.5 * length for length in self.lengths)
        self.boundaries = list(boundaries[:dim])
        self.num_grid = [int(length / (1.0 + tolerance)) for length in self.lengths]
        self._inv_delta = [
            1.0 / (length / n) for length, n in zip(self.lengths, self.num_grid)
        ]
        self._strides = [prod(self.num_grid[axis + 1:]) for axis in range(dim)]
        self._grid: list[list[int]] = [[] for _ in range(prod(self.num_grid))]
        self._periodic = [1] * dim

    def _cell_coords(self, pos) -> list[int]:
        return [int(p * inv) for p, inv in zip(pos, self._inv_delta)]

    def _cell_index(self, coords) -> int:
        return sum(c * stride for c, stride in zip(coords, self._strides))

    def refill(self, x, axis: int):
        """Fold coordinate ``x`` back into the box along ``axis``."""
        return self.boundaries[axis].refill(x, self.lengths[axis])

    def add_particle_to_cell(self, particle_id: int, pos) -> None:
        self._grid[self._cell_index(self._cell_coords(pos))].append(particle_id)

    def remove_particle_from_cell(self, particle_id: int, pos) -> None:
        index = self._cell_index(self._cell_coords(pos))
        self._grid[index] = [i for i in self._grid[index] if i != particle_id]

    def neighbour_list(self, pos) -> list[int]:
        """Ids in the cell of ``pos`` and its surrounding cells (2-D and 3-D only)."""
        if self.dim not in (2, 3):
            return []
        centre = self._cell_coords(pos)
        neighbours: list[int] = []
        for offsets in product((-1, 0, 1), repeat=self.dim):
            coords = []
            for axis, (c, off) in enumerate(zip(centre, offsets)):
                n = c + off
                grid = self.num_grid[axis]
                if n == -1:
                    n += self._periodic[axis] * grid
                elif n == grid:
                    n -= self._periodic[axis] * grid
                coords.append(n)
            neighbours.extend(self._grid[self._cell_index(coords)])
        return neighbours

    def periodicity(self, axis: int) -> int:
        return self._periodic[axis]

    def periodic_distance(self, x, y, axis: int):
        """Minimum-image separation ``x - y`` along ``axis``."""
        r = x - y
        length = self.lengths[axis]
        half = self.half_lengths[axis]
        if r < -half:
            r += self._periodic[axis] * length
        elif r > half:
            r -= self._periodic[axis] * length
        return r