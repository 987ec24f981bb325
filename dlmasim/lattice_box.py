"""A periodic lattice box holding at most one particle per site."""

from __future__ import annotations

from collections.abc import Sequence
from math import prod

from .boundary import BoundaryCondition

EMPTY = -1


class OnLatticeBox:
    """Square lattice with one occupancy grid for particles and one for aggregates."""

    def __init__(
        self,
        dim: int,
        lengths: Sequence[int],
        boundaries: Sequence[BoundaryCondition],
    ) -> None:
        self.dim = dim
        self.lengths = tuple(lengths[:dim])
        self.boundaries = list(boundaries[:dim])
        self._strides = [prod(self.lengths[axis + 1:]) for axis in range(dim)]
        total = prod(self.lengths)
        self._grid = [EMPTY] * total
        self._agg_grid = [EMPTY] * total
        self._periodic = [1] * dim

    def _index(self, pos) -> int:
        return sum(int(p) * stride for p, stride in zip(pos, self._strides))

    def _neighbour_sites(self, pos):
        for axis in range(self.dim):
            for step in (-1, 1):
                site = []
                for axis_2, (p, length) in enumerate(zip(pos, self.lengths)):
                    q = p + (step if axis_2 == axis else 0)
                    if q == -1:
                        q += length
                    elif q == length:
                        q -= length
                    site.append(q)
                yield site

    def refill(self, x, axis: int):
        """Fold coordinate ``x`` back into the box along ``axis``."""
        return self.boundaries[axis].refill(x, self.lengths[axis])

    def add_particle_to_cell(self, particle_id: int, pos) -> None:
        self._grid[self._index(pos)] = particle_id

    def remove_particle_from_cell(self, particle_id: int, pos) -> None:
        self._grid[self._index(pos)] = EMPTY

    def get_particle_id(self, pos) -> int:
        """Id of the particle at ``pos``, or -1 if the site is empty."""
        return self._grid[self._index(pos)]

    def add_agg_to_cell(self, agg_id: int, pos) -> None:
        self._agg_grid[self._index(pos)] = agg_id

    def remove_agg_from_cell(self, agg_id: int, pos) -> None:
        self._agg_grid[self._index(pos)] = EMPTY

    def get_agg_id(self, pos) -> int:
        """Id of the aggregate at ``pos``, or -1 if none is recorded."""
        return self._agg_grid[self._index(pos)]

    def neighbour_list(self, pos) -> list[int]:
        """Particle ids on the 2*dim nearest sites, -1 for empty sites."""
        return [self.get_particle_id(site) for site in self._neighbour_sites(pos)]

    def neighbour_list_for_agg(self, agg_id: int, pos) -> list[int]:
        """Aggregate ids on the nearest sites, excluding empty sites and ``agg_id``."""
        found = (self.get_agg_id(site) for site in self._neighbour_sites(pos))
        return [a for a in found if a not in (EMPTY, agg_id)]

    def periodicity(self, axis: int) -> int:
        return self._periodic[axis]

    def clear_cell_field(self) -> None:
        """Empty the particle grid."""
        self._grid = [EMPTY] * len(self._grid)