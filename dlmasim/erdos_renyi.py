"""Random geometric graphs of points scattered in a continuous periodic box."""

from __future__ import annotations

from itertools import combinations

from .factory import create_constituent
from .offlattice_system import OffLatticeSystem
from .params import ConfigurationError
from .settings import SystemParams


class ErdosRenyiSystem(OffLatticeSystem):
    """Uniformly scattered points joined whenever they lie closer than ``phi``.

    ``distance_metric_rgg == 1`` measures Euclidean distance; any other value
    measures taxicab distance.  Both use the minimum-image convention.
    """

    supported_types: tuple[str, ...] = ("erdos_renyi",)

    def __init__(self, params: SystemParams) -> None:
        if params.lattice != 0:
            raise ConfigurationError(
                "random geometric graphs need a continuous box (lattice=0)"
            )
        super().__init__(params)

    def initialize_system(self) -> None:
        """Scatter the points and connect every pair closer than ``phi``."""
        if self.n_particles is None:
            raise ConfigurationError("please provide N")
        if self.phi is None:
            raise ConfigurationError("please provide phi")

        self.particles = []
        for i in range(self.n_particles):
            particle = create_constituent(i, self.dim, "particle", self.box)
            particle.diameter = 1.0
            particle.mass = 1.0
            particle.original_seed_status = 1
            particle.current_seed_status = 1
            # A radius and an angle are drawn and discarded, keeping the
            # random stream aligned with the placement scheme.
            self.rng.random()
            self.rng.random()
            particle.pos = [length * self.rng.random() for length in self.lengths]
            self.particles.append(particle)

        self.attachments = [[] for _ in range(self.n_particles)]
        distance = (
            self.interparticle_distance
            if self.distance_metric_rgg == 1
            else self.manhattan_distance
        )
        for i, j in combinations(range(self.n_particles), 2):
            if distance(self.particles[i], self.particles[j]) < self.phi:
                self.add_attachment(i, j)