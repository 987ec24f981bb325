"""Aggregation and site-percolation systems on a periodic square lattice."""

from __future__ import annotations

import random
from math import prod

from .constituents import Particle
from .factory import create_constituent
from .lattice_box import EMPTY
from .params import ConfigurationError
from .settings import SystemParams
from .system import DlmaSystem


class OnLatticeSystem(DlmaSystem):
    """Particles on lattice sites, one per site, moving by unit lattice steps."""

    def __init__(self, params: SystemParams) -> None:
        super().__init__(params)
        sides = [int(length) for length in self.lengths]
        self._strides = [prod(sides[axis + 1:]) for axis in range(self.dim)]
        self.total_sites = prod(sides)
        self.available_sites: list[int] = []

        if self.system_type == "dlma":
            self._build_site_vector()
            self.initialize_system()
        elif self.system_type == "random_site_percolation":
            self._build_site_vector_for_rsp()
            self._initialize_system_for_percolation()
        else:
            raise ConfigurationError("system not defined")

    def _build_site_vector(self) -> None:
        self.available_sites = list(range(self.total_sites))
        self.box.clear_cell_field()

    def _build_site_vector_for_rsp(self) -> None:
        self.available_sites = list(range(self.total_sites))
        random.Random(self.rng_seed).shuffle(self.available_sites)

    def _new_particle(self, particle_id: int, mass: float, seed: int) -> Particle:
        particle = create_constituent(particle_id, self.dim, "particle", self.box)
        particle.diameter = 1.0
        particle.mass = mass
        particle.original_seed_status = seed
        particle.current_seed_status = seed
        return particle

    def initialize_system(self) -> None:
        """Place every particle on a random free site and give each its own cluster."""
        if self.n_particles > len(self.available_sites):
            raise ConfigurationError("phi,N,L is not appropriate for initialization")

        self.particles = []
        for i in range(self.n_particles):
            if i < self.n_seeds:
                particle = self._new_particle(i, self.seed_mass, 1)
            else:
                particle = self._new_particle(i, 1.0, 0)
            self.particles.append(particle)

        for particle in self.particles:
            choice = int(len(self.available_sites) * self.rng.random())
            site = self.available_sites.pop(choice)
            particle.pos = self.index_to_coords(site)
            particle.add_to_cell()

        super().initialize_system()

    def _initialize_system_for_percolation(self) -> None:
        self.n_particles = int(self.total_sites * self.phi)
        if self.n_particles > len(self.available_sites):
            raise ConfigurationError("phi,N,L is not appropriate for initialization")

        self.particles = []
        for i in range(self.n_particles):
            particle = self._new_particle(i, self.seed_mass, 1)
            particle.pos = self.index_to_coords(self.available_sites[i])
            particle.add_to_cell()
            self.particles.append(particle)

        for particle in self.particles:
            cluster = create_constituent(
                self.next_cluster_id(), self.dim, "cluster", self.box
            )
            cluster.add(particle)
            cluster.calculate_mass()
            self.aggregates.append(cluster)

        self.attachments = [[] for _ in range(self.n_particles)]
        self.build_id_map()
        self.build_idx_map_for_agg()
        for aggregate in self.aggregates:
            self.add_attachments_of(aggregate)

    def index_to_coords(self, index: int) -> list[int]:
        """Lattice coordinates of the site with the given linear index."""
        coords = []
        for stride in self._strides:
            coords.append(index // stride)
            index %= stride
        return coords

    def coords_to_index(self, coords) -> int:
        """Linear index of the site at the given lattice coordinates."""
        return sum(int(c) * stride for c, stride in zip(coords, self._strides))

    def check_viability(self, cluster, dr) -> bool:
        """True unless moving ``cluster`` by ``dr`` lands on another cluster's particle."""
        viable = True
        for element in cluster.elements:
            target = [
                self.box.refill(p + d, axis)
                for axis, (p, d) in enumerate(zip(element.pos, dr))
            ]
            neighbour_id = self.box.get_particle_id(target)
            if neighbour_id != EMPTY and self.cluster_of(neighbour_id) != cluster.id:
                viable = False
        return viable

    def move_aggregate(self, index: int, dr) -> None:
        """Move the aggregate at ``index`` by ``dr`` if the target sites are free."""
        if self.check_viability(self.aggregates[index], dr):
            super().move_aggregate(index, dr)

    def print_grid(self) -> None:
        """Print the particle id on each site of the first two axes, -1 if empty."""
        rows, cols = int(self.lengths[0]), int(self.lengths[1])
        rest = [0] * (self.dim - 2)
        for i in range(rows):
            line = "".join(
                f"{self.box.get_particle_id([i, j, *rest])}\t" for j in range(cols)
            )
            print(line + "\n")