"""Aggregation of hard spheres diffusing in a continuous periodic box."""

from __future__ import annotations

import random

from .collisions import Collision, collision_window, overlap_fraction
from .factory import create_constituent
from .params import ConfigurationError
from .settings import SystemParams
from .system import DlmaSystem

_ATTACH_SLACK = 1e-4


class OffLatticeSystem(DlmaSystem):
    """Unit-diameter particles that move continuously and may not overlap."""

    supported_types: tuple[str, ...] = ("dlma",)

    def __init__(self, params: SystemParams) -> None:
        super().__init__(params)
        self.image = None
        self.available_sites: list[int] = []
        self.site_spacing: list[float] = []
        self._sites_per_axis = 0
        if self.system_type not in self.supported_types:
            raise ConfigurationError("please check system type")
        self.initialize_system()

    def _build_site_vector(self) -> None:
        per_axis = int(self.lengths[0] / (1.0 + self.tolerance))
        if per_axis % 2 == 1:
            per_axis -= 1
        if per_axis <= 0:
            raise ConfigurationError("phi,N,L is not appropriate for initialization")
        self._sites_per_axis = per_axis
        self.site_spacing = [length / per_axis for length in self.lengths]
        self.available_sites = list(range(per_axis ** self.dim))
        if self.n_particles > len(self.available_sites):
            raise ConfigurationError("phi,N,L is not appropriate for initialization")
        random.Random(self.rng_seed).shuffle(self.available_sites)

    def _site_coords(self, index: int) -> list[int]:
        n = self._sites_per_axis
        return [(index // n ** axis) % n for axis in range(self.dim)]

    def initialize_system(self) -> None:
        """Put particles on distinct, randomly chosen sites of a regular grid."""
        self._build_site_vector()
        self.particles = []
        for i in range(self.n_particles):
            particle = create_constituent(i, self.dim, "particle", self.box)
            particle.diameter = 1.0
            if i < self.n_seeds:
                particle.mass = self.seed_mass
                particle.original_seed_status = 1
                particle.current_seed_status = 1
            else:
                particle.mass = 1.0
                particle.original_seed_status = 0
                particle.current_seed_status = 0
            coords = self._site_coords(self.available_sites[i])
            particle.pos = [c * s + 0.5 * s for c, s in zip(coords, self.site_spacing)]
            particle.add_to_cell()
            self.particles.append(particle)

        super().initialize_system()
        self.image = create_constituent(
            self.n_particles, self.dim, "particle", self.box
        )

    def move_aggregate(self, index: int, dr) -> None:
        """Move the aggregate at ``index`` along ``dr`` as far as contacts allow."""
        scale = self.fix_overlap(index, dr)
        super().move_aggregate(index, [scale * d for d in dr])

    def fix_overlap(self, index: int, dr) -> float:
        """Fraction of ``dr`` the aggregate at ``index`` may travel."""
        hard_sphere = self.build_collision_list(index, 0.0, dr)
        bonds = self.build_collision_list(index, self.tolerance, dr)
        return overlap_fraction(hard_sphere, bonds, self.rng)

    def build_collision_list(self, index: int, alpha: float, dr) -> list[Collision]:
        """Collision windows of the aggregate's particles with other clusters.

        Neighbours are looked up both around each particle and around where
        it would land after the full step.
        """
        cluster = self.aggregates[index]
        image = self.image
        collisions: list[Collision] = []
        for ref in cluster.elements:
            image.pos = list(ref.pos)
            image.move(dr)
            neighbours = ref.neighbour_list() + image.neighbour_list()
            for neighbour_id in neighbours:
                if self.cluster_of(neighbour_id) == cluster.id:
                    continue
                neighbour = self.particles[neighbour_id]
                collisions.append(collision_window(ref, neighbour, dr, alpha, self.box))
        return collisions

    def add_attachment(self, i: int, j: int) -> None:
        """Record a contact between particles ``i`` and ``j``."""
        self.attachments[i].append(j)
        self.attachments[j].append(i)

    def build_attachment_list(self) -> list[list[int]]:
        """Record every pair of particles within contact distance, once each."""
        for particle_id, particle in enumerate(self.particles):
            for neighbour_id in particle.neighbour_list():
                if neighbour_id == particle_id:
                    continue
                neighbour = self.particles[neighbour_id]
                distance = self.interparticle_distance(particle, neighbour)
                contact = (1.0 + self.tolerance) * 0.5 * (
                    particle.diameter + neighbour.diameter
                )
                if distance - _ATTACH_SLACK < contact:
                    if neighbour_id not in self.attachments[particle_id]:
                        self.attachments[particle_id].append(neighbour_id)
                        self.attachments[neighbour_id].append(particle_id)
        return self.attachments