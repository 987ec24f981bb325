"""State shared by all aggregation systems: particles, clusters and contacts."""

from __future__ import annotations

import math
import random
from bisect import bisect_right
from os import PathLike

from .factory import create_constituent, create_simulation_box
from .lattice_box import EMPTY
from .params import ConfigurationError
from .settings import SystemParams, read_system_params


class DlmaSystem:
    """Particles grouped into aggregates that diffuse and stick in a box."""

    def __init__(self, params: SystemParams) -> None:
        self.params = params
        self.system_type = params.system_type
        self.dim = params.dim
        self.lattice = params.lattice
        self.n_particles = params.n_particles
        self.n_seeds = params.n_seeds
        self.phi = params.phi
        self.alpha = params.alpha
        self.seed_mass = params.seed_mass
        self.rng_seed = params.rng_seed
        self.tolerance = 0.0 if params.tolerance is None else params.tolerance
        self.distance_metric_rgg = params.distance_metric_rgg

        lengths = list(params.lengths[: self.dim])
        if len(lengths) < self.dim or any(length is None for length in lengths):
            raise ConfigurationError("please provide length in each direction")
        self.lengths = lengths
        self.half_lengths = [0.5 * length for length in lengths]
        self.box = create_simulation_box(
            self.lattice, self.dim, lengths, params.boundaries, self.tolerance
        )
        self.rng = random.Random(self.rng_seed)

        self.particles: list = []
        self.aggregates: list = []
        self.id_map: dict[int, int] = {}
        self.agg_id_map: dict[int, int] = {}
        self.attachments: list[list[int]] = (
            [[] for _ in range(self.n_particles)]
            if self.system_type == "dlma"
            else []
        )
        self.propensity: list[float] = []
        self.total_propensity = 0.0
        self.latest_cluster_id = 0

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> "DlmaSystem":
        """Build a system from the parameter file at ``path``."""
        return cls(read_system_params(path))

    def initialize_system(self) -> None:
        """Give every particle its own cluster and build the lookup tables."""
        for particle in self.particles:
            cluster = create_constituent(
                self.next_cluster_id(), self.dim, "cluster", self.box
            )
            cluster.add(particle)
            cluster.calculate_mass()
            self.aggregates.append(cluster)
        self.build_id_map()
        self.calculate_propensity()
        self.build_idx_map_for_agg()

    def calculate_propensity(self) -> None:
        """Cumulative move rates, each aggregate weighted by ``mass ** -alpha``."""
        self.propensity = []
        total = 0.0
        for aggregate in self.aggregates:
            total += aggregate.mass ** (-self.alpha)
            self.propensity.append(total)
        self.total_propensity = total

    def choose_aggregate(self) -> int:
        """Index of an aggregate drawn with probability proportional to its rate."""
        if not self.propensity:
            raise IndexError("no aggregates to choose from")
        draw = self.rng.random() * self.total_propensity
        return min(bisect_right(self.propensity, draw), len(self.propensity) - 1)

    def add_aggregate(self, aggregate) -> None:
        self.aggregates.append(aggregate)

    def remove_aggregate(self, cluster_id: int) -> None:
        self.aggregates = [a for a in self.aggregates if a.id != cluster_id]

    def get_aggregate(self, cluster_id: int):
        """The aggregate with id ``cluster_id``, or None if there is none."""
        index = self.agg_id_map.get(cluster_id)
        return None if index is None else self.aggregates[index]

    def build_id_map(self) -> None:
        """Map every particle id to the id of the cluster holding it."""
        for particle in self.particles:
            self.id_map[particle.id] = particle.aggregate_id

    def build_idx_map_for_agg(self) -> None:
        """Map every cluster id to its position in the aggregate list."""
        self.agg_id_map = {
            aggregate.id: index for index, aggregate in enumerate(self.aggregates)
        }

    def next_cluster_id(self) -> int:
        """Hand out a fresh cluster id."""
        cluster_id = self.latest_cluster_id
        self.latest_cluster_id += 1
        return cluster_id

    def cluster_of(self, particle_id: int) -> int:
        return self.id_map[particle_id]

    def max_attachments(self) -> int:
        return max((len(row) for row in self.attachments), default=0)

    def total_aggregates(self) -> int:
        return len(self.aggregates)

    def add_attachments_of(self, cluster) -> None:
        """Record every occupied neighbour site of ``cluster`` as a contact."""
        for i, element in enumerate(cluster.elements):
            particle_id = element.id
            for neighbour_id in cluster.neighbour_list(i):
                if neighbour_id == EMPTY:
                    continue
                if neighbour_id not in self.attachments[particle_id]:
                    self.attachments[particle_id].append(neighbour_id)
                    self.attachments[neighbour_id].append(particle_id)

    def add_attachment(self, i: int, j: int) -> None:
        """Record a contact between particles ``i`` and ``j``."""
        self.attachments[i].append(j)
        self.attachments[j].append(i)

    def attachment_vector(self, i: int) -> list[int]:
        return list(self.attachments[i])

    def interparticle_distance(self, p1, p2) -> float:
        """Minimum-image Euclidean distance between two particles."""
        return math.sqrt(
            sum(
                self.box.periodic_distance(a, b, axis) ** 2
                for axis, (a, b) in enumerate(zip(p1.pos, p2.pos))
            )
        )

    def manhattan_distance(self, p1, p2) -> float:
        """Minimum-image taxicab distance between two particles."""
        return sum(
            abs(self.box.periodic_distance(a, b, axis))
            for axis, (a, b) in enumerate(zip(p1.pos, p2.pos))
        )

    def move_aggregate(self, index: int, dr) -> None:
        """Displace the aggregate at ``index`` by ``dr`` and update the cells."""
        aggregate = self.aggregates[index]
        aggregate.remove_from_cell()
        aggregate.move(dr)
        aggregate.add_to_cell()

    def build_attachment_list(self) -> list[list[int]]:
        """Return the contact lists; here they are complete once clusters bind."""
        return self.attachments

    def print_id_map(self) -> None:
        for particle_id, cluster_id in sorted(self.id_map.items()):
            print(f"{particle_id}: {cluster_id}")

    def print_attachments(self) -> None:
        print(f"attachments size = {len(self.attachments)}")
        for i, row in enumerate(self.attachments):
            print("".join(f"{value}\t" for value in [i, *row]))