"""Particles and the clusters they form."""

from __future__ import annotations

from collections.abc import Iterator


class Particle:
    """A single particle with a position in a simulation box."""

    def __init__(self, particle_id: int, dim: int, box) -> None:
        self.id = particle_id
        self.dim = dim
        self.box = box
        self.pos: list = [0] * dim
        self.mass = 0.0
        self.diameter = 0.0
        self.aggregate_id = -1
        self.original_seed_status = 0
        self.current_seed_status = 0

    @property
    def size(self) -> int:
        """A particle always counts as one element."""
        return 1

    def move(self, delta) -> None:
        """Displace by ``delta``, folding each coordinate back into the box."""
        self.pos = [
            self.box.refill(p + d, axis)
            for axis, (p, d) in enumerate(zip(self.pos, delta))
        ]

    def add_to_cell(self) -> None:
        self.box.add_particle_to_cell(self.id, self.pos)

    def remove_from_cell(self) -> None:
        self.box.remove_particle_from_cell(self.id, self.pos)

    def add_agg_to_cell(self) -> None:
        self.box.add_agg_to_cell(self.aggregate_id, self.pos)

    def remove_agg_from_cell(self) -> None:
        self.box.remove_agg_from_cell(self.aggregate_id, self.pos)

    def neighbour_list(self) -> list[int]:
        """Particle ids the box reports around this particle."""
        return self.box.neighbour_list(self.pos)

    def neighbour_list_agg(self) -> list[int]:
        """Aggregate ids around this particle other than its own."""
        return self.box.neighbour_list_for_agg(self.aggregate_id, self.pos)


class Cluster:
    """An aggregate of particles that moves as one body."""

    def __init__(self, cluster_id: int, dim: int, box) -> None:
        self.id = cluster_id
        self.dim = dim
        self.box = box
        self.elements: list[Particle] = []
        self.mass = 0.0
        self.aggregate_id = -1

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self.elements)

    @property
    def size(self) -> int:
        return len(self.elements)

    def add(self, element: Particle) -> None:
        """Take ``element`` into this cluster and tag it with the cluster id."""
        self.elements.append(element)
        element.aggregate_id = self.id

    def move(self, delta) -> None:
        for element in self.elements:
            element.move(delta)

    def add_to_cell(self) -> None:
        for element in self.elements:
            element.add_to_cell()

    def remove_from_cell(self) -> None:
        for element in self.elements:
            element.remove_from_cell()

    def add_agg_to_cell(self) -> None:
        for element in self.elements:
            element.add_agg_to_cell()

    def remove_agg_from_cell(self) -> None:
        for element in self.elements:
            element.remove_agg_from_cell()

    def calculate_mass(self) -> float:
        """Recompute the total mass from the elements and return it."""
        self.mass = sum(element.mass for element in self.elements)
        return self.mass

    def neighbour_list(self, i: int) -> list[int]:
        return self.elements[i].neighbour_list()

    def neighbour_list_agg(self, i: int) -> list[int]:
        return self.elements[i].neighbour_list_agg()

    def element_id(self, i: int) -> int:
        return self.elements[i].id

    def element_aggregate_id(self, i: int) -> int:
        return self.elements[i].aggregate_id

    def set_current_seed_status(self, seed: int) -> None:
        for element in self.elements:
            element.current_seed_status = seed