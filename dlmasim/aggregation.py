"""Detection of contacts that make aggregates stick together."""

from __future__ import annotations

from .lattice_box import EMPTY


class OnLatticeAggregationCheck:
    """Binds a cluster with any cluster on a nearest lattice site."""

    def __init__(self, system, binder, condition) -> None:
        self.system = system
        self.binder = binder
        self.condition = condition

    def check_for_aggregation(self, cluster) -> None:
        """Bind ``cluster`` with touching clusters until no contact sticks."""
        current = cluster
        while current is not None:
            current = self._bind_first_contact(current)

    def _bind_first_contact(self, cluster):
        for i, element in enumerate(cluster.elements):
            particle = self.system.particles[element.id]
            for neighbour_id in cluster.neighbour_list(i):
                if neighbour_id == EMPTY:
                    continue
                neighbour_cluster_id = self.system.cluster_of(neighbour_id)
                if neighbour_cluster_id == cluster.id:
                    continue
                neighbour = self.system.particles[neighbour_id]
                if self.condition.agg_condition(particle, neighbour):
                    other = self.system.get_aggregate(neighbour_cluster_id)
                    self.system.add_attachments_of(cluster)
                    return self.binder.bind_aggregates(cluster, other)
        return None


class OffLatticeAggregationCheck:
    """Binds a cluster with any cluster within contact distance."""

    def __init__(self, system, binder, condition, tolerance: float) -> None:
        self.system = system
        self.binder = binder
        self.condition = condition
        self.tolerance = tolerance

    def check_for_aggregation(self, cluster) -> None:
        """Bind ``cluster`` with touching clusters until no contact sticks."""
        current = cluster
        while current is not None:
            current = self._bind_first_contact(current)

    def _bind_first_contact(self, cluster):
        for i, element in enumerate(cluster.elements):
            particle = self.system.particles[element.id]
            for neighbour_id in cluster.neighbour_list(i):
                neighbour_cluster_id = self.system.cluster_of(neighbour_id)
                other = self.system.get_aggregate(neighbour_cluster_id)
                if other is None:
                    raise RuntimeError("NULL pointer encountered")
                if neighbour_cluster_id == cluster.id:
                    continue
                neighbour = self.system.particles[neighbour_id]
                distance = self.system.interparticle_distance(particle, neighbour)
                contact = (1.0 + self.tolerance) * 0.5 * (
                    particle.diameter + neighbour.diameter
                )
                if distance <= contact and self.condition.agg_condition(
                    particle, neighbour
                ):
                    return self.binder.bind_aggregates(cluster, other)
        return None