"""Rules deciding whether two touching particles stick together."""

from __future__ import annotations


class MassAggregationCondition:
    """Stick when the two aggregates together reach the seed mass."""

    def __init__(self, system) -> None:
        self.system = system

    def agg_condition(self, p1, p2) -> bool:
        cluster_1 = self.system.get_aggregate(self.system.cluster_of(p1.id))
        cluster_2 = self.system.get_aggregate(self.system.cluster_of(p2.id))
        return cluster_1.mass + cluster_2.mass >= self.system.seed_mass