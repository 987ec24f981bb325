"""Merging of two aggregates into a new one."""

from __future__ import annotations

from .factory import create_constituent


class NormalBind:
    """Replaces two clusters with a single new cluster holding both."""

    def __init__(self, system) -> None:
        self.system = system

    def bind_aggregates(self, c1, c2):
        """Merge ``c1`` and ``c2`` and update the system's bookkeeping."""
        system = self.system
        merged = create_constituent(
            system.next_cluster_id(), system.dim, "cluster", system.box
        )
        for element in [*c1.elements, *c2.elements]:
            merged.add(element)
        merged.calculate_mass()
        merged.set_current_seed_status(1)

        system.remove_aggregate(c1.id)
        system.remove_aggregate(c2.id)
        system.add_aggregate(merged)
        system.build_id_map()
        system.build_idx_map_for_agg()
        system.calculate_propensity()
        return merged