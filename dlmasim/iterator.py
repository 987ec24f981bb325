"""Driving a system through its diffusion and aggregation steps."""

from __future__ import annotations

from os import PathLike

from .factories import (
    create_aggregation_condition,
    create_bind_system,
    create_check_aggregation,
    create_movement,
    create_new_system,
    create_save_config,
)
from .run_config import read_run_config

_MOVIE_FREQUENCY = 25


class DlmaIterator:
    """Assembles a run from a parameter file and advances it step by step."""

    def __init__(self, filename: str | PathLike[str]) -> None:
        config = read_run_config(filename)
        self.config = config
        self.final_aggregate_number = config.final_aggregate_number

        self.system = create_new_system(config.system, config.lattice, filename)
        self.binder = create_bind_system(config.bind, self.system)
        self.condition = create_aggregation_condition(
            config.aggregation_condition, self.system
        )
        self.checker = create_check_aggregation(
            config.aggregation_type,
            config.lattice,
            self.system,
            self.binder,
            self.condition,
            config.tolerance,
        )
        self.movement = create_movement(
            config.movement, self.system.dim, config.rng_seed, config.lattice
        )
        self.writer = create_save_config(config.system, self.system, self.system.box)

        if config.system == "dlma":
            self._bind_initial_contacts()

    def _bind_initial_contacts(self) -> None:
        cluster_id = 0
        while cluster_id < self.system.latest_cluster_id:
            aggregate = self.system.get_aggregate(cluster_id)
            if aggregate is not None:
                self.checker.check_for_aggregation(aggregate)
            cluster_id += 1

    def iteration_step(self) -> None:
        """Move one aggregate chosen by its rate and bind whatever it touches."""
        index = self.system.choose_aggregate()
        aggregate = self.system.aggregates[index]
        self.system.move_aggregate(index, self.movement.delta_x())
        self.checker.check_for_aggregation(aggregate)

    def run_system(self) -> None:
        """Step until no more than the target number of aggregates remain."""
        while self.system.total_aggregates() > self.final_aggregate_number:
            self.iteration_step()
        self.system.build_attachment_list()

    def save_config_file(self, filename: str | PathLike[str] | None = None) -> None:
        """Write the configuration to ``filename``, or print it when none is given."""
        if filename is None:
            self.writer.show()
        else:
            self.writer.save(filename)

    def create_movie_files(self, prefix: str | PathLike[str]) -> list[str]:
        """Run to a single aggregate, saving a numbered frame every few steps.

        Frames are named ``<prefix><n>.csv``; the final state is saved as one
        more frame.  Returns the names written, in order.
        """
        written: list[str] = []
        step = 0
        index = -1
        while self.system.total_aggregates() != 1:
            self.iteration_step()
            if step % _MOVIE_FREQUENCY == 0:
                index = step // _MOVIE_FREQUENCY
                written.append(self._save_frame(prefix, index))
            step += 1
        written.append(self._save_frame(prefix, index + 1))
        return written

    def _save_frame(self, prefix, index: int) -> str:
        name = f"{prefix}{index}.csv"
        self.writer.save(name)
        return name

    def run_system_for_percolation(self) -> None:
        """Percolation needs no dynamics, only the final contact lists."""
        self.system.build_attachment_list()

    def run_system_for_erdos_renyi(self) -> None:
        """Random geometric graphs are complete once they are built."""
        return None