"""Construction of the components of a run by name."""

from __future__ import annotations

from os import PathLike

from .aggregation import OffLatticeAggregationCheck, OnLatticeAggregationCheck
from .bind import NormalBind
from .conditions import MassAggregationCondition
from .erdos_renyi import ErdosRenyiSystem
from .movement import LatticeBrownianMovement, OffLatticeBrownianMovement
from .offlattice_system import OffLatticeSystem
from .onlattice_system import OnLatticeSystem
from .params import ConfigurationError
from .save_config import ConfigWriter
from .settings import read_system_params

_SAVE_CONFIG_TYPES = ("dlma", "random_site_percolation", "erdos_renyi")


def create_movement(name: str, dim: int, rng_seed: int, lattice: int):
    """Create the random step generator called ``name`` for the given lattice."""
    if name == "brownian" and lattice == 1:
        return LatticeBrownianMovement(dim, rng_seed)
    if name == "brownian" and lattice == 0:
        return OffLatticeBrownianMovement(dim, rng_seed)
    raise ConfigurationError("unknown movement type")


def create_aggregation_condition(name: str, system):
    """Create the sticking rule called ``name``."""
    if name == "mass":
        return MassAggregationCondition(system)
    raise ConfigurationError("unknown aggregate condition")


def create_check_aggregation(
    name: str, lattice: int, system, binder, condition, tolerance: float
):
    """Create the contact detector called ``name`` for the given lattice."""
    if name == "normal" and lattice == 1:
        return OnLatticeAggregationCheck(system, binder, condition)
    if name == "normal" and lattice == 0:
        return OffLatticeAggregationCheck(system, binder, condition, tolerance)
    raise ConfigurationError("unknown aggregation type")


def create_save_config(name: str, system, box):
    """Create the configuration writer for systems of type ``name``."""
    if name in _SAVE_CONFIG_TYPES:
        return ConfigWriter(system, box)
    raise ConfigurationError("unknown system type")


def create_bind_system(name: str, system):
    """Create the cluster merger called ``name``."""
    if name == "normal":
        return NormalBind(system)
    raise ConfigurationError("unknown bind type")


def create_new_system(name: str, lattice: int, filename: str | PathLike[str]):
    """Create and populate the system of type ``name`` from a parameter file."""
    if name == "dlma" and lattice == 1:
        return OnLatticeSystem(read_system_params(filename))
    if name == "dlma" and lattice == 0:
        return OffLatticeSystem(read_system_params(filename))
    if name == "erdos_renyi":
        return ErdosRenyiSystem(read_system_params(filename))
    if name == "random_site_percolation" and lattice == 1:
        return OnLatticeSystem(read_system_params(filename))
    raise ConfigurationError("unknown system type")