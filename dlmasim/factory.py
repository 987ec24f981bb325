"""Construction of constituents, boxes and boundary conditions by name."""

from __future__ import annotations

from collections.abc import Sequence

from .boundary import BoundaryCondition, PeriodicBoundary
from .constituents import Cluster, Particle
from .lattice_box import OnLatticeBox
from .offlattice_box import OffLatticeBox
from .params import ConfigurationError


def create_constituent(constituent_id: int, dim: int, kind: str, box):
    """Create a ``"particle"`` or a ``"cluster"`` with the given id."""
    if kind == "particle":
        return Particle(constituent_id, dim, box)
    if kind == "cluster":
        return Cluster(constituent_id, dim, box)
    raise ConfigurationError("unknown constituent")


def create_simulation_box(
    lattice: int,
    dim: int,
    lengths: Sequence,
    boundaries: Sequence[BoundaryCondition],
    tolerance: float,
):
    """Create a lattice box for ``lattice == 1``, a continuous one for 0."""
    if lattice == 1:
        return OnLatticeBox(dim, lengths, boundaries)
    if lattice == 0:
        return OffLatticeBox(dim, lengths, boundaries, tolerance)
    raise ConfigurationError("unknown simulation box")


def create_boundary_conditions(name: str) -> BoundaryCondition:
    """Create the boundary condition called ``name``."""
    if name == "periodic":
        return PeriodicBoundary()
    raise ConfigurationError("unknown boundary condition")