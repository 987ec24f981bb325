import pytest

from dlmasim.boundary import PeriodicBoundary
from dlmasim.constituents import Cluster, Particle
from dlmasim.factory import (
    create_boundary_conditions,
    create_constituent,
    create_simulation_box,
)
from dlmasim.lattice_box import OnLatticeBox
from dlmasim.offlattice_box import OffLatticeBox
from dlmasim.params import ConfigurationError


def boundaries(dim):
    return [PeriodicBoundary() for _ in range(dim)]


def test_create_particle():
    p = create_constituent(7, 3, "particle", None)
    assert isinstance(p, Particle)
    assert p.id == 7
    assert p.pos == [0, 0, 0]


def test_create_cluster():
    c = create_constituent(2, 2, "cluster", None)
    assert isinstance(c, Cluster)
    assert c.id == 2
    assert c.size == 0


def test_unknown_constituent_raises():
    with pytest.raises(ConfigurationError, match="unknown constituent"):
        create_constituent(0, 2, "molecule", None)


def test_create_on_lattice_box():
    box = create_simulation_box(1, 2, [6, 4], boundaries(2), 0.0)
    assert isinstance(box, OnLatticeBox)
    assert box.lengths == (6, 4)
    assert box.get_particle_id([5, 3]) == -1


def test_create_off_lattice_box():
    box = create_simulation_box(0, 2, [10.0, 10.0], boundaries(2), 0.0)
    assert isinstance(box, OffLatticeBox)
    assert box.lengths == (10.0, 10.0)
    assert box.periodicity(1) == 1


def test_unknown_lattice_raises():
    with pytest.raises(ConfigurationError, match="unknown simulation box"):
        create_simulation_box(2, 2, [4, 4], boundaries(2), 0.0)


def test_create_periodic_boundary():
    bc = create_boundary_conditions("periodic")
    assert bc.refill(-1, 5) == 4
    assert bc.refill(5, 5) == 0


def test_unknown_boundary_raises():
    with pytest.raises(ConfigurationError, match="unknown boundary condition"):
        create_boundary_conditions("reflecting")