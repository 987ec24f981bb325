import pytest

from dlmasim.boundary import PeriodicBoundary
from dlmasim.constituents import Cluster, Particle
from dlmasim.lattice_box import OnLatticeBox


@pytest.fixture
def box():
    return OnLatticeBox(2, [4, 4], [PeriodicBoundary(), PeriodicBoundary()])


def make_particle(box, pid, pos, mass=1.0):
    p = Particle(pid, 2, box)
    p.pos = list(pos)
    p.mass = mass
    return p


def test_particle_starts_at_origin(box):
    p = Particle(3, 2, box)
    assert p.pos == [0, 0]
    assert p.id == 3
    assert p.size == 1


def test_particle_move_wraps_periodically(box):
    p = make_particle(box, 0, [3, 0])
    p.move([1, 0])
    assert p.pos == [0, 0]
    p.move([0, -1])
    assert p.pos == [0, 3]


def test_particle_add_and_remove_from_cell(box):
    p = make_particle(box, 5, [2, 1])
    p.add_to_cell()
    assert box.get_particle_id([2, 1]) == 5
    p.remove_from_cell()
    assert box.get_particle_id([2, 1]) == -1


def test_particle_neighbour_list_sees_adjacent(box):
    a = make_particle(box, 0, [1, 1])
    b = make_particle(box, 1, [1, 2])
    a.add_to_cell()
    b.add_to_cell()
    neighbours = a.neighbour_list()
    assert len(neighbours) == 4
    assert 1 in neighbours
    assert neighbours.count(-1) == 3


def test_particle_neighbour_list_agg_excludes_own(box):
    a = make_particle(box, 0, [1, 1])
    b = make_particle(box, 1, [1, 2])
    c = make_particle(box, 2, [1, 0])
    a.aggregate_id = 7
    b.aggregate_id = 8
    c.aggregate_id = 7
    for p in (a, b, c):
        p.add_agg_to_cell()
    assert a.neighbour_list_agg() == [8]
    b.remove_agg_from_cell()
    assert a.neighbour_list_agg() == []


def test_cluster_add_tags_elements(box):
    cluster = Cluster(4, 2, box)
    p = make_particle(box, 0, [0, 0])
    cluster.add(p)
    assert p.aggregate_id == 4
    assert cluster.size == 1
    assert len(cluster) == 1
    assert cluster.element_id(0) == 0
    assert cluster.element_aggregate_id(0) == 4


def test_cluster_mass_is_sum_of_elements(box):
    cluster = Cluster(0, 2, box)
    cluster.add(make_particle(box, 0, [0, 0], mass=2.5))
    cluster.add(make_particle(box, 1, [0, 1], mass=1.5))
    assert cluster.calculate_mass() == pytest.approx(4.0)
    assert cluster.mass == pytest.approx(4.0)


def test_cluster_move_moves_every_element(box):
    cluster = Cluster(0, 2, box)
    a = make_particle(box, 0, [0, 0])
    b = make_particle(box, 1, [3, 3])
    cluster.add(a)
    cluster.add(b)
    cluster.move([1, 0])
    assert [p.pos for p in cluster] == [[1, 0], [0, 3]]


def test_cluster_cell_registration(box):
    cluster = Cluster(0, 2, box)
    a = make_particle(box, 0, [0, 0])
    b = make_particle(box, 1, [0, 1])
    cluster.add(a)
    cluster.add(b)
    cluster.add_to_cell()
    assert box.get_particle_id([0, 0]) == 0
    assert box.get_particle_id([0, 1]) == 1
    assert 1 in cluster.neighbour_list(0)
    cluster.remove_from_cell()
    assert box.get_particle_id([0, 0]) == -1
    assert box.get_particle_id([0, 1]) == -1


def test_cluster_agg_cells_and_neighbours(box):
    first = Cluster(0, 2, box)
    second = Cluster(1, 2, box)
    first.add(make_particle(box, 0, [2, 2]))
    second.add(make_particle(box, 1, [2, 3]))
    first.add_agg_to_cell()
    second.add_agg_to_cell()
    assert first.neighbour_list_agg(0) == [1]
    second.remove_agg_from_cell()
    assert box.get_agg_id([2, 3]) == -1


def test_cluster_seed_status_propagates(box):
    cluster = Cluster(0, 2, box)
    for i in range(3):
        cluster.add(make_particle(box, i, [0, i]))
    cluster.set_current_seed_status(1)
    assert all(p.current_seed_status == 1 for p in cluster)