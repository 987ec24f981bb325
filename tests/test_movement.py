import math

import pytest

from dlmasim.movement import LatticeBrownianMovement, OffLatticeBrownianMovement


@pytest.mark.parametrize("dim", [1, 2, 3])
def test_lattice_step_moves_one_axis_by_one(dim):
    mover = LatticeBrownianMovement(dim, 11)
    for _ in range(50):
        step = mover.delta_x()
        assert len(step) == dim
        assert sorted(abs(c) for c in step) == [0] * (dim - 1) + [1]


def test_lattice_steps_cover_both_signs():
    mover = LatticeBrownianMovement(2, 3)
    totals = {sum(mover.delta_x()) for _ in range(200)}
    assert totals == {-1, 1}


def test_lattice_stream_is_reproducible():
    a = LatticeBrownianMovement(3, 42)
    b = LatticeBrownianMovement(3, 42)
    assert [a.delta_x() for _ in range(20)] == [b.delta_x() for _ in range(20)]


@pytest.mark.parametrize("dim", [2, 3])
def test_offlattice_step_has_unit_length(dim):
    mover = OffLatticeBrownianMovement(dim, 5)
    for _ in range(50):
        step = mover.delta_x()
        assert len(step) == dim
        assert math.sqrt(sum(c * c for c in step)) == pytest.approx(1.0)


def test_offlattice_stream_is_reproducible():
    a = OffLatticeBrownianMovement(2, 9)
    b = OffLatticeBrownianMovement(2, 9)
    assert [a.delta_x() for _ in range(10)] == [b.delta_x() for _ in range(10)]


def test_random_values_in_unit_interval():
    mover = OffLatticeBrownianMovement(2, 1)
    values = [mover.random() for _ in range(100)]
    assert all(0.0 <= v < 1.0 for v in values)