import math

import pytest

from dlmasim.boundary import PeriodicBoundary
from dlmasim.params import ConfigurationError
from dlmasim.settings import (
    SystemParams,
    check_dlma_params,
    check_percolation_params,
    read_system_params,
)


def _write(tmp_path, lines):
    path = tmp_path / "params.txt"
    path.write_text("\n".join(lines) + "\n")
    return path


BCS_2D = ["x0_bc=periodic", "x1_bc=periodic"]


def test_lattice_lengths_from_n_and_phi(tmp_path):
    path = _write(tmp_path, ["system=dlma", "D=2", "lattice=1", "N=100",
                             "phi=0.25", "N_s=5", *BCS_2D])
    params = read_system_params(path)
    assert params.lengths[0] == params.lengths[1]
    assert all(isinstance(length, int) for length in params.lengths)
    assert params.phi == pytest.approx(100 / math.prod(params.lengths))
    assert params.n_particles == 100


def test_odd_lattice_volume_is_enlarged(tmp_path):
    path = _write(tmp_path, ["system=dlma", "D=2", "lattice=1", "N=9",
                             "phi=1.0", "N_s=1", *BCS_2D])
    params = read_system_params(path)
    assert math.prod(params.lengths) % 2 == 0
    assert params.phi == pytest.approx(9 / math.prod(params.lengths))
    assert params.phi < 1.0


def test_offlattice_lengths_keep_area_fraction(tmp_path):
    path = _write(tmp_path, ["system=dlma", "D=2", "lattice=0", "N=50",
                             "phi=0.2", "N_s=2", *BCS_2D])
    params = read_system_params(path)
    assert params.phi == 0.2
    assert params.lengths[0] == pytest.approx(params.lengths[1])
    area_fraction = math.pi * 50 / (4 * math.prod(params.lengths))
    assert area_fraction == pytest.approx(0.2)


def test_offlattice_four_dimensions_rejected(tmp_path):
    bcs = [f"x{axis}_bc=periodic" for axis in range(4)]
    path = _write(tmp_path, ["system=dlma", "D=4", "lattice=0", "N=50",
                             "phi=0.2", "N_s=2", *bcs])
    with pytest.raises(ConfigurationError, match="D=2,3"):
        read_system_params(path)


def test_phi_computed_from_n_and_lengths(tmp_path):
    path = _write(tmp_path, ["system=dlma", "D=2", "lattice=1", "N=4",
                             "N_s=1", "x0_L=4", "x1_L=4", *BCS_2D])
    params = read_system_params(path)
    assert params.lengths == [4, 4]
    assert params.phi == pytest.approx(4 / 16)


def test_n_computed_from_phi_and_lengths(tmp_path):
    path = _write(tmp_path, ["system=dlma", "D=2", "lattice=1", "phi=0.5",
                             "seed_pct=25", "x0_L=4", "x1_L=4", *BCS_2D])
    params = read_system_params(path)
    assert params.n_particles == 8
    assert params.n_seeds == int(params.n_particles * 25 / 100)


def test_defaults_and_tolerance(tmp_path):
    path = _write(tmp_path, ["system=dlma", "D=2", "lattice=1", "N=4",
                             "N_s=1", "x0_L=4", "x1_L=4", *BCS_2D])
    params = read_system_params(path)
    assert params.alpha == 0.5
    assert params.tolerance == 0.0
    assert params.rng_seed == 0
    path = _write(tmp_path, ["system=dlma", "D=2", "lattice=1", "N=4",
                             "N_s=1", "x0_L=4", "x1_L=4",
                             "agg_dist_tolerance=0.1", "alpha=1.5", *BCS_2D])
    params = read_system_params(path)
    assert params.tolerance == 0.1
    assert params.alpha == 1.5


def test_integer_values_read_leading_digits(tmp_path):
    path = _write(tmp_path, ["system=dlma", "D=2", "lattice=1", "N=4",
                             "N_s=1", "rng_seed=42xyz", "x0_L=4", "x1_L=4",
                             *BCS_2D])
    assert read_system_params(path).rng_seed == 42


def test_invalid_integer(tmp_path):
    path = _write(tmp_path, ["D=abc", "lattice=1"])
    with pytest.raises(ConfigurationError):
        read_system_params(path)


def test_boundaries_are_built(tmp_path):
    path = _write(tmp_path, ["system=dlma", "D=2", "lattice=1", "N=4",
                             "N_s=1", "x0_L=4", "x1_L=4", *BCS_2D])
    params = read_system_params(path)
    assert len(params.boundaries) == 2
    assert all(isinstance(bc, PeriodicBoundary) for bc in params.boundaries)


@pytest.mark.parametrize(
    "lines, message",
    [
        (["lattice=1", *BCS_2D], "number of dimensions"),
        (["D=2", *BCS_2D], "lattice value"),
        (["D=2", "lattice=1", "x0_bc=periodic"], "boundary conditions"),
        (["D=2", "lattice=1", "x0_bc=periodic", "x1_bc=wall"],
         "unknown boundary condition"),
        (["D=2", "lattice=1", "system=foo", *BCS_2D],
         "foo is an unknown system type"),
        (["system=dlma", "D=2", "lattice=1", "N=4", "N_s=5", "x0_L=4",
          "x1_L=4", *BCS_2D], "greater than number of particles"),
        (["system=dlma", "D=2", "lattice=1", "phi=1.5", "N_s=1", "x0_L=4",
          "x1_L=4", *BCS_2D], "phi should be <= 1"),
        (["system=dlma", "D=2", "lattice=1", "N=4", "seed_pct=150",
          "x0_L=4", "x1_L=4", *BCS_2D], "seed_pct should be <= 100"),
        (["system=dlma", "D=2", "lattice=1", "N=4", "phi=0.25", "N_s=1",
          "x0_L=4", *BCS_2D], "length in one direction is missing"),
        (["system=dlma", "D=2", "lattice=1", "N=4", "x0_L=4", "x1_L=4",
          *BCS_2D], "N_s or seed_pct"),
        (["system=dlma", "D=2", "lattice=1", "N_s=1", "x0_L=4", "x1_L=4",
          *BCS_2D], "N or phi"),
        (["system=dlma", "D=2", "lattice=1", "N=4", "N_s=1", *BCS_2D],
         "L or phi"),
        (["system=dlma", "D=2", "lattice=1", "phi=0.5", "N_s=1", *BCS_2D],
         "L or N"),
        (["system=dlma", "D=2", "lattice=1", "N=100", "N_s=5",
          "seed_pct=50", "x0_L=20", "x1_L=20", *BCS_2D],
         "N_s does not match seed_pct"),
        (["system=dlma", "D=2", "lattice=1", "N=10", "phi=0.5", "N_s=1",
          "x0_L=4", "x1_L=4", *BCS_2D], "not consistent"),
    ],
)
def test_configuration_errors(tmp_path, lines, message):
    with pytest.raises(ConfigurationError, match=message):
        read_system_params(_write(tmp_path, lines))


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        read_system_params(tmp_path / "absent.txt")


def test_percolation_sets_seed_mass(tmp_path):
    path = _write(tmp_path, ["system=random_site_percolation", "D=2",
                             "lattice=1", "phi=0.5", "x0_L=4", "x1_L=4",
                             "seedMass=7", *BCS_2D])
    params = read_system_params(path)
    assert params.seed_mass == 1.0
    assert params.n_particles is None


def test_percolation_requires_lengths_and_phi():
    params = SystemParams(dim=2, lattice=1, phi=0.5, lengths=[4, None])
    with pytest.raises(ConfigurationError, match="length in each direction"):
        check_percolation_params(params)
    params = SystemParams(dim=2, lattice=1, lengths=[4, 4])
    with pytest.raises(ConfigurationError, match="phi"):
        check_percolation_params(params)


def test_check_dlma_params_completes_in_place():
    params = SystemParams(dim=2, lattice=1, system_type="dlma",
                          n_particles=10, seed_pct=20.0, lengths=[5, 4])
    result = check_dlma_params(params)
    assert result is params
    assert params.phi == pytest.approx(10 / 20)
    assert params.n_seeds == int(10 * 20.0 / 100)
    assert params.tolerance == 0.0


def test_erdos_renyi_skips_checks(tmp_path):
    path = _write(tmp_path, ["system=erdos_renyi", "D=2", "lattice=0",
                             "N=10", "phi=0.3", "x0_L=1", "x1_L=1", *BCS_2D])
    params = read_system_params(path)
    assert params.system_type == "erdos_renyi"
    assert params.n_seeds is None
    assert params.lengths == [1.0, 1.0]