"""System parameters read from a ``key=value`` file and their validation."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from os import PathLike

from .boundary import BoundaryCondition
from .factory import create_boundary_conditions
from .params import ConfigurationError, read_key_values

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(key: str, text: str) -> int:
    """Parse the leading integer of ``text``, ignoring anything after it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ConfigurationError(f"invalid integer for {key}: {text!r}")
    return int(match.group(1))


def _parse_float(key: str, text: str) -> float:
    try:
        return float(text)
    except ValueError as exc:
        raise ConfigurationError(f"invalid number for {key}: {text!r}") from exc


def _length_type(lattice: int) -> type:
    """Lattice boxes have whole-number side lengths, continuous boxes real ones."""
    return int if lattice == 1 else float


@dataclass
class SystemParams:
    """Everything that describes a system before it is populated."""

    dim: int
    lattice: int
    system_type: str = "none"
    n_particles: int | None = None
    n_seeds: int | None = None
    seed_pct: float | None = None
    phi: float | None = None
    alpha: float = 0.5
    seed_mass: float = 0.0
    rng_seed: int = 0
    tolerance: float | None = None
    distance_metric_rgg: int = 0
    lengths: list = field(default_factory=list)
    boundaries: list[BoundaryCondition] = field(default_factory=list)

    def length_given(self, axis: int) -> bool:
        return axis < len(self.lengths) and self.lengths[axis] is not None


def _shape_factor(dim: int) -> float:
    if dim == 2:
        return math.sqrt(math.pi / 4.0)
    if dim == 3:
        return (math.pi / 6.0) ** (1.0 / 3.0)
    raise ConfigurationError("code works only for D=2,3")


def _sphere_volume_factor(dim: int) -> float:
    if dim == 2:
        return math.pi / 4.0
    if dim == 3:
        return math.pi / 6.0
    raise ConfigurationError("code works only for D=2,3")


def check_dlma_params(params: SystemParams) -> SystemParams:
    """Complete and validate the parameters of an aggregation run in place."""
    dim = params.dim
    given = [params.length_given(axis) for axis in range(dim)]
    all_lengths = all(given)
    any_length = any(given)
    n_given = params.n_particles is not None
    seeds_given = params.n_seeds is not None
    pct_given = params.seed_pct is not None
    phi_given = params.phi is not None

    if not all_lengths and n_given and phi_given:
        side = _length_type(params.lattice)(
            (params.n_particles / params.phi) ** (1.0 / dim)
        )
        lengths = [side] * dim
        if params.lattice == 1:
            if int(math.prod(lengths)) % 2 == 1:
                lengths = [length + 1 for length in lengths]
            params.phi = params.n_particles / math.prod(lengths)
        elif params.lattice == 0:
            factor = _shape_factor(dim)
            lengths = [length * factor for length in lengths]
        params.lengths = lengths

    if n_given and seeds_given and params.n_seeds > params.n_particles:
        raise ConfigurationError(
            "number of seeds is greater than number of particles"
        )
    if phi_given and params.phi > 1:
        raise ConfigurationError("phi should be <= 1")
    if pct_given and params.seed_pct > 100:
        raise ConfigurationError("seed_pct should be <= 100")
    if all_lengths != any_length:
        raise ConfigurationError("length in one direction is missing")
    if not seeds_given and not pct_given:
        raise ConfigurationError("please provide N_s or seed_pct")
    if not phi_given and not n_given:
        raise ConfigurationError("please provide N or phi")
    if not phi_given and not all_lengths:
        raise ConfigurationError("please provide L or phi")
    if not all_lengths and not n_given:
        raise ConfigurationError("please provide L or N")

    if seeds_given and pct_given and params.n_particles:
        if abs(100.0 / params.n_particles - params.seed_pct) > 1e-8:
            raise ConfigurationError("N_s does not match seed_pct")

    total = math.prod(params.lengths[:dim]) if all_lengths else 1

    if n_given and phi_given and all_lengths:
        if abs(params.n_particles / total - params.phi) > 1e-8:
            raise ConfigurationError("N, L and phi are not consistent")

    if not phi_given:
        if params.lattice == 1:
            params.phi = params.n_particles / total
        elif params.lattice == 0:
            params.phi = _sphere_volume_factor(dim) * params.n_particles / total
        else:
            raise ConfigurationError("lattice value is incorrect")

    if not n_given:
        if params.lattice == 1:
            params.n_particles = int(params.phi * total)
        elif params.lattice == 0:
            params.n_particles = int(params.phi * total / _sphere_volume_factor(dim))
        else:
            raise ConfigurationError("lattice value is incorrect")

    if not seeds_given:
        params.n_seeds = int(params.n_particles * params.seed_pct / 100)

    if params.tolerance is None:
        params.tolerance = 0.0
    return params


def check_percolation_params(params: SystemParams) -> SystemParams:
    """Validate the parameters of a site-percolation run in place."""
    if not all(params.length_given(axis) for axis in range(params.dim)):
        raise ConfigurationError("please provide length in each direction")
    if params.phi is None:
        raise ConfigurationError("please provide phi in each direction")
    params.seed_mass = 1.0
    return params


def read_system_params(path: str | PathLike[str]) -> SystemParams:
    """Read, complete and validate the system parameters stored at ``path``."""
    values = read_key_values(path)

    if "D" not in values:
        raise ConfigurationError("please provide number of dimensions")
    if "lattice" not in values:
        raise ConfigurationError("please provide lattice value")
    dim = _parse_int("D", values["D"])
    if dim < 1:
        raise ConfigurationError("number of dimensions must be positive")
    lattice = _parse_int("lattice", values["lattice"])

    params = SystemParams(dim=dim, lattice=lattice)
    int_keys = {"N": "n_particles", "N_s": "n_seeds", "rng_seed": "rng_seed",
                "distance_metric_rgg": "distance_metric_rgg"}
    float_keys = {"seed_pct": "seed_pct", "phi": "phi", "alpha": "alpha",
                  "seedMass": "seed_mass", "agg_dist_tolerance": "tolerance"}
    for key, attribute in int_keys.items():
        if key in values:
            setattr(params, attribute, _parse_int(key, values[key]))
    for key, attribute in float_keys.items():
        if key in values:
            setattr(params, attribute, _parse_float(key, values[key]))
    if "system" in values:
        params.system_type = values["system"]

    cast = _length_type(lattice)
    boundaries = []
    lengths = []
    for axis in range(dim):
        bc_name = values.get(f"x{axis}_bc")
        boundaries.append(
            None if bc_name is None else create_boundary_conditions(bc_name)
        )
        length = values.get(f"x{axis}_L")
        lengths.append(
            None if length is None else cast(_parse_float(f"x{axis}_L", length))
        )
    if any(bc is None for bc in boundaries):
        raise ConfigurationError(
            "please provide boundary conditions in each direction"
        )
    params.boundaries = boundaries
    params.lengths = lengths

    if params.system_type == "dlma":
        check_dlma_params(params)
    elif params.system_type == "random_site_percolation":
        check_percolation_params(params)
    elif params.system_type != "erdos_renyi":
        raise ConfigurationError(f"{params.system_type} is an unknown system type")

    if params.tolerance is None:
        params.tolerance = 0.0
    return params