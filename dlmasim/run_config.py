"""Choices of simulation components read from a run's parameter file."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike

from .params import ConfigurationError, read_key_values

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(key: str, text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ConfigurationError(f"invalid integer for {key}: {text!r}")
    return int(match.group(1))


def _parse_float(key: str, text: str) -> float:
    try:
        return float(text)
    except ValueError as exc:
        raise ConfigurationError(f"invalid number for {key}: {text!r}") from exc


@dataclass(frozen=True)
class RunConfig:
    """Names of the components a run is assembled from, with their defaults."""

    bind: str = "normal"
    aggregation_condition: str = "mass"
    aggregation_type: str = "normal"
    movement: str = "brownian"
    system: str = "dlma"
    rng_seed: int = 1
    lattice: int = 1
    tolerance: float = 0.0
    final_aggregate_number: int = 1


def read_run_config(path: str | PathLike[str]) -> RunConfig:
    """Read the run configuration from ``path``.

    The movement generator is seeded one above the given ``rng_seed`` so that
    its stream differs from the system's.
    """
    values = read_key_values(path)
    options: dict = {}
    names = {
        "bind": "bind",
        "aggregation_condition": "aggregation_condition",
        "aggregation_type": "aggregation_type",
        "movement": "movement",
        "system": "system",
    }
    for key, field_name in names.items():
        if key in values:
            options[field_name] = values[key]
    if "rng_seed" in values:
        options["rng_seed"] = _parse_int("rng_seed", values["rng_seed"]) + 1
    if "lattice" in values:
        options["lattice"] = _parse_int("lattice", values["lattice"])
    if "agg_dist_tolerance" in values:
        options["tolerance"] = _parse_float(
            "agg_dist_tolerance", values["agg_dist_tolerance"]
        )
    if "final_aggregate_number" in values:
        options["final_aggregate_number"] = _parse_int(
            "final_aggregate_number", values["final_aggregate_number"]
        )
    return RunConfig(**options)