# dlmasim

`dlmasim` simulates cluster growth and connectivity in periodic boxes. It
covers three kinds of system:

- **dlma**: diffusion-limited mass aggregation. One aggregate at a time is
  chosen with weight `mass ** -alpha` and takes a random unit step. When it
  touches another aggregate and their combined mass is at least `seedMass`,
  the two bind into one cluster. On a lattice a step is refused if it would
  land on another cluster's particle. Off the lattice the particles are hard
  spheres of diameter 1, and a step is cut short at the first contact.
- **random_site_percolation**: on a lattice, `int(sites * phi)` sites are
  occupied at random. Occupied nearest-neighbour sites are recorded as
  attachments.
- **erdos_renyi**: `N` points are scattered uniformly in a continuous box.
  Every pair closer than `phi` is attached. The distance is the periodic
  Euclidean distance when `distance_metric_rgg=1`, and the periodic
  Manhattan distance otherwise.

The result is a configuration file. It lists every particle with its
position, seed status, diameter and the particles it is attached to.

The package is pure Python and has no runtime dependencies.

## Parameter file

A run is described by one plain-text file of `key=value` lines. Keys that are
not listed below are ignored, and lines without a value are skipped. If a key
appears twice, the last value wins. The system and the run driver both read
the same file.

System keys:

| key | meaning |
| --- | --- |
| `system` | `dlma`, `random_site_percolation` or `erdos_renyi` |
| `D` | number of dimensions (required) |
| `lattice` | `1` for on-lattice, `0` for off-lattice (required) |
| `xK_bc` | boundary condition along axis `K`; only `periodic` exists (required for every axis) |
| `xK_L` | box length along axis `K` (whole numbers on a lattice) |
| `N` | number of particles |
| `phi` | packing fraction, occupation fraction, or linking distance for `erdos_renyi` |
| `N_s` / `seed_pct` | number or percentage of seed particles |
| `seedMass` | mass of a seed particle, and the aggregation mass threshold |
| `alpha` | mobility exponent (default `0.5`) |
| `rng_seed` | random seed (default `0`) |
| `agg_dist_tolerance` | relative contact tolerance off the lattice (default `0`) |
| `distance_metric_rgg` | `1` for the Euclidean distance in `erdos_renyi`, otherwise Manhattan |

Run keys, each with a default:

| key | default |
| --- | --- |
| `system` | `dlma` |
| `lattice` | `1` |
| `bind` | `normal` |
| `aggregation_condition` | `mass` |
| `aggregation_type` | `normal` |
| `movement` | `brownian` |
| `final_aggregate_number` | `1` |

The step generator is seeded with `rng_seed + 1`, so its random stream is
different from the system's.

Requirements for each system type:

- **dlma**: any two of `N`, `phi` and the box lengths are enough, and the
  third is derived from them. On a lattice, derived side lengths are raised by
  one whenever the site count would be odd. If all three are given, they must
  agree. `N_s` or `seed_pct` is also required.
- **random_site_percolation**: needs `lattice=1`, every box length and `phi`.
  `seedMass` is set to 1.
- **erdos_renyi**: needs `lattice=0`, every box length, `N` and `phi`.

A parameter file that is missing something or contradicts itself raises
`dlmasim.params.ConfigurationError`. The same error is raised for an unknown
component name.

Example, `params.txt`:

```
system=dlma
D=2
lattice=1
x0_bc=periodic
x1_bc=periodic
x0_L=64
x1_L=64
phi=0.05
seed_pct=10
seedMass=2
alpha=0.5
rng_seed=7
```

## Running a simulation

```python
from dlmasim.iterator import DlmaIterator

sim = DlmaIterator("params.txt")   # builds the system; binds contacts already present for dlma
sim.run_system()                    # step until final_aggregate_number clusters remain
sim.save_config_file("out.csv")     # with no argument, the configuration is printed instead
```

For the other system types, call `run_system_for_percolation()` or
`run_system_for_erdos_renyi()` instead of `run_system()`. The attachments of
these systems are complete once they are built.

`create_movie_files("frame_")` steps the aggregation until a single cluster
is left. Every 25 steps it writes a numbered snapshot (`frame_0.csv`,
`frame_1.csv`, …). It writes one more frame at the end and returns the list
of file names.

The parts can also be used on their own:

- `dlmasim.factories` builds systems, movements, conditions, aggregation
  checks, binders and writers by name.
- `dlmasim.onlattice_system.OnLatticeSystem`,
  `dlmasim.offlattice_system.OffLatticeSystem` and
  `dlmasim.erdos_renyi.ErdosRenyiSystem` take a
  `dlmasim.settings.SystemParams`. You can get one from
  `dlmasim.settings.read_system_params`.
- `dlmasim.collisions` computes the fractional contact times of moving hard
  spheres.

## Output format

A configuration file starts with `key=value` header lines:

- `headers`, `lattice`, `N`, `D`, `maxAttachments`, `folded`, `phi`, `alpha`
- the box bounds `xK_lo` and `xK_hi`
- the periodicity `xK_periodic`
- `seedMass`
- `columns`

A CSV table follows. Its columns are `id`, `x0 … x{D-1}`,
`assignedSeedStatus`, `currentSeedStatus`, `diameter`, `attachments` and
`att_1 … att_M`. Empty attachment slots hold `NaN`. On-lattice coordinates
are written at cell centres, that is, the index plus `0.5`.

`dlmasim.save_config.ConfigWriter` builds these lines. `save()` writes them
to a file, and `show()` prints them with fixed-point header numbers.

## What it does not do

There is no command-line program. Runs are started from Python as shown
above. Results exist only as configuration files or printed output; nothing
else is stored. No plotting or visualisation is included.

Off-lattice neighbour search works only in two and three dimensions.