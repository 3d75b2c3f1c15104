# polykernels

Classic polyhedral benchmark kernels written with NumPy, with a small
harness for timing them and dumping their results as text.

| Name             | Module                        | Kernel                                  |
|------------------|-------------------------------|-----------------------------------------|
| `adi`            | `polykernels.adi`             | alternating-direction implicit solver   |
| `deriche`        | `polykernels.deriche`         | Deriche recursive edge-detection filter |
| `fdtd-2d`        | `polykernels.fdtd_2d`         | 2-D finite-difference time-domain       |
| `floyd-warshall` | `polykernels.floyd_warshall`  | all-pairs shortest paths                |
| `heat-3d`        | `polykernels.heat_3d`         | 3-D heat-equation stencil               |
| `jacobi-1d`      | `polykernels.jacobi_1d`       | 1-D Jacobi stencil                      |
| `jacobi-2d`      | `polykernels.jacobi_2d`       | 2-D Jacobi stencil                      |
| `nussinov`       | `polykernels.nussinov`        | RNA secondary-structure folding         |
| `seidel-2d`      | `polykernels.seidel_2d`       | 2-D Gauss-Seidel nine-point stencil     |

Each kernel has problem sizes for five datasets: `MINI`, `SMALL`, `MEDIUM`,
`LARGE` and `EXTRALARGE`. `LARGE` is the default.

## Installation

```
pip install .
```

NumPy is the only dependency. Install the `test` extra to run the tests
with pytest.

## Command line

```
polykernels --help
polykernels --list
polykernels -d mini -t jacobi-2d seidel-2d
polykernels -d small --dump nussinov
```

- `BENCHMARK ...`: one or more benchmark names. Underscores are accepted in
  place of hyphens.
- `-d`, `--dataset`: dataset size, case-insensitive, e.g. `mini` or
  `MINI_DATASET`. The default is `LARGE`.
- `-t`, `--time`: time the kernel and print the elapsed seconds to standard
  output with six decimals.
- `--dump`: write the live-out arrays to standard error.
- `-l`, `--list`: print the benchmark names and exit.

## Dump format

A dump begins with `==BEGIN DUMP_ARRAYS==` and ends with
`==END   DUMP_ARRAYS==`. Each array is written as `begin dump: NAME`,
its values, and `end   dump: NAME`. A line break comes before every
twentieth value. Integers are written as `%d`, floating-point values with
two decimals, each followed by a space. `nussinov` dumps only the upper
triangle of its table. `fdtd-2d` dumps `ex`, `ey` and `hz`, and only `ex`
sits between the begin and end markers.

## From Python

```python
from polykernels import jacobi_2d
from polykernels.harness import Dataset

tsteps, n = jacobi_2d.sizes(Dataset.MINI)
a, b = jacobi_2d.init_array(n)
jacobi_2d.kernel_jacobi_2d(tsteps, n, a, b)   # updates a and b in place
jacobi_2d.print_array(a)                      # dump to standard error

result = jacobi_2d.run("mini")                # the same in one call
```

Each kernel module provides `sizes(dataset)`, `init_array(...)`, its kernel
function (`kernel_<name>`), `print_array(..., stream)` and `run(dataset)`.
`sizes` returns a named tuple of the dataset's problem sizes. The kernels
work on NumPy arrays in place and return them; `fdtd_2d.run` returns the
tuple `(ex, ey, hz)` and `deriche.kernel_deriche` returns a new image.

`polykernels.cli` offers `available_benchmarks()` and
`run_benchmark(name, dataset, timed, dump, stream, dump_stream)`, which
returns the timing report when `timed` is true.

`polykernels.harness` holds:

- `Dataset`, with `Dataset.parse(name)`;
- `Timer`, usable as a context manager, with `start()`, `stop()`,
  `elapsed()` and `report(total_flops)`, which gives seconds, or GFLOP/s
  when a non-zero flop count is given;
- `flush_cache(cache_size_kb)`, which sweeps a zeroed buffer of about
  32 MiB by default;
- `prepare_instruments(flush)` and `alloc_array(shape, dtype, padding)`.

`polykernels.dump` holds `DataType` and `ArrayDump`, the context manager
that writes dumps.

## What it does not do

The package measures wall-clock time only. It does not read hardware
performance counters, has no cycle-counter timer and does not change the
process scheduler. The command line reports seconds; GFLOP/s figures are
available only through `Timer.report(total_flops)`.