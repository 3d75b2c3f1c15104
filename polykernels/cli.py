"""Command-line driver that runs a benchmark kernel with optional timing and dump."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Callable, Sequence, TextIO

from polykernels import (
    adi,
    deriche,
    fdtd_2d,
    floyd_warshall,
    heat_3d,
    jacobi_1d,
    jacobi_2d,
    nussinov,
    seidel_2d,
)
from polykernels.harness import DEFAULT_DATASET, Dataset, Timer

Dumper = Callable[[TextIO], None]
Kernel = Callable[[], Dumper]


@dataclass(frozen=True)
class _Benchmark:
    """Sets up the data of a dataset and returns the kernel to time."""

    setup: Callable[[Dataset], Kernel]


def _deriche(dataset: Dataset) -> Kernel:
    w, h = deriche.sizes(dataset)
    alpha, img_in = deriche.init_array(w, h)

    def kernel() -> Dumper:
        out = deriche.kernel_deriche(w, h, alpha, img_in)
        return lambda stream: deriche.print_array(out, stream)

    return kernel


def _floyd_warshall(dataset: Dataset) -> Kernel:
    (n,) = floyd_warshall.sizes(dataset)
    path = floyd_warshall.init_array(n)

    def kernel() -> Dumper:
        out = floyd_warshall.kernel_floyd_warshall(n, path)
        return lambda stream: floyd_warshall.print_array(out, stream)

    return kernel


def _nussinov(dataset: Dataset) -> Kernel:
    (n,) = nussinov.sizes(dataset)
    seq, table = nussinov.init_array(n)

    def kernel() -> Dumper:
        out = nussinov.kernel_nussinov(n, seq, table)
        return lambda stream: nussinov.print_array(out, stream)

    return kernel


def _adi(dataset: Dataset) -> Kernel:
    tsteps, n = adi.sizes(dataset)
    u = adi.init_array(n)

    def kernel() -> Dumper:
        out = adi.kernel_adi(tsteps, n, u)
        return lambda stream: adi.print_array(out, stream)

    return kernel


def _fdtd_2d(dataset: Dataset) -> Kernel:
    tmax, nx, ny = fdtd_2d.sizes(dataset)
    ex, ey, hz, fict = fdtd_2d.init_array(tmax, nx, ny)

    def kernel() -> Dumper:
        oex, oey, ohz = fdtd_2d.kernel_fdtd_2d(tmax, nx, ny, ex, ey, hz, fict)
        return lambda stream: fdtd_2d.print_array(oex, oey, ohz, stream)

    return kernel


def _heat_3d(dataset: Dataset) -> Kernel:
    tsteps, n = heat_3d.sizes(dataset)
    a, b = heat_3d.init_array(n)

    def kernel() -> Dumper:
        out = heat_3d.kernel_heat_3d(tsteps, n, a, b)
        return lambda stream: heat_3d.print_array(out, stream)

    return kernel


def _jacobi_1d(dataset: Dataset) -> Kernel:
    tsteps, n = jacobi_1d.sizes(dataset)
    a, b = jacobi_1d.init_array(n)

    def kernel() -> Dumper:
        out = jacobi_1d.kernel_jacobi_1d(tsteps, n, a, b)
        return lambda stream: jacobi_1d.print_array(out, stream)

    return kernel


def _jacobi_2d(dataset: Dataset) -> Kernel:
    tsteps, n = jacobi_2d.sizes(dataset)
    a, b = jacobi_2d.init_array(n)

    def kernel() -> Dumper:
        out = jacobi_2d.kernel_jacobi_2d(tsteps, n, a, b)
        return lambda stream: jacobi_2d.print_array(out, stream)

    return kernel


def _seidel_2d(dataset: Dataset) -> Kernel:
    tsteps, n = seidel_2d.sizes(dataset)
    a = seidel_2d.init_array(n)

    def kernel() -> Dumper:
        out = seidel_2d.kernel_seidel_2d(tsteps, n, a)
        return lambda stream: seidel_2d.print_array(out, stream)

    return kernel


_BENCHMARKS: dict[str, _Benchmark] = {
    "adi": _Benchmark(_adi),
    "deriche": _Benchmark(_deriche),
    "fdtd-2d": _Benchmark(_fdtd_2d),
    "floyd-warshall": _Benchmark(_floyd_warshall),
    "heat-3d": _Benchmark(_heat_3d),
    "jacobi-1d": _Benchmark(_jacobi_1d),
    "jacobi-2d": _Benchmark(_jacobi_2d),
    "nussinov": _Benchmark(_nussinov),
    "seidel-2d": _Benchmark(_seidel_2d),
}


def available_benchmarks() -> list[str]:
    """Names of the benchmarks that can be run, sorted."""
    return sorted(_BENCHMARKS)


def run_benchmark(
    name: str,
    dataset: Dataset | str = DEFAULT_DATASET,
    timed: bool = False,
    dump: bool = False,
    stream: TextIO | None = None,
    dump_stream: TextIO | None = None,
) -> str | None:
    """Run benchmark *name* on *dataset*.

    When *timed*, the kernel run is timed and the report is written to
    *stream* (standard output by default) and returned. When *dump*, the
    live-out arrays are dumped to *dump_stream* (standard error by default).
    """
    key = name.replace("_", "-").lower()
    try:
        benchmark = _BENCHMARKS[key]
    except KeyError:
        raise KeyError(
            f"unknown benchmark {name!r}; expected one of "
            + ", ".join(available_benchmarks())
        ) from None
    kernel = benchmark.setup(Dataset.parse(dataset))

    report = None
    if timed:
        with Timer() as timer:
            dumper = kernel()
        report = timer.report()
        (sys.stdout if stream is None else stream).write(report)
    else:
        dumper = kernel()

    if dump:
        dumper(sys.stderr if dump_stream is None else dump_stream)
    return report


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polykernels", description="Run polyhedral benchmark kernels."
    )
    parser.add_argument(
        "benchmarks",
        nargs="*",
        metavar="BENCHMARK",
        help="benchmarks to run: " + ", ".join(available_benchmarks()),
    )
    parser.add_argument(
        "-d",
        "--dataset",
        default=DEFAULT_DATASET.name,
        help="dataset size: " + ", ".join(d.name for d in Dataset),
    )
    parser.add_argument("-t", "--time", action="store_true", help="report run time")
    parser.add_argument(
        "--dump", action="store_true", help="dump live-out arrays to standard error"
    )
    parser.add_argument(
        "-l", "--list", action="store_true", help="list the benchmarks and exit"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the command; returns the exit status."""
    parser = _parser()
    args = parser.parse_args(argv)

    if args.list:
        for name in available_benchmarks():
            print(name)
        return 0
    if not args.benchmarks:
        parser.error("no benchmark given")

    try:
        dataset = Dataset.parse(args.dataset)
    except ValueError as exc:
        parser.error(str(exc))

    unknown = [b for b in args.benchmarks if b.replace("_", "-").lower() not in _BENCHMARKS]
    if unknown:
        parser.error("unknown benchmark: " + ", ".join(unknown))

    for name in args.benchmarks:
        run_benchmark(name, dataset, timed=args.time, dump=args.dump)
    return 0


if __name__ == "__main__":
    sys.exit(main())