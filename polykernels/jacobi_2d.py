"""Two-dimensional Jacobi stencil."""

from __future__ import annotations

from typing import NamedTuple, TextIO

import numpy as np

from polykernels.dump import ArrayDump, DataType
from polykernels.harness import DEFAULT_DATASET, Dataset

DATA_TYPE = DataType.DOUBLE
WEIGHT = 0.2


class Jacobi2dSizes(NamedTuple):
    """Number of time steps and grid side."""

    tsteps: int
    n: int


_SIZES = {
    Dataset.MINI: Jacobi2dSizes(20, 30),
    Dataset.SMALL: Jacobi2dSizes(40, 90),
    Dataset.MEDIUM: Jacobi2dSizes(100, 250),
    Dataset.LARGE: Jacobi2dSizes(500, 1300),
    Dataset.EXTRALARGE: Jacobi2dSizes(1000, 2800),
}


def sizes(dataset: Dataset | str = DEFAULT_DATASET) -> Jacobi2dSizes:
    """Problem sizes of *dataset*."""
    return _SIZES[Dataset.parse(dataset)]


def init_array(n: int) -> tuple[np.ndarray, np.ndarray]:
    """Return the two ``n`` by ``n`` initial grids ``a`` and ``b``."""
    i = np.arange(n, dtype=np.float64)[:, None]
    j = np.arange(n, dtype=np.float64)[None, :]
    a = (i * (j + 2) + 2) / n
    b = (i * (j + 3) + 3) / n
    return a, b


def _sweep(src: np.ndarray, dst: np.ndarray) -> None:
    dst[1:-1, 1:-1] = WEIGHT * (
        src[1:-1, 1:-1]
        + src[1:-1, :-2]
        + src[1:-1, 2:]
        + src[2:, 1:-1]
        + src[:-2, 1:-1]
    )


def kernel_jacobi_2d(tsteps: int, n: int, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Run *tsteps* double sweeps over the ``n`` by ``n`` blocks in place; return *a*."""
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    ba = a[:n, :n]
    bb = b[:n, :n]
    if n < 3:
        return a
    for _ in range(tsteps):
        _sweep(ba, bb)
        _sweep(bb, ba)
    return a


def print_array(a: np.ndarray, stream: TextIO | None = None) -> None:
    """Dump the grid."""
    with ArrayDump(stream, DATA_TYPE) as dump:
        dump.array("A", np.asarray(a))


def run(dataset: Dataset | str = DEFAULT_DATASET) -> np.ndarray:
    """Initialise the data of *dataset* and return the final grid."""
    tsteps, n = sizes(dataset)
    a, b = init_array(n)
    return kernel_jacobi_2d(tsteps, n, a, b)