"""Two-dimensional Gauss-Seidel nine-point stencil."""

from __future__ import annotations

from typing import NamedTuple, TextIO

import numpy as np

from polykernels.dump import ArrayDump, DataType
from polykernels.harness import DEFAULT_DATASET, Dataset

DATA_TYPE = DataType.DOUBLE


class Seidel2dSizes(NamedTuple):
    """Number of time steps and grid side."""

    tsteps: int
    n: int


_SIZES = {
    Dataset.MINI: Seidel2dSizes(20, 40),
    Dataset.SMALL: Seidel2dSizes(40, 120),
    Dataset.MEDIUM: Seidel2dSizes(100, 400),
    Dataset.LARGE: Seidel2dSizes(500, 2000),
    Dataset.EXTRALARGE: Seidel2dSizes(1000, 4000),
}


def sizes(dataset: Dataset | str = DEFAULT_DATASET) -> Seidel2dSizes:
    """Problem sizes of *dataset*."""
    return _SIZES[Dataset.parse(dataset)]


def init_array(n: int) -> np.ndarray:
    """Return the ``n`` by ``n`` initial grid."""
    i = np.arange(n, dtype=np.float64)[:, None]
    j = np.arange(n, dtype=np.float64)[None, :]
    return (i * (j + 2) + 2) / n


def _update_row(above: np.ndarray, row: np.ndarray, below: np.ndarray) -> None:
    # The row above is already updated; within the row the recurrence runs
    # left to right, so only the three terms from above can be summed ahead.
    upper = (above[:-2] + above[1:-1] + above[2:]).tolist()
    cur = row.tolist()
    low = below.tolist()
    for j, partial in enumerate(upper, start=1):
        cur[j] = (
            partial
            + cur[j - 1]
            + cur[j]
            + cur[j + 1]
            + low[j - 1]
            + low[j]
            + low[j + 1]
        ) / 9.0
    row[:] = cur


def kernel_seidel_2d(tsteps: int, n: int, a: np.ndarray) -> np.ndarray:
    """Run *tsteps* in-place sweeps over the ``n`` by ``n`` block of *a*; return it."""
    a = np.asarray(a, dtype=np.float64)
    block = a[:n, :n]
    if n < 3:
        return a
    for _ in range(tsteps):
        for i in range(1, n - 1):
            _update_row(block[i - 1], block[i], block[i + 1])
    return a


def print_array(a: np.ndarray, stream: TextIO | None = None) -> None:
    """Dump the grid."""
    with ArrayDump(stream, DATA_TYPE) as dump:
        dump.array("A", np.asarray(a))


def run(dataset: Dataset | str = DEFAULT_DATASET) -> np.ndarray:
    """Initialise the data of *dataset* and return the final grid."""
    tsteps, n = sizes(dataset)
    return kernel_seidel_2d(tsteps, n, init_array(n))